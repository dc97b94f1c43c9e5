"""Window preview capture with grim and Pillow."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, ImageOps

from executor.command_executor import run_command
from os_controller.base_controller import CaptureError, RegionCapture


class GrimCapture(RegionCapture):
    """Grabs a region with grim and stores a centre-cropped thumbnail."""

    def __init__(
        self,
        preview_dir: Path,
        grim: str = "grim",
        thumbnail_size: tuple[int, int] = (200, 150),
    ) -> None:
        self.preview_dir = preview_dir
        self.grim = grim
        self.thumbnail_size = thumbnail_size
        self.logger = logging.getLogger("veil.capture")

    def full_path(self, key: str) -> Path:
        return self.preview_dir / f"{key}.png"

    def thumb_path(self, key: str) -> Path:
        return self.preview_dir / f"{key}.thumb.png"

    def capture_region(self, geometry: str, key: str) -> Path:
        self.preview_dir.mkdir(parents=True, exist_ok=True)
        full_path = self.full_path(key)
        thumb_path = self.thumb_path(key)

        code, _, stderr = run_command([self.grim, "-g", geometry, str(full_path)])
        try:
            if code != 0:
                raise CaptureError(f"grim failed for {geometry}: {stderr.strip()}")
            try:
                with Image.open(full_path) as image:
                    # Scale to cover the box, then crop around the centre.
                    thumb = ImageOps.fit(
                        image,
                        self.thumbnail_size,
                        method=Image.Resampling.LANCZOS,
                        centering=(0.5, 0.5),
                    )
                    thumb.save(thumb_path)
            except OSError as exc:
                raise CaptureError(f"thumbnail failed for {key}: {exc}") from exc
        finally:
            full_path.unlink(missing_ok=True)

        self.logger.debug("preview for %s written to %s", key, thumb_path)
        return thumb_path
