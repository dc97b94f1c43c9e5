"""Minimized-window record schema and its JSON text codec.

Records are stored as a JSON array of objects using the field names
``address``, ``display_title``, ``class``, ``original_title`` and
``preview``. Decoding is best-effort: missing fields default to an empty
string, elements that are not objects are skipped, and a damaged document
yields every complete object that precedes the damage.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger("veil.codec")

_decoder = json.JSONDecoder()


class MinimizedWindowRecord(BaseModel):
    """One currently hidden window."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key: str = Field(default="", alias="address")
    display_label: str = Field(default="", alias="display_title")
    window_class: str = Field(default="", alias="class")
    original_title: str = Field(default="", alias="original_title")
    preview_path: str | None = Field(default=None, alias="preview")

    @field_validator("key", "display_label", "window_class", "original_title", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, (dict, list)):
            return json.dumps(value, ensure_ascii=False)
        return str(value)

    @field_validator("preview_path", mode="before")
    @classmethod
    def _coerce_preview(cls, value: Any) -> str | None:
        if value is None or value == "":
            return None
        return str(value)


def encode(records: Iterable[MinimizedWindowRecord]) -> str:
    """Serialize records to a JSON array, preserving order."""
    payload = [record.model_dump(by_alias=True) for record in records]
    return json.dumps(payload, ensure_ascii=False)


def decode(text: str) -> list[MinimizedWindowRecord]:
    """Parse stored text into records without ever raising."""
    if not text or not text.strip():
        return []
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.warning("store is not valid JSON (%s); salvaging readable entries", exc)
        payload = _salvage(text)
    if not isinstance(payload, list):
        logger.warning("store does not hold a JSON array; treating it as empty")
        return []

    records: list[MinimizedWindowRecord] = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            logger.warning("skipping store entry %d: not an object", index)
            continue
        try:
            records.append(MinimizedWindowRecord.model_validate(item))
        except ValidationError as exc:
            logger.warning("skipping store entry %d: %s", index, exc)
    return records


def _salvage(text: str) -> list[Any]:
    """Collect the complete JSON values of a truncated or damaged array."""
    body = text.strip()
    if not body.startswith("["):
        return []
    items: list[Any] = []
    pos = 1
    while pos < len(body):
        while pos < len(body) and body[pos] in " \t\r\n,":
            pos += 1
        if pos >= len(body) or body[pos] == "]":
            break
        try:
            item, pos = _decoder.raw_decode(body, pos)
        except json.JSONDecodeError:
            break
        items.append(item)
    return items
