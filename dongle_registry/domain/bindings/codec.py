"""Blob encoding for free-form binding properties."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import TypeAdapter, ValidationError

from .exceptions import SerializationError

_PROPERTIES = TypeAdapter(dict[str, str])


def encode_properties(properties: Mapping[str, str] | None) -> bytes | None:
    """Serialize a properties mapping, keeping ``None`` as "no blob"."""
    if properties is None:
        return None
    try:
        validated = _PROPERTIES.validate_python(dict(properties), strict=True)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"cannot encode properties: {exc}") from exc
    return _PROPERTIES.dump_json(validated)


def decode_properties(blob: bytes | None) -> dict[str, str] | None:
    if blob is None:
        return None
    try:
        return _PROPERTIES.validate_json(blob, strict=True)
    except ValidationError as exc:
        raise SerializationError(f"cannot decode properties: {exc}") from exc
