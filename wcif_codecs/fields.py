"""Field-level decoding for records that embed codec values.

A codec failure while decoding a record surfaces as a
:class:`FieldDecodeError` naming the field, chained to the original error.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, TypeVar

from .errors import (
    FieldDecodeError,
    InvalidFormatError,
    NotANumberError,
    WCIFDecodeError,
)

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = [
    "decode_field",
    "decode_string",
    "decode_string_field",
    "decode_optional_field",
    "decode_integer",
    "require",
]


def decode_field(field: str, raw: Any, decoder: Callable[[Any], T]) -> T:
    try:
        return decoder(raw)
    except WCIFDecodeError as exc:
        LOGGER.debug("Failed to decode field %s from %r: %s", field, raw, exc)
        raise FieldDecodeError(field, exc) from exc


def decode_string(raw: Any) -> str:
    if not isinstance(raw, str):
        raise InvalidFormatError(f"Expected a string, got {type(raw).__name__}")
    return raw


def decode_string_field(field: str, raw: Any, decoder: Callable[[str], T]) -> T:
    """Like :func:`decode_field` for codecs whose wire value is a JSON string."""

    def _decode(value: Any) -> T:
        return decoder(decode_string(value))

    return decode_field(field, raw, _decode)


def decode_optional_field(
    data: Mapping[str, Any], field: str, decoder: Callable[[Any], T]
) -> Optional[T]:
    raw = data.get(field)
    if raw is None:
        return None
    return decode_field(field, raw, decoder)


def require(data: Mapping[str, Any], field: str) -> Any:
    if not isinstance(data, Mapping):
        raise FieldDecodeError(field, InvalidFormatError("expected an object"))
    try:
        return data[field]
    except KeyError:
        raise FieldDecodeError(field, InvalidFormatError("missing required field")) from None


def decode_integer(raw: Any) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise NotANumberError(f"Not a number: {raw!r}")
    return raw
