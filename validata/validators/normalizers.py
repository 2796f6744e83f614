"""
Value normalizers.
normalize() takes a raw value of any shape and returns a tagged NormalizedValue.
It never raises: malformed input produces a degenerate value (NaN, "object")
that the rules downstream are expected to reject.
"""
import io
import math
import numbers
import os
from collections.abc import Sequence
from decimal import Decimal
from typing import Any, Callable, Optional

from validata.models import NormalizedValue, SIZED_TYPES, TypeTag
from validata.settings import get_settings

FileCheck = Callable[[Any], bool]

_BYTES_TYPES = (bytes, bytearray, memoryview)


def is_file_like(value: Any) -> bool:
    """Default capability check: raw bytes or an open binary/text stream."""
    return isinstance(value, _BYTES_TYPES) or isinstance(value, io.IOBase)


def no_files(value: Any) -> bool:
    return False


def default_file_check() -> FileCheck:
    return is_file_like if get_settings().file_support else no_files


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        # Decimal("sNaN") and friends
        return math.nan


def normalize_value(value: Any, is_file: Optional[FileCheck] = None) -> NormalizedValue:
    """
    Dispatch on the closed set of TypeTags.
    Order matters: None must never fall through to "object", and bool must be
    checked before numbers since bool is an int subclass.
    """
    if is_file is None:
        is_file = default_file_check()

    if value is None:
        return NormalizedValue(TypeTag.NULLISH, None)
    if isinstance(value, bool):
        return NormalizedValue(TypeTag.BOOLEAN, value)
    if isinstance(value, str):
        return NormalizedValue(TypeTag.STRING, value.strip())
    if isinstance(value, (numbers.Real, Decimal)):
        return NormalizedValue(TypeTag.NUMBER, _to_float(value))
    if is_file(value):
        return NormalizedValue(TypeTag.FILE, value)
    if isinstance(value, Sequence) and not isinstance(value, _BYTES_TYPES):
        return NormalizedValue(TypeTag.ARRAY, value)
    return NormalizedValue(TypeTag.OBJECT, value)


# ─── Size semantics ───────────────────────────────────────────────────────────

def _file_size(value: Any) -> int:
    size = getattr(value, "size", None)
    if isinstance(size, int):
        return size
    try:
        if isinstance(value, memoryview):
            return value.nbytes
        if isinstance(value, (bytes, bytearray)):
            return len(value)
        if isinstance(value, io.BytesIO):
            return value.getbuffer().nbytes
        return os.fstat(value.fileno()).st_size
    except (AttributeError, OSError, ValueError):
        # closed or released buffers count as empty
        return 0


def _size(normalized: NormalizedValue) -> float:
    tag = normalized.type
    if tag == TypeTag.STRING:
        return len(normalized.value)
    if tag == TypeTag.NUMBER:
        return normalized.value
    if tag == TypeTag.ARRAY:
        return len(normalized.value)
    if tag == TypeTag.FILE:
        return _file_size(normalized.value)
    return 0


def size_of(normalized: NormalizedValue, bounds: Optional[Sequence] = None):
    """
    Without bounds, return the size of a normalized value: character count for
    strings, the value itself for numbers, element count for arrays, byte size
    for files, 0 for everything else.

    With bounds (lo, hi), return whether lo <= size <= hi. Either bound may be
    None for an open end. NaN sizes never satisfy a bound.
    """
    size = _size(normalized)
    if bounds is None:
        return size
    lo, hi = bounds
    if lo is not None and not size >= lo:
        return False
    if hi is not None and not size <= hi:
        return False
    return True


def is_empty(normalized: NormalizedValue) -> bool:
    """Zero-size values auto-pass every rule except `required`."""
    return _size(normalized) == 0


def is_present(normalized: NormalizedValue) -> bool:
    if normalized.type in SIZED_TYPES:
        return _size(normalized) > 0
    return not normalized.is_nullish
