from typing import Any, Optional

from jwk_module.utils.errors import ConversionError

_ZERO_CHECKED = (str, bytes, bytearray, memoryview, int, float, list, tuple, dict)


def _is_zero(value: Any) -> bool:
    if isinstance(value, memoryview):
        return value.nbytes == 0
    return isinstance(value, _ZERO_CHECKED) and not value


def _convert(value: Any) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"invalid type {type(value).__name__}, expected str, bytes, bytearray or memoryview")


def to_bytes(value: Any) -> Optional[bytes]:
    """Coerce a loosely-typed value into bytes.

    Returns None when nothing was provided: ``None`` itself or the zero value
    of its type (``""``, ``b""``, ``0``, ``False``, empty containers). Anything
    that is present but cannot be turned into bytes raises ConversionError.
    """
    if value is None or _is_zero(value):
        return None
    try:
        return _convert(value)
    except TypeError as exc:
        raise ConversionError(str(exc)) from exc
