"""Hex color decoding for slot tints."""

from typing import Optional, Tuple

from ..config.settings import DEFAULT_COLOR_HEX
from .errors import ColorDecodeError

Color = Tuple[int, int, int, int]


def decode_color(value: Optional[str]) -> Color:
    """
    Decode an ``RRGGBBAA`` hex string into RGBA bytes.

    Args:
        value: Hex string, or None for the default opaque white

    Returns:
        Tuple of four ints in [0, 255]

    Raises:
        ColorDecodeError: If the string is not exactly four hex-encoded bytes
    """
    if value is None:
        value = DEFAULT_COLOR_HEX
    # bytes.fromhex skips whitespace, so the length is checked first
    if not isinstance(value, str) or len(value) != 8:
        raise ColorDecodeError(value)
    try:
        raw = bytes.fromhex(value)
    except ValueError as exc:
        raise ColorDecodeError(value) from exc
    if len(raw) != 4:
        raise ColorDecodeError(value)
    return (raw[0], raw[1], raw[2], raw[3])
