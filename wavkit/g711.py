"""G.711 A-law and mu-law decoding to 16-bit linear PCM."""

from __future__ import annotations


def _alaw_to_linear(code: int) -> int:
    code ^= 0x55
    magnitude = (code & 0x0F) << 4
    segment = (code & 0x70) >> 4
    if segment == 0:
        magnitude += 8
    else:
        magnitude = (magnitude + 0x108) << (segment - 1)
    return magnitude if code & 0x80 else -magnitude


def _ulaw_to_linear(code: int) -> int:
    code = ~code & 0xFF
    magnitude = (((code & 0x0F) << 3) + 0x84) << ((code & 0x70) >> 4)
    return 0x84 - magnitude if code & 0x80 else magnitude - 0x84


_ALAW_TABLE = tuple(_alaw_to_linear(code) for code in range(256))
_ULAW_TABLE = tuple(_ulaw_to_linear(code) for code in range(256))


def _check_code(value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"G.711 code must be a byte, got {value}")


def decode_alaw(value: int) -> int:
    """Decode one A-law byte to a 16-bit linear sample."""
    _check_code(value)
    return _ALAW_TABLE[value]


def decode_ulaw(value: int) -> int:
    """Decode one mu-law byte to a 16-bit linear sample."""
    _check_code(value)
    return _ULAW_TABLE[value]