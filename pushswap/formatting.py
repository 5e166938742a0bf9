"""Text formatting for the operation log, following a small printf dialect."""

from __future__ import annotations

from typing import Any

_UINT_MODULUS = 1 << 32
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"


def format_number(n: int) -> str:
    """Render a signed integer in decimal."""
    return str(int(n))


def format_unsigned(n: int) -> str:
    """Render an integer as a 32-bit unsigned decimal value."""
    return str(int(n) % _UINT_MODULUS)


def _to_hex(value: int, digits: str) -> str:
    if value == 0:
        return "0"
    out = []
    while value > 0:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def format_hex(n: int, upper: bool = False) -> str:
    """Render an integer as 32-bit unsigned hexadecimal, without prefix."""
    return _to_hex(int(n) % _UINT_MODULUS, _HEX_UPPER if upper else _HEX_LOWER)


def format_pointer(address: int | None) -> str:
    """Render an address as ``0x``-prefixed hex, or ``(nil)`` for no address."""
    if not address:
        return "(nil)"
    return "0x" + _to_hex(int(address), _HEX_LOWER)


def format_string(value: str | None) -> str:
    """Render a string, with ``(null)`` standing in for a missing one."""
    return "(null)" if value is None else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) % 256)


_CONVERSIONS = {
    "c": _format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_number,
    "i": format_number,
    "u": format_unsigned,
    "x": lambda v: format_hex(v, False),
    "X": lambda v: format_hex(v, True),
}


def format_template(template: str, *args: Any) -> str:
    """Expand ``%c %s %p %d %i %u %x %X %%`` in *template* with *args*.

    Unknown conversions produce nothing and consume no argument; a lone
    trailing ``%`` is kept as is.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
            break
        if spec == "%":
            pieces.append("%")
            continue
        converter = _CONVERSIONS.get(spec)
        if converter is None:
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(
                f"not enough arguments for format template {template!r}"
            ) from None
        pieces.append(converter(value))
    return "".join(pieces)