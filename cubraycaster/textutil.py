"""Small text helpers used by the scene-file parser."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_MAX_COMPONENT = 255


def is_space(ch: str) -> bool:
    """Return True for a single ASCII whitespace character."""
    return len(ch) == 1 and ch in _WHITESPACE


def is_blank(line: str) -> bool:
    """Return True if the line holds nothing but whitespace."""
    return all(is_space(ch) for ch in line)


def parse_color_component(text: str) -> int:
    """Read a leading unsigned integer from ``text`` as a colour component.

    Leading whitespace and a single ``+`` are skipped; reading stops at the
    first non-digit. A minus sign or a value above 255 raises ``ValueError``.
    """
    rest = text.lstrip(_WHITESPACE)
    if rest[:1] == "-":
        raise ValueError(f"negative colour component: {text!r}")
    if rest[:1] == "+":
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        value = value * 10 + _DIGITS.index(ch)
        if value > _MAX_COMPONENT:
            raise ValueError(f"colour component out of range: {text!r}")
    return value


def split_fields(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    return [field for field in text.split(sep) if field]


def trim(text: str, chars: str) -> str:
    """Strip every character of ``chars`` from both ends of ``text``."""
    return text.strip(chars)