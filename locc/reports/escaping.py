"""String escaping and quoting rules for the report formats."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional, TextIO

_YAML_INDICATORS = frozenset("#,[]{}&*!|>%@?:-/")

# Blank input is returned from escape_html untouched.
_BLANK = " \t\n\x0b\x0c\r\x1c\x1d\x1e\x1f"

_YAML_ESCAPES = {
    0x00: "\\0",
    0x07: "\\a",
    0x08: "\\b",
    0x09: "\\t",
    0x0A: "\\n",
    0x0B: "\\v",
    0x0D: "\\r",
    0x22: '\\"',
    0x2F: "\\/",
    0x5C: "\\\\",
    0x85: "\\N",
    0xA0: "\\_",
    0x2028: "\\L",
    0x2029: "\\P",
}


class Quoting(Enum):
    """Quoting style needed to write a YAML scalar."""

    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"


def code_points(text: str) -> Iterator[int]:
    """Yield the code points of ``text``, joining UTF-16 surrogate pairs."""
    index = 0
    length = len(text)
    while index < length:
        point = ord(text[index])
        if 0xD800 <= point <= 0xDBFF and index + 1 < length:
            low = ord(text[index + 1])
            if 0xDC00 <= low <= 0xDFFF:
                yield 0x10000 + ((point - 0xD800) << 10) + (low - 0xDC00)
                index += 2
                continue
        yield point
        index += 1


def escape_csv(value: Optional[str]) -> str:
    """Quote a CSV field containing a comma or line break and double embedded quotes.

    ``None`` becomes an empty field.
    """
    if value is None:
        return ""
    if '"' in value:
        return '"' + value.replace('"', '""') + '"'
    if any(char in value for char in ",\r\n"):
        return f'"{value}"'
    return value


def escape_html(value: Optional[str]) -> str:
    """Escape text for HTML element content.

    ``&``, ``<`` and ``>`` become named entities, newline, tab and carriage
    return pass through, printable ASCII is kept and other characters allowed
    in HTML become hexadecimal numeric references. Remaining control
    characters, surrogates and U+FFFE/U+FFFF are dropped.
    """
    if value is None:
        return ""
    if not value.strip(_BLANK):
        return value

    parts = []
    for point in code_points(value):
        if point == 0x26:
            parts.append("&amp;")
        elif point == 0x3C:
            parts.append("&lt;")
        elif point == 0x3E:
            parts.append("&gt;")
        elif point in (0x09, 0x0A, 0x0D) or 0x20 <= point < 0x7F:
            parts.append(chr(point))
        elif _is_referenceable(point):
            parts.append(f"&#x{point:X};")
    return "".join(parts)


def escape_html_attribute(value: Optional[str]) -> str:
    """Escape text for a double-quoted HTML attribute value."""
    return escape_html(value).replace('"', "&quot;")


def escape_xml(value: str) -> str:
    """Drop characters that cannot appear in an XML 1.0 document.

    Markup escaping itself is left to the XML serializer.
    """
    return "".join(
        chr(point)
        for point in code_points(value)
        if point in (0x09, 0x0A, 0x0D) or 0x20 <= point < 0x7F or _is_referenceable(point)
    )


def _is_referenceable(point: int) -> bool:
    return 0x7F <= point <= 0xD7FF or 0xE000 <= point <= 0xFFFD or 0x10000 <= point <= 0x10FFFF


def requires_quotes(value: str) -> Quoting:
    """Decide how a YAML scalar must be quoted.

    Anything needing an escape sequence is double-quoted. Strings that only
    contain YAML indicator characters, or that would otherwise be read as
    document markers or lose their boundary spaces, are single-quoted.
    """
    if not value:
        return Quoting.SINGLE

    needs_single = (
        value.startswith(" ")
        or value.endswith(" ")
        or value.startswith("---")
        or value.endswith("...")
    )

    for point in code_points(value):
        char = chr(point)
        if char in _YAML_INDICATORS:
            needs_single = True
        elif point < 0x20 or point > 0x7E or char in "\"'\\":
            return Quoting.DOUBLE

    return Quoting.SINGLE if needs_single else Quoting.NONE


def quote_yaml(value: str) -> str:
    """Return ``value`` as a YAML scalar using the quoting it requires."""
    quoting = requires_quotes(value)
    if quoting is Quoting.NONE:
        return value
    if quoting is Quoting.SINGLE:
        return f"'{value}'"

    parts = ['"']
    for point in code_points(value):
        escaped = _YAML_ESCAPES.get(point)
        if escaped is not None:
            parts.append(escaped)
        elif point < 0x20:
            parts.append(f"\\x{point:02X}")
        elif point <= 0x7E:
            parts.append(chr(point))
        elif point <= 0xFF:
            parts.append(f"\\x{point:02X}")
        elif point <= 0xFFFF:
            parts.append(f"\\u{point:04X}")
        else:
            parts.append(f"\\U{point:08X}")
    parts.append('"')
    return "".join(parts)


def write_escaped(stream: TextIO, value: str) -> None:
    """Write ``value`` to ``stream`` with the YAML quoting it requires."""
    stream.write(quote_yaml(value))


__all__ = [
    "Quoting",
    "code_points",
    "escape_csv",
    "escape_html",
    "escape_html_attribute",
    "escape_xml",
    "quote_yaml",
    "requires_quotes",
    "write_escaped",
]
