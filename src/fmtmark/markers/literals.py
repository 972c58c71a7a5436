# fmtmark:header:start
#
#   project      : FmtMark
#   file         : literals.py
#   file_relpath : src/fmtmark/markers/literals.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Decoders for the Rust literals carried by markers.

Only the two literal shapes that markers use are supported:

- string literals, quoted (``"..."`` with Rust escapes) or raw (``r#"..."#``);
- integer literals (decimal, ``0x``/``0o``/``0b``, ``_`` separators and an
  optional integer type suffix), restricted to the unsigned 32-bit range.

Both decoders accept surrounding whitespace, since formatters may put the
payload of a wrapped macro call on its own line.
"""

from __future__ import annotations

import re
from typing import Final

from fmtmark.core.errors import LiteralError

U32_MAX: Final[int] = 0xFFFF_FFFF

_SIMPLE_ESCAPES: Final[dict[str, str]] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    "0": "\0",
    "'": "'",
    '"': '"',
}

# Characters in a quoted body that need attention
_SPECIAL_RE: Final[re.Pattern[str]] = re.compile(r'[\\"\r]')
_HEX_BYTE_RE: Final[re.Pattern[str]] = re.compile(r"[0-9A-Fa-f]{2}")
_UNICODE_RE: Final[re.Pattern[str]] = re.compile(r"\{([0-9A-Fa-f][0-9A-Fa-f_]*)\}")
_RAW_OPEN_RE: Final[re.Pattern[str]] = re.compile(r'r(#*)"')

_INT_RE: Final[re.Pattern[str]] = re.compile(
    r"(?P<prefix>0[xob])?(?P<digits>[0-9A-Fa-f_]+?)(?P<suffix>[ui](?:8|16|32|64|128|size))?"
)
_BASES: Final[dict[str, int]] = {"0x": 16, "0o": 8, "0b": 2}


def parse_string_literal(text: str) -> str:
    """Decode a Rust string literal.

    Args:
        text (str): The literal as written in source, e.g. ``"a\\nb"`` or
            ``r#"x"#``. Leading and trailing whitespace is ignored.

    Returns:
        str: The decoded value.

    Raises:
        LiteralError: If ``text`` is not a single, well-formed string literal.
    """
    literal = text.strip()
    if literal.startswith("r"):
        return _parse_raw_string(literal)
    if len(literal) < 2 or literal[0] != '"' or literal[-1] != '"':
        raise LiteralError(f"expected a string literal, found {literal!r}")
    return _unescape(literal[1:-1])


def _parse_raw_string(literal: str) -> str:
    opening = _RAW_OPEN_RE.match(literal)
    if opening is None:
        raise LiteralError(f"malformed raw string literal {literal!r}")
    closing = '"' + opening.group(1)
    body_start = opening.end()
    if len(literal) < body_start + len(closing) or not literal.endswith(closing):
        raise LiteralError(f"unterminated raw string literal {literal!r}")
    body = literal[body_start : len(literal) - len(closing)]
    if closing in body:
        raise LiteralError(f"unexpected text after raw string literal {literal!r}")
    if "\r" in body.replace("\r\n", ""):
        raise LiteralError("bare CR not allowed in raw string literal")
    return body.replace("\r\n", "\n")


def _unescape(body: str) -> str:
    parts: list[str] = []
    pos = 0
    length = len(body)

    while True:
        special = _SPECIAL_RE.search(body, pos)
        if special is None:
            parts.append(body[pos:])
            break
        idx = special.start()
        parts.append(body[pos:idx])
        ch = body[idx]

        if ch == '"':
            raise LiteralError("unescaped '\"' inside string literal")
        if ch == "\r":
            if not body.startswith("\r\n", idx):
                raise LiteralError("bare CR not allowed in string literal")
            parts.append("\n")
            pos = idx + 2
            continue

        # Backslash escape
        if idx + 1 >= length:
            raise LiteralError("string literal ends with a lone backslash")
        esc = body[idx + 1]
        if esc in _SIMPLE_ESCAPES:
            parts.append(_SIMPLE_ESCAPES[esc])
            pos = idx + 2
        elif esc == "x":
            parts.append(_decode_hex_byte(body, idx + 2))
            pos = idx + 4
        elif esc == "u":
            value, pos = _decode_unicode(body, idx + 2)
            parts.append(value)
        elif esc == "\n" or body.startswith("\r\n", idx + 1):
            # Line continuation: drop the newline and the next line's indentation
            pos = idx + 1
            while pos < length and body[pos] in " \t\n\r":
                pos += 1
        else:
            raise LiteralError(f"unknown character escape '\\{esc}'")

    return "".join(parts)


def _decode_hex_byte(body: str, pos: int) -> str:
    if _HEX_BYTE_RE.match(body, pos) is None:
        raise LiteralError("'\\x' escape must be followed by two hex digits")
    value = int(body[pos : pos + 2], 16)
    if value > 0x7F:
        raise LiteralError(f"'\\x{body[pos:pos + 2]}' is out of range (must be <= \\x7F)")
    return chr(value)


def _decode_unicode(body: str, pos: int) -> tuple[str, int]:
    match = _UNICODE_RE.match(body, pos)
    if match is None:
        raise LiteralError("malformed '\\u{...}' escape")
    digits = match.group(1).replace("_", "")
    if len(digits) > 6:
        raise LiteralError("'\\u{...}' escape has more than six hex digits")
    value = int(digits, 16)
    if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
        raise LiteralError(f"invalid unicode scalar value in escape: {value:#x}")
    return chr(value), match.end()


def parse_integer_literal(text: str) -> int:
    """Decode a Rust integer literal into a non-negative 32-bit value.

    Args:
        text (str): The literal as written in source, e.g. ``3``, ``1_000``,
            ``0x10`` or ``2u32``. Leading and trailing whitespace is ignored.

    Returns:
        int: The decoded value.

    Raises:
        LiteralError: If ``text`` is not a valid integer literal or does not fit
            in an unsigned 32-bit integer.
    """
    literal = text.strip()
    match = _INT_RE.fullmatch(literal)
    if match is None:
        raise LiteralError(f"expected an integer literal, found {literal!r}")

    prefix = match.group("prefix")
    digits = match.group("digits").replace("_", "")
    if not digits or (prefix is None and not literal[0].isdigit()):
        raise LiteralError(f"expected an integer literal, found {literal!r}")

    base = _BASES.get(prefix or "", 10)
    try:
        value = int(digits, base)
    except ValueError as exc:
        raise LiteralError(f"invalid digits in integer literal {literal!r}") from exc

    if value > U32_MAX:
        raise LiteralError(f"integer literal {literal!r} does not fit in 32 bits")
    return value
