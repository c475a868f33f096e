"""
PHP string literal helpers.

Quoting prefers single quotes. Strings containing control characters are
emitted double-quoted with escapes, so that line-oriented whitespace
canonicalization never touches string contents.

Byte escapes above 0x7f (`\\xff`, `\\377`) do not name a character. Decoding keeps
them as lone surrogates U+DC80..U+DCFF (the `surrogateescape` convention) and
quoting writes them back as `\\xNN`, so the original bytes survive.
"""

from __future__ import annotations

import re

_DOUBLE_ESCAPES = {
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\v": "\\v",
    "\f": "\\f",
    "\x1b": "\\e",
    "\\": "\\\\",
    '"': '\\"',
    "$": "\\$",
}

_SIMPLE_UNESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "v": "\v",
    "f": "\f",
    "e": "\x1b",
    "\\": "\\",
    "$": "$",
    '"': '"',
}

_CONTROL = re.compile(r"[\x00-\x1f\x7f]")
_RAW_BYTE = re.compile("[\udc80-\udcff]")

_DOUBLE_ESCAPE_RE = re.compile(
    r"""\\(?:
        (?P<simple>[ntrvfe\\$"])
      | (?P<octal>[0-7]{1,3})
      | x(?P<hex>[0-9A-Fa-f]{1,2})
      | u\{(?P<unicode>[0-9A-Fa-f]+)\}
    )""",
    re.VERBOSE,
)


def quote_single(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def quote_double(value: str) -> str:
    out = []
    for ch in value:
        if ch in _DOUBLE_ESCAPES:
            out.append(_DOUBLE_ESCAPES[ch])
        elif _CONTROL.match(ch):
            out.append(f"\\x{ord(ch):02x}")
        elif _RAW_BYTE.match(ch):
            out.append(f"\\x{ord(ch) - 0xDC00:02x}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def string_literal(value: str) -> str:
    """Canonical PHP literal for a string value."""
    if _CONTROL.search(value) or _RAW_BYTE.search(value):
        return quote_double(value)
    return quote_single(value)


def _strip_quotes(literal: str, quote: str) -> str:
    if literal[:1] in ("b", "B"):
        literal = literal[1:]
    if len(literal) < 2 or literal[0] != quote or literal[-1] != quote:
        raise ValueError(f"Not a {quote}-quoted PHP string: {literal!r}")
    return literal[1:-1]


def decode_single(literal: str) -> str:
    """Value of a single-quoted literal (only \\\\ and \\' are escapes)."""
    body = _strip_quotes(literal, "'")
    return re.sub(r"\\([\\'])", r"\1", body)


def _byte(value: int) -> str:
    return chr(value) if value < 0x80 else chr(0xDC00 + value)


def decode_double(literal: str) -> str:
    """Value of a double-quoted literal without interpolation."""
    body = _strip_quotes(literal, '"')

    def replace(m: re.Match) -> str:
        if m.group("simple"):
            return _SIMPLE_UNESCAPES[m.group("simple")]
        if m.group("octal"):
            return _byte(int(m.group("octal"), 8) & 0xFF)
        if m.group("hex"):
            return _byte(int(m.group("hex"), 16))
        return chr(int(m.group("unicode"), 16))

    return _DOUBLE_ESCAPE_RE.sub(replace, body)


__all__ = ["quote_single", "quote_double", "string_literal", "decode_single", "decode_double"]
