from __future__ import annotations

# Characters counted as leading indentation.
_INDENT_CHARS = " \t\0\x0b"
_TRAILING_WS = " \t\0\x0b\f"


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def canonicalize(text: str, indent: int = 4) -> str:
    """
    Final whitespace pass over generated text.

      • CRLF / CR → LF
      • whitespace-only lines become empty, trailing whitespace is dropped
      • in a line starting with a tab, every tab of the leading whitespace
        becomes `indent` spaces; spaces in that run stay as they are, so a
        tab-then-spaces run is not widened per character
      • no leading/trailing blank lines, exactly one final newline
    """
    out = []
    for line in normalize_newlines(text).split("\n"):
        line = line.rstrip(_TRAILING_WS)
        if not line:
            out.append("")
            continue

        if line[0] == "\t":
            width = len(line) - len(line.lstrip(_INDENT_CHARS))
            lead = line[:width].replace("\t", " " * indent).replace("\0", " ").replace("\x0b", " ")
            line = lead + line[width:]

        out.append(line)

    return "\n".join(out).strip("\n") + "\n"


__all__ = ["canonicalize", "normalize_newlines"]
