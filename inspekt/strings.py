"""
Text measurement and escaping helpers for terminal output.

text_width() reports how many terminal columns a string occupies and
escape_control_characters() makes control characters visible.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re
import unicodedata

# ANSI SGR/CSI sequences, e.g. "\x1b[1;31m"
ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")

# Short escapes for the most common control characters
CONTROL_ESCAPES = {
    "\0": "\\0",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\v": "\\v",
    "\f": "\\f",
    "\r": "\\r",
    "\x1b": "\\x1b",
}

_ZERO_WIDTH_CATEGORIES = ("Mn", "Me", "Cf", "Cc")


# Methods --------------------------------------------------------------------------------------------------------------

def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_ESCAPE_RE.sub("", text)


def char_width(char: str) -> int:
    """
    Column width of a single character: 0, 1 or 2.

    Combining marks, format and control characters take no column,
    East Asian wide and fullwidth characters take two.
    """
    if unicodedata.combining(char) or unicodedata.category(char) in _ZERO_WIDTH_CATEGORIES:
        return 0
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return 2
    return 1


def text_width(text: str) -> int:
    """
    Calculate the display width of a string in terminal columns.

    ANSI escape sequences are ignored. A string of single-column characters
    yields its length.

    Examples:
        >>> text_width("abc")
        3
        >>> text_width("日本")
        4
        >>> text_width("\\x1b[33mabc\\x1b[0m")
        3
    """
    return sum(char_width(c) for c in strip_ansi(text))


def escape_control_characters(text: str) -> str:
    """
    Replace control characters with visible escape sequences.

    Printable characters, including backslashes, are left untouched, so
    calling it on already escaped text does not double-escape.

    Examples:
        >>> escape_control_characters("a\\tb")
        'a\\\\tb'
        >>> escape_control_characters("bell\\x07")
        'bell\\\\x07'
    """
    if text.isprintable():
        return text

    out = []
    for c in text:
        if c in CONTROL_ESCAPES:
            out.append(CONTROL_ESCAPES[c])
        elif unicodedata.category(c) == "Cc":
            # C0, DEL and C1 all fit in one byte
            out.append(f"\\x{ord(c):02x}")
        else:
            out.append(c)
    return "".join(out)
