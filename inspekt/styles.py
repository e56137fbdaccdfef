"""
Semantic text annotation for printer output.

The printer never styles text directly: it asks an Annotator to wrap a
substring for a semantic Tag. AnsiAnnotator maps tags to terminal colors,
PlainAnnotator leaves text untouched.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from enum import StrEnum, unique
from typing import Mapping, Protocol, runtime_checkable

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .strings import strip_ansi


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Tag(StrEnum):
    """Semantic annotation tags, the closed set every Annotator must accept."""
    STRING = "string"
    NUMBER = "number"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    SYMBOL = "symbol"
    FUNCTION = "function"
    UNDEFINED = "undefined"
    NULL = "null"
    DIM = "dim"
    ERROR = "error"


# ANSI escape codes for terminal colors
ESC = "\x1b["
RESET = f"{ESC}0m"
BOLD = f"{ESC}1m"
RED = f"{ESC}31m"
YELLOW = f"{ESC}33m"
BLUE = f"{ESC}34m"
GREY = f"{ESC}90m"  # Bright black
LIGHT_YELLOW = f"{ESC}93m"
LIGHT_BLUE = f"{ESC}94m"
LIGHT_MAGENTA = f"{ESC}95m"

ANSI_STYLES: Mapping[Tag, str] = frozendict({
    Tag.STRING: YELLOW,
    Tag.NUMBER: LIGHT_BLUE,
    Tag.BIGINT: LIGHT_BLUE,
    Tag.BOOLEAN: BLUE,
    Tag.SYMBOL: LIGHT_YELLOW,
    Tag.FUNCTION: LIGHT_MAGENTA,
    Tag.UNDEFINED: GREY,
    Tag.NULL: GREY,
    Tag.DIM: GREY,
    Tag.ERROR: f"{BOLD}{RED}",
})


@runtime_checkable
class Annotator(Protocol):
    """
    Pluggable text-styling hook.

    annotate() must be total over any text and any Tag. plain() must undo
    whatever markup annotate() adds, the printer measures widths on its output.
    """

    def annotate(self, text: str, tag: Tag) -> str: ...

    def plain(self, text: str) -> str: ...


class PlainAnnotator:
    """No-op annotator: both methods are the identity function."""

    def annotate(self, text: str, tag: Tag) -> str:
        return text

    def plain(self, text: str) -> str:
        return text


class AnsiAnnotator:
    """
    Annotator emitting ANSI SGR color codes.

    Args:
        styles: Tag to escape-sequence table, defaults to ANSI_STYLES.
            Tags missing from a custom table are left unstyled.

    Examples:
        >>> AnsiAnnotator().annotate("42", Tag.NUMBER)
        '\\x1b[94m42\\x1b[0m'
        >>> AnsiAnnotator().plain('\\x1b[94m42\\x1b[0m')
        '42'
    """

    def __init__(self, styles: Mapping[Tag, str] | None = None) -> None:
        self.styles = ANSI_STYLES if styles is None else frozendict(styles)

    def annotate(self, text: str, tag: Tag) -> str:
        style = self.styles.get(tag)
        if not style or not text:
            return text
        return f"{style}{text}{RESET}"

    def plain(self, text: str) -> str:
        return strip_ansi(text)
