"""
Printer configuration: immutable options, presets and the module-wide default.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Literal, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .sentinels import UNSET, UnsetType, ifunset
from .utils import OnError, class_name

Preset = Literal["compact", "debug", "default", "plain"]


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class PrinterOptions:
    """
    Layout and behavior settings of a Printer, read-only after construction.

    Attributes:
        indent: Spaces per nesting level in long form and wrapped rows, >= 0.
        max_depth: Deepest nesting level rendered structurally, >= 0. Object-like values
            nested deeper are rendered with their plain str() conversion.
        max_line_width: Column budget for the short form of maps and records, > 0.
        max_items_per_line: Elements per row of a compact sequence, and the entry
            index beyond which maps and records switch to long form, > 0.
        annotations: Rich, annotated formatting when True; the generic JSON-like
            dump of Printer.generic_format() when False.
        repeats_as_circular: When True, an object seen anywhere earlier in the same
            top-level value renders as Circular, even as a non-nested sibling repeat.
            When False, only objects on the active recursion path are Circular.
        on_error: 'ignore' recovers silently from broken __str__/__repr__, failed
            deferred introspection and unreadable fields; 'warn' also emits a RuntimeWarning.

    Examples:
        >>> opts = PrinterOptions(max_line_width=40)
        >>> opts.merge(indent=4).indent
        4
        >>> PrinterOptions.plain().annotations
        False
    """
    indent: int = 2
    max_depth: int = 4
    max_line_width: int = 80
    max_items_per_line: int = 5
    annotations: bool = True
    repeats_as_circular: bool = True
    on_error: OnError = "ignore"

    def __post_init__(self):
        """Validate fields"""
        for name, minimum in (("indent", 0), ("max_depth", 0), ("max_line_width", 1), ("max_items_per_line", 1)):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be int, but got {class_name(value)}")
            if value < minimum:
                raise ValueError(f"{name} must be >= {minimum}, but got {value}")

        for name in ("annotations", "repeats_as_circular"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise TypeError(f"{name} must be bool, but got {class_name(value)}")

        if self.on_error not in ("ignore", "warn"):
            raise ValueError(f"on_error must be 'ignore' or 'warn', but got {self.on_error!r}")

    @classmethod
    def compact(cls) -> Self:
        """Shallow and wide: more items per row, fewer levels."""
        return cls(max_depth=2, max_line_width=120, max_items_per_line=10)

    @classmethod
    def debug(cls) -> Self:
        """Deep inspection with repeats shown in full and warnings on recovered failures."""
        return cls(max_depth=8, repeats_as_circular=False, on_error="warn")

    @classmethod
    def plain(cls) -> Self:
        """Annotation-free output through the generic formatting path."""
        return cls(annotations=False)

    def merge(self,
              indent: int | UnsetType = UNSET,
              max_depth: int | UnsetType = UNSET,
              max_line_width: int | UnsetType = UNSET,
              max_items_per_line: int | UnsetType = UNSET,
              annotations: bool | UnsetType = UNSET,
              repeats_as_circular: bool | UnsetType = UNSET,
              on_error: OnError | UnsetType = UNSET,
              ) -> "PrinterOptions":
        """
        Create a new PrinterOptions instance with merged configuration options.

        Parameters not provided (UNSET) are inherited from the current instance.

        Returns:
            New PrinterOptions instance with merged configuration.
        """
        return PrinterOptions(
            indent=ifunset(indent, default=self.indent),
            max_depth=ifunset(max_depth, default=self.max_depth),
            max_line_width=ifunset(max_line_width, default=self.max_line_width),
            max_items_per_line=ifunset(max_items_per_line, default=self.max_items_per_line),
            annotations=ifunset(annotations, default=self.annotations),
            repeats_as_circular=ifunset(repeats_as_circular, default=self.repeats_as_circular),
            on_error=ifunset(on_error, default=self.on_error),
        )


# Module Config --------------------------------------------------------------------------------------------------------

_PRESETS = {
    "compact": PrinterOptions.compact,
    "debug": PrinterOptions.debug,
    "default": PrinterOptions,
    "plain": PrinterOptions.plain,
}

_options = PrinterOptions()


# Methods --------------------------------------------------------------------------------------------------------------

def configure(preset: Preset | None = None, **overrides) -> PrinterOptions:
    """
    Set the module-wide default options used by printers created without options.

    Args:
        preset: Start from a named preset; None merges into the current defaults.
        **overrides: PrinterOptions fields to override, see PrinterOptions.merge().

    Returns:
        The new module-wide options.

    Raises:
        ValueError: If preset is not a known preset name.

    Examples:
        >>> configure(preset="compact", indent=4).max_items_per_line
        10
        >>> configure(max_depth=1).indent
        4
    """
    global _options

    if preset is None:
        base = _options
    elif preset in _PRESETS:
        base = _PRESETS[preset]()
    else:
        raise ValueError(f"preset expected one of {', '.join(_PRESETS)}, but found {preset!r}")

    _options = base.merge(**overrides)
    return _options


def get_options() -> PrinterOptions:
    """Current module-wide default options."""
    return _options
