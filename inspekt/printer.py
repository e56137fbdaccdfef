"""
Console-style value inspector.

Printer turns arbitrary runtime values into human-readable, optionally
annotated text the way an interactive console displays them. Nested values
are rendered recursively with cycle detection and a depth limit, and every
container chooses between a compact one-line form and an indented long form
based on the configured width budget.

Examples:
    >>> from inspekt.styles import PlainAnnotator
    >>> printer = Printer(annotator=PlainAnnotator())
    >>> printer.format({"a": 1, "b": [1, 2]})
    '{ a: 1, b: list(2) [ 1, 2 ] }'
    >>> printer.format(list(range(7)))
    'list(7) [ 0, 1, 2, 3, 4\\n  5, 6 ]'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import dataclasses
import json
import sys
from enum import Enum
from typing import Any, Callable, Iterable, Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .deferred import DeferredState, peek_deferred
from .kinds import OBJECT_KINDS, Kind, callable_kind, callable_name, classify
from .options import PrinterOptions, get_options
from .sentinels import UNDEFINED
from .strings import escape_control_characters, text_width
from .styles import AnsiAnnotator, Annotator, Tag
from .utils import class_name, report, safe_repr, safe_str

Stream = Literal["stdout", "stderr"]

# Values json encodes natively, also as mapping keys
_JSON_SCALARS = (str, int, float, bool)


# Classes --------------------------------------------------------------------------------------------------------------

class Printer:
    """
    Recursive, depth- and width-aware value formatter.

    Args:
        stream: Output stream selector for print(), 'stdout' or 'stderr'. Validated on delivery.
        options: Layout settings; the module-wide default from options.get_options() if None.
        annotator: Text-styling hook, AnsiAnnotator if None.
        measure: Display width of a string in terminal columns.
        escape: Control character escaper applied to record keys.

    Raises:
        TypeError: If options, annotator, measure or escape have the wrong type.

    Note:
        A Printer keeps the set of objects entered during the current top-level
        value, so one instance must not render concurrently from several threads.
    """

    def __init__(self,
                 stream: Stream = "stdout",
                 options: PrinterOptions | None = None,
                 *,
                 annotator: Annotator | None = None,
                 measure: Callable[[str], int] = text_width,
                 escape: Callable[[str], str] = escape_control_characters,
                 ):
        options = get_options() if options is None else options
        annotator = AnsiAnnotator() if annotator is None else annotator

        if not isinstance(options, PrinterOptions):
            raise TypeError(f"options must be PrinterOptions, but got {class_name(options)}")
        if not isinstance(annotator, Annotator):
            raise TypeError(f"annotator must implement annotate() and plain(), but got {class_name(annotator)}")
        if not callable(measure):
            raise TypeError(f"measure must be callable, but got {class_name(measure)}")
        if not callable(escape):
            raise TypeError(f"escape must be callable, but got {class_name(escape)}")

        self.stream = stream
        self.options = options
        self.annotator = annotator
        self.measure = measure
        self.escape = escape

        # ids of objects entered during the current top-level value
        self._seen: set[int] = set()

    # Output -----------------------------------------------------------------------------------------------------------

    def print(self, *args: Any, group_depth: int = 0, write: bool = True) -> str:
        """
        Render args as one output line and deliver it to the selected stream.

        Args:
            *args: Values to render, separated by a single space.
            group_depth: Console group nesting level, indents the line by group_depth * indent spaces.
            write: Deliver the line to the stream when True; only return it when False.

        Returns:
            The rendered line, terminated with a newline.

        Raises:
            ValueError: If write is True and stream is neither 'stdout' nor 'stderr'.
        """
        output = " " * (group_depth * self.options.indent) + self.render(*args) + "\n"

        if write:
            if self.stream == "stdout":
                out = sys.stdout
            elif self.stream == "stderr":
                out = sys.stderr
            else:
                raise ValueError(f"unknown printer stream {self.stream!r}, expected 'stdout' or 'stderr'")
            out.write(output)
            out.flush()

        return output

    def render(self, *args: Any) -> str:
        """
        Format each argument independently and join them with a space.

        Uses the annotated formatter when options.annotations is True and the
        generic formatter otherwise. The seen set is cleared between arguments.
        """
        parts = []
        for arg in args:
            self._seen.clear()
            parts.append(self.format(arg) if self.options.annotations else self.generic_format(arg))
        self._seen.clear()
        return " ".join(parts)

    # Formatting -------------------------------------------------------------------------------------------------------

    def format(self, value: Any, depth: int = 0) -> str:
        """
        Format a value at the given nesting depth.

        A call with depth 0 starts a new top-level value. Strings are quoted
        only when nested (depth > 0). Object-like values deeper than
        options.max_depth fall back to their plain str() conversion.

        Examples:
            >>> from inspekt.styles import PlainAnnotator
            >>> printer = Printer(annotator=PlainAnnotator())
            >>> printer.format("top"), printer.format("nested", depth=1)
            ('top', '"nested"')
            >>> printer.format(None), printer.format(len)
            ('null', '[Function: len]')
        """
        if depth == 0:
            self._seen.clear()

        kind = classify(value)

        if kind is Kind.STRING:
            return self._format_string(value, depth)
        elif kind is Kind.NUMBER:
            return self._annotate(self._str(value), Tag.NUMBER)
        elif kind is Kind.BIGINT:
            return self._annotate(f"{value}n", Tag.BIGINT)
        elif kind is Kind.BOOLEAN:
            return self._annotate(str(value), Tag.BOOLEAN)
        elif kind is Kind.SYMBOL:
            return self._annotate(self._symbol_text(value), Tag.SYMBOL)
        elif kind is Kind.FUNCTION:
            name = callable_name(value) or "( anonymous )"
            return self._annotate(f"[{callable_kind(value)}: {name}]", Tag.FUNCTION)
        elif kind is Kind.UNDEFINED:
            return self._annotate("undefined", Tag.UNDEFINED)
        elif kind is Kind.NULL:
            return self._annotate("null", Tag.NULL)
        elif kind in OBJECT_KINDS:
            if depth > self.options.max_depth:
                return self._str(value)
            return self._format_object(value, kind, depth)

        # Kind.OPAQUE
        return self._str(value)

    def generic_format(self, value: Any) -> str:
        """
        Annotation-free formatting used when options.annotations is False.

        Strings pass through, big integers get an 'n' suffix, callables render
        as 'Kind (name)' and object-like values are dumped as indented JSON.
        Mapping keys json cannot encode are replaced by their str().

        Note:
            This path does not render cycles or cut off depth: a cyclic value raises
            ValueError, a very deep one RecursionError.

        Examples:
            >>> from inspekt.styles import PlainAnnotator
            >>> printer = Printer(annotator=PlainAnnotator())
            >>> printer.generic_format("as is")
            'as is'
            >>> printer.generic_format(lambda: 0)
            'Function (anonymous)'
            >>> print(printer.generic_format({"a": [1]}))
            {
             "a": [
              1
             ]
            }
        """
        kind = classify(value)

        if kind is Kind.STRING:
            return value
        if kind is Kind.BIGINT:
            return f"{value}n"
        if kind is Kind.FUNCTION:
            return f"{callable_kind(value)} ({callable_name(value) or 'anonymous'})"
        if kind in OBJECT_KINDS:
            return json.dumps(self._to_json(value, set()), indent=1, ensure_ascii=False)
        return self._str(value)

    # Object Dispatch --------------------------------------------------------------------------------------------------

    def _format_object(self, obj: Any, kind: Kind, depth: int) -> str:
        key = id(obj)
        if key in self._seen:
            return self._annotate("Circular", Tag.ERROR)
        self._seen.add(key)

        try:
            if kind is Kind.SEQUENCE:
                return self._format_iterable(obj, depth)
            elif kind is Kind.MAP:
                return self._format_map(obj, depth)
            elif kind is Kind.SET:
                return self._format_iterable(obj, depth)
            elif kind is Kind.WEAK_MAP:
                return f"WeakMap {{ {self._annotate('items unknown', Tag.DIM)} }}"
            elif kind is Kind.DEFERRED:
                return self._format_deferred(obj, depth)
            elif kind is Kind.TYPED_SEQUENCE:
                return self._format_iterable(obj, depth)
            elif kind is Kind.EXCEPTION:
                return self._format_exception(obj)
            return self._format_record(obj, depth)
        finally:
            if not self.options.repeats_as_circular:
                self._seen.discard(key)

    # Sequences & Sets -------------------------------------------------------------------------------------------------

    def _format_iterable(self, obj: Iterable[Any], depth: int) -> str:
        try:
            items = list(obj)
        except Exception as e:
            self._report(f"cannot iterate {class_name(obj)}: {type(e).__name__}: {e}")
            return self._str(obj)

        label = f"{class_name(obj)}({len(items)}) "
        if not items:
            return label + "[]"

        snapshot = self._seen.copy()
        depth += 1
        row_break = "\n" + " " * (depth * self.options.indent)
        per_row = self.options.max_items_per_line

        out = label + "[ "
        for i, value in enumerate(items):
            styled = self.format(value, depth)
            if "\n" in styled:
                # A multi-line element forces one element per line
                self._seen = snapshot
                return self._format_iterable_long(label, items, depth)

            if i > 0:
                out += row_break if i % per_row == 0 else ", "
            out += styled

        return out + " ]"

    def _format_iterable_long(self, label: str, items: list[Any], depth: int) -> str:
        indent = " " * (depth * self.options.indent)
        lines = [f"{indent}{self.format(value, depth)}," for value in items]
        closing = " " * ((depth - 1) * self.options.indent)
        return label + "[\n" + "\n".join(lines) + "\n" + closing + "]"

    # Maps & Records ---------------------------------------------------------------------------------------------------

    def _format_map(self, mp: abc.Mapping, depth: int) -> str:
        try:
            entries = [(self._str(k), v) for k, v in mp.items()]
        except Exception as e:
            self._report(f"cannot read items of {class_name(mp)}: {type(e).__name__}: {e}")
            return self._str(mp)

        label = f"{class_name(mp)}({len(entries)}) "
        if not entries:
            return label + "{}"
        return self._format_entries(label, entries, depth, " => ")

    def _format_record(self, obj: Any, depth: int) -> str:
        try:
            fields = _record_fields(obj)
        except Exception as e:
            self._report(f"cannot read fields of {class_name(obj)}: {type(e).__name__}: {e}")
            return self._str(obj)

        if not fields:
            return "{}"

        label = "" if type(obj) is dict else f"{class_name(obj)} "
        entries = [(self._record_key(k, depth + 1), v) for k, v in fields]
        return self._format_entries(label, entries, depth, ": ")

    def _record_key(self, key: Any, depth: int) -> str:
        text = self._str(key)
        escaped = self.escape(text)
        if escaped != text:
            return self._format_string(escaped, depth)
        return text

    def _format_entries(self, label: str, entries: list[tuple[str, Any]], depth: int, separator: str) -> str:
        """
        Short form '{ k: v, ... }' of key-value entries, or the long form when it does not fit.

        The short form is abandoned once the entry index exceeds max_items_per_line
        or the would-be line, closing brace included, is wider than max_line_width.
        """
        snapshot = self._seen.copy()
        depth += 1

        out = label + "{ "
        for i, (key, value) in enumerate(entries):
            if i > 0:
                out += ", "
            out += f"{key}{separator}{self.format(value, depth)}"

            if i > self.options.max_items_per_line or self._width(out + " }") > self.options.max_line_width:
                self._seen = snapshot
                return self._format_entries_long(label, entries, depth, separator)

        return out + " }"

    def _format_entries_long(self, label: str, entries: list[tuple[str, Any]], depth: int, separator: str) -> str:
        indent = " " * (depth * self.options.indent)
        out = label + "{"
        for key, value in entries:
            out += f"\n{indent}{key}{separator}{self.format(value, depth)},"
        return out + "\n" + " " * ((depth - 1) * self.options.indent) + "}"

    # Deferred Values & Exceptions -------------------------------------------------------------------------------------

    def _format_deferred(self, obj: Any, depth: int) -> str:
        info = self._annotate("unknown", Tag.DIM)

        try:
            state, value = peek_deferred(obj)
        except Exception as e:
            self._report(f"cannot inspect {class_name(obj)}: {type(e).__name__}: {e}")
        else:
            if state is DeferredState.PENDING:
                info = self._annotate("pending", Tag.DIM)
            elif state is DeferredState.FULFILLED:
                info = f"fulfilled => {self.format(value, depth + 1)}"
            else:
                info = f"{self._annotate('rejected', Tag.ERROR)} => {self.format(value, depth + 1)}"

        return f"Promise {{ {info} }}"

    def _format_exception(self, exc: BaseException) -> str:
        message = self._str(exc)
        text = f"{class_name(exc)}: {message}" if message else class_name(exc)
        return self._annotate(text, Tag.ERROR)

    # Primitives -------------------------------------------------------------------------------------------------------

    def _format_string(self, text: str, depth: int) -> str:
        return self._annotate(f'"{text}"', Tag.STRING) if depth > 0 else text

    def _symbol_text(self, value: Any) -> str:
        if isinstance(value, Enum):
            return f"{class_name(value)}.{value.name}"
        return safe_repr(value, on_error=self.options.on_error)

    # Helpers ----------------------------------------------------------------------------------------------------------

    def _annotate(self, text: str, tag: Tag) -> str:
        return self.annotator.annotate(text, tag)

    def _width(self, text: str) -> int:
        return self.measure(self.annotator.plain(text))

    def _str(self, value: Any) -> str:
        return safe_str(value, on_error=self.options.on_error)

    def _report(self, message: str) -> None:
        report(message, on_error=self.options.on_error, stacklevel=4)

    def _to_json(self, obj: Any, active: set[int]) -> Any:
        """
        Convert a value to JSON types: mappings to dicts with JSON-compatible keys,
        sets and binary sequences to lists, records to dicts of their fields.

        Raises:
            ValueError: If obj contains itself.
        """
        if obj is None or type(obj) in _JSON_SCALARS:
            return obj

        kind = classify(obj)
        if kind not in OBJECT_KINDS:
            return self._str(obj)
        if kind in (Kind.WEAK_MAP, Kind.DEFERRED):
            return {}
        if kind is Kind.EXCEPTION:
            message = self._str(obj)
            return f"{class_name(obj)}: {message}" if message else class_name(obj)

        key = id(obj)
        if key in active:
            raise ValueError("Circular reference detected")
        active.add(key)
        try:
            try:
                if kind in (Kind.SEQUENCE, Kind.SET, Kind.TYPED_SEQUENCE):
                    values = list(obj)
                else:
                    items = list(obj.items()) if kind is Kind.MAP else _record_fields(obj)
            except Exception as e:
                self._report(f"cannot read {class_name(obj)}: {type(e).__name__}: {e}")
                return self._str(obj)

            if kind in (Kind.SEQUENCE, Kind.SET, Kind.TYPED_SEQUENCE):
                return [self._to_json(v, active) for v in values]
            return {self._json_key(k): self._to_json(v, active) for k, v in items}
        finally:
            active.discard(key)

    def _json_key(self, key: Any) -> Any:
        if key is None or type(key) in _JSON_SCALARS:
            return key
        return self._str(key)


# Private Methods ------------------------------------------------------------------------------------------------------

def _record_fields(obj: Any) -> list[tuple[Any, Any]]:
    """Named fields of a record: dict items, dataclass fields in declaration order, or vars()."""
    if type(obj) is dict:
        return list(obj.items())
    if dataclasses.is_dataclass(obj):
        return [(f.name, getattr(obj, f.name, UNDEFINED)) for f in dataclasses.fields(obj)]
    return list(vars(obj).items())
