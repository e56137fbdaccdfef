"""
Runtime value kinds for the printer type dispatcher.

classify() maps any Python value to exactly one Kind. The mapping is a
closed if/elif chain ending in Kind.OPAQUE; new kinds are added by extending
the enumeration and the chain, never by open-ended checks in the renderers.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import array
import asyncio
import collections.abc as abc
import concurrent.futures
import dataclasses
import inspect
import numbers
import weakref
from enum import Enum, StrEnum, unique
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .sentinels import Sentinel, is_absent

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

BINARY_TYPES = (bytes, bytearray, memoryview, array.array)
WEAK_MAPPING_TYPES = (weakref.WeakKeyDictionary, weakref.WeakValueDictionary)


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Kind(StrEnum):
    """
    Closed set of value kinds known to the printer.

    Attributes:
        STRING: str
        NUMBER: int within the signed 64-bit range, float, complex and other numbers.Number
        BIGINT: int outside the signed 64-bit range
        BOOLEAN: bool
        SYMBOL: unique tokens - enum members, Sentinel instances, Ellipsis, NotImplemented
        FUNCTION: functions, builtins, methods and classes
        UNDEFINED: the UNDEFINED and UNSET sentinels
        NULL: None
        SEQUENCE: non-binary ordered sequences - list, tuple, deque, range
        MAP: mappings other than plain dict and weak mappings
        SET: sets, frozensets and set-like views
        WEAK_MAP: weakref mappings, never enumerated
        DEFERRED: futures, tasks and coroutines
        TYPED_SEQUENCE: bytes, bytearray, memoryview, array.array
        EXCEPTION: BaseException instances
        RECORD: plain dict, dataclass instances and objects with a __dict__
        OPAQUE: anything else
    """
    STRING = "string"
    NUMBER = "number"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    SYMBOL = "symbol"
    FUNCTION = "function"
    UNDEFINED = "undefined"
    NULL = "null"
    SEQUENCE = "sequence"
    MAP = "map"
    SET = "set"
    WEAK_MAP = "weak_map"
    DEFERRED = "deferred"
    TYPED_SEQUENCE = "typed_sequence"
    EXCEPTION = "exception"
    RECORD = "record"
    OPAQUE = "opaque"


OBJECT_KINDS = frozenset({
    Kind.SEQUENCE,
    Kind.MAP,
    Kind.SET,
    Kind.WEAK_MAP,
    Kind.DEFERRED,
    Kind.TYPED_SEQUENCE,
    Kind.EXCEPTION,
    Kind.RECORD,
})


# Methods --------------------------------------------------------------------------------------------------------------

def classify(value: Any) -> Kind:
    """
    Map a value to its Kind.

    Precedence: enum members (IntEnum and StrEnum included), string, primitives
    (bool before int), callables, absence sentinels, None, then object-like kinds from sequence to record.

    Examples:
        >>> classify("a"), classify(True), classify(2 ** 64)
        (<Kind.STRING: 'string'>, <Kind.BOOLEAN: 'boolean'>, <Kind.BIGINT: 'bigint'>)
        >>> classify({}), classify([]), classify(b"")
        (<Kind.RECORD: 'record'>, <Kind.SEQUENCE: 'sequence'>, <Kind.TYPED_SEQUENCE: 'typed_sequence'>)
    """
    if isinstance(value, Enum):
        return Kind.SYMBOL
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, int):
        return Kind.NUMBER if INT64_MIN <= value <= INT64_MAX else Kind.BIGINT
    if isinstance(value, numbers.Number):
        return Kind.NUMBER
    if _is_symbol(value):
        return Kind.SYMBOL
    if isinstance(value, type) or inspect.isroutine(value):
        return Kind.FUNCTION
    if is_absent(value):
        return Kind.UNDEFINED
    if value is None:
        return Kind.NULL

    # Object-like kinds; each predicate excludes the others
    if isinstance(value, abc.Sequence) and not isinstance(value, BINARY_TYPES):
        return Kind.SEQUENCE
    if isinstance(value, abc.Mapping) and type(value) is not dict and not isinstance(value, WEAK_MAPPING_TYPES):
        return Kind.MAP
    if isinstance(value, abc.Set):
        return Kind.SET
    if isinstance(value, WEAK_MAPPING_TYPES):
        return Kind.WEAK_MAP
    if is_deferred(value):
        return Kind.DEFERRED
    if isinstance(value, BINARY_TYPES):
        return Kind.TYPED_SEQUENCE
    if isinstance(value, BaseException):
        return Kind.EXCEPTION
    if type(value) is dict or _is_dataclass_instance(value) or _has_instance_dict(value):
        return Kind.RECORD

    return Kind.OPAQUE


def is_deferred(value: Any) -> bool:
    """Check for a future, task or coroutine object."""
    return (isinstance(value, concurrent.futures.Future)
            or asyncio.isfuture(value)
            or inspect.iscoroutine(value))


def callable_kind(fn: Any) -> str:
    """
    Kind label of a callable: 'Class', a runtime tag such as 'AsyncFunction', or 'Function'.

    Examples:
        >>> callable_kind(int)
        'Class'
        >>> async def f(): ...
        >>> callable_kind(f)
        'AsyncFunction'
    """
    if isinstance(fn, type):
        return "Class"
    if inspect.isasyncgenfunction(fn):
        return "AsyncGeneratorFunction"
    if inspect.iscoroutinefunction(fn):
        return "AsyncFunction"
    if inspect.isgeneratorfunction(fn):
        return "GeneratorFunction"
    return "Function"


def callable_name(fn: Any) -> str:
    """Name of a callable, or an empty string for lambdas and unnamed callables."""
    name = getattr(fn, "__name__", "")
    if not isinstance(name, str) or name == "<lambda>":
        return ""
    return name


def _is_symbol(value: Any) -> bool:
    if value is Ellipsis or value is NotImplemented:
        return True
    return isinstance(value, Sentinel) and not is_absent(value)


def _is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _has_instance_dict(value: Any) -> bool:
    # A __dict__ property may raise anything, not only AttributeError
    try:
        return isinstance(vars(value), dict)
    except Exception:
        return False
