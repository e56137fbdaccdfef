"""
Sentinel objects for absent values and symbol-like unique tokens.

Sentinels compare by identity only. The printer renders the absence
sentinels as ``undefined`` and any other sentinel as a symbol token,
e.g. ``<MISSING>``.

Absence sentinels:
    UNDEFINED: a slot that was never assigned
    UNSET: an optional argument the caller left out, distinct from None

Usage:
    >>> MISSING = Sentinel("MISSING")
    >>> MISSING
    <MISSING>
    >>> def merge(indent: int | UnsetType = UNSET) -> int:
    ...     return ifunset(indent, default=2)
"""

from typing import Any, Final

__all__ = [
    'UNDEFINED',
    'UNSET',
    'Sentinel',
    'UndefinedType',
    'UnsetType',
    'ifunset',
    'is_absent',
]


# Base Sentinel --------------------------------------------------------------------------------------------------------

class Sentinel:
    """
    Unique named token, the Python counterpart of a symbol.

    Each instance is distinct from every other instance, even with the same name.
    """
    __slots__ = ('_name',)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        """Returns a clean string representation for debugging."""
        return f'<{self._name}>'

    def __eq__(self, other: Any) -> bool:
        """Ensures identity-based comparison."""
        return self is other

    def __hash__(self) -> int:
        """Returns a hash based on object identity."""
        return id(self)

    def __bool__(self) -> bool:
        """Returns False (sentinels are typically falsy)."""
        return False


# Sentinel Types -------------------------------------------------------------------------------------------------------

class _AbsentSentinel(Sentinel):
    """
    One instance per subclass, named after the subclass minus its 'Type' suffix.

    Pickling and copying return the same instance.
    """
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        super().__init__(type(self).__name__.removesuffix("Type").upper())

    def __reduce__(self) -> tuple:
        return type(self), ()


class UndefinedType(_AbsentSentinel):
    """Marks a slot that exists but was never given a value."""
    __slots__ = ()
    _instance: 'UndefinedType | None' = None


class UnsetType(_AbsentSentinel):
    """Optional argument the caller did not provide."""
    __slots__ = ()
    _instance: 'UnsetType | None' = None


# Sentinel Instances ---------------------------------------------------------------------------------------------------

UNDEFINED: Final[UndefinedType] = UndefinedType()
"""
Sentinel representing a value that was never assigned.

The printer renders it as the dim ``undefined`` literal.
"""

UNSET: Final[UnsetType] = UnsetType()
"""
Sentinel representing an unprovided optional argument.

Use with identity check: `if arg is UNSET:`
"""


# Methods --------------------------------------------------------------------------------------------------------------

def ifunset(value: Any, *, default: Any = None) -> Any:
    """
    Return value if it's not UNSET, otherwise return default.

    Examples:
        >>> ifunset(UNSET, default=2)
        2
        >>> ifunset(None, default=2) is None
        True
    """
    return default if value is UNSET else value


def is_absent(value: Any) -> bool:
    """Check whether value is one of the absence sentinels (UNDEFINED or UNSET)."""
    return value is UNDEFINED or value is UNSET
