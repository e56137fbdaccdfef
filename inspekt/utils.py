"""
Small helpers shared by the inspekt modules: naming, defensive text conversion and diagnostics.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import warnings
from typing import Any, Literal

OnError = Literal["ignore", "warn"]


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Name of the class of obj, or of obj itself when it is a class.

    Builtin classes are never module-qualified.

    Examples:
        >>> class_name(10), class_name(int)
        ('int', 'int')
        >>> class Point: ...
        >>> class_name(Point())
        'Point'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    name = getattr(cls, "__name__", None) or "object"
    if fully_qualified and cls.__module__ != "builtins":
        return f"{cls.__module__}.{name}"
    return name


def report(message: str, *, on_error: OnError = "ignore", stacklevel: int = 3) -> None:
    """Emit a RuntimeWarning for a recovered failure when on_error is 'warn'."""
    if on_error == "warn":
        warnings.warn(message, RuntimeWarning, stacklevel=stacklevel)


def safe_repr(obj: Any, *, on_error: OnError = "ignore") -> str:
    """
    repr() that never raises: a broken __repr__ yields a placeholder naming the exception type.
    """
    try:
        return repr(obj)
    except Exception as e:
        exc_type = type(e).__name__
        report(f"repr() of {class_name(obj, fully_qualified=True)} failed: {exc_type}: {e}", on_error=on_error)
        return f"<{class_name(obj)} object (repr failed: {exc_type})>"


def safe_str(obj: Any, *, on_error: OnError = "ignore") -> str:
    """
    Defensive str() call, the plain string conversion used for depth cutoffs and map keys.

    Falls back to safe_repr() when __str__ raises.

    Examples:
        >>> safe_str([1, 2])
        '[1, 2]'
        >>> class Broken:
        ...     def __str__(self):
        ...         raise ValueError("nope")
        ...     def __repr__(self):
        ...         raise ValueError("nope")
        >>> safe_str(Broken())
        '<Broken object (repr failed: ValueError)>'
    """
    try:
        return str(obj)
    except Exception as e:
        report(f"str() of {class_name(obj, fully_qualified=True)} failed: {type(e).__name__}: {e}",
               on_error=on_error)
        return safe_repr(obj, on_error=on_error)
