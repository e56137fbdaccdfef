"""
Non-blocking settlement peek for futures, tasks and coroutines.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import asyncio
import concurrent.futures
import inspect
from enum import IntEnum, unique
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import class_name

_CANCELLED_ERRORS = (asyncio.CancelledError, concurrent.futures.CancelledError)


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class DeferredState(IntEnum):
    PENDING = 0
    FULFILLED = 1
    REJECTED = 2


# Methods --------------------------------------------------------------------------------------------------------------

def peek_deferred(obj: Any) -> tuple[DeferredState, Any]:
    """
    Read the settlement state of a deferred value without blocking or awaiting.

    Args:
        obj: A concurrent.futures.Future, an asyncio future or task, or a coroutine object.

    Returns:
        (state, value) where value is the result for FULFILLED, the failure for
        REJECTED and None for PENDING. A cancelled future is REJECTED with its
        cancellation error.

    Raises:
        ValueError: If obj is a closed coroutine, its outcome is no longer observable.
        TypeError: If obj is not a supported deferred value.

    Examples:
        >>> from concurrent.futures import Future
        >>> fut = Future()
        >>> peek_deferred(fut)
        (<DeferredState.PENDING: 0>, None)
        >>> fut.set_result(42)
        >>> peek_deferred(fut)
        (<DeferredState.FULFILLED: 1>, 42)
    """
    if inspect.iscoroutine(obj):
        if inspect.getcoroutinestate(obj) == inspect.CORO_CLOSED:
            raise ValueError(f"outcome of closed coroutine {obj.__qualname__} is not observable")
        return DeferredState.PENDING, None

    if not (isinstance(obj, concurrent.futures.Future) or asyncio.isfuture(obj)):
        raise TypeError(f"future, task or coroutine expected, but got {class_name(obj)}")

    if not obj.done():
        return DeferredState.PENDING, None

    # exception() never blocks on a done future
    try:
        error = obj.exception()
    except _CANCELLED_ERRORS as e:
        return DeferredState.REJECTED, e

    if error is not None:
        return DeferredState.REJECTED, error
    return DeferredState.FULFILLED, obj.result()
