"""
Optional-chaining composition.

``None`` marks an absent value. As soon as a step returns ``None`` the chain
stops and the remaining steps are not called.
"""

from functools import reduce
from typing import Callable, Optional, TypeVar

from .compose import _check_callable, identity

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def compose_optional(
    first: Callable[[A], Optional[B]],
    second: Callable[[B], Optional[C]],
) -> Callable[[A], Optional[C]]:
    """
    Compose two optional-returning functions from left to right.

    Parameters:
    -----------
    first : callable
        Step applied to the input, may return None
    second : callable
        Step applied to the present result of `first`, may return None

    Returns:
    --------
    callable
        Function returning None if `first` returned None (without calling
        `second`), else ``second(first(a))``
    """
    _check_callable("first", first)
    _check_callable("second", second)

    def composed(a):
        b = first(a)
        if b is None:
            return None
        return second(b)

    return composed


def pipe_optional(*functions: Callable) -> Callable:
    """Chain optional-returning functions left to right, stopping at the first None."""
    for i, f in enumerate(functions):
        _check_callable(f"functions[{i}]", f)
    return reduce(compose_optional, functions, identity)


def lift_optional(f: Callable[[B], C]) -> Callable[[Optional[B]], Optional[C]]:
    """Make a plain step pass None through instead of being called with it."""
    _check_callable("f", f)

    def lifted(b):
        if b is None:
            return None
        return f(b)

    return lifted
