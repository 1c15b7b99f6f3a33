"""
Sequential function composition.

Steps are composed left to right: the order in which functions are written
is the order in which they run.
"""

from functools import reduce
from typing import Any, Callable, TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def identity(x: A) -> A:
    """Return the argument unchanged."""
    return x


def _check_callable(name: str, f: Any) -> None:
    if not callable(f):
        raise TypeError(f"{name} must be callable, got {type(f).__name__}")


def compose(first: Callable[[A], B], second: Callable[[B], C]) -> Callable[[A], C]:
    """
    Compose two functions from left to right.

    Parameters:
    -----------
    first : callable
        Step applied to the input
    second : callable
        Step applied to the result of `first`

    Returns:
    --------
    callable
        Function computing ``second(first(a))``

    Example:
    --------
    >>> f = compose(lambda x: x * 2, lambda x: x + 1)
    >>> f(3)  # Returns (3 * 2) + 1 = 7
    """
    _check_callable("first", first)
    _check_callable("second", second)

    def composed(a):
        return second(first(a))

    return composed


def tap(first: Callable[[A], B], observer: Callable[[B], Any]) -> Callable[[A], B]:
    """
    Compose a function with a side-effect-only observer.

    The observer is called once with the result of `first`; whatever it
    returns is discarded and the result of `first` is passed through.

    Parameters:
    -----------
    first : callable
        Step producing the carried value
    observer : callable
        Called with the carried value, e.g. to print or record it

    Returns:
    --------
    callable
        Function returning ``first(a)`` after the observer has seen it
    """
    _check_callable("first", first)
    _check_callable("observer", observer)

    def tapped(a):
        b = first(a)
        observer(b)
        return b

    return tapped


def pipe(*functions: Callable) -> Callable:
    """
    Compose any number of functions from left to right.

    ``pipe(f, g, h)(x) == h(g(f(x)))``. With no functions this is the identity.
    """
    for i, f in enumerate(functions):
        _check_callable(f"functions[{i}]", f)
    return reduce(compose, functions, identity)
