"""
Fluent wrapper around the composers.
"""

from typing import Any, Callable, Optional, Tuple

from .compose import compose, identity, tap, _check_callable
from .optional import compose_optional


def _step_name(f: Callable) -> str:
    return getattr(f, "__name__", None) or repr(f)


class Pipeline:
    """
    Immutable chain of unary functions built by method calls.

    Steps run in the order they are added::

        process = Pipeline(split_lines).tap(print).then(create_rows)

    Every chaining method returns a new Pipeline; the original is unchanged.
    """

    def __init__(self, fn: Callable = identity, steps: Optional[Tuple[str, ...]] = None):
        _check_callable("fn", fn)
        self._fn = fn
        if steps is None:
            steps = () if fn is identity else (_step_name(fn),)
        self.steps = steps

    def __call__(self, a: Any) -> Any:
        return self._fn(a)

    def then(self, step: Callable) -> "Pipeline":
        """Append a step fed with the current result."""
        return Pipeline(compose(self._fn, step), self.steps + (_step_name(step),))

    def tap(self, observer: Callable) -> "Pipeline":
        """Append an observer that sees the current result without changing it."""
        return Pipeline(tap(self._fn, observer), self.steps + (f"tap({_step_name(observer)})",))

    def then_optional(self, step: Callable) -> "Pipeline":
        """Append a step that is skipped when the current result is None."""
        return Pipeline(compose_optional(self._fn, step), self.steps + (f"?{_step_name(step)}",))

    def __repr__(self) -> str:
        return f"Pipeline({' -> '.join(self.steps)})"
