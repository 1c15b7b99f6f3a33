"""
Public package facade for function_composition.

Re-exports the composers so that `from function_composition import compose`
works without reaching into `function_composition.core`.
"""
from function_composition.core import (
    compose,
    tap,
    pipe,
    identity,
    compose_optional,
    pipe_optional,
    lift_optional,
    Pipeline,
)

__all__ = [
    "compose",
    "tap",
    "pipe",
    "identity",
    "compose_optional",
    "pipe_optional",
    "lift_optional",
    "Pipeline",
]
