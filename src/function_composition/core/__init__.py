"""
Core composers.

- compose / tap / pipe: sequential composition
- compose_optional / pipe_optional / lift_optional: optional chaining
- Pipeline: fluent method-chaining wrapper
"""

from .compose import compose, tap, pipe, identity
from .optional import compose_optional, pipe_optional, lift_optional
from .pipeline import Pipeline

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
