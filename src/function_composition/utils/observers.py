"""
Observers to insert into a chain with `tap`.
"""

import sys
from typing import Any, List, Optional, TextIO


def printer(label: str, stream: Optional[TextIO] = None):
    """
    Build an observer that prints the carried value.

    Parameters:
    -----------
    label : str
        Prefix printed before the value
    stream : file-like, optional
        Where to print; defaults to stdout at call time

    Returns:
    --------
    callable
        Observer printing ``"<label>: <value>"``
    """
    if not isinstance(label, str) or len(label.strip()) == 0:
        raise ValueError("label must be a non-empty string")

    def observe(value: Any) -> None:
        print(f"{label}: {value}", file=stream if stream is not None else sys.stdout)

    observe.__name__ = f"print_{label.replace(' ', '_')}"
    return observe


class Recorder:
    """Observer that keeps every value it is called with."""

    def __init__(self):
        self.values: List[Any] = []

    @property
    def calls(self) -> int:
        return len(self.values)

    def __call__(self, value: Any) -> None:
        self.values.append(value)

    def __repr__(self) -> str:
        return f"Recorder(calls={self.calls})"
