"""
Utility functions for building pipelines.
"""

from .observers import printer, Recorder

__all__ = [
    "printer",
    "Recorder",
]
