"""locheck utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule.
"""

from .logger import configure_logging

__all__ = [
    "configure_logging",
]
