"""Boundary error for caller contract violations.

The planning core is total over its input domain: empty lists, absent
optionals and zero-length text are valid.  InvalidInput is raised only when a
caller hands over something inconsistent (a dialogue line outside its scene
context, scenes out of order, a negative timeline advance, a bad config file).
"""
from __future__ import annotations


class InvalidInput(ValueError):
    """Raised at the public boundary for inconsistent caller input."""

    def __init__(self, message: str) -> None:
        if not message.startswith("ERROR:"):
            message = f"ERROR: {message}"
        super().__init__(message)
