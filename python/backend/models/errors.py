"""Exceptions raised by the puzzle backend."""

from __future__ import annotations


class InvalidConfiguration(ValueError):
    """A game was configured with values no puzzle can be built from."""
