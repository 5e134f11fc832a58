"""Exception types raised by pyimfilt.

Each error also derives from the built-in exception a caller would reach for
first, so ``except ValueError`` around a constructor or ``except
NotImplementedError`` around a resize call keeps working.
"""

from __future__ import annotations

from typing import Any


class PixfiltError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(PixfiltError, ValueError):
    """A value handed to the library is malformed (shape, range, type)."""


class InvalidOperationError(PixfiltError, TypeError):
    """An operation was applied to an image of the wrong pixel format."""


class UnsupportedCapabilityError(PixfiltError, NotImplementedError):
    """The request is well formed but no implementation exists for it yet."""

    def __init__(self, message: str, *, backend: Any = None, algorithm: Any = None) -> None:
        super().__init__(message)
        self.backend = backend
        self.algorithm = algorithm
