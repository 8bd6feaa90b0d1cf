"""Exceptions raised by the clipping engine.

All engine failures derive from :class:`ClipError`.  Each subclass also
derives from the closest builtin so callers can catch either.
"""

from __future__ import annotations


class ClipError(Exception):
    """Base class for clipping failures."""

    pass


class InvalidWindowError(ClipError, ValueError):
    """Raised when a clip window is inverted or has non-finite bounds."""

    pass


class DegenerateIntersectionError(ClipError, ArithmeticError):
    """Raised when a boundary intersection would divide by zero.

    Trivial reject catches every segment parallel to and outside a
    boundary, so reaching this means an engine invariant was broken.
    """

    pass


class ClipConvergenceError(ClipError, RuntimeError):
    """Raised when refinement does not settle within the step budget."""

    pass
