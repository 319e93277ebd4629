"""
Errors raised while turning a route description into a Route.

Resolution is all-or-nothing: any of these aborts the whole call and the
caller must discard whatever was being built.
"""

from typing import Optional


class RoutePlotterError(Exception):
    """Base class for all route resolution failures."""

    def __init__(self, message: str, token: Optional[str] = None):
        """
        Initialize the error.

        Args:
            message: Human-readable message shown to the operator
            token: Offending token, if a single one can be named
        """
        super().__init__(message)
        self.message = message
        self.token = token

    def __str__(self) -> str:
        return self.message


class MalformedInputError(RoutePlotterError):
    """Bad character, truncated symbol group, unmatched bracket or bad integer."""


class SemanticallyInvalidError(RoutePlotterError):
    """Well-formed token used where it makes no sense (e.g. runway mid-route)."""


class UnresolvedError(RoutePlotterError):
    """A point or airway name could not be found in the navigation data."""


class DiscontinuityError(RoutePlotterError):
    """A segment boundary is not part of the airway or procedure joining it."""
