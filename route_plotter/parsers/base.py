from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..models.route import Route

class RouteSource(ABC):
    """Base interface for route description parsers."""

    @abstractmethod
    def parse(self, text: str) -> Tuple[Optional[str], Route]:
        """
        Parse a route description.

        Args:
            text: Argument text following the source keyword

        Returns:
            Tuple of (route name given in the text or None, resolved Route)

        Raises:
            RoutePlotterError: If the description cannot be fully resolved
        """
        pass

    def help_arguments(self) -> str:
        """Argument synopsis shown in the help text."""
        return ""

    def help_description(self) -> str:
        """One-line description shown in the help text."""
        return "null source"
