import logging
from typing import Iterable, Optional, Tuple

from .base import RouteSource
from .resolver import NavResolver
from .route_grammar import tokenize
from .stitcher import PathStitcher
from ..models.navdata import NavEntity, NavSource, reiterable, current_entities
from ..models.route import Route

logger = logging.getLogger(__name__)


def resolve_route(text: str, navdata: Iterable[NavEntity]) -> Tuple[Optional[str], Route]:
    """
    Resolve a route string against navigation data.

    Args:
        text: Route string, optionally preceded by a route name
        navdata: Navigation entities; enumerated exactly once

    Returns:
        Tuple of (route name or None, resolved Route)

    Raises:
        RoutePlotterError: If any part of the route cannot be resolved
    """
    tokens = tokenize(text.split())
    resolution = NavResolver(tokens).resolve(navdata)
    route = PathStitcher(tokens, resolution).stitch()
    return tokens.name, route


class RouteGrammarSource(RouteSource):
    """Plot a flight plan route."""

    needs_navdata = True

    def __init__(self, navdata: Optional[NavSource] = None):
        self.navdata = reiterable(navdata)

    def help_arguments(self) -> str:
        return "<ROUTE>"

    def help_description(self) -> str:
        return "Plot a flight plan route"

    def parse(self, text: str) -> Tuple[Optional[str], Route]:
        return resolve_route(text, current_entities(self.navdata))
