from .factory import RouteSourceFactory
from .base import RouteSource
from .coords import CoordsSource, decode_symbol
from .route import RouteGrammarSource, resolve_route
from .route_grammar import tokenize, classify_point, parse_coordinate, parse_hold, Point, RouteTokens
from .resolver import NavResolver, Resolution
from .stitcher import PathStitcher

# Register the command sources
RouteSourceFactory.register_source('coords', CoordsSource)
RouteSourceFactory.register_source('route', RouteGrammarSource)

__all__ = [
    'RouteSourceFactory',
    'RouteSource',
    'CoordsSource',
    'RouteGrammarSource',
    'resolve_route',
    'decode_symbol',
    'tokenize',
    'classify_point',
    'parse_coordinate',
    'parse_hold',
    'Point',
    'RouteTokens',
    'NavResolver',
    'Resolution',
    'PathStitcher',
]
