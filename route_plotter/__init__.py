"""
Route plotting library for radar displays.

This package turns operator route descriptions into resolved sequences of
geographic points, ready to be drawn over a radar screen.

The main public API includes:
- RoutePlotter: `.plot` command dispatch and named route store
- resolve_route: Resolve an ICAO-like route string against navigation data
- CoordsSource: Decoder for the legacy packed coordinate format
- Route, Node, Hold: Resolved route models
- NavDatabase, NavEntity: Navigation data consumed by the resolver
- TabularNavSource: Build navigation data from pandas data frames
"""

__version__ = '0.4.1'

from .models import Position, Route, Node, Hold, NavDatabase, NavEntity, EntityType
from .parsers import RouteSourceFactory, CoordsSource, RouteGrammarSource, resolve_route
from .plotter import RoutePlotter
from .store import RouteStore
from .sources.tabular import TabularNavSource

__all__ = [
    'RoutePlotter',
    'RouteStore',
    'resolve_route',
    'RouteSourceFactory',
    'CoordsSource',
    'RouteGrammarSource',
    'Position',
    'Route',
    'Node',
    'Hold',
    'NavDatabase',
    'NavEntity',
    'EntityType',
    'TabularNavSource',
]
