"""
Data models for the route_plotter library.

This package contains the resolved route types (Route, Node, Hold), the
Position used throughout, and the navigation database consumed by the
route resolver.
"""

from .position import Position
from .route import Route, Node, Hold
from .navdata import NavDatabase, NavEntity, EntityType

__all__ = [
    'Position',
    'Route',
    'Node',
    'Hold',
    'NavDatabase',
    'NavEntity',
    'EntityType',
]
