"""
Path stitcher.

Walks the points of a resolved route in order. Each point contributes one
node; a named connector before it also contributes the positions strictly
between the previous point and this one along the airway or procedure, in
forward or reverse order depending on which end comes first.
"""

import logging
from typing import List, Optional

from .resolver import Resolution
from .route_grammar import RouteTokens
from ..errors import UnresolvedError, DiscontinuityError
from ..models.position import Position
from ..models.route import Route, Node

logger = logging.getLogger(__name__)


def _index_of(positions: List[Position], target: Position) -> Optional[int]:
    for index, position in enumerate(positions):
        if position == target:
            return index
    return None


class PathStitcher:
    """Build the final Route from route tokens and their resolution."""

    def __init__(self, tokens: RouteTokens, resolution: Resolution):
        self.tokens = tokens
        self.resolution = resolution

    def stitch(self) -> Route:
        """
        Raises:
            UnresolvedError: If a needed point or airway was not found
            DiscontinuityError: If a point is not on the airway or procedure joining it
        """
        route = Route()
        points = self.tokens.points
        last = len(points) - 1
        segment_start: Optional[Position] = None

        for i, point in enumerate(points):
            segment_end = self._endpoint(i)

            connector = self.tokens.connectors[i - 1] if i > 0 else None
            if connector is not None:
                geometry = self._geometry(i, connector)
                is_sid = geometry is self.resolution.sid
                is_star = geometry is self.resolution.star

                if is_sid:
                    start_index = 0
                else:
                    start_index = _index_of(geometry, segment_start)
                    if start_index is None:
                        raise DiscontinuityError(
                            f"discontinuity ({points[i - 1].name} to {connector})",
                            token=connector,
                        )

                if is_star:
                    end_index = len(geometry) - 1
                else:
                    end_index = _index_of(geometry, segment_end)
                    if end_index is None:
                        raise DiscontinuityError(
                            f"discontinuity ({connector} to {point.name})",
                            token=connector,
                        )

                if start_index < end_index:
                    interior = geometry[start_index + 1:end_index]
                else:
                    interior = geometry[end_index + 1:start_index][::-1]
                route.extend([Node.at(position) for position in interior])

            route.append(Node.at(segment_end, label=point.label, hold=point.hold))
            segment_start = segment_end

        logger.debug(f"Stitched {len(points)} points into {len(route)} nodes")
        return route

    def _endpoint(self, i: int) -> Position:
        """Position where the segment into point `i` ends."""
        points = self.tokens.points
        resolution = self.resolution

        if i == 0 and resolution.sid:
            position = resolution.departure_position
        elif i == len(points) - 1 and resolution.star:
            position = resolution.arrival_position
        else:
            position = resolution.point_positions.get(points[i].name)

        if position is None or position.is_nan():
            raise UnresolvedError(f"could not find point '{points[i].name}'", token=points[i].name)
        return position

    def _geometry(self, i: int, connector: str) -> List[Position]:
        """Positions of the airway or procedure leading into point `i`."""
        resolution = self.resolution
        if i == 1 and resolution.sid:
            return resolution.sid
        if i == len(self.tokens.points) - 1 and resolution.star:
            return resolution.star

        positions = resolution.airway_positions.get(connector)
        if not positions:
            raise UnresolvedError(f"could not find airway '{connector}'", token=connector)
        return positions
