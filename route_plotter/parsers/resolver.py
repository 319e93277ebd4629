"""
Navigation resolver.

Makes a single pass over the navigation data and records everything the
stitcher needs for one route: point positions, airway position lists, the SID
and STAR geometries and the airport positions of the first and last point.
Nothing is cached between calls.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .route_grammar import RouteTokens, Point
from ..models.navdata import NavEntity, EntityType
from ..models.position import Position

logger = logging.getLogger(__name__)


@dataclass
class Resolution:
    """
    Everything resolved for one route.

    Attributes:
        point_positions: Position by point name (None if not found yet)
        airway_positions: Accumulated positions by connector name
        sid: SID geometry joining the first two points
        star: STAR geometry joining the last two points, ending at the
            destination airport position
        departure_position: Airport reference point or runway threshold of the first point
        arrival_position: Airport reference point or runway threshold of the last point
    """
    point_positions: Dict[str, Optional[Position]] = field(default_factory=dict)
    airway_positions: Dict[str, List[Position]] = field(default_factory=dict)
    sid: List[Position] = field(default_factory=list)
    star: List[Position] = field(default_factory=list)
    departure_position: Optional[Position] = None
    arrival_position: Optional[Position] = None


class NavResolver:
    """Resolve the names of a tokenized route against navigation data."""

    def __init__(self, tokens: RouteTokens):
        self.tokens = tokens

    def resolve(self, entities: Iterable[NavEntity]) -> Resolution:
        """
        Scan `entities` once and fill a Resolution.

        Unresolved names are not errors here; the stitcher reports the ones it needs.
        """
        result = Resolution()
        for point in self.tokens.points:
            # Points sharing a name share the first classification's position
            result.point_positions.setdefault(point.name, point.position)
        for connector in self.tokens.named_connectors():
            result.airway_positions.setdefault(connector, [])

        scanned = 0
        for entity in entities:
            scanned += 1
            entity_type = entity.entity_type

            if entity_type == EntityType.AIRPORT:
                self._match_airport(entity, result)
            if entity_type.is_point:
                self._match_point(entity, result)
            elif entity_type == EntityType.RUNWAY:
                self._match_runway(entity, result)
            elif entity_type == EntityType.SID:
                self._match_procedure(entity, self.tokens.first, self.tokens.departure_connector, result.sid)
            elif entity_type == EntityType.STAR:
                self._match_procedure(entity, self.tokens.last, self.tokens.arrival_connector, result.star)
            elif entity_type.is_airway:
                self._match_airway(entity, result)

        if result.star and result.arrival_position is not None:
            result.star.append(result.arrival_position)

        logger.debug(
            f"Scanned {scanned} navigation entities: "
            f"{sum(1 for p in result.point_positions.values() if p is not None)}/{len(result.point_positions)} points, "
            f"sid={len(result.sid)}, star={len(result.star)}"
        )
        return result

    def _terminals(self):
        """Yield (point, is_departure) for the first and last point."""
        yield self.tokens.first, True
        yield self.tokens.last, False

    @staticmethod
    def _set_airport_position(result: Resolution, is_departure: bool, position: Position) -> None:
        if is_departure:
            result.departure_position = position
        else:
            result.arrival_position = position

    def _match_airport(self, entity: NavEntity, result: Resolution) -> None:
        position = entity.position(0)
        if position is None:
            return
        for point, is_departure in self._terminals():
            if not point.runway and point.name == entity.name:
                self._set_airport_position(result, is_departure, position)

    def _match_point(self, entity: NavEntity, result: Resolution) -> None:
        if entity.name not in result.point_positions:
            return
        position = entity.position(0)
        if position is not None:
            # Last match in scan order wins for duplicate names
            result.point_positions[entity.name] = position

    def _match_runway(self, entity: NavEntity, result: Resolution) -> None:
        airport = (entity.airport_name or '')[:4]
        for point, is_departure in self._terminals():
            if point.runway is None or point.name[:4] != airport:
                continue
            for end in range(2):
                if point.runway == entity.runway_name(end):
                    position = entity.position(end)
                    if position is not None:
                        self._set_airport_position(result, is_departure, position)

    @staticmethod
    def _match_procedure(entity: NavEntity, point: Point, connector: Optional[str], out: List[Position]) -> None:
        # First match wins
        if out or connector is None:
            return
        if entity.airport_name != point.name:
            return
        if point.runway and point.runway != entity.runway_name(0):
            return
        if entity.name != connector:
            return
        out.extend(entity.positions)

    @staticmethod
    def _match_airway(entity: NavEntity, result: Resolution) -> None:
        positions = result.airway_positions.get(entity.name)
        if positions is None:
            return
        for position in entity.positions:
            if not positions or position != positions[-1]:
                positions.append(position)
