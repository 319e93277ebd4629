"""Route data models."""

import math
from dataclasses import dataclass, field
from typing import Optional, List, Iterator, Union

from route_plotter.models.position import Position


@dataclass
class Hold:
    """
    Racetrack holding pattern attached to a route node.

    Attributes:
        length: Leg length in nautical miles (zero is kept as-is)
        course: Inbound course in degrees
        left_turns: True for a left-hand pattern
    """
    length: float
    course: float
    left_turns: bool = False

    def inbound_leg_start(self, fix: Position) -> Position:
        """
        Position where the inbound leg starts, i.e. `length` nm from the
        holding fix on the reciprocal of the inbound course.
        """
        return fix.point_from_bearing_distance((self.course + 180.0) % 360.0, self.length)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            'length': self.length,
            'course': self.course,
            'left_turns': self.left_turns,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Hold':
        """Create from dictionary."""
        return cls(
            length=float(data['length']),
            course=float(data['course']),
            left_turns=bool(data.get('left_turns', False)),
        )

    def __str__(self) -> str:
        turns = "L" if self.left_turns else "R"
        return f"{self.course:03.0f}{turns}{self.length:g}"


@dataclass
class Node:
    """
    One point of a Route.

    A node with NaN latitude and longitude is a discontinuity: it breaks the
    route into separately drawn polylines and carries no hold, highlight or
    label.
    """
    lat: float
    lon: float
    highlight: bool = False
    label: Optional[str] = None
    hold: Optional[Hold] = None

    def __post_init__(self):
        if math.isnan(self.lat) != math.isnan(self.lon):
            raise ValueError(f"Latitude and longitude must both be NaN or both finite, got ({self.lat}, {self.lon})")
        if self.is_discontinuity() and (self.highlight or self.label is not None or self.hold is not None):
            raise ValueError("A discontinuity cannot carry a hold, highlight or label")

    @classmethod
    def discontinuity(cls) -> 'Node':
        return cls.at(Position.nan())

    @classmethod
    def at(cls, position: Position, **kwargs) -> 'Node':
        return cls(position.lat, position.lon, **kwargs)

    def is_discontinuity(self) -> bool:
        return math.isnan(self.lat) and math.isnan(self.lon)

    @property
    def position(self) -> Position:
        return Position(self.lat, self.lon)

    def to_dict(self) -> dict:
        """Serialize to dictionary. Discontinuities have null coordinates."""
        if self.is_discontinuity():
            return {'latitude': None, 'longitude': None}
        data = {
            'latitude': self.lat,
            'longitude': self.lon,
        }
        if self.highlight:
            data['highlight'] = True
        if self.label is not None:
            data['label'] = self.label
        if self.hold is not None:
            data['hold'] = self.hold.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'Node':
        """Create from dictionary."""
        if data.get('latitude') is None or data.get('longitude') is None:
            return cls.discontinuity()
        return cls(
            lat=float(data['latitude']),
            lon=float(data['longitude']),
            highlight=data.get('highlight', False),
            label=data.get('label'),
            hold=Hold.from_dict(data['hold']) if data.get('hold') else None,
        )

    def __str__(self) -> str:
        if self.is_discontinuity():
            return "-"
        result = self.label or str(self.position)
        if self.hold:
            result += f"/{self.hold}"
        if self.highlight:
            result += "*"
        return result


@dataclass
class Route:
    """
    Ordered sequence of nodes, possibly interrupted by discontinuities.

    An empty route means nothing was resolved and should not be stored.
    """
    nodes: List[Node] = field(default_factory=list)

    def append(self, node: Node) -> None:
        self.nodes.append(node)

    def extend(self, nodes: List[Node]) -> None:
        self.nodes.extend(nodes)

    def polylines(self) -> List[List[Node]]:
        """
        Split the route at discontinuities.

        Returns:
            Maximal runs of consecutive non-discontinuity nodes, each to be
            drawn as one connected polyline.
        """
        lines: List[List[Node]] = []
        current: List[Node] = []
        for node in self.nodes:
            if node.is_discontinuity():
                if current:
                    lines.append(current)
                current = []
            else:
                current.append(node)
        if current:
            lines.append(current)
        return lines

    def distance_nm(self) -> float:
        """Great circle length in nautical miles, not counting gaps at discontinuities."""
        total = 0.0
        for line in self.polylines():
            for start, end in zip(line, line[1:]):
                _, distance = start.position.haversine_distance(end.position)
                total += distance
        return total

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __getitem__(self, index: Union[int, slice]):
        return self.nodes[index]

    def __bool__(self) -> bool:
        return bool(self.nodes)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {'nodes': [node.to_dict() for node in self.nodes]}

    @classmethod
    def from_dict(cls, data: dict) -> 'Route':
        """Create from dictionary."""
        return cls(nodes=[Node.from_dict(node) for node in data.get('nodes', [])])

    def __str__(self) -> str:
        return " ".join(str(node) for node in self.nodes)
