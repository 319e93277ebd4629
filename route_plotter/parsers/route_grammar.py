"""
Tokenizer and point classifier for ICAO-like route strings.

A route is a sequence of tokens alternating point, connector, point, ...
optionally preceded by a route name:

    [NAME] EGLL/27L CPT5J CPT L9 KENET DCT WOD/090L3 DCT 5130N00030W

Connectors are either DCT or the name of an airway or procedure.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..config import DIRECT_CONNECTOR, DEFAULT_HOLD_LENGTH_NM
from ..errors import MalformedInputError, SemanticallyInvalidError
from ..models.position import Position
from ..models.route import Hold

logger = logging.getLogger(__name__)

HOLD_PATTERN = re.compile(r'^([0-9]{3})([LR])([0-9]*)$', re.IGNORECASE)
HOLD_PREFIX_PATTERN = re.compile(r'^([0-9]{3})(.)(.*)$')
COORDINATE_PATTERN = re.compile(r'^([0-9]+)([NS])([0-9]+)([EW])$')


@dataclass
class Point:
    """
    A point token of a route string.

    Attributes:
        name: Name to look up, or the coordinate literal
        runway: Runway designator, only on the first or last point
        hold: Hold parsed from a '/CCC[L|R][LEN]' suffix
        position: Position from a coordinate literal, if the name is one
    """
    name: str
    runway: Optional[str] = None
    hold: Optional[Hold] = None
    position: Optional[Position] = None

    @property
    def is_coordinate_shaped(self) -> bool:
        return '0' <= self.name[:1] <= '9'

    @property
    def label(self) -> Optional[str]:
        """Label for the resolved node; coordinate literals stay unlabeled."""
        return None if self.is_coordinate_shaped else self.name


@dataclass
class RouteTokens:
    """
    Classified tokens of a route string.

    `connectors[i]` joins `points[i]` and `points[i + 1]`; None means DCT.
    """
    points: List[Point] = field(default_factory=list)
    connectors: List[Optional[str]] = field(default_factory=list)
    name: Optional[str] = None

    @property
    def first(self) -> Point:
        return self.points[0]

    @property
    def last(self) -> Point:
        return self.points[-1]

    @property
    def departure_connector(self) -> Optional[str]:
        return self.connectors[0] if self.connectors else None

    @property
    def arrival_connector(self) -> Optional[str]:
        return self.connectors[-1] if self.connectors else None

    def named_connectors(self) -> List[str]:
        return [connector for connector in self.connectors if connector is not None]


def _parse_angle(digits: str) -> float:
    """
    Decode degrees followed by optional two-digit minutes and seconds.

    '51' -> 51, '5130' -> 51.5, '513045' -> 51.5125, '00030' -> 0.5
    """
    value = int(digits)
    angle = 0.0
    for _ in range(len(digits) // 2 - 1):
        angle += value % 100
        angle /= 60.0
        value //= 100
    return angle + value


def parse_coordinate(name: str) -> Optional[Position]:
    """
    Parse a coordinate literal such as '5130N00030W'.

    Returns:
        The Position, or None if `name` is not a coordinate literal
    """
    match = COORDINATE_PATTERN.match(name)
    if not match:
        return None

    lat_digits, lat_sign, lon_digits, lon_sign = match.groups()
    lat = _parse_angle(lat_digits)
    lon = _parse_angle(lon_digits)

    if lat_sign == 'S':
        lat = -lat
    if lon_sign == 'W':
        lon = -lon

    return Position(lat, lon)


def parse_hold(suffix: str) -> Optional[Hold]:
    """
    Parse a hold suffix 'CCC[L|R][LEN]'.

    Returns:
        The Hold, or None if the suffix is not hold-shaped (e.g. a runway)

    Raises:
        SemanticallyInvalidError: If the direction letter is not L or R
        MalformedInputError: If the length is not an integer
    """
    match = HOLD_PATTERN.match(suffix)
    if match:
        course, direction, length = match.groups()
        return Hold(
            length=float(length) if length else DEFAULT_HOLD_LENGTH_NM,
            course=float(course),
            left_turns=direction.upper() == 'L',
        )

    # Three digits plus more is a hold with a bad direction or length
    match = HOLD_PREFIX_PATTERN.match(suffix)
    if match:
        _, direction, _ = match.groups()
        if direction.upper() not in ('L', 'R'):
            raise SemanticallyInvalidError("invalid hold direction", token=suffix)
        raise MalformedInputError("invalid integer", token=suffix)

    return None


def classify_point(token: str, terminal: bool) -> Point:
    """
    Classify one point token.

    Args:
        token: The point token
        terminal: True for the first and last point of the route

    Returns:
        Point with name, runway or hold, and position for coordinate literals
    """
    name, sep, suffix = token.partition('/')
    point = Point(name=name)

    if sep:
        hold = parse_hold(suffix)
        if hold is not None:
            if hold.length == 0:
                logger.warning(f"Ignoring zero-length hold in '{token}'")
            else:
                point.hold = hold
        elif terminal:
            point.runway = suffix
        else:
            raise SemanticallyInvalidError("runway in nonterminal location", token=token)

    if point.is_coordinate_shaped:
        point.position = parse_coordinate(point.name)

    return point


def tokenize(tokens: List[str]) -> RouteTokens:
    """
    Split route tokens into points and connectors.

    An even number of tokens means the first one is the route name.

    Raises:
        MalformedInputError: If there is no point to plot
        SemanticallyInvalidError: If a point suffix is misplaced or invalid
    """
    result = RouteTokens()
    tokens = list(tokens)

    if len(tokens) % 2 == 0 and tokens:
        result.name = tokens.pop(0)
    if not tokens:
        raise MalformedInputError("missing route")

    last_index = len(tokens) - 1
    for index, token in enumerate(tokens):
        if index % 2 == 0:
            point = classify_point(token, terminal=index == 0 or index == last_index)
            result.points.append(point)
        elif token == DIRECT_CONNECTOR:
            result.connectors.append(None)
        else:
            result.connectors.append(token)

    logger.debug(
        f"Tokenized route {result.name!r}: {len(result.points)} points, "
        f"{len(result.named_connectors())} named connectors"
    )
    return result
