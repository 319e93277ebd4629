"""
Navigation data model.

The resolver only needs to enumerate entities once per call, so the database
is a plain in-memory collection. It offers a few chainable queries for callers
that want to inspect it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Iterator, List, Optional, Tuple, Union

from route_plotter.models.position import Position


class EntityType(Enum):
    """Kinds of navigation entities."""
    FIX = 'fix'
    VOR = 'vor'
    NDB = 'ndb'
    AIRPORT = 'airport'
    RUNWAY = 'runway'
    LOW_AIRWAY = 'low_airway'
    HIGH_AIRWAY = 'high_airway'
    SID = 'sid'
    STAR = 'star'

    @property
    def is_point(self) -> bool:
        return self in (EntityType.FIX, EntityType.VOR, EntityType.NDB, EntityType.AIRPORT)

    @property
    def is_airway(self) -> bool:
        return self in (EntityType.LOW_AIRWAY, EntityType.HIGH_AIRWAY)


@dataclass
class NavEntity:
    """
    One navigation entity.

    Position layout depends on the type:
    - fix, VOR, NDB, airport: a single position
    - runway: the two threshold positions, matching `runway_names`
    - airway, SID, STAR: ordered positions along the path

    For procedures `runway_names[0]` is the runway the procedure belongs to
    (may be empty); for runways it holds both end identifiers.
    """
    entity_type: EntityType
    name: str
    positions: List[Position] = field(default_factory=list)
    airport_name: Optional[str] = None
    runway_names: Tuple[str, ...] = ()

    def position(self, index: int = 0) -> Optional[Position]:
        """Position at `index`, or None past the end."""
        if 0 <= index < len(self.positions):
            return self.positions[index]
        return None

    def runway_name(self, index: int = 0) -> str:
        """Runway identifier at `index`, or an empty string."""
        if 0 <= index < len(self.runway_names):
            return self.runway_names[index]
        return ''

    def __repr__(self) -> str:
        return f"NavEntity(type={self.entity_type.value}, name={self.name!r}, positions={len(self.positions)})"


class NavDatabase:
    """
    In-memory navigation database.

    Examples:
        navdata.of_type(EntityType.FIX).named('WOD').first()
        navdata.where(airport_name='EGLL').count()
    """

    def __init__(self, entities: Optional[Iterable[NavEntity]] = None):
        self._entities: List[NavEntity] = list(entities) if entities is not None else []

    def add(self, entity: NavEntity) -> None:
        self._entities.append(entity)

    def extend(self, entities: Iterable[NavEntity]) -> None:
        self._entities.extend(entities)

    def filter(self, predicate: Callable[[NavEntity], bool]) -> 'NavDatabase':
        """New database with the entities matching `predicate`."""
        return NavDatabase(entity for entity in self._entities if predicate(entity))

    def where(self, **kwargs) -> 'NavDatabase':
        """New database with entities whose attributes equal all given values."""
        def matches(entity: NavEntity) -> bool:
            return all(getattr(entity, key, None) == value for key, value in kwargs.items())
        return self.filter(matches)

    def of_type(self, *entity_types: EntityType) -> 'NavDatabase':
        return self.filter(lambda entity: entity.entity_type in entity_types)

    def named(self, name: str) -> 'NavDatabase':
        return self.where(name=name)

    def first(self) -> Optional[NavEntity]:
        return self._entities[0] if self._entities else None

    def all(self) -> List[NavEntity]:
        return list(self._entities)

    def count(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[NavEntity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __repr__(self) -> str:
        return f"NavDatabase({len(self._entities)} entities)"


NavProvider = Callable[[], Iterable[NavEntity]]
NavSource = Union[Iterable[NavEntity], NavProvider]


def reiterable(navdata: Optional[NavSource]) -> NavSource:
    """
    Make navigation data safe to enumerate once per route command.

    Providers (zero-argument callables) and re-iterable collections are kept
    as they are; a one-shot iterator such as a generator is read once into a
    NavDatabase.
    """
    if navdata is None:
        return NavDatabase()
    if callable(navdata):
        return navdata
    if iter(navdata) is navdata:
        return NavDatabase(navdata)
    return navdata


def current_entities(navdata: NavSource) -> Iterable[NavEntity]:
    """Fresh enumeration of the navigation data for one resolution call."""
    return navdata() if callable(navdata) else navdata
