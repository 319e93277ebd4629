"""Named route store owned by the command layer."""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .models.route import Route

logger = logging.getLogger(__name__)


class RouteStore:
    """
    Mapping from route name to Route, with automatic naming.

    Unnamed routes get the next value of a counter ("1", "2", ...). The
    counter advances on every call to next_name(), whether or not a route is
    stored afterwards.
    """

    def __init__(self):
        self._routes: Dict[str, Route] = {}
        self._counter = 0

    def next_name(self) -> str:
        self._counter += 1
        return str(self._counter)

    def put(self, name: str, route: Route) -> None:
        """
        Store `route` under `name`, replacing any existing route.

        Raises:
            ValueError: If the route is empty
        """
        if not route:
            raise ValueError(f"Refusing to store empty route '{name}'")
        replaced = name in self._routes
        self._routes[name] = route
        logger.info(f"{'Replaced' if replaced else 'Stored'} route '{name}' ({len(route)} nodes)")

    def get(self, name: str) -> Optional[Route]:
        return self._routes.get(name)

    def remove(self, names: Iterable[str]) -> List[str]:
        """
        Remove the named routes.

        Returns:
            Names that were actually removed
        """
        removed = [name for name in names if self._routes.pop(name, None) is not None]
        if removed:
            logger.info(f"Removed routes: {', '.join(removed)}")
        return removed

    def clear(self) -> None:
        logger.info(f"Cleared {len(self._routes)} routes")
        self._routes.clear()

    def names(self) -> List[str]:
        return list(self._routes.keys())

    def items(self) -> Iterator[Tuple[str, Route]]:
        return iter(list(self._routes.items()))

    def __contains__(self, name: str) -> bool:
        return name in self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Tuple[str, Route]]:
        return self.items()
