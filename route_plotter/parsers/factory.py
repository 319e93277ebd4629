from typing import Dict, Type, List
from .base import RouteSource
from ..config import DEFAULT_SOURCE

class RouteSourceFactory:
    """Factory for creating route sources based on the command keyword."""

    _sources: Dict[str, Type[RouteSource]] = {}

    @classmethod
    def register_source(cls, keyword: str, source_class: Type[RouteSource]) -> None:
        """
        Register a source for a command keyword.

        Args:
            keyword: Keyword following the command prefix (e.g., 'coords')
            source_class: Source class to register
        """
        cls._sources[keyword] = source_class

    @classmethod
    def has_source(cls, keyword: str) -> bool:
        return keyword in cls._sources

    @classmethod
    def get_source(cls, keyword: str, navdata=None) -> RouteSource:
        """
        Get a source for a command keyword.

        Args:
            keyword: Command keyword
            navdata: Navigation data handed to sources that resolve names

        Returns:
            RouteSource instance

        Raises:
            ValueError: If no source is registered for the keyword and no default source is available
        """
        source_class = cls._sources.get(keyword)
        if source_class is None:
            # Unknown keywords are treated as the start of a route
            source_class = cls._sources.get(DEFAULT_SOURCE)
            if source_class is None:
                raise ValueError(f"No source registered for keyword: {keyword} and no default source available")
        if getattr(source_class, 'needs_navdata', False):
            return source_class(navdata)
        return source_class()

    @classmethod
    def get_supported_keywords(cls) -> List[str]:
        """
        Get list of registered keywords.

        Returns:
            List of keywords, sorted
        """
        return sorted(cls._sources.keys())
