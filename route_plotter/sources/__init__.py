"""
Navigation data sources.

Sources turn external navigation data into a NavDatabase snapshot that
route sources enumerate while resolving a route.
"""

from .tabular import TabularNavSource

__all__ = ['TabularNavSource']
