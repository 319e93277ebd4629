"""Tests for the named route store."""

import pytest

from route_plotter.models.route import Route, Node
from route_plotter.store import RouteStore


def make_route(*lons):
    return Route([Node(50.0, lon) for lon in lons])


class TestRouteStore:
    """Tests for RouteStore."""

    def test_counter_names(self):
        store = RouteStore()
        assert [store.next_name() for _ in range(3)] == ['1', '2', '3']

    def test_put_and_get(self):
        store = RouteStore()
        store.put('A', make_route(0.0, 1.0))

        assert 'A' in store
        assert len(store.get('A')) == 2
        assert store.get('B') is None

    def test_put_replaces(self):
        store = RouteStore()
        store.put('A', make_route(0.0))
        store.put('A', make_route(0.0, 1.0, 2.0))
        assert len(store) == 1
        assert len(store.get('A')) == 3

    def test_empty_route_is_rejected(self):
        store = RouteStore()
        with pytest.raises(ValueError):
            store.put('A', Route())
        assert 'A' not in store

    def test_remove(self):
        store = RouteStore()
        store.put('A', make_route(0.0))
        store.put('B', make_route(1.0))

        assert store.remove(['A', 'MISSING']) == ['A']
        assert store.names() == ['B']

    def test_clear(self):
        store = RouteStore()
        store.put('A', make_route(0.0))
        store.clear()
        assert len(store) == 0

    def test_iteration_order(self):
        store = RouteStore()
        store.put('2', make_route(0.0))
        store.put('1', make_route(1.0))
        assert [name for name, _ in store] == ['2', '1']
