"""Tests for Position."""

import math

import pytest

from route_plotter.models.position import Position


class TestPosition:
    """Tests for Position."""

    def test_equality_is_exact(self):
        assert Position(50.0, 1.0) == Position(50.0, 1.0)
        assert Position(50.0, 1.0) != Position(50.0, 1.0000001)
        assert len({Position(50.0, 1.0), Position(50.0, 1.0)}) == 1

    def test_nan(self):
        position = Position.nan()
        assert position.is_nan()
        assert math.isnan(position.lat)
        assert not Position(0.0, 0.0).is_nan()

    def test_bearing_and_distance(self):
        """One degree of latitude is sixty nautical miles."""
        bearing, distance = Position(50.0, 0.0).haversine_distance(Position(51.0, 0.0))
        assert bearing == pytest.approx(0.0, abs=1e-6)
        assert distance == pytest.approx(60.04, abs=0.01)

    def test_point_from_bearing_distance(self):
        origin = Position(50.0, 0.0)
        target = origin.point_from_bearing_distance(90, 30)
        bearing, distance = origin.haversine_distance(target)

        assert target.lon > 0
        assert distance == pytest.approx(30, abs=1e-6)
        assert bearing == pytest.approx(90, abs=1e-6)

    def test_to_dms(self):
        lat, lon = Position(51.5, -0.25).to_dms()
        assert lat == "51° 30' 0.0\" N"
        assert lon == "0° 15' 0.0\" W"

    def test_str(self):
        assert str(Position(51.5, -0.25)) == '(51.5, -0.25)'
