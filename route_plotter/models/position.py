#!/usr/bin/env python3

import math
from typing import Tuple
from dataclasses import dataclass

@dataclass(frozen=True)
class Position:
    """
    A geographic position in decimal degrees.

    Positions are compared exactly: they are used to locate a resolved point
    inside the position list of an airway or procedure, and both come from the
    same navigation data.

    All distance calculations use nautical miles.
    All bearing calculations use degrees (0-360, where 0/360 is North, 90 is East, etc.)
    """

    lat: float  # Decimal degrees, positive North
    lon: float  # Decimal degrees, positive East

    EARTH_RADIUS_NM = 3440.065

    @classmethod
    def nan(cls) -> 'Position':
        """Position used for discontinuities."""
        return cls(math.nan, math.nan)

    def is_nan(self) -> bool:
        return math.isnan(self.lat) or math.isnan(self.lon)

    def point_from_bearing_distance(self, bearing: float, distance: float) -> 'Position':
        """
        Create a new Position from this position, a bearing and a distance.

        Args:
            bearing: Bearing in degrees (0-360)
            distance: Distance in nautical miles

        Returns:
            The great circle destination
        """
        R = self.EARTH_RADIUS_NM

        lat1 = math.radians(self.lat)
        lon1 = math.radians(self.lon)
        bearing_rad = math.radians(bearing)

        lat2 = math.asin(
            math.sin(lat1) * math.cos(distance / R) +
            math.cos(lat1) * math.sin(distance / R) * math.cos(bearing_rad)
        )

        lon2 = lon1 + math.atan2(
            math.sin(bearing_rad) * math.sin(distance / R) * math.cos(lat1),
            math.cos(distance / R) - math.sin(lat1) * math.sin(lat2)
        )

        return Position(lat=math.degrees(lat2), lon=math.degrees(lon2))

    def haversine_distance(self, other: 'Position') -> Tuple[float, float]:
        """
        Calculate the bearing and distance to another Position.

        Returns:
            Tuple of (bearing in degrees, distance in nautical miles)
        """
        lat1 = math.radians(self.lat)
        lon1 = math.radians(self.lon)
        lat2 = math.radians(other.lat)
        lon2 = math.radians(other.lon)

        dlat = lat2 - lat1
        dlon = lon2 - lon1

        a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        distance = self.EARTH_RADIUS_NM * c

        y = math.sin(dlon) * math.cos(lat2)
        x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
        bearing = (math.degrees(math.atan2(y, x)) + 360) % 360

        return bearing, distance

    def to_dms(self) -> Tuple[str, str]:
        """
        Convert to Degrees, Minutes, Seconds strings.

        Example: ("51° 28' 39.0\" N", "0° 27' 41.0\" W")
        """
        def decimal_to_dms(decimal_degrees: float, is_longitude: bool) -> str:
            if is_longitude:
                direction = 'E' if decimal_degrees >= 0 else 'W'
            else:
                direction = 'N' if decimal_degrees >= 0 else 'S'
            decimal_degrees = abs(decimal_degrees)
            degrees = int(decimal_degrees)
            decimal_minutes = (decimal_degrees - degrees) * 60
            minutes = int(decimal_minutes)
            seconds = round((decimal_minutes - minutes) * 60, 2)
            return f"{degrees}° {minutes}' {seconds}\" {direction}"

        return decimal_to_dms(self.lat, False), decimal_to_dms(self.lon, True)

    def __str__(self) -> str:
        return f"({self.lat}, {self.lon})"
