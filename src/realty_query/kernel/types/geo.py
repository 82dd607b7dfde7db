"""Geographic value objects and bounding-box math."""

from __future__ import annotations

import dataclasses
import math
from typing import Final

from realty_query.kernel.errors.domain import ValidationError

EARTH_RADIUS_METERS: Final = 6_371_000.0

_MIN_COS_LATITUDE: Final = 1e-12


@dataclasses.dataclass(frozen=True, slots=True)
class Coordinates:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValidationError(f"Latitude out of range: {self.latitude!r}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValidationError(f"Longitude out of range: {self.longitude!r}")


@dataclasses.dataclass(frozen=True, slots=True)
class CoordinateBoundary:
    """South-west / north-east corners of a latitude-longitude box.

    Boxes never wrap the antimeridian: ``south_west`` is component-wise
    less than or equal to ``north_east``.
    """

    south_west: Coordinates
    north_east: Coordinates

    def __post_init__(self) -> None:
        if self.south_west.latitude > self.north_east.latitude:
            raise ValidationError("South-west latitude must not exceed north-east latitude")
        if self.south_west.longitude > self.north_east.longitude:
            raise ValidationError("South-west longitude must not exceed north-east longitude")

    def contains(self, point: Coordinates) -> bool:
        return (
            self.south_west.latitude <= point.latitude <= self.north_east.latitude
            and self.south_west.longitude <= point.longitude <= self.north_east.longitude
        )

    @classmethod
    def from_center_and_radius(cls, center: Coordinates, radius_meters: float) -> "CoordinateBoundary":
        """Square box extending *radius_meters* north, south, east and west of *center*.

        The radius becomes an angular distance on a sphere of
        ``EARTH_RADIUS_METERS``.  A degree of longitude shrinks with the
        cosine of the latitude, so the longitude delta grows away from the
        equator; at the poles the box spans every longitude.  Corners are
        clamped to the valid coordinate range.
        """
        if radius_meters < 0:
            raise ValidationError("radius_meters must be >= 0")

        lat_delta = math.degrees(radius_meters / EARTH_RADIUS_METERS)
        cos_lat = math.cos(math.radians(center.latitude))
        if cos_lat < _MIN_COS_LATITUDE:
            lon_delta = 180.0
        else:
            lon_delta = min(math.degrees(radius_meters / (EARTH_RADIUS_METERS * cos_lat)), 180.0)

        return cls(
            south_west=Coordinates(
                latitude=max(center.latitude - lat_delta, -90.0),
                longitude=max(center.longitude - lon_delta, -180.0),
            ),
            north_east=Coordinates(
                latitude=min(center.latitude + lat_delta, 90.0),
                longitude=min(center.longitude + lon_delta, 180.0),
            ),
        )


__all__ = ["EARTH_RADIUS_METERS", "CoordinateBoundary", "Coordinates"]
