"""Kernel value-object types – public re-export surface.

Modules:
  geo.py – Coordinates, CoordinateBoundary
"""

from realty_query.kernel.types.geo import EARTH_RADIUS_METERS, CoordinateBoundary, Coordinates

__all__ = ["EARTH_RADIUS_METERS", "CoordinateBoundary", "Coordinates"]
