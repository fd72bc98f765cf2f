"""core package."""

from .basemap import BaseMap
from .distance import DistanceAlg
from .point import Point

__all__ = ["BaseMap", "DistanceAlg", "Point"]
