"""
Manhattan Road Network

Intersections and streets on a north/east/south/west grid, connected by a
cross-linking protocol and rendered onto a fixed-size character map.
"""

__version__ = "0.1.0"

from .direction import Direction
from .config import MapConfig
from .renderable import Renderable
from .street import Street, StreetState, Endpoint
from .intersection import Intersection
from .road_map import RoadMap
from .metrics import NetworkMetrics
from .validation import NetworkValidator

__all__ = [
    "Direction",
    "MapConfig",
    "Renderable",
    "Street",
    "StreetState",
    "Endpoint",
    "Intersection",
    "RoadMap",
    "NetworkMetrics",
    "NetworkValidator",
]
