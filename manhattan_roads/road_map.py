"""
A simple character-grid rendering of a road network.

The origin is the north-west corner; x grows to the east and y grows to the
south. The text representation draws a ruled border around the grid.
"""

import logging
from dataclasses import replace
from typing import List, Optional, Tuple

import numpy as np

from .config import MapConfig
from .intersection import Intersection
from .renderable import Renderable
from .street import Street

logger = logging.getLogger(__name__)


class RoadMap:
    """Ordered registry of road objects plus the character buffer they draw on."""

    def __init__(self, width: int, height: int, config: Optional[MapConfig] = None):
        """
        Initialize an empty map.

        Args:
            width: Number of columns (one more than the largest x)
            height: Number of rows (one more than the largest y)
            config: Glyphs and ruler settings; its dimensions are replaced by
                `width` and `height`

        Raises:
            ValueError: if a dimension is not positive
        """
        if config is None:
            config = MapConfig(width=width, height=height)
        elif (config.width, config.height) != (width, height):
            config = replace(config, width=width, height=height)
        self.config = config

        self._width = width
        self._height = height
        self._objects: List[Renderable] = []

        # Row-major: grid[y, x]
        self.grid = np.full((height, width), config.blank_glyph, dtype="<U1")

    @classmethod
    def from_config(cls, config: MapConfig) -> "RoadMap":
        """Create a map sized by `config`."""
        return cls(config.width, config.height, config)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height); the transpose of `grid.shape`."""
        return (self._width, self._height)

    @property
    def objects(self) -> Tuple[Renderable, ...]:
        """Registered objects in registration order."""
        return tuple(self._objects)

    def __len__(self):
        return len(self._objects)

    def register(self, road_object: Renderable) -> None:
        """
        Register an object so it is drawn whenever the map is rendered.

        Raises:
            TypeError: if `road_object` cannot draw itself on the map
        """
        if not isinstance(road_object, Renderable):
            raise TypeError(
                f"Only road objects can be registered, not {type(road_object).__name__}"
            )
        self._objects.append(road_object)

    def intersections(self) -> List[Intersection]:
        """Registered intersections, first registration order, no repeats."""
        return self._unique(Intersection)

    def streets(self) -> List[Street]:
        """Registered streets, first registration order, no repeats."""
        return self._unique(Street)

    def _unique(self, kind: type) -> List[Renderable]:
        seen = set()
        result = []
        for obj in self._objects:
            if isinstance(obj, kind) and id(obj) not in seen:
                seen.add(id(obj))
                result.append(obj)
        return result

    def clear(self) -> None:
        """Reset every cell of the buffer to blank."""
        self.grid.fill(self.config.blank_glyph)

    def draw(self) -> np.ndarray:
        """Clear the buffer and ask each registered object to draw itself."""
        self.clear()
        for road_object in self._objects:
            road_object.draw_on_map(self.grid, self.config)
        logger.debug("Drew %d objects on %dx%d map", len(self._objects), self._width, self._height)
        return self.grid

    def _ruler_mark(self, index: int) -> str:
        interval = self.config.ruler_interval
        if index % interval == 0:
            return str(index // interval)
        return " "

    def render(self) -> str:
        """
        Redraw the map and return it as bordered text.

        A ruler runs along the top and left edges, one digit every
        `ruler_interval` cells.
        """
        self.draw()
        cfg = self.config
        rule = " " + cfg.border_glyph * (self._width + 2)

        lines = [""]
        lines.append("  " + "".join(self._ruler_mark(x) for x in range(self._width)))
        lines.append(rule)
        for y in range(self._height):
            row = "".join(self.grid[y])
            lines.append(f"{self._ruler_mark(y)}{cfg.wall_glyph}{row}{cfg.wall_glyph}")
        lines.append(rule)
        return "\n".join(lines)

    def __str__(self):
        return self.render()
