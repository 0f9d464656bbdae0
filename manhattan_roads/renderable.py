"""
Capability contract shared by everything that lives in a road network.
"""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from .config import MapConfig
from .direction import Direction


class Renderable(ABC):
    """
    An object in the road network.

    Objects know how to draw themselves onto the character buffer of a
    RoadMap, how to connect to a compatible neighbour at a compass point, and
    what is connected to them at each compass point. The set of concrete
    kinds is closed: Intersection and Street.
    """

    @abstractmethod
    def draw_on_map(self, buffer: np.ndarray, config: Optional[MapConfig] = None) -> None:
        """
        Stamp this object's glyphs onto `buffer` (indexed [y, x]).

        Cells that fall outside the buffer are skipped. Cells that are not part
        of this object's representation are left untouched.
        """

    @abstractmethod
    def connect_to(self, other: "Renderable", direction: Direction) -> bool:
        """
        Connect `other` at `direction` of this object.

        Returns:
            True if the link exists afterwards, False if the attachment point
            was not available

        Raises:
            TypeError: if `other` is not a compatible kind of object
        """

    @abstractmethod
    def connected_road(self, direction: Direction) -> Optional["Renderable"]:
        """Return whatever is connected at `direction`, or None."""


def plot_cell(buffer: np.ndarray, x: int, y: int, glyph: str) -> bool:
    """
    Write `glyph` at (x, y) if the cell lies on the buffer.

    Returns:
        True if the cell was written
    """
    height, width = buffer.shape
    if 0 <= x < width and 0 <= y < height:
        buffer[y, x] = glyph
        return True
    return False


def check_direction(direction) -> Direction:
    """Reject anything that is not a Direction."""
    if not isinstance(direction, Direction):
        raise TypeError(f"Expected a Direction, got {type(direction).__name__}")
    return direction
