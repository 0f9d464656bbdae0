"""
Streets: edges between exactly two intersections, with at most one turn.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, TYPE_CHECKING

import numpy as np

from .config import MapConfig, DEFAULT_CONFIG
from .direction import Direction
from .renderable import Renderable, plot_cell, check_direction

if TYPE_CHECKING:
    from .intersection import Intersection
    from .road_map import RoadMap

logger = logging.getLogger(__name__)


class StreetState(Enum):
    """How many ends of a street are attached."""

    EMPTY = "empty"
    HALF_OPEN = "half_open"
    CLOSED = "closed"


@dataclass(frozen=True)
class Endpoint:
    """One attached end of a street."""

    intersection: "Intersection"
    # Direction of travel from the street into the intersection
    entry: Direction
    # Position of the intersection when it was attached
    x: int
    y: int

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)


class Street(Renderable):
    """
    A street between two intersections.

    The first intersection attached is where construction starts, the second
    where it ends. If the entry directions at the two ends are not opposite,
    the street bends once; the turn point is computed when the second end is
    attached and never changes afterwards.
    """

    def __init__(self, road_map: Optional["RoadMap"] = None, name: str = ""):
        """
        Create an unconnected street.

        Args:
            road_map: Map to register with (optional)
            name: Display name
        """
        self.first: Optional[Endpoint] = None
        self.second: Optional[Endpoint] = None
        self._turn: Optional[Tuple[int, int]] = None
        self.name = name

        if road_map is not None:
            road_map.register(self)

    def __repr__(self):
        ends = [
            f"{e.position}->{e.entry}" for e in (self.first, self.second) if e is not None
        ]
        label = f" {self.name!r}" if self.name else ""
        return f"Street([{', '.join(ends)}]){label}"

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> StreetState:
        if self.first is None:
            return StreetState.EMPTY
        if self.second is None:
            return StreetState.HALF_OPEN
        return StreetState.CLOSED

    @property
    def is_open(self) -> bool:
        """True while at least one end is free."""
        return self.first is None or self.second is None

    @property
    def turn(self) -> Optional[Tuple[int, int]]:
        """Turn point (x, y), or None for a straight or unfinished street."""
        return self._turn

    @property
    def endpoints(self) -> List[Endpoint]:
        return [e for e in (self.first, self.second) if e is not None]

    def path(self) -> List[Tuple[int, int]]:
        """Corner points from the first end, through the turn, to the second."""
        points = [e.position for e in self.endpoints]
        if self._turn is not None:
            points.insert(1, self._turn)
        return points

    # ------------------------------------------------------------------
    # Connections
    # ------------------------------------------------------------------

    def connected_road(self, direction: Direction) -> Optional["Intersection"]:
        """Return the intersection entered by travelling `direction`, or None."""
        for end in self.endpoints:
            if end.entry == direction:
                return end.intersection
        return None

    def _is_attached(self, intersection: "Intersection", direction: Direction) -> bool:
        return any(
            end.intersection is intersection and end.entry == direction
            for end in self.endpoints
        )

    def _attach(self, intersection: "Intersection", direction: Direction) -> bool:
        """Fill the next free end. Both ends may not hold the same intersection."""
        end = Endpoint(intersection, direction, intersection.x, intersection.y)
        if self.first is None:
            self.first = end
        elif self.second is None and self.first.intersection is not intersection:
            self.second = end
        else:
            return False
        return True

    def connect_to(self, other: Renderable, direction: Direction) -> bool:
        """
        Attach an intersection, and have the intersection link back.

        Args:
            other: The intersection to attach
            direction: Direction of travel from this street into `other`

        Returns:
            True if the intersection is attached at `direction` afterwards

        Raises:
            TypeError: if `other` is not an Intersection
        """
        from .intersection import Intersection

        match other:
            case Intersection():
                pass
            case _:
                raise TypeError(
                    f"A Street can only connect to an Intersection, "
                    f"not {type(other).__name__}"
                )
        check_direction(direction)

        if self._is_attached(other, direction):
            return True
        if not self.is_open:
            logger.debug("%r: no free end for %r", self, other)
            return False

        if not self._attach(other, direction):
            logger.debug("%r: %r is already attached at the other end", self, other)
            return False
        logger.debug("%r: linked %r entering %s", self, other, direction)
        if not self.is_open:
            self._calculate_turn()

        # The intersection attaches at the side facing back along the street
        return other.connect_to(self, direction.opposite())

    def _calculate_turn(self) -> None:
        """
        Work out the turn point once both ends are attached.

        The turn takes the x coordinate of the north/south leg and the y
        coordinate of the east/west leg.
        """
        if self._turn is not None:
            return
        first, second = self.first, self.second
        if first.entry.opposite() == second.entry:
            return

        if first.entry.is_vertical:
            self._turn = (first.x, second.y)
        else:
            self._turn = (second.x, first.y)
        logger.debug("%r: turn at %s", self, self._turn)

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw_on_map(self, buffer: np.ndarray, config: Optional[MapConfig] = None) -> None:
        """
        Paint the street onto the buffer.

        Cells run between the two ends without touching either intersection.
        A street with a free end has nothing to draw.
        """
        if self.is_open:
            return
        glyph = (config or DEFAULT_CONFIG).street_glyph
        if self._turn is None:
            self._draw_straight(buffer, glyph)
        else:
            self._draw_turning(buffer, glyph)

    def _draw_straight(self, buffer: np.ndarray, glyph: str) -> None:
        start_x, start_y = self.first.position
        delta_x = self.second.x - start_x
        delta_y = self.second.y - start_y
        if delta_x == 0 and delta_y == 0:
            return

        # Trim one cell at each end so neither intersection is overwritten:
        # a backward run stops short of the far end, a forward run starts
        # one cell past the near end.
        if delta_y == 0:
            if delta_x < 0:
                delta_x += 1
            else:
                start_x += 1
                delta_x -= 1
        else:
            if delta_y < 0:
                delta_y += 1
            else:
                start_y += 1
                delta_y -= 1

        self._draw_legs(buffer, glyph, start_x, start_y, delta_x, delta_y)

    def _draw_turning(self, buffer: np.ndarray, glyph: str) -> None:
        start_x, start_y = self._turn
        # One end shares the turn's x (the north/south leg), the other its y
        if start_x == self.first.x:
            delta_x = self.second.x - start_x
            delta_y = self.first.y - start_y
        else:
            delta_x = self.first.x - start_x
            delta_y = self.second.y - start_y

        # Forward legs include the turn (offset 0) and stop before the end;
        # backward legs are shortened so they stop before the end as well.
        if delta_x < 0:
            delta_x += 1
        if delta_y < 0:
            delta_y += 1

        self._draw_legs(buffer, glyph, start_x, start_y, delta_x, delta_y)

        # Neither leg ran forward through offset 0, so mark the turn itself
        if delta_x <= 0 and delta_y <= 0 and self._turn not in (
            self.first.position,
            self.second.position,
        ):
            plot_cell(buffer, start_x, start_y, glyph)

    @staticmethod
    def _draw_legs(
        buffer: np.ndarray,
        glyph: str,
        start_x: int,
        start_y: int,
        delta_x: int,
        delta_y: int
    ) -> None:
        for i in range(min(delta_x, 0), max(delta_x, 0)):
            plot_cell(buffer, start_x + i, start_y, glyph)
        for i in range(min(delta_y, 0), max(delta_y, 0)):
            plot_cell(buffer, start_x, start_y + i, glyph)
