"""
Intersections: point nodes with one attachment slot per compass point.
"""

import logging
from typing import Dict, Optional, Tuple, TYPE_CHECKING

import numpy as np

from .config import MapConfig, DEFAULT_CONFIG
from .direction import Direction
from .renderable import Renderable, plot_cell, check_direction
from .street import Street

if TYPE_CHECKING:
    from .road_map import RoadMap

logger = logging.getLogger(__name__)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


# (sign(dx), sign(dy)) -> (direction this intersection exits by,
#                          direction the other intersection exits by)
# with dx = this.x - other.x and dy = this.y - other.y.
STREET_EXITS: Dict[Tuple[int, int], Tuple[Direction, Direction]] = {
    (0, -1): (Direction.SOUTH, Direction.NORTH),
    (0, 1): (Direction.NORTH, Direction.SOUTH),
    (-1, 0): (Direction.EAST, Direction.WEST),
    (1, 0): (Direction.WEST, Direction.EAST),
    (1, -1): (Direction.SOUTH, Direction.EAST),
    (1, 1): (Direction.WEST, Direction.SOUTH),
    (-1, -1): (Direction.EAST, Direction.NORTH),
    (-1, 1): (Direction.NORTH, Direction.WEST),
}


def street_exits(dx: int, dy: int) -> Optional[Tuple[Direction, Direction]]:
    """
    Pick the exit directions for a street between two intersections.

    Args:
        dx: this.x - other.x
        dy: this.y - other.y

    Returns:
        (this exits, other exits), or None when both offsets are zero
    """
    return STREET_EXITS.get((_sign(dx), _sign(dy)))


class Intersection(Renderable):
    """
    An intersection with up to four streets, one at each compass point.

    The position is fixed at construction. Slots hold non-owning links to
    the attached streets; a filled slot is never cleared or reassigned.
    """

    def __init__(
        self,
        x: int,
        y: int,
        road_map: Optional["RoadMap"] = None,
        name: str = ""
    ):
        """
        Create an unconnected intersection.

        Args:
            x: X coordinate (column, grows east)
            y: Y coordinate (row, grows south)
            road_map: Map to register with (optional)
            name: Display name
        """
        self._x = int(x)
        self._y = int(y)
        self._streets: Dict[Direction, Optional[Street]] = {d: None for d in Direction}
        self.name = name

        if road_map is not None:
            road_map.register(self)

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def position(self) -> Tuple[int, int]:
        return (self._x, self._y)

    def __repr__(self):
        label = f" {self.name!r}" if self.name else ""
        return f"Intersection({self._x}, {self._y}){label}"

    def draw_on_map(self, buffer: np.ndarray, config: Optional[MapConfig] = None) -> None:
        """Draw a single glyph at the intersection, if it is on the map."""
        config = config or DEFAULT_CONFIG
        plot_cell(buffer, self._x, self._y, config.intersection_glyph)

    def connected_road(self, direction: Direction) -> Optional[Street]:
        """Return the street attached at `direction`, or None."""
        if not isinstance(direction, Direction):
            return None
        return self._streets[direction]

    def connected_directions(self) -> Dict[Direction, Street]:
        """Return the occupied slots."""
        return {d: s for d, s in self._streets.items() if s is not None}

    @property
    def degree(self) -> int:
        return len(self.connected_directions())

    def connect_to(self, other: Renderable, direction: Direction) -> bool:
        """
        Attach a street at `direction`, and have the street link back.

        Args:
            other: The street to attach
            direction: Direction the street leaves this intersection

        Returns:
            True if the street is attached at `direction` afterwards

        Raises:
            TypeError: if `other` is not a Street
        """
        match other:
            case Street():
                pass
            case _:
                raise TypeError(
                    f"An Intersection can only connect to a Street, "
                    f"not {type(other).__name__}"
                )
        check_direction(direction)

        current = self._streets[direction]
        if current is other:
            return True
        if current is not None:
            logger.debug("%r: %s slot already taken by %r", self, direction, current)
            return False

        # Forward link first, then the back reference from the street.
        # A refused back reference leaves the forward link in place.
        self._streets[direction] = other
        logger.debug("%r: linked %r at %s", self, other, direction)
        return other.connect_to(self, direction.opposite())

    def build_street_to(self, other: "Intersection", road_map: Optional["RoadMap"] = None) -> bool:
        """
        Build a street from this intersection to `other`.

        The exit direction at each end follows from the relative position of
        the two intersections; the street turns at most once. The new street
        is registered with `road_map` only when both ends connect.

        Args:
            other: The far intersection
            road_map: Map to register the street with

        Returns:
            True if the street is built

        Raises:
            TypeError: if `other` is not an Intersection
        """
        if not isinstance(other, Intersection):
            raise TypeError(
                f"A street can only be built to an Intersection, "
                f"not {type(other).__name__}"
            )

        exits = street_exits(self._x - other.x, self._y - other.y)
        if exits is None:
            logger.debug("%r: cannot build a street to %r at the same position", self, other)
            return False
        this_exit, other_exit = exits

        street = Street()
        if not self.connect_to(street, this_exit):
            logger.debug("%r: street refused at %s", self, this_exit)
            return False
        if not other.connect_to(street, other_exit):
            logger.debug("%r: street refused at %s", other, other_exit)
            return False

        if road_map is not None:
            road_map.register(street)
        logger.debug("Built %r", street)
        return True
