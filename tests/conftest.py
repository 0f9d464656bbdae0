import matplotlib
matplotlib.use('Agg')  # Non-interactive backend

import pytest

from manhattan_roads import Intersection, RoadMap


@pytest.fixture
def road_map() -> RoadMap:
    return RoadMap(31, 11)


@pytest.fixture
def cells():
    """Factory: set of (x, y) cells holding a glyph after a fresh draw."""
    def _cells(road_map: RoadMap, glyph: str):
        grid = road_map.draw()
        return {
            (x, y)
            for y in range(road_map.height)
            for x in range(road_map.width)
            if grid[y, x] == glyph
        }
    return _cells


@pytest.fixture
def pair(road_map):
    """Factory: two registered intersections joined by build_street_to."""
    def _build(a, b):
        first = Intersection(*a, road_map=road_map)
        second = Intersection(*b, road_map=road_map)
        assert first.build_street_to(second, road_map)
        return first, second
    return _build
