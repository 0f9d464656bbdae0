"""Tests for streets: connection state, turn geometry and drawing."""

import numpy as np
import pytest

from manhattan_roads import Direction, Intersection, RoadMap, Street, StreetState


def stars(*runs):
    """Expand ((x0, x1), y) row runs and (x, (y0, y1)) column runs into cells."""
    result = set()
    for xs, ys in runs:
        if isinstance(xs, tuple):
            result |= {(x, ys) for x in range(xs[0], xs[1] + 1)}
        else:
            result |= {(xs, y) for y in range(ys[0], ys[1] + 1)}
    return result


class TestStreetState:
    """Tests for the EMPTY -> HALF_OPEN -> CLOSED progression."""

    def test_empty(self) -> None:
        street = Street()
        assert street.state is StreetState.EMPTY
        assert street.is_open
        assert street.turn is None
        assert street.path() == []
        for d in Direction:
            assert street.connected_road(d) is None

    def test_half_open_then_closed(self) -> None:
        a, b = Intersection(0, 0), Intersection(6, 0)
        street = Street()

        assert street.connect_to(a, Direction.WEST)
        assert street.state is StreetState.HALF_OPEN
        assert a.connected_road(Direction.EAST) is street

        assert street.connect_to(b, Direction.EAST)
        assert street.state is StreetState.CLOSED
        assert not street.is_open
        assert street.first.intersection is a
        assert street.second.intersection is b

    def test_snapshots_positions(self) -> None:
        a, b = Intersection(3, 4), Intersection(3, 9)
        street = Street()
        street.connect_to(a, Direction.NORTH)
        street.connect_to(b, Direction.SOUTH)
        assert street.first.position == (3, 4)
        assert street.second.position == (3, 9)

    def test_closed_restating_link_succeeds(self) -> None:
        a, b = Intersection(0, 0), Intersection(6, 0)
        street = Street()
        street.connect_to(a, Direction.WEST)
        street.connect_to(b, Direction.EAST)

        assert street.connect_to(a, Direction.WEST)
        assert street.connect_to(b, Direction.EAST)
        assert street.state is StreetState.CLOSED

    def test_closed_refuses_new_links(self) -> None:
        a, b, c = Intersection(0, 0), Intersection(6, 0), Intersection(0, 6)
        street = Street()
        street.connect_to(a, Direction.WEST)
        street.connect_to(b, Direction.EAST)

        assert not street.connect_to(c, Direction.NORTH)
        assert not street.connect_to(a, Direction.NORTH)
        assert [e.intersection for e in street.endpoints] == [a, b]

    def test_same_intersection_both_ends_refused(self) -> None:
        a = Intersection(0, 0)
        street = Street()
        assert street.connect_to(a, Direction.WEST)
        assert not street.connect_to(a, Direction.EAST)
        assert street.state is StreetState.HALF_OPEN

    def test_street_to_street_raises(self) -> None:
        with pytest.raises(TypeError):
            Street().connect_to(Street(), Direction.NORTH)

    def test_none_raises(self) -> None:
        with pytest.raises(TypeError):
            Street().connect_to(None, Direction.NORTH)

    def test_refused_by_intersection(self) -> None:
        """The intersection's slot is taken; the street keeps its own end."""
        a = Intersection(0, 0)
        taken = Street()
        a.connect_to(taken, Direction.EAST)

        street = Street()
        assert not street.connect_to(a, Direction.WEST)
        assert a.connected_road(Direction.EAST) is taken
        assert street.first.intersection is a

    def test_registers_with_map(self) -> None:
        road_map = RoadMap(5, 5)
        street = Street(road_map=road_map, name="Canal St")
        assert road_map.streets() == [street]
        assert street.name == "Canal St"


class TestTurnGeometry:
    """Tests for turn point computation."""

    def test_straight_has_no_turn(self, pair) -> None:
        a, _ = pair((2, 1), (9, 1))
        street = a.connected_road(Direction.EAST)
        assert street.turn is None
        assert street.path() == [(2, 1), (9, 1)]

    def test_turn_east_then_south(self, pair) -> None:
        a, _ = pair((2, 3), (9, 6))
        street = a.connected_road(Direction.EAST)
        assert street.turn == (9, 3)
        assert street.path() == [(2, 3), (9, 3), (9, 6)]

    @pytest.mark.parametrize("a,b,exit_dir,turn", [
        ((22, 5), (15, 8), Direction.SOUTH, (22, 8)),
        ((9, 8), (2, 5), Direction.WEST, (2, 8)),
        ((15, 6), (22, 3), Direction.NORTH, (15, 3)),
    ])
    def test_turn_points(self, pair, a, b, exit_dir, turn) -> None:
        first, _ = pair(a, b)
        assert first.connected_road(exit_dir).turn == turn

    def test_turn_uses_vertical_leg_x(self) -> None:
        """Built by hand: the north/south end gives x, the east/west end gives y."""
        a, b = Intersection(4, 2), Intersection(10, 7)
        street = Street()
        street.connect_to(b, Direction.WEST)
        street.connect_to(a, Direction.NORTH)
        assert street.turn == (4, 7)

    def test_turn_is_frozen(self, pair) -> None:
        a, b = pair((2, 3), (9, 6))
        street = a.connected_road(Direction.EAST)
        street.connect_to(a, Direction.WEST)
        street.connect_to(b, Direction.SOUTH)
        assert street.turn == (9, 3)


class TestStreetDrawing:
    """Tests for Street.draw_on_map."""

    def test_straight_east(self, road_map, pair, cells) -> None:
        pair((2, 1), (9, 1))
        assert cells(road_map, "*") == stars(((3, 8), 1))
        assert cells(road_map, "+") == {(2, 1), (9, 1)}

    def test_straight_built_westward(self, road_map, pair, cells) -> None:
        pair((22, 1), (15, 1))
        assert cells(road_map, "*") == stars(((16, 21), 1))

    def test_straight_south(self, road_map, pair, cells) -> None:
        pair((12, 1), (12, 4))
        assert cells(road_map, "*") == stars((12, (2, 3)))

    def test_straight_built_northward(self, road_map, pair, cells) -> None:
        pair((25, 4), (25, 1))
        assert cells(road_map, "*") == stars((25, (2, 3)))

    def test_adjacent_intersections_draw_nothing(self, road_map, pair, cells) -> None:
        pair((4, 4), (5, 4))
        assert cells(road_map, "*") == set()
        assert cells(road_map, "+") == {(4, 4), (5, 4)}

    def test_turning_east_then_south(self, road_map, pair, cells) -> None:
        pair((2, 3), (9, 6))
        assert cells(road_map, "*") == stars(((3, 9), 3), (9, (4, 5)))

    def test_turning_south_then_west(self, road_map, pair, cells) -> None:
        """Both legs run back toward the turn, which is marked explicitly."""
        pair((22, 5), (15, 8))
        assert cells(road_map, "*") == stars(((16, 22), 8), (22, (6, 7)))

    def test_turning_west_then_north(self, road_map, pair, cells) -> None:
        pair((9, 8), (2, 5))
        assert cells(road_map, "*") == stars(((2, 8), 8), (2, (6, 7)))

    def test_turning_north_then_east(self, road_map, pair, cells) -> None:
        pair((15, 6), (22, 3))
        assert cells(road_map, "*") == stars(((15, 21), 3), (15, (4, 5)))

    @pytest.mark.parametrize("a,b,turn", [
        ((1, 0), (0, 1), (1, 1)),
        ((0, 0), (1, 1), (1, 0)),
        ((0, 1), (1, 0), (0, 0)),
        ((1, 1), (0, 0), (0, 1)),
    ])
    def test_one_cell_gap_marks_turn(self, road_map, pair, cells, a, b, turn) -> None:
        pair(a, b)
        assert cells(road_map, "*") == {turn}

    def test_turning_path_bends_once(self, road_map, pair, cells) -> None:
        pair((2, 3), (9, 6))
        drawn = cells(road_map, "*")
        rows = {y for _, y in drawn}
        columns = {x for x, _ in drawn}
        corners = [
            (x, y) for x, y in drawn
            if ((x - 1, y) in drawn or (x + 1, y) in drawn)
            and ((x, y - 1) in drawn or (x, y + 1) in drawn)
        ]
        assert corners == [(9, 3)]
        assert rows == {3, 4, 5}
        assert columns == set(range(3, 10))

    def test_open_street_draws_nothing(self) -> None:
        buffer = np.full((5, 5), " ", dtype="<U1")
        street = Street()
        street.connect_to(Intersection(0, 0), Direction.WEST)
        street.draw_on_map(buffer)
        assert (buffer == " ").all()

    def test_clipped_at_far_edge(self) -> None:
        road_map = RoadMap(5, 3)
        a = Intersection(2, 1, road_map=road_map)
        b = Intersection(10, 1, road_map=road_map)
        assert a.build_street_to(b, road_map)
        grid = road_map.draw()
        assert "".join(grid[1]) == "  +**"

    def test_negative_coordinates_do_not_wrap(self) -> None:
        road_map = RoadMap(5, 3)
        a = Intersection(-5, 1, road_map=road_map)
        b = Intersection(2, 1, road_map=road_map)
        assert a.build_street_to(b, road_map)
        grid = road_map.draw()
        assert "".join(grid[1]) == "**+  "

    def test_leaves_other_cells_untouched(self) -> None:
        buffer = np.full((3, 6), ".", dtype="<U1")
        a, b = Intersection(0, 1), Intersection(5, 1)
        a.build_street_to(b)
        a.connected_road(Direction.EAST).draw_on_map(buffer)
        assert "".join(buffer[1]) == ".****."
