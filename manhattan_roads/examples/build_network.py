#!/usr/bin/env python3
"""
Example script that builds a small road network and prints it.

Usage:
    python build_network.py
    python build_network.py --config map_config.json --plot network.png
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from manhattan_roads import (
    Direction,
    Intersection,
    MapConfig,
    NetworkValidator,
    RoadMap,
)


# (first position, second position, builder index, expected exits at first/second)
REFERENCE_STREETS = [
    # East to west
    ((2, 1), (9, 1), 0, Direction.EAST, Direction.WEST),
    # West to east
    ((15, 1), (22, 1), 1, Direction.EAST, Direction.WEST),
    # South to north
    ((12, 1), (12, 4), 0, Direction.SOUTH, Direction.NORTH),
    # North to south
    ((25, 1), (25, 4), 1, Direction.SOUTH, Direction.NORTH),
    # Starting east and turning south
    ((2, 3), (9, 6), 0, Direction.EAST, Direction.NORTH),
    # Starting south and turning west
    ((22, 5), (15, 8), 0, Direction.SOUTH, Direction.EAST),
    # Starting west and turning north
    ((9, 8), (2, 5), 0, Direction.WEST, Direction.SOUTH),
    # Starting north and turning east
    ((15, 6), (22, 3), 0, Direction.NORTH, Direction.WEST),
]


def build_reference_network(road_map: RoadMap, validator: NetworkValidator):
    """
    Build the eight reference streets and check each one.

    Returns:
        (intersections, problems) tuple
    """
    intersections = []
    problems = []
    for first_pos, second_pos, builder, first_dir, second_dir in REFERENCE_STREETS:
        first = Intersection(*first_pos, road_map=road_map)
        second = Intersection(*second_pos, road_map=road_map)
        intersections.extend([first, second])

        start, end = (first, second) if builder == 0 else (second, first)
        if not start.build_street_to(end, road_map):
            problems.append(f"Could not build street from {start!r} to {end!r}")
        problems.extend(validator.check_street(first, first_dir, second, second_dir))

    return intersections, problems


def main():
    parser = argparse.ArgumentParser(
        description="Build and render a Manhattan-style road network"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to map config JSON (optional)"
    )
    parser.add_argument(
        "--plot",
        type=str,
        default=None,
        help="Also save a matplotlib plot to this file"
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print a markdown report after the map"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every connection made"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.config:
        print(f"Loading config from {args.config}")
        config = MapConfig.from_json(args.config)
    else:
        config = MapConfig()

    print("Testing intersections and streets.")
    road_map = RoadMap.from_config(config)
    validator = NetworkValidator()

    intersections, problems = build_reference_network(road_map, validator)
    for problem in problems:
        print(f"✗ {problem}")

    print(road_map.render())

    # Connecting an intersection straight to another one is a caller error
    print("Checking for TypeError.")
    try:
        intersections[-2].connect_to(intersections[-1], Direction.WEST)
    except TypeError:
        print("Caught TypeError as expected.")

    if args.report:
        print()
        print(validator.report(road_map))

    if args.plot:
        from manhattan_roads.visualization import save_network_plot
        save_network_plot(road_map, args.plot)
        print(f"Plot saved to {args.plot}")

    return 1 if problems else 0


if __name__ == "__main__":
    sys.exit(main())
