"""
Topology validation and reporting.
"""

from typing import List, Optional

from .direction import Direction
from .intersection import Intersection
from .metrics import NetworkMetrics
from .road_map import RoadMap


class NetworkValidator:
    """Check that intersections and streets are consistently cross-linked."""

    def check_street(
        self,
        first: Intersection,
        first_dir: Direction,
        second: Intersection,
        second_dir: Direction
    ) -> List[str]:
        """
        Check that a street joins two intersections.

        Args:
            first: Intersection at one end
            first_dir: Direction the street leaves `first`
            second: Intersection at the other end
            second_dir: Direction the street leaves `second`

        Returns:
            Problem descriptions; empty if the street is properly connected
        """
        problems = []

        s1 = first.connected_road(first_dir)
        s2 = second.connected_road(second_dir)

        if s1 is None:
            problems.append(f"No street {first_dir} from {first!r}")
        if s2 is None:
            problems.append(f"No street {second_dir} from {second!r}")
        if s1 is not s2:
            problems.append(
                f"Street changes from {s1!r} to {s2!r} between {first!r} and {second!r}"
            )

        for inter, direction, street in (
            (first, first_dir, s1),
            (second, second_dir, s2),
        ):
            if street is None:
                continue
            back = street.connected_road(direction.opposite())
            if back is None:
                problems.append(
                    f"{inter!r} has {street!r} at {direction} but the street has "
                    f"no {direction.opposite()} connection"
                )
            elif back is not inter:
                problems.append(
                    f"{inter!r} has {street!r} at {direction} but the street "
                    f"enters {back!r} going {direction.opposite()}"
                )

        return problems

    def audit(self, road_map: RoadMap) -> List[str]:
        """
        Check every registered object on a map.

        Streets must be attached at both ends and each end must link back to
        the street; every street held by an intersection must link back to it.

        Returns:
            Problem descriptions; empty if the map is consistent
        """
        problems = []

        for street in road_map.streets():
            if street.is_open:
                problems.append(f"{street!r} is not connected at both ends")
            for end in street.endpoints:
                linked = end.intersection.connected_road(end.entry.opposite())
                if linked is not street:
                    problems.append(
                        f"{street!r} enters {end.intersection!r} going {end.entry} "
                        f"but the intersection holds {linked!r}"
                    )

        for inter in road_map.intersections():
            for direction, street in inter.connected_directions().items():
                if street.connected_road(direction.opposite()) is not inter:
                    problems.append(
                        f"{inter!r} holds {street!r} at {direction} but the street "
                        f"does not lead back"
                    )

        return problems

    def report(self, road_map: RoadMap, title: Optional[str] = None) -> str:
        """Generate a markdown report of metrics and audit results."""
        metrics = NetworkMetrics.compute_all(road_map)
        problems = self.audit(road_map)

        report = []
        report.append(f"# {title or 'Road Network Report'}\n")
        report.append(f"\n## Map\n")
        report.append(f"- Size: {road_map.width} × {road_map.height}\n")
        report.append(f"- Registered Objects: {len(road_map)}\n")

        report.append(f"\n## Topology\n")
        report.append(f"- Intersections: {metrics['intersections']}\n")
        report.append(f"- Streets: {metrics['streets']}\n")
        report.append(f"- Components: {metrics['components']}\n")
        report.append(f"- Dead-End Ratio: {metrics['dead_end_ratio']:.3f}\n")
        report.append(f"- Turning Streets: {metrics['turn_ratio']:.2%}\n")

        report.append(f"\n### Degree Distribution\n")
        report.append(f"```\n")
        report.append(f"Degree | Count\n")
        report.append(f"-------|------\n")
        for deg in sorted(metrics["degree_distribution"]):
            report.append(f"  {deg}    | {metrics['degree_distribution'][deg]:4d}\n")
        report.append(f"```\n")

        stats = metrics["street_length_stats"]
        report.append(f"\n### Street Lengths\n")
        report.append(f"- Total: {stats['total']:.1f}\n")
        report.append(f"- Mean: {stats['mean']:.2f}\n")
        report.append(f"- Median: {stats['median']:.2f}\n")

        report.append(f"\n## Audit\n")
        if problems:
            for problem in problems:
                report.append(f"- {problem}\n")
        else:
            report.append(f"- No problems found\n")

        return "".join(report)
