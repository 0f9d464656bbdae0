"""
Metrics computation for a road network.
"""

import numpy as np
import networkx as nx
from typing import Dict, List, Tuple
from collections import Counter
from shapely.geometry import LineString

from .road_map import RoadMap
from .street import Street


def street_geometry(street: Street) -> LineString:
    """
    Polyline through the street's ends and turn point.

    Raises:
        ValueError: if the street does not have both ends attached
    """
    if street.is_open:
        raise ValueError(f"{street!r} is not connected at both ends")
    return LineString(street.path())


class NetworkMetrics:
    """Compute summary metrics for a road map."""

    @staticmethod
    def to_graph(road_map: RoadMap) -> nx.Graph:
        """
        Project a road map onto a NetworkX graph.

        Registered intersections become nodes. Registered streets with both
        ends attached become edges; an intersection reached only through a
        street is added as a node as well.

        Args:
            road_map: Map to project

        Returns:
            Graph with node attributes x, y, name and edge attributes
            street, length, turns
        """
        graph = nx.Graph()

        for inter in road_map.intersections():
            graph.add_node(inter, x=inter.x, y=inter.y, name=inter.name)

        for street in road_map.streets():
            if street.is_open:
                continue
            u = street.first.intersection
            v = street.second.intersection
            for node in (u, v):
                if node not in graph:
                    graph.add_node(node, x=node.x, y=node.y, name=node.name)
            graph.add_edge(
                u, v,
                street=street,
                length=street_geometry(street).length,
                turns=street.turn is not None,
            )

        return graph

    @staticmethod
    def compute_degree_distribution(graph: nx.Graph) -> Dict[int, int]:
        """
        Compute intersection degree distribution.

        Args:
            graph: Graph from `to_graph`

        Returns:
            Dict mapping degree -> count
        """
        degrees = [d for _, d in graph.degree()]
        return dict(Counter(degrees))

    @staticmethod
    def compute_dead_end_ratio(graph: nx.Graph) -> float:
        """
        Compute ratio of dead-end intersections (degree 1).

        Returns:
            Ratio [0, 1]
        """
        if graph.number_of_nodes() == 0:
            return 0.0

        dead_ends = sum(1 for _, d in graph.degree() if d == 1)
        return dead_ends / graph.number_of_nodes()

    @staticmethod
    def compute_street_lengths(graph: nx.Graph) -> List[float]:
        """Lengths of all streets, in grid cells between intersection centres."""
        return [data["length"] for _, _, data in graph.edges(data=True)]

    @staticmethod
    def compute_turn_ratio(graph: nx.Graph) -> float:
        """Fraction of streets that bend once."""
        if graph.number_of_edges() == 0:
            return 0.0
        turning = sum(1 for _, _, data in graph.edges(data=True) if data["turns"])
        return turning / graph.number_of_edges()

    @staticmethod
    def compute_components(graph: nx.Graph) -> int:
        """Number of connected components."""
        if graph.number_of_nodes() == 0:
            return 0
        return nx.number_connected_components(graph)

    @staticmethod
    def compute_all(road_map: RoadMap) -> Dict:
        """
        Compute all metrics for a road map.

        Args:
            road_map: Map to measure

        Returns:
            Dict with all metrics
        """
        graph = NetworkMetrics.to_graph(road_map)
        lengths = NetworkMetrics.compute_street_lengths(graph)
        components = NetworkMetrics.compute_components(graph)

        return {
            "intersections": graph.number_of_nodes(),
            "streets": graph.number_of_edges(),
            "degree_distribution": NetworkMetrics.compute_degree_distribution(graph),
            "dead_end_ratio": NetworkMetrics.compute_dead_end_ratio(graph),
            "turn_ratio": NetworkMetrics.compute_turn_ratio(graph),
            "components": components,
            "connected": components == 1,
            "street_lengths": lengths,
            "street_length_stats": {
                "total": float(np.sum(lengths)) if lengths else 0.0,
                "mean": float(np.mean(lengths)) if lengths else 0.0,
                "median": float(np.median(lengths)) if lengths else 0.0,
            },
        }


def compute_length_histogram(
    lengths: List[float],
    num_bins: int = 10
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute histogram of street lengths.

    Args:
        lengths: Street lengths
        num_bins: Number of bins

    Returns:
        (bin_edges, counts) arrays
    """
    if not lengths:
        return np.linspace(0, 1, num_bins + 1), np.zeros(num_bins)

    counts, bin_edges = np.histogram(
        lengths,
        bins=num_bins,
        range=(0, max(lengths))
    )
    return bin_edges, counts
