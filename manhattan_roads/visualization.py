"""
Visualization utilities for road maps.
"""

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
from typing import Optional

from .road_map import RoadMap


def plot_network(
    road_map: RoadMap,
    ax: Optional[plt.Axes] = None,
    title: str = "Road Network",
    show_names: bool = False,
    node_size: float = 40,
    edge_width: float = 2.0,
    edge_color: str = '#2C3E50',
    turn_color: Optional[str] = '#E67E22',
    node_color: str = '#E74C3C'
) -> plt.Axes:
    """
    Plot a road map.

    Streets are drawn through their turn point; the y axis points down so
    the plot reads the same way as the text rendering.

    Args:
        road_map: Map to plot
        ax: Matplotlib axis (creates new if None)
        title: Plot title
        show_names: Label intersections with their names
        node_size: Intersection marker size
        edge_width: Street line width
        edge_color: Color of straight streets
        turn_color: Color of turning streets (edge_color if None)
        node_color: Intersection marker color

    Returns:
        Matplotlib axis
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8 * road_map.height / road_map.width + 1))

    # Grid boundary, cell centres sit on integer coordinates
    ax.add_patch(Rectangle(
        (-0.5, -0.5), road_map.width, road_map.height,
        fill=False, edgecolor='gray', linestyle='--', linewidth=1
    ))

    for street in road_map.streets():
        if street.is_open:
            continue
        xs, ys = zip(*street.path())
        color = turn_color if street.turn is not None and turn_color else edge_color
        ax.plot(xs, ys, color=color, linewidth=edge_width, zorder=1)

    intersections = road_map.intersections()
    if intersections:
        ax.scatter(
            [i.x for i in intersections], [i.y for i in intersections],
            s=node_size, c=node_color, zorder=2,
            edgecolors='black', linewidths=0.5
        )
        if show_names:
            for inter in intersections:
                if inter.name:
                    ax.annotate(inter.name, (inter.x, inter.y),
                                textcoords='offset points', xytext=(4, 4), fontsize=8)

    ax.set_xlim(-1, road_map.width)
    ax.set_ylim(road_map.height, -1)
    ax.set_aspect('equal')
    ax.set_title(title, fontsize=12, fontweight='bold')
    ax.set_xlabel('X (east)')
    ax.set_ylabel('Y (south)')
    ax.grid(True, alpha=0.3)

    return ax


def save_network_plot(road_map: RoadMap, filepath: str, **kwargs) -> None:
    """Plot a road map and write the figure to `filepath`."""
    fig, ax = plt.subplots(figsize=(8, 8 * road_map.height / road_map.width + 1))
    plot_network(road_map, ax=ax, **kwargs)
    fig.savefig(filepath, dpi=150, bbox_inches='tight')
    plt.close(fig)
