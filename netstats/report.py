"""Summaries, distance files and histogram images for analysis results."""
import logging
import os
from collections import Counter

import matplotlib.pyplot as plt
import networkx as nx

logger = logging.getLogger(__name__)


def graph_summary(graph: nx.MultiDiGraph) -> dict:
    """
    Basic size figures for a graph.

    Returns:
        Dictionary with nodes, edges, self_loops and weak_components counts
    """
    n = graph.number_of_nodes()
    return {
        "nodes": n,
        "edges": graph.number_of_edges(),
        "self_loops": nx.number_of_selfloops(graph),
        "weak_components": nx.number_weakly_connected_components(graph) if n else 0,
    }


def distance_histogram(sample: list[int]) -> list[tuple[int, int]]:
    """
    Count occurrences of each distance between the smallest and largest value.

    Every integer in [min, max] gets a bin, including those that never occur.

    Returns:
        List of (distance, count) pairs in increasing distance order, empty
        for an empty sample
    """
    if not sample:
        return []
    counts = Counter(sample)
    return [(d, counts.get(d, 0)) for d in range(min(counts), max(counts) + 1)]


def write_distances(sample: list[int], path: str) -> str:
    """Write one distance per line to path and return the path."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        for d in sample:
            f.write(f"{d}\n")

    logger.info("Wrote %s distance(s) to %s", f"{len(sample):,}", path)
    return path


def plot_distance_histogram(sample: list[int], path: str,
                            title: str = "Distance Distribution") -> str:
    """
    Render the distance histogram as a bar chart and save it to path.

    One bar per integer distance, bar height = occurrence count. The image
    is 800x600 pixels; the format follows the file extension.

    Args:
        sample: Distance sample to plot
        path: Destination image file
        title: Figure caption

    Returns:
        The path written to
    """
    bins = distance_histogram(sample)

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    fig, ax = plt.subplots(figsize=(8, 6), dpi=100)
    try:
        if bins:
            xs, counts = zip(*bins)
            ax.bar(xs, counts, width=0.9, color="tab:red", edgecolor="darkred")
            ax.set_xticks(xs)
        else:
            ax.text(0.5, 0.5, "No distances collected", transform=ax.transAxes,
                    ha="center", va="center", fontsize=12, style="italic")

        ax.set_title(title, fontsize=14, fontweight="bold")
        ax.set_xlabel("Distance (hops)")
        ax.set_ylabel("Frequency")
        ax.grid(axis="y", alpha=0.3)
        fig.tight_layout()
        fig.savefig(path)
    finally:
        plt.close(fig)

    logger.info("Histogram saved to %s", path)
    return path
