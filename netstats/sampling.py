"""Uniform random node sampling."""
import logging
import random
from typing import Optional

import networkx as nx

from netstats.errors import InvalidArgument, check_int

logger = logging.getLogger(__name__)


def sample_nodes(graph: nx.MultiDiGraph, k: int, rng: Optional[random.Random] = None) -> list:
    """
    Draw k distinct nodes uniformly at random without replacement.

    Pass a seeded random.Random to make the draw reproducible.

    Raises:
        InvalidArgument: If k is not an integer, is negative or is larger than the node count
    """
    n = graph.number_of_nodes()
    check_int(k, "Sample size")
    if k > n:
        raise InvalidArgument(f"Sample size ({k}) cannot exceed the number of nodes ({n}).")

    rng = rng or random.Random()
    return rng.sample(list(graph.nodes), k)


def sample_subgraph(graph: nx.MultiDiGraph, k: int,
                    rng: Optional[random.Random] = None) -> nx.MultiDiGraph:
    """
    Build the subgraph induced by k uniformly sampled nodes.

    An edge survives only if both of its endpoints were sampled; parallel
    edges and self-loops between sampled nodes are all kept. Node IDs and
    labels are those of the parent graph.

    Args:
        graph: The graph to sample from (not mutated)
        k: Number of nodes to keep, 0 <= k <= node count
        rng: Random source; a fresh unseeded one if None

    Returns:
        New MultiDiGraph with exactly k nodes
    """
    chosen = sample_nodes(graph, k, rng)
    sampled = graph.subgraph(chosen).copy()

    logger.info("Sampled %d of %d node(s): %d edge(s) kept",
                k, graph.number_of_nodes(), sampled.number_of_edges())
    return sampled
