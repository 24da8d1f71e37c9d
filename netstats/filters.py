"""Degree-threshold pruning."""
import logging

import networkx as nx

from netstats.errors import check_int
from netstats.graph_store import degree_of

logger = logging.getLogger(__name__)


def high_degree_nodes(graph: nx.MultiDiGraph, threshold: int, directed: bool = True) -> list:
    """
    Find the nodes whose degree is strictly greater than threshold.

    Degree is the out-degree when directed (edges where the node is the
    source), otherwise the total number of incident edge endpoints. Parallel
    edges each count; a self-loop counts once as out-degree and twice as
    total degree.

    Args:
        graph: The graph to scan
        threshold: Positive degree cutoff
        directed: Count out-edges only if True, all incident edges otherwise

    Returns:
        List of node IDs in graph order
    """
    check_int(threshold, "Degree threshold", minimum=1)
    return [node for node in graph.nodes if degree_of(graph, node, directed) > threshold]


def remove_high_degree_nodes(graph: nx.MultiDiGraph, threshold: int,
                             directed: bool = True) -> nx.MultiDiGraph:
    """
    Return a copy of graph without the nodes above the degree threshold.

    Every edge touching a removed node goes with it. Remaining nodes keep
    their IDs and labels, and the input graph is not modified.

    Raises:
        InvalidArgument: If threshold is not a positive integer
    """
    hubs = high_degree_nodes(graph, threshold, directed)

    pruned = graph.copy()
    pruned.remove_nodes_from(hubs)

    logger.info("Removed %d node(s) with %s-degree > %d (%d nodes, %d edges left)",
                len(hubs), "out" if directed else "total", threshold,
                pruned.number_of_nodes(), pruned.number_of_edges())
    return pruned
