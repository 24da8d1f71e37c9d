"""Ego-network extraction around a single node."""
from collections import deque

import networkx as nx

from netstats.errors import InvalidNode, check_int
from netstats.graph_store import copy_node, derive_graph, traversal_edges
from netstats.traversal import bfs_levels


def extract_ego_network(graph: nx.MultiDiGraph, center, depth: int,
                        directed: bool = True, induced: bool = False) -> nx.MultiDiGraph:
    """
    Extract the neighborhood of center reachable within depth hops.

    By default the result holds only the edges walked during the bounded
    BFS: one edge from a node at depth d to each node it discovers at depth
    d+1, for d < depth. Nodes reached at exactly depth are leaves. With
    induced=True the result holds every edge of graph between the reached
    nodes instead.

    Args:
        graph: The graph to extract from
        center: Node ID of the ego
        depth: Maximum hop count from center (0 gives the center alone)
        directed: Follow out-edges only if True, edges in both directions otherwise
        induced: Return the induced subgraph on the reached nodes

    Returns:
        New MultiDiGraph keeping the parent node IDs, labels and edge directions

    Raises:
        InvalidNode: If center is not in the graph
        InvalidArgument: If depth is not a non-negative integer
    """
    if center not in graph:
        raise InvalidNode(center)
    check_int(depth, "Depth")

    if induced:
        reached = [node for node, _ in bfs_levels(graph, center, depth, directed)]
        return graph.subgraph(reached).copy()

    ego = derive_graph(graph)
    copy_node(ego, graph, center)

    visited = {center}
    queue = deque([(center, 0)])

    while queue:
        node, level = queue.popleft()
        if level >= depth:
            continue

        for neighbor, u, v, key in traversal_edges(graph, node, directed):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            copy_node(ego, graph, neighbor)
            ego.add_edge(u, v, **graph.edges[u, v, key])
            queue.append((neighbor, level + 1))

    return ego
