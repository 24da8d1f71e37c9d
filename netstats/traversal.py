"""Breadth-first traversal over edge-list graphs."""
from collections import deque
from typing import Iterator, Optional

import networkx as nx

from netstats.errors import InvalidNode, check_int
from netstats.graph_store import neighbors


def bfs_distances(graph: nx.MultiDiGraph, start, directed: bool = True) -> dict:
    """
    Compute hop distances from start to every reachable node.

    Nodes are expanded level by level; the first level at which a node is
    discovered is its distance. Each node is visited at most once, so the
    cost is O(V+E) over the component reachable from start.

    Args:
        graph: The graph to traverse
        start: The node to start from
        directed: Follow out-edges only if True, edges in both directions otherwise

    Returns:
        Dictionary mapping every reachable node (start included, at 0) to its
        hop count. Unreachable nodes are absent.

    Raises:
        InvalidNode: If start is not in the graph
    """
    if start not in graph:
        raise InvalidNode(start)

    distances = {start: 0}
    queue = deque([start])

    while queue:
        curr_node = queue.popleft()
        next_distance = distances[curr_node] + 1

        for neighbor in neighbors(graph, curr_node, directed):
            if neighbor not in distances:
                distances[neighbor] = next_distance
                queue.append(neighbor)

    return distances


def bfs_levels(graph: nx.MultiDiGraph, start, max_depth: Optional[int] = None,
               directed: bool = True) -> Iterator[tuple]:
    """
    Yield (node, depth) pairs in BFS discovery order, stopping at max_depth.

    Nodes found at exactly max_depth are yielded but not expanded.
    """
    if start not in graph:
        raise InvalidNode(start)
    if max_depth is not None:
        check_int(max_depth, "Depth")

    visited = {start}
    queue = deque([(start, 0)])

    while queue:
        node, depth = queue.popleft()
        yield node, depth

        if max_depth is not None and depth >= max_depth:
            continue
        for neighbor in neighbors(graph, node, directed):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append((neighbor, depth + 1))
