"""
Distance statistics: distribution sampling and diameter.

The distribution runs one BFS per source node and is the dominant cost on
large graphs (O(V*(V+E))). Callers bound it by pruning hubs first, capping
the number of sources, setting a time limit, or spreading the sources over a
process pool. The diameter runs Dijkstra from every node through a single
edge-cost abstraction, so unit and attribute weights share one code path.
"""
import logging
import multiprocessing
import random
import statistics
import time
from typing import Callable, Optional, Union

import networkx as nx
from scipy import stats

from netstats.errors import DistanceCollectionTimeout, InvalidArgument, check_int
from netstats.traversal import bfs_distances

logger = logging.getLogger(__name__)

Number = Union[int, float]
EdgeCost = Callable[[object, object, dict], Optional[Number]]

# per-process state of pool workers, set once by _init_worker
_worker_state = {}


def _source_distances(graph: nx.MultiDiGraph, sources: list, directed: bool,
                      include_self: bool = False) -> list[int]:
    sample = []
    for source in sources:
        distances = bfs_distances(graph, source, directed).values()
        sample.extend(distances if include_self else (d for d in distances if d > 0))
    return sample


def _init_worker(graph: nx.MultiDiGraph, directed: bool, include_self: bool) -> None:
    _worker_state.update(graph=graph, directed=directed, include_self=include_self)


def _worker_distances(sources: list) -> list[int]:
    return _source_distances(_worker_state["graph"], sources, _worker_state["directed"],
                             _worker_state["include_self"])


def _select_sources(graph: nx.MultiDiGraph, max_sources: Optional[int],
                    rng: Optional[random.Random]) -> list:
    nodes = list(graph.nodes)
    if max_sources is None:
        return nodes
    check_int(max_sources, "max_sources", minimum=1)
    if max_sources >= len(nodes):
        return nodes

    rng = rng or random.Random()
    chosen = set(rng.sample(nodes, max_sources))
    # keep graph order so output order does not depend on the draw order
    return [node for node in nodes if node in chosen]


def _chunks(items: list, count: int) -> list[list]:
    size = max(1, -(-len(items) // count))
    return [items[i:i + size] for i in range(0, len(items), size)]


def distance_distribution(graph: nx.MultiDiGraph, directed: bool = True,
                          max_sources: Optional[int] = None,
                          rng: Optional[random.Random] = None,
                          time_limit: Optional[float] = None,
                          workers: int = 1,
                          include_self: bool = False) -> list[int]:
    """
    Collect the hop distance of every (source, reachable target) pair.

    Self-distances are left out unless include_self is set, so by default the
    result has one entry per source for each node it reaches other than
    itself. Sources are processed in graph order and their distances are
    appended in that order.

    Args:
        graph: The graph to analyze
        directed: Follow out-edges only if True, edges in both directions otherwise
        max_sources: If set, run BFS from this many sources drawn uniformly with rng
        rng: Random source for max_sources sampling (unseeded if None)
        time_limit: Seconds after which collection is aborted
        workers: Number of processes; 1 runs everything in this process
        include_self: Also record the 0 distance of every source to itself

    Returns:
        List of non-negative integer distances

    Raises:
        InvalidArgument: If workers or max_sources is not positive
        DistanceCollectionTimeout: If time_limit is exceeded. Nothing collected
            so far is returned.
    """
    check_int(workers, "workers", minimum=1)

    sources = _select_sources(graph, max_sources, rng)
    logger.info("Collecting distances from %s source(s) with %d worker(s)",
                f"{len(sources):,}", workers)

    if workers == 1 or len(sources) < 2:
        sample = _collect_serial(graph, sources, directed, include_self, time_limit)
    else:
        sample = _collect_parallel(graph, sources, directed, include_self,
                                   time_limit, workers)

    logger.info("Collected %s distance(s)", f"{len(sample):,}")
    return sample


def _collect_serial(graph, sources, directed, include_self, time_limit) -> list[int]:
    started = time.monotonic()
    sample = []

    for done, source in enumerate(sources):
        if time_limit is not None and time.monotonic() - started > time_limit:
            raise DistanceCollectionTimeout(time_limit, done, len(sources))
        sample.extend(_source_distances(graph, [source], directed, include_self))

    return sample


def _collect_parallel(graph, sources, directed, include_self, time_limit, workers) -> list[int]:
    chunks = _chunks(sources, workers * 4)
    deadline = None if time_limit is None else time.monotonic() + time_limit
    sample = []
    done = 0

    # the graph is shipped to each worker once, through the initializer
    pool = multiprocessing.Pool(workers, initializer=_init_worker,
                                initargs=(graph, directed, include_self))
    try:
        results = pool.imap(_worker_distances, chunks)
        for chunk in chunks:
            timeout = None if deadline is None else max(0.0, deadline - time.monotonic())
            sample.extend(results.next(timeout))
            done += len(chunk)
        pool.close()
    except multiprocessing.TimeoutError:
        raise DistanceCollectionTimeout(time_limit, done, len(sources)) from None
    finally:
        # kills workers still busy after a timeout or a failed chunk
        pool.terminate()
        pool.join()

    return sample


def unit_cost(u, v, data) -> int:
    return 1


def attribute_cost(name: str, default: Number = 1) -> EdgeCost:
    """Cost function reading an edge attribute, falling back to default."""
    def cost(u, v, data):
        return data.get(name, default)
    return cost


def _dijkstra_weight(cost: EdgeCost):
    # networkx hands multigraph weight functions the {key: data} dict of all
    # parallel edges between u and v; the cheapest one wins
    def weight(u, v, edges):
        best = None
        for data in edges.values():
            value = cost(u, v, data)
            if value is None:
                continue
            if value < 0:
                raise InvalidArgument(f"Edge ({u}, {v}) has negative cost {value}.")
            if best is None or value < best:
                best = value
        return best
    return weight


def _as_undirected(graph: nx.MultiDiGraph) -> nx.MultiGraph:
    undirected = nx.MultiGraph()
    undirected.add_nodes_from(graph.nodes(data=True))
    undirected.add_edges_from(graph.edges(data=True))
    return undirected


def eccentricities(graph: nx.MultiDiGraph, cost: Optional[EdgeCost] = None,
                   directed: bool = True) -> dict:
    """
    Largest finite shortest-path distance from each node.

    Unreachable targets are ignored, so a node that reaches nothing else has
    eccentricity 0.

    Raises:
        InvalidArgument: If cost returns a negative value for a traversed edge
    """
    weight = _dijkstra_weight(cost or unit_cost)
    working = graph if directed else _as_undirected(graph)

    result = {}
    for node in working.nodes:
        lengths = nx.single_source_dijkstra_path_length(working, node, weight=weight)
        result[node] = max(lengths.values())
    return result


def diameter(graph: nx.MultiDiGraph, cost: Optional[EdgeCost] = None,
             directed: bool = True) -> Number:
    """
    Compute the diameter as the largest finite shortest-path distance.

    Every node is used as a Dijkstra source; pairs with no path between them
    never count, so a graph with several components reports the largest
    within-component distance.

    Args:
        graph: The graph to analyze
        cost: Edge cost function (u, v, data) -> non-negative number; unit cost if None
        directed: Follow out-edges only if True, edges in both directions otherwise

    Returns:
        The diameter, 0 for an empty graph or a graph of isolated nodes
    """
    ecc = eccentricities(graph, cost, directed)
    return max(ecc.values(), default=0)


def average_distance(sample: list[int]) -> float:
    if not sample:
        raise InvalidArgument("Cannot average an empty distance sample.")
    return sum(sample) / len(sample)


def summarize_distances(sample: list[int]) -> dict:
    """
    Summary statistics of a distance sample.

    Returns:
        Dictionary with count, min, max, mean, variance, median and mode

    Raises:
        InvalidArgument: If the sample is empty
    """
    if not sample:
        raise InvalidArgument("Cannot summarize an empty distance sample.")

    desc = stats.describe(sample)
    mode = stats.mode(sample, keepdims=False)

    return {
        "count": int(desc.nobs),
        "min": int(desc.minmax[0]),
        "max": int(desc.minmax[1]),
        "mean": float(desc.mean),
        "variance": float(desc.variance) if desc.nobs > 1 else 0.0,
        "median": statistics.median(sample),
        "mode": int(mode.mode),
    }
