"""
Graph storage for edge-list networks.

Graphs are plain ``nx.MultiDiGraph`` objects whose nodes are dense integer
indices assigned on first sight of a raw label. Every node carries a
``label`` attribute with the raw label from the input, and a built graph
exposes its ``LabelIndex`` as ``graph.graph["label_index"]``. Duplicate edges
and self-loops are kept as they appear in the input.
"""
from typing import Iterator

import networkx as nx

from netstats.errors import InvalidNode

LABEL_ATTR = "label"
INDEX_KEY = "label_index"


class LabelIndex:
    """
    Bijective mapping between raw input labels and internal node indices.

    Indices are handed out in first-seen order starting at 0 and are never
    reused. Once the owning builder finishes, the index is frozen and only
    read from.
    """

    def __init__(self):
        self._by_label = {}
        self._labels = []
        self._frozen = False

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label) -> bool:
        return label in self._by_label

    def __repr__(self) -> str:
        return f"LabelIndex({len(self)} labels, frozen={self._frozen})"

    def node_for(self, label) -> int:
        """
        Return the index for label, assigning the next free one on first sight.

        Raises:
            RuntimeError: If the index is frozen and label is new.
        """
        node = self._by_label.get(label)
        if node is None:
            if self._frozen:
                raise RuntimeError("LabelIndex is frozen; cannot add new labels.")
            node = len(self._labels)
            self._by_label[label] = node
            self._labels.append(label)
        return node

    def lookup(self, label) -> int:
        """Return the index for an existing label without assigning one."""
        try:
            return self._by_label[label]
        except KeyError:
            raise InvalidNode(label, f"Label '{label}' not found in graph.") from None

    def label_of(self, node: int):
        if not 0 <= node < len(self._labels):
            raise InvalidNode(node)
        return self._labels[node]

    def items(self) -> Iterator[tuple]:
        """Yield (label, index) pairs in index order."""
        return ((label, node) for node, label in enumerate(self._labels))

    def freeze(self) -> "LabelIndex":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen


def new_graph() -> nx.MultiDiGraph:
    """Create an empty graph with a fresh label index attached."""
    graph = nx.MultiDiGraph()
    graph.graph[INDEX_KEY] = LabelIndex()
    return graph


def derive_graph(parent: nx.MultiDiGraph) -> nx.MultiDiGraph:
    """Create an empty graph that shares the parent's (frozen) label index."""
    graph = nx.MultiDiGraph()
    graph.graph.update(parent.graph)
    return graph


def add_node(graph: nx.MultiDiGraph, node: int, label) -> None:
    graph.add_node(node, **{LABEL_ATTR: label})


def copy_node(target: nx.MultiDiGraph, source: nx.MultiDiGraph, node) -> None:
    """Add node to target, carrying over its attributes from source."""
    target.add_node(node, **source.nodes[node])


def neighbors(graph: nx.MultiDiGraph, node, directed: bool = True) -> Iterator:
    """
    Yield the neighbors of node.

    Out-neighbors only when directed, otherwise out- and in-neighbors. A
    neighbor reachable through several parallel edges is yielded once per
    direction; callers doing traversal track visited nodes themselves.
    """
    yield from graph.successors(node)
    if not directed:
        yield from graph.predecessors(node)


def traversal_edges(graph: nx.MultiDiGraph, node, directed: bool = True) -> Iterator[tuple]:
    """
    Yield (neighbor, u, v, key) for every edge leaving node.

    (u, v, key) is the edge as stored in the graph, so an edge walked against
    its direction in undirected mode still comes back with its stored
    orientation.
    """
    for _, neighbor, key in graph.out_edges(node, keys=True):
        yield neighbor, node, neighbor, key
    if not directed:
        for neighbor, _, key in graph.in_edges(node, keys=True):
            yield neighbor, neighbor, node, key


def degree_of(graph: nx.MultiDiGraph, node, directed: bool = True) -> int:
    """Out-degree when directed, total incident edges otherwise."""
    if directed:
        return graph.out_degree(node)
    return graph.degree(node)


def label_of(graph: nx.MultiDiGraph, node):
    if node not in graph:
        raise InvalidNode(node)
    return graph.nodes[node].get(LABEL_ATTR, node)


def node_for_label(graph: nx.MultiDiGraph, label):
    """
    Return the node carrying the raw label in this graph.

    Subgraphs share their parent's label index, so a label known to the index
    may still be absent from a filtered or sampled graph.
    """
    index = graph.graph.get(INDEX_KEY)
    if index is not None:
        node = index.lookup(label)
        if node not in graph:
            raise InvalidNode(label, f"Label '{label}' is not part of this graph.")
        return node

    for node, data in graph.nodes(data=True):
        if data.get(LABEL_ATTR) == label:
            return node
    raise InvalidNode(label, f"Label '{label}' not found in graph.")
