"""Build graphs from whitespace-separated edge lists."""
import logging
import re
from typing import Iterable, Optional

import networkx as nx

from netstats import graph_store

logger = logging.getLogger(__name__)

_LABEL_RE = re.compile(r"\+?[0-9]+")


def parse_edge_line(line: str) -> Optional[tuple[int, int]]:
    """
    Parse one edge-list line into a (source, target) pair of raw labels.

    A line is an edge only if it splits into exactly two tokens and both
    are plain ASCII decimal numbers (an optional leading "+" is allowed).
    Digit separators, minus signs and non-ASCII digits are rejected.
    Headers, comments, blank lines and anything else return None so the
    caller can skip them.

    Args:
        line: A single line from the edge list

    Returns:
        Tuple of (source, target) integers, or None if the line is not an edge
    """
    tokens = line.split()
    if len(tokens) != 2:
        return None

    if not all(_LABEL_RE.fullmatch(token) for token in tokens):
        return None
    return int(tokens[0]), int(tokens[1])


class GraphBuilder:
    """
    Accumulate edges into a graph, creating nodes lazily by raw label.

    The builder owns the label index while edges are added. ``build()``
    freezes the index and hands back the graph; the index stays reachable
    through ``builder.index`` and ``graph.graph["label_index"]``.
    """

    def __init__(self):
        self.graph = graph_store.new_graph()
        self.index = self.graph.graph[graph_store.INDEX_KEY]
        self.lines_read = 0
        self.lines_skipped = 0
        self._built = False

    def _node(self, label: int) -> int:
        new = label not in self.index
        node = self.index.node_for(label)
        if new:
            graph_store.add_node(self.graph, node, label)
        return node

    def add_edge(self, source_label: int, target_label: int) -> tuple[int, int]:
        if self._built:
            raise RuntimeError("Graph already built; start a new GraphBuilder.")
        u = self._node(source_label)
        v = self._node(target_label)
        self.graph.add_edge(u, v)
        return u, v

    def add_line(self, line: str) -> bool:
        """Add the edge on line, if any. Returns False when the line was skipped."""
        self.lines_read += 1
        pair = parse_edge_line(line)
        if pair is None:
            self.lines_skipped += 1
            logger.debug("Skipping line %d: %r", self.lines_read, line.rstrip("\n"))
            return False

        self.add_edge(*pair)
        return True

    def add_lines(self, lines: Iterable[str]) -> int:
        """Add every edge found in lines and return how many were accepted."""
        accepted = 0
        for line in lines:
            if self.add_line(line):
                accepted += 1
        return accepted

    def build(self) -> nx.MultiDiGraph:
        self.index.freeze()
        self._built = True
        return self.graph


def read_edge_lines(lines: Iterable[str]) -> nx.MultiDiGraph:
    """Build a graph from an iterable of edge-list lines."""
    builder = GraphBuilder()
    builder.add_lines(lines)
    return builder.build()


def load_edge_list(path: str) -> nx.MultiDiGraph:
    """
    Load an edge-list file into a new graph.

    Bytes that are not valid UTF-8 are replaced rather than raised, so a
    line containing them is skipped like any other malformed line.

    Args:
        path: Path to a text file with one "source target" pair per line

    Returns:
        MultiDiGraph with one node per distinct label and one edge per valid line

    Raises:
        OSError: If the file cannot be opened or read
    """
    logger.info("Loading edge list from: %s", path)

    builder = GraphBuilder()
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        builder.add_lines(f)
    graph = builder.build()

    logger.info(
        "Loaded %s nodes and %s edges (%s line(s) skipped)",
        f"{graph.number_of_nodes():,}",
        f"{graph.number_of_edges():,}",
        f"{builder.lines_skipped:,}",
    )
    return graph
