import pytest

from netstats.builder import GraphBuilder, load_edge_list, parse_edge_line, read_edge_lines
from netstats.errors import InvalidNode
from netstats.graph_store import LabelIndex, label_of, node_for_label


@pytest.mark.parametrize("line, expected", [
    ("0 1", (0, 1)),
    ("  7\t42  \n", (7, 42)),
    ("3 3", (3, 3)),
    ("# FromNodeId ToNodeId", None),
    ("# Nodes: 81306 Edges: 1768149", None),
    ("", None),
    ("5", None),
    ("1 2 3", None),
    ("1 x", None),
    ("-1 2", None),
    ("1.5 2", None),
])
def test_parse_edge_line(line, expected):
    assert parse_edge_line(line) == expected


def test_path_scenario_counts(path_graph):
    assert path_graph.number_of_nodes() == 5
    assert path_graph.number_of_edges() == 4
    assert sorted(path_graph.edges()) == [(0, 1), (1, 2), (2, 3), (3, 4)]


def test_node_count_is_distinct_labels_and_edge_count_is_valid_lines():
    lines = ["# header", "100 7", "7 100", "100 7", "x y", "7 7", "", "55 100"]
    graph = read_edge_lines(lines)

    assert graph.number_of_nodes() == 3
    # duplicates and self-loops are kept
    assert graph.number_of_edges() == 5
    assert graph.number_of_edges(0, 1) == 2
    assert graph.has_edge(1, 1)


def test_indices_assigned_in_first_seen_order():
    graph = read_edge_lines(["42 17", "17 99", "5 42"])

    assert list(graph.nodes) == [0, 1, 2, 3]
    assert [graph.nodes[n]["label"] for n in graph.nodes] == [42, 17, 99, 5]
    assert node_for_label(graph, 99) == 2
    assert label_of(graph, 3) == 5


def test_builder_counters_and_index():
    builder = GraphBuilder()
    accepted = builder.add_lines(["1 2", "bad", "2 3", "4"])
    graph = builder.build()

    assert accepted == 2
    assert builder.lines_read == 4
    assert builder.lines_skipped == 2
    assert len(builder.index) == 3
    assert graph.graph["label_index"] is builder.index
    assert builder.index.frozen


def test_builder_rejects_edges_after_build():
    builder = GraphBuilder()
    builder.add_edge(1, 2)
    builder.build()

    with pytest.raises(RuntimeError):
        builder.add_edge(2, 3)


def test_label_index_is_bijective():
    index = LabelIndex()
    assert index.node_for(9) == 0
    assert index.node_for(4) == 1
    assert index.node_for(9) == 0
    assert list(index.items()) == [(9, 0), (4, 1)]
    assert index.label_of(1) == 4

    with pytest.raises(InvalidNode):
        index.lookup(123)
    with pytest.raises(InvalidNode):
        index.label_of(7)

    index.freeze()
    with pytest.raises(RuntimeError):
        index.node_for(5)


def test_unknown_label_raises_invalid_node(path_graph):
    with pytest.raises(InvalidNode):
        node_for_label(path_graph, 999)


def test_load_edge_list(edge_file):
    path = edge_file(["# Directed graph", "# FromNodeId\tToNodeId", "0\t1", "1\t2", "2\t0"])
    graph = load_edge_list(path)

    assert graph.number_of_nodes() == 3
    assert graph.number_of_edges() == 3


def test_load_edge_list_missing_file_raises_ioerror(tmp_path):
    with pytest.raises(IOError):
        load_edge_list(str(tmp_path / "missing.txt"))


@pytest.mark.parametrize("line", ["1_0 5", "١٠ 5", "5 １", "0x1 2", "1e3 2"])
def test_parse_edge_line_rejects_non_plain_digits(line):
    assert parse_edge_line(line) is None


def test_plus_sign_is_accepted():
    assert parse_edge_line("+3 4") == (3, 4)


def test_digit_separators_do_not_merge_labels():
    graph = read_edge_lines(["1_0 5", "10 5"])
    assert graph.number_of_nodes() == 2
    assert graph.number_of_edges() == 1


def test_load_edge_list_skips_undecodable_lines(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"# caf\xe9 header\n0 1\n1 2\n2\xff 3\n")

    graph = load_edge_list(str(path))
    assert graph.number_of_nodes() == 3
    assert graph.number_of_edges() == 2
