import networkx as nx
import pytest

from netstats.ego import extract_ego_network
from netstats.errors import InvalidArgument, InvalidNode
from netstats.graph_store import node_for_label


def test_depth_zero_is_single_node(path_graph):
    ego = extract_ego_network(path_graph, 2, 0)
    assert list(ego.nodes) == [2]
    assert ego.number_of_edges() == 0


def test_bounded_depth_on_path(path_graph):
    ego = extract_ego_network(path_graph, 0, 2)
    assert sorted(ego.nodes) == [0, 1, 2]
    assert sorted(ego.edges()) == [(0, 1), (1, 2)]


def test_star_neighborhood(star_graph):
    ego = extract_ego_network(star_graph, 0, 1)
    assert ego.number_of_nodes() == 6
    assert ego.number_of_edges() == 5

    full = extract_ego_network(star_graph, 0, 10)
    assert full.number_of_nodes() == 8
    assert full.number_of_edges() == 7


def test_only_traversed_edges_are_kept(cycle_graph):
    ego = extract_ego_network(cycle_graph, 0, 3)
    assert ego.number_of_nodes() == 4
    assert sorted(ego.edges()) == [(0, 1), (1, 2), (2, 3)]


def test_induced_keeps_every_edge_between_reached_nodes(cycle_graph):
    ego = extract_ego_network(cycle_graph, 0, 3, induced=True)
    assert ego.number_of_edges() == 4

    partial = extract_ego_network(cycle_graph, 0, 1, induced=True)
    assert sorted(partial.edges()) == [(0, 1)]


def test_undirected_keeps_stored_edge_direction(path_graph):
    ego = extract_ego_network(path_graph, 2, 1, directed=False)
    assert sorted(ego.nodes) == [1, 2, 3]
    assert sorted(ego.edges()) == [(1, 2), (2, 3)]


def test_deep_undirected_ego_covers_weak_component(two_components):
    center = node_for_label(two_components, 11)
    ego = extract_ego_network(two_components, center, 10, directed=False)

    component = nx.node_connected_component(two_components.to_undirected(), center)
    assert set(ego.nodes) == component
    assert sorted(ego.nodes[n]["label"] for n in ego.nodes) == [10, 11, 12]


def test_ego_keeps_labels_and_index(two_components):
    ego = extract_ego_network(two_components, 3, 1)
    assert {ego.nodes[n]["label"] for n in ego.nodes} == {20, 21}
    assert node_for_label(ego, 21) == 4


def test_invalid_center_and_depth(path_graph):
    with pytest.raises(InvalidNode):
        extract_ego_network(path_graph, 99, 1)
    with pytest.raises(InvalidArgument):
        extract_ego_network(path_graph, 0, -1)


@pytest.mark.parametrize("depth", [1.0, True, None])
def test_depth_must_be_an_integer(path_graph, depth):
    with pytest.raises(InvalidArgument):
        extract_ego_network(path_graph, 0, depth)
    with pytest.raises(InvalidArgument):
        extract_ego_network(path_graph, 0, depth, induced=True)
