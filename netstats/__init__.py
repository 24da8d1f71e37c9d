"""Structural statistics for edge-list social networks."""
from netstats.builder import GraphBuilder, load_edge_list, parse_edge_line, read_edge_lines
from netstats.distances import (
    attribute_cost,
    average_distance,
    diameter,
    distance_distribution,
    eccentricities,
    summarize_distances,
    unit_cost,
)
from netstats.ego import extract_ego_network
from netstats.errors import (
    DistanceCollectionTimeout,
    InvalidArgument,
    InvalidNode,
    NetstatsError,
)
from netstats.filters import high_degree_nodes, remove_high_degree_nodes
from netstats.graph_store import LabelIndex, label_of, node_for_label
from netstats.sampling import sample_nodes, sample_subgraph
from netstats.traversal import bfs_distances, bfs_levels

__version__ = "0.1.0"
