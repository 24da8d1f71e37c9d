import argparse
import logging
import random
import sys

import networkx as nx

from netstats import (
    DistanceCollectionTimeout,
    InvalidArgument,
    InvalidNode,
    average_distance,
    distance_distribution,
    eccentricities,
    extract_ego_network,
    load_edge_list,
    node_for_label,
    remove_high_degree_nodes,
    sample_subgraph,
    summarize_distances,
)
from netstats.graph_store import label_of
from netstats.report import graph_summary, plot_distance_histogram, write_distances


def parse_arguments(argv: list[str] = None) -> argparse.Namespace:
    """
    Parse command-line arguments for the distance analysis program.

    Returns:
        argparse.Namespace: Parsed arguments containing:
            - graph_file: Path to the input edge list (one "source target" pair per line)
            - degree_threshold: Remove nodes whose degree exceeds this value (optional)
            - sample_size: Keep a uniform random sample of this many nodes (optional)
            - ego_center: Raw label of the node to extract an ego network around (optional)
            - ego_depth: Hop bound for the ego network (default 1)
            - output: Path of the histogram image (optional)
            - distances_output: Path of the distance list, one integer per line (optional)
            - title: Histogram caption
            - diameter: Boolean flag to compute the diameter
            - undirected: Boolean flag to follow edges in both directions
            - include_self: Boolean flag to keep self-distances in the distribution
            - max_sources: Cap on BFS sources for the distance distribution (optional)
            - time_limit: Seconds allowed for the distance distribution (optional)
            - workers: Number of processes for the distance distribution (default 1)
            - seed: Seed for the random source used by sampling (optional)
            - verbose: Boolean flag for debug logging
    """
    parser = argparse.ArgumentParser(
        description='Distance statistics for edge-list social networks.',
        usage='python %(prog)s edges.txt [OPTIONS]'
    )

    parser.add_argument('graph_file',
                        type=str,
                        metavar='edges.txt',
                        help='Path to the input edge list (one "source target" pair per line).')

    parser.add_argument('--degree_threshold',
                        type=int,
                        metavar='T',
                        help='Remove nodes whose degree is greater than T before analysis.')

    parser.add_argument('--sample_size',
                        type=int,
                        metavar='k',
                        help='Analyze the subgraph induced by k uniformly sampled nodes.')

    parser.add_argument('--ego_center',
                        type=int,
                        metavar='label',
                        help='Analyze only the ego network around this node label.')

    parser.add_argument('--ego_depth',
                        type=int,
                        default=1,
                        metavar='d',
                        help='Hop bound for --ego_center (default: 1).')

    parser.add_argument('--output',
                        type=str,
                        metavar='histogram.png',
                        help='Save the distance histogram to this image file.')

    parser.add_argument('--distances_output',
                        type=str,
                        metavar='distances.txt',
                        help='Write every collected distance to this file, one per line.')

    parser.add_argument('--title',
                        type=str,
                        default='Distance Distribution',
                        help='Histogram caption (default: "Distance Distribution").')

    parser.add_argument('--diameter',
                        action='store_true',
                        help='Compute the graph diameter.')

    parser.add_argument('--undirected',
                        action='store_true',
                        help='Follow edges in both directions and count total degree.')

    parser.add_argument('--include_self',
                        action='store_true',
                        help='Count the 0 distance of every source to itself in the distribution.')

    parser.add_argument('--max_sources',
                        type=int,
                        metavar='n',
                        help='Run BFS from at most n randomly chosen sources.')

    parser.add_argument('--time_limit',
                        type=float,
                        metavar='seconds',
                        help='Abort the distance distribution after this many seconds.')

    parser.add_argument('--workers',
                        type=int,
                        default=1,
                        metavar='n',
                        help='Processes used for the distance distribution (default: 1).')

    parser.add_argument('--seed',
                        type=int,
                        help='Seed for random sampling, for reproducible runs.')

    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='Enable debug logging.')

    return parser.parse_args(argv)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')


def print_summary(name: str, graph: nx.MultiDiGraph) -> None:
    summary = graph_summary(graph)
    print(f"{name}: {summary['nodes']:,} nodes, {summary['edges']:,} edges, "
          f"{summary['weak_components']:,} weak component(s), "
          f"{summary['self_loops']:,} self-loop(s)")


def print_distance_report(sample: list[int]) -> None:
    """
    Print the size and summary statistics of a distance sample.

    Args:
        sample: Distance sample collected from the graph

    Returns:
        None (prints results to console)
    """
    print(f"Distance distribution size: {len(sample):,}")
    if not sample:
        print("Distance statistics: N/A (no node reaches another)")
        return

    summary = summarize_distances(sample)
    print(f"Average distance: {average_distance(sample):.3f}")
    print(f"Distance range: {summary['min']}-{summary['max']} | "
          f"median: {summary['median']} | mode: {summary['mode']} | "
          f"variance: {summary['variance']:.3f}")


def print_diameter_report(graph: nx.MultiDiGraph, directed: bool) -> None:
    ecc = eccentricities(graph, directed=directed)
    value = max(ecc.values(), default=0)
    periphery = [label_of(graph, node) for node, e in ecc.items() if e == value and value > 0]

    print(f"Diameter: {value}")
    if periphery:
        shown = ', '.join(str(label) for label in periphery[:10])
        more = f" (+{len(periphery) - 10} more)" if len(periphery) > 10 else ""
        print(f"Periphery: {shown}{more}")


def main(argv: list[str] = None) -> int:
    args = parse_arguments(argv)
    configure_logging(args.verbose)
    directed = not args.undirected
    rng = random.Random(args.seed)

    # ── GRAPH LOADING ─────────────────────────────────────────────────────────
    try:
        graph = load_edge_list(args.graph_file)
    except FileNotFoundError:
        print(f"Error: File '{args.graph_file}' not found. Please check the path and try again.")
        return 1
    except PermissionError:
        print(f"Error: Permission denied reading '{args.graph_file}'.")
        return 1
    except OSError as err:
        print(f"Error reading edge list: {err}")
        return 1

    print_summary("Graph", graph)

    try:
        # ── DEGREE FILTER ─────────────────────────────────────────────────────
        if args.degree_threshold is not None:
            graph = remove_high_degree_nodes(graph, args.degree_threshold, directed)
            print_summary(f"After removing degree > {args.degree_threshold}", graph)

        # ── RANDOM SAMPLE ─────────────────────────────────────────────────────
        if args.sample_size is not None:
            graph = sample_subgraph(graph, args.sample_size, rng)
            print_summary(f"Random sample of {args.sample_size}", graph)

        # ── EGO NETWORK ───────────────────────────────────────────────────────
        if args.ego_center is not None:
            center = node_for_label(graph, args.ego_center)
            graph = extract_ego_network(graph, center, args.ego_depth, directed)
            print_summary(f"Ego network of {args.ego_center} (depth {args.ego_depth})", graph)

        # ── DISTANCE DISTRIBUTION ─────────────────────────────────────────────
        sample = distance_distribution(graph,
                                       directed=directed,
                                       max_sources=args.max_sources,
                                       rng=rng,
                                       time_limit=args.time_limit,
                                       workers=args.workers,
                                       include_self=args.include_self)
        print_distance_report(sample)

        # ── DIAMETER ──────────────────────────────────────────────────────────
        if args.diameter:
            print_diameter_report(graph, directed)

    except InvalidNode as err:
        print(f"Error: {err}")
        return 1
    except InvalidArgument as err:
        print(f"Error: {err}")
        return 1
    except DistanceCollectionTimeout as err:
        print(f"Error: {err} No distances reported.")
        return 1

    # ── OUTPUT ────────────────────────────────────────────────────────────────
    try:
        if args.distances_output:
            write_distances(sample, args.distances_output)
            print(f"Distances saved to '{args.distances_output}'.")
        if args.output:
            plot_distance_histogram(sample, args.output, args.title)
            print(f"Histogram saved to '{args.output}'.")
    except PermissionError as err:
        print(f"Error: Permission denied writing output: {err}")
        return 1
    except OSError as err:
        print(f"Error saving output: {err}")
        return 1

    return 0  # success


if __name__ == "__main__":
    sys.exit(main())
