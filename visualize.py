from __future__ import annotations

import argparse
import math
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from graph import Graph


Layout = Dict[int, Tuple[float, float]]


def build_networkx_graph(graph: Graph) -> nx.MultiGraph:
    g = nx.MultiGraph()
    g.add_nodes_from(range(graph.vertex_count()))
    for edge in graph.edges():
        g.add_edge(edge.source, edge.target, weight=edge.weight)
    return g


def compute_layout(graph_nx: nx.MultiGraph) -> Layout:
    return nx.spring_layout(graph_nx, seed=42)


def tree_edges(tree: Graph) -> List[Tuple[int, int]]:
    return [(edge.source, edge.target) for edge in tree.edges()]


def draw_tree(
    ax,
    graph_nx: nx.MultiGraph,
    layout: Layout,
    tree: Graph,
    title: str,
) -> None:
    nx.draw_networkx_edges(graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0)

    highlighted = tree_edges(tree)
    if highlighted:
        nx.draw_networkx_edges(
            nx.Graph(highlighted),
            layout,
            edge_color="#d62728",
            width=2.5,
            ax=ax,
        )

    nx.draw_networkx_nodes(graph_nx, layout, node_color="#9ecae1", node_size=500, ax=ax)
    nx.draw_networkx_labels(graph_nx, layout, font_size=10, ax=ax)

    edge_labels: Dict[Tuple[int, int], str] = {}
    for u, v, data in graph_nx.edges(data=True):
        key = (u, v)
        weight = str(data["weight"])
        edge_labels[key] = (
            f"{edge_labels[key]},{weight}" if key in edge_labels else weight
        )
    nx.draw_networkx_edge_labels(
        nx.Graph(list(edge_labels)), layout, edge_labels=edge_labels, font_size=8, ax=ax
    )

    ax.set_title(f"{title}\nweight {tree.total_weight()}", fontsize=10)
    ax.set_axis_off()


def draw_results(
    graph: Graph,
    results: Sequence[Tuple[str, str, Graph]],
    output: Path | None,
    show: bool,
) -> None:
    """Draw one panel per (title, caption, tree) result over the input graph."""
    graph_nx = build_networkx_graph(graph)
    layout = compute_layout(graph_nx)

    panels = len(results) + 1
    columns = min(3, panels)
    rows = math.ceil(panels / columns)
    fig, axes = plt.subplots(rows, columns, figsize=(5 * columns, 4.5 * rows), squeeze=False)
    flat_axes = [ax for row in axes for ax in row]

    draw_tree(flat_axes[0], graph_nx, layout, graph, "Original graph")
    for ax, (title, _caption, tree) in zip(flat_axes[1:], results):
        draw_tree(ax, graph_nx, layout, tree, title.rstrip(":"))
    for ax in flat_axes[panels:]:
        ax.set_axis_off()

    fig.tight_layout()

    if output:
        fig.savefig(output, bbox_inches="tight")
    if show:
        plt.show()
    else:
        plt.close(fig)


def main() -> None:
    from main import DEFAULT_CONFIG, build_graph, load_config, run_algorithms

    parser = argparse.ArgumentParser(
        description="Visualise the spanning trees produced by each graph algorithm."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG,
        help="Path to the YAML graph instance.",
    )
    parser.add_argument(
        "--start",
        type=int,
        help="Start vertex for BFS, DFS and Dijkstra.",
    )
    parser.add_argument(
        "--static-out",
        type=Path,
        help="Optional path to save a PNG of all panels.",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Do not display figures interactively.",
    )
    args = parser.parse_args()

    config = load_config(args.config)
    start = args.start
    if start is None:
        start = config.get("algorithms", {}).get("start", 0)

    graph = build_graph(config["graph"])
    results = run_algorithms(graph, start)

    draw_results(graph, results, output=args.static_out, show=not args.no_show)


if __name__ == "__main__":
    main()
