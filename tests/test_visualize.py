"""Tests for the matplotlib/networkx rendering helpers."""

import matplotlib

matplotlib.use("Agg")

import main  # noqa: E402
import visualize  # noqa: E402
from graph import Graph  # noqa: E402


def test_build_networkx_graph_keeps_parallel_edges():
    g = Graph.from_edges(3, [(0, 1, 4), (0, 1, 6), (1, 2, 1)])
    g.remove_edge(1, 2)
    graph_nx = visualize.build_networkx_graph(g)
    assert sorted(graph_nx.nodes) == [0, 1, 2]
    assert graph_nx.number_of_edges() == 2
    assert sorted(w for _, _, w in graph_nx.edges(data="weight")) == [4, 6]


def test_tree_edges(triangle_graph):
    assert sorted(visualize.tree_edges(triangle_graph)) == [(0, 1), (0, 2), (1, 2)]


def test_layout_covers_every_vertex(sample_graph):
    layout = visualize.compute_layout(visualize.build_networkx_graph(sample_graph))
    assert set(layout) == set(range(5))


def test_draw_results_saves_png(sample_graph, tmp_path):
    output = tmp_path / "trees.png"
    results = main.run_algorithms(sample_graph, 0)
    visualize.draw_results(sample_graph, results, output=output, show=False)
    assert output.exists()
    assert output.stat().st_size > 0
