"""Tests for the demonstration driver."""

import sys

import pytest

import main
from graph import Graph


class TestConfig:
    def test_sample_instance_loads(self, sample_config_path, sample_graph):
        config = main.load_config(sample_config_path)
        assert config["algorithms"]["start"] == 0
        graph = main.build_graph(config["graph"])
        assert graph.format() == sample_graph.format()

    def test_custom_instance(self, tmp_path):
        path = tmp_path / "instance.yaml"
        path.write_text(
            "graph:\n  vertex_count: 3\n  edges:\n    - [0, 1, 2]\n    - [1, 2]\n",
            encoding="utf-8",
        )
        graph = main.build_graph(main.load_config(path)["graph"])
        assert graph.vertex_count() == 3
        assert graph.total_weight() == 3


class TestRun:
    def test_runs_all_five_algorithms(self, sample_graph):
        results = main.run_algorithms(sample_graph, 0)
        titles = [title for title, _, _ in results]
        assert titles == [
            "BFS Tree (starting from vertex 0):",
            "DFS Tree (starting from vertex 0):",
            "Dijkstra Tree (starting from vertex 0):",
            "Prim MST:",
            "Kruskal MST:",
        ]
        assert all(isinstance(tree, Graph) for _, _, tree in results)
        assert [tree.total_weight() for _, _, tree in results] == [16, 17, 11, 11, 11]

    def test_print_results_layout(self, sample_graph, capsys):
        main.print_results(sample_graph, main.run_algorithms(sample_graph, 0))
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "=== Graph Algorithms Demonstration ==="
        assert "Original Graph:" in lines
        assert "Vertex 0: -> (2, weight: 1) -> (1, weight: 4)" in lines
        assert lines.count(main.RULE) == 6
        assert lines[-1] == "All algorithms executed without errors."


class TestMain:
    def test_main_prints_demo(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["main.py"])
        main.main()
        out = capsys.readouterr().out
        assert "Kruskal MST:" in out
        assert "Demonstration completed successfully!" in out

    def test_start_override(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["main.py", "--start", "4"])
        main.main()
        assert "BFS Tree (starting from vertex 4):" in capsys.readouterr().out

    def test_invalid_start_exits_with_usage_error(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["main.py", "--start", "9"])
        with pytest.raises(SystemExit) as excinfo:
            main.main()
        assert excinfo.value.code == 2
        assert "out of range" in capsys.readouterr().err
