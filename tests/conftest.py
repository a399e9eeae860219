"""
Pytest configuration and shared fixtures.

Provides the small graphs reused across the algorithm and driver tests.
"""

from pathlib import Path

import pytest

from graph import Graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_config_path(project_root: Path) -> Path:
    """Return the bundled demonstration instance."""
    return project_root / "sample_graph.yaml"


@pytest.fixture
def sample_graph() -> Graph:
    """The five-vertex demonstration graph."""
    return Graph.from_edges(
        5,
        [(0, 1, 4), (0, 2, 1), (1, 2, 2), (1, 3, 5), (2, 3, 8), (3, 4, 3)],
    )


@pytest.fixture
def cycle_graph() -> Graph:
    """Weighted 4-cycle 0-1-2-3-0."""
    return Graph.from_edges(4, [(0, 1, 1), (1, 2, 2), (2, 3, 3), (3, 0, 4)])


@pytest.fixture
def triangle_graph() -> Graph:
    """Triangle whose heaviest edge (0, 2, 5) is not in the MST."""
    return Graph.from_edges(3, [(0, 1, 1), (1, 2, 2), (0, 2, 5)])


@pytest.fixture
def disconnected_graph() -> Graph:
    """Components {0, 1, 2} and {3, 4}, vertex 5 isolated."""
    return Graph.from_edges(6, [(0, 1, 1), (1, 2, 1), (3, 4, 1)])
