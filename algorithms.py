from __future__ import annotations

import logging
import math
from typing import List, Optional

from errors import InvalidArgumentError, check_index
from graph import Graph
from structures import PriorityQueue, Queue, UnionFind


logger = logging.getLogger(__name__)


def _heap_capacity(graph: Graph) -> int:
    # Every successful relaxation pushes one entry and each adjacency entry
    # relaxes at most once, so stale entries never overflow this bound.
    entries = sum(graph.degree(v) for v in range(graph.vertex_count()))
    return graph.vertex_count() + entries


def bfs(graph: Graph, start: int) -> Graph:
    """Return the breadth-first tree rooted at ``start``.

    Vertices that cannot be reached from ``start`` keep no edges.
    """
    n = graph.vertex_count()
    check_index("Start vertex", start, n)
    tree = Graph(n)
    visited = [False] * n
    queue = Queue(n)

    visited[start] = True
    queue.enqueue(start)

    while not queue.is_empty():
        u = queue.dequeue()
        for neighbor in graph.neighbors(u):
            v = neighbor.vertex
            if not visited[v]:
                visited[v] = True
                tree.add_edge(u, v, neighbor.weight)
                queue.enqueue(v)

    logger.debug("bfs from %d selected %d edges", start, tree.edge_count())
    return tree


def dfs(graph: Graph, start: int) -> Graph:
    """Return the depth-first tree of the component containing ``start``.

    An explicit stack of neighbor iterators reproduces the recursive visiting
    order without being bounded by the interpreter's recursion limit.
    """
    n = graph.vertex_count()
    check_index("Start vertex", start, n)
    tree = Graph(n)
    visited = [False] * n

    visited[start] = True
    stack = [(start, iter(graph.neighbors(start)))]
    while stack:
        u, pending = stack[-1]
        for neighbor in pending:
            v = neighbor.vertex
            if not visited[v]:
                visited[v] = True
                tree.add_edge(u, v, neighbor.weight)
                stack.append((v, iter(graph.neighbors(v))))
                break
        else:
            stack.pop()

    logger.debug("dfs from %d selected %d edges", start, tree.edge_count())
    return tree


def dijkstra(graph: Graph, start: int) -> Graph:
    """Return the shortest-path tree rooted at ``start``.

    Each tree edge carries the weight of the input edge it follows, recovered
    as the distance difference between its endpoints.
    """
    n = graph.vertex_count()
    check_index("Start vertex", start, n)
    for edge in graph.edges():
        if edge.weight < 0:
            raise InvalidArgumentError(
                f"Dijkstra requires non-negative weights, edge "
                f"{edge.source}-{edge.target} has weight {edge.weight}."
            )

    tree = Graph(n)
    distances: List[float] = [math.inf] * n
    previous: List[Optional[int]] = [None] * n
    distances[start] = 0

    queue = PriorityQueue(_heap_capacity(graph))
    queue.insert(start, 0)

    while not queue.is_empty():
        u = queue.extract_min()
        for neighbor in graph.neighbors(u):
            v = neighbor.vertex
            candidate = distances[u] + neighbor.weight
            if candidate < distances[v]:
                distances[v] = candidate
                previous[v] = u
                queue.insert(v, candidate)

    for v, parent in enumerate(previous):
        if parent is not None:
            tree.add_edge(parent, v, distances[v] - distances[parent])

    logger.debug("dijkstra from %d selected %d edges", start, tree.edge_count())
    return tree


def prim(graph: Graph) -> Graph:
    """Return the minimum spanning tree grown from vertex 0.

    Connectivity is not checked: vertices outside vertex 0's component stay
    without edges.
    """
    n = graph.vertex_count()
    tree = Graph(n)
    in_tree = [False] * n
    keys: List[float] = [math.inf] * n
    parents: List[Optional[int]] = [None] * n
    keys[0] = 0

    queue = PriorityQueue(_heap_capacity(graph))
    queue.insert(0, 0)

    while not queue.is_empty():
        u = queue.extract_min()
        in_tree[u] = True
        for neighbor in graph.neighbors(u):
            v = neighbor.vertex
            if not in_tree[v] and neighbor.weight < keys[v]:
                keys[v] = neighbor.weight
                parents[v] = u
                queue.insert(v, neighbor.weight)

    for v in range(1, n):
        parent = parents[v]
        if parent is not None:
            tree.add_edge(parent, v, keys[v])

    logger.debug("prim selected %d edges", tree.edge_count())
    return tree


def kruskal(graph: Graph) -> Graph:
    """Return a minimum spanning forest, one tree per connected component."""
    n = graph.vertex_count()
    tree = Graph(n)
    components = UnionFind(n)

    candidates = sorted(
        (edge for edge in graph.edges() if edge.source < edge.target),
        key=lambda edge: edge.weight,
    )
    for edge in candidates:
        if components.find(edge.source) != components.find(edge.target):
            tree.add_edge(edge.source, edge.target, edge.weight)
            components.unite(edge.source, edge.target)

    logger.debug(
        "kruskal selected %d of %d edges", tree.edge_count(), len(candidates)
    )
    return tree
