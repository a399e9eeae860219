from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, List, Sequence, TextIO, Tuple

from errors import InvalidArgumentError, check_index, check_positive


@dataclass(frozen=True)
class Neighbor:
    vertex: int
    weight: int


@dataclass(frozen=True)
class Edge:
    source: int
    target: int
    weight: int


class Graph:
    """Undirected weighted graph over the vertices 0..V-1.

    Each vertex keeps its (neighbor, weight) entries most-recent-first, so an
    edge inserted later is enumerated before the ones inserted earlier.
    """

    def __init__(self, vertex_count: int) -> None:
        check_positive("Vertex count", vertex_count)
        self._vertex_count = vertex_count
        self._adjacency: List[Deque[Tuple[int, int]]] = [
            deque() for _ in range(vertex_count)
        ]

    @classmethod
    def from_edges(
        cls, vertex_count: int, edges: Iterable[Sequence[int]]
    ) -> Graph:
        """Build a graph from (src, dest) or (src, dest, weight) triples."""
        graph = cls(vertex_count)
        for edge in edges:
            if len(edge) == 2:
                graph.add_edge(edge[0], edge[1])
            elif len(edge) == 3:
                graph.add_edge(edge[0], edge[1], edge[2])
            else:
                raise InvalidArgumentError(
                    f"Edge {list(edge)} must be [src, dest] or [src, dest, weight]."
                )
        return graph

    def _check_vertex(self, vertex: int) -> None:
        check_index("Vertex", vertex, self._vertex_count)

    def vertex_count(self) -> int:
        return self._vertex_count

    def add_edge(self, src: int, dest: int, weight: int = 1) -> None:
        self._check_vertex(src)
        self._check_vertex(dest)
        self._adjacency[src].appendleft((dest, weight))
        self._adjacency[dest].appendleft((src, weight))

    def remove_edge(self, src: int, dest: int) -> None:
        """Drop the first src->dest entry and the first dest->src entry.

        A direction without a matching entry is left as it is.
        """
        self._check_vertex(src)
        self._check_vertex(dest)
        self._remove_first(src, dest)
        self._remove_first(dest, src)

    def _remove_first(self, vertex: int, neighbor: int) -> None:
        entries = self._adjacency[vertex]
        for index, (other, _) in enumerate(entries):
            if other == neighbor:
                del entries[index]
                return

    def neighbors(self, vertex: int) -> List[Neighbor]:
        self._check_vertex(vertex)
        return [Neighbor(other, weight) for other, weight in self._adjacency[vertex]]

    def degree(self, vertex: int) -> int:
        self._check_vertex(vertex)
        return len(self._adjacency[vertex])

    def edges(self) -> List[Edge]:
        """Return every undirected edge once, as seen from its lower endpoint."""
        result: List[Edge] = []
        for source in range(self._vertex_count):
            loop_entries = 0
            for target, weight in self._adjacency[source]:
                if source < target:
                    result.append(Edge(source, target, weight))
                elif source == target:
                    # A self-loop is stored twice in its own list.
                    loop_entries += 1
                    if loop_entries % 2 == 1:
                        result.append(Edge(source, target, weight))
        return result

    def edge_count(self) -> int:
        return len(self.edges())

    def total_weight(self) -> int:
        return sum(edge.weight for edge in self.edges())

    def path_cost(self, path: Sequence[int]) -> int:
        """Return the total weight of walking along the given vertex sequence.

        Between parallel edges the lightest one is used.
        """
        total_cost = 0
        for u, v in zip(path[:-1], path[1:]):
            costs = [n.weight for n in self.neighbors(u) if n.vertex == v]
            if not costs:
                raise InvalidArgumentError(f"Edge {u}-{v} not present in graph.")
            total_cost += min(costs)
        return total_cost

    def format(self) -> str:
        lines = []
        for vertex in range(self._vertex_count):
            line = f"Vertex {vertex}:"
            for other, weight in self._adjacency[vertex]:
                line += f" -> ({other}, weight: {weight})"
            lines.append(line)
        return "\n".join(lines)

    def print_graph(self, file: TextIO | None = None) -> None:
        print(self.format(), file=file if file is not None else sys.stdout)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self._vertex_count}, edges={self.edge_count()})"
