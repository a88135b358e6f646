"""Graph algorithms: Bellman-Ford, Kruskal's MST and reachability."""

from __future__ import annotations

import math
from collections import defaultdict, deque
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge."""

    source: int
    target: int
    weight: int = 0


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def _check_vertices(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    checked = list(edges)
    for edge in checked:
        for vertex in (edge.source, edge.target):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} outside 0..{vertex_count - 1}")
    return checked


def bellman_ford(vertex_count: int, edges: Iterable[Edge], source: int) -> list[float]:
    """Return shortest distances from ``source``; unreachable vertices get ``math.inf``.

    Raises ``NegativeCycleError`` if a negative cycle is reachable.
    """
    edge_list = _check_vertices(vertex_count, edges)
    if not 0 <= source < vertex_count:
        raise ValueError(f"source {source} outside 0..{vertex_count - 1}")
    distances: list[float] = [math.inf] * vertex_count
    distances[source] = 0
    for _ in range(vertex_count - 1):
        changed = False
        for edge in edge_list:
            candidate = distances[edge.source] + edge.weight
            if distances[edge.source] != math.inf and candidate < distances[edge.target]:
                distances[edge.target] = candidate
                changed = True
        if not changed:
            break
    for edge in edge_list:
        if (
            distances[edge.source] != math.inf
            and distances[edge.source] + edge.weight < distances[edge.target]
        ):
            raise NegativeCycleError("graph contains negative weight cycle")
    return distances


def kruskal_mst(vertex_count: int, edges: Iterable[Edge]) -> tuple[int, list[Edge]]:
    """Return the total weight and edges of a minimum spanning forest.

    Edges are considered by weight, ties broken by target vertex.
    """
    edge_list = _check_vertices(vertex_count, edges)
    parent = list(range(vertex_count))
    size = [1] * vertex_count

    def find(node: int) -> int:
        root = node
        while parent[root] != root:
            root = parent[root]
        while parent[node] != root:
            parent[node], node = root, parent[node]
        return root

    cost = 0
    chosen: list[Edge] = []
    for edge in sorted(edge_list, key=lambda e: (e.weight, e.target)):
        x_root, y_root = find(edge.source), find(edge.target)
        if x_root == y_root:
            continue
        cost += edge.weight
        chosen.append(edge)
        if size[y_root] >= size[x_root]:
            parent[x_root] = y_root
            size[y_root] += size[x_root]
        else:
            parent[y_root] = x_root
            size[x_root] += size[y_root]
    return cost, chosen


def is_reachable(
    adjacency: Mapping[Hashable, Iterable[Hashable]], source: Hashable, target: Hashable
) -> bool:
    """Return whether ``target`` can be reached from ``source`` by breadth-first search."""
    if source == target:
        return True
    visited = {source}
    queue = deque([source])
    while queue:
        vertex = queue.popleft()
        for neighbour in adjacency.get(vertex, ()):
            if neighbour == target:
                return True
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return False


def has_path(target: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Return whether vertex ``target`` is reachable from vertex 1 along directed edges."""
    adjacency: dict[int, list[int]] = defaultdict(list)
    for start, end in edges:
        adjacency[start].append(end)
    return is_reachable(adjacency, 1, target)