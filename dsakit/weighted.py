"""Shortest paths and minimum spanning trees on weighted graphs.

Missing distances are reported as ``math.inf``.
"""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from dsakit.union_find import UnionFind

WeightedAdjacency = Sequence[Sequence[tuple[int, float]]]


@dataclass(frozen=True)
class Edge:
    """Directed, weighted edge from ``source`` to ``target``."""

    source: int
    target: int
    weight: float


class NegativeCycleError(ValueError):
    """The graph holds a cycle whose total weight is negative."""


def _check_source(vertex_count: int, source: int) -> None:
    if not 0 <= source < vertex_count:
        raise IndexError(f"node {source} is not in the graph")


def dijkstra(adjacency: WeightedAdjacency, source: int) -> list[float]:
    """Shortest distances from ``source`` over non-negative ``(node, weight)`` lists."""
    _check_source(len(adjacency), source)
    dist: list[float] = [math.inf] * len(adjacency)
    dist[source] = 0
    pending: list[tuple[float, int]] = [(0, source)]
    while pending:
        distance, node = heapq.heappop(pending)
        if distance > dist[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = distance + weight
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heapq.heappush(pending, (candidate, neighbour))
    return dist


def bellman_ford(vertex_count: int, edges: Sequence[Edge], source: int) -> list[float]:
    """Shortest distances from ``source``; negative weights are allowed.

    Raises NegativeCycleError when a negative cycle is reachable.
    """
    _check_source(vertex_count, source)
    dist: list[float] = [math.inf] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        for edge in edges:
            if dist[edge.source] != math.inf and dist[edge.source] + edge.weight < dist[edge.target]:
                dist[edge.target] = dist[edge.source] + edge.weight
    for edge in edges:
        if dist[edge.source] != math.inf and dist[edge.source] + edge.weight < dist[edge.target]:
            raise NegativeCycleError("graph contains a negative weight cycle")
    return dist


def prim_mst_cost(adjacency: WeightedAdjacency) -> float:
    """Weight of a minimum spanning tree of the component holding node 0."""
    if not adjacency:
        return 0
    in_tree = [False] * len(adjacency)
    key: list[float] = [math.inf] * len(adjacency)
    key[0] = 0
    pending: list[tuple[float, int]] = [(0, 0)]
    cost: float = 0
    while pending:
        weight, node = heapq.heappop(pending)
        if in_tree[node]:
            continue
        in_tree[node] = True
        cost += weight
        for neighbour, edge_weight in adjacency[node]:
            if not in_tree[neighbour] and edge_weight < key[neighbour]:
                key[neighbour] = edge_weight
                heapq.heappush(pending, (edge_weight, neighbour))
    return cost


def kruskal_mst_cost(vertex_count: int, edges: Iterable[Edge]) -> float:
    """Weight of a minimum spanning forest over undirected ``edges``."""
    sets = UnionFind(vertex_count)
    cost: float = 0
    for edge in sorted(edges, key=lambda e: e.weight):
        if sets.union(edge.source, edge.target):
            cost += edge.weight
    return cost


def floyd_warshall(graph: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from a square weight matrix.

    ``math.inf`` marks a missing edge; the input is left unchanged.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("floyd_warshall() needs a square matrix")
    dist = [list(row) for row in graph]
    for k in range(size):
        through = dist[k]
        for row in dist:
            to_k = row[k]
            if to_k == math.inf:
                continue
            for j, onward in enumerate(through):
                if onward != math.inf and to_k + onward < row[j]:
                    row[j] = to_k + onward
    return dist