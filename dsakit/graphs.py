"""Traversals and structural queries on unweighted graphs.

A graph is a sequence of adjacency lists: ``adjacency[u]`` lists the
neighbours of node ``u``, and nodes are numbered from 0.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

Adjacency = Sequence[Sequence[int]]


def _check_node(adjacency: Adjacency, node: int) -> None:
    if not 0 <= node < len(adjacency):
        raise IndexError(f"node {node} is not in the graph")


def _depth_first(
    adjacency: Adjacency, start: int, visited: list[bool]
) -> Iterator[tuple[int, bool]]:
    """Yield ``(node, True)`` on entering and ``(node, False)`` on leaving."""
    visited[start] = True
    yield start, True
    stack = [(start, iter(adjacency[start]))]
    while stack:
        node, neighbours = stack[-1]
        for neighbour in neighbours:
            if not visited[neighbour]:
                visited[neighbour] = True
                yield neighbour, True
                stack.append((neighbour, iter(adjacency[neighbour])))
                break
        else:
            stack.pop()
            yield node, False


def bfs(adjacency: Adjacency, start: int) -> list[int]:
    """Nodes reachable from ``start`` in breadth-first order."""
    _check_node(adjacency, start)
    visited = [False] * len(adjacency)
    visited[start] = True
    pending = deque([start])
    order: list[int] = []
    while pending:
        node = pending.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                pending.append(neighbour)
    return order


def dfs(adjacency: Adjacency, start: int) -> list[int]:
    """Nodes reachable from ``start`` in depth-first preorder."""
    _check_node(adjacency, start)
    visited = [False] * len(adjacency)
    return [node for node, entering in _depth_first(adjacency, start, visited) if entering]


def has_cycle_undirected(adjacency: Adjacency) -> bool:
    """True when an undirected graph holds a cycle."""
    visited = [False] * len(adjacency)
    for root in range(len(adjacency)):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, -1, iter(adjacency[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, node, iter(adjacency[neighbour])))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False


_UNSEEN, _ON_PATH, _DONE = 0, 1, 2


def has_cycle_directed(adjacency: Adjacency) -> bool:
    """True when a directed graph holds a cycle."""
    state = [_UNSEEN] * len(adjacency)
    for root in range(len(adjacency)):
        if state[root] != _UNSEEN:
            continue
        state[root] = _ON_PATH
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if state[neighbour] == _ON_PATH:
                    return True
                if state[neighbour] == _UNSEEN:
                    state[neighbour] = _ON_PATH
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                state[node] = _DONE
                stack.pop()
    return False


def _finishing_order(adjacency: Adjacency) -> list[int]:
    visited = [False] * len(adjacency)
    finished: list[int] = []
    for root in range(len(adjacency)):
        if not visited[root]:
            finished.extend(
                node
                for node, entering in _depth_first(adjacency, root, visited)
                if not entering
            )
    return finished


def topological_sort(adjacency: Adjacency) -> list[int]:
    """Order the nodes of a directed acyclic graph so every edge points forward."""
    return _finishing_order(adjacency)[::-1]


def is_bipartite(adjacency: Adjacency) -> bool:
    """True when the nodes split into two sides with no edge inside a side."""
    color = [-1] * len(adjacency)
    for start in range(len(adjacency)):
        if color[start] != -1:
            continue
        color[start] = 0
        pending = deque([start])
        while pending:
            node = pending.popleft()
            for neighbour in adjacency[node]:
                if color[neighbour] == -1:
                    color[neighbour] = 1 - color[node]
                    pending.append(neighbour)
                elif color[neighbour] == color[node]:
                    return False
    return True


def _low_links(
    adjacency: Adjacency,
) -> tuple[list[int], list[int], list[tuple[int, int]], set[int]]:
    """Discovery times, low links, tree edges in finishing order, and roots."""
    size = len(adjacency)
    disc = [-1] * size
    low = [0] * size
    tree_edges: list[tuple[int, int]] = []
    roots: set[int] = set()
    timer = 0
    for root in range(size):
        if disc[root] != -1:
            continue
        roots.add(root)
        disc[root] = low[root] = timer
        timer += 1
        stack = [(root, -1, iter(adjacency[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour == parent:
                    continue
                if disc[neighbour] != -1:
                    low[node] = min(low[node], disc[neighbour])
                else:
                    disc[neighbour] = low[neighbour] = timer
                    timer += 1
                    stack.append((neighbour, node, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                if parent != -1:
                    low[parent] = min(low[parent], low[node])
                    tree_edges.append((parent, node))
    return disc, low, tree_edges, roots


def find_bridges(adjacency: Adjacency) -> list[tuple[int, int]]:
    """Edges of an undirected graph whose removal disconnects it."""
    disc, low, tree_edges, _ = _low_links(adjacency)
    return [(u, v) for u, v in tree_edges if low[v] > disc[u]]


def articulation_points(adjacency: Adjacency) -> list[int]:
    """Nodes of an undirected graph whose removal disconnects it, ascending."""
    disc, low, tree_edges, roots = _low_links(adjacency)
    points: set[int] = set()
    children = dict.fromkeys(roots, 0)
    for u, v in tree_edges:
        if u in roots:
            children[u] += 1
        elif low[v] >= disc[u]:
            points.add(u)
    points.update(root for root, count in children.items() if count > 1)
    return sorted(points)


def strongly_connected_components(adjacency: Adjacency) -> list[list[int]]:
    """Strongly connected components of a directed graph (Kosaraju)."""
    order = _finishing_order(adjacency)
    transpose: list[list[int]] = [[] for _ in adjacency]
    for node, neighbours in enumerate(adjacency):
        for neighbour in neighbours:
            transpose[neighbour].append(node)
    visited = [False] * len(adjacency)
    components: list[list[int]] = []
    for node in reversed(order):
        if not visited[node]:
            components.append(
                [n for n, entering in _depth_first(transpose, node, visited) if entering]
            )
    return components


def can_color(adjacency: Adjacency, colors: int) -> bool:
    """True when the nodes can take at most ``colors`` colours with no
    two neighbours alike."""
    if colors < 0:
        raise ValueError("colors must not be negative")
    size = len(adjacency)
    assigned = [0] * size

    def place(node: int) -> bool:
        if node == size:
            return True
        for color in range(1, colors + 1):
            if all(assigned[neighbour] != color for neighbour in adjacency[node]):
                assigned[node] = color
                if place(node + 1):
                    return True
                assigned[node] = 0
        return False

    return place(0)