import itertools

import pytest

from dsakit.graphs import (
    articulation_points,
    bfs,
    can_color,
    dfs,
    find_bridges,
    has_cycle_directed,
    has_cycle_undirected,
    is_bipartite,
    strongly_connected_components,
    topological_sort,
)

SAMPLE = [[1, 2], [0, 3, 4], [0], [1], [1]]

TWO_TRIANGLES = [
    [1, 2],
    [0, 2],
    [0, 1, 3],
    [2, 4],
    [3, 5, 6],
    [4, 6],
    [4, 5],
    [],
]

BRIDGE_SAMPLE = [[1, 2], [0, 2], [0, 1, 3], [2, 4], [3]]
ARTICULATION_SAMPLE = [[1], [0, 2, 3], [1], [1, 4], [3]]


def _without_edge(adjacency, u, v):
    return [
        [w for w in neighbours if {node, w} != {u, v}]
        for node, neighbours in enumerate(adjacency)
    ]


def _without_node(adjacency, x):
    return [
        [] if node == x else [w for w in neighbours if w != x]
        for node, neighbours in enumerate(adjacency)
    ]


def _component_count(adjacency, skip=None):
    seen = set()
    count = 0
    for node in range(len(adjacency)):
        if node == skip or node in seen:
            continue
        seen.update(bfs(adjacency, node))
        count += 1
    return count


def test_bfs_sample_order():
    assert bfs(SAMPLE, 0) == [0, 1, 2, 3, 4]


def test_dfs_sample_order():
    assert dfs(SAMPLE, 0) == [0, 1, 3, 4, 2]


def test_traversals_visit_reachable_nodes_once():
    for start in range(len(TWO_TRIANGLES)):
        breadth = bfs(TWO_TRIANGLES, start)
        depth = dfs(TWO_TRIANGLES, start)
        assert breadth[0] == start == depth[0]
        assert len(set(breadth)) == len(breadth)
        assert sorted(breadth) == sorted(depth)


def test_isolated_node_reaches_only_itself():
    assert bfs(TWO_TRIANGLES, 7) == [7]
    assert dfs(TWO_TRIANGLES, 7) == [7]


@pytest.mark.parametrize("start", [-1, 5])
def test_traversal_rejects_unknown_start(start):
    with pytest.raises(IndexError):
        bfs(SAMPLE, start)
    with pytest.raises(IndexError):
        dfs(SAMPLE, start)


def test_undirected_cycle_detection():
    with_cycle = [[1], [0, 2, 4], [1, 3], [2, 4], [1, 3]]
    assert has_cycle_undirected(with_cycle)
    assert not has_cycle_undirected(SAMPLE)
    assert has_cycle_undirected(TWO_TRIANGLES)
    assert not has_cycle_undirected([])


def test_directed_cycle_detection():
    assert has_cycle_directed([[1], [2], [3], [1]])
    assert not has_cycle_directed([[1, 2], [3], [3], []])
    assert has_cycle_directed([[0]])


def test_topological_sort_sample():
    adjacency = [[], [], [3], [1], [0, 1], [2, 0]]
    assert topological_sort(adjacency) == [5, 4, 2, 3, 1, 0]


def test_topological_sort_puts_every_edge_forward():
    adjacency = [[1, 2], [3], [3, 4], [5], [5], [], [0, 5]]
    order = topological_sort(adjacency)
    assert sorted(order) == list(range(len(adjacency)))
    position = {node: index for index, node in enumerate(order)}
    for u, neighbours in enumerate(adjacency):
        for v in neighbours:
            assert position[u] < position[v]


def test_bipartite():
    assert is_bipartite([[1, 3], [0, 2], [1, 3], [0, 2]])
    assert not is_bipartite([[1, 2], [0, 2], [0, 1]])
    assert is_bipartite(SAMPLE)
    assert not is_bipartite(TWO_TRIANGLES)


@pytest.mark.parametrize("adjacency", [BRIDGE_SAMPLE, TWO_TRIANGLES, SAMPLE])
def test_bridges_are_exactly_disconnecting_edges(adjacency):
    bridges = {frozenset(edge) for edge in find_bridges(adjacency)}
    edges = {frozenset((u, v)) for u, ns in enumerate(adjacency) for v in ns}
    for edge in edges:
        u, v = tuple(edge)
        disconnects = v not in bfs(_without_edge(adjacency, u, v), u)
        assert (edge in bridges) == disconnects


def test_bridges_are_tree_edges_in_discovery_direction():
    for u, v in find_bridges(BRIDGE_SAMPLE):
        assert v in BRIDGE_SAMPLE[u]
        assert dfs(BRIDGE_SAMPLE, 0).index(u) < dfs(BRIDGE_SAMPLE, 0).index(v)


@pytest.mark.parametrize(
    "adjacency", [ARTICULATION_SAMPLE, TWO_TRIANGLES, SAMPLE, BRIDGE_SAMPLE]
)
def test_articulation_points_are_exactly_cut_vertices(adjacency):
    points = articulation_points(adjacency)
    assert points == sorted(points)
    before = _component_count(adjacency)
    for node in range(len(adjacency)):
        after = _component_count(_without_node(adjacency, node), skip=node)
        assert (node in points) == (after > before)


@pytest.mark.parametrize(
    "adjacency",
    [
        [[2, 3], [0], [1], [4], []],
        [[1], [2], [0, 3], [4], [5], [3], []],
        [[], [], []],
    ],
)
def test_strong_components_match_mutual_reachability(adjacency):
    components = strongly_connected_components(adjacency)
    flat = [node for component in components for node in component]
    assert sorted(flat) == list(range(len(adjacency)))
    label = {node: index for index, comp in enumerate(components) for node in comp}
    reach = [set(bfs(adjacency, node)) for node in range(len(adjacency))]
    for u, v in itertools.product(range(len(adjacency)), repeat=2):
        mutual = v in reach[u] and u in reach[v]
        assert (label[u] == label[v]) == mutual


def test_coloring():
    adjacency = [[1, 2, 3], [0, 2], [0, 1, 3], [0, 2]]
    assert can_color(adjacency, 3)
    assert not can_color(adjacency, 2)


def test_complete_graph_needs_as_many_colors_as_nodes():
    complete = [[v for v in range(4) if v != u] for u in range(4)]
    assert can_color(complete, 4)
    assert not can_color(complete, 3)


def test_coloring_edge_cases():
    assert can_color([], 0)
    assert not can_color([[]], 0)
    with pytest.raises(ValueError):
        can_color(SAMPLE, -1)