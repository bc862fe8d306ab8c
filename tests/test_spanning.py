import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algokit.spanning import kruskal, prim


def _undirected(n, edges):
    graph = [[] for _ in range(n)]
    for a, b, w in edges:
        graph[a].append((b, w))
        graph[b].append((a, w))
    return graph


@st.composite
def connected_graphs(draw):
    n = draw(st.integers(min_value=1, max_value=9))
    edges = []
    for node in range(1, n):
        parent = draw(st.integers(0, node - 1))
        edges.append((parent, node, draw(st.integers(0, 30))))
    extra = draw(
        st.lists(
            st.tuples(st.integers(0, n - 1), st.integers(0, n - 1), st.integers(0, 30)),
            max_size=15,
        )
    )
    return n, edges + extra


def test_kruskal_single_edge():
    assert kruskal(2, [(0, 1, 7)]) == 7


def test_kruskal_triangle_drops_heaviest():
    assert kruskal(3, [(0, 1, 1), (1, 2, 2), (0, 2, 5)]) == 3


def test_kruskal_forest_over_components():
    assert kruskal(4, [(0, 1, 2), (2, 3, 6)]) == 8


def test_kruskal_no_edges():
    assert kruskal(3, []) == 0


def test_kruskal_bad_node():
    with pytest.raises(IndexError):
        kruskal(2, [(0, 4, 1)])


def test_prim_empty_graph():
    assert prim([]) == 0


def test_prim_single_node():
    assert prim([[]]) == 0


def test_prim_only_spans_component_of_zero():
    assert prim([[], [(2, 4)], [(1, 4)]]) == 0


@settings(max_examples=80)
@given(connected_graphs())
def test_prim_matches_kruskal_on_connected_graphs(data):
    n, edges = data
    assert prim(_undirected(n, edges)) == kruskal(n, edges)


@settings(max_examples=80)
@given(connected_graphs())
def test_spanning_weight_bounded_by_tree_edges(data):
    n, edges = data
    tree_weight = sum(w for _, _, w in edges[: n - 1])
    assert kruskal(n, edges) <= tree_weight