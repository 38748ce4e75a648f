import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.graphs import can_finish, clone_graph
from algodrills.nodes import GraphNode


def make_graph(adjacency):
    nodes = [GraphNode(i + 1) for i in range(len(adjacency))]
    for node, neighbors in zip(nodes, adjacency):
        node.neighbors = [nodes[v - 1] for v in neighbors]
    return nodes


def collect(start):
    seen = {start.val: start}
    stack = [start]
    while stack:
        node = stack.pop()
        for n in node.neighbors:
            if n.val not in seen:
                seen[n.val] = n
                stack.append(n)
    return seen


def adjacency_of(start):
    nodes = collect(start)
    return {val: [n.val for n in node.neighbors] for val, node in nodes.items()}


def test_clone_square_graph():
    adjacency = [[2, 4], [1, 3], [2, 4], [1, 3]]
    nodes = make_graph(adjacency)
    copy = clone_graph(nodes[0])
    assert adjacency_of(copy) == {i + 1: adj for i, adj in enumerate(adjacency)}
    originals = {id(n) for n in nodes}
    assert not originals & {id(n) for n in collect(copy).values()}


def test_clone_single_node():
    node = GraphNode(1)
    copy = clone_graph(node)
    assert copy is not node and copy.val == 1 and copy.neighbors == []


def test_clone_none():
    assert clone_graph(None) is None


def test_clone_keeps_shared_neighbors_shared():
    nodes = make_graph([[2, 3], [1, 3], [1, 2]])
    copy = clone_graph(nodes[0])
    second, third = copy.neighbors
    assert second.neighbors[1] is third
    assert third.neighbors[0] is copy


def test_can_finish_simple_chain():
    assert can_finish(2, [[1, 0]]) is True


def test_can_finish_cycle():
    assert can_finish(2, [[1, 0], [0, 1]]) is False


def test_can_finish_self_loop():
    assert can_finish(3, [[2, 2]]) is False


def test_can_finish_no_prerequisites():
    assert can_finish(4, []) is True


def test_can_finish_out_of_range():
    with pytest.raises(ValueError):
        can_finish(2, [[2, 0]])


@given(
    st.integers(1, 8).flatmap(
        lambda n: st.tuples(
            st.just(n),
            st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, n - 1))),
        )
    )
)
def test_forward_edges_never_cycle(case):
    n, pairs = case
    edges = [[a, b] for a, b in pairs if a > b]
    assert can_finish(n, edges) is True
    if edges:
        a, b = edges[0]
        assert can_finish(n, edges + [[b, a]]) is False