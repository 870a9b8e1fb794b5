import pytest

from mcflow.errors import InvalidGraphMutation, MissingEdge
from mcflow.graph.flow_graph import Edge, FlowGraph


def test_init_graph_nodes():
    """A new graph has nodes 0..n-1 and no edges."""
    g = FlowGraph(3)
    assert list(g.nodes) == [0, 1, 2]
    assert g.num_nodes == 3
    assert g.starting_num_nodes == 3
    assert list(g.iter_edges()) == []
    assert g.get_artificial_nodes_map() == {}


def test_init_empty_graph():
    g = FlowGraph()
    assert len(g) == 0
    assert g.num_nodes == 0


def test_init_negative_nodes():
    with pytest.raises(InvalidGraphMutation, match="cannot be negative"):
        FlowGraph(-1)


def test_add_edge_basic():
    g = FlowGraph(2)
    g.add_edge(0, 1, 5, 3)
    assert g.has_edge(0, 1)
    assert not g.has_edge(1, 0)
    assert g.get_edge(0, 1) == Edge(0, 1, 5, 3)
    assert g.get_edge(0, 1).capacity == 5
    assert g.get_edge(0, 1).cost == 3

    # Nx adjacency check
    assert 1 in g.succ[0]
    assert 0 in g.pred[1]


def test_add_then_remove_edge():
    g = FlowGraph(3)
    g.add_edge(0, 2, 1, 1)
    assert g.has_edge(0, 2)
    g.remove_edge(0, 2)
    assert not g.has_edge(0, 2)


def test_add_edge_duplicate():
    g = FlowGraph(2)
    g.add_edge(0, 1, 1, 1)
    with pytest.raises(InvalidGraphMutation, match="already exists"):
        g.add_edge(0, 1, 2, 2)
    # the original edge is untouched
    assert g.get_edge(0, 1) == Edge(0, 1, 1, 1)


def test_add_edge_anti_parallel_allowed():
    g = FlowGraph(2)
    g.add_edge(0, 1, 1, 1)
    g.add_edge(1, 0, 2, 3)
    assert g.get_edge(1, 0) == Edge(1, 0, 2, 3)


def test_add_edge_negative_node():
    g = FlowGraph(2)
    with pytest.raises(InvalidGraphMutation, match="cannot be negative"):
        g.add_edge(-1, 1, 1, 1)


def test_add_edge_negative_capacity():
    g = FlowGraph(2)
    with pytest.raises(InvalidGraphMutation, match="Capacity cannot be negative"):
        g.add_edge(0, 1, -1, 1)
    assert not g.has_edge(0, 1)


def test_add_edge_negative_cost_allowed():
    """Residual graphs carry negative costs on reverse edges."""
    g = FlowGraph(2)
    g.add_edge(1, 0, 2, -4)
    assert g.get_edge(1, 0).cost == -4


def test_add_edge_non_integer_values():
    g = FlowGraph(2)
    with pytest.raises(InvalidGraphMutation, match="must be an integer"):
        g.add_edge(0, 1, 1.5, 1)
    with pytest.raises(InvalidGraphMutation, match="must be an integer"):
        g.add_edge(0, 1, 1, "1")
    with pytest.raises(InvalidGraphMutation, match="must be an integer"):
        g.add_edge(0, 1, True, 1)


def test_add_edge_grows_contiguously():
    """A new endpoint must be exactly the next node id."""
    g = FlowGraph(2)
    g.add_edge(1, 2, 1, 1)
    assert g.num_nodes == 3
    assert g.starting_num_nodes == 2

    # source first: 3 then 4 are both new and contiguous
    g.add_edge(3, 4, 1, 1)
    assert g.num_nodes == 5
    assert g.has_edge(3, 4)


def test_add_edge_node_gap():
    g = FlowGraph(2)
    with pytest.raises(InvalidGraphMutation, match="next node id"):
        g.add_edge(0, 3, 1, 1)
    assert g.num_nodes == 2
    with pytest.raises(InvalidGraphMutation, match="next node id"):
        g.add_edge(3, 2, 1, 1)
    assert g.num_nodes == 2


def test_add_node_contiguous():
    g = FlowGraph(2)
    g.add_node(2)
    assert g.num_nodes == 3
    with pytest.raises(InvalidGraphMutation, match="next node id"):
        g.add_node(5)
    with pytest.raises(InvalidGraphMutation, match="next node id"):
        g.add_node(0)


def test_remove_edge_missing():
    g = FlowGraph(2)
    with pytest.raises(MissingEdge, match="does not exist"):
        g.remove_edge(0, 1)


def test_remove_edge_missing_node():
    g = FlowGraph(2)
    with pytest.raises(InvalidGraphMutation, match="Node 7 does not exist"):
        g.remove_edge(0, 7)


def test_get_edge_missing():
    g = FlowGraph(2)
    with pytest.raises(MissingEdge):
        g.get_edge(1, 0)
    with pytest.raises(InvalidGraphMutation):
        g.get_edge(-1, 0)


def test_errors_are_value_errors():
    g = FlowGraph(2)
    with pytest.raises(ValueError):
        g.get_edge(0, 1)
    with pytest.raises(ValueError):
        g.add_edge(0, 1, -3, 0)


def test_set_edge_capacity():
    g = FlowGraph(2)
    g.add_edge(0, 1, 5, 3)
    g.set_edge_capacity(0, 1, 0)
    assert g.get_edge(0, 1).capacity == 0

    with pytest.raises(InvalidGraphMutation, match="Capacity cannot be negative"):
        g.set_edge_capacity(0, 1, -2)
    assert g.get_edge(0, 1).capacity == 0

    with pytest.raises(MissingEdge):
        g.set_edge_capacity(1, 0, 2)


def test_set_edge_cost():
    g = FlowGraph(2)
    g.add_edge(0, 1, 5, 3)
    g.set_edge_cost(0, 1, 7)
    assert g.get_edge(0, 1).cost == 7

    with pytest.raises(InvalidGraphMutation, match="Cost cannot be negative"):
        g.set_edge_cost(0, 1, -1)
    assert g.get_edge(0, 1).cost == 7

    with pytest.raises(MissingEdge):
        g.set_edge_cost(1, 0, 2)


def test_get_node_adj_list_insertion_order():
    g = FlowGraph(4)
    g.add_edge(0, 3, 1, 1)
    g.add_edge(0, 1, 2, 2)
    g.add_edge(0, 2, 3, 3)
    assert g.get_node_adj_list(0) == [
        Edge(0, 3, 1, 1),
        Edge(0, 1, 2, 2),
        Edge(0, 2, 3, 3),
    ]
    assert g.get_node_adj_list(3) == []
    with pytest.raises(InvalidGraphMutation):
        g.get_node_adj_list(4)


def test_iter_edges_order():
    g = FlowGraph(3)
    g.add_edge(2, 0, 1, 1)
    g.add_edge(0, 2, 1, 1)
    g.add_edge(0, 1, 1, 1)
    assert [(e.source, e.sink) for e in g.iter_edges()] == [(0, 2), (0, 1), (2, 0)]


def test_reverse_flag():
    g = FlowGraph(2)
    g.add_edge(0, 1, 1, 2)
    g.add_edge(1, 0, 1, -2, reverse=True)
    assert not g.is_reverse_edge(0, 1)
    assert g.is_reverse_edge(1, 0)


def test_artificial_nodes():
    g = FlowGraph(2)
    g.add_edge(0, 2, 1, 1)
    substituted = Edge(0, 1, 1, 1)
    g.add_artificial_node(2, substituted)
    assert g.get_artificial_nodes_map() == {2: substituted}

    with pytest.raises(InvalidGraphMutation, match="already recorded"):
        g.add_artificial_node(2, substituted)
    with pytest.raises(InvalidGraphMutation, match="original node"):
        g.add_artificial_node(1, substituted)
    with pytest.raises(InvalidGraphMutation, match="does not exist"):
        g.add_artificial_node(3, substituted)


def test_equality_compares_edges():
    g1 = FlowGraph(3)
    g1.add_edge(0, 1, 1, 2)
    g1.add_edge(1, 2, 3, 4)

    g2 = FlowGraph(3)
    g2.add_edge(1, 2, 3, 4)
    g2.add_edge(0, 1, 1, 2)
    assert g1 == g2

    g2.set_edge_capacity(0, 1, 5)
    assert g1 != g2

    g2.set_edge_capacity(0, 1, 1)
    g2.set_edge_cost(1, 2, 9)
    assert g1 != g2


def test_copy_is_deep():
    g = FlowGraph(2)
    g.add_edge(0, 2, 4, 1)
    g.add_artificial_node(2, Edge(0, 1, 4, 1))

    g2 = g.copy()
    assert g2 == g
    assert g2.starting_num_nodes == 2
    assert g2.get_artificial_nodes_map() == {2: Edge(0, 1, 4, 1)}

    g2.set_edge_capacity(0, 2, 1)
    assert g.get_edge(0, 2).capacity == 4


def test_to_dict():
    g = FlowGraph(2)
    g.add_edge(0, 1, 4, 1)
    assert g.to_dict() == {
        "num_nodes": 2,
        "starting_num_nodes": 2,
        "edges": [{"source": 0, "sink": 1, "capacity": 4, "cost": 1}],
        "artificial_nodes": {},
    }
