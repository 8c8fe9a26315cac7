import pytest

from quadsandbox.transnet import Edge, Graph, GraphPos, Node


@pytest.fixture
def line_graph():
    nodes = [Node(0.0, 0.0), Node(10.0, 0.0), Node(10.0, 10.0)]
    edges = [Edge.between(0, 1, nodes), Edge.between(1, 2, nodes)]
    return Graph(nodes, edges)


def test_edge_length_is_distance():
    nodes = [Node(0.0, 0.0), Node(3.0, 4.0)]
    edge = Edge.between(0, 1, nodes)
    assert edge.length == pytest.approx(5.0)
    assert (edge.from_node_id, edge.to_node_id) == (0, 1)


def test_start_position():
    pos = GraphPos.start(3)
    assert pos.edge_id == 3
    assert pos.distance == 0.0


def test_location_at_start_and_end(line_graph):
    assert line_graph.pos_to_location(GraphPos.start(1)) == line_graph.nodes[1]
    end = GraphPos(1, line_graph.edges[1].length)
    loc = line_graph.pos_to_location(end)
    assert loc.x == pytest.approx(line_graph.nodes[2].x)
    assert loc.y == pytest.approx(line_graph.nodes[2].y)


def test_location_lies_on_edge(line_graph):
    loc = line_graph.pos_to_location(GraphPos(1, 4.0))
    assert loc.x == pytest.approx(10.0)
    assert 0.0 <= loc.y <= 10.0


def test_move_within_edge(line_graph):
    pos = line_graph.update_pos(GraphPos.start(0), [0, 1], 2.0)
    assert pos == GraphPos(0, 2.0)


def test_move_onto_next_edge(line_graph):
    pos = line_graph.update_pos(GraphPos(0, 8.0), [0, 1], 5.0)
    assert pos.edge_id == 1
    assert pos.distance == pytest.approx(3.0)


def test_move_past_end_without_route_stops(line_graph):
    pos = line_graph.update_pos(GraphPos(0, 8.0), [0], 5.0)
    assert pos == GraphPos(0, line_graph.edges[0].length)


def test_move_backwards_onto_previous_edge(line_graph):
    pos = line_graph.update_pos(GraphPos(1, 2.0), [0, 1], -5.0)
    assert pos.edge_id == 0
    assert pos.distance == pytest.approx(7.0)


def test_move_backwards_without_route_stops_at_zero(line_graph):
    pos = line_graph.update_pos(GraphPos(0, 2.0), [0, 1], -5.0)
    assert pos == GraphPos(0, 0.0)


def test_first_matching_route_edge_wins():
    nodes = [Node(0.0, 0.0), Node(10.0, 0.0), Node(10.0, 10.0), Node(20.0, 0.0)]
    edges = [
        Edge.between(0, 1, nodes),
        Edge.between(1, 2, nodes),
        Edge.between(1, 3, nodes),
    ]
    graph = Graph(nodes, edges)
    assert graph.update_pos(GraphPos(0, 9.0), [2, 1], 2.0).edge_id == 2
    assert graph.update_pos(GraphPos(0, 9.0), [1, 2], 2.0).edge_id == 1