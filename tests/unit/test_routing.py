"""Tests for layout.routing: ports, dummy waypoints, self-loops and port spreading."""

from __future__ import annotations

import pytest

from flowchart_layout.config import LayoutStyle
from flowchart_layout.layout.coordinates import assign_coordinates
from flowchart_layout.layout.routing import route_edges
from flowchart_layout.layout.state import LayoutState
from flowchart_layout.layout.sugiyama import SugiyamaLayout
from flowchart_layout.layout.types import Point, RoutedEdge
from flowchart_layout.types import Direction, EdgeArrow, EdgeStyle, Graph


def routed(graph: Graph, style: LayoutStyle | None = None) -> tuple[LayoutState, list[RoutedEdge]]:
    style = style or LayoutStyle()
    state = SugiyamaLayout(style).prepare(graph)
    assign_coordinates(state, style)
    return state, route_edges(state, style)


def node(state: LayoutState, node_id: str):
    return next(n for n in state.nodes if n.id == node_id)


class TestDirectRoutes:
    def test_tb_exits_bottom_enters_top(self, make_graph):
        """A → B under TB: bottom of A to top of B."""
        state, routes = routed(make_graph(("A", "B")))
        a, b = node(state, "A"), node(state, "B")
        assert routes[0].waypoints == [Point(a.x, a.y + a.height / 2), Point(b.x, b.y - b.height / 2)]

    def test_bt_exits_top_enters_bottom(self, make_graph):
        """A → B under BT: top of A to bottom of B."""
        state, routes = routed(make_graph(("A", "B"), direction=Direction.BT))
        a, b = node(state, "A"), node(state, "B")
        assert routes[0].waypoints == [Point(a.x, a.y - a.height / 2), Point(b.x, b.y + b.height / 2)]

    def test_lr_exits_right_enters_left(self, make_graph):
        """A → B under LR: right of A to left of B."""
        state, routes = routed(make_graph(("A", "B"), direction=Direction.LR))
        a, b = node(state, "A"), node(state, "B")
        assert routes[0].waypoints == [Point(a.x + a.width / 2, a.y), Point(b.x - b.width / 2, b.y)]

    def test_rl_exits_left_enters_right(self, make_graph):
        """A → B under RL: left of A to right of B."""
        state, routes = routed(make_graph(("A", "B"), direction=Direction.RL))
        a, b = node(state, "A"), node(state, "B")
        assert routes[0].waypoints == [Point(a.x - a.width / 2, a.y), Point(b.x + b.width / 2, b.y)]

    def test_edge_attributes_carried(self):
        """Label, style and arrow reach the routed edge."""
        graph = Graph()
        graph.add_node("A")
        graph.add_node("B")
        graph.add_edge("A", "B", label="yes", style=EdgeStyle.Dotted, arrow=EdgeArrow.None_)
        _state, routes = routed(graph)
        route = routes[0]
        assert (route.from_id, route.to_id, route.label) == ("A", "B", "yes")
        assert route.style == EdgeStyle.Dotted
        assert route.arrow == EdgeArrow.None_
        assert route.reversed is False


class TestChainRoutes:
    def test_long_edge_visits_every_dummy(self, make_graph):
        """A → D over three ranks passes both dummy centres in rank order."""
        state, routes = routed(make_graph(("A", "B"), ("B", "C"), ("C", "D"), ("A", "D")))
        route = routes[3]
        chain = state.chains[3]
        assert len(route.waypoints) == 4
        dummies = [state.nodes[i] for i in chain.dummies]
        assert route.waypoints[1:3] == [Point(d.x, d.y) for d in dummies]
        ys = [p.y for p in route.waypoints]
        assert ys == sorted(ys)

    def test_reversed_edge_ends_at_declared_target(self, make_graph):
        """B → A (reversed back-edge) starts on B and ends on A's bottom face."""
        state, routes = routed(make_graph(("A", "B"), ("B", "A")))
        back = routes[1]
        a, b = node(state, "A"), node(state, "B")
        assert (back.from_id, back.to_id, back.reversed) == ("B", "A", True)
        assert back.waypoints[0].y == pytest.approx(b.y - b.height / 2)
        assert back.waypoints[-1].y == pytest.approx(a.y + a.height / 2)

    def test_reversed_long_edge_walks_dummies_backwards(self, make_graph):
        """C → A across two ranks: waypoints climb from C up to A."""
        _state, routes = routed(make_graph(("A", "B"), ("B", "C"), ("C", "A")))
        back = routes[2]
        assert back.reversed
        assert len(back.waypoints) == 3
        ys = [p.y for p in back.waypoints]
        assert ys == sorted(ys, reverse=True)


class TestSelfLoops:
    @pytest.mark.parametrize("direction", list(Direction))
    def test_self_loop_has_two_points_on_trailing_face(self, make_graph, direction):
        """Self-loops are two points on the right face (TB/BT) or bottom face (LR/RL)."""
        state, routes = routed(make_graph(("A", "A"), direction=direction))
        a = node(state, "A")
        points = routes[0].waypoints
        assert len(points) == 2
        if direction.is_vertical:
            assert all(p.x == a.x + a.width / 2 for p in points)
        else:
            assert all(p.y == a.y + a.height / 2 for p in points)
        assert routes[0].reversed is True


class TestPortSpreading:
    def test_fan_out_ports_are_spread_in_target_order(self, make_graph):
        """A → B and A → C leave A at distinct points, left one first."""
        state, routes = routed(make_graph(("A", "B"), ("A", "C")))
        a = node(state, "A")
        starts = [r.waypoints[0].x for r in routes]
        assert starts == [pytest.approx(a.x - 0.5), pytest.approx(a.x + 0.5)]

    def test_spreading_can_be_disabled(self, make_graph):
        """With spread_ports off every port is the face centre."""
        state, routes = routed(make_graph(("A", "B"), ("A", "C")), LayoutStyle(spread_ports=False))
        a = node(state, "A")
        assert [r.waypoints[0].x for r in routes] == [a.x, a.x]

    def test_ports_stay_on_the_node_face(self, make_graph):
        """Spread ports never leave the node's side."""
        edges = [("A", f"T{i}") for i in range(5)]
        state, routes = routed(make_graph(*edges))
        a = node(state, "A")
        for r in routes:
            assert a.x - a.width / 2 <= r.waypoints[0].x <= a.x + a.width / 2
