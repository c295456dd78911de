"""Tests for layout.acyclic: DFS cycle breaking."""

from __future__ import annotations

import networkx as nx
import pytest

from flowchart_layout.ir.graph import GraphIR
from flowchart_layout.layout.acyclic import break_cycles
from flowchart_layout.layout.ranking import ranking_graph
from flowchart_layout.layout.state import LayoutState


class TestBreakCycles:
    def test_dag_has_no_reversed_edges(self, make_state):
        """A → B → C (simple DAG): nothing is reversed."""
        state = make_state(("A", "B"), ("B", "C"))
        assert break_cycles(state) == []
        assert not any(e.reversed for e in state.edges)

    def test_two_cycle_reverses_exactly_one_edge(self, make_state):
        """A → B → A: the edge closing the cycle is reversed."""
        state = make_state(("A", "B"), ("B", "A"))
        assert break_cycles(state) == [1]
        assert [e.reversed for e in state.edges] == [False, True]

    def test_self_loop_is_reversed(self, make_state):
        """A → A: self-loops are always flagged."""
        state = make_state(("A", "A"))
        assert break_cycles(state) == [0]
        assert state.edges[0].reversed is True

    def test_complex_cycle(self, make_state):
        """A → B → C → A plus D → B: only C → A closes a cycle."""
        state = make_state(("A", "B"), ("B", "C"), ("C", "A"), ("D", "B"))
        assert break_cycles(state) == [2]
        assert nx.is_directed_acyclic_graph(ranking_graph(state))

    def test_endpoints_are_not_rewritten(self, make_state):
        """Reversal flips the ranking view only, never orig_from/orig_to."""
        state = make_state(("A", "B"), ("B", "A"))
        break_cycles(state)
        back = state.edges[1]
        assert (back.orig_from, back.orig_to) == (1, 0)
        assert (back.rank_source, back.rank_target) == (0, 1)

    def test_parallel_edges_are_not_reversed(self, make_state):
        """Two A → B edges are both forward."""
        state = make_state(("A", "B"), ("A", "B"))
        assert break_cycles(state) == []

    def test_rerun_does_not_accumulate(self, make_state):
        """Calling twice yields the same flags."""
        state = make_state(("A", "B"), ("B", "C"), ("C", "A"))
        first = break_cycles(state)
        second = break_cycles(state)
        assert first == second
        assert sum(e.reversed for e in state.edges) == 1

    def test_declaration_order_decides_root(self, make_state):
        """Declaring B first makes A → B the back-edge instead of B → A."""
        state = make_state(("A", "B"), ("B", "A"), nodes=("B", "A"))
        assert break_cycles(state) == [0]

    def test_empty_graph(self, make_state):
        """Empty graph: nothing to do."""
        state = make_state()
        assert break_cycles(state) == []


class TestAcyclicProperty:
    @pytest.mark.parametrize("seed", range(25))
    def test_random_graphs_become_acyclic(self, random_graph, seed):
        """Flipping the reversed edges of any graph leaves no directed cycle."""
        state = LayoutState.from_ir(GraphIR.from_graph(random_graph(seed)))
        break_cycles(state)
        assert nx.is_directed_acyclic_graph(ranking_graph(state))
        for edge in state.edges:
            if edge.is_self_loop:
                assert edge.reversed

    @pytest.mark.parametrize("seed", range(5))
    def test_deterministic(self, random_graph, seed):
        """Same input, same reversed set."""
        a = LayoutState.from_ir(GraphIR.from_graph(random_graph(seed)))
        b = LayoutState.from_ir(GraphIR.from_graph(random_graph(seed)))
        assert break_cycles(a) == break_cycles(b)
