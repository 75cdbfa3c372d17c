"""
Tests for hex_mcts.search.node
"""

import math

import pytest

from hex_mcts.core.types import PlayerColor, ROOT_MOVE
from hex_mcts.search.node import Node


@pytest.fixture
def parent(topo2) -> Node:
    node = Node(PlayerColor.WHITE, ROOT_MOVE, topo2.empty_state())
    node.update_stats(20, 4)
    return node


def _child(topo2, sims: int, wins: int, move: int = 0) -> Node:
    child = Node(PlayerColor.BLACK, move, topo2.empty_state())
    child.update_stats(sims, wins)
    return child


class TestStats:

    def test_fresh_node(self, topo2):
        node = Node(PlayerColor.BLACK, 3, topo2.empty_state())
        assert node.is_leaf()
        assert node.num_sims == 0
        assert node.num_wins == 0
        assert node.win is False

    def test_update_accumulates(self, topo2):
        node = _child(topo2, 3, -1)
        node.update_stats(1, 1)
        assert (node.num_sims, node.num_wins) == (4, 0)

    def test_win_ratio(self, topo2):
        assert _child(topo2, 4, -2).win_ratio == pytest.approx(-0.5)

    def test_win_ratio_unvisited(self, topo2):
        assert _child(topo2, 0, 0).win_ratio == float('-inf')

    def test_not_leaf_with_children(self, parent, topo2):
        parent.children.append(_child(topo2, 1, 1))
        assert not parent.is_leaf()


class TestUCB:

    def test_formula(self, parent, topo2):
        child = _child(topo2, 5, 3)
        expected = 3 / 5 + 1.0 * math.sqrt(math.log(20) / 5)
        assert parent.ucb_eval(child) == pytest.approx(expected)

    def test_exploration_constant(self, parent, topo2):
        child = _child(topo2, 5, 3)
        assert parent.ucb_eval(child, exploration=0.0) == pytest.approx(0.6)

    def test_less_visited_explored_more(self, parent, topo2):
        rare = _child(topo2, 2, 0)
        common = _child(topo2, 15, 0)
        assert parent.ucb_eval(rare) > parent.ucb_eval(common)

    def test_unvisited_child_is_infinite(self, parent, topo2):
        assert parent.ucb_eval(_child(topo2, 0, 0)) == float('inf')
