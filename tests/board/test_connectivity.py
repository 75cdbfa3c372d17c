"""
Tests for hex_mcts.board.connectivity

Tests incremental border tagging and win detection.
"""

import random

import numpy as np
import pytest

from hex_mcts.board.connectivity import apply_move, flood_fill
from hex_mcts.board.topology import build_topology
from hex_mcts.core.types import CellState, PlayerColor, switch_player


class TestTwoByTwoScenarios:
    """Reference scenarios on a 2x2 board."""

    def test_black_north_edge(self, topo2, empty2, black):
        assert apply_move(topo2, empty2, black, 0) is False
        assert empty2[0] == CellState.BLACK_NORTH

    def test_black_completes_path(self, topo2, empty2, black):
        apply_move(topo2, empty2, black, 0)
        assert apply_move(topo2, empty2, black, 2) is True
        assert empty2[2] == CellState.BLACK_WIN

    def test_white_west_edge(self, topo2, empty2, white):
        assert apply_move(topo2, empty2, white, 0) is False
        assert empty2[0] == CellState.WHITE_WEST

    def test_white_completes_path(self, topo2, empty2, white):
        apply_move(topo2, empty2, white, 0)
        assert apply_move(topo2, empty2, white, 1) is True
        assert empty2[1] == CellState.WHITE_WIN


class TestTagging:
    """Border tag assignment and propagation."""

    def test_interior_stone_is_plain(self, topo5, black):
        state = topo5.empty_state()
        assert apply_move(topo5, state, black, topo5.index(2, 2)) is False
        assert state[topo5.index(2, 2)] == CellState.BLACK

    def test_south_edge(self, topo5, black):
        state = topo5.empty_state()
        apply_move(topo5, state, black, topo5.index(1, 4))
        assert state[topo5.index(1, 4)] == CellState.BLACK_SOUTH

    def test_east_edge(self, topo5, white):
        state = topo5.empty_state()
        apply_move(topo5, state, white, topo5.index(4, 2))
        assert state[topo5.index(4, 2)] == CellState.WHITE_EAST

    def test_black_on_west_column_is_plain(self, topo5, black):
        """Side borders mean nothing to Black."""
        state = topo5.empty_state()
        apply_move(topo5, state, black, topo5.index(0, 2))
        assert state[topo5.index(0, 2)] == CellState.BLACK

    def test_propagates_through_group(self, topo5, black):
        """Connecting a plain chain to the north tags the whole chain."""
        i = topo5.index
        state = topo5.empty_state()
        for pos in (i(2, 2), i(2, 3)):
            apply_move(topo5, state, black, pos)
        assert state[i(2, 2)] == CellState.BLACK
        assert state[i(2, 3)] == CellState.BLACK

        apply_move(topo5, state, black, i(2, 1))
        assert state[i(2, 1)] == CellState.BLACK
        apply_move(topo5, state, black, i(2, 0))

        for pos in (i(2, 0), i(2, 1), i(2, 2), i(2, 3)):
            assert state[pos] == CellState.BLACK_NORTH

    def test_propagation_stops_at_other_colors(self, topo5, black, white):
        i = topo5.index
        state = topo5.empty_state()
        apply_move(topo5, state, white, i(2, 1))
        apply_move(topo5, state, black, i(2, 2))
        apply_move(topo5, state, black, i(3, 0))
        assert state[i(2, 1)] == CellState.WHITE
        assert state[i(2, 2)] == CellState.BLACK

    def test_long_chain_wins(self, topo5, black):
        i = topo5.index
        state = topo5.empty_state()
        results = [apply_move(topo5, state, black, i(1, y)) for y in (0, 1, 3, 4)]
        assert results == [False, False, False, False]
        assert apply_move(topo5, state, black, i(1, 2)) is True
        assert state[i(1, 2)] == CellState.BLACK_WIN

    def test_diagonal_adjacency_connects(self, topo5, white):
        """(x+1, y-1) is adjacent: a staircase of White stones connects."""
        i = topo5.index
        state = topo5.empty_state()
        cells = [i(0, 4), i(1, 3), i(2, 2), i(3, 1)]
        for pos in cells:
            assert apply_move(topo5, state, white, pos) is False
        assert apply_move(topo5, state, white, i(4, 0)) is True

    def test_other_diagonal_is_not_adjacent(self, topo5, white):
        """(x+1, y+1) is not a hex neighbor."""
        i = topo5.index
        state = topo5.empty_state()
        for x in range(4):
            apply_move(topo5, state, white, i(x, x))
        assert apply_move(topo5, state, white, i(4, 4)) is False


class TestDegenerateBoards:
    """Single-row and single-column boards."""

    def test_single_row_black_wins_immediately(self, black):
        topo = build_topology(4, 1)
        state = topo.empty_state()
        assert apply_move(topo, state, black, 2) is True

    def test_single_column_white_wins_immediately(self, white):
        topo = build_topology(1, 4)
        state = topo.empty_state()
        assert apply_move(topo, state, white, 1) is True


class TestFloodFill:
    """flood_fill tests."""

    def test_large_board_no_recursion_limit(self):
        """A group larger than the recursion limit is tagged iteratively."""
        topo = build_topology(60, 60)
        state = topo.empty_state()
        # Fill the middle rows completely with plain black
        state[topo.width:topo.size - topo.width] = CellState.BLACK
        start = 0
        state[start] = CellState.BLACK_NORTH
        flood_fill(topo, state, start, CellState.BLACK, CellState.BLACK_NORTH)
        middle = state[topo.width:topo.size - topo.width]
        assert np.all(middle == CellState.BLACK_NORTH)

    def test_whole_group_tagged(self, topo2):
        state = topo2.empty_state()
        state[:] = CellState.BLACK
        flood_fill(topo2, state, 0, CellState.BLACK, CellState.BLACK_SOUTH)
        # 0 is re-reached through its neighbors, so everything is tagged
        assert np.all(state == CellState.BLACK_SOUTH)

    def test_isolated_start_left_to_caller(self, topo2):
        """A lone start cell is only retagged when reached from a neighbor."""
        state = topo2.empty_state()
        state[0] = CellState.BLACK
        flood_fill(topo2, state, 0, CellState.BLACK, CellState.BLACK_SOUTH)
        assert state[0] == CellState.BLACK


class TestInvariants:
    """Properties over random games."""

    @pytest.mark.parametrize("seed", range(20))
    def test_win_tags_final_and_colors_stable(self, seed):
        topo = build_topology(6, 6)
        rng = random.Random(seed)
        state = topo.empty_state()
        order = list(range(topo.size))
        rng.shuffle(order)
        player = PlayerColor.BLACK
        owners = {}
        win_cells = {}

        for pos in order:
            won = apply_move(topo, state, player, pos)
            owners[pos] = player
            if won:
                win_cells[pos] = int(state[pos])
            for p, color in owners.items():
                value = int(state[p])
                black_value = value >= CellState.BLACK
                assert black_value == (color == PlayerColor.BLACK)
            for p, tag in win_cells.items():
                assert int(state[p]) == tag
            player = switch_player(player)
