"""
Rollout policy: fill-and-score playouts.

Every empty cell is filled, in a random order, with the SAME color and the
filled board is scored with the terminal checker. This is a saturation test
for one color rather than a simulated alternating game.
"""

from __future__ import annotations

import random

import numpy as np

from hex_mcts.board.terminal import winner_of_filled_board
from hex_mcts.board.topology import BoardTopology
from hex_mcts.core.types import CellState, PlayerColor, plain_stone


def empty_cells(state: np.ndarray) -> list[int]:
    """Indices of empty cells in ascending order."""
    return np.flatnonzero(state == CellState.EMPTY).tolist()


def rollout(
    topology: BoardTopology,
    state: np.ndarray,
    player: PlayerColor,
    rng: random.Random,
) -> PlayerColor:
    """Fill a copy of ``state`` with ``player``'s stones and return the winner."""
    board = state.copy()
    cells = empty_cells(board)
    rng.shuffle(cells)

    stone = plain_stone(player)
    for pos in cells:
        board[pos] = stone

    return winner_of_filled_board(topology, board)
