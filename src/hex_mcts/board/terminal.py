"""
Winner detection on a completely filled board.

A filled Hex board always has exactly one winner, so only Black's
north-south connection is searched; if it does not exist, White wins.
Calling this on a board with empty cells gives an unreliable answer.
"""

from __future__ import annotations

import numpy as np

from hex_mcts.board.topology import BoardTopology
from hex_mcts.core.types import CellState, PlayerColor


def is_filled(state: np.ndarray) -> bool:
    """True if no cell is empty."""
    return not np.any(state == CellState.EMPTY)


def winner_of_filled_board(topology: BoardTopology, state: np.ndarray) -> PlayerColor:
    """
    Return the winner of a filled board. Rewrites Black tags in ``state``.

    Bottom-row Black stones become the BLACK_SOUTH anchors, stale interior
    BLACK_NORTH tags are cleared, top-row Black stones become the search
    origins, and a depth-first search from each origin upgrades the Black
    cells it visits until it reaches an anchor.
    """
    width, size = topology.width, topology.size
    neighbors = topology.neighbors

    bottom = state[size - width:]
    bottom[bottom == CellState.BLACK] = CellState.BLACK_SOUTH

    interior = state[width:size - width]
    interior[interior == CellState.BLACK_NORTH] = CellState.BLACK

    top = state[:width]
    top[top == CellState.BLACK] = CellState.BLACK_NORTH

    for origin in range(width):
        if state[origin] == CellState.BLACK_SOUTH:
            # Single-row board: the origin already touches the south edge
            return PlayerColor.BLACK
        if state[origin] != CellState.BLACK_NORTH:
            continue

        stack = [origin]
        while stack:
            pos = stack.pop()
            for n in neighbors[pos]:
                cell = state[n]
                if cell == CellState.BLACK:
                    state[n] = CellState.BLACK_NORTH
                    stack.append(n)
                elif cell == CellState.BLACK_SOUTH:
                    return PlayerColor.BLACK

    return PlayerColor.WHITE
