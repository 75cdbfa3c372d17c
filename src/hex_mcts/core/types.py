"""
Core types, constants, and enumerations.

This module contains the fundamental types used throughout the Hex engine:
- CellState: the nine per-cell values (occupancy + border tags)
- PlayerColor: the two sides
- State: game outcome from one player's point of view
- Search constants shared by the engine and the configuration layer
"""

from __future__ import annotations

from enum import Enum, IntEnum, auto
from typing import Optional

import numpy as np


class PlayerColor(IntEnum):
    """Black connects north to south, White connects west to east."""

    BLACK = 0
    WHITE = 1


class CellState(IntEnum):
    """
    Per-cell value. The numeric order is the byte order of the external
    board buffer and must not change.

    Plain colors mean "occupied, no border known". The tagged variants record
    which border the cell's group reaches; *_WIN marks the stone that closed
    a winning path.
    """

    EMPTY = 0
    WHITE = 1
    WHITE_WEST = 2
    WHITE_EAST = 3
    WHITE_WIN = 4
    BLACK = 5
    BLACK_NORTH = 6
    BLACK_SOUTH = 7
    BLACK_WIN = 8


class State(Enum):
    WIN = auto()
    LOSS = auto()
    NEUTRAL = auto()


# ╔═════════════════════════════════════════════════════════════════════════════╗
# ║                        SEARCH DEFAULTS                                      ║
# ║                                                                             ║
# ║  ITERATIONS:         select/expand/backpropagate rounds per decision        ║
# ║  UCB_EXPLORE:        exploration constant C in UCB1                         ║
# ║  ROLLOUTS_PER_CHILD: independent playouts for each freshly expanded child   ║
# ║  WIN_REWARD:         reward credited when a winning leaf is re-selected     ║
# ╚═════════════════════════════════════════════════════════════════════════════╝

ITERATIONS = 100
UCB_EXPLORE = 1.0
ROLLOUTS_PER_CHILD = 3
WIN_REWARD = 10

# Sentinel move for the root node
ROOT_MOVE = -1

# Largest valid byte in a board buffer
MAX_CELL_VALUE = int(max(CellState))

BOARD_DTYPE = np.int8

_BLACK_STATES = frozenset((
    CellState.BLACK, CellState.BLACK_NORTH, CellState.BLACK_SOUTH, CellState.BLACK_WIN,
))
_WHITE_STATES = frozenset((
    CellState.WHITE, CellState.WHITE_WEST, CellState.WHITE_EAST, CellState.WHITE_WIN,
))


def switch_player(player: PlayerColor) -> PlayerColor:
    """Return the opponent of ``player``."""
    return PlayerColor.WHITE if player == PlayerColor.BLACK else PlayerColor.BLACK


def plain_stone(player: PlayerColor) -> CellState:
    """Untagged stone value for ``player``."""
    return CellState.BLACK if player == PlayerColor.BLACK else CellState.WHITE


def owner_of(cell: int) -> Optional[PlayerColor]:
    """Color occupying a cell value, or None for an empty cell."""
    if cell in _BLACK_STATES:
        return PlayerColor.BLACK
    if cell in _WHITE_STATES:
        return PlayerColor.WHITE
    return None


def reduce_cell_state(cell: int) -> CellState:
    """Strip border tags: every value collapses to EMPTY, BLACK or WHITE."""
    owner = owner_of(cell)
    if owner is None:
        return CellState.EMPTY
    return plain_stone(owner)
