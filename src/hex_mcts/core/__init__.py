"""
Core module - cell states, player colors, and search constants.

This module provides the building blocks used throughout the Hex engine.
"""

from hex_mcts.core.types import (
    CellState,
    PlayerColor,
    State,
    ITERATIONS,
    UCB_EXPLORE,
    ROLLOUTS_PER_CHILD,
    WIN_REWARD,
    ROOT_MOVE,
    MAX_CELL_VALUE,
    BOARD_DTYPE,
    switch_player,
    plain_stone,
    owner_of,
    reduce_cell_state,
)

__all__ = [
    # Types
    "CellState",
    "PlayerColor",
    "State",
    # Constants
    "ITERATIONS",
    "UCB_EXPLORE",
    "ROLLOUTS_PER_CHILD",
    "WIN_REWARD",
    "ROOT_MOVE",
    "MAX_CELL_VALUE",
    "BOARD_DTYPE",
    # Functions
    "switch_player",
    "plain_stone",
    "owner_of",
    "reduce_cell_state",
]
