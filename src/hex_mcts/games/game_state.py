"""
GameState - board buffer plus side to move.
"""

from __future__ import annotations

import numpy as np

from hex_mcts.core.types import PlayerColor


class GameState:
    """
    Lightweight game state container.

    The board is the flat int8 buffer used by the engine (CellState values,
    row-major), so it can be handed to the search without conversion.
    """
    __slots__ = ('board', 'current_player')

    def __init__(self, board: np.ndarray, current_player: PlayerColor):
        self.board = board
        self.current_player = current_player

    def copy(self) -> "GameState":
        return GameState(self.board.copy(), self.current_player)
