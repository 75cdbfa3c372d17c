"""
Dark Hex: Hex with hidden opponent stones.

The referee keeps the full tagged board; each color also has a visible
board holding its own stones and the opponent stones it has bumped into.
Playing on a cell that hides an opponent stone reveals that stone to the
mover and the mover plays again. Swap rule and Reverse Hex apply as in
HexGame.
"""

from __future__ import annotations

from typing import Dict, Optional

import numpy as np

from hex_mcts.core.types import CellState, PlayerColor, reduce_cell_state
from hex_mcts.games.game_state import GameState
from hex_mcts.games.hex_game import HexGame


class DarkHexGame(HexGame):
    """Hex where each player only sees what they have discovered."""

    __slots__ = ('visible_boards',)

    def __init__(self, width: int = 11, height: int = 11, *, swap_rule: bool = False, reverse: bool = False):
        super().__init__(width, height, swap_rule=swap_rule, reverse=reverse)
        self.visible_boards: Dict[PlayerColor, np.ndarray] = {
            color: self.topology.empty_state() for color in PlayerColor
        }

    def game_id(self) -> str:
        return "dark_reverse_hex" if self.reverse else "dark_hex"

    def deep_clone(self) -> "DarkHexGame":
        g = super().deep_clone()
        g.visible_boards = {color: view.copy() for color, view in self.visible_boards.items()}
        return g

    def set_state(self, game_state: GameState) -> None:
        """Replace the board; each side then only knows its own stones."""
        super().set_state(game_state)
        board = self.state.board
        for color, view in self.visible_boards.items():
            view[:] = CellState.EMPTY
            for pos in np.flatnonzero(board != CellState.EMPTY):
                cell = reduce_cell_state(int(board[pos]))
                if (cell == CellState.BLACK) == (color == PlayerColor.BLACK):
                    view[pos] = cell

    def valid_moves(self) -> np.ndarray:
        """Cells that look empty to the player to act."""
        if self.winner is not None:
            return np.array([], dtype=np.intp)
        view = self.visible_boards[self.state.current_player]
        return np.flatnonzero(view == CellState.EMPTY)

    def apply_move(self, move: int, *, validated: bool = False) -> bool:
        """
        Try to place a stone at ``move``.

        Returns:
            True if the stone was placed and the turn passed, False if the
            cell held a hidden stone, which is now revealed to the mover.
        """
        pos = int(move)
        player = self.state.current_player
        view = self.visible_boards[player]

        if not validated:
            if self.winner is not None:
                raise ValueError("Game is already over")
            if not 0 <= pos < self.topology.size:
                raise ValueError(f"Cell {pos} is off the board")
            if view[pos] != CellState.EMPTY:
                x, y = self.topology.coords(pos)
                raise ValueError(f"Cell ({x},{y}) is occupied")

        board = self.state.board
        if board[pos] != CellState.EMPTY:
            view[pos] = reduce_cell_state(int(board[pos]))
            return False

        super().apply_move(pos, validated=True)
        view[pos] = reduce_cell_state(int(board[pos]))
        return True

    def swap(self) -> None:
        super().swap()
        first = self.history[0]
        mirrored = self.history[-1]
        self.visible_boards[first.player][first.pos] = CellState.EMPTY
        self.visible_boards[mirrored.player][mirrored.pos] = reduce_cell_state(
            int(self.state.board[mirrored.pos])
        )

    def state_string(self, viewer: Optional[PlayerColor] = None) -> str:
        """
        Render ``viewer``'s visible board (default: the player to act).
        Once the game is over the full board is shown unless a viewer is given.
        """
        if viewer is None:
            if self.winner is not None:
                return self._render(self.state.board)
            viewer = self.state.current_player
        return self._render(self.visible_boards[viewer])
