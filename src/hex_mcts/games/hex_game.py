"""
Hex game implementation.

Board encoding (int8, flat, row-major): CellState values, so the engine's
border tags are kept up to date as the game is played and a win is known
the moment the connecting stone is placed.

Variants:
    swap_rule   after the first move, the second player may take that stone
                over, mirrored across the long diagonal (square boards only)
    reverse     completing a path loses instead of winning
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from hex_mcts.board.connectivity import apply_move
from hex_mcts.board.terminal import is_filled, winner_of_filled_board
from hex_mcts.board.topology import BoardTopology, build_topology
from hex_mcts.core.types import (
    CellState,
    PlayerColor,
    State,
    owner_of,
    switch_player,
)
from hex_mcts.games.game_base import GameBase
from hex_mcts.games.game_state import GameState

CELL_STRINGS = {None: ".", PlayerColor.BLACK: "B", PlayerColor.WHITE: "W"}


@dataclass
class MoveRecord:
    """A single played move."""
    player: PlayerColor
    pos: int
    swap: bool = False


class HexGame(GameBase):
    """Hex on a ``width`` x ``height`` rhombus. Black moves first."""

    __slots__ = ('topology', 'state', 'winner', 'history', 'swap_rule', 'reverse')

    def __init__(self, width: int = 11, height: int = 11, *, swap_rule: bool = False, reverse: bool = False):
        self.topology: BoardTopology = build_topology(width, height)
        self.state = GameState(self.topology.empty_state(), PlayerColor.BLACK)
        self.winner: Optional[PlayerColor] = None
        self.history: List[MoveRecord] = []
        # The mirrored cell only exists on square boards
        self.swap_rule = swap_rule and width == height
        self.reverse = reverse

    @property
    def width(self) -> int:
        return self.topology.width

    @property
    def height(self) -> int:
        return self.topology.height

    def game_id(self) -> str:
        return "reverse_hex" if self.reverse else "hex"

    def num_players(self) -> int:
        return 2

    def deep_clone(self) -> "HexGame":
        g = self.__class__.__new__(self.__class__)
        g.topology = self.topology
        g.state = self.state.copy()
        g.winner = self.winner
        g.history = list(self.history)
        g.swap_rule = self.swap_rule
        g.reverse = self.reverse
        return g

    def get_state(self) -> GameState:
        return self.state

    def set_state(self, game_state: GameState) -> None:
        if game_state.board.shape != (self.topology.size,):
            raise ValueError(
                f"Board has shape {game_state.board.shape}, expected ({self.topology.size},)"
            )
        self.state = game_state
        self.history = []
        self.winner = self._compute_winner()

    def current_player(self) -> PlayerColor:
        return self.state.current_player

    def valid_moves(self) -> np.ndarray:
        """Empty cell indices; empty array once the game is over."""
        if self.winner is not None:
            return np.array([], dtype=np.intp)
        return np.flatnonzero(self.state.board == CellState.EMPTY)

    def apply_move(self, move: int, *, validated: bool = False) -> None:
        pos = int(move)

        if not validated:
            if self.winner is not None:
                raise ValueError("Game is already over")
            if not 0 <= pos < self.topology.size:
                raise ValueError(f"Cell {pos} is off the board")
            if self.state.board[pos] != CellState.EMPTY:
                x, y = self.topology.coords(pos)
                raise ValueError(f"Cell ({x},{y}) is occupied")

        player = self.state.current_player
        self.history.append(MoveRecord(player, pos))
        if apply_move(self.topology, self.state.board, player, pos):
            self.winner = self._scored_winner(player)
        self.state.current_player = switch_player(player)

    def can_swap(self) -> bool:
        return self.swap_rule and self.winner is None and len(self.history) == 1

    def swap(self) -> None:
        """
        Pie rule: remove the first stone and place the current player's
        stone on the mirrored cell (x, y) -> (y, x).
        """
        if not self.can_swap():
            raise ValueError("Swap is only allowed as the second move of a swap-rule game")

        first = self.history[0].pos
        x, y = self.topology.coords(first)
        mirrored = self.topology.index(y, x)
        self.state.board[first] = CellState.EMPTY

        player = self.state.current_player
        self.history.append(MoveRecord(player, mirrored, swap=True))
        if apply_move(self.topology, self.state.board, player, mirrored):
            self.winner = self._scored_winner(player)
        self.state.current_player = switch_player(player)

    def is_over(self) -> bool:
        return self.winner is not None

    def get_result(self, player: PlayerColor) -> State:
        if self.winner is None:
            return State.NEUTRAL
        return State.WIN if self.winner == player else State.LOSS

    def _scored_winner(self, connector: PlayerColor) -> PlayerColor:
        return switch_player(connector) if self.reverse else connector

    def _compute_winner(self) -> Optional[PlayerColor]:
        """Recompute winner from the current board."""
        board = self.state.board
        if np.any(board == CellState.BLACK_WIN):
            return self._scored_winner(PlayerColor.BLACK)
        if np.any(board == CellState.WHITE_WIN):
            return self._scored_winner(PlayerColor.WHITE)
        if is_filled(board):
            return self._scored_winner(winner_of_filled_board(self.topology, board.copy()))
        return None

    def state_string(self) -> str:
        return self._render(self.state.board)

    def _render(self, board: np.ndarray) -> str:
        width = self.width
        header = "   " + " ".join(chr(ord("a") + x) for x in range(width))
        lines = [header]
        for y in range(self.height):
            row = board[y * width:(y + 1) * width]
            cells = " ".join(CELL_STRINGS[owner_of(int(c))] for c in row)
            lines.append(f"{' ' * y}{y + 1:>2} {cells}")
        return "\n".join(lines)
