"""
Most-winning-cell agent.

Plays many random alternating games from the current position and counts,
for each cell, how often the agent's winning path was completed by a stone
on that cell. The empty cell with the highest count is played.
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

import numpy as np

from hex_mcts.agents.base import BaseAgent
from hex_mcts.board.connectivity import apply_move
from hex_mcts.core.types import PlayerColor, switch_player

if TYPE_CHECKING:
    from hex_mcts.games.hex_game import HexGame

DEFAULT_PLAYOUTS = 1000


class MostWinningCellAgent(BaseAgent):
    """Monte-Carlo cell voting over alternating random playouts."""

    def __init__(self, color: PlayerColor, seed: Optional[int] = None, playouts: int = DEFAULT_PLAYOUTS):
        super().__init__(color, seed)
        self.playouts = playouts

    def win_counts(self, game: "HexGame") -> np.ndarray:
        """Per-cell count of playouts won by a stone placed on that cell."""
        topology = game.topology
        board = game.get_state().board
        empty = game.valid_moves().tolist()
        counts = np.zeros(topology.size, dtype=np.int64)

        for _ in range(self.playouts):
            scratch = board.copy()
            order = list(empty)
            self.rng.shuffle(order)
            player = game.current_player()
            for pos in order:
                if apply_move(topology, scratch, player, pos):
                    if player == self.color:
                        counts[pos] += 1
                    break
                player = switch_player(player)

        return counts

    def get_move(self, game: "HexGame") -> int:
        empty = game.valid_moves()
        if len(empty) == 0:
            raise ValueError("No empty cell left to play")

        counts = self.win_counts(game)
        # argmax keeps the first cell on ties
        return int(empty[int(np.argmax(counts[empty]))])
