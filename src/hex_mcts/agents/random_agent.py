"""Random agent.

Selects a uniformly random empty cell using the per-instance RNG. Intended
as a baseline opponent and for tests, not for competitive play.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hex_mcts.agents.base import BaseAgent

if TYPE_CHECKING:
    from hex_mcts.games.hex_game import HexGame


class RandomAgent(BaseAgent):
    """Agent that plays random empty cells."""

    def get_move(self, game: "HexGame") -> int:
        moves = game.valid_moves()
        if len(moves) == 0:
            raise ValueError("No empty cell left to play")
        return int(self.rng.choice(moves.tolist()))
