"""
MCTS agent - adapts MCTSEngine to the agent interface.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple, TYPE_CHECKING

from hex_mcts.agents.base import BaseAgent
from hex_mcts.board.topology import BoardTopology
from hex_mcts.core.types import ITERATIONS, PlayerColor, ROLLOUTS_PER_CHILD, UCB_EXPLORE, WIN_REWARD
from hex_mcts.search.mcts import MCTSEngine

if TYPE_CHECKING:
    from hex_mcts.games.hex_game import HexGame


class MCTSAgent(BaseAgent):
    """Plays the move chosen by a fresh tree search every turn."""

    def __init__(
        self,
        color: PlayerColor,
        seed: Optional[int] = None,
        iterations: int = ITERATIONS,
        exploration: float = UCB_EXPLORE,
        rollouts_per_child: int = ROLLOUTS_PER_CHILD,
        win_reward: int = WIN_REWARD,
    ):
        super().__init__(color, seed)
        self.iterations = iterations
        self.exploration = exploration
        self.rollouts_per_child = rollouts_per_child
        self.win_reward = win_reward
        self._engines: Dict[Tuple[int, int], MCTSEngine] = {}

    def engine_for(self, topology: BoardTopology) -> MCTSEngine:
        """One engine per board size, all sharing this agent's RNG."""
        key = (topology.width, topology.height)
        engine = self._engines.get(key)
        if engine is None:
            engine = MCTSEngine(
                topology,
                self.rng,
                iterations=self.iterations,
                exploration=self.exploration,
                rollouts_per_child=self.rollouts_per_child,
                win_reward=self.win_reward,
            )
            self._engines[key] = engine
        return engine

    def get_move(self, game: "HexGame") -> int:
        engine = self.engine_for(game.topology)
        return engine.decide(game.get_state().board, game.current_player())
