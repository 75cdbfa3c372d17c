"""
Configuration and agent registry.
"""

from typing import Optional

from hex_mcts.agents import HumanAgent, MCTSAgent, MostWinningCellAgent, RandomAgent
from hex_mcts.agents.most_winning_cell import DEFAULT_PLAYOUTS
from hex_mcts.core.types import ITERATIONS, ROLLOUTS_PER_CHILD, UCB_EXPLORE, WIN_REWARD


# ---------------------------------------------------------------------------
# Agent Registry
# ---------------------------------------------------------------------------

AGENTS = {
    "random": RandomAgent,
    "most-winning-cell": MostWinningCellAgent,
    "mcts": MCTSAgent,
    "human": HumanAgent,
}

# Reverse and Dark Hex only accept agents that do not play to connect
VARIANT_AGENTS = frozenset({"random", "human"})


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_BOARD_SIZE = 11


class Config:
    """Game and search configuration with sensible defaults."""

    def __init__(
        self,
        width: int = DEFAULT_BOARD_SIZE,
        height: int = DEFAULT_BOARD_SIZE,
        iterations: int = ITERATIONS,
        exploration: float = UCB_EXPLORE,
        rollouts_per_child: int = ROLLOUTS_PER_CHILD,
        win_reward: int = WIN_REWARD,
        playouts: int = DEFAULT_PLAYOUTS,
        swap_rule: bool = False,
        reverse: bool = False,
        dark: bool = False,
        seed: Optional[int] = None,
    ):
        if width < 1 or height < 1:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        if iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {iterations}")
        if rollouts_per_child < 1:
            raise ValueError(f"rollouts_per_child must be >= 1, got {rollouts_per_child}")
        if playouts < 1:
            raise ValueError(f"playouts must be >= 1, got {playouts}")
        if exploration < 0:
            raise ValueError(f"exploration must be non-negative, got {exploration}")

        self.width = width
        self.height = height
        self.iterations = iterations
        self.exploration = exploration
        self.rollouts_per_child = rollouts_per_child
        self.win_reward = win_reward
        self.playouts = playouts
        self.swap_rule = swap_rule
        self.reverse = reverse
        self.dark = dark
        self.seed = seed

    def variant_name(self) -> Optional[str]:
        """Name of the active rule variant, or None for plain Hex."""
        if self.dark:
            return "Dark Reverse Hex" if self.reverse else "Dark Hex"
        return "Reverse Hex" if self.reverse else None

    def agent_seed(self, offset: int) -> Optional[int]:
        """Distinct per-agent seed derived from ``seed`` (None stays None)."""
        return None if self.seed is None else self.seed + offset


# Default configuration
DEFAULT_CONFIG = Config()
