"""
Factory functions for creating games and agents.
"""

from hex_mcts.agents.base import BaseAgent
from hex_mcts.core.types import PlayerColor
from hex_mcts.games.dark_hex_game import DarkHexGame
from hex_mcts.games.hex_game import HexGame
from hex_mcts.utils.config import AGENTS, VARIANT_AGENTS, Config


def create_game(config: Config) -> HexGame:
    """Create an empty game with the configured size and variants."""
    game_cls = DarkHexGame if config.dark else HexGame
    return game_cls(
        config.width,
        config.height,
        swap_rule=config.swap_rule,
        reverse=config.reverse,
    )


def create_agent(name: str, config: Config, color: PlayerColor) -> BaseAgent:
    """
    Create an agent for one side.

    Args:
        name: Key from AGENTS registry (e.g., "mcts")
        config: Search settings and base seed
        color: Side the agent plays

    Returns:
        Configured agent instance

    Raises:
        ValueError: for an unknown name, or a search agent in Reverse or
            Dark Hex (search plays to connect and reads the full board).
    """
    if name not in AGENTS:
        available = ", ".join(AGENTS.keys())
        raise ValueError(f"Unknown agent: {name}. Available: {available}")

    variant = config.variant_name()
    if variant is not None and name not in VARIANT_AGENTS:
        available = ", ".join(sorted(VARIANT_AGENTS))
        raise ValueError(f"Agent {name} cannot play {variant}. Available: {available}")

    seed = config.agent_seed(int(color))

    if name == "human":
        return AGENTS[name](color)
    if name == "random":
        return AGENTS[name](color, seed)
    if name == "most-winning-cell":
        return AGENTS[name](color, seed, playouts=config.playouts)
    return AGENTS[name](
        color,
        seed,
        iterations=config.iterations,
        exploration=config.exploration,
        rollouts_per_child=config.rollouts_per_child,
        win_reward=config.win_reward,
    )
