"""
Agents module - move pickers for each side of a game.

- RandomAgent: uniform random baseline
- MostWinningCellAgent: Monte-Carlo cell voting
- MCTSAgent: UCB1 tree search
- HumanAgent: terminal input
"""

from hex_mcts.agents.base import BaseAgent
from hex_mcts.agents.random_agent import RandomAgent
from hex_mcts.agents.most_winning_cell import MostWinningCellAgent
from hex_mcts.agents.mcts_agent import MCTSAgent
from hex_mcts.agents.human import HumanAgent, SWAP_MOVE, parse_move

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "MostWinningCellAgent",
    "MCTSAgent",
    "HumanAgent",
    "SWAP_MOVE",
    "parse_move",
]
