"""
Search tree node.
"""

from __future__ import annotations

import math
from typing import List

import numpy as np

from hex_mcts.core.types import PlayerColor, UCB_EXPLORE


class Node:
    """
    Position reached after ``last_player`` played ``last_move``.

    ``num_wins`` is scored from the point of view of ``last_player``: +1 for
    each simulated win, -1 for each simulated loss.
    """

    __slots__ = ('last_player', 'last_move', 'state', 'children', 'num_sims', 'num_wins', 'win')

    def __init__(self, last_player: PlayerColor, last_move: int, state: np.ndarray, win: bool = False):
        self.last_player = last_player
        self.last_move = last_move
        self.state = state
        self.children: List[Node] = []
        self.num_sims = 0
        self.num_wins = 0
        self.win = win

    def is_leaf(self) -> bool:
        return not self.children

    def update_stats(self, sims: int, value: int) -> None:
        self.num_sims += sims
        self.num_wins += value

    @property
    def win_ratio(self) -> float:
        if self.num_sims == 0:
            return float('-inf')
        return self.num_wins / self.num_sims

    def ucb_eval(self, child: "Node", exploration: float = UCB_EXPLORE) -> float:
        """UCB1 score of ``child`` as seen from this node. Unvisited -> inf."""
        if child.num_sims == 0:
            return float('inf')
        return child.num_wins / child.num_sims + exploration * math.sqrt(
            math.log(self.num_sims) / child.num_sims
        )

    def __repr__(self) -> str:
        return (
            f"Node(move={self.last_move}, player={self.last_player.name}, "
            f"sims={self.num_sims}, wins={self.num_wins}, children={len(self.children)})"
        )
