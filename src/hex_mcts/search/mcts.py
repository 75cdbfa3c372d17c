"""
Monte-Carlo tree search decision engine.

Each decision builds a fresh tree and runs a fixed number of iterations:

    select      descend by UCB1 while the node has children
    expand      create one child per empty cell of the leaf and score each
                child with an immediate-win check or a few rollouts
    backprop    fold the leaf's result into every ancestor, flipping the
                sign once per ply

Every node owns its own copy of the board, so no move is ever undone.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

import numpy as np

from hex_mcts.board.connectivity import apply_move
from hex_mcts.board.topology import BoardTopology
from hex_mcts.core.types import (
    ITERATIONS,
    ROLLOUTS_PER_CHILD,
    ROOT_MOVE,
    UCB_EXPLORE,
    WIN_REWARD,
    PlayerColor,
    switch_player,
)
from hex_mcts.search.node import Node
from hex_mcts.search.rollout import empty_cells, rollout

logger = logging.getLogger(__name__)


class MCTSEngine:
    """
    UCB1 tree search over Hex positions.

    The random source is owned by the engine; pass a seeded ``random.Random``
    for reproducible decisions.
    """

    def __init__(
        self,
        topology: BoardTopology,
        rng: Optional[random.Random] = None,
        *,
        iterations: int = ITERATIONS,
        exploration: float = UCB_EXPLORE,
        rollouts_per_child: int = ROLLOUTS_PER_CHILD,
        win_reward: int = WIN_REWARD,
    ):
        self.topology = topology
        self.rng = rng if rng is not None else random.Random()
        self.iterations = iterations
        self.exploration = exploration
        self.rollouts_per_child = rollouts_per_child
        self.win_reward = win_reward

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def decide(self, state: np.ndarray, player: PlayerColor) -> int:
        """
        Return the cell index ``player`` should play on ``state``.

        Raises:
            ValueError: if the board has no empty cell.
        """
        legal = empty_cells(state)
        if not legal:
            raise ValueError("No empty cell left to play")
        if len(legal) == 1:
            return legal[0]

        root = self.search(state, player)
        best = self.best_child(root)

        logger.debug(
            "MCTS %s: %d iterations, %d root sims, move %d (ratio %.3f)",
            player.name, self.iterations, root.num_sims, best.last_move, best.win_ratio,
        )
        return best.last_move

    def search(self, state: np.ndarray, player: PlayerColor) -> Node:
        """Run the iteration budget from a root where ``player`` is to move."""
        root = Node(switch_player(player), ROOT_MOVE, state.copy())
        for _ in range(self.iterations):
            self.iteration(root)
        return root

    def iteration(self, root: Node) -> None:
        path = self.select(root)
        sims, value = self.expand(path[-1])
        self.backpropagate(path, sims, value)

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def select(self, root: Node) -> List[Node]:
        """Path from ``root`` to the leaf picked by UCB1 (ties: first child)."""
        node = root
        path = [node]
        while not node.is_leaf():
            children = node.children
            best_index = 0
            best_val = node.ucb_eval(children[0], self.exploration)
            for i in range(1, len(children)):
                val = node.ucb_eval(children[i], self.exploration)
                if val > best_val:
                    best_val = val
                    best_index = i
            node = children[best_index]
            path.append(node)
        return path

    def expand(self, leaf: Node) -> Tuple[int, int]:
        """
        Expand and simulate ``leaf``.

        Returns:
            (simulations, value) where value is from the point of view of the
            player who moved into ``leaf``.
        """
        if leaf.win:
            return self.win_reward, self.win_reward

        sims = 0
        value = 0
        mover = switch_player(leaf.last_player)
        opponent = leaf.last_player

        for pos in empty_cells(leaf.state):
            child_state = leaf.state.copy()
            win = apply_move(self.topology, child_state, mover, pos)
            child = Node(mover, pos, child_state, win)

            if win:
                child.update_stats(1, 1)
            else:
                for _ in range(self.rollouts_per_child):
                    winner = rollout(self.topology, child_state, opponent, self.rng)
                    child.update_stats(1, 1 if winner == mover else -1)

            sims += child.num_sims
            value -= child.num_wins
            leaf.children.append(child)

        return sims, value

    @staticmethod
    def backpropagate(path: List[Node], sims: int, value: int) -> None:
        """Credit ``value`` to the leaf and alternate its sign up to the root."""
        direction = 1
        for node in reversed(path):
            node.update_stats(sims, value * direction)
            direction = -direction

    @staticmethod
    def best_child(root: Node) -> Node:
        """Child with the highest win ratio; the first one found wins ties."""
        if not root.children:
            raise ValueError("Search produced no candidate moves")
        best = root.children[0]
        for child in root.children[1:]:
            if child.win_ratio > best.win_ratio:
                best = child
        return best
