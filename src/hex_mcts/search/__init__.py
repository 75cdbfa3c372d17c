"""
Search module - rollout policy, tree nodes, and the MCTS decision engine.
"""

from hex_mcts.search.node import Node
from hex_mcts.search.rollout import rollout, empty_cells
from hex_mcts.search.mcts import MCTSEngine

__all__ = [
    "Node",
    "rollout",
    "empty_cells",
    "MCTSEngine",
]
