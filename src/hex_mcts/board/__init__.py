"""
Board module - topology, incremental connectivity, and terminal winner checks.
"""

from hex_mcts.board.topology import BoardTopology, build_topology
from hex_mcts.board.connectivity import apply_move, flood_fill
from hex_mcts.board.terminal import winner_of_filled_board, is_filled

__all__ = [
    "BoardTopology",
    "build_topology",
    "apply_move",
    "flood_fill",
    "winner_of_filled_board",
    "is_filled",
]
