"""
Hex MCTS - Monte-Carlo tree search player for the game of Hex.

This package decides moves for an artificial Hex player and determines the
winner of finished games, using incremental border tagging for connectivity.

Quick Start:
    from hex_mcts import decide, PlayerColor

    board = bytes(7 * 7)  # empty 7x7 board
    move = decide(board, PlayerColor.BLACK, width=7, height=7, seed=1)

Modules:
    core     - Cell states, player colors, search constants
    board    - Topology, incremental connectivity, terminal winner check
    search   - Rollout policy, tree nodes, MCTS engine
    games    - HexGame and DarkHexGame (history, swap rule, Reverse Hex)
    agents   - Random, most-winning-cell, MCTS, and human players
    codec    - Byte buffer <-> board array marshalling
"""

from hex_mcts.api import decide, play_game
from hex_mcts.board import build_topology, apply_move, winner_of_filled_board
from hex_mcts.codec import decode_state, encode_state
from hex_mcts.core import CellState, PlayerColor, State, switch_player
from hex_mcts.games import DarkHexGame, HexGame
from hex_mcts.search import MCTSEngine
from hex_mcts.agents import RandomAgent, MostWinningCellAgent, MCTSAgent, HumanAgent

__version__ = "1.0.0"

__all__ = [
    # Main API
    "decide",
    "play_game",
    "build_topology",
    "apply_move",
    "winner_of_filled_board",
    "decode_state",
    "encode_state",
    "MCTSEngine",
    "HexGame",
    "DarkHexGame",
    # Agents
    "RandomAgent",
    "MostWinningCellAgent",
    "MCTSAgent",
    "HumanAgent",
    # Types
    "CellState",
    "PlayerColor",
    "State",
    "switch_player",
]
