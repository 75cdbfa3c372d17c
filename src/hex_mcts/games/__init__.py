"""
Games module - Hex and Dark Hex wrappers around the board engine.
"""

from hex_mcts.games.game_state import GameState
from hex_mcts.games.game_base import GameBase
from hex_mcts.games.hex_game import HexGame, MoveRecord
from hex_mcts.games.dark_hex_game import DarkHexGame

__all__ = [
    "GameState",
    "GameBase",
    "HexGame",
    "MoveRecord",
    "DarkHexGame",
]
