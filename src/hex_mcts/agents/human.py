"""
Human agent - reads moves from the terminal.
"""

from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from hex_mcts.agents.base import BaseAgent
from hex_mcts.core.types import PlayerColor

if TYPE_CHECKING:
    from hex_mcts.games.hex_game import HexGame

# Returned instead of a cell index to invoke the swap rule
SWAP_MOVE = -2


def parse_move(raw: str, game: "HexGame") -> int:
    """
    Parse ``x,y`` (0-based) or a cell label such as ``c4`` into a cell index.

    Raises:
        ValueError: if the text is not a move on this board.
    """
    text = raw.strip().lower()
    if text == "swap":
        return SWAP_MOVE

    try:
        if "," in text:
            x, y = (int(p.strip()) for p in text.split(","))
        else:
            x, y = ord(text[0]) - ord("a"), int(text[1:]) - 1
    except (ValueError, IndexError) as e:
        raise ValueError(
            f"Invalid move format: '{raw}'. Expected 'x,y' or a label like 'c4'."
        ) from e

    if not game.topology.in_bounds(x, y):
        raise ValueError(f"({x},{y}) is off the {game.width}x{game.height} board")
    return game.topology.index(x, y)


class HumanAgent(BaseAgent):
    """Prompts until a syntactically valid move is entered."""

    interactive = True

    def __init__(self, color: PlayerColor, input_fn: Callable[[str], str] = input):
        super().__init__(color)
        self.input_fn = input_fn

    def get_move(self, game: "HexGame") -> int:
        hint = " (or 'swap')" if game.can_swap() else ""
        print(f"\nYour turn ({self.color.name}){hint}")
        while True:
            try:
                return parse_move(self.input_fn("Move: "), game)
            except ValueError as e:
                print(f"Invalid input: {e}")
