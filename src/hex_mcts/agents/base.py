"""
Base agent class.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

from hex_mcts.core.types import PlayerColor

if TYPE_CHECKING:
    from hex_mcts.games.hex_game import HexGame


class BaseAgent(ABC):
    """
    A player that picks cell indices for one color.

    Each agent owns its random source so that seeded agents are reproducible
    independently of each other.
    """

    #: True for agents driven by user input rather than computation
    interactive = False

    def __init__(self, color: PlayerColor, seed: Optional[int] = None):
        self.color = color
        self.rng = random.Random(seed)

    @abstractmethod
    def get_move(self, game: "HexGame") -> int:
        """Return the cell index to play on ``game``'s current position."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color.name})"
