"""
GameBase - abstract base class for playable games.
"""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from hex_mcts.core.types import PlayerColor, State
from hex_mcts.games.game_state import GameState


class GameBase(ABC):
    """
    Abstract base class for a two-player placement game.

    Moves are flat cell indices into the board buffer.
    """

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'hex')."""
        pass

    @abstractmethod
    def num_players(self) -> int:
        pass

    @abstractmethod
    def deep_clone(self) -> "GameBase":
        """Deep copy of game + state."""
        pass

    @abstractmethod
    def get_state(self) -> GameState:
        pass

    @abstractmethod
    def set_state(self, game_state: GameState) -> None:
        """Replace the current game state."""
        pass

    @abstractmethod
    def current_player(self) -> PlayerColor:
        """Return the color to act."""
        pass

    @abstractmethod
    def valid_moves(self) -> np.ndarray:
        """Return all legal cell indices from the current state."""
        pass

    @abstractmethod
    def apply_move(self, move: int, *, validated: bool = False) -> Optional[bool]:
        """
        Apply a move to the game. Mutates internal state.

        Games with hidden information may return False when the move was
        not placed and the same player is to act again.

        Args:
            move: Cell index to play.
            validated:  If True, skip validation (caller guarantees
                        the move came from valid_moves()).
        """
        pass

    @abstractmethod
    def is_over(self) -> bool:
        pass

    @abstractmethod
    def get_result(self, player: PlayerColor) -> State:
        """Return WIN / LOSS / NEUTRAL for ``player``."""
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass
