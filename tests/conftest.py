"""
Shared test fixtures for hex_mcts tests.

Design principles:
- Small boards so exhaustive checks stay fast
- Seeded random sources for reproducible search
- Minimal, focused fixtures
"""

import random
from typing import Callable

import numpy as np
import pytest

from hex_mcts.board.topology import BoardTopology, build_topology
from hex_mcts.core.types import BOARD_DTYPE, CellState, PlayerColor
from hex_mcts.games.hex_game import HexGame


# =============================================================================
# Topology Fixtures
# =============================================================================

@pytest.fixture
def topo2() -> BoardTopology:
    """2x2 board: 0=(0,0), 1=(1,0), 2=(0,1), 3=(1,1)."""
    return build_topology(2, 2)


@pytest.fixture
def topo5() -> BoardTopology:
    return build_topology(5, 5)


@pytest.fixture
def empty2(topo2: BoardTopology) -> np.ndarray:
    return topo2.empty_state()


# =============================================================================
# Board Builders
# =============================================================================

@pytest.fixture
def board_from_rows() -> Callable[..., np.ndarray]:
    """
    Build a plain (untagged) board from text rows: '.', 'B', 'W'.

        board_from_rows("B.", "WB")
    """
    symbols = {".": CellState.EMPTY, "B": CellState.BLACK, "W": CellState.WHITE}

    def build(*rows: str) -> np.ndarray:
        return np.array(
            [symbols[ch] for row in rows for ch in row],
            dtype=BOARD_DTYPE,
        )

    return build


# =============================================================================
# Random / Game Fixtures
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def game5() -> HexGame:
    return HexGame(5, 5)


@pytest.fixture
def black() -> PlayerColor:
    return PlayerColor.BLACK


@pytest.fixture
def white() -> PlayerColor:
    return PlayerColor.WHITE
