"""
Board topology - precomputed hexagonal adjacency for one board size.

Cells are laid out row-major in offset coordinates: cell (x, y) lives at
index ``y * width + x``. Besides the four orthogonal neighbors, the two
diagonals (x-1, y+1) and (x+1, y-1) complete the hexagonal adjacency.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

import numpy as np

from hex_mcts.core.types import BOARD_DTYPE, CellState

# Neighbor offsets (dx, dy) in table order
_HEX_OFFSETS = ((-1, 0), (0, -1), (1, 0), (0, 1), (-1, 1), (1, -1))


@dataclass(frozen=True)
class BoardTopology:
    """Immutable neighbor table for a ``width`` x ``height`` board."""

    width: int
    height: int
    neighbors: Tuple[Tuple[int, ...], ...]

    @property
    def size(self) -> int:
        return self.width * self.height

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def coords(self, pos: int) -> Tuple[int, int]:
        """Inverse of index(): (x, y) for a cell index."""
        return pos % self.width, pos // self.width

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    # Borders: Black owns north/south, White owns west/east
    def on_north(self, pos: int) -> bool:
        return pos < self.width

    def on_south(self, pos: int) -> bool:
        return pos >= self.size - self.width

    def on_west(self, pos: int) -> bool:
        return pos % self.width == 0

    def on_east(self, pos: int) -> bool:
        return pos % self.width == self.width - 1

    def empty_state(self) -> np.ndarray:
        """Fresh all-empty board buffer."""
        return np.full(self.size, CellState.EMPTY, dtype=BOARD_DTYPE)


def _neighbor_table(width: int, height: int) -> Tuple[Tuple[int, ...], ...]:
    table = []
    for y in range(height):
        for x in range(width):
            cell = []
            for dx, dy in _HEX_OFFSETS:
                nx, ny = x + dx, y + dy
                if 0 <= nx < width and 0 <= ny < height:
                    cell.append(ny * width + nx)
            table.append(tuple(cell))
    return tuple(table)


@lru_cache(maxsize=None)
def build_topology(width: int, height: int) -> BoardTopology:
    """
    Build (once per size) the topology for a ``width`` x ``height`` board.

    Raises:
        ValueError: if either dimension is not positive.
    """
    if width < 1 or height < 1:
        raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
    return BoardTopology(width, height, _neighbor_table(width, height))
