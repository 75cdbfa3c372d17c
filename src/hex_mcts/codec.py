"""
Board buffer marshalling.

The external representation is one byte per cell, row-major, each byte one
of the CellState values (0..8). Internally a board is an int8 numpy array of
the same layout, so decoding is a validated copy.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from hex_mcts.board.topology import BoardTopology
from hex_mcts.core.types import BOARD_DTYPE, MAX_CELL_VALUE

BufferLike = Union[bytes, bytearray, memoryview, Sequence[int], np.ndarray]


def validate_state(state: np.ndarray, topology: BoardTopology) -> None:
    """
    Check length and cell values of a board array.

    Raises:
        ValueError: on wrong length or an unknown cell value.
    """
    if state.ndim != 1 or state.shape[0] != topology.size:
        raise ValueError(
            f"Board has {state.size} cells, expected {topology.size} "
            f"for a {topology.width}x{topology.height} board"
        )
    bad = np.flatnonzero((state < 0) | (state > MAX_CELL_VALUE))
    if bad.size:
        pos = int(bad[0])
        raise ValueError(f"Invalid cell value {int(state[pos])} at index {pos}")


def decode_state(buf: BufferLike, topology: BoardTopology) -> np.ndarray:
    """Validated board array from an external buffer (always a fresh copy)."""
    if isinstance(buf, (bytes, bytearray, memoryview)):
        raw = np.frombuffer(bytes(buf), dtype=np.uint8)
    else:
        raw = np.asarray(buf)
        if raw.dtype.kind not in "iu":
            raise ValueError(f"Board buffer must hold integers, got dtype {raw.dtype}")

    # Range check before narrowing so that e.g. 256 is not wrapped to 0
    validate_state(raw, topology)
    return raw.astype(BOARD_DTYPE, copy=True)


def encode_state(state: np.ndarray) -> bytes:
    """One byte per cell, row-major."""
    return state.astype(np.uint8).tobytes()
