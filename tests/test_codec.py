"""
Tests for hex_mcts.codec

Tests validation and conversion of external board buffers.
"""

import numpy as np
import pytest

from hex_mcts.codec import decode_state, encode_state, validate_state
from hex_mcts.core.types import CellState


class TestDecode:

    def test_bytes(self, topo2):
        state = decode_state(bytes([0, 6, 5, 2]), topo2)
        assert state.dtype == np.int8
        assert state.tolist() == [0, 6, 5, 2]
        assert state[1] == CellState.BLACK_NORTH

    @pytest.mark.parametrize("buf", [
        bytearray([0, 1, 2, 3]),
        memoryview(bytes([0, 1, 2, 3])),
        [0, 1, 2, 3],
        np.array([0, 1, 2, 3], dtype=np.uint8),
    ])
    def test_buffer_types(self, topo2, buf):
        assert decode_state(buf, topo2).tolist() == [0, 1, 2, 3]

    def test_returns_copy(self, topo2):
        source = np.zeros(4, dtype=np.int8)
        state = decode_state(source, topo2)
        state[0] = CellState.BLACK
        assert source[0] == 0

    @pytest.mark.parametrize("length", [0, 3, 5])
    def test_wrong_length(self, topo2, length):
        with pytest.raises(ValueError, match="expected 4"):
            decode_state(bytes(length), topo2)

    @pytest.mark.parametrize("value", [9, 255])
    def test_unknown_byte(self, topo2, value):
        with pytest.raises(ValueError, match="index 2"):
            decode_state(bytes([0, 0, value, 0]), topo2)

    def test_out_of_range_ints_not_wrapped(self, topo2):
        """256 must not silently become EMPTY."""
        with pytest.raises(ValueError):
            decode_state([0, 256, 0, 0], topo2)

    def test_negative_values(self, topo2):
        with pytest.raises(ValueError):
            decode_state([0, -1, 0, 0], topo2)

    def test_float_buffer_rejected(self, topo2):
        with pytest.raises(ValueError, match="integers"):
            decode_state(np.zeros(4), topo2)


class TestEncode:

    def test_one_byte_per_cell(self, topo2):
        state = decode_state(bytes([0, 8, 4, 7]), topo2)
        assert encode_state(state) == bytes([0, 8, 4, 7])


class TestValidate:

    def test_two_dimensional_rejected(self, topo2):
        with pytest.raises(ValueError):
            validate_state(np.zeros((2, 2), dtype=np.int8), topo2)

    def test_valid_passes(self, topo2):
        validate_state(topo2.empty_state(), topo2)
