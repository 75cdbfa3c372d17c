"""
Incremental connectivity tracking.

Each stone carries a border tag for its group (north/south for Black,
west/east for White). Placing a stone only looks at its immediate neighbors;
when the stone connects a group to a border, the tag is flood-filled through
the plain stones of that group only, so the rest of the board is untouched.
"""

from __future__ import annotations

import numpy as np

from hex_mcts.board.topology import BoardTopology
from hex_mcts.core.types import CellState, PlayerColor

# player -> (plain, first border tag, second border tag, win tag)
_TAGS = {
    PlayerColor.BLACK: (
        CellState.BLACK, CellState.BLACK_NORTH, CellState.BLACK_SOUTH, CellState.BLACK_WIN,
    ),
    PlayerColor.WHITE: (
        CellState.WHITE, CellState.WHITE_WEST, CellState.WHITE_EAST, CellState.WHITE_WIN,
    ),
}


def flood_fill(
    topology: BoardTopology,
    state: np.ndarray,
    start: int,
    match: CellState,
    tag: CellState,
) -> None:
    """
    Retag every ``match`` cell reachable from ``start`` through ``match``
    cells as ``tag``. ``start`` is retagged too if it holds ``match``, so
    callers tag ``start`` before filling.

    Uses an explicit stack; each cell is pushed at most once since it is
    retagged before being pushed.
    """
    neighbors = topology.neighbors
    stack = [start]
    while stack:
        pos = stack.pop()
        for n in neighbors[pos]:
            if state[n] == match:
                state[n] = tag
                stack.append(n)


def apply_move(
    topology: BoardTopology,
    state: np.ndarray,
    player: PlayerColor,
    pos: int,
) -> bool:
    """
    Place ``player``'s stone at ``pos`` and update border tags in place.

    The caller guarantees ``state[pos]`` is empty.

    Returns:
        True iff the stone connects both of ``player``'s borders, in which
        case the cell is tagged with the win marker.
    """
    plain, first_tag, second_tag, win_tag = _TAGS[player]

    if player == PlayerColor.BLACK:
        first = topology.on_north(pos)
        second = topology.on_south(pos)
    else:
        first = topology.on_west(pos)
        second = topology.on_east(pos)

    for n in topology.neighbors[pos]:
        cell = state[n]
        if cell == first_tag:
            first = True
        elif cell == second_tag:
            second = True

    if first and second:
        state[pos] = win_tag
        return True

    if first or second:
        tag = first_tag if first else second_tag
        state[pos] = tag
        flood_fill(topology, state, pos, plain, tag)
    else:
        state[pos] = plain

    return False
