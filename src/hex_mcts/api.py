"""
Public API for move decisions and game play.

Usage:
    from hex_mcts import decide, HexGame, RandomAgent, MCTSAgent, play_game

    move = decide(board_bytes, PlayerColor.BLACK, width=11, height=11, seed=7)

    game = HexGame(7, 7)
    agents = {
        PlayerColor.BLACK: MCTSAgent(PlayerColor.BLACK, seed=1),
        PlayerColor.WHITE: RandomAgent(PlayerColor.WHITE, seed=2),
    }
    winner = play_game(game, agents)
"""

from __future__ import annotations

import logging
import random
from typing import Dict, Optional, TYPE_CHECKING

from hex_mcts.agents.human import SWAP_MOVE
from hex_mcts.board.topology import build_topology
from hex_mcts.codec import BufferLike, decode_state
from hex_mcts.core.types import ITERATIONS, PlayerColor
from hex_mcts.search.mcts import MCTSEngine

if TYPE_CHECKING:
    from hex_mcts.agents.base import BaseAgent
    from hex_mcts.games.hex_game import HexGame

logger = logging.getLogger(__name__)


def decide(
    state_bytes: BufferLike,
    player: PlayerColor,
    width: int,
    height: int,
    *,
    seed: Optional[int] = None,
    iterations: int = ITERATIONS,
) -> int:
    """
    Decision entry point for an externally supplied board buffer.

    Parameters
    ----------
    state_bytes : bytes-like
        One byte per cell, row-major, CellState numbering.
    player : PlayerColor
        Color to move.
    width, height : int
        Board dimensions.
    seed : int, optional
        Seed for the engine's random source; None for a non-deterministic run.
    iterations : int
        Search budget.

    Returns
    -------
    int
        Row-major index of an empty cell in ``[0, width*height)``.
    """
    topology = build_topology(width, height)
    state = decode_state(state_bytes, topology)
    engine = MCTSEngine(topology, random.Random(seed), iterations=iterations)
    return engine.decide(state, PlayerColor(player))


def _agent_turn(game: "HexGame", agent: "BaseAgent") -> str:
    """Ask ``agent`` for a move and apply it. Returns a description of the move."""
    while True:
        move = agent.get_move(game)
        try:
            if move == SWAP_MOVE:
                game.swap()
                return "swap"
            placed = game.apply_move(move)
        except ValueError as e:
            if not agent.interactive:
                raise
            print(f"Illegal move: {e}")
            continue
        x, y = game.topology.coords(move)
        label = f"{chr(ord('a') + x)}{y + 1} ({x},{y})"
        # Dark Hex: a hidden stone was found, same player moves again
        if placed is False:
            return f"{label}, blocked by a hidden stone"
        return label


def play_game(
    game: "HexGame",
    agents: Dict[PlayerColor, "BaseAgent"],
    *,
    verbose: bool = True,
) -> Optional[PlayerColor]:
    """
    Alternate agent turns until the game is decided.

    Parameters
    ----------
    game : HexGame
        Game to play; mutated in place.
    agents : Dict[PlayerColor, BaseAgent]
        Agent for each color.
    verbose : bool
        If True, print the board after every move.

    Returns
    -------
    PlayerColor or None
        The winner, or None if the board filled without a decision
        (which cannot happen in a valid game of Hex).
    """
    if verbose:
        print(f"Starting {game.game_id()} on a {game.width}x{game.height} board")
        print(game.state_string())

    try:
        while not game.is_over() and len(game.valid_moves()) > 0:
            current = game.current_player()
            description = _agent_turn(game, agents[current])
            logger.info("%s played %s", current.name, description)

            if verbose:
                print(f"\n{current.name} played: {description}")
                print(game.state_string())

    except KeyboardInterrupt:
        print("\nInterrupted - game abandoned")
        return None
    except Exception:
        logger.exception("Fatal error in game loop")
        raise

    if verbose:
        print("\n" + "=" * 40)
        print("GAME OVER")
        print("=" * 40)
        if game.winner is not None:
            print(f"Winner: {game.winner.name}")

    return game.winner


__all__ = [
    "decide",
    "play_game",
]
