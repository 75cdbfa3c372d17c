"""
Command-line interface for playing Hex against (or between) AI agents.
"""

import argparse
import logging

from hex_mcts.api import play_game
from hex_mcts.agents.most_winning_cell import DEFAULT_PLAYOUTS
from hex_mcts.core.types import ITERATIONS, ROLLOUTS_PER_CHILD, UCB_EXPLORE, WIN_REWARD, PlayerColor
from hex_mcts.utils.config import AGENTS, Config, DEFAULT_BOARD_SIZE
from hex_mcts.utils.factory import create_agent, create_game


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play Hex with Monte-Carlo tree search agents"
    )
    parser.add_argument(
        "--width", "-W",
        type=int,
        default=DEFAULT_BOARD_SIZE,
        help=f"Board width (default: {DEFAULT_BOARD_SIZE})",
    )
    parser.add_argument(
        "--height", "-H",
        type=int,
        default=DEFAULT_BOARD_SIZE,
        help=f"Board height (default: {DEFAULT_BOARD_SIZE})",
    )
    parser.add_argument(
        "--black", "-b",
        choices=list(AGENTS.keys()),
        default="human",
        help="Agent playing Black, north to south (default: human)",
    )
    parser.add_argument(
        "--white", "-w",
        choices=list(AGENTS.keys()),
        default="mcts",
        help="Agent playing White, west to east (default: mcts)",
    )
    parser.add_argument(
        "--iterations", "-i",
        type=int,
        default=ITERATIONS,
        help=f"MCTS iterations per move (default: {ITERATIONS})",
    )
    parser.add_argument(
        "--exploration", "-c",
        type=float,
        default=UCB_EXPLORE,
        help=f"UCB1 exploration constant (default: {UCB_EXPLORE})",
    )
    parser.add_argument(
        "--rollouts",
        type=int,
        default=ROLLOUTS_PER_CHILD,
        help=f"Rollouts per expanded child (default: {ROLLOUTS_PER_CHILD})",
    )
    parser.add_argument(
        "--win-reward",
        type=int,
        default=WIN_REWARD,
        help=f"Reward for reaching a won leaf (default: {WIN_REWARD})",
    )
    parser.add_argument(
        "--playouts",
        type=int,
        default=DEFAULT_PLAYOUTS,
        help=f"Playouts per move for most-winning-cell (default: {DEFAULT_PLAYOUTS})",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Base random seed for reproducible games",
    )
    parser.add_argument(
        "--swap-rule",
        action="store_true",
        help="Allow the second player to swap the first move (square boards)",
    )
    parser.add_argument(
        "--reverse",
        action="store_true",
        help="Reverse Hex: completing a path loses (random or human agents only)",
    )
    parser.add_argument(
        "--dark",
        action="store_true",
        help="Dark Hex: opponent stones are hidden (random or human agents only)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = Config(
        width=args.width,
        height=args.height,
        iterations=args.iterations,
        exploration=args.exploration,
        rollouts_per_child=args.rollouts,
        win_reward=args.win_reward,
        playouts=args.playouts,
        swap_rule=args.swap_rule,
        reverse=args.reverse,
        dark=args.dark,
        seed=args.seed,
    )

    game = create_game(config)
    agents = {
        PlayerColor.BLACK: create_agent(args.black, config, PlayerColor.BLACK),
        PlayerColor.WHITE: create_agent(args.white, config, PlayerColor.WHITE),
    }

    play_game(game, agents)


if __name__ == "__main__":
    main()
