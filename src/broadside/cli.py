"""Console entry point: two players, one terminal."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from . import config as _cfg
from .game import BattleshipGame

logger = logging.getLogger(__name__)


def read_line() -> Optional[str]:
    try:
        return input()
    except EOFError:
        return None


def main(argv: Optional[list[str]] = None) -> int:
    """Run one local game on stdin/stdout."""

    parser = argparse.ArgumentParser(description="Broadside – two-player console Battleship")
    parser.add_argument("--player-one", default=_cfg.PLAYER_ONE, help="Name of the first player")
    parser.add_argument("--player-two", default=_cfg.PLAYER_TWO, help="Name of the second player")
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the screen when the move passes to the other player.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    args = parser.parse_args(argv)

    debug = args.debug or _cfg.DEBUG
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING, format=_cfg.LOG_FORMAT)

    game = BattleshipGame(
        read_line,
        print,
        names=(args.player_one, args.player_two),
        clear=_cfg.CLEAR_SCREEN and not args.no_clear,
    )
    winner = game.run()
    if winner is None:
        logger.warning("Input ended before the game finished")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
