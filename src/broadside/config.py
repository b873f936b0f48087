"""Central configuration for runtime-tunable parameters.

Console behaviour can be overridden via environment variables so that an
interactive session clears the screen between turns by default, while the
automated test-suite (or a piped transcript) can switch that off.
The grid extent and the ship roster are fixed rules of the game and are not
read from the environment.
"""

from __future__ import annotations

import os


# ===========================================================================
# Players
# ===========================================================================
# BROADSIDE_PLAYER_ONE / BROADSIDE_PLAYER_TWO: display labels of the two participants.
#   Defaults to "Player 1" and "Player 2".
#   Can also be set via the `--player-one` / `--player-two` CLI flags.
#   Example: export BROADSIDE_PLAYER_ONE=Alice
PLAYER_ONE: str = os.getenv("BROADSIDE_PLAYER_ONE", "Player 1")
PLAYER_TWO: str = os.getenv("BROADSIDE_PLAYER_TWO", "Player 2")


# ===========================================================================
# Console
# ===========================================================================
# BROADSIDE_CLEAR_SCREEN: If "0", the screen is not cleared when the move passes
#   to the other player. Useful when recording a transcript.
#   Defaults to "1".
#   Can also be disabled via the `--no-clear` CLI flag.
CLEAR_SCREEN: bool = os.getenv("BROADSIDE_CLEAR_SCREEN", "1") != "0"

# ANSI "cursor home + erase display".
CLEAR_SEQUENCE = "\033[H\033[2J"


# ===========================================================================
# Game Constants
# ===========================================================================
ROWS = 10
COLUMNS = 10

# Standard ship roster: (name, cells) tuples in mandatory placement order.
SHIPS = [
    ("Aircraft Carrier", 5),
    ("Battleship", 4),
    ("Submarine", 3),
    ("Cruiser", 3),
    ("Destroyer", 2),
]

# Cell glyphs shared by both grids.
FOG_OF_WAR_SIGN = "~"
SHIP_SIGN = "O"
HIT_SIGN = "X"
MISS_SIGN = "M"


# ===========================================================================
# Debugging and Logging
# ===========================================================================
# BROADSIDE_DEBUG: If "1", enables detailed debug logging across modules.
#   Defaults to "0" (disabled).
#   Example: export BROADSIDE_DEBUG=1
DEBUG: bool = os.getenv("BROADSIDE_DEBUG", "0") == "1"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
