import logging
import sys
from pathlib import Path
from typing import Callable

import pytest

# Ensure local `src` directory is importable before project is installed.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from broadside.battleship import GameField
from broadside.coord_utils import parse_coordinate

# Suppress INFO & DEBUG logs from the game modules during tests
logging.basicConfig(level=logging.WARNING)

# One legal fleet, in roster order: rows A, C, E, G, I starting at column 1.
FLEET = ["A1 A5", "C1 C4", "E1 E3", "G1 G3", "I1 I2"]
FLEET_CELLS = (
    [f"A{c}" for c in range(1, 6)]
    + [f"C{c}" for c in range(1, 5)]
    + [f"E{c}" for c in range(1, 4)]
    + [f"G{c}" for c in range(1, 4)]
    + ["I1", "I2"]
)


def coord(token: str):
    """Parse *token*, failing the test if it is not a well-formed coordinate."""
    parsed = parse_coordinate(token)
    assert parsed is not None, token
    return parsed


def place_fleet(field: GameField) -> None:
    for line in FLEET:
        first, second = line.split()
        field.place_next_ship(coord(first), coord(second))


@pytest.fixture
def field() -> GameField:
    return GameField("Player 1")


@pytest.fixture
def fleet_field(field: GameField) -> GameField:
    place_fleet(field)
    return field


@pytest.fixture
def scripted_io() -> Callable[..., tuple]:
    """Factory returning (read_line, write, output) over a fixed list of input lines."""

    def _factory(lines):
        it = iter(lines)
        output: list[str] = []

        def read_line():
            return next(it, None)

        return read_line, output.append, output

    return _factory
