"""
battleship.py

Contains core data structures and logic for Battleship, including:
 - ShipKind roster (names, lengths, mandatory placement order)
 - GameField class for storing one participant's ship layout and shot record
 - Error types and Result values returned by the non-raising operations

In a 2-player game each participant owns one GameField. During setup the
participant places ships on their own field; during battle the opponent
fires at it via shoot().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .config import (
    COLUMNS,
    FOG_OF_WAR_SIGN,
    HIT_SIGN,
    MISS_SIGN,
    ROWS,
    SHIP_SIGN,
    SHIPS,
)
from .coord_utils import Coordinate, format_coord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShipKind:
    name: str
    cells: int


SHIP_KINDS: Tuple[ShipKind, ...] = tuple(ShipKind(name, cells) for name, cells in SHIPS)


class GameFieldError(ValueError):
    """Base class for rejected field operations. The field is left unchanged."""


class InvalidCoordinate(GameFieldError):
    """Raised for a missing or out-of-range coordinate."""


class InvalidPlacement(GameFieldError):
    """Raised when a ship segment breaks a placement rule."""


@dataclass(frozen=True)
class Result:
    """Outcome of a try_* call: either ok with a value, or an error."""

    ok: bool
    value: object = None
    error: Optional[GameFieldError] = None

    @property
    def reason(self) -> str:
        return str(self.error) if self.error is not None else ""


Grid = Tuple[Tuple[str, ...], ...]


class GameField:
    """
    Represents a single participant's field.
    We store:
      - self._ships: real positions of ships ('O'), hits ('X'), misses ('M'), water ('~')
      - self._shots: what the opponent has learned ('~' unknown, 'X' hit, 'M' miss)
      - self._placed: ships placed so far; the next ship is SHIP_KINDS[_placed % 5]

    Both grids are private; callers get immutable snapshots through
    ships_view() / shots_view().
    """

    def __init__(self, player_name: str):
        self.player_name = player_name
        self._ships = [[FOG_OF_WAR_SIGN for _ in range(COLUMNS)] for _ in range(ROWS)]
        self._shots = [[FOG_OF_WAR_SIGN for _ in range(COLUMNS)] for _ in range(ROWS)]
        self._placed = 0
        self.hit_count = 0
        self.total_ship_cells = sum(kind.cells for kind in SHIP_KINDS)

    def __repr__(self) -> str:
        return f"GameField({self.player_name!r}, placed={self._placed}, hits={self.hit_count})"

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    @property
    def current_ship(self) -> ShipKind:
        return SHIP_KINDS[self._placed % len(SHIP_KINDS)]

    @property
    def ships_placed(self) -> int:
        return self._placed

    @property
    def placement_complete(self) -> bool:
        return self._placed >= len(SHIP_KINDS)

    def place_next_ship(self, first: Optional[Coordinate], second: Optional[Coordinate]) -> ShipKind:
        """Place the ship under the cursor between *first* and *second* (inclusive)."""
        if self.placement_complete:
            raise InvalidPlacement("Error! All ships are already placed.")
        if not (self._in_range(first) and self._in_range(second)):
            raise InvalidCoordinate("Error! You have not provided valid coordinates.")

        ship = self.current_ship
        if first.row != second.row and first.col != second.col:
            logger.debug(
                "%s: rejected %s at %s-%s (not straight)", self.player_name, ship.name, _label(first), _label(second)
            )
            raise InvalidPlacement("Error! Wrong ship location!")

        length = abs(first.row - second.row) + abs(first.col - second.col) + 1
        if length != ship.cells:
            logger.debug("%s: rejected %s length %d", self.player_name, ship.name, length)
            raise InvalidPlacement(f"Error! Wrong length of the {ship.name}!")

        row_start, row_end = sorted((first.row, second.row))
        col_start, col_end = sorted((first.col, second.col))
        if not self._area_clear(row_start, row_end, col_start, col_end):
            logger.debug(
                "%s: rejected %s at %s-%s (touches another ship)",
                self.player_name,
                ship.name,
                _label(first),
                _label(second),
            )
            raise InvalidPlacement("Error! You placed it too close to another one.")

        for r in range(row_start, row_end + 1):
            for c in range(col_start, col_end + 1):
                self._ships[r][c] = SHIP_SIGN
        self._placed += 1
        logger.debug("%s: placed %s at %s-%s", self.player_name, ship.name, _label(first), _label(second))
        return ship

    def try_place_next_ship(self, first: Optional[Coordinate], second: Optional[Coordinate]) -> Result:
        try:
            return Result(True, self.place_next_ship(first, second))
        except GameFieldError as exc:
            return Result(False, error=exc)

    def _area_clear(self, row_start: int, row_end: int, col_start: int, col_end: int) -> bool:
        """True if the box plus a one-cell border (clamped to the grid) holds only water."""
        for r in range(max(row_start - 1, 0), min(row_end + 1, ROWS - 1) + 1):
            for c in range(max(col_start - 1, 0), min(col_end + 1, COLUMNS - 1) + 1):
                if self._ships[r][c] != FOG_OF_WAR_SIGN:
                    return False
        return True

    # ------------------------------------------------------------------
    # Shooting
    # ------------------------------------------------------------------

    def shoot(self, coordinate: Optional[Coordinate]) -> bool:
        """Fire at *coordinate*; True on hit. Repeat shots return the recorded outcome."""
        if not self._in_range(coordinate):
            raise InvalidCoordinate("Error! You entered the wrong coordinate!")

        r, c = coordinate.row, coordinate.col
        if self._shots[r][c] != FOG_OF_WAR_SIGN:
            return self._shots[r][c] == HIT_SIGN

        if self._ships[r][c] == FOG_OF_WAR_SIGN:
            self._ships[r][c] = MISS_SIGN
            self._shots[r][c] = MISS_SIGN
            logger.debug("%s: miss at %s", self.player_name, _label(coordinate))
            return False

        self._ships[r][c] = HIT_SIGN
        self._shots[r][c] = HIT_SIGN
        self.hit_count += 1
        logger.debug(
            "%s: hit at %s (%d/%d)", self.player_name, _label(coordinate), self.hit_count, self.total_ship_cells
        )
        return True

    def try_shoot(self, coordinate: Optional[Coordinate]) -> Result:
        try:
            return Result(True, self.shoot(coordinate))
        except GameFieldError as exc:
            return Result(False, error=exc)

    def is_ship_sunk(self, coordinate: Optional[Coordinate]) -> bool:
        """
        Boundary-scan check around a hit cell.

        Looks left, right, up and down from *coordinate*, skipping hit cells,
        and reports the ship afloat if the first non-hit cell on any side is an
        unhit ship cell. This inspects raw cells rather than ship identity, and
        while skipping hits it never steps onto the outermost row or column.
        """
        if not self._in_range(coordinate):
            return False
        r, c = coordinate.row, coordinate.col
        if self._shots[r][c] != HIT_SIGN:
            return False

        row_line = self._ships[r]
        col_line = [self._ships[i][c] for i in range(ROWS)]
        return not (
            _side_afloat(row_line, c, -1)
            or _side_afloat(row_line, c, 1)
            or _side_afloat(col_line, r, -1)
            or _side_afloat(col_line, r, 1)
        )

    def are_all_ships_sunk(self) -> bool:
        return self.hit_count == self.total_ship_cells

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def ships_view(self) -> Grid:
        """Full layout, for the owner's own display."""
        return tuple(tuple(row) for row in self._ships)

    def shots_view(self) -> Grid:
        """Shot record only, for the opponent-facing display."""
        return tuple(tuple(row) for row in self._shots)

    @staticmethod
    def _in_range(coordinate: Optional[Coordinate]) -> bool:
        return coordinate is not None and 0 <= coordinate.row < ROWS and 0 <= coordinate.col < COLUMNS


def _label(coordinate: Coordinate) -> str:
    return format_coord(coordinate.row, coordinate.col)


def _side_afloat(line: Sequence[str], index: int, step: int) -> bool:
    pos = index + step
    if not 0 <= pos < len(line):
        return False
    while 0 < pos + step < len(line) - 1 and line[pos] == HIT_SIGN:
        pos += step
    return line[pos] == SHIP_SIGN
