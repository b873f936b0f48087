from dataclasses import dataclass
from typing import Optional

from .coord_utils import Coordinate, parse_coordinate


class CommandParseError(Exception):
    """Raised when a line cannot be parsed as a valid command."""


@dataclass(frozen=True)
class PlacementCommand:
    first: Optional[Coordinate]
    second: Optional[Coordinate]


@dataclass(frozen=True)
class FireCommand:
    target: Optional[Coordinate]


def parse_placement(line: str) -> PlacementCommand:
    """Split 'A1 A5' into two coordinates. Unparseable tokens become None."""
    if line is None:
        raise CommandParseError("Error! No coordinates entered.")
    parts = line.split()
    if len(parts) != 2:
        raise CommandParseError("Error! Enter exactly two coordinates, e.g. A1 A5.")
    return PlacementCommand(parse_coordinate(parts[0]), parse_coordinate(parts[1]))


def parse_fire(line: str) -> FireCommand:
    if line is None:
        raise CommandParseError("Error! No coordinate entered.")
    return FireCommand(parse_coordinate(line.strip()))
