# placement_wizard.py
"""
Interactive manual-placement loop for one participant.
Callable-based I/O usage:
    ok = run(field, recv_fn, emit, show_grid_fn)
Returns True when all ships placed, False when the input stream ends.
"""

import logging
from typing import Callable, Optional

from .battleship import SHIP_KINDS, GameField
from .commands import CommandParseError, parse_placement
from .events import Category, Event

logger = logging.getLogger(__name__)


def run(
    field: GameField,
    recv_fn: Callable[[], Optional[str]],
    emit: Callable[[Event], None],
    show_grid_fn: Callable[[GameField], None],
) -> bool:
    emit(Event(Category.SETUP, "setup_start", {"player": field.player_name}))
    show_grid_fn(field)

    for ship in SHIP_KINDS[field.ships_placed:]:
        emit(Event(Category.SETUP, "place_prompt", {"ship": ship.name, "cells": ship.cells}))
        while True:
            line = recv_fn()
            if line is None:
                logger.info("Input closed while %s was placing the %s", field.player_name, ship.name)
                return False
            try:
                cmd = parse_placement(line)
            except CommandParseError as exc:
                emit(Event(Category.SYSTEM, "rejected", {"reason": str(exc)}))
                continue
            result = field.try_place_next_ship(cmd.first, cmd.second)
            if result.ok:
                break
            emit(Event(Category.SYSTEM, "rejected", {"reason": result.reason}))
        show_grid_fn(field)

    return True
