"""Two-player console orchestrator.

BattleshipGame owns one GameField per participant, runs the setup phase for
both, then alternates shots until one field is fully sunk. All I/O goes
through the injected ``read_line`` / ``write`` callables; ``read_line``
returns None once the input stream is exhausted.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from . import placement_wizard
from .battleship import GameField
from .commands import parse_fire
from .config import CLEAR_SCREEN, PLAYER_ONE, PLAYER_TWO
from .events import Category, Event, describe
from .io_utils import clear_screen, render_grid

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 21


class BattleshipGame:
    def __init__(
        self,
        read_line: Callable[[], Optional[str]],
        write: Callable[[str], None],
        *,
        names: Sequence[str] = (PLAYER_ONE, PLAYER_TWO),
        clear: bool = CLEAR_SCREEN,
    ) -> None:
        first, second = names
        self.fields = (GameField(first), GameField(second))
        self.history: List[Event] = []
        self.winner: Optional[str] = None
        self._read_line = read_line
        self._write = write
        self._clear = clear

    def emit(self, ev: Event) -> None:
        self.history.append(ev)
        self._write(describe(ev))

    def run(self) -> Optional[str]:
        """Play a full game; return the winner's name, or None if input ran out."""
        for field in self.fields:
            if not placement_wizard.run(field, self._read_line, self.emit, self._show_ships):
                return None
            if not self._pass_turn():
                return None

        turn = 0
        while True:
            shooter, target = self.fields[turn], self.fields[1 - turn]
            won = self._take_turn(shooter, target)
            if won is None:
                return None
            if won:
                self.winner = shooter.player_name
                self.history.append(Event(Category.SYSTEM, "game_over", {"winner": self.winner}))
                logger.info("%s won", self.winner)
                return self.winner
            if not self._pass_turn():
                return None
            turn = 1 - turn

    def _take_turn(self, shooter: GameField, target: GameField) -> Optional[bool]:
        self._write(render_grid(target.shots_view()))
        self._write(SEPARATOR)
        self._write(render_grid(shooter.ships_view()))
        self.emit(Event(Category.TURN, "turn_start", {"player": shooter.player_name}))

        while True:
            line = self._read_line()
            if line is None:
                logger.info("Input closed during %s's turn", shooter.player_name)
                return None
            cmd = parse_fire(line)
            result = target.try_shoot(cmd.target)
            if result.ok:
                break
            self.emit(Event(Category.SYSTEM, "rejected", {"reason": result.reason}))

        if not result.value:
            self.emit(Event(Category.TURN, "miss"))
            return False
        if target.are_all_ships_sunk():
            self.emit(Event(Category.TURN, "won"))
            return True
        if target.is_ship_sunk(cmd.target):
            self.emit(Event(Category.TURN, "sunk"))
        else:
            self.emit(Event(Category.TURN, "hit"))
        return False

    def _pass_turn(self) -> bool:
        self.emit(Event(Category.SYSTEM, "pass_turn"))
        if self._read_line() is None:
            return False
        clear_screen(self._write, self._clear)
        return True

    def _show_ships(self, field: GameField) -> None:
        self._write(render_grid(field.ships_view()))
