"""Lightweight event model used by BattleshipGame to decouple game flow from console text.

The orchestrator emits typed events; `describe()` turns them into the
messages shown to the players, so every player-facing string of the battle
phase lives in one table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict


class Category(Enum):
    """High-level event categories."""

    SETUP = auto()  # ship placement prompts
    TURN = auto()  # per-turn lifecycle (prompt, shot outcome)
    SYSTEM = auto()  # turn passing, game over, input errors


@dataclass(frozen=True)
class Event:
    category: Category
    type: str  # finer-grained identifier, e.g. "miss", "hit", "sunk"
    payload: Dict[str, Any] = field(default_factory=dict)


MESSAGES: Dict[str, str] = {
    "setup_start": "{player}, place your ships on the game field\n",
    "place_prompt": "\nEnter the coordinates of the {ship} ({cells} cells)",
    "turn_start": "\n{player}, it's your turn:",
    "miss": "You missed!",
    "hit": "You hit a ship!",
    "sunk": "You sank a ship! Specify a new target:",
    "won": "You sank the last ship. You won. Congratulations!",
    "rejected": "{reason} Try again:",
    "pass_turn": "\nPress Enter and pass the move to another player",
}


def describe(ev: Event) -> str:
    """Return the console message for *ev*."""
    try:
        template = MESSAGES[ev.type]
    except KeyError:
        raise ValueError(f"No message for event type: {ev.type}") from None
    return template.format(**ev.payload)
