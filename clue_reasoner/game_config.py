# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Game configuration: players in seating order, cards by category, case file.

A configuration is immutable. Playing with another seating order means building
a new configuration with `with_seating`.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Sequence, Tuple, Union

from clue_reasoner.errors import InvalidIdentifier


SUSPECT = "suspect"
WEAPON = "weapon"
ROOM = "room"
CATEGORIES = (SUSPECT, WEAPON, ROOM)

CLASSIC_CONFIG = Path(__file__).resolve().parent / "clue_classic.json"


@dataclass(frozen=True)
class Player:
    """A seated player; `seat` is the position in the seating order."""
    name: str
    seat: int


@dataclass(frozen=True)
class CaseFile:
    """The envelope holding the solution: one suspect, one weapon, one room."""
    name: str = "cf"


Holder = Union[Player, CaseFile]


def _check_unique(kind: str, names: Sequence[str]) -> None:
    seen = set()
    for name in names:
        if not isinstance(name, str) or not name:
            raise ValueError(f"Invalid {kind} name {name!r}.")
        if name in seen:
            raise ValueError(f"Duplicate {kind} name {name!r}.")
        seen.add(name)


@dataclass(frozen=True)
class GameConfig:
    """
    Roster of a Clue game.

    Attributes:
        players: Player names in seating order.
        suspects: Suspect cards.
        weapons: Weapon cards.
        rooms: Room cards.
        case_file: Name used to address the case file as a holder.
    """
    players: Tuple[str, ...]
    suspects: Tuple[str, ...]
    weapons: Tuple[str, ...]
    rooms: Tuple[str, ...]
    case_file: str = "cf"

    def __post_init__(self):
        for attr in ("players", "suspects", "weapons", "rooms"):
            object.__setattr__(self, attr, tuple(getattr(self, attr)))

        if len(self.players) < 2:
            raise ValueError(f"A game needs at least two players, got {len(self.players)}.")
        _check_unique("player", self.players)
        if self.case_file in self.players:
            raise ValueError(f"Case file name {self.case_file!r} is also a player name.")
        for category, cards in zip(CATEGORIES, (self.suspects, self.weapons, self.rooms)):
            if not cards:
                raise ValueError(f"Category {category!r} has no cards.")
        _check_unique("card", self.cards)

    @property
    def cards(self) -> Tuple[str, ...]:
        return self.suspects + self.weapons + self.rooms

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def num_cards(self) -> int:
        return len(self.cards)

    def categories(self) -> Dict[str, Tuple[str, ...]]:
        return {SUSPECT: self.suspects, WEAPON: self.weapons, ROOM: self.rooms}

    def category_of(self, card: str) -> str:
        for category, cards in self.categories().items():
            if card in cards:
                return category
        raise InvalidIdentifier(f"Illegal card: {card!r}")

    def with_seating(self, order: Iterable[str]) -> GameConfig:
        """
        Return a configuration with the same players seated in another order.

        Raises:
            ValueError: If `order` is not a permutation of the players.
        """
        order = tuple(order)
        if sorted(order) != sorted(self.players) or len(set(order)) != len(order):
            raise ValueError(f"Seating {order} is not a permutation of players {self.players}.")
        return GameConfig(order, self.suspects, self.weapons, self.rooms, self.case_file)

    def to_dict(self) -> dict:
        return {
            "players": list(self.players),
            "suspects": list(self.suspects),
            "weapons": list(self.weapons),
            "rooms": list(self.rooms),
            "case_file": self.case_file,
        }

    @classmethod
    def from_dict(cls, data: dict) -> GameConfig:
        required = ["players", "suspects", "weapons", "rooms"]
        for key in required:
            if key not in data:
                raise ValueError(f"Game config missing required field: {key}")
        return cls(
            players=data["players"],
            suspects=data["suspects"],
            weapons=data["weapons"],
            rooms=data["rooms"],
            case_file=data.get("case_file", "cf"),
        )

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> GameConfig:
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    @classmethod
    def classic(cls) -> GameConfig:
        """Six players, six suspects, six weapons and nine rooms."""
        return cls.from_json(CLASSIC_CONFIG)
