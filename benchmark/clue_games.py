# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Three recorded Clue games on the classic board.

Each game is seen from one player: their hand, then every suggestion in turn
order as (suggester, suspect, weapon, room, refuter, shown card). Each game
stops once the case file can be deduced. In games 2 and 3 the deduction also
needs the number of cards per hand, which the reasoner does not use.
"""
from typing import Any, List, Optional, Tuple

from clue_reasoner.clue_reasoner import ClueReasoner
from clue_reasoner.game_config import GameConfig
from py_dpll.sat_solver import SATSolver


# Seating used in all three recorded games.
SEATING = ("sc", "wh", "gr", "mu", "pe", "pl")

Event = Tuple[Any, ...]

GAME_1 = [
    ("hand", "sc", ("sc", "pi", "di")),
    ("suggest", "gr", "gr", "ro", "li", "mu", None),
    ("suggest", "mu", "pl", "kn", "ba", "pl", None),
    ("suggest", "pe", "pl", "wr", "ba", "pl", None),
    ("suggest", "pl", "pl", "wr", "ki", "wh", None),
    ("suggest", "sc", "gr", "ca", "ki", "gr", "gr"),
    ("suggest", "wh", "sc", "kn", "ba", "mu", None),
    ("suggest", "gr", "sc", "pi", "ba", "pl", None),
    ("suggest", "mu", "wh", "ro", "co", "pe", None),
    ("suggest", "pe", "wh", "re", "co", "wh", None),
    ("suggest", "pl", "wh", "wr", "di", "sc", "di"),
    ("suggest", "sc", "wh", "re", "co", "wh", "co"),
    ("suggest", "wh", "sc", "pi", "bi", "sc", "sc"),
    ("suggest", "gr", "sc", "ro", "bi", "pe", None),
    ("suggest", "mu", "pl", "wr", "lo", "pe", None),
    ("suggest", "pe", "pl", "re", "bi", "wh", None),
    ("suggest", "pl", "wh", "re", "ki", "gr", None),
    ("suggest", "sc", "mu", "wr", "bi", "pe", "wr"),
    ("suggest", "wh", "mu", "wr", "ba", "pe", None),
    ("suggest", "gr", "sc", "pi", "co", "sc", "sc"),
    ("suggest", "mu", "pl", "re", "ki", "wh", None),
    ("suggest", "pe", "pe", "ro", "li", "mu", None),
    ("suggest", "pl", "wh", "pi", "lo", "sc", "pi"),
    ("suggest", "sc", "mu", "re", "bi", "gr", "re"),
    ("suggest", "wh", "mu", "ro", "di", "pe", None),
    ("suggest", "gr", "pl", "re", "lo", "wh", None),
    ("suggest", "mu", "wh", "re", "ha", "pe", None),
    ("suggest", "pe", "sc", "re", "st", "pl", None),
    ("suggest", "pl", "wh", "ro", "ha", "pe", None),
    ("suggest", "sc", "wh", "pi", "st", "pl", "st"),
]
GAME_2 = [
    ("hand", "wh", ("kn", "wr", "lo")),
    ("suggest", "pe", "sc", "ca", "ba", "pl", None),
    ("suggest", "pl", "sc", "re", "ki", "sc", None),
    ("suggest", "sc", "mu", "pi", "di", "gr", None),
    ("suggest", "wh", "gr", "ca", "ki", "mu", "ca"),
    ("suggest", "gr", "pl", "pi", "st", "mu", None),
    ("suggest", "mu", "sc", "pi", "lo", "sc", None),
    ("suggest", "pe", "sc", "re", "di", "pl", None),
    ("suggest", "pl", "pe", "wr", "ki", "sc", None),
    ("suggest", "sc", "sc", "wr", "lo", "wh", "lo"),
    ("suggest", "wh", "gr", "re", "st", "mu", "st"),
    ("suggest", "gr", "wh", "re", "ha", "pe", None),
    ("suggest", "mu", "pl", "ca", "ha", "pe", None),
    ("suggest", "pe", "sc", "ro", "ki", "sc", None),
    ("suggest", "pl", "pl", "wr", "li", "wh", "wr"),
    ("suggest", "sc", "wh", "kn", "ba", "wh", "kn"),
    ("suggest", "wh", "gr", "re", "ki", "pl", "re"),
    ("suggest", "gr", "pe", "re", "di", "mu", None),
    ("suggest", "mu", "wh", "ro", "ki", "pe", None),
    ("suggest", "pe", "pl", "ro", "st", "gr", None),
    ("suggest", "pl", "pe", "ro", "li", "gr", None),
    ("suggest", "sc", "wh", "wr", "bi", "wh", "wr"),
    ("suggest", "wh", "gr", "pi", "co", "sc", "gr"),
    ("suggest", "gr", "sc", "wr", "bi", "pl", None),
    ("suggest", "mu", "pe", "re", "ba", "pl", None),
    ("suggest", "pe", "wh", "wr", "ba", "pl", None),
    ("suggest", "pl", "pl", "pi", "di", "mu", None),
    ("suggest", "sc", "wh", "re", "ba", "pe", None),
    ("suggest", "wh", "pl", "pi", "co", "pe", "pl"),
]
GAME_3 = [
    ("hand", "pl", ("pe", "ca", "st")),
    ("suggest", "sc", "wh", "ro", "co", "pe", None),
    ("suggest", "wh", "wh", "ro", "co", "pe", None),
    ("suggest", "mu", "wh", "wr", "di", "pe", None),
    ("suggest", "pe", "wh", "ro", "li", "sc", None),
    ("suggest", "pl", "gr", "kn", "lo", "wh", "gr"),
    ("suggest", "sc", "wh", "ro", "bi", "wh", None),
    ("suggest", "wh", "wh", "ro", "li", "sc", None),
    ("suggest", "gr", "wh", "ro", "di", "sc", None),
    ("suggest", "mu", "wh", "ro", "ki", "sc", None),
    ("suggest", "pl", "wh", "ro", "ha", "sc", "wh"),
    ("suggest", "sc", "wh", "ro", "li", None, None),
    ("suggest", "wh", "wh", "wr", "st", "pe", None),
    ("suggest", "gr", "wh", "ro", "lo", "sc", None),
    ("suggest", "mu", "sc", "ro", "di", "sc", None),
    ("suggest", "pe", "sc", "ro", "st", "pl", "st"),
    ("suggest", "pl", "mu", "ro", "li", "sc", "ro"),
    ("suggest", "sc", "sc", "wr", "ha", "gr", None),
    ("suggest", "wh", "wh", "kn", "ha", "gr", None),
    ("suggest", "gr", "pe", "wr", "co", "pe", None),
    ("suggest", "mu", "pe", "kn", "co", "pe", None),
    ("suggest", "pe", "pl", "ro", "ba", "sc", None),
    ("suggest", "pl", "mu", "kn", "ki", "wh", "ki"),
    ("suggest", "wh", "gr", "kn", "di", "sc", None),
    ("suggest", "gr", "sc", "ro", "ki", "sc", None),
    ("suggest", "mu", "sc", "re", "st", "pl", "st"),
    ("suggest", "pe", "sc", "wr", "bi", "wh", None),
    ("suggest", "pl", "sc", "wr", "st", "pe", "wr"),
]

GAMES = {1: GAME_1, 2: GAME_2, 3: GAME_3}


def replay(reasoner: ClueReasoner, events: List[Event]) -> None:
    """
    Record a sequence of events in a reasoner.

    Args:
        reasoner: Reasoner to update.
        events: ("hand", player, cards), ("suggest", suggester, c1, c2, c3,
            refuter, shown) or ("accuse", accuser, c1, c2, c3, is_correct).
    """
    for event in events:
        kind, args = event[0], event[1:]
        if kind == "hand":
            reasoner.hand(*args)
        elif kind == "suggest":
            reasoner.suggest(*args)
        elif kind == "accuse":
            reasoner.accuse(*args)
        else:
            raise ValueError(f"Unknown event kind {kind!r}")


def play_game(solver: SATSolver, game_number: int, config: Optional[GameConfig] = None) -> ClueReasoner:
    """
    Build a reasoner on `solver` and replay one recorded game.

    Args:
        solver: Fresh backend.
        game_number: 1, 2 or 3.
        config: Board to seat; the classic board by default.

    Returns:
        The reasoner holding the game's knowledge base.
    """
    if game_number not in GAMES:
        raise ValueError(f"Invalid game number {game_number}; choose from {sorted(GAMES)}.")
    config = config if config is not None else GameConfig.classic()
    reasoner = ClueReasoner(solver, config.with_seating(SEATING))
    replay(reasoner, GAMES[game_number])
    return reasoner
