# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Translate game events into clauses.

Three kinds of events are observed during a game:
  * a hand: the complete set of cards dealt to one holder,
  * a suggestion: three cards named by a player, and who could refute them,
  * an accusation: three cards claimed to be the solution, and whether the
    claim was right.
"""
from typing import Iterable, List, Optional, Sequence, Union

from clue_reasoner.encoding import VariableEncoder
from clue_reasoner.errors import MalformedEvent
from clue_reasoner.game_config import CaseFile, Holder, Player
from py_dpll.sat_solver import Clause


class EventEncoder:
    """
    Build the clauses implied by each observed event.
    """

    def __init__(self, encoder: VariableEncoder):
        self.encoder = encoder

    def _check_cards(self, event: str, cards: Sequence[str]) -> None:
        for card in cards:
            if not self.encoder.has_card(card):
                raise MalformedEvent(f"{event}: {card!r} is not a card of this game.")
        if len(set(cards)) != len(cards):
            raise MalformedEvent(f"{event}: the same card is listed twice in {list(cards)}.")

    def _seated(self, event: str, role: str, name: Union[str, Holder]) -> Player:
        holder = self.encoder.holder(name)
        if isinstance(holder, CaseFile):
            raise MalformedEvent(f"{event}: the case file cannot be the {role}.")
        return holder

    def players_between(self, suggester: Player, stop: Player) -> List[Player]:
        """
        Players seated after `suggester` and before `stop`, in turn order.

        The rotation wraps from the last seat to seat 0 and never includes the
        case file. With `stop` equal to `suggester` it returns every other player.
        """
        players = self.encoder.players
        passed = []
        for step in range(1, len(players)):
            player = players[(suggester.seat + step) % len(players)]
            if player == stop:
                break
            passed.append(player)
        return passed

    def hand_clauses(self, holder: Union[str, Holder], held_cards: Iterable[str]) -> List[Clause]:
        """
        One unit clause per card of the game: positive for the cards in the
        hand, negative for every other card.
        """
        holder = self.encoder.holder(holder)
        held = list(held_cards)
        self._check_cards("hand", held)
        held = set(held)
        return [(self.encoder.literal(holder, card, card in held),) for card in self.encoder.cards]

    def suggestion_clauses(self, suggester: Union[str, Holder], card1: str, card2: str, card3: str,
                           refuter: Optional[Union[str, Holder]] = None,
                           shown_card: Optional[str] = None) -> List[Clause]:
        """
        Clauses learned from a suggestion.

        Every player asked before the refuter could not refute, so holds none of
        the three cards. The refuter holds the shown card when it was seen, and
        at least one of the three cards otherwise. Without a refuter nobody but
        the suggester was able to refute.

        Args:
            suggester: Player making the suggestion.
            card1, card2, card3: Suggested suspect, weapon and room.
            refuter: Player who refuted, or None if nobody could.
            shown_card: Card shown to the suggester, or None if unseen.

        Raises:
            InvalidIdentifier: If a player name is unknown.
            MalformedEvent: If the event cannot happen in a legal game.
        """
        event = "suggestion"
        suggester = self._seated(event, "suggester", suggester)
        cards = (card1, card2, card3)
        self._check_cards(event, cards)

        if refuter is None:
            if shown_card is not None:
                raise MalformedEvent(f"{event}: card {shown_card!r} shown but nobody refuted.")
            stop = suggester
        else:
            refuter = self._seated(event, "refuter", refuter)
            if refuter == suggester:
                raise MalformedEvent(f"{event}: {suggester.name!r} cannot refute their own suggestion.")
            if shown_card is not None and shown_card not in cards:
                raise MalformedEvent(f"{event}: shown card {shown_card!r} was not suggested.")
            stop = refuter

        clauses = []
        for player in self.players_between(suggester, stop):
            for card in cards:
                clauses.append((self.encoder.literal(player, card, False),))

        if refuter is not None:
            if shown_card is not None:
                clauses.append((self.encoder.literal(refuter, shown_card),))
            else:
                clauses.append(tuple(self.encoder.literal(refuter, card) for card in cards))
        return clauses

    def accusation_clauses(self, accuser: Union[str, Holder], card1: str, card2: str, card3: str,
                           is_correct: bool) -> List[Clause]:
        """
        A correct accusation puts the three cards in the case file; a wrong one
        rules out that the case file holds all three.
        """
        event = "accusation"
        self._seated(event, "accuser", accuser)
        cards = (card1, card2, card3)
        self._check_cards(event, cards)

        cf = self.encoder.case_file
        if is_correct:
            return [(self.encoder.literal(cf, card),) for card in cards]
        return [tuple(self.encoder.literal(cf, card, False) for card in cards)]
