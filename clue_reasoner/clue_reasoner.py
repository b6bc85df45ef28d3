# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Propositional reasoner for the game of Clue.

The reasoner records what is observed during a game as clauses in a
satisfiability backend and answers, for any holder and card, whether the
holder certainly has the card, certainly does not, or whether it is still
undetermined. It does not use how many cards each player holds.
"""
from typing import Dict, Iterable, Optional, Sequence, Tuple, Union

from clue_reasoner.axioms import generate_axioms
from clue_reasoner.encoding import VariableEncoder
from clue_reasoner.events import EventEncoder
from clue_reasoner.game_config import GameConfig, Holder
from py_dpll.sat_solver import SATSolver, Truth


HolderRef = Union[str, Holder]


class ClueReasoner:
    """
    Knowledge base of one Clue game on top of a satisfiability backend.

    Args:
        solver: Any SATSolver backend; it should hold no clauses yet.
        config: Game roster; the classic six-player board by default.
    """

    def __init__(self, solver: SATSolver, config: Optional[GameConfig] = None):
        self.config = config if config is not None else GameConfig.classic()
        self.solver = solver
        self.encoder = VariableEncoder(self.config)
        self.events = EventEncoder(self.encoder)
        self._initialized = False
        self.add_initial_clauses()

    def add_initial_clauses(self) -> None:
        """Add the structural clauses of the game. Allowed once per reasoner."""
        if self._initialized:
            raise RuntimeError("Initial clauses were already added to this reasoner.")
        self.solver.add_clauses(generate_axioms(self.encoder))
        self._initialized = True

    def hand(self, player: HolderRef, cards: Iterable[str]) -> None:
        self.solver.add_clauses(self.events.hand_clauses(player, cards))

    def suggest(self, suggester: HolderRef, card1: str, card2: str, card3: str,
                refuter: Optional[HolderRef] = None, card_shown: Optional[str] = None) -> None:
        self.solver.add_clauses(
            self.events.suggestion_clauses(suggester, card1, card2, card3, refuter, card_shown))

    def accuse(self, accuser: HolderRef, card1: str, card2: str, card3: str, is_correct: bool) -> None:
        self.solver.add_clauses(
            self.events.accusation_clauses(accuser, card1, card2, card3, is_correct))

    def query(self, holder: HolderRef, card: str) -> int:
        """
        Whether `holder` has `card` according to everything recorded so far.

        Returns:
            Truth.TRUE, Truth.FALSE or Truth.UNKNOWN.

        Raises:
            InvalidIdentifier: If the holder or the card is unknown.
        """
        return self.solver.test_literal(self.encoder.encode(holder, card))

    @staticmethod
    def query_string(result: int) -> str:
        if result == Truth.TRUE:
            return "Y"
        elif result == Truth.FALSE:
            return "n"
        else:
            return "-"

    def is_consistent(self) -> bool:
        """True if the recorded events admit at least one deal of the cards."""
        return self.solver.check_assumptions(())

    def is_possible(self, facts: Sequence[Tuple[HolderRef, str, bool]]) -> bool:
        """
        Check whether several facts can hold at the same time.

        Args:
            facts: (holder, card, has_card) triples assumed together.

        Returns:
            True if the knowledge base plus the facts is satisfiable.
        """
        literals = [self.encoder.literal(holder, card, value) for holder, card, value in facts]
        return self.solver.check_assumptions(literals)

    def knowledge(self) -> Dict[str, Dict[str, int]]:
        """Query every (card, holder) pair: {card: {holder name: Truth value}}."""
        return {
            card: {holder.name: self.query(holder, card) for holder in self.encoder.holders}
            for card in self.encoder.cards
        }

    def solution(self) -> Dict[str, Optional[str]]:
        """Case-file card of each category when it is known, else None."""
        found = {}
        for category, cards in self.config.categories().items():
            found[category] = None
            for card in cards:
                if self.query(self.encoder.case_file, card) == Truth.TRUE:
                    found[category] = card
                    break
        return found
