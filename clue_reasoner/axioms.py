# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Structural clauses that hold in every Clue game, whatever happens during play.
"""
from itertools import combinations
from typing import List

from clue_reasoner.encoding import VariableEncoder
from py_dpll.sat_solver import Clause


def existence_clauses(encoder: VariableEncoder) -> List[Clause]:
    """Each card is in at least one place (including the case file)."""
    return [
        tuple(encoder.encode(holder, card) for holder in encoder.holders)
        for card in encoder.cards
    ]


def uniqueness_clauses(encoder: VariableEncoder) -> List[Clause]:
    """If a card is in one place, it cannot be in another place."""
    clauses = []
    for card in encoder.cards:
        for h1, h2 in combinations(encoder.holders, 2):
            clauses.append((-encoder.encode(h1, card), -encoder.encode(h2, card)))
    return clauses


def category_completeness_clauses(encoder: VariableEncoder) -> List[Clause]:
    """At least one card of each category is in the case file."""
    cf = encoder.case_file
    return [
        tuple(encoder.encode(cf, card) for card in cards)
        for cards in encoder.config.categories().values()
    ]


def category_exclusivity_clauses(encoder: VariableEncoder) -> List[Clause]:
    """No two cards of one category are both in the case file."""
    cf = encoder.case_file
    clauses = []
    for cards in encoder.config.categories().values():
        for c1, c2 in combinations(cards, 2):
            clauses.append((-encoder.encode(cf, c1), -encoder.encode(cf, c2)))
    return clauses


def generate_axioms(encoder: VariableEncoder) -> List[Clause]:
    """
    All structural clauses of a game, in a fixed order.

    Args:
        encoder: Variable encoder built from the game configuration.

    Returns:
        Existence, uniqueness, category completeness and category exclusivity
        clauses.
    """
    return (existence_clauses(encoder)
            + uniqueness_clauses(encoder)
            + category_completeness_clauses(encoder)
            + category_exclusivity_clauses(encoder))
