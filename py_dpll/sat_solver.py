# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Clause store and entailment queries shared by every satisfiability backend.

A backend keeps two clause lists: the permanent knowledge base, which only
grows, and the query clauses, which are replaced before each check and cleared
after it. Subclasses only implement `make_query`, which decides whether the
union of both lists is satisfiable.
"""
from typing import Iterable, List, Sequence, Tuple


Clause = Tuple[int, ...]


class Truth:
    """Answers of an entailment query."""
    FALSE = -1
    UNKNOWN = 0
    TRUE = 1


class BackendUnavailable(RuntimeError):
    """Raised when a backend cannot produce a SAT/UNSAT verdict."""


def check_clause(clause: Iterable[int]) -> Clause:
    """
    Validate a clause and return it as an immutable tuple.

    Args:
        clause: Signed, non-zero integer literals.

    Returns:
        The clause as a tuple.

    Raises:
        ValueError: If the clause is empty or holds a zero or non-integer literal.
    """
    lits = tuple(clause)
    if not lits:
        raise ValueError("Empty clause; a clause needs at least one literal.")
    for lit in lits:
        if isinstance(lit, bool) or not isinstance(lit, int):
            raise ValueError(f"Literal {lit!r} is not an integer.")
        if lit == 0:
            raise ValueError("Literal 0 is reserved as the DIMACS clause terminator.")
    return lits


class SATSolver:
    """
    Base class for satisfiability backends.
    """

    def __init__(self):
        self.clauses: List[Clause] = []
        self.query_clauses: List[Clause] = []
        self.verbosity = 0
        self.queries = 0

    def add_clause(self, clause: Iterable[int]) -> None:
        self.clauses.append(check_clause(clause))

    def add_clauses(self, clauses: Iterable[Iterable[int]]) -> None:
        for clause in clauses:
            self.add_clause(clause)

    def clear_clauses(self) -> None:
        self.clauses.clear()

    def add_query_clause(self, clause: Iterable[int]) -> None:
        self.query_clauses.append(check_clause(clause))

    def clear_query_clauses(self) -> None:
        self.query_clauses.clear()

    def all_clauses(self) -> List[Clause]:
        return self.clauses + self.query_clauses

    def max_var(self) -> int:
        return max((abs(lit) for clause in self.all_clauses() for lit in clause), default=0)

    def make_query(self) -> bool:
        """Return True if the permanent and query clauses are jointly satisfiable."""
        raise NotImplementedError

    def test_literal(self, literal: int) -> int:
        """
        Decide whether a literal is entailed, refuted or undetermined.

        The literal is FALSE when adding it makes the knowledge base
        unsatisfiable, TRUE when adding its negation does, and UNKNOWN when
        both extensions are satisfiable.

        Args:
            literal: Signed variable id.

        Returns:
            One of Truth.TRUE, Truth.FALSE, Truth.UNKNOWN.
        """
        result = Truth.UNKNOWN
        self.clear_query_clauses()
        try:
            self.add_query_clause((literal,))
            if not self.make_query():
                result = Truth.FALSE
            else:
                self.clear_query_clauses()
                self.add_query_clause((-literal,))
                if not self.make_query():
                    result = Truth.TRUE
        finally:
            self.clear_query_clauses()
        if self.verbosity >= 1:
            print(f"test_literal({literal}) -> {truth_name(result)}")
        return result

    def check_assumptions(self, literals: Sequence[int]) -> bool:
        """
        Check whether a conjunction of literals is consistent with the knowledge base.

        Args:
            literals: Literals assumed true together.

        Returns:
            True if the knowledge base plus the assumptions is satisfiable.
        """
        self.clear_query_clauses()
        try:
            for lit in literals:
                self.add_query_clause((lit,))
            return self.make_query()
        finally:
            self.clear_query_clauses()


def truth_name(result: int) -> str:
    if result == Truth.TRUE:
        return "TRUE"
    if result == Truth.FALSE:
        return "FALSE"
    return "UNKNOWN"
