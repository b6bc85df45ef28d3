# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
DPLL satisfiability engine.

Backtracking search with pure-literal elimination, unit propagation and an
optional value ordering heuristic, following the DPLL procedure of Russell and
Norvig (Figure 7.17). The partial model is a single dict; every assignment is
pushed on a trail, and a failed branch is undone with `cancelUntil`, so the
alternatives of a decision never share assignments.
"""
import sys

from typing import Dict, List, Optional, Sequence, Tuple

from py_dpll.sat_solver import Clause, SATSolver


# (clause, literals of the clause that are still unassigned)
PendingClause = Tuple[Clause, List[int]]

_MIXED = object()


class DPLLSolver(SATSolver):
    """
    Recursive DPLL solver over the permanent and query clauses.

    Attributes:
        use_value_ordering (bool): Try first the value whose literal occurs more
            often in the pending clauses instead of always True first.
        model (dict): Assignment found by the last satisfiable query.
    """

    def __init__(self, use_value_ordering: bool = False):
        super().__init__()
        self.use_value_ordering = use_value_ordering

        self.model: Dict[int, bool] = {}
        self.trail: List[int] = []
        self.decision_level = 0

        self.decisions = 0
        self.propagations = 0
        self.pure_assignments = 0
        self.conflicts = 0

    def reset_stats(self) -> None:
        self.queries = 0
        self.decisions = 0
        self.propagations = 0
        self.pure_assignments = 0
        self.conflicts = 0

    def stats(self) -> Dict[str, int]:
        return {
            'queries': self.queries,
            'decisions': self.decisions,
            'propagations': self.propagations,
            'pure_assignments': self.pure_assignments,
            'conflicts': self.conflicts,
        }

    def make_query(self) -> bool:
        clauses = self.all_clauses()
        self.queries += 1
        self.model = {}
        self.trail = []
        self.decision_level = 0

        # One stack frame per decision at most.
        needed = self.max_var() + 100
        if sys.getrecursionlimit() < needed:
            sys.setrecursionlimit(needed)

        sat = self.search(clauses)
        if self.verbosity >= 1:
            print("query {}: {} ({} clauses, {} decisions, {} propagations, {} conflicts)".format(
                self.queries, "SAT" if sat else "UNSAT", len(clauses),
                self.decisions, self.propagations, self.conflicts))
        return sat

    def assign(self, var: int, value: bool, kind: str) -> None:
        self.model[var] = value
        self.trail.append(var)
        if self.verbosity >= 2:
            lit = var if value else -var
            if kind == "D":
                print("D {} L {} ".format(lit, self.decision_level), end='')
            else:
                print("{} {} ".format(kind, lit), end='')

    def cancelUntil(self, mark: int) -> None:
        for var in self.trail[mark:]:
            del self.model[var]
        del self.trail[mark:]

    def evaluate(self, clauses: Sequence[Clause]) -> Tuple[bool, List[PendingClause]]:
        """
        Classify clauses under the current model.

        Satisfied clauses are dropped; the others are returned with their
        unassigned literals.

        Args:
            clauses: Clauses not yet satisfied on this branch.

        Returns:
            (violated, pending): violated is True as soon as one clause has all
            its literals false; pending lists the clauses that are neither
            satisfied nor violated.
        """
        model = self.model
        pending = []
        for clause in clauses:
            free = []
            satisfied = False
            for lit in clause:
                val = model.get(lit if lit > 0 else -lit)
                if val is None:
                    free.append(lit)
                elif val == (lit > 0):
                    satisfied = True
                    break
            if satisfied:
                continue
            if not free:
                return True, []
            pending.append((clause, free))
        return False, pending

    @staticmethod
    def find_pure_symbol(pending: Sequence[PendingClause]) -> Optional[Tuple[int, bool]]:
        """
        Find an unassigned symbol that occurs with a single sign in the pending clauses.

        Returns:
            (symbol, value) for the first pure symbol in clause order, or None.
        """
        signs = {}
        for _, free in pending:
            for lit in free:
                var = lit if lit > 0 else -lit
                seen = signs.get(var)
                if seen is None:
                    signs[var] = lit > 0
                elif seen is not _MIXED and seen != (lit > 0):
                    signs[var] = _MIXED
        for var, value in signs.items():
            if value is not _MIXED:
                return var, value
        return None

    @staticmethod
    def find_unit_clause(pending: Sequence[PendingClause]) -> Optional[Tuple[int, bool]]:
        """Return (symbol, value) forced by the first unit clause, or None."""
        for _, free in pending:
            if len(free) == 1:
                lit = free[0]
                return (lit, True) if lit > 0 else (-lit, False)
        return None

    @staticmethod
    def choose_symbol(pending: Sequence[PendingClause]) -> int:
        return min(abs(lit) for _, free in pending for lit in free)

    @staticmethod
    def true_value_is_more_frequent(symbol: int, pending: Sequence[PendingClause]) -> bool:
        count_true = 0
        count_false = 0
        for _, free in pending:
            for lit in free:
                if lit == symbol:
                    count_true += 1
                elif lit == -symbol:
                    count_false += 1
        return count_true >= count_false

    def search(self, clauses: Sequence[Clause]) -> bool:
        """
        Decide satisfiability of `clauses` under the current partial model.

        Pure symbols and unit clauses are assigned in place before branching.
        On return False the caller restores the model with `cancelUntil`.
        """
        while True:
            violated, pending = self.evaluate(clauses)
            if violated:
                self.conflicts += 1
                return False
            if not pending:
                return True
            clauses = [clause for clause, _ in pending]

            pure = self.find_pure_symbol(pending)
            if pure is not None:
                self.pure_assignments += 1
                self.assign(pure[0], pure[1], "P")
                continue

            unit = self.find_unit_clause(pending)
            if unit is not None:
                self.propagations += 1
                self.assign(unit[0], unit[1], "A")
                continue

            symbol = self.choose_symbol(pending)
            first = True
            if self.use_value_ordering:
                first = self.true_value_is_more_frequent(symbol, pending)

            mark = len(self.trail)
            self.decision_level += 1
            for value in (first, not first):
                self.decisions += 1
                self.assign(symbol, value, "D")
                if self.search(clauses):
                    self.decision_level -= 1
                    return True
                self.cancelUntil(mark)
            self.decision_level -= 1
            return False
