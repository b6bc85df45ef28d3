# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Satisfiability backend backed by a compiled PySAT solver.
"""
from pysat.solvers import Solver

from py_dpll.sat_solver import SATSolver


class PySATSolver(SATSolver):
    """
    Solve each query with a fresh PySAT solver instance.

    Args:
        name: PySAT solver name, e.g. 'm22' (MiniSat 2.2) or 'cd195' (CaDiCaL).
    """

    def __init__(self, name: str = 'm22'):
        super().__init__()
        self.name = name

    def make_query(self) -> bool:
        self.queries += 1
        clauses = [list(clause) for clause in self.all_clauses()]
        with Solver(name=self.name, bootstrap_with=clauses) as solver:
            sat = solver.solve()
        if self.verbosity >= 1:
            print(f"query {self.queries}: {'SAT' if sat else 'UNSAT'} ({len(clauses)} clauses)")
        return sat
