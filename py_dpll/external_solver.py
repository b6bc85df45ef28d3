# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Satisfiability backend that delegates to a native solver process.

The clauses are written to a temporary DIMACS file ("p cnf <vars> <clauses>"
followed by one zero-terminated clause per line) and the solver is run on it.
Its standard output must contain the token "RESULT:" followed by "SAT" or
"UNSAT", as zChaff prints it.
"""
import os
import subprocess
import tempfile

from typing import Optional, Sequence

from cnf_utils.utils import clauses_to_CNF_class, run_solver_process, write_temp_cnf_file
from py_dpll.sat_solver import BackendUnavailable, SATSolver


class ExternalProcessSolver(SATSolver):
    """
    Run a native solver once per query.

    Args:
        command: Executable and leading arguments; the CNF path is appended.
        result_token: Token that precedes the verdict in the solver output.
        timeout: Seconds allowed per solver run, or None for no limit.
    """

    def __init__(self, command: Sequence[str] = ("./zchaff",), result_token: str = "RESULT:",
                 timeout: Optional[float] = None):
        super().__init__()
        self.command = tuple(command)
        self.result_token = result_token
        self.timeout = timeout

    def make_query(self) -> bool:
        self.queries += 1
        cnf_formula = clauses_to_CNF_class(self.all_clauses())

        with tempfile.NamedTemporaryFile(mode="w+", suffix=".cnf", delete=False) as tmp:
            tmp_name = tmp.name
        try:
            write_temp_cnf_file(cnf_formula, filename=tmp_name)
            try:
                proc = run_solver_process(self.command, tmp_name, timeout=self.timeout)
            except OSError as e:
                raise BackendUnavailable(f"Cannot launch solver {self.command[0]!r}: {e}") from e
            except subprocess.TimeoutExpired as e:
                raise BackendUnavailable(f"Solver timed out after {self.timeout} s.") from e
        finally:
            os.unlink(tmp_name)

        if proc.returncode != 0:
            raise BackendUnavailable(
                f"Solver exited with code {proc.returncode}: {proc.stderr.strip()[:200]}")
        verdict = self.parse_result(proc.stdout)
        if self.verbosity >= 1:
            print(f"query {self.queries}: {verdict} ({len(cnf_formula.clauses)} clauses)")
        return verdict == "SAT"

    def parse_result(self, output: str) -> str:
        """
        Extract the verdict that follows the result token.

        Raises:
            BackendUnavailable: If the token is missing or the verdict is unknown.
        """
        _, found, rest = output.partition(self.result_token)
        if not found:
            raise BackendUnavailable(f"Solver output has no {self.result_token!r} token.")
        tokens = rest.split()
        verdict = tokens[0] if tokens else ""
        if verdict not in ("SAT", "UNSAT"):
            raise BackendUnavailable(f"Unexpected solver verdict {verdict!r}.")
        return verdict
