# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Unit test for the process-based and PySAT backends
to verify that they answer every query like the Python DPLL engine.

The native solver is replaced by a small script that reads the DIMACS file
with PySAT and prints the verdict in zChaff's "RESULT:" format.
"""
import os
import sys
import tempfile
import textwrap
import unittest

from cnf_utils.utils import clauses_to_CNF_class, read_cnf_file, write_temp_cnf_file
from py_dpll.dpll import DPLLSolver
from py_dpll.external_solver import ExternalProcessSolver
from py_dpll.pysat_solver import PySATSolver
from py_dpll.sat_solver import BackendUnavailable, Truth

FAKE_ZCHAFF = textwrap.dedent("""
    import sys
    from pysat.formula import CNF
    from pysat.solvers import Solver

    cnf = CNF(from_file=sys.argv[1])
    with Solver(name="m22", bootstrap_with=cnf.clauses) as solver:
        sat = solver.solve()
    print("Z-Chaff Version: stand-in")
    print("RESULT:\\t" + ("SAT" if sat else "UNSAT"))
""")

LIAR_CLAUSES = [(1, 2, 3), (-1, -2), (-1, -3), (-2, -3), (-4, 2), (-2, 4), (-5, 2), (-2, 5),
                (-6, -3), (3, 6), (4, 5, 6), (-4, -5, -6)]


class TestCnfFiles(unittest.TestCase):
    def test_dimacs_layout(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "problem.cnf")
            write_temp_cnf_file(clauses_to_CNF_class([(1, -2), (2, 3)]), filename=path)
            with open(path) as f:
                lines = [line.strip() for line in f if line.strip()]
            self.assertEqual(lines, ["p cnf 3 2", "1 -2 0", "2 3 0"])
            self.assertEqual(read_cnf_file(path).clauses, [[1, -2], [2, 3]])


class TestExternalProcessSolver(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def write_script(self, name: str, source: str) -> tuple:
        path = os.path.join(self.tmp.name, name)
        with open(path, "w") as f:
            f.write(source)
        return (sys.executable, path)

    def test_agrees_with_dpll(self):
        solver = ExternalProcessSolver(command=self.write_script("zchaff.py", FAKE_ZCHAFF), timeout=60)
        reference = DPLLSolver()
        for s in (solver, reference):
            s.add_clauses(LIAR_CLAUSES)

        for literal in (1, -1, 2, 3, 4, 5, 6):
            with self.subTest(literal=literal):
                self.assertEqual(solver.test_literal(literal), reference.test_literal(literal))
        self.assertEqual(solver.query_clauses, [])
        self.assertGreater(solver.queries, 0)

    def test_unsat(self):
        solver = ExternalProcessSolver(command=self.write_script("zchaff.py", FAKE_ZCHAFF), timeout=60)
        solver.add_clauses([(1,), (-1,)])
        self.assertFalse(solver.make_query())

    def test_temporary_file_removed(self):
        solver = ExternalProcessSolver(command=self.write_script("zchaff.py", FAKE_ZCHAFF), timeout=60)
        solver.add_clause((1, 2))
        before = set(os.listdir(tempfile.gettempdir()))
        self.assertTrue(solver.make_query())
        after = set(os.listdir(tempfile.gettempdir()))
        self.assertFalse({name for name in after - before if name.endswith(".cnf")})

    def test_missing_executable(self):
        solver = ExternalProcessSolver(command=(os.path.join(self.tmp.name, "no_such_solver"),))
        solver.add_clause((1,))
        with self.assertRaises(BackendUnavailable):
            solver.make_query()
        self.assertEqual(solver.query_clauses, [])

    def test_bad_output(self):
        scripts = {
            "no token": "print('SATISFIABLE')\n",
            "unknown verdict": "print('RESULT: MAYBE')\n",
            "non-zero exit": "import sys\nprint('RESULT: SAT')\nsys.exit(3)\n",
        }
        for name, source in scripts.items():
            with self.subTest(case=name):
                solver = ExternalProcessSolver(command=self.write_script("bad.py", source), timeout=60)
                solver.add_clause((1,))
                with self.assertRaises(BackendUnavailable):
                    solver.test_literal(1)
                self.assertEqual(solver.query_clauses, [])

    def test_parse_result(self):
        solver = ExternalProcessSolver()
        self.assertEqual(solver.parse_result("c stats\nRESULT:\tUNSAT\n"), "UNSAT")
        self.assertEqual(solver.parse_result("RESULT: SAT"), "SAT")
        with self.assertRaises(BackendUnavailable):
            solver.parse_result("RESULT:")


class TestPySATSolver(unittest.TestCase):
    def test_liar_puzzle(self):
        for name in ("m22", "g3"):
            with self.subTest(solver=name):
                solver = PySATSolver(name=name)
                solver.add_clauses(LIAR_CLAUSES)
                self.assertEqual(solver.test_literal(1), Truth.TRUE)
                self.assertEqual(solver.test_literal(3), Truth.FALSE)
                self.assertTrue(solver.check_assumptions([6]))
                self.assertFalse(solver.check_assumptions([2]))

    def test_empty_formula(self):
        self.assertTrue(PySATSolver().make_query())


if __name__ == '__main__':
    unittest.main()
