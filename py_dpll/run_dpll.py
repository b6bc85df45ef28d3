# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Solve a DIMACS CNF file with the Python DPLL engine.

Example:
    python -m py_dpll.run_dpll -i ./problem.cnf -o ./output/result.txt --value-ordering

Exit codes follow MiniSat: 10 for SAT, 20 for UNSAT.
"""
import sys
import time
import psutil
import argparse

from cnf_utils.utils import read_cnf_file
from py_dpll.dpll import DPLLSolver


def load_dimacs(filename: str, S: DPLLSolver) -> int:
    """
    Read a DIMACS file into the permanent clauses of a solver.

    Returns:
        Number of clauses loaded.
    """
    cnf_formula = read_cnf_file(filename)
    for clause in cnf_formula.clauses:
        if not clause:
            raise ValueError(f"{filename}: empty clause in input.")
        S.add_clause(clause)
    return len(cnf_formula.clauses)


def print_stats(S: DPLLSolver, start_time: float) -> None:
    cpu_time = time.process_time() - start_time

    process = psutil.Process()
    mem_used = process.memory_info().rss / (1024 * 1024)  # in MB

    decisions_per_sec = S.decisions / cpu_time if cpu_time > 0 else 0
    propagations_per_sec = S.propagations / cpu_time if cpu_time > 0 else 0

    print("decisions             : {:<14} ({:.0f} /sec)".format(S.decisions, decisions_per_sec))
    print("propagations          : {:<14} ({:.0f} /sec)".format(S.propagations, propagations_per_sec))
    print("pure literals         : {:<14}".format(S.pure_assignments))
    print("conflicts             : {:<14}".format(S.conflicts))
    print("Memory used           : {:.2f} MB".format(mem_used))
    print("CPU time              : {:.3f} s".format(cpu_time))


def write_result(output_file: str, sat: bool, S: DPLLSolver) -> None:
    if output_file == '-':
        rf = sys.stdout
    else:
        rf = open(output_file, 'w')
    try:
        if not sat:
            rf.write("UNSAT\n")
            return
        rf.write("SAT\n")
        # Symbols left unassigned by the search are free; report them false.
        model = []
        for v in range(1, S.max_var() + 1):
            model.append(str(v) if S.model.get(v, False) else str(-v))
        rf.write(" ".join(model) + " 0\n")
    finally:
        if rf is not sys.stdout:
            rf.close()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve a DIMACS CNF with the python DPLL engine."
    )
    parser.add_argument(
        "-i", "--input_file", required=True,
        help="Path to input CNF file (.cnf or .cnf.gz)."
    )
    parser.add_argument(
        "-o", "--output_file", default=None,
        help="Path to write result (SAT/UNSAT + model). Use '-' for stdout."
    )
    parser.add_argument(
        "--value-ordering", action="store_true",
        help="Try the more frequent value of each branching symbol first."
    )
    parser.add_argument("-v", "--verbosity", type=int, default=0)
    return parser


def main():
    args = build_arg_parser().parse_args()

    start_time = time.process_time()

    S = DPLLSolver(use_value_ordering=args.value_ordering)
    S.verbosity = args.verbosity
    n_clauses = load_dimacs(args.input_file, S)
    print(f"Loaded {n_clauses} clauses over {S.max_var()} variables.")

    sat = S.make_query()

    print_stats(S, start_time)
    print("SATISFIABLE" if sat else "UNSATISFIABLE")
    if args.output_file:
        write_result(args.output_file, sat, S)
    sys.exit(10 if sat else 20)


if __name__ == "__main__":
    main()
