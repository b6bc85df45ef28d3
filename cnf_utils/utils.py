# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
This file includes some general help functions for CNF files and reports.
"""
import os
import json
import subprocess

from typing import List, Optional, Sequence
from pysat.formula import CNF


def clauses_to_CNF_class(clauses: Sequence[Sequence[int]]) -> CNF:
    """
    Build a CNF object from integer clauses.

    Args:
        clauses: Clauses as sequences of signed integers.

    Returns:
        CNF object holding a copy of the clauses.
    """
    return CNF(from_clauses=[list(clause) for clause in clauses])


def write_temp_cnf_file(cnf_formula: CNF, filename: str = './temp_problem.cnf') -> None:
    cnf_formula.to_file(filename)


def read_cnf_file(filename: str) -> CNF:
    """Read a DIMACS file (plain or compressed) into a CNF object."""
    return CNF(from_file=filename)


def save_dicts_to_json(results: list, output_filename: str) -> None:
    """
    Saves the results to a JSON file.

    Args:
        results (list): The results to save.
        output_filename (str): The filename for the output JSON file.
    """
    parent = os.path.dirname(os.path.abspath(output_filename))
    os.makedirs(parent, exist_ok=True)
    with open(output_filename, 'w') as json_file:
        json.dump(results, json_file, indent=4)


def run_solver_process(command: Sequence[str], cnf_filename: str,
                       timeout: Optional[float] = None) -> subprocess.CompletedProcess:
    """
    Runs an external SAT solver on the given CNF file and captures its output.

    Args:
        command: Executable and leading arguments, e.g. ('./zchaff',).
        cnf_filename: Path to the CNF file to process.
        timeout: Seconds before the process is killed, or None.

    Returns:
        The completed process with text stdout and stderr.

    Raises:
        OSError: If the executable cannot be launched.
        subprocess.TimeoutExpired: If the timeout elapses.
    """
    args: List[str] = list(command) + [cnf_filename]
    return subprocess.run(
        args,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        timeout=timeout,
    )
