# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Compare satisfiability backends on the recorded Clue games.

Each backend replays each game a number of times; one run is timed from a
complete game state to a rendered notepad (two entailment checks per cell).
Per-run records are written to JSON and mean/median times are printed.

Example:
    python -m benchmark.run_benchmark --games 1 2 3 --repeats 20 \
        --backends dpll dpll-ordered pysat --save-path ./output/benchmark.json
"""
import argparse
import time
from typing import Dict, List

import numpy as np
from tqdm import tqdm

from benchmark.clue_games import GAMES, play_game
from clue_reasoner.game_config import GameConfig
from clue_reasoner.notepad import format_notepad
from cnf_utils.utils import save_dicts_to_json
from py_dpll.dpll import DPLLSolver
from py_dpll.external_solver import ExternalProcessSolver
from py_dpll.pysat_solver import PySATSolver
from py_dpll.sat_solver import SATSolver


BACKENDS = ["dpll", "dpll-ordered", "pysat", "zchaff"]

BACKEND_LABELS = {
    "dpll": "DPLL w/o strat",
    "dpll-ordered": "DPLL with strat",
    "pysat": "PySAT",
    "zchaff": "ZChaff",
}


def make_solver(backend: str, args: argparse.Namespace) -> SATSolver:
    """
    Create a fresh backend by name.

    Args:
        backend: One of BACKENDS.
        args: Parsed arguments (solver name and executable path).
    """
    if backend == "dpll":
        return DPLLSolver(use_value_ordering=False)
    if backend == "dpll-ordered":
        return DPLLSolver(use_value_ordering=True)
    if backend == "pysat":
        return PySATSolver(name=args.pysat_name)
    if backend == "zchaff":
        return ExternalProcessSolver(command=(args.zchaff,), timeout=args.timeout)
    raise ValueError(f"Unknown backend {backend!r}")


def run_once(backend: str, game_number: int, config: GameConfig, args: argparse.Namespace) -> Dict:
    """
    Replay one game on a fresh backend and time the notepad.

    Returns:
        Record dict with backend, game, replay and notepad times, and the
        number of satisfiability checks.
    """
    solver = make_solver(backend, args)
    t0 = time.perf_counter()
    reasoner = play_game(solver, game_number, config)
    t1 = time.perf_counter()
    notepad = format_notepad(reasoner)
    t2 = time.perf_counter()

    record = {
        'backend': backend,
        'game': game_number,
        'n_v': solver.max_var(),
        'n_c': len(solver.clauses),
        'queries': solver.queries,
        'time_ms': {
            'replay': (t1 - t0) * 1000.0,
            'notepad': (t2 - t1) * 1000.0,
        },
        'notepad': notepad,
    }
    if isinstance(solver, DPLLSolver):
        record['dpll_stats'] = solver.stats()
    return record


def run_benchmark(backends: List[str], games: List[int], repeats: int,
                  config: GameConfig, args: argparse.Namespace) -> List[Dict]:
    records = []
    for backend in backends:
        for game_number in games:
            desc = f"[{backend}] game {game_number}"
            for _ in tqdm(range(repeats), desc=desc):
                records.append(run_once(backend, game_number, config, args))
    return records


def summarize(records: List[Dict]) -> Dict[str, Dict[int, Dict[str, float]]]:
    """
    Mean and median notepad time per backend and game.

    Returns:
        {backend: {game: {'mean_ms', 'median_ms', 'runs'}}}
    """
    times: Dict[str, Dict[int, List[float]]] = {}
    for rec in records:
        times.setdefault(rec['backend'], {}).setdefault(rec['game'], []).append(rec['time_ms']['notepad'])

    summary = {}
    for backend, per_game in times.items():
        summary[backend] = {}
        for game_number, values in per_game.items():
            arr = np.array(values, dtype=float)
            summary[backend][game_number] = {
                'mean_ms': float(np.mean(arr)),
                'median_ms': float(np.median(arr)),
                'runs': len(values),
            }
    return summary


def print_summary(summary: Dict[str, Dict[int, Dict[str, float]]], games: List[int]) -> None:
    print()
    print("\t\t" + "\t".join(f"Game {g}" for g in games))
    for backend, per_game in summary.items():
        label = BACKEND_LABELS.get(backend, backend)
        cells = [f"{per_game[g]['mean_ms']:.1f}" if g in per_game else "-" for g in games]
        print(label + ("\t" if len(label) >= 8 else "\t\t") + "\t".join(cells))


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Time satisfiability backends on the recorded Clue games."
    )
    p.add_argument("--games", type=int, nargs="+", default=sorted(GAMES),
                   help="Game numbers to replay.")
    p.add_argument("--repeats", type=int, default=20,
                   help="Runs per backend and game; the reported time is the mean.")
    p.add_argument("--backends", nargs="+", choices=BACKENDS, default=["dpll", "dpll-ordered", "pysat"],
                   help="Backends to compare.")
    p.add_argument("--pysat-name", type=str, default="m22",
                   help="PySAT solver name for the pysat backend.")
    p.add_argument("--zchaff", type=str, default="./zchaff",
                   help="Path to the zchaff executable for the zchaff backend.")
    p.add_argument("--timeout", type=float, default=None,
                   help="Seconds allowed per zchaff run.")
    p.add_argument("--config", type=str, default=None,
                   help="Game config JSON; the classic board by default.")
    p.add_argument("--save-path", type=str, default="./output/clue_benchmark.json",
                   help="JSON file for the per-run records.")
    p.add_argument("--print-notepad", action="store_true",
                   help="Print the final notepad of each game once.")
    return p


def main():
    parser = build_arg_parser()
    args = parser.parse_args()

    for g in args.games:
        if g not in GAMES:
            parser.error(f"--games accepts {sorted(GAMES)}, got {g}")
    if args.repeats < 1:
        parser.error("--repeats must be at least 1")

    config = GameConfig.from_json(args.config) if args.config else GameConfig.classic()
    print(args)

    records = run_benchmark(args.backends, args.games, args.repeats, config, args)

    if args.print_notepad:
        shown = set()
        for rec in records:
            if rec['game'] not in shown:
                shown.add(rec['game'])
                print(f"\nGame {rec['game']} ({rec['backend']}):")
                print(rec['notepad'], end='')

    save_dicts_to_json(records, args.save_path)
    print(f'Results saved to {args.save_path}')

    print_summary(summarize(records), args.games)


if __name__ == '__main__':
    main()
