# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Unit tests for the Clue reasoner: deductions after each kind of event,
consistency checks and the notepad.
"""
import io
import unittest

from clue_reasoner.clue_reasoner import ClueReasoner
from clue_reasoner.errors import InvalidIdentifier
from clue_reasoner.game_config import GameConfig
from clue_reasoner.notepad import format_notepad, notepad_rows, print_notepad
from py_dpll.dpll import DPLLSolver
from py_dpll.pysat_solver import PySATSolver
from py_dpll.sat_solver import Truth


def small_config() -> GameConfig:
    return GameConfig(players=("p1", "p2", "p3"),
                      suspects=("s1", "s2", "s3"),
                      weapons=("w1", "w2", "w3"),
                      rooms=("r1", "r2", "r3"))


class ReasonerTestCase(unittest.TestCase):
    use_value_ordering = False

    def setUp(self):
        self.reasoner = ClueReasoner(DPLLSolver(self.use_value_ordering), small_config())

    def assertQueries(self, expected):
        for (holder, card), truth in expected.items():
            with self.subTest(holder=holder, card=card):
                self.assertEqual(self.reasoner.query(holder, card), truth)


class TestFreshGame(ReasonerTestCase):
    def test_everything_unknown(self):
        self.assertTrue(self.reasoner.is_consistent())
        for card, row in self.reasoner.knowledge().items():
            for holder, truth in row.items():
                self.assertEqual(truth, Truth.UNKNOWN, (holder, card))
        self.assertEqual(self.reasoner.solution(), {"suspect": None, "weapon": None, "room": None})

    def test_initial_clauses_only_once(self):
        with self.assertRaises(RuntimeError):
            self.reasoner.add_initial_clauses()

    def test_category_exclusivity(self):
        self.assertFalse(self.reasoner.is_possible([("cf", "s1", True), ("cf", "s2", True)]))
        self.assertTrue(self.reasoner.is_possible([("cf", "s1", True), ("cf", "w2", True)]))
        self.assertFalse(self.reasoner.is_possible([("p1", "r1", True), ("p2", "r1", True)]))
        self.assertFalse(self.reasoner.is_possible(
            [("cf", "w1", False), ("cf", "w2", False), ("cf", "w3", False)]))

    def test_invalid_queries(self):
        with self.assertRaises(InvalidIdentifier):
            self.reasoner.query("zz", "s1")
        with self.assertRaises(InvalidIdentifier):
            self.reasoner.query("p1", "zz")

    def test_query_string(self):
        self.assertEqual(ClueReasoner.query_string(Truth.TRUE), "Y")
        self.assertEqual(ClueReasoner.query_string(Truth.FALSE), "n")
        self.assertEqual(ClueReasoner.query_string(Truth.UNKNOWN), "-")


class TestHands(ReasonerTestCase):
    def test_hand_is_exact(self):
        self.reasoner.hand("p1", ["s1", "w2", "r3"])
        self.assertQueries({
            ("p1", "s1"): Truth.TRUE,
            ("p1", "s2"): Truth.FALSE,
            ("p1", "w1"): Truth.FALSE,
            ("p2", "s1"): Truth.FALSE,
            ("cf", "s1"): Truth.FALSE,
            ("cf", "s2"): Truth.UNKNOWN,
        })

    def test_two_hands_reveal_the_case_file(self):
        self.reasoner.hand("p1", ["s1", "w1", "r1"])
        self.reasoner.hand("p2", ["s2", "w2", "r2"])
        self.assertEqual(self.reasoner.solution(), {"suspect": "s3", "weapon": "w3", "room": "r3"})
        self.assertEqual(self.reasoner.query("p3", "s3"), Truth.FALSE)

    def test_repeated_event_changes_nothing(self):
        other = ClueReasoner(DPLLSolver(), small_config())
        for reasoner in (self.reasoner, other):
            reasoner.hand("p1", ["s1", "w1"])
            reasoner.suggest("p2", "s2", "w2", "r2", "p3")
        other.hand("p1", ["s1", "w1"])
        other.suggest("p2", "s2", "w2", "r2", "p3")
        self.assertEqual(self.reasoner.knowledge(), other.knowledge())

    def test_contradicting_hands(self):
        self.reasoner.hand("p1", ["s1"])
        self.reasoner.hand("p2", ["s1"])
        self.assertFalse(self.reasoner.is_consistent())


class TestSuggestions(ReasonerTestCase):
    def test_shown_card(self):
        self.reasoner.suggest("p1", "s1", "w1", "r1", "p3", "s1")
        self.assertQueries({
            ("p2", "s1"): Truth.FALSE,
            ("p2", "w1"): Truth.FALSE,
            ("p2", "r1"): Truth.FALSE,
            ("p3", "s1"): Truth.TRUE,
            ("cf", "s1"): Truth.FALSE,
            ("p1", "s1"): Truth.FALSE,
            ("p3", "w1"): Truth.UNKNOWN,
        })

    def test_wraparound(self):
        self.reasoner.suggest("p3", "s1", "w1", "r1", "p2", "w1")
        self.assertQueries({
            ("p1", "s1"): Truth.FALSE,
            ("p1", "w1"): Truth.FALSE,
            ("p1", "r1"): Truth.FALSE,
            ("p2", "w1"): Truth.TRUE,
            ("p3", "s1"): Truth.UNKNOWN,
        })

    def test_nobody_refutes(self):
        self.reasoner.suggest("p2", "s1", "w1", "r1")
        self.assertQueries({
            ("p1", "s1"): Truth.FALSE,
            ("p3", "w1"): Truth.FALSE,
            ("p3", "r1"): Truth.FALSE,
            ("p2", "s1"): Truth.UNKNOWN,
            ("cf", "s1"): Truth.UNKNOWN,
        })

    def test_unseen_refutation(self):
        self.reasoner.suggest("p1", "s1", "w1", "r1", "p2")
        self.assertEqual(self.reasoner.query("p2", "s1"), Truth.UNKNOWN)
        self.assertFalse(self.reasoner.is_possible(
            [("p2", "s1", False), ("p2", "w1", False), ("p2", "r1", False)]))
        self.assertTrue(self.reasoner.is_possible([("p2", "s1", False), ("p2", "w1", False)]))

    def test_unseen_refutation_resolved_by_hand(self):
        self.reasoner.suggest("p1", "s1", "w1", "r1", "p3")
        self.reasoner.suggest("p1", "s1", "w2", "r2", "p2", "w2")
        self.reasoner.hand("p1", ["s2", "w3"])
        # p2 passed on the first suggestion, so p3 holds one of s1, w1, r1.
        self.assertQueries({
            ("p2", "s1"): Truth.FALSE,
            ("p2", "w1"): Truth.FALSE,
            ("p2", "w2"): Truth.TRUE,
            ("p3", "w1"): Truth.UNKNOWN,
        })

    def test_seating_order(self):
        reasoner = ClueReasoner(DPLLSolver(), small_config().with_seating(("p1", "p3", "p2")))
        reasoner.suggest("p1", "s1", "w1", "r1", "p2", "r1")
        self.assertEqual(reasoner.query("p3", "s1"), Truth.FALSE)
        self.assertEqual(reasoner.query("p2", "r1"), Truth.TRUE)


class TestAccusations(ReasonerTestCase):
    def test_incorrect_accusation(self):
        self.reasoner.accuse("p1", "s1", "w1", "r1", False)
        self.assertFalse(self.reasoner.is_possible([("cf", "s1", True), ("cf", "w1", True), ("cf", "r1", True)]))
        self.assertEqual(self.reasoner.query("cf", "s1"), Truth.UNKNOWN)

    def test_incorrect_accusation_narrows_last_card(self):
        self.reasoner.hand("p1", ["s2", "s3", "w2", "w3"])
        self.reasoner.accuse("p2", "s1", "w1", "r1", False)
        self.assertEqual(self.reasoner.query("cf", "r1"), Truth.FALSE)

    def test_correct_accusation(self):
        self.reasoner.accuse("p1", "s1", "w1", "r1", True)
        self.assertQueries({
            ("cf", "s1"): Truth.TRUE,
            ("cf", "s2"): Truth.FALSE,
            ("p1", "s1"): Truth.FALSE,
        })
        self.assertEqual(self.reasoner.solution(), {"suspect": "s1", "weapon": "w1", "room": "r1"})


class TestValueOrdering(TestSuggestions):
    use_value_ordering = True


class TestPySATBackend(TestSuggestions):
    def setUp(self):
        self.reasoner = ClueReasoner(PySATSolver(), small_config())


class TestNotepad(unittest.TestCase):
    def setUp(self):
        self.reasoner = ClueReasoner(DPLLSolver(), small_config())
        self.reasoner.hand("p1", ["s1", "w1", "r1"])

    def test_rows(self):
        rows = notepad_rows(self.reasoner)
        self.assertEqual(rows[0], ["", "p1", "p2", "p3", "cf"])
        self.assertEqual(len(rows), 10)
        self.assertEqual(rows[1], ["s1", "Y", "n", "n", "n"])
        self.assertEqual(rows[5], ["w2", "n", "-", "-", "-"])

    def test_format(self):
        text = format_notepad(self.reasoner)
        lines = text.split("\n")
        self.assertEqual(lines[0], "\tp1\tp2\tp3\tcf")
        self.assertEqual(lines[1], "s1\tY\tn\tn\tn")
        self.assertTrue(text.endswith("\n"))

        out = io.StringIO()
        print_notepad(self.reasoner, out)
        self.assertEqual(out.getvalue(), text)


if __name__ == '__main__':
    unittest.main()
