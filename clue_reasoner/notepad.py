# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Detective notepad: one row per card, one column per holder.

Cells read "Y" (has the card), "n" (does not) or "-" (unknown).
"""
import sys

from typing import List, TextIO

from clue_reasoner.clue_reasoner import ClueReasoner


def notepad_rows(reasoner: ClueReasoner) -> List[List[str]]:
    """Header row followed by one row per card."""
    holders = reasoner.encoder.holders
    rows = [[""] + [holder.name for holder in holders]]
    for card in reasoner.encoder.cards:
        row = [card]
        for holder in holders:
            row.append(reasoner.query_string(reasoner.query(holder, card)))
        rows.append(row)
    return rows


def format_notepad(reasoner: ClueReasoner) -> str:
    return "\n".join("\t".join(row) for row in notepad_rows(reasoner)) + "\n"


def print_notepad(reasoner: ClueReasoner, out: TextIO = None) -> None:
    out = out if out is not None else sys.stdout
    out.write(format_notepad(reasoner))
