# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Errors raised by the Clue encoding layer.
"""


class ClueError(ValueError):
    """Base class for caller errors in the encoding layer."""


class InvalidIdentifier(ClueError):
    """An unrecognized holder name, card name or variable id."""


class MalformedEvent(ClueError):
    """A hand, suggestion or accusation that cannot happen in a legal game."""
