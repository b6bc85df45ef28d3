# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Variable scheme for the Clue knowledge base.

Variable `holder_index * num_cards + card_index + 1` means "this holder has
this card". Players take indices 0..num_players-1 in seating order and the
case file takes index num_players, where the variable reads "this card is
part of the solution".
"""
from typing import Dict, Tuple, Union

from clue_reasoner.errors import InvalidIdentifier
from clue_reasoner.game_config import CaseFile, GameConfig, Holder, Player


class VariableEncoder:
    """
    Bijection between (holder, card) pairs and variable ids 1..num_variables.
    """

    def __init__(self, config: GameConfig):
        self.config = config
        self.case_file = CaseFile(config.case_file)
        self.players = tuple(Player(name, seat) for seat, name in enumerate(config.players))
        self.holders: Tuple[Holder, ...] = self.players + (self.case_file,)
        self.cards = config.cards

        self._holder_by_name: Dict[str, Holder] = {h.name: h for h in self.holders}
        self._card_index: Dict[str, int] = {c: i for i, c in enumerate(self.cards)}

    @property
    def num_cards(self) -> int:
        return len(self.cards)

    @property
    def num_variables(self) -> int:
        return len(self.holders) * self.num_cards

    def holder(self, name: Union[str, Holder]) -> Holder:
        """Resolve a holder name; Player and CaseFile values are checked and returned."""
        if isinstance(name, (Player, CaseFile)):
            if self._holder_by_name.get(name.name) != name:
                raise InvalidIdentifier(f"Holder {name!r} is not part of this game.")
            return name
        try:
            return self._holder_by_name[name]
        except (KeyError, TypeError):
            raise InvalidIdentifier(f"Illegal holder: {name!r}") from None

    def player(self, name: Union[str, Holder]) -> Player:
        """Resolve a name that must designate a seated player."""
        holder = self.holder(name)
        if not isinstance(holder, Player):
            raise InvalidIdentifier(f"{holder.name!r} is the case file, not a player.")
        return holder

    def holder_index(self, holder: Holder) -> int:
        if isinstance(holder, CaseFile):
            return len(self.players)
        return holder.seat

    def card_index(self, card: str) -> int:
        try:
            return self._card_index[card]
        except (KeyError, TypeError):
            raise InvalidIdentifier(f"Illegal card: {card!r}") from None

    def has_card(self, card: str) -> bool:
        return card in self._card_index

    def encode(self, holder: Union[str, Holder], card: str) -> int:
        """
        Variable id of "holder has card".

        Raises:
            InvalidIdentifier: If the holder or the card is unknown.
        """
        holder_index = self.holder_index(self.holder(holder))
        return holder_index * self.num_cards + self.card_index(card) + 1

    def literal(self, holder: Union[str, Holder], card: str, value: bool = True) -> int:
        var = self.encode(holder, card)
        return var if value else -var

    def decode(self, var: int) -> Tuple[Holder, str]:
        """
        Inverse of `encode`.

        Raises:
            InvalidIdentifier: If `var` is outside 1..num_variables.
        """
        if isinstance(var, bool) or not isinstance(var, int) or not 1 <= var <= self.num_variables:
            raise InvalidIdentifier(f"Variable {var!r} is outside 1..{self.num_variables}.")
        holder_index, card_index = divmod(var - 1, self.num_cards)
        return self.holders[holder_index], self.cards[card_index]
