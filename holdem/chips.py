from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .errors import InsufficientStack

# ChipLedger only moves chips between stacks, bets and the pot. Whether a move
# is legal in the betting order is decided by the caller.


@dataclass
class PlayerChips:
    stack: int
    bet: int = 0


class ChipLedger:
    def __init__(self, stacks: Sequence[int]) -> None:
        if any(stack < 0 for stack in stacks):
            raise ValueError("Stacks cannot be negative")
        self.players: List[PlayerChips] = [PlayerChips(stack=stack) for stack in stacks]
        self.pot = 0

    def stack(self, player: int) -> int:
        return self.players[player].stack

    def bet_of(self, player: int) -> int:
        return self.players[player].bet

    def stacks(self) -> List[int]:
        return [chips.stack for chips in self.players]

    def highest_bet(self) -> int:
        return max(chips.bet for chips in self.players)

    def total(self) -> int:
        return sum(chips.stack + chips.bet for chips in self.players) + self.pot

    def bet(self, player: int, amount: int) -> None:
        chips = self.players[player]
        if amount < 0:
            raise ValueError("Bet amount cannot be negative")
        if amount > chips.stack:
            raise InsufficientStack(f"Player {player} cannot bet {amount} with a stack of {chips.stack}")
        chips.stack -= amount
        chips.bet += amount

    def call(self, player: int) -> int:
        """Match the highest bet, going all-in when the stack falls short."""
        chips = self.players[player]
        amount = min(self.highest_bet() - chips.bet, chips.stack)
        self.bet(player, amount)
        return amount

    def collect_to_pot(self) -> None:
        for chips in self.players:
            self.pot += chips.bet
            chips.bet = 0

    def award_pot(self, player: int) -> int:
        self.collect_to_pot()
        amount = self.pot
        self.players[player].stack += amount
        self.pot = 0
        return amount
