from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .cards import Card, Deck, cards_to_labels
from .chips import ChipLedger
from .errors import ActionNotAllowed, InsufficientStack, RaiseOutOfBounds
from .evaluator import HandRank, best_of, describe_rank
from .models import ROUND_PHASES, Action, ActionType, Phase, TableConfig, TurnResult
from .turns import TurnPhase, TurnState

LOGGER = logging.getLogger("holdem.hand")

# HandState drives exactly one dealt hand: blinds, hole cards, the action
# loop, community cards and the pot award. Table owns what outlives it.


@dataclass(frozen=True)
class ShowdownResult:
    seat: int
    rank: HandRank
    cards: Tuple[Card, ...]


class HandState:
    def __init__(
        self,
        stacks: Sequence[int],
        big_blind: int,
        deck: Deck,
        config: Optional[TableConfig] = None,
        hand_number: int = 0,
    ) -> None:
        self.config = config or TableConfig(seats=len(stacks))
        self.hand_number = hand_number
        self.num_players = len(stacks)
        self.big_blind = big_blind % self.num_players
        self.small_blind = (self.big_blind - 1) % self.num_players
        self.deck = deck
        self.chips = ChipLedger(stacks)
        # Seats without chips sit the hand out.
        funded = [seat for seat, stack in enumerate(stacks) if stack > 0]
        self.turns = TurnState(self.num_players, first_to_act=self.big_blind + 1, active=funded)
        self.hole: Dict[int, Tuple[Card, Card]] = {}
        self.board: List[Card] = []
        self.winner: Optional[int] = None
        self.showdown: List[ShowdownResult] = []

    # Hand lifecycle --------------------------------------------------

    def start(self) -> int:
        if self.turns.phase != TurnPhase.AWAITING_START:
            raise ActionNotAllowed("Hand already started")
        for seat in range(self.num_players):
            if seat in self.turns.active:
                first, second = self.deck.draw_many(2)
                self.hole[seat] = (first, second)
        self._post_blind(self.big_blind, self.config.bb)
        self._post_blind(self.small_blind, self.config.sb)
        first_player = self.turns.start()
        LOGGER.info(
            "Hand %s started: sb=%s bb=%s first=%s stacks=%s",
            self.hand_number,
            self.small_blind,
            self.big_blind,
            first_player,
            self.chips.stacks(),
        )
        return first_player

    def _post_blind(self, seat: int, amount: int) -> None:
        self.chips.bet(seat, min(amount, self.chips.stack(seat)))

    # Action handling -------------------------------------------------

    def apply_action(self, action: Action) -> TurnResult:
        if self.is_complete:
            raise ActionNotAllowed("Hand is already resolved")
        if self.turns.phase == TurnPhase.AWAITING_START:
            raise ActionNotAllowed("Hand has not started")
        seat = self.turns.current

        if action.kind == ActionType.CALL_OR_CHECK:
            amount = self.chips.call(seat)
            LOGGER.debug("Seat %s calls %s", seat, amount)
            crossed = self.turns.advance()
        elif action.kind == ActionType.FOLD:
            LOGGER.debug("Seat %s folds", seat)
            round_before = self.turns.round_index
            if self.turns.fold_current():
                return self._award(self.turns.current)
            crossed = self.turns.round_index != round_before
        elif action.kind == ActionType.RAISE:
            self._validate_raise(seat, action.amount)
            assert action.amount is not None
            self.chips.bet(seat, action.amount)
            LOGGER.debug("Seat %s raises %s", seat, action.amount)
            crossed = self.turns.advance_after_raise()
        else:
            raise ValueError(f"Unsupported action {action.kind}")

        if crossed:
            return self._close_round()
        return TurnResult.next_player(self.turns.current)

    def _validate_raise(self, seat: int, amount: Optional[int]) -> None:
        if amount is None:
            raise RaiseOutOfBounds("Raise requires an amount")
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise RaiseOutOfBounds(f"Raise amount must be an integer, got {amount!r}")
        if not self.config.min_raise <= amount <= self.config.max_raise:
            raise RaiseOutOfBounds(
                f"Raise must be between {self.config.min_raise} and {self.config.max_raise}, got {amount}"
            )
        if amount > self.chips.stack(seat):
            raise InsufficientStack(f"Raise of {amount} exceeds stack of {self.chips.stack(seat)}")
        # Short of the highest bet is only allowed when it puts the player all-in.
        if self.chips.bet_of(seat) + amount <= self.chips.highest_bet() and amount != self.chips.stack(seat):
            raise RaiseOutOfBounds(
                f"Raise must exceed the current bet of {self.chips.highest_bet()}, needs at least {self.to_call(seat) + 1}"
            )

    def _close_round(self) -> TurnResult:
        self.chips.collect_to_pot()
        if self.turns.is_complete:
            return self._resolve_showdown()
        # Round 1 opens with the flop; turn and river add one card each.
        count = 3 if self.turns.round_index == 1 else 1
        cards = self.deck.draw_many(count)
        self.board.extend(cards)
        LOGGER.debug("%s: %s", self.phase.value, cards_to_labels(cards))
        return TurnResult.next_player(self.turns.current)

    def _resolve_showdown(self) -> TurnResult:
        best: Optional[ShowdownResult] = None
        for seat in sorted(self.turns.active):
            rank, cards = best_of(list(self.hole[seat]) + self.board)
            result = ShowdownResult(seat=seat, rank=rank, cards=cards)
            self.showdown.append(result)
            LOGGER.debug("Seat %s shows %s", seat, describe_rank(rank))
            # Strictly greater: exact ties stay with the lowest seat.
            if best is None or rank > best.rank:
                best = result
        assert best is not None
        return self._award(best.seat)

    def _award(self, seat: int) -> TurnResult:
        amount = self.chips.award_pot(seat)
        self.winner = seat
        LOGGER.info("Hand %s won by seat %s (pot=%s)", self.hand_number, seat, amount)
        return TurnResult.hand_won(seat)

    # Read-only views -------------------------------------------------

    @property
    def is_complete(self) -> bool:
        return self.winner is not None

    @property
    def current_player(self) -> Optional[int]:
        return None if self.is_complete else self.turns.current

    @property
    def phase(self) -> Phase:
        if self.turns.round_index >= len(ROUND_PHASES):
            return Phase.SHOWDOWN
        return ROUND_PHASES[self.turns.round_index]

    @property
    def pot(self) -> int:
        return self.chips.pot

    def stack(self, seat: int) -> int:
        return self.chips.stack(seat)

    def bet(self, seat: int) -> int:
        return self.chips.bet_of(seat)

    def stacks(self) -> List[int]:
        return self.chips.stacks()

    def total_chips(self) -> int:
        return self.chips.total()

    def hole_cards(self, seat: int) -> Optional[Tuple[Card, Card]]:
        return self.hole.get(seat)

    def active_players(self) -> List[int]:
        return sorted(self.turns.active)

    def to_call(self, seat: int) -> int:
        return max(self.chips.highest_bet() - self.chips.bet_of(seat), 0)

    def raise_range(self, seat: int) -> Optional[Tuple[int, int]]:
        """Smallest and largest raise the seat may make, or None when only an all-in fits."""
        low = max(self.config.min_raise, self.to_call(seat) + 1)
        high = min(self.config.max_raise, self.chips.stack(seat))
        if high < low:
            return None
        return low, high

    def player_view(self, seat: int) -> Dict[str, object]:
        hole = self.hole.get(seat)
        view = self.spectator_view()
        view["you"] = {
            "seat": seat,
            "hole": cards_to_labels(hole) if hole else [],
            "stack": self.chips.stack(seat),
            "bet": self.chips.bet_of(seat),
            "to_call": self.to_call(seat),
            "raise_range": self.raise_range(seat),
        }
        return view

    def spectator_view(self) -> Dict[str, object]:
        shown = {result.seat: result for result in self.showdown}
        players = []
        for seat in range(self.num_players):
            result = shown.get(seat)
            players.append(
                {
                    "seat": seat,
                    "stack": self.chips.stack(seat),
                    "bet": self.chips.bet_of(seat),
                    "has_folded": seat not in self.turns.active,
                    "hole": cards_to_labels(self.hole[seat]) if result else None,
                    "rank": describe_rank(result.rank) if result else None,
                }
            )
        return {
            "hand_number": self.hand_number,
            "phase": self.phase.value,
            "pot": self.chips.pot,
            "board": cards_to_labels(self.board),
            "small_blind": self.small_blind,
            "big_blind": self.big_blind,
            "next_actor": self.current_player,
            "winner": self.winner,
            "players": players,
        }
