from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from .cards import DeckSource, ShuffledDeckSource
from .errors import ActionNotAllowed, InvalidPlayerCount
from .hand import HandState
from .models import TableConfig

LOGGER = logging.getLogger("holdem.table")

# Two hole cards per seat plus five board cards must fit in one deck.
MAX_SEATS = 23


class Table:
    """Carries stacks and the blind position from one hand to the next."""

    def __init__(self, config: TableConfig, deck_source: Optional[DeckSource] = None) -> None:
        if not 2 <= config.seats <= MAX_SEATS:
            raise InvalidPlayerCount(f"A table needs 2 to {MAX_SEATS} seats, got {config.seats}")
        self.config = config
        self.deck_source: DeckSource = deck_source or ShuffledDeckSource()
        self.stacks: List[int] = [config.starting_stack] * config.seats
        # Seat 0 posts the small blind on the first hand.
        self.big_blind = 1
        self.hands_played = 0
        self.hand: Optional[HandState] = None

    @classmethod
    def open(
        cls,
        seats: int,
        deck_source: Optional[DeckSource] = None,
        **config_overrides: int,
    ) -> Optional["Table"]:
        try:
            return cls(TableConfig(seats=seats, **config_overrides), deck_source)
        except InvalidPlayerCount as exc:
            LOGGER.warning("Table not opened: %s", exc)
            return None

    # Hand lifecycle --------------------------------------------------

    def can_start_hand(self) -> bool:
        return self.hand is None and sum(1 for stack in self.stacks if stack > 0) >= 2

    def start_hand(self) -> Tuple[HandState, int]:
        if self.hand is not None:
            raise ActionNotAllowed("A hand is already in progress")
        if not self.can_start_hand():
            raise ActionNotAllowed("Not enough players with chips to start a hand")

        hand = HandState(
            stacks=list(self.stacks),
            big_blind=self.big_blind,
            deck=self.deck_source.next_deck(),
            config=self.config,
            hand_number=self.hands_played + 1,
        )
        first_player = hand.start()
        self.hand = hand
        return hand, first_player

    def finish_hand(self, hand: HandState) -> "Table":
        if hand is not self.hand:
            raise ActionNotAllowed("Hand does not belong to this table")
        if not hand.is_complete:
            raise ActionNotAllowed("Hand is still in progress")

        self.stacks = hand.stacks()
        self.big_blind = (self.big_blind + 1) % self.config.seats
        self.hands_played += 1
        self.hand = None
        LOGGER.info("Hand %s finished; stacks=%s", hand.hand_number, self.stacks)
        return self

    # Match bookkeeping -----------------------------------------------

    def is_match_over(self) -> bool:
        return sum(1 for stack in self.stacks if stack > 0) <= 1

    def match_result_payload(self) -> Dict[str, object]:
        funded = [seat for seat, stack in enumerate(self.stacks) if stack > 0]
        winner = funded[0] if len(funded) == 1 else None
        return {
            "winner": winner,
            "hands_played": self.hands_played,
            "final_stacks": [{"seat": seat, "stack": stack} for seat, stack in enumerate(self.stacks)],
        }
