from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from holdem.errors import ActionRejected
from holdem.models import Action
from holdem.table import Table

from .bots import Strategy, baseline_strategy

LOGGER = logging.getLogger("practice")

# Safety valve for a strategy that never lets a hand finish.
MAX_ACTIONS_PER_HAND = 10_000


@dataclass
class SessionSummary:
    hands_played: int = 0
    wins: Dict[int, int] = field(default_factory=dict)
    rejected_actions: int = 0
    final_stacks: List[int] = field(default_factory=list)


class PracticeSession:
    """Plays hands at one table with in-process bots in every seat."""

    def __init__(
        self,
        table: Table,
        strategy: Strategy = baseline_strategy,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.table = table
        self.strategy = strategy
        self.rng = rng or random.Random()

    def play_hand(self, summary: SessionSummary) -> int:
        hand, actor = self.table.start_hand()
        for _ in range(MAX_ACTIONS_PER_HAND):
            action = self.strategy(hand, self.rng)
            try:
                result = hand.apply_action(action)
            except ActionRejected as exc:
                LOGGER.warning("Rejected action seat=%s action=%s reason=%s", actor, action, exc)
                summary.rejected_actions += 1
                result = hand.apply_action(Action.call_or_check())
            if result.is_hand_won:
                self.table.finish_hand(hand)
                summary.wins[result.player] = summary.wins.get(result.player, 0) + 1
                return result.player
            actor = result.player
        raise RuntimeError(f"Hand {hand.hand_number} did not finish")

    def run(self, hands: int) -> SessionSummary:
        summary = SessionSummary()
        while summary.hands_played < hands:
            if self.table.is_match_over():
                LOGGER.info("Match over after %s hands", summary.hands_played)
                break
            self.play_hand(summary)
            summary.hands_played += 1
        summary.final_stacks = list(self.table.stacks)
        return summary
