from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Set

from .errors import ActionNotAllowed
from .models import FINAL_ROUND


class TurnPhase(str, Enum):
    AWAITING_START = "AWAITING_START"
    ROUND_IN_PROGRESS = "ROUND_IN_PROGRESS"
    HAND_COMPLETE = "HAND_COMPLETE"


class TurnState:
    """Whose turn it is, who is still in, and when a betting round closes.

    A round closes once every active player has acted since the last raise.
    Folds take the player out of that count instead of counting as a turn, so
    the round never needs extra pass-throughs after someone folds.
    """

    def __init__(self, total_players: int, first_to_act: int, active: Optional[Iterable[int]] = None) -> None:
        if total_players < 2:
            raise ValueError("At least two players are required")
        self.total_players = total_players
        self.first_to_act = first_to_act % total_players
        self.active: Set[int] = set(range(total_players) if active is None else active)
        if len(self.active) < 2:
            raise ValueError("At least two active players are required")
        self.current = self.first_to_act
        self.since_raise = 0
        self.round_index = 0
        self.phase = TurnPhase.AWAITING_START

    @property
    def is_complete(self) -> bool:
        return self.phase == TurnPhase.HAND_COMPLETE

    def start(self) -> int:
        if self.phase != TurnPhase.AWAITING_START:
            raise ActionNotAllowed("Hand already started")
        self.phase = TurnPhase.ROUND_IN_PROGRESS
        self.current = self._first_active_from(self.first_to_act)
        return self.current

    def advance(self) -> bool:
        """Pass the turn on. Returns True when a betting round just closed."""
        self._require_in_progress()
        self.since_raise += 1
        return self._step()

    def advance_after_raise(self) -> bool:
        self._require_in_progress()
        # Everyone else has to act again before the round can close.
        self.since_raise = 0
        return self.advance()

    def fold_current(self) -> bool:
        """Fold the current player. Returns True when one player is left."""
        self._require_in_progress()
        self.active.discard(self.current)
        if len(self.active) == 1:
            self.current = next(iter(self.active))
            self.phase = TurnPhase.HAND_COMPLETE
            return True
        self._step()
        return False

    def _step(self) -> bool:
        if self.since_raise >= len(self.active):
            self.since_raise = 0
            self.round_index += 1
            if self.round_index > FINAL_ROUND:
                self.phase = TurnPhase.HAND_COMPLETE
                # Keep current on an active seat even though nobody acts now.
                if self.current not in self.active:
                    self.current = self._first_active_from(self.current)
            else:
                self.current = self._first_active_from(self.first_to_act)
            return True
        self.current = self._first_active_from(self.current + 1)
        return False

    def _first_active_from(self, seat: int) -> int:
        for offset in range(self.total_players):
            candidate = (seat + offset) % self.total_players
            if candidate in self.active:
                return candidate
        raise RuntimeError("No active players left")

    def _require_in_progress(self) -> None:
        if self.phase == TurnPhase.AWAITING_START:
            raise ActionNotAllowed("Hand has not started")
        if self.phase == TurnPhase.HAND_COMPLETE:
            raise ActionNotAllowed("Hand is already complete")
