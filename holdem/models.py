from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Phase(str, Enum):
    PRE_FLOP = "PRE_FLOP"
    FLOP = "FLOP"
    TURN = "TURN"
    RIVER = "RIVER"
    SHOWDOWN = "SHOWDOWN"


# Betting round index -> phase; anything past the river is showdown.
ROUND_PHASES = (Phase.PRE_FLOP, Phase.FLOP, Phase.TURN, Phase.RIVER)
FINAL_ROUND = len(ROUND_PHASES) - 1


class ActionType(str, Enum):
    CALL_OR_CHECK = "CALL_OR_CHECK"
    FOLD = "FOLD"
    RAISE = "RAISE"


@dataclass(frozen=True)
class Action:
    kind: ActionType
    amount: Optional[int] = None

    @classmethod
    def call_or_check(cls) -> "Action":
        return cls(ActionType.CALL_OR_CHECK)

    @classmethod
    def fold(cls) -> "Action":
        return cls(ActionType.FOLD)

    @classmethod
    def raise_by(cls, amount: int) -> "Action":
        return cls(ActionType.RAISE, amount)


class ResultKind(str, Enum):
    NEXT_PLAYER = "NEXT_PLAYER"
    HAND_WON = "HAND_WON"


@dataclass(frozen=True)
class TurnResult:
    kind: ResultKind
    player: int

    @classmethod
    def next_player(cls, player: int) -> "TurnResult":
        return cls(ResultKind.NEXT_PLAYER, player)

    @classmethod
    def hand_won(cls, player: int) -> "TurnResult":
        return cls(ResultKind.HAND_WON, player)

    @property
    def is_hand_won(self) -> bool:
        return self.kind == ResultKind.HAND_WON


@dataclass
class TableConfig:
    seats: int = 2
    starting_stack: int = 100
    sb: int = 1
    bb: int = 2
    min_raise: int = 1
    max_raise: int = 99
