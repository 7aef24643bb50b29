"""Texas Hold'em rules engine: cards, hand ranking, betting rounds and tables."""

from .cards import (
    Card,
    Deck,
    DeckSource,
    OrderedDeckSource,
    ShuffledDeckSource,
    StackedDeckSource,
    Suit,
    build_ordered,
    build_shuffled,
    parse_cards,
    parse_label,
)
from .chips import ChipLedger
from .errors import ActionNotAllowed, ActionRejected, InsufficientStack, InvalidPlayerCount, RaiseOutOfBounds
from .evaluator import HandCategory, HandRank, best_of, classify, compare_hands, describe_rank
from .hand import HandState, ShowdownResult
from .models import Action, ActionType, Phase, ResultKind, TableConfig, TurnResult
from .table import Table
from .turns import TurnPhase, TurnState

__all__ = [
    "Card",
    "Deck",
    "DeckSource",
    "OrderedDeckSource",
    "ShuffledDeckSource",
    "StackedDeckSource",
    "Suit",
    "build_ordered",
    "build_shuffled",
    "parse_cards",
    "parse_label",
    "ChipLedger",
    "ActionNotAllowed",
    "ActionRejected",
    "InsufficientStack",
    "InvalidPlayerCount",
    "RaiseOutOfBounds",
    "HandCategory",
    "HandRank",
    "best_of",
    "classify",
    "compare_hands",
    "describe_rank",
    "HandState",
    "ShowdownResult",
    "Action",
    "ActionType",
    "Phase",
    "ResultKind",
    "TableConfig",
    "TurnResult",
    "Table",
    "TurnPhase",
    "TurnState",
]
