from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from holdem.cards import StackedDeckSource, parse_cards
from holdem.hand import HandState
from holdem.models import Action, TableConfig, TurnResult
from holdem.table import Table


def create_table(
    *,
    seats: int = 2,
    starting_stack: int = 100,
    cards: Optional[Sequence[str]] = None,
) -> Table:
    """Instantiate a table; ``cards`` stacks the deck (hole cards by seat, then the board)."""
    source = StackedDeckSource(parse_cards(cards or []))
    return Table(TableConfig(seats=seats, starting_stack=starting_stack), deck_source=source)


def start_hand(table: Table) -> Tuple[HandState, int]:
    hand, first = table.start_hand()
    assert hand.current_player == first
    return hand, first


def perform_actions(hand: HandState, actions: Iterable[Tuple[int, Action]]) -> List[TurnResult]:
    """Apply a scripted sequence of (expected seat, action) pairs."""
    results = []
    for seat, action in actions:
        assert hand.current_player == seat, f"expected seat {seat} to act, got {hand.current_player}"
        results.append(hand.apply_action(action))
    return results


def check_around(hand: HandState) -> TurnResult:
    """Call or check until the board changes or the hand ends."""
    board_size = len(hand.board)
    while True:
        result = hand.apply_action(Action.call_or_check())
        if result.is_hand_won or len(hand.board) != board_size:
            return result


def play_to_showdown(hand: HandState) -> TurnResult:
    while True:
        result = hand.apply_action(Action.call_or_check())
        if result.is_hand_won:
            return result
