import pytest

from holdem.errors import ActionNotAllowed, ActionRejected, InsufficientStack, RaiseOutOfBounds
from holdem.models import Action

from .helpers import create_table, perform_actions, start_hand


def test_rejections_carry_a_code_and_message():
    expected = {
        RaiseOutOfBounds: "RAISE_OUT_OF_BOUNDS",
        ActionNotAllowed: "ACTION_NOT_ALLOWED",
        InsufficientStack: "INSUFFICIENT_STACK",
    }
    for error, code in expected.items():
        exc = error("nope")
        assert isinstance(exc, ActionRejected)
        assert isinstance(exc, ValueError)
        assert exc.code == code
        assert exc.msg == "nope"


def test_raise_bounds_are_inclusive():
    table = create_table(starting_stack=200)
    hand, _ = start_hand(table)
    perform_actions(
        hand,
        [
            (0, Action.call_or_check()),
            (1, Action.raise_by(1)),
            (0, Action.raise_by(99)),
        ],
    )
    assert hand.bet(1) == 3
    assert hand.bet(0) == 101


@pytest.mark.parametrize("amount", [0, 100])
def test_rejected_raise_keeps_turn_with_same_player(amount):
    table = create_table()
    hand, first = start_hand(table)
    with pytest.raises(RaiseOutOfBounds, match="between 1 and 99"):
        hand.apply_action(Action.raise_by(amount))
    assert hand.current_player == first
    assert hand.stacks() == [99, 98]
    # The same player can still act normally.
    hand.apply_action(Action.call_or_check())
    assert hand.current_player == 1


def test_raise_without_amount_rejected():
    table = create_table()
    hand, _ = start_hand(table)
    with pytest.raises(RaiseOutOfBounds, match="requires an amount"):
        hand.apply_action(Action(Action.raise_by(1).kind))


def test_no_actions_once_hand_resolved():
    table = create_table()
    hand, _ = start_hand(table)
    hand.apply_action(Action.fold())
    with pytest.raises(ActionNotAllowed, match="already resolved"):
        hand.apply_action(Action.call_or_check())
    assert hand.stacks() == [99, 101]


@pytest.mark.parametrize("amount", ["5", 2.5, True])
def test_raise_amount_must_be_an_integer(amount):
    table = create_table()
    hand, first = start_hand(table)
    with pytest.raises(RaiseOutOfBounds, match="must be an integer"):
        hand.apply_action(Action.raise_by(amount))  # type: ignore[arg-type]
    assert hand.current_player == first
    assert hand.stacks() == [99, 98]
