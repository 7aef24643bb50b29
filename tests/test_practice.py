import random
import sys

from holdem.cards import ShuffledDeckSource
from holdem.models import ActionType, TableConfig
from holdem.table import Table
from practice import PracticeSession, baseline_strategy, passive_strategy
from practice.__main__ import main

from .helpers import create_table, start_hand


def test_passive_strategy_only_calls():
    table = create_table()
    hand, _ = start_hand(table)
    assert passive_strategy(hand).kind == ActionType.CALL_OR_CHECK


def test_baseline_strategy_raises_within_bounds():
    rng = random.Random(5)
    table = Table(TableConfig(seats=4), ShuffledDeckSource(seed=5))
    for _ in range(50):
        hand, _ = table.start_hand()
        while not hand.is_complete:
            action = baseline_strategy(hand, rng)
            if action.kind == ActionType.RAISE:
                seat = hand.current_player
                assert 1 <= action.amount <= min(99, hand.stack(seat))
            hand.apply_action(action)
        table.finish_hand(hand)
        if table.is_match_over():
            break


def test_session_plays_hands_and_conserves_chips():
    table = Table(TableConfig(seats=4), ShuffledDeckSource(seed=11))
    session = PracticeSession(table, baseline_strategy, random.Random(11))
    summary = session.run(40)
    assert 1 <= summary.hands_played <= 40
    assert sum(summary.wins.values()) == summary.hands_played
    assert summary.rejected_actions == 0
    assert sum(summary.final_stacks) == 400
    assert summary.final_stacks == table.stacks


def test_session_stops_when_match_is_over():
    table = Table(TableConfig(seats=2), ShuffledDeckSource(seed=3))
    table.stacks = [0, 200]
    summary = PracticeSession(table, passive_strategy).run(10)
    assert summary.hands_played == 0
    assert summary.final_stacks == [0, 200]


def test_cli_runs_a_short_session(monkeypatch, caplog):
    monkeypatch.setattr(sys, "argv", ["practice", "--players", "3", "--hands", "5", "--seed", "9"])
    with caplog.at_level("INFO", logger="practice"):
        main()
    assert "Played" in caplog.text
