from __future__ import annotations

import random
from typing import Callable, Optional

from holdem.hand import HandState
from holdem.models import Action, Phase

Strategy = Callable[[HandState, random.Random], Action]


def _rough_hand_strength(hand: HandState, seat: int) -> int:
    """Very rough proxy for hole-card quality used to drive aggression choices."""
    hole = hand.hole_cards(seat)
    if not hole:
        return 0

    first, second = hole
    score = first.value + second.value
    if first.value == second.value:
        score += 14  # pairs are quite strong pre-flop
    else:
        gap = abs(first.value - second.value)
        if gap == 1:
            score += 4
        elif gap == 2:
            score += 2
    if first.suit == second.suit:
        score += 3
    if min(first.value, second.value) >= 11:
        score += 2

    return score


def _should_raise(strength: int, phase: Phase, facing_bet: bool, rng: random.Random) -> bool:
    base = 0.1 if facing_bet else 0.2
    phase_bonus = {
        Phase.PRE_FLOP: 0.0,
        Phase.FLOP: 0.05,
        Phase.TURN: 0.08,
        Phase.RIVER: 0.1,
    }.get(phase, 0.0)
    scaled_strength = min(strength / 60.0, 0.4)
    probability = min(0.75, base + phase_bonus + scaled_strength)

    if strength >= 36:
        return True
    return rng.random() < probability


def _choose_raise_amount(hand: HandState, seat: int, rng: random.Random) -> Optional[int]:
    bounds = hand.raise_range(seat)
    if bounds is None:
        return None
    low, high = bounds
    # Mostly small probes, sometimes everything the bounds allow.
    if rng.random() < 0.15:
        return high
    return rng.randint(low, min(high, low + 9))


def passive_strategy(hand: HandState, rng: Optional[random.Random] = None) -> Action:
    """Calls or checks every time; hands always reach showdown."""
    return Action.call_or_check()


def baseline_strategy(hand: HandState, rng: random.Random) -> Action:
    """Demo bot: raises strong holdings, folds weak ones facing a bet."""
    seat = hand.current_player
    if seat is None:
        raise ValueError("No player to act")

    strength = _rough_hand_strength(hand, seat)
    facing_bet = hand.to_call(seat) > 0

    if _should_raise(strength, hand.phase, facing_bet, rng):
        amount = _choose_raise_amount(hand, seat, rng)
        if amount is not None:
            return Action.raise_by(amount)

    if facing_bet and strength < 14 and rng.random() < 0.5:
        return Action.fold()

    return Action.call_or_check()
