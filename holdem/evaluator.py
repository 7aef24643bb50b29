from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple

from .cards import Card


class HandCategory(IntEnum):
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


@dataclass(frozen=True, order=True)
class HandRank:
    """Comparable strength of a five-card hand. Higher is better.

    Fields compare in order: the category dominates, then the values embedded
    in the category (pair value, straight high card, ...), then every card
    value sorted high to low.
    """

    category: HandCategory
    tiebreak: Tuple[int, ...]
    values: Tuple[int, ...]

    @property
    def name(self) -> str:
        return describe_rank(self)


_Match = Optional[Tuple[HandCategory, Tuple[int, ...]]]

# Count patterns of the top groups, checked strongest first.
_GROUP_PATTERNS = (
    ((4,), HandCategory.FOUR_OF_A_KIND),
    ((3, 2), HandCategory.FULL_HOUSE),
    ((3,), HandCategory.THREE_OF_A_KIND),
    ((2, 2), HandCategory.TWO_PAIR),
    ((2,), HandCategory.PAIR),
)


def classify(cards: Sequence[Card]) -> HandRank:
    """Rank exactly five cards."""
    if len(cards) != 5:
        raise ValueError(f"classify needs exactly 5 cards, got {len(cards)}")
    ordered = sorted(cards, key=lambda card: card.value, reverse=True)
    values = tuple(card.value for card in ordered)

    # Flush first: a suited straight must not fall through to a plain straight.
    match = _flush(ordered, values) or _straight(values) or _grouped(values)
    if match is None:
        match = (HandCategory.HIGH_CARD, ())
    category, tiebreak = match
    return HandRank(category, tiebreak, values)


def best_of(cards: Sequence[Card]) -> Tuple[HandRank, Tuple[Card, ...]]:
    """Return the strongest five-card subset of 5 to 7 cards and its rank."""
    if not 5 <= len(cards) <= 7:
        raise ValueError(f"best_of needs 5 to 7 cards, got {len(cards)}")
    best: Optional[Tuple[HandRank, Tuple[Card, ...]]] = None
    for combo in itertools.combinations(cards, 5):
        rank = classify(combo)
        if best is None or rank > best[0]:
            best = (rank, combo)
    assert best is not None
    return best


def compare_hands(first: Sequence[Card], second: Sequence[Card]) -> int:
    a, b = classify(first), classify(second)
    return (a > b) - (a < b)


def describe_rank(rank: HandRank) -> str:
    return rank.category.name.lower()


def _flush(ordered: List[Card], values: Tuple[int, ...]) -> _Match:
    if any(card.suit != ordered[0].suit for card in ordered):
        return None
    straight = _straight(values)
    if straight is not None:
        return (HandCategory.STRAIGHT_FLUSH, straight[1])
    return (HandCategory.FLUSH, ())


def _straight(values: Tuple[int, ...]) -> _Match:
    high = _consecutive_high(values)
    if high is None:
        # Ace plays low for the wheel (A-2-3-4-5 is a five-high straight).
        low_ace = tuple(sorted((1 if v == 14 else v for v in values), reverse=True))
        high = _consecutive_high(low_ace)
    if high is None:
        return None
    return (HandCategory.STRAIGHT, (high,))


def _consecutive_high(values: Tuple[int, ...]) -> Optional[int]:
    if all(a == b + 1 for a, b in zip(values, values[1:])):
        return values[0]
    return None


def _grouped(values: Tuple[int, ...]) -> _Match:
    groups = _groups(values)
    counts = tuple(count for _, count in groups)
    for pattern, category in _GROUP_PATTERNS:
        if counts == pattern:
            return (category, tuple(value for value, _ in groups))
    return None


def _groups(values: Tuple[int, ...]) -> List[Tuple[int, int]]:
    # Equal values sit next to each other once sorted, so one pass is enough.
    groups: List[Tuple[int, int]] = []
    run = 1
    for prev, value in zip(values, values[1:] + (0,)):
        if value == prev:
            run += 1
            continue
        if run > 1:
            groups.append((prev, run))
        run = 1
    groups.sort(key=lambda group: (group[1], group[0]), reverse=True)
    return groups
