from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Protocol, Sequence


class Suit(str, Enum):
    HEARTS = "H"
    SPADES = "S"
    DIAMONDS = "D"
    CLUBS = "C"


SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}
FACE_LABELS = {11: "J", 12: "Q", 13: "K", 14: "A"}
VALUES = range(2, 15)
DECK_SIZE = 52


@dataclass(frozen=True)
class Card:
    suit: Suit
    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.suit, Suit):
            try:
                object.__setattr__(self, "suit", Suit(self.suit))
            except ValueError:
                raise ValueError(f"Invalid suit: {self.suit}") from None
        if self.value not in VALUES:
            raise ValueError(f"Invalid value: {self.value}")

    # Ordering ignores the suit; equality does not, so a deck can tell
    # two cards of the same value apart.
    def __lt__(self, other: "Card") -> bool:
        return self.value < other.value

    def __gt__(self, other: "Card") -> bool:
        return self.value > other.value

    def __le__(self, other: "Card") -> bool:
        return self.value <= other.value

    def __ge__(self, other: "Card") -> bool:
        return self.value >= other.value

    @property
    def label(self) -> str:
        return f"{self.suit.value}{self.value}"

    @property
    def pretty(self) -> str:
        return SUIT_SYMBOLS[self.suit] + FACE_LABELS.get(self.value, str(self.value))


def parse_label(label: str) -> Card:
    """Parse a suit-first label such as ``"H13"`` or ``"C2"``."""
    if len(label) < 2:
        raise ValueError(f"Invalid card label: {label}")
    try:
        suit = Suit(label[0].upper())
        value = int(label[1:])
    except ValueError:
        raise ValueError(f"Invalid card label: {label}") from None
    return Card(suit, value)


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


class Deck:
    """Cards consumed from the front; nothing drawn goes back in."""

    def __init__(self, cards: Iterable[Card]) -> None:
        self._cards = list(cards)
        if len(set(self._cards)) != len(self._cards):
            raise ValueError("Deck contains duplicate cards")

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def remaining(self) -> List[Card]:
        return list(self._cards)

    def draw(self) -> Card:
        if not self._cards:
            raise ValueError("Not enough cards left in deck")
        return self._cards.pop(0)

    def draw_many(self, count: int) -> List[Card]:
        if len(self._cards) < count:
            raise ValueError("Not enough cards left in deck")
        cards = self._cards[:count]
        del self._cards[:count]
        return cards


def standard_cards() -> List[Card]:
    return [
        Card(suit, value)
        for suit in (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES)
        for value in reversed(VALUES)
    ]


def build_ordered() -> Deck:
    return Deck(standard_cards())


def build_shuffled(seed: Optional[int] = None) -> Deck:
    rng = random.Random(seed)
    cards = standard_cards()
    rng.shuffle(cards)
    return Deck(cards)


class DeckSource(Protocol):
    """Supplies a fresh deck for every hand a table deals."""

    def next_deck(self) -> Deck:
        ...


class ShuffledDeckSource:
    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def next_deck(self) -> Deck:
        cards = standard_cards()
        self._rng.shuffle(cards)
        return Deck(cards)


class OrderedDeckSource:
    def next_deck(self) -> Deck:
        return build_ordered()


class StackedDeckSource:
    """Deals ``cards`` first, then the rest of a standard deck in order.

    Used to script hands: hole cards go out two per seat in seat order, then
    the flop, turn and river.
    """

    def __init__(self, cards: Iterable[Card]) -> None:
        self.cards = list(cards)
        if len(set(self.cards)) != len(self.cards):
            raise ValueError("Stacked cards contain duplicates")

    def next_deck(self) -> Deck:
        stacked = set(self.cards)
        rest = [card for card in standard_cards() if card not in stacked]
        return Deck(self.cards + rest)
