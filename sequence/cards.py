"""
Card and deck utilities for Sequence.

Two standard 52-card decks are combined into a single 104-card deck.  Every
physical card gets an identifier tagged with the index of the deck it came
from, so the two copies of e.g. the Jack of Hearts stay distinguishable when
they are removed from a hand.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

import numpy as np

DECK_COUNT = 2


class Suit(str, Enum):
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    @property
    def letter(self) -> str:
        return self.value[0].upper()


class Rank(str, Enum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"


SUITS: List[Suit] = list(Suit)
RANKS: List[Rank] = list(Rank)

_SUIT_BY_LETTER = {s.letter: s for s in Suit}
_RANK_BY_VALUE = {r.value: r for r in Rank}


@dataclass(frozen=True)
class Card:
    suit: Suit
    rank: Rank
    id: str

    def __post_init__(self) -> None:
        # accept plain strings such as "diamonds" and "5"
        object.__setattr__(self, "suit", Suit(self.suit))
        object.__setattr__(self, "rank", Rank(self.rank))

    @property
    def code(self) -> str:
        """Short code such as '10H' or 'QS'."""
        return f"{self.rank.value}{self.suit.letter}"

    def __str__(self) -> str:
        return self.code


def parse_card_code(code: str) -> Tuple[Rank, Suit]:
    """Split a card code ('7H', '10S', 'QD') into (Rank, Suit)."""
    if not isinstance(code, str) or len(code) < 2:
        raise ValueError(f"Malformed card code: {code!r}")
    rank = _RANK_BY_VALUE.get(code[:-1].upper())
    suit = _SUIT_BY_LETTER.get(code[-1].upper())
    if rank is None or suit is None:
        raise ValueError(f"Malformed card code: {code!r}")
    return rank, suit


def make_card(code: str, deck_index: int = 0) -> Card:
    rank, suit = parse_card_code(code)
    return Card(suit=suit, rank=rank, id=f"{rank.value}-{suit.value}-{deck_index}")


def is_jack(card: Optional[Card]) -> bool:
    return card is not None and card.rank is Rank.JACK


def is_two_eyed_jack(card: Optional[Card]) -> bool:
    return is_jack(card) and card.suit in (Suit.HEARTS, Suit.DIAMONDS)


def is_one_eyed_jack(card: Optional[Card]) -> bool:
    return is_jack(card) and card.suit in (Suit.CLUBS, Suit.SPADES)


def _make_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def shuffle(deck: Sequence[Card], rng: Optional[np.random.Generator] = None) -> List[Card]:
    """Return a uniformly shuffled copy of ``deck`` (Fisher-Yates)."""
    rng = _make_rng(rng)
    shuffled = list(deck)
    for i in range(len(shuffled) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def create_full_deck(deck_index: int = 0) -> List[Card]:
    return [
        Card(suit=suit, rank=rank, id=f"{rank.value}-{suit.value}-{deck_index}")
        for suit in SUITS
        for rank in RANKS
    ]


def create_deck(rng: Optional[np.random.Generator] = None) -> List[Card]:
    """Two combined decks (104 cards), shuffled."""
    cards: List[Card] = []
    for deck_index in range(DECK_COUNT):
        cards.extend(create_full_deck(deck_index))
    return shuffle(cards, rng)
