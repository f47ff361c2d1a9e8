"""Rank, suit and card primitives for solver board strings.

Board strings use the canonical two-character card tokens emitted by the
solver export (``"As"``, ``"Td"``): an upper-case rank character followed by
a lower-case suit character. Parsing is strict, unlike the tolerant hand
history parsers, because a malformed token means the export is corrupt.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, List

from flop_stats.errors import ParseError


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @classmethod
    def from_char(cls, char: str) -> "Rank":
        try:
            return _RANK_BY_CHAR[char]
        except (KeyError, TypeError):
            raise ParseError("rank", char) from None

    @property
    def char(self) -> str:
        return RANK_CHARS[self]

    @property
    def is_broadway(self) -> bool:
        return self in BROADWAY_RANKS

    @property
    def is_middling(self) -> bool:
        return self in MIDDLING_RANKS

    @property
    def is_low(self) -> bool:
        return self in LOW_RANKS

    @property
    def is_wheel(self) -> bool:
        return self in WHEEL_RANKS

    def __str__(self) -> str:
        return self.char


RANK_CHARS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}
_RANK_BY_CHAR = {char: rank for rank, char in RANK_CHARS.items()}

BROADWAY_RANKS = frozenset({Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE})
MIDDLING_RANKS = frozenset({Rank.SEVEN, Rank.EIGHT, Rank.NINE})
LOW_RANKS = frozenset({Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.SIX})
WHEEL_RANKS = frozenset({Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE})


class Suit(Enum):
    """Card suit; the value is the solver's lower-case suit character."""

    SPADES = "s"
    CLUBS = "c"
    DIAMONDS = "d"
    HEARTS = "h"

    @classmethod
    def from_char(cls, char: str) -> "Suit":
        try:
            return cls(char)
        except ValueError:
            raise ParseError("suit", char) from None

    @property
    def char(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Card:
    """A single card.

    Equality and hashing use both rank and suit. Ordering looks at the rank
    only, so sorting a board never depends on suits.
    """

    rank: Rank
    suit: Suit

    @classmethod
    def parse(cls, token: str) -> "Card":
        if not isinstance(token, str) or len(token) != 2:
            raise ParseError("card", token)
        return cls(rank=Rank.from_char(token[0]), suit=Suit.from_char(token[1]))

    @property
    def is_ace(self) -> bool:
        return self.rank is Rank.ACE

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __gt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __str__(self) -> str:
        return f"{self.rank.char}{self.suit.char}"


def distance(first: Card, second: Card) -> int:
    """Absolute rank gap between two cards (aces count high)."""

    return abs(int(first.rank) - int(second.rank))


def card_distances(cards: Iterable[Card]) -> List[int]:
    """Rank gaps between neighbouring cards, in the order given.

    Callers pass cards already sorted by rank; the result has one entry fewer
    than the input.
    """

    ordered = list(cards)
    return [distance(low, high) for low, high in zip(ordered, ordered[1:])]


__all__ = [
    "BROADWAY_RANKS",
    "Card",
    "LOW_RANKS",
    "MIDDLING_RANKS",
    "RANK_CHARS",
    "Rank",
    "Suit",
    "WHEEL_RANKS",
    "card_distances",
    "distance",
]
