"""Flop board entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from flop_stats.data.cards import Card, Rank, Suit
from flop_stats.errors import ParseError

FLOP_SIZE = 3
BOARD_STRING_LENGTH = FLOP_SIZE * 2

_SUIT_ORDER = {suit: index for index, suit in enumerate(Suit)}


def _card_key(card: Card) -> Tuple[int, int]:
    # Suit only breaks ties between equal ranks so paired boards compare equal.
    return int(card.rank), _SUIT_ORDER[card.suit]


@dataclass(frozen=True)
class Board:
    """Three distinct cards held in ascending rank order.

    Ranks may repeat (paired and trips flops are valid); the same card may
    not appear twice. Every texture classifier relies on the ascending
    order, which is enforced on construction.
    """

    cards: Tuple[Card, Card, Card]

    def __post_init__(self) -> None:
        cards = tuple(self.cards)
        if len(cards) != FLOP_SIZE or len(set(cards)) != FLOP_SIZE:
            raise ParseError("board", "".join(str(card) for card in cards))
        object.__setattr__(self, "cards", tuple(sorted(cards, key=_card_key)))

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "Board":
        return cls(cards=tuple(cards))

    @classmethod
    def parse(cls, text: str) -> "Board":
        """Parse a six character board string such as ``"Ts9c8h"``."""

        if not isinstance(text, str) or len(text) != BOARD_STRING_LENGTH:
            raise ParseError("board", text)
        try:
            cards = [Card.parse(text[index : index + 2]) for index in range(0, BOARD_STRING_LENGTH, 2)]
            return cls.from_cards(cards)
        except ParseError as exc:
            raise ParseError("board", text) from exc

    @property
    def lowest(self) -> Card:
        return self.cards[0]

    @property
    def highest(self) -> Card:
        return self.cards[-1]

    @property
    def ranks(self) -> Tuple[Rank, ...]:
        return tuple(card.rank for card in self.cards)

    def unique_rank_cards(self) -> Tuple[Card, ...]:
        """Cards with neighbouring equal ranks collapsed, order preserved."""

        unique: list[Card] = []
        for card in self.cards:
            if not unique or unique[-1].rank != card.rank:
                unique.append(card)
        return tuple(unique)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return "".join(str(card) for card in self.cards)


__all__ = ["BOARD_STRING_LENGTH", "Board", "FLOP_SIZE"]
