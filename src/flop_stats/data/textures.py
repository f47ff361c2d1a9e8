"""Flop texture classifiers and the texture filter.

A board is bucketed along four independent dimensions: height, suit pattern,
pairing and connectedness. The first three are partitions, so each has a
single ``classify_*`` function. Connectedness filter values are predicates
that overlap (a wheel board is also an any-straight board); the
precedence-ordered bucket is available from :func:`classify_connection`.

The straight-draw rules are house heuristics used to bucket solver output,
not a full draw evaluator:

* aces are left out of the open-ended check because the wheel and broadway
  straight checks already cover their connectivity;
* an ace-high board is never disconnected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple, Type, TypeVar

from flop_stats.data.board import Board
from flop_stats.data.cards import card_distances
from flop_stats.errors import ParseError

MAX_STRAIGHT_SPAN = 4
OESD_DISTANCES = range(1, 4)


class _CodedEnum(Enum):
    """Enum whose value is the short filter code."""

    @classmethod
    def from_code(cls, code: str):
        if isinstance(code, str):
            normalised = code.strip().upper()
            for member in cls:
                if member.value == normalised:
                    return member
        raise ParseError(_KIND_NAMES.get(cls, "texture"), code)

    @property
    def code(self) -> str:
        return self.value


class Height(_CodedEnum):
    SINGLE_BROADWAY = "1BW"
    DOUBLE_BROADWAY = "2BW"
    TRIPLE_BROADWAY = "3BW"
    MIDDLING = "MID"
    LOW = "LOW"


class SuitPattern(_CodedEnum):
    RAINBOW = "R"
    TWOTONE = "T"
    MONOTONE = "M"


class Pairing(_CodedEnum):
    UNPAIRED = "U"
    PAIRED = "P"
    TRIPS = "T"


class Connection(_CodedEnum):
    DISCONNECTED = "DC"
    GUTSHOT = "GS"
    OESD = "OESD"
    WHEEL = "WH"
    NORMAL_STRAIGHT = "NS"
    ANY_STRAIGHT = "AS"


_KIND_NAMES = {
    Height: "height",
    SuitPattern: "suit pattern",
    Pairing: "pairing",
    Connection: "connection",
}


# ---------------------------------------------------------------------------
# Height / suits / pairing


def _count(board: Board, predicate: Callable[..., bool]) -> int:
    return sum(1 for card in board if predicate(card.rank))


def classify_height(board: Board) -> Height:
    broadways = _count(board, lambda rank: rank.is_broadway)
    if broadways == 3:
        return Height.TRIPLE_BROADWAY
    if broadways == 2:
        return Height.DOUBLE_BROADWAY
    if broadways == 1:
        return Height.SINGLE_BROADWAY
    if _count(board, lambda rank: rank.is_middling) > 0:
        return Height.MIDDLING
    # No broadway and no middling card leaves three low cards.
    return Height.LOW


_SUIT_PATTERNS = {1: SuitPattern.MONOTONE, 2: SuitPattern.TWOTONE, 3: SuitPattern.RAINBOW}
_PAIRINGS = {1: Pairing.TRIPS, 2: Pairing.PAIRED, 3: Pairing.UNPAIRED}


def classify_suit_pattern(board: Board) -> SuitPattern:
    return _SUIT_PATTERNS[len({card.suit for card in board})]


def classify_pairing(board: Board) -> Pairing:
    return _PAIRINGS[len(set(board.ranks))]


# ---------------------------------------------------------------------------
# Connectedness


def is_normal_straight_possible(board: Board) -> bool:
    """Three unique ranks spanning at most five ranks (aces high)."""

    unique = board.unique_rank_cards()
    return any(
        int(window[-1].rank) - int(window[0].rank) <= MAX_STRAIGHT_SPAN
        for window in (unique[index : index + 3] for index in range(len(unique) - 2))
    )


def is_wheel_possible(board: Board) -> bool:
    return all(card.rank.is_wheel for card in board)


def is_any_straight_possible(board: Board) -> bool:
    return is_normal_straight_possible(board) or is_wheel_possible(board)


def is_only_oesd_possible(board: Board) -> bool:
    if is_any_straight_possible(board):
        return False
    distances = card_distances(card for card in board if not card.is_ace)
    return any(gap in OESD_DISTANCES for gap in distances)


def is_only_gutshot_possible(board: Board) -> bool:
    if is_any_straight_possible(board) or is_only_oesd_possible(board):
        return False
    return min(card_distances(board)) <= MAX_STRAIGHT_SPAN


def is_disconnected(board: Board) -> bool:
    if board.highest.is_ace:
        return False
    return min(card_distances(board)) > MAX_STRAIGHT_SPAN


CONNECTION_PREDICATES: Mapping[Connection, Callable[[Board], bool]] = {
    Connection.DISCONNECTED: is_disconnected,
    Connection.GUTSHOT: is_only_gutshot_possible,
    Connection.OESD: is_only_oesd_possible,
    Connection.WHEEL: is_wheel_possible,
    Connection.NORMAL_STRAIGHT: is_normal_straight_possible,
    Connection.ANY_STRAIGHT: is_any_straight_possible,
}


def has_connection(board: Board, connection: Connection) -> bool:
    return CONNECTION_PREDICATES[connection](board)


def classify_connection(board: Board) -> Optional[Connection]:
    """Return the precedence-ordered connectedness bucket of ``board``.

    Ace-high boards whose gaps are all wider than a gutshot fall in no
    bucket and return ``None``.
    """

    if is_any_straight_possible(board):
        return Connection.ANY_STRAIGHT
    if is_only_oesd_possible(board):
        return Connection.OESD
    if is_only_gutshot_possible(board):
        return Connection.GUTSHOT
    if is_disconnected(board):
        return Connection.DISCONNECTED
    return None


def texture_codes(board: Board) -> Dict[str, Optional[str]]:
    """Return the board's bucket code per dimension, for serialisation."""

    connection = classify_connection(board)
    return {
        "height": classify_height(board).code,
        "suits": classify_suit_pattern(board).code,
        "connection": connection.code if connection is not None else None,
        "pairing": classify_pairing(board).code,
    }


# ---------------------------------------------------------------------------
# Filter

E = TypeVar("E", bound=_CodedEnum)


def _parse_codes(enum_cls: Type[E], codes: Iterable[str]) -> FrozenSet[E]:
    return frozenset(enum_cls.from_code(code) for code in codes)


@dataclass(frozen=True)
class FilterSpec:
    """Texture filter: AND across dimensions, OR within one.

    An empty set leaves its dimension unconstrained.
    """

    heights: FrozenSet[Height] = field(default_factory=frozenset)
    suits: FrozenSet[SuitPattern] = field(default_factory=frozenset)
    connections: FrozenSet[Connection] = field(default_factory=frozenset)
    pairings: FrozenSet[Pairing] = field(default_factory=frozenset)

    @classmethod
    def from_codes(
        cls,
        heights: Iterable[str] = (),
        suits: Iterable[str] = (),
        connections: Iterable[str] = (),
        pairings: Iterable[str] = (),
    ) -> "FilterSpec":
        return cls(
            heights=_parse_codes(Height, heights),
            suits=_parse_codes(SuitPattern, suits),
            connections=_parse_codes(Connection, connections),
            pairings=_parse_codes(Pairing, pairings),
        )

    def dimensions(self) -> Tuple[Tuple[FrozenSet[_CodedEnum], Callable[[Board, _CodedEnum], bool]], ...]:
        return (
            (self.heights, lambda board, value: classify_height(board) is value),
            (self.suits, lambda board, value: classify_suit_pattern(board) is value),
            (self.connections, has_connection),
            (self.pairings, lambda board, value: classify_pairing(board) is value),
        )

    @property
    def is_wildcard(self) -> bool:
        return not (self.heights or self.suits or self.connections or self.pairings)

    def describe(self) -> str:
        parts = []
        for name, values in (
            ("heights", self.heights),
            ("suits", self.suits),
            ("connections", self.connections),
            ("pairings", self.pairings),
        ):
            if values:
                parts.append(f"{name}={','.join(sorted(value.code for value in values))}")
        return " ".join(parts) or "any board"


def board_matches(board: Board, spec: FilterSpec) -> bool:
    for values, predicate in spec.dimensions():
        if values and not any(predicate(board, value) for value in values):
            return False
    return True


__all__ = [
    "CONNECTION_PREDICATES",
    "Connection",
    "FilterSpec",
    "Height",
    "Pairing",
    "SuitPattern",
    "board_matches",
    "classify_connection",
    "classify_height",
    "classify_pairing",
    "classify_suit_pattern",
    "has_connection",
    "is_any_straight_possible",
    "is_disconnected",
    "is_normal_straight_possible",
    "is_only_gutshot_possible",
    "is_only_oesd_possible",
    "is_wheel_possible",
    "texture_codes",
]
