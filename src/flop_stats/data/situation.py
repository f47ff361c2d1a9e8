"""Positions, bet sizes and action sequences that identify a solver run."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Optional, Tuple

from flop_stats.errors import ParseError


class Position(Enum):
    LJ = "LJ"
    HJ = "HJ"
    CO = "CO"
    BTN = "BTN"
    SB = "SB"
    BB = "BB"

    @classmethod
    def from_code(cls, code: str) -> "Position":
        try:
            return cls(code.strip().upper())
        except (AttributeError, ValueError):
            raise ParseError("position", code) from None

    def __str__(self) -> str:
        return self.value


class BetSize(Enum):
    """Flop bet size in percent of the pot.

    The value doubles as the directory name that holds the variant's output.
    """

    SIZE_33 = "33"
    SIZE_50 = "50"
    SIZE_75 = "75"
    SIZE_150 = "150"

    @classmethod
    def from_code(cls, code: str) -> "BetSize":
        try:
            return cls(str(code).strip())
        except ValueError:
            raise ParseError("betsize", code) from None

    @property
    def percent(self) -> int:
        return int(self.value)

    def __str__(self) -> str:
        return self.value


class Action(Enum):
    CHECK = "X"
    BET = "B"
    CALL = "C"
    RAISE = "R"
    FOLD = "F"

    @classmethod
    def from_code(cls, code: str) -> "Action":
        try:
            return cls(code.strip().upper())
        except (AttributeError, ValueError):
            raise ParseError("action", code) from None

    @property
    def long_name(self) -> str:
        """Name used for the action inside solver output file names."""

        return self.name.lower()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Situation:
    """Seating, action line and (optionally) bet size of one solver file."""

    in_position: Position
    out_of_position: Position
    actions: Tuple[Action, ...] = field(default_factory=tuple)
    bet_size: Optional[BetSize] = None

    def __post_init__(self) -> None:
        if not self.actions:
            raise ParseError("action", "")
        object.__setattr__(self, "actions", tuple(self.actions))

    @classmethod
    def from_codes(
        cls,
        positions: Iterable[str],
        actions: Iterable[str],
        bet_size: Optional[str] = None,
    ) -> "Situation":
        parsed_positions = [Position.from_code(code) for code in positions]
        if len(parsed_positions) != 2:
            raise ParseError("positions", " ".join(str(position) for position in parsed_positions))
        return cls(
            in_position=parsed_positions[0],
            out_of_position=parsed_positions[1],
            actions=tuple(Action.from_code(code) for code in actions),
            bet_size=BetSize.from_code(bet_size) if bet_size is not None else None,
        )

    def with_bet_size(self, bet_size: BetSize) -> "Situation":
        return replace(self, bet_size=bet_size)

    def __str__(self) -> str:
        line = "-".join(action.long_name for action in self.actions)
        size = f" @ {self.bet_size}%" if self.bet_size is not None else ""
        return f"{self.in_position} vs {self.out_of_position} {line}{size}"


__all__ = ["Action", "BetSize", "Position", "Situation"]
