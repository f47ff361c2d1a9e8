"""Per-board solver statistics and their averaging arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from flop_stats.errors import ParseError

FIELD_SEPARATOR = "\t"
STAT_COLUMNS = ("equity", "ev", "bet_freq", "check_freq")
MIN_FIELDS = 1 + len(STAT_COLUMNS)


@dataclass(frozen=True)
class StatRow:
    """One solver statistic sample, or an average of several.

    ``tag`` is the bet size the sample belongs to; rows read from a file
    carry no tag until the pipeline attaches one to the average.
    """

    equity: float
    ev: float
    bet_freq: float
    check_freq: float
    tag: Optional[str] = None

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "StatRow":
        """Build a row from the four numeric columns, in file order.

        Every value must be a finite number; `nan` and `inf` are rejected.
        """

        if len(fields) < len(STAT_COLUMNS):
            raise ParseError("stat row", FIELD_SEPARATOR.join(fields))
        values = []
        for name, raw in zip(STAT_COLUMNS, fields):
            try:
                value = float(raw)
            except (TypeError, ValueError):
                raise ParseError(name, raw) from None
            if not math.isfinite(value):
                raise ParseError(name, raw)
            values.append(value)
        return cls(*values)

    def with_tag(self, tag: Optional[str]) -> "StatRow":
        return replace(self, tag=tag)

    def __add__(self, other: "StatRow") -> "StatRow":
        if not isinstance(other, StatRow):
            return NotImplemented
        if self.tag != other.tag:
            raise ValueError(f"cannot add rows tagged {self.tag!r} and {other.tag!r}")
        return StatRow(
            equity=self.equity + other.equity,
            ev=self.ev + other.ev,
            bet_freq=self.bet_freq + other.bet_freq,
            check_freq=self.check_freq + other.check_freq,
            tag=self.tag,
        )

    def __truediv__(self, count: int) -> "StatRow":
        if isinstance(count, bool) or not isinstance(count, int):
            return NotImplemented
        if count <= 0:
            raise ValueError(f"row count must be positive, got {count}")
        return StatRow(
            equity=self.equity / count,
            ev=self.ev / count,
            bet_freq=self.bet_freq / count,
            check_freq=self.check_freq / count,
            tag=self.tag,
        )

    def as_dict(self) -> dict[str, object]:
        return {
            "size": self.tag,
            "equity": self.equity,
            "ev": self.ev,
            "bet_freq": self.bet_freq,
            "check_freq": self.check_freq,
        }


def parse_stat_line(line: str) -> Tuple[str, StatRow]:
    """Split a solver output line into its board string and statistics.

    Fields past the fourth statistic are ignored.
    """

    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(fields) < MIN_FIELDS:
        raise ParseError("stat row", line)
    return fields[0], StatRow.from_fields(fields[1:MIN_FIELDS])


__all__ = ["FIELD_SEPARATOR", "STAT_COLUMNS", "StatRow", "parse_stat_line"]
