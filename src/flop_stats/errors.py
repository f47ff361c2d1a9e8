"""Error taxonomy for the flop statistics pipeline.

Every error here is deterministic for a given input: nothing is retried, the
caller reports the message (which names the offending token or board) and
stops.
"""

from __future__ import annotations

from typing import Iterable, Optional


class FlopStatsError(Exception):
    """Base class for all errors raised by ``flop_stats``."""


class ParseError(FlopStatsError, ValueError):
    """Malformed rank, suit, card, board, numeric field or filter code."""

    def __init__(self, kind: str, value: object, line_number: Optional[int] = None) -> None:
        self.kind = kind
        self.value = value
        self.line_number = line_number
        message = f"error parsing {kind} from {value!r}"
        if line_number is not None:
            message += f" (line {line_number})"
        super().__init__(message)

    def at_line(self, line_number: int) -> "ParseError":
        """Return a copy of this error that cites ``line_number``."""

        return type(self)(self.kind, self.value, line_number)


class InvalidBoardError(ParseError):
    """A solver output line whose board column is not a valid flop."""

    def __init__(self, value: object, line_number: Optional[int] = None) -> None:
        super().__init__("board", value, line_number)

    def at_line(self, line_number: int) -> "InvalidBoardError":
        return InvalidBoardError(self.value, line_number)


class DuplicateBoardError(FlopStatsError):
    """The same board appears twice in one solver output file."""

    def __init__(self, board: str, first_line: int, second_line: int) -> None:
        self.board = board
        self.first_line = first_line
        self.second_line = second_line
        super().__init__(f"board {board} listed twice (lines {first_line} and {second_line})")


class NoMatchingBoardsError(FlopStatsError):
    """The texture filter matched no board, so there is nothing to average."""

    def __init__(self, tag: Optional[str] = None) -> None:
        self.tag = tag
        suffix = f" for bet size {tag}" if tag is not None else ""
        super().__init__(f"no boards match the requested filter{suffix}")


class SituationMismatchError(FlopStatsError):
    """Two bet-size variants of one situation retained different board sets."""

    def __init__(
        self,
        expected_tag: Optional[str],
        actual_tag: Optional[str],
        differing: Iterable[str] = (),
    ) -> None:
        self.expected_tag = expected_tag
        self.actual_tag = actual_tag
        self.differing = sorted(differing)
        preview = ", ".join(self.differing[:10])
        if len(self.differing) > 10:
            preview += ", ..."
        super().__init__(
            f"bet sizes {expected_tag} and {actual_tag} considered different boards: {preview}"
        )


class SituationNotFoundError(FlopStatsError):
    """No solver output exists on disk for the requested situation."""

    def __init__(self, message: str, path: object) -> None:
        self.path = path
        super().__init__(f"{message}: {path}")


__all__ = [
    "DuplicateBoardError",
    "FlopStatsError",
    "InvalidBoardError",
    "NoMatchingBoardsError",
    "ParseError",
    "SituationMismatchError",
    "SituationNotFoundError",
]
