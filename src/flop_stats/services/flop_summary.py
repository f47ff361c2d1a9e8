"""Average solver statistics over the flops that match a texture filter.

One situation (positions plus action line) is solved once per bet size.
Each bet size is reduced to a single averaged :class:`StatRow`; the variants
are only comparable when every one of them averaged the same flops, which is
checked before anything is returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import reduce
from operator import add
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from flop_stats.data.board import Board
from flop_stats.data.situation import BetSize, Situation
from flop_stats.data.stat_row import StatRow, parse_stat_line
from flop_stats.data.textures import FilterSpec, board_matches
from flop_stats.errors import (
    DuplicateBoardError,
    InvalidBoardError,
    NoMatchingBoardsError,
    ParseError,
    SituationMismatchError,
)
from flop_stats.services.solver_store import SolverStore

logger = logging.getLogger(__name__)

# Solver files start with a header, so the first data line is line 2.
FIRST_DATA_LINE = 2


@dataclass(frozen=True)
class VariantResult:
    """Averaged row of one bet size and the flops that went into it."""

    row: StatRow
    boards: Tuple[Board, ...]


@dataclass(frozen=True)
class SummaryResult:
    """Averaged rows of every requested bet size over a shared flop set."""

    rows: Tuple[StatRow, ...]
    boards: Tuple[Board, ...]

    def as_dict(self) -> dict:
        return {
            "boards": [str(board) for board in self.boards],
            "rows": [row.as_dict() for row in self.rows],
        }


@dataclass(frozen=True)
class SummaryRequest:
    """Everything needed to summarise one situation across bet sizes."""

    situation: Situation
    bet_sizes: Tuple[BetSize, ...]
    filter_spec: FilterSpec = FilterSpec()


def _parse_lines(lines: Iterable[str], first_line_number: int) -> List[Tuple[Board, StatRow]]:
    parsed: List[Tuple[Board, StatRow]] = []
    seen: Dict[Board, int] = {}
    for line_number, line in enumerate(lines, start=first_line_number):
        if not line.rstrip("\r\n"):
            continue
        try:
            board_text, row = parse_stat_line(line)
        except ParseError as exc:
            raise exc.at_line(line_number) from exc
        try:
            board = Board.parse(board_text)
        except ParseError as exc:
            raise InvalidBoardError(board_text, line_number) from exc
        if board in seen:
            raise DuplicateBoardError(str(board), seen[board], line_number)
        seen[board] = line_number
        parsed.append((board, row))
    return parsed


def build_aggregate_row(
    lines: Iterable[str],
    filter_spec: FilterSpec,
    tag: Optional[str] = None,
    *,
    first_line_number: int = 1,
) -> VariantResult:
    """Average the statistics of every flop in ``lines`` matching ``filter_spec``.

    ``lines`` are data lines without the header; empty lines are skipped.
    ``first_line_number`` is the file line number of the first entry and is
    only used in error messages. The averaged row carries ``tag``.
    """

    parsed = _parse_lines(lines, first_line_number)
    retained = [(board, row) for board, row in parsed if board_matches(board, filter_spec)]
    logger.info("Bet size %s: %d of %d boards match", tag or "-", len(retained), len(parsed))
    if not retained:
        raise NoMatchingBoardsError(tag)

    total = reduce(add, (row for _, row in retained))
    average = (total / len(retained)).with_tag(tag)
    return VariantResult(row=average, boards=tuple(board for board, _ in retained))


def build_all_variants(
    bet_sizes: Sequence[BetSize],
    lines_by_bet_size: Mapping[BetSize, Iterable[str]],
    filter_spec: FilterSpec,
    *,
    first_line_number: int = 1,
) -> SummaryResult:
    """Aggregate every bet size and check they all averaged the same flops."""

    if not bet_sizes:
        raise ParseError("betsize", "")
    logger.debug("Filtering boards by %s", filter_spec.describe())

    results = [
        build_aggregate_row(
            lines_by_bet_size[bet_size],
            filter_spec,
            str(bet_size),
            first_line_number=first_line_number,
        )
        for bet_size in bet_sizes
    ]

    reference = results[0]
    reference_boards = set(reference.boards)
    for result in results[1:]:
        boards = set(result.boards)
        if boards != reference_boards:
            raise SituationMismatchError(
                reference.row.tag,
                result.row.tag,
                (str(board) for board in reference_boards.symmetric_difference(boards)),
            )

    return SummaryResult(rows=tuple(result.row for result in results), boards=reference.boards)


def summarize_situation(store: SolverStore, request: SummaryRequest) -> SummaryResult:
    """Load every bet size of ``request`` from ``store`` and summarise it."""

    lines_by_bet_size = {
        bet_size: store.read_lines(request.situation.with_bet_size(bet_size))
        for bet_size in request.bet_sizes
    }
    return build_all_variants(
        request.bet_sizes,
        lines_by_bet_size,
        request.filter_spec,
        first_line_number=FIRST_DATA_LINE,
    )


__all__ = [
    "FIRST_DATA_LINE",
    "SummaryRequest",
    "SummaryResult",
    "VariantResult",
    "build_aggregate_row",
    "build_all_variants",
    "summarize_situation",
]
