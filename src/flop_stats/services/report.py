"""Tabular rendering of summarised bet-size rows."""

from __future__ import annotations

from typing import List, Sequence

import pandas as pd

from flop_stats.data.stat_row import StatRow
from flop_stats.services.flop_summary import SummaryResult

REPORT_COLUMNS: List[str] = ["Size", "EQ", "EV", "Bet", "Check", "EV Difference"]
MISSING_SIZE = "-"
# EV is reported per hand in big blinds; ten times the gap is bb per 100 hands.
BB_PER_100_FACTOR = 10.0


def best_ev_row(rows: Sequence[StatRow]) -> StatRow:
    if not rows:
        raise ValueError("cannot pick the best row of an empty result")
    return max(rows, key=lambda row: row.ev)


def _ev_difference(row: StatRow, best: StatRow) -> str:
    if row is best:
        return "0"
    diff = row.ev - best.ev
    return f"{diff:.2f} = {diff * BB_PER_100_FACTOR:.1f} BB/100"


def build_report_frame(rows: Sequence[StatRow]) -> pd.DataFrame:
    """Return one report line per bet size, numbers rounded to two places."""

    if not rows:
        return pd.DataFrame(columns=REPORT_COLUMNS)
    best = best_ev_row(rows)
    records = [
        {
            "Size": row.tag if row.tag is not None else MISSING_SIZE,
            "EQ": round(row.equity, 2),
            "EV": round(row.ev, 2),
            "Bet": round(row.bet_freq, 2),
            "Check": round(row.check_freq, 2),
            "EV Difference": _ev_difference(row, best),
        }
        for row in rows
    ]
    return pd.DataFrame.from_records(records, columns=REPORT_COLUMNS)


def render_report(result: SummaryResult) -> str:
    """Render the considered boards followed by the bet-size table."""

    boards = ", ".join(str(board) for board in result.boards)
    frame = build_report_frame(result.rows)
    table = frame.to_string(index=False, float_format=lambda value: f"{value:.2f}")
    return f"Considered boards: {boards}\n\n{table}"


__all__ = ["BB_PER_100_FACTOR", "REPORT_COLUMNS", "best_ev_row", "build_report_frame", "render_report"]
