"""Command-line front-end: summarise one situation across bet sizes."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from flop_stats.data.situation import BetSize, Situation
from flop_stats.data.textures import Connection, FilterSpec, Height, Pairing, SuitPattern
from flop_stats.errors import FlopStatsError, ParseError
from flop_stats.services.flop_summary import SummaryRequest, summarize_situation
from flop_stats.services.report import render_report
from flop_stats.services.solver_store import SolverStore

EXIT_ERROR = 2


def _codes(enum_cls) -> str:
    return ", ".join(member.value for member in enum_cls)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flop-stats",
        description="Average solver statistics over flops sharing texture features.",
    )
    parser.add_argument("-p", "--positions", nargs=2, required=True, metavar=("IP", "OOP"),
                        help="In-position and out-of-position seat (LJ, HJ, CO, BTN, SB, BB)")
    parser.add_argument("-a", "--actions", nargs="+", required=True, metavar="ACTION",
                        help="Action line leading to the decision (X, B, C, R, F)")
    parser.add_argument("-b", "--betsizes", nargs="+", required=True, metavar="SIZE",
                        help=f"Bet sizes to compare ({_codes(BetSize)})")
    parser.add_argument("-H", "--heights", nargs="+", default=[], metavar="CODE",
                        help=f"Board heights ({_codes(Height)})")
    parser.add_argument("-s", "--suits", nargs="+", default=[], metavar="CODE",
                        help=f"Suit patterns ({_codes(SuitPattern)})")
    parser.add_argument("-c", "--connections", nargs="+", default=[], metavar="CODE",
                        help=f"Connectedness ({_codes(Connection)})")
    parser.add_argument("-t", "--pairings", nargs="+", default=[], metavar="CODE",
                        help=f"Pairing ({_codes(Pairing)})")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Root of the solver output tree (defaults to $FLOP_STATS_DATA_DIR or ./data)")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log progress (-v) or debug detail (-vv) to stderr")
    return parser


def build_request(args: argparse.Namespace) -> SummaryRequest:
    """Turn parsed arguments into a validated summary request."""

    bet_sizes = tuple(BetSize.from_code(code) for code in args.betsizes)
    if not bet_sizes:
        raise ParseError("betsize", "")
    return SummaryRequest(
        situation=Situation.from_codes(args.positions, args.actions),
        bet_sizes=bet_sizes,
        filter_spec=FilterSpec.from_codes(args.heights, args.suits, args.connections, args.pairings),
    )


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(sys.argv[1:] if argv is None else list(argv))
    _configure_logging(args.verbose)

    try:
        request = build_request(args)
        result = summarize_situation(SolverStore.from_defaults(args.data_dir), request)
    except FlopStatsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    print(render_report(result))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
