"""Read-only access to the on-disk solver output hierarchy.

Layout::

    <data_dir>/<dir naming both positions>/<bet size>/<prefix>_<action>_..._<action>.txt

Each file is a tab-separated table with a header line followed by one line
per flop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from flop_stats.config import build_data_paths
from flop_stats.data.situation import Action, BetSize, Situation
from flop_stats.errors import SituationNotFoundError

logger = logging.getLogger(__name__)

ACTION_SEPARATOR = "_"


def _visible_entries(path: Path) -> Iterator[Path]:
    try:
        entries = sorted(path.iterdir())
    except OSError as exc:
        raise SituationNotFoundError("could not read directory", path) from exc
    for entry in entries:
        if not entry.name.startswith("."):
            yield entry


def _matches_actions(path: Path, actions: Sequence[Action]) -> bool:
    parts = path.stem.lower().split(ACTION_SEPARATOR)
    return len(parts) - 1 == len(actions) and all(
        part == action.long_name for part, action in zip(parts[1:], actions)
    )


@dataclass(frozen=True)
class SolverStore:
    """Facade over one solver output directory tree."""

    data_dir: Path

    @classmethod
    def from_defaults(cls, data_dir: Optional[Path] = None) -> "SolverStore":
        return cls(data_dir=build_data_paths(data_dir).data_dir)

    def is_available(self) -> bool:
        return self.data_dir.is_dir()

    def position_dir(self, situation: Situation) -> Path:
        wanted = (str(situation.in_position), str(situation.out_of_position))
        for entry in _visible_entries(self.data_dir):
            name = entry.name.upper()
            if entry.is_dir() and all(code in name for code in wanted):
                return entry
        raise SituationNotFoundError(f"no directory for positions {' / '.join(wanted)}", self.data_dir)

    def bet_size_dir(self, situation: Situation, bet_size: BetSize) -> Path:
        position_dir = self.position_dir(situation)
        for entry in _visible_entries(position_dir):
            if entry.is_dir() and entry.name == str(bet_size):
                return entry
        raise SituationNotFoundError(f"no directory for bet size {bet_size}", position_dir)

    def action_file(self, situation: Situation) -> Path:
        if situation.bet_size is None:
            raise SituationNotFoundError("situation has no bet size", self.data_dir)
        size_dir = self.bet_size_dir(situation, situation.bet_size)
        for entry in _visible_entries(size_dir):
            if entry.is_file() and _matches_actions(entry, situation.actions):
                logger.debug("Resolved %s to %s", situation, entry)
                return entry
        line = ACTION_SEPARATOR.join(action.long_name for action in situation.actions)
        raise SituationNotFoundError(f"no file for action line {line}", size_dir)

    def read_lines(self, situation: Situation) -> List[str]:
        """Return the lines of the situation's file after the header.

        Blank lines are kept so callers can report file line numbers.
        """

        path = self.action_file(situation)
        with path.open("r", encoding="utf-8") as handle:
            lines = handle.read().splitlines()
        logger.info("Read %d lines from %s", max(len(lines) - 1, 0), path)
        return lines[1:]


__all__ = ["ACTION_SEPARATOR", "SolverStore"]
