"""Location of the solver output tree.

The data directory defaults to ``data`` under the current working directory
and can be moved with the ``FLOP_STATS_DATA_DIR`` environment variable or an
explicit override (the CLI's ``--data-dir``).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

DEFAULT_DATA_DIR_NAME = "data"
DATA_DIR_ENV = "FLOP_STATS_DATA_DIR"


@dataclass(frozen=True)
class DataPaths:
    """Resolved filesystem locations for solver output."""

    data_dir: Path

    def is_available(self) -> bool:
        return self.data_dir.is_dir()


def default_data_dir() -> Path:
    """Return ``./data`` relative to the directory the process runs in."""

    return Path.cwd() / DEFAULT_DATA_DIR_NAME


def resolve_data_dir(override: Optional[Union[str, Path]] = None) -> Path:
    """Return the root directory of the solver output hierarchy.

    An explicit ``override`` wins, then the `FLOP_STATS_DATA_DIR`
    environment variable, then ``./data``.
    """

    if override:
        return Path(override).expanduser().resolve()
    env_value = os.getenv(DATA_DIR_ENV)
    if env_value:
        return Path(env_value).expanduser().resolve()
    return default_data_dir()


def build_data_paths(data_dir: Optional[Union[str, Path]] = None) -> DataPaths:
    """Construct a `DataPaths` instance using resolution helpers."""

    return DataPaths(data_dir=resolve_data_dir(data_dir))


__all__ = [
    "DATA_DIR_ENV",
    "DEFAULT_DATA_DIR_NAME",
    "DataPaths",
    "build_data_paths",
    "default_data_dir",
    "resolve_data_dir",
]
