"""Tests for data directory resolution."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from flop_stats.config import DATA_DIR_ENV, build_data_paths, resolve_data_dir


class ResolveDataDirTests(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name).resolve()
        previous = os.getcwd()
        self.addCleanup(os.chdir, previous)
        os.chdir(self.root)

    def test_default_follows_working_directory(self) -> None:
        env = {key: value for key, value in os.environ.items() if key != DATA_DIR_ENV}
        with patch.dict(os.environ, env, clear=True):
            self.assertEqual(resolve_data_dir(), self.root / "data")
            nested = self.root / "nested"
            nested.mkdir()
            os.chdir(nested)
            self.assertEqual(resolve_data_dir(), nested / "data")

    def test_environment_overrides_default(self) -> None:
        with patch.dict(os.environ, {DATA_DIR_ENV: str(self.root / "solver")}):
            self.assertEqual(resolve_data_dir(), self.root / "solver")

    def test_explicit_override_wins(self) -> None:
        with patch.dict(os.environ, {DATA_DIR_ENV: str(self.root / "solver")}):
            paths = build_data_paths(self.root / "other")
        self.assertEqual(paths.data_dir, self.root / "other")
        self.assertFalse(paths.is_available())


if __name__ == "__main__":
    unittest.main()
