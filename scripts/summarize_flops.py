#!/usr/bin/env python3
"""Summarise solver output for one situation across bet sizes."""

from __future__ import annotations

from flop_stats.cli import main


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
