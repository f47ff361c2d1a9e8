"""Tests for FastAPI application factory."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from unittest.mock import patch

from fastapi.testclient import TestClient

from flop_stats.app import create_app

HEADER = "Flop\tEquity\tEV\tBet\tCheck\n"


def _write_tree(root: Path, rows_by_size: dict[str, list[str]]) -> None:
    for size, rows in rows_by_size.items():
        directory = root / "BTN_BB" / size
        directory.mkdir(parents=True)
        (directory / "flop_check.txt").write_text(HEADER + "\n".join(rows) + "\n", encoding="utf-8")


def test_health_endpoint() -> None:
    client = TestClient(create_app())
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_metadata_endpoint() -> None:
    client = TestClient(create_app())
    response = client.get("/api/metadata")
    assert response.status_code == 200
    payload = response.json()
    assert payload["service"] == "Flop Stats"
    assert payload["version"] == "0.1.0"


def test_flop_summary_endpoint() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        rows = ["Kh8h2h\t60\t30\t20\t70", "Th9h8h\t40\t20\t10\t50", "Ks8d2c\t50\t10\t30\t60"]
        _write_tree(root, {"33": rows, "75": rows})
        with patch.dict(os.environ, {"FLOP_STATS_DATA_DIR": str(root)}):
            client = TestClient(create_app())
            response = client.get(
                "/api/flop/summary",
                params=[
                    ("positions", "BTN"),
                    ("positions", "BB"),
                    ("actions", "X"),
                    ("betsizes", "33"),
                    ("betsizes", "75"),
                    ("suits", "M"),
                ],
            )
    assert response.status_code == 200
    payload = response.json()
    assert [row["size"] for row in payload["rows"]] == ["33", "75"]
    assert payload["rows"][0]["equity"] == 50.0
    assert payload["boards"] == ["2h8hKh", "8h9hTh"]
    assert payload["textures"]["8h9hTh"]["connection"] == "AS"


def test_flop_summary_bad_code() -> None:
    client = TestClient(create_app())
    response = client.get(
        "/api/flop/summary",
        params=[("positions", "BTN"), ("positions", "BB"), ("actions", "X"), ("betsizes", "66")],
    )
    assert response.status_code == 422
    assert "betsize" in response.json()["detail"]


def test_flop_summary_missing_situation() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        with patch.dict(os.environ, {"FLOP_STATS_DATA_DIR": tmp}):
            client = TestClient(create_app())
            response = client.get(
                "/api/flop/summary",
                params=[("positions", "CO"), ("positions", "BB"), ("actions", "X"), ("betsizes", "33")],
            )
    assert response.status_code == 404


def test_flop_summary_no_matching_boards() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        _write_tree(Path(tmp), {"50": ["Kh8h2h\t60\t30\t20\t70"]})
        with patch.dict(os.environ, {"FLOP_STATS_DATA_DIR": tmp}):
            client = TestClient(create_app())
            response = client.get(
                "/api/flop/summary",
                params=[
                    ("positions", "BTN"),
                    ("positions", "BB"),
                    ("actions", "X"),
                    ("betsizes", "50"),
                    ("pairings", "T"),
                ],
            )
    assert response.status_code == 409
