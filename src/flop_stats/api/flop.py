"""Flop summary routes."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Query

from flop_stats.data.situation import BetSize, Situation
from flop_stats.data.textures import FilterSpec, texture_codes
from flop_stats.errors import FlopStatsError, ParseError, SituationNotFoundError
from flop_stats.services.flop_summary import SummaryRequest, summarize_situation
from flop_stats.services.solver_store import SolverStore

router = APIRouter(prefix="/api/flop", tags=["flop"])


def _status_for(exc: FlopStatsError) -> int:
    if isinstance(exc, ParseError):
        return 422
    if isinstance(exc, SituationNotFoundError):
        return 404
    return 409


@router.get("/summary", summary="Average solver stats over matching flops")
async def flop_summary(
    positions: List[str] = Query(..., description="In-position then out-of-position code"),
    actions: List[str] = Query(..., description="Action line codes (X, B, C, R, F)"),
    betsizes: List[str] = Query(..., description="Bet sizes to compare (33, 50, 75, 150)"),
    heights: List[str] = Query(default=[]),
    suits: List[str] = Query(default=[]),
    connections: List[str] = Query(default=[]),
    pairings: List[str] = Query(default=[]),
) -> dict:
    try:
        request = SummaryRequest(
            situation=Situation.from_codes(positions, actions),
            bet_sizes=tuple(BetSize.from_code(code) for code in betsizes),
            filter_spec=FilterSpec.from_codes(heights, suits, connections, pairings),
        )
        result = summarize_situation(SolverStore.from_defaults(), request)
    except FlopStatsError as exc:
        raise HTTPException(status_code=_status_for(exc), detail=str(exc)) from exc

    payload = result.as_dict()
    payload["textures"] = {str(board): texture_codes(board) for board in result.boards}
    return payload


__all__ = ["router"]
