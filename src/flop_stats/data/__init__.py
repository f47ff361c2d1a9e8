"""Board, texture and statistics types shared across the package."""

from .board import Board
from .cards import Card, Rank, Suit
from .situation import Action, BetSize, Position, Situation
from .stat_row import StatRow, parse_stat_line
from .textures import Connection, FilterSpec, Height, Pairing, SuitPattern, board_matches

__all__ = [
    "Action",
    "BetSize",
    "Board",
    "Card",
    "Connection",
    "FilterSpec",
    "Height",
    "Pairing",
    "Position",
    "Rank",
    "Situation",
    "StatRow",
    "Suit",
    "SuitPattern",
    "board_matches",
    "parse_stat_line",
]
