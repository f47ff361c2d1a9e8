"""Unit tests for board parsing."""

from __future__ import annotations

import itertools
import unittest

from flop_stats.data.board import Board
from flop_stats.data.cards import Card, Rank
from flop_stats.errors import ParseError


class BoardParseTests(unittest.TestCase):
    def test_cards_sorted_ascending(self) -> None:
        board = Board.parse("Ts8h9c")
        self.assertEqual(board.ranks, (Rank.EIGHT, Rank.NINE, Rank.TEN))
        self.assertEqual(str(board), "8h9cTs")
        self.assertEqual(board.lowest, Card.parse("8h"))
        self.assertEqual(board.highest, Card.parse("Ts"))

    def test_paired_and_trips_boards_are_valid(self) -> None:
        self.assertEqual(len(Board.parse("8s8d2c")), 3)
        self.assertEqual(Board.parse("8s8d8c").ranks, (Rank.EIGHT,) * 3)

    def test_order_of_input_does_not_matter(self) -> None:
        boards = {Board.parse("".join(perm)) for perm in itertools.permutations(("Kh", "8h", "8c"))}
        self.assertEqual(len(boards), 1)

    def test_round_trip_normalised_form(self) -> None:
        for text in ("Ts9c8h", "As2c3h", "KhKs8c", "8s8d8c", "2d7hQc"):
            normalised = str(Board.parse(text))
            self.assertEqual(str(Board.parse(normalised)), normalised)
            self.assertEqual(Board.parse(normalised), Board.parse(text))

    def test_rejects_wrong_length(self) -> None:
        for bad in ("", "Ts9c", "Ts9c8h7d", "Ts9c8"):
            with self.assertRaises(ParseError) as ctx:
                Board.parse(bad)
            self.assertEqual(ctx.exception.kind, "board")

    def test_rejects_bad_cards(self) -> None:
        for bad in ("Ts9c8x", "1s9c8h", "TS9c8h"):
            with self.assertRaises(ParseError) as ctx:
                Board.parse(bad)
            self.assertEqual(ctx.exception.kind, "board")

    def test_rejects_duplicate_cards(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            Board.parse("AsAs2c")
        self.assertEqual(ctx.exception.kind, "board")

    def test_unique_rank_cards(self) -> None:
        board = Board.parse("KhKs8c")
        self.assertEqual([card.rank for card in board.unique_rank_cards()], [Rank.EIGHT, Rank.KING])

    def test_boards_are_immutable(self) -> None:
        board = Board.parse("Ts9c8h")
        with self.assertRaises(AttributeError):
            board.cards = ()  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
