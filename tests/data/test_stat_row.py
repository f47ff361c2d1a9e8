"""Unit tests for solver stat rows."""

from __future__ import annotations

import unittest

from flop_stats.data.stat_row import StatRow, parse_stat_line
from flop_stats.errors import ParseError


class StatRowTests(unittest.TestCase):
    def test_parse_stat_line(self) -> None:
        board, row = parse_stat_line("Ts9c8h\t60.5\t30.25\t20\t70\n")
        self.assertEqual(board, "Ts9c8h")
        self.assertEqual(row, StatRow(equity=60.5, ev=30.25, bet_freq=20.0, check_freq=70.0))
        self.assertIsNone(row.tag)

    def test_extra_fields_are_ignored(self) -> None:
        _, row = parse_stat_line("Ts9c8h\t1\t2\t3\t4\tignored\t99")
        self.assertEqual(row, StatRow(1.0, 2.0, 3.0, 4.0))

    def test_too_few_fields(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            parse_stat_line("Ts9c8h\t1\t2\t3")
        self.assertEqual(ctx.exception.kind, "stat row")

    def test_non_numeric_field(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            parse_stat_line("Ts9c8h\t1\tabc\t3\t4")
        self.assertEqual(ctx.exception.kind, "ev")
        self.assertEqual(ctx.exception.value, "abc")

    def test_non_finite_field(self) -> None:
        for raw in ("nan", "inf", "-inf", "NaN"):
            with self.subTest(raw=raw):
                with self.assertRaises(ParseError) as ctx:
                    parse_stat_line(f"Ts9c8h\t1\t{raw}\t3\t4")
                self.assertEqual(ctx.exception.kind, "ev")
                self.assertEqual(ctx.exception.value, raw)

    def test_addition_and_division_average(self) -> None:
        first = StatRow(equity=60, ev=30, bet_freq=20, check_freq=70)
        second = StatRow(equity=40, ev=20, bet_freq=10, check_freq=50)
        self.assertEqual((first + second) / 2, StatRow(equity=50, ev=25, bet_freq=15, check_freq=60))

    def test_addition_requires_matching_tags(self) -> None:
        with self.assertRaises(ValueError):
            StatRow(1, 1, 1, 1, tag="33") + StatRow(1, 1, 1, 1, tag="50")
        self.assertEqual((StatRow(1, 1, 1, 1, tag="33") + StatRow(1, 1, 1, 1, tag="33")).tag, "33")

    def test_division_requires_positive_count(self) -> None:
        with self.assertRaises(ValueError):
            StatRow(1, 1, 1, 1) / 0
        with self.assertRaises(TypeError):
            StatRow(1, 1, 1, 1) / 1.5  # type: ignore[operator]

    def test_with_tag(self) -> None:
        row = StatRow(1, 2, 3, 4).with_tag("75")
        self.assertEqual(row.tag, "75")
        self.assertEqual(row.as_dict()["size"], "75")


if __name__ == "__main__":
    unittest.main()
