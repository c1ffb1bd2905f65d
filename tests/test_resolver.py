"""
Tests for the line resolver (condense, collapse, convert).
"""
from unittest import TestCase, main

from tilemerge.core import (
    EMPTY,
    DoubleMove,
    MergeFromMoving,
    MergeFromStationary,
    SingleMove,
    Slide,
    Stationary,
    Tile,
    collapse,
    condense,
    convert,
    resolve_line,
)


def line(*values):
    """Build a line of cells from values, 0 standing for an empty cell."""
    return [Tile(value) if value else EMPTY for value in values]


class TestCondense(TestCase):
    def test_removes_gaps(self):
        """Tiles keep their order, gaps are dropped."""
        tokens = condense(line(2, 0, 0, 4))
        self.assertEqual(tokens, [Stationary(source=0, value=2), Slide(source=3, value=4)])

    def test_full_line_is_stationary(self):
        tokens = condense(line(2, 4, 8, 16))
        self.assertTrue(all(isinstance(token, Stationary) for token in tokens))
        self.assertEqual([token.source for token in tokens], [0, 1, 2, 3])

    def test_leading_gap_slides_everything(self):
        tokens = condense(line(0, 2, 0, 4))
        self.assertEqual(tokens, [Slide(source=1, value=2), Slide(source=3, value=4)])

    def test_empty_line(self):
        self.assertEqual(condense(line(0, 0, 0, 0)), [])


class TestCollapse(TestCase):
    def test_chain_merges_pairwise(self):
        """Four equal tiles give two merges, the first one stationary."""
        tokens = collapse(condense(line(2, 2, 2, 2)))
        self.assertEqual(
            tokens,
            [MergeFromStationary(source=1, value=4), MergeFromMoving(source=2, second=3, value=4)],
        )

    def test_odd_chain_leaves_last_tile(self):
        tokens = collapse(condense(line(2, 2, 2, 0)))
        self.assertEqual(tokens, [MergeFromStationary(source=1, value=4), Slide(source=2, value=2)])

    def test_shifted_stationary_becomes_slide(self):
        """A stationary tile behind a merge has to move, and can still merge with a moving tile."""
        tokens = collapse(condense(line(1, 1, 1, 2, 2)))
        self.assertEqual(
            tokens,
            [
                MergeFromStationary(source=1, value=2),
                Slide(source=2, value=1),
                MergeFromMoving(source=3, second=4, value=4),
            ],
        )

    def test_stationary_merge_after_unchanged_tile(self):
        tokens = collapse(condense(line(2, 4, 4, 0)))
        self.assertEqual(tokens, [Stationary(source=0, value=2), MergeFromStationary(source=2, value=8)])

    def test_moving_tiles_merge(self):
        tokens = collapse(condense(line(0, 2, 2, 0)))
        self.assertEqual(tokens, [MergeFromMoving(source=1, second=2, value=4)])

    def test_merged_value_does_not_merge_again(self):
        """A tile created by a merge is not compared to the next tile."""
        tokens = collapse(condense(line(2, 2, 4, 0)))
        self.assertEqual(tokens, [MergeFromStationary(source=1, value=4), Slide(source=2, value=4)])

    def test_rejects_merge_tokens(self):
        with self.assertRaises(AssertionError):
            collapse([MergeFromStationary(source=1, value=4)])
        with self.assertRaises(AssertionError):
            collapse([Slide(source=0, value=2), MergeFromMoving(source=1, second=2, value=4)])


class TestConvert(TestCase):
    def test_destination_is_output_index(self):
        orders = convert(
            [
                Stationary(source=0, value=2),
                MergeFromStationary(source=2, value=8),
                Slide(source=3, value=16),
                MergeFromMoving(source=4, second=5, value=4),
            ]
        )
        self.assertEqual(
            orders,
            [
                SingleMove(source=2, destination=1, value=8, was_merge=True),
                SingleMove(source=3, destination=2, value=16, was_merge=False),
                DoubleMove(first_source=4, second_source=5, destination=3, value=4),
            ],
        )


class TestResolveLine(TestCase):
    def test_condense_example(self):
        orders = resolve_line(line(2, 0, 0, 4))
        self.assertEqual(orders, [SingleMove(source=3, destination=1, value=4, was_merge=False)])

    def test_merge_chain_example(self):
        orders = resolve_line(line(2, 2, 2, 2))
        self.assertEqual(
            orders,
            [
                SingleMove(source=1, destination=0, value=4, was_merge=True),
                DoubleMove(first_source=2, second_source=3, destination=1, value=4),
            ],
        )
        self.assertEqual(sum(order.value for order in orders), 8)

    def test_single_combine_example(self):
        orders = resolve_line(line(2, 2, 0, 4))
        self.assertEqual(
            orders,
            [
                SingleMove(source=1, destination=0, value=4, was_merge=True),
                SingleMove(source=3, destination=1, value=4, was_merge=False),
            ],
        )

    def test_no_op_line(self):
        """A full line without equal neighbours produces no order."""
        self.assertEqual(resolve_line(line(2, 4, 8, 16)), [])
        self.assertEqual(resolve_line(line(2, 4, 0, 0)), [])
        self.assertEqual(resolve_line(line(0, 0, 0, 0)), [])

    def test_no_wrap(self):
        """Equal tiles at both ends of the line do not merge through the edge."""
        self.assertEqual(resolve_line(line(2, 4, 8, 2)), [])

    def test_single_merge_per_tile(self):
        for values in [(2, 2, 2, 2), (4, 4, 4, 0), (0, 8, 8, 8), (2, 2, 4, 4), (1, 1, 1, 2, 2)]:
            with self.subTest(values=values):
                sources = []
                for order in resolve_line(line(*values)):
                    if isinstance(order, DoubleMove):
                        sources.extend([order.first_source, order.second_source])
                    else:
                        sources.append(order.source)
                self.assertEqual(len(sources), len(set(sources)))

    def test_is_pure(self):
        cells = line(0, 2, 2, 4)
        first = resolve_line(cells)
        self.assertEqual(cells, line(0, 2, 2, 4))
        self.assertEqual(resolve_line(cells), first)


if __name__ == "__main__":
    main()
