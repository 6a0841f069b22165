from __future__ import annotations

import unittest

from interplot.bounds import PlotBounds
from interplot.linking import LinkedAxisGroup


class LinkedAxisGroupTests(unittest.TestCase):
    def test_get_is_none_before_any_plot_writes(self) -> None:
        self.assertIsNone(LinkedAxisGroup.both().get())

    def test_last_writer_wins(self) -> None:
        group = LinkedAxisGroup.both()
        group.set(PlotBounds.from_min_max((0.0, 0.0), (1.0, 1.0)))
        group.set(PlotBounds.from_min_max((2.0, 2.0), (3.0, 3.0)))
        self.assertEqual(group.get(), PlotBounds.from_min_max((2.0, 2.0), (3.0, 3.0)))

    def test_set_and_get_copy_the_bounds(self) -> None:
        group = LinkedAxisGroup.both()
        bounds = PlotBounds.from_min_max((0.0, 0.0), (1.0, 1.0))
        group.set(bounds)
        bounds.translate((5.0, 5.0))
        out = group.get()
        assert out is not None
        out.translate((1.0, 1.0))
        self.assertEqual(group.get(), PlotBounds.from_min_max((0.0, 0.0), (1.0, 1.0)))

    def test_with_links_shares_the_cell(self) -> None:
        group = LinkedAxisGroup.x()
        self.assertTrue(group.link_x)
        self.assertFalse(group.link_y)
        other = group.with_links(link_x=False, link_y=True)
        self.assertTrue(group.shares_with(other))
        other.set(PlotBounds.new_symmetrical(4.0))
        self.assertEqual(group.get(), PlotBounds.new_symmetrical(4.0))
        self.assertFalse(group.shares_with(LinkedAxisGroup.x()))

    def test_clear_forgets_bounds(self) -> None:
        group = LinkedAxisGroup.y()
        group.set(PlotBounds.new_symmetrical(1.0))
        group.clear()
        self.assertIsNone(group.get())
        self.assertTrue(group.is_linked(1))
        self.assertFalse(group.is_linked(0))


if __name__ == "__main__":
    unittest.main()
