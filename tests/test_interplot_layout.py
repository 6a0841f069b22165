from __future__ import annotations

import unittest

from interplot.geometry import ScreenRect
from interplot.layout import DEFAULT_MIN_SIZE, allocate_rect, resolve_plot_size


class ResolvePlotSizeTests(unittest.TestCase):
    def test_fills_available_space_by_default(self) -> None:
        self.assertEqual(resolve_plot_size((300.0, 200.0)), (300.0, 200.0))

    def test_explicit_width_and_height_win(self) -> None:
        self.assertEqual(resolve_plot_size((300.0, 200.0), width=100.0), (100.0, 200.0))
        self.assertEqual(resolve_plot_size((300.0, 200.0), width=100.0, height=80.0, view_aspect=4.0), (100.0, 80.0))

    def test_view_aspect_derives_missing_side(self) -> None:
        self.assertEqual(resolve_plot_size((300.0, 200.0), view_aspect=2.0), (300.0, 150.0))
        self.assertEqual(resolve_plot_size((300.0, 200.0), height=50.0, view_aspect=2.0), (100.0, 50.0))

    def test_min_size_clamps_both_sides(self) -> None:
        self.assertEqual(resolve_plot_size((10.0, 10.0)), DEFAULT_MIN_SIZE)
        self.assertEqual(resolve_plot_size((10.0, 10.0), min_size=(0.0, 0.0)), (10.0, 10.0))


class AllocateRectTests(unittest.TestCase):
    def test_rect_starts_at_top_left_of_available_space(self) -> None:
        rect = allocate_rect(ScreenRect(5.0, 7.0, 100.0, 100.0), (20.0, 30.0))
        self.assertEqual((rect.left, rect.top, rect.right, rect.bottom), (5.0, 7.0, 25.0, 37.0))


if __name__ == "__main__":
    unittest.main()
