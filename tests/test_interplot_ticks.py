from __future__ import annotations

import unittest

from interplot.bounds import PlotBounds
from interplot.geometry import ScreenRect
from interplot.shapes import LineSegment, TextShape
from interplot.ticks import (
    FALLBACK_STEP,
    MAX_GRID_LINES,
    MIN_LINE_SPACING_PX,
    axis_shapes,
    classify_tick,
    format_tick_value,
    generate_axis_ticks,
    grid_alpha,
    grid_step,
    label_alpha,
)
from interplot.transform import ScreenTransform


def _transform(frame: ScreenRect = ScreenRect(0.0, 0.0, 1000.0, 100.0)) -> ScreenTransform:
    return ScreenTransform(frame, PlotBounds.from_min_max((-50.0, -5.0), (50.0, 5.0)))


class GridStepTests(unittest.TestCase):
    def test_step_is_smallest_power_of_ten_above_min_spacing(self) -> None:
        self.assertEqual(grid_step(0.1), 1.0)
        self.assertEqual(grid_step(1.0), 10.0)
        self.assertEqual(grid_step(-0.1), 1.0)
        self.assertAlmostEqual(grid_step(0.001), 0.01)

    def test_degenerate_scale_falls_back(self) -> None:
        self.assertEqual(grid_step(0.0), FALLBACK_STEP)
        self.assertEqual(grid_step(float("inf")), FALLBACK_STEP)
        self.assertEqual(grid_step(float("nan")), FALLBACK_STEP)

    def test_tiers_follow_divisibility(self) -> None:
        self.assertEqual(classify_tick(0), ("thick", 100))
        self.assertEqual(classify_tick(-200), ("thick", 100))
        self.assertEqual(classify_tick(30), ("medium", 10))
        self.assertEqual(classify_tick(-10), ("medium", 10))
        self.assertEqual(classify_tick(7), ("thin", 1))

    def test_alpha_is_monotonic_and_clamped(self) -> None:
        spacings = [0.0, 3.0, 6.0, 10.0, 50.0, 100.0, 299.0, 300.0, 301.0, 5000.0]
        grid = [grid_alpha(s) for s in spacings]
        labels = [label_alpha(s) for s in spacings]
        self.assertEqual(grid, sorted(grid))
        self.assertEqual(labels, sorted(labels))
        self.assertEqual(grid_alpha(MIN_LINE_SPACING_PX), 0.0)
        self.assertAlmostEqual(grid_alpha(5000.0), 0.15)
        self.assertAlmostEqual(label_alpha(5000.0), 0.4)
        # Labels fade out at a larger spacing than grid lines.
        self.assertGreater(grid_alpha(30.0), 0.0)
        self.assertEqual(label_alpha(30.0), 0.0)


class AxisTickTests(unittest.TestCase):
    def test_x_axis_lines_and_labels(self) -> None:
        ticks = generate_axis_ticks(_transform(), 0)
        self.assertEqual(ticks.step, 1.0)
        self.assertAlmostEqual(ticks.step_px, 10.0)
        self.assertEqual(len(ticks.lines), 101)
        by_value = {line.value: line for line in ticks.lines}
        self.assertEqual(by_value[0.0].tier, "thick")
        self.assertEqual(by_value[20.0].tier, "medium")
        self.assertEqual(by_value[3.0].tier, "thin")
        self.assertLess(by_value[3.0].alpha, by_value[20.0].alpha)
        self.assertLessEqual(by_value[20.0].alpha, by_value[0.0].alpha)
        self.assertEqual([label.text for label in ticks.labels], [str(v) for v in range(-50, 51, 10)])

    def test_lines_never_emitted_below_min_spacing(self) -> None:
        for frame in (ScreenRect(0.0, 0.0, 1000.0, 100.0), ScreenRect(0.0, 0.0, 37.0, 913.0)):
            for axis in (0, 1):
                ticks = generate_axis_ticks(_transform(frame), axis)
                for line in ticks.lines:
                    self.assertGreater(line.spacing_px, MIN_LINE_SPACING_PX)
                    self.assertGreater(line.alpha, 0.0)

    def test_y_axis_positions_use_screen_coordinates(self) -> None:
        ticks = generate_axis_ticks(_transform(), 1)
        zero = [line for line in ticks.lines if line.value == 0.0]
        self.assertEqual(len(zero), 1)
        self.assertAlmostEqual(zero[0].position, 50.0)

    def test_empty_label_hides_text_but_keeps_grid_line(self) -> None:
        plain = generate_axis_ticks(_transform(), 0)
        formatted = generate_axis_ticks(_transform(), 0, formatter=lambda v: "zero" if v == 0 else "")
        self.assertEqual(len(formatted.lines), len(plain.lines))
        self.assertEqual([label.text for label in formatted.labels], ["zero"])

    def test_zero_width_frame_draws_nothing(self) -> None:
        ticks = generate_axis_ticks(_transform(ScreenRect(0.0, 0.0, 0.0, 100.0)), 0)
        self.assertEqual(ticks.step, FALLBACK_STEP)
        self.assertEqual(ticks.lines, ())
        self.assertEqual(ticks.labels, ())

    def test_line_count_is_capped(self) -> None:
        frame = ScreenRect(0.0, 0.0, 100000.0, 100.0)
        t = ScreenTransform(frame, PlotBounds.from_min_max((0.0, 0.0), (1.0, 1.0)))
        ticks = generate_axis_ticks(t, 0)
        self.assertLessEqual(len(ticks.lines), MAX_GRID_LINES)

    def test_rejects_unknown_axis(self) -> None:
        with self.assertRaises(ValueError):
            generate_axis_ticks(_transform(), 2)

    def test_axis_shapes_cover_frame(self) -> None:
        t = _transform()
        ticks = generate_axis_ticks(t, 0)
        shapes = axis_shapes(ticks, t, dark_mode=False)
        segments = [s for s in shapes if isinstance(s, LineSegment)]
        texts = [s for s in shapes if isinstance(s, TextShape)]
        self.assertEqual(len(segments), len(ticks.lines))
        self.assertEqual(len(texts), len(ticks.labels))
        self.assertTrue(all(s.start[1] == 0.0 and s.end[1] == 100.0 for s in segments))


class TickFormatTests(unittest.TestCase):
    def test_trailing_zeros_are_trimmed(self) -> None:
        self.assertEqual(format_tick_value(20.0), "20")
        self.assertEqual(format_tick_value(2.5), "2.5")
        self.assertEqual(format_tick_value(0.1 + 0.2), "0.3")
        self.assertEqual(format_tick_value(1234.5), "1234.5")

    def test_negative_zero_and_tiny_values_print_as_zero(self) -> None:
        self.assertEqual(format_tick_value(-0.0), "0")
        self.assertEqual(format_tick_value(-4.4409e-16), "0")
        self.assertEqual(format_tick_value(1e-7), "0")

    def test_decimals_are_bounded(self) -> None:
        self.assertEqual(format_tick_value(1.23456789), "1.23457")
        self.assertEqual(format_tick_value(1.23456789, decimals=2), "1.23")


if __name__ == "__main__":
    unittest.main()
