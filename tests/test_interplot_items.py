from __future__ import annotations

import math
import unittest

import numpy as np

from interplot.bounds import PlotBounds
from interplot.geometry import ScreenRect
from interplot.items import (
    Bar,
    BarChart,
    BoxElem,
    BoxPlot,
    BoxSpread,
    HLine,
    Line,
    PlotImage,
    Points,
    Polygon,
    Text,
    Values,
    VLine,
)
from interplot.shapes import CircleShape, Path, Shape
from interplot.transform import ScreenTransform


RED = (255, 0, 0, 255)


def _transform() -> ScreenTransform:
    return ScreenTransform(ScreenRect(0.0, 0.0, 100.0, 100.0), PlotBounds.from_min_max((0.0, 0.0), (10.0, 10.0)))


class ValuesTests(unittest.TestCase):
    def test_bounds_skip_non_finite_points(self) -> None:
        values = Values([(0.0, 1.0), (math.nan, 50.0), (4.0, -2.0), (2.0, math.inf)])
        bounds = values.get_bounds()
        self.assertEqual(bounds.min, [0.0, -2.0])
        self.assertEqual(bounds.max, [4.0, 50.0])

    def test_empty_series(self) -> None:
        self.assertTrue(Values().is_empty())
        self.assertTrue(Values([]).is_empty())
        self.assertFalse(Values().get_bounds().is_valid_x())

    def test_from_ys_uses_sample_index(self) -> None:
        values = Values.from_ys([5.0, 6.0, 7.0])
        np.testing.assert_allclose(values.points[:, 0], [0.0, 1.0, 2.0])

    def test_parametric_callback_samples_eagerly(self) -> None:
        values = Values.from_parametric_callback(math.cos, math.sin, (0.0, math.pi), points=3)
        self.assertEqual(len(values), 3)
        np.testing.assert_allclose(values.points[1], [0.0, 1.0], atol=1e-12)

    def test_generator_point_count_validation(self) -> None:
        with self.assertRaises(ValueError):
            Values.from_explicit_callback(lambda x: x, (0.0, 1.0), points=1)


class ExplicitGeneratorTests(unittest.TestCase):
    def test_estimated_bounds_cover_finite_range(self) -> None:
        values = Values.from_explicit_callback(lambda x: x * x, (-2.0, 2.0), points=5)
        self.assertFalse(values.is_empty())
        bounds = values.get_bounds()
        self.assertEqual(bounds.range_x(), (-2.0, 2.0))
        self.assertEqual(bounds.max[1], 4.0)
        self.assertGreaterEqual(bounds.min[1], 0.0)
        self.assertLess(bounds.min[1], 0.1)

    def test_infinite_range_samples_around_origin(self) -> None:
        values = Values.from_explicit_callback(lambda x: 2.0 * x)
        bounds = values.get_bounds()
        self.assertEqual(bounds.range_x(), (-1.0, 1.0))
        self.assertEqual(bounds.range_y(), (-2.0, 2.0))

    def test_initialize_samples_visible_part_of_range(self) -> None:
        values = Values.from_explicit_callback(lambda x: x * x, (-2.0, 2.0), points=5)
        values.generate_points((-1.0, 5.0))
        np.testing.assert_allclose(values.points[:, 0], [-1.0, -0.25, 0.5, 1.25, 2.0])
        np.testing.assert_allclose(values.points[-1], [2.0, 4.0])

    def test_initialize_outside_range_yields_no_points(self) -> None:
        values = Values.from_explicit_callback(lambda x: x, (-2.0, 2.0), points=5)
        values.generate_points((5.0, 6.0))
        self.assertEqual(values.points.shape, (0, 2))

    def test_line_initialize_uses_visible_x_range(self) -> None:
        line = Line(Values.from_explicit_callback(lambda x: 1.0, points=11), color=RED)
        line.initialize((0.0, 10.0))
        self.assertEqual(len(line.series), 11)
        shapes: list[Shape] = []
        line.get_shapes(_transform(), shapes)
        self.assertEqual(len(shapes), 1)


class SeriesItemTests(unittest.TestCase):
    def test_line_splits_at_non_finite_points(self) -> None:
        line = Line([(0.0, 0.0), (1.0, 1.0), (math.nan, 1.0), (2.0, 2.0), (3.0, 3.0)], color=RED)
        shapes: list[Shape] = []
        line.get_shapes(_transform(), shapes)
        self.assertEqual([type(s) for s in shapes], [Path, Path])
        self.assertEqual(shapes[0].points, ((0.0, 100.0), (10.0, 90.0)))  # type: ignore[union-attr]

    def test_isolated_line_point_becomes_dot(self) -> None:
        line = Line([(0.0, 0.0), (math.nan, math.nan), (1.0, 1.0), (2.0, 2.0)], color=RED)
        shapes: list[Shape] = []
        line.get_shapes(_transform(), shapes)
        self.assertEqual([type(s) for s in shapes], [CircleShape, Path])

    def test_line_fill_extends_bounds(self) -> None:
        line = Line([(0.0, 2.0), (1.0, 3.0)], fill=-1.0)
        self.assertEqual(line.get_bounds().range_y(), (-1.0, 3.0))

    def test_points_stems_extend_bounds(self) -> None:
        points = Points([(0.0, 2.0), (1.0, 3.0)], stems=0.0)
        self.assertEqual(points.get_bounds().range_y(), (0.0, 3.0))

    def test_highlight_widens_line(self) -> None:
        line = Line([(0.0, 0.0), (1.0, 1.0)], color=RED, width=1.5)
        line.highlight()
        self.assertTrue(line.highlighted())
        shapes: list[Shape] = []
        line.get_shapes(_transform(), shapes)
        self.assertEqual(shapes[0].stroke.width, 3.0)  # type: ignore[union-attr]

    def test_invalid_arguments(self) -> None:
        with self.assertRaises(ValueError):
            Line([(0.0, 0.0)], width=0.0)
        with self.assertRaises(ValueError):
            Points([(0.0, 0.0)], shape="star")  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            Polygon([(0.0, 0.0)], width=-1.0)

    def test_polygon_needs_two_points(self) -> None:
        shapes: list[Shape] = []
        Polygon([(1.0, 1.0)], color=RED).get_shapes(_transform(), shapes)
        self.assertEqual(shapes, [])
        Polygon([(1.0, 1.0), (2.0, 1.0), (2.0, 2.0)], color=RED).get_shapes(_transform(), shapes)
        self.assertEqual(len(shapes), 1)
        self.assertTrue(shapes[0].closed)  # type: ignore[union-attr]


class ReferenceItemTests(unittest.TestCase):
    def test_hline_bounds_only_cover_y(self) -> None:
        bounds = HLine(3.0).get_bounds()
        self.assertFalse(bounds.is_valid_y())
        self.assertFalse(bounds.is_valid_x())
        self.assertEqual(bounds.range_y(), (3.0, 3.0))

    def test_vline_bounds_only_cover_x(self) -> None:
        bounds = VLine(-2.0).get_bounds()
        self.assertEqual(bounds.range_x(), (-2.0, -2.0))
        self.assertEqual(bounds.range_y(), (math.inf, -math.inf))

    def test_text_bounds_are_its_position(self) -> None:
        bounds = Text((1.0, 2.0), "hi").get_bounds()
        self.assertEqual(bounds.min, [1.0, 2.0])
        self.assertEqual(bounds.max, [1.0, 2.0])


class BarAndBoxTests(unittest.TestCase):
    def test_bar_chart_bounds(self) -> None:
        chart = BarChart([Bar(1.0, 3.0)])
        bounds = chart.get_bounds()
        self.assertEqual(bounds.range_x(), (0.75, 1.25))
        self.assertEqual(bounds.range_y(), (0.0, 3.0))

    def test_negative_bar_with_offset(self) -> None:
        bounds = BarChart([Bar(2.0, -1.0, base_offset=0.5)]).get_bounds()
        self.assertEqual(bounds.range_y(), (-0.5, 0.5))

    def test_horizontal_bar_chart_swaps_axes(self) -> None:
        bounds = BarChart([Bar(1.0, 3.0)], orientation="horizontal").get_bounds()
        self.assertEqual(bounds.range_x(), (0.0, 3.0))
        self.assertEqual(bounds.range_y(), (0.75, 1.25))

    def test_bar_validation(self) -> None:
        with self.assertRaises(ValueError):
            Bar(0.0, 1.0, width=0.0)
        with self.assertRaises(ValueError):
            BarChart([], orientation="diagonal")  # type: ignore[arg-type]

    def test_box_spread_must_be_ordered(self) -> None:
        with self.assertRaises(ValueError):
            BoxSpread(1.0, 0.0, 2.0, 3.0, 4.0)

    def test_box_plot_bounds(self) -> None:
        plot = BoxPlot([BoxElem(1.0, BoxSpread(0.0, 1.0, 2.0, 3.0, 4.0))])
        bounds = plot.get_bounds()
        self.assertEqual(bounds.range_x(), (0.875, 1.125))
        self.assertEqual(bounds.range_y(), (0.0, 4.0))

    def test_box_hover_picks_nearest_box(self) -> None:
        plot = BoxPlot(
            [
                BoxElem(2.0, BoxSpread(1.0, 2.0, 3.0, 4.0, 5.0)),
                BoxElem(8.0, BoxSpread(1.0, 2.0, 3.0, 4.0, 5.0)),
            ]
        )
        elem = plot.find_closest((80.0, 70.0), _transform())
        assert elem is not None
        self.assertEqual(elem.index, 1)
        self.assertEqual(elem.dist_sq, 0.0)


class ImageTests(unittest.TestCase):
    def test_image_requires_rgba(self) -> None:
        with self.assertRaises(ValueError):
            PlotImage(np.zeros((2, 2, 3), dtype=np.uint8), (0.0, 0.0), (1.0, 1.0))
        with self.assertRaises(ValueError):
            PlotImage(np.zeros((2, 2, 4), dtype=np.uint8), (0.0, 0.0), (0.0, 1.0))

    def test_image_bounds_are_centered_on_position(self) -> None:
        image = PlotImage(np.zeros((2, 2, 4), dtype=np.uint8), (1.0, 1.0), (2.0, 4.0))
        bounds = image.get_bounds()
        self.assertEqual(bounds.range_x(), (0.0, 2.0))
        self.assertEqual(bounds.range_y(), (-1.0, 3.0))


if __name__ == "__main__":
    unittest.main()
