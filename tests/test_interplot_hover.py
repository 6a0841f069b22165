from __future__ import annotations

import unittest

from interplot.bounds import PlotBounds, Value
from interplot.geometry import Pos2, ScreenRect
from interplot.hover import (
    INTERACT_RADIUS_SQ,
    HoverConfig,
    PlotConfig,
    default_hover_formatter,
    find_closest_item,
    hover,
    num_decimals_with_max_digits,
    validate_hover_line,
)
from interplot.items import ClosestElem, ItemBase, Points
from interplot.shapes import CircleShape, LineSegment, Shape, TextShape
from interplot.transform import ScreenTransform


FRAME = ScreenRect(0.0, 0.0, 100.0, 100.0)


def _transform() -> ScreenTransform:
    return ScreenTransform(FRAME, PlotBounds.from_min_max((0.0, 0.0), (10.0, 10.0)))


class _FixedDistanceItem(ItemBase):
    def __init__(self, name: str, dist_sq: float) -> None:
        super().__init__(name=name)
        self.dist_sq = dist_sq
        self.hovered_with: list[ClosestElem] = []

    def get_bounds(self) -> PlotBounds:
        return PlotBounds.nothing()

    def find_closest(self, pointer: Pos2, transform: ScreenTransform) -> ClosestElem | None:
        return ClosestElem(index=0, dist_sq=self.dist_sq)

    def on_hover(self, elem: ClosestElem, shapes: list[Shape], plot: PlotConfig) -> None:
        self.hovered_with.append(elem)

    def get_shapes(self, transform: ScreenTransform, shapes: list[Shape]) -> None:
        return None


class ClosestItemTests(unittest.TestCase):
    def test_equal_distance_goes_to_earlier_item(self) -> None:
        a = _FixedDistanceItem("A", 25.0)
        b = _FixedDistanceItem("B", 25.0)
        for _ in range(5):
            found = find_closest_item([a, b], (0.0, 0.0), _transform())
            assert found is not None
            self.assertIs(found[0], a)
        found = find_closest_item([b, a], (0.0, 0.0), _transform())
        assert found is not None
        self.assertIs(found[0], b)

    def test_nearest_item_wins(self) -> None:
        far = _FixedDistanceItem("far", 100.0)
        near = _FixedDistanceItem("near", 4.0)
        found = find_closest_item([far, near], (0.0, 0.0), _transform())
        assert found is not None
        self.assertIs(found[0], near)

    def test_radius_limit_is_inclusive(self) -> None:
        edge = _FixedDistanceItem("edge", INTERACT_RADIUS_SQ)
        beyond = _FixedDistanceItem("beyond", INTERACT_RADIUS_SQ + 1.0)
        self.assertIsNotNone(find_closest_item([edge], (0.0, 0.0), _transform()))
        self.assertIsNone(find_closest_item([beyond], (0.0, 0.0), _transform()))

    def test_nan_distance_is_ignored(self) -> None:
        broken = _FixedDistanceItem("broken", float("nan"))
        ok = _FixedDistanceItem("ok", 9.0)
        found = find_closest_item([broken, ok], (0.0, 0.0), _transform())
        assert found is not None
        self.assertIs(found[0], ok)


class HoverTests(unittest.TestCase):
    def _config(self, **kwargs: object) -> PlotConfig:
        return PlotConfig(transform=_transform(), hover_config=HoverConfig(**kwargs))  # type: ignore[arg-type]

    def test_no_item_falls_back_to_rulers_at_pointer(self) -> None:
        shapes: list[Shape] = []
        hovered = hover([], (30.0, 40.0), self._config(), shapes)
        self.assertIsNone(hovered)
        lines = [s for s in shapes if isinstance(s, LineSegment)]
        texts = [s for s in shapes if isinstance(s, TextShape)]
        self.assertEqual(len(lines), 2)
        self.assertEqual(lines[0].start[0], 30.0)
        self.assertEqual(lines[1].start[1], 40.0)
        self.assertEqual(len(texts), 1)
        self.assertEqual(texts[0].text, "x = 3\ny = 6")

    def test_hover_line_x_draws_only_vertical_ruler(self) -> None:
        shapes: list[Shape] = []
        hover([], (30.0, 40.0), self._config(hover_line="x", show_hover_label=False), shapes)
        self.assertEqual(len(shapes), 1)
        self.assertEqual(shapes[0].start[0], shapes[0].end[0])  # type: ignore[union-attr]

    def test_nothing_drawn_when_rulers_and_label_are_off(self) -> None:
        shapes: list[Shape] = []
        item = _FixedDistanceItem("A", 0.0)
        self.assertIsNone(hover([item], (30.0, 40.0), self._config(hover_line="none", show_hover_label=False), shapes))
        self.assertEqual(shapes, [])
        self.assertEqual(item.hovered_with, [])

    def test_winning_item_draws_its_own_hover(self) -> None:
        points = Points([(5.0, 5.0), (9.0, 9.0)], name="pts", color=(255, 0, 0, 255))
        shapes: list[Shape] = []
        hovered = hover([points], (52.0, 50.0), self._config(), shapes)
        self.assertIs(hovered, points)
        self.assertTrue(any(isinstance(s, CircleShape) and s.center == (50.0, 50.0) for s in shapes))
        labels = [s.text for s in shapes if isinstance(s, TextShape)]
        self.assertEqual(labels, ["pts\nx = 5\ny = 5"])


class HoverFormatterTests(unittest.TestCase):
    def test_integral_values_have_no_decimals(self) -> None:
        self.assertEqual(num_decimals_with_max_digits(3.0, 6), 0)
        self.assertEqual(num_decimals_with_max_digits(1.5, 6), 6)
        self.assertEqual(num_decimals_with_max_digits(12345.5, 6), 2)
        self.assertEqual(num_decimals_with_max_digits(1e9 + 0.5, 6), 1)

    def test_default_formatter_respects_hover_line(self) -> None:
        v = Value(1.5, 2.0)
        self.assertEqual(default_hover_formatter(HoverConfig(), "s", v), "s\nx = 1.500000\ny = 2")
        self.assertEqual(default_hover_formatter(HoverConfig(hover_line="y"), "", v), "y = 2")
        self.assertEqual(default_hover_formatter(HoverConfig(hover_line="none"), "s", v), "")

    def test_validate_hover_line(self) -> None:
        self.assertEqual(validate_hover_line("xy"), "xy")
        with self.assertRaises(ValueError):
            validate_hover_line("both")


if __name__ == "__main__":
    unittest.main()
