from __future__ import annotations

import unittest

from interplot.geometry import ScreenRect
from interplot.input import PlotInput, parse_plot_input


RECT = ScreenRect(0.0, 0.0, 100.0, 100.0)


class PlotInputTests(unittest.TestCase):
    def test_parse_full_payload(self) -> None:
        parsed = parse_plot_input(
            {
                "pointer_pos": [10, 20],
                "dragged_button": "secondary",
                "drag_started": True,
                "drag_delta": (1.5, -2),
                "clicked_button": "primary",
                "scroll_delta": [0, 3],
                "zoom_delta": "1.25",
                "zoom_delta_2d": [1.1, 0.9],
            }
        )
        self.assertEqual(parsed.pointer_pos, (10.0, 20.0))
        self.assertTrue(parsed.dragged_by("secondary"))
        self.assertTrue(parsed.drag_started)
        self.assertEqual(parsed.drag_delta, (1.5, -2.0))
        self.assertTrue(parsed.clicked_by("primary"))
        self.assertEqual(parsed.scroll_delta, (0.0, 3.0))
        self.assertEqual(parsed.zoom_delta, 1.25)
        self.assertEqual(parsed.zoom_delta_2d, (1.1, 0.9))

    def test_parse_drops_malformed_fields(self) -> None:
        parsed = parse_plot_input(
            {
                "pointer_pos": [1, 2, 3],
                "dragged_button": "left",
                "scroll_delta": ["a", 1],
                "zoom_delta": object(),
            }
        )
        self.assertEqual(parsed, PlotInput())

    def test_parse_non_mapping_is_empty_input(self) -> None:
        self.assertEqual(parse_plot_input(None), PlotInput())
        self.assertEqual(parse_plot_input([1, 2]), PlotInput())

    def test_hover_pos_requires_pointer_inside_rect(self) -> None:
        self.assertEqual(PlotInput(pointer_pos=(50.0, 50.0)).hover_pos(RECT), (50.0, 50.0))
        self.assertIsNone(PlotInput(pointer_pos=(150.0, 50.0)).hover_pos(RECT))
        self.assertIsNone(PlotInput().hover_pos(RECT))

    def test_hover_pos_follows_drag_outside_rect(self) -> None:
        dragging = PlotInput(pointer_pos=(150.0, 50.0), dragged_button="primary")
        released = PlotInput(pointer_pos=(150.0, 50.0), released_button="secondary")
        self.assertEqual(dragging.hover_pos(RECT), (150.0, 50.0))
        self.assertEqual(released.hover_pos(RECT), (150.0, 50.0))

    def test_zoom_factor_uniform_uses_scalar_delta(self) -> None:
        pinch = PlotInput(zoom_delta=1.5, zoom_delta_2d=(2.0, 1.0))
        self.assertEqual(pinch.zoom_factor(uniform=False), (2.0, 1.0))
        self.assertEqual(pinch.zoom_factor(uniform=True), (1.5, 1.5))
        self.assertEqual(PlotInput(zoom_delta=0.8).zoom_factor(uniform=False), (0.8, 0.8))


if __name__ == "__main__":
    unittest.main()
