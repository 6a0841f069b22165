from __future__ import annotations

import argparse
import math
from pathlib import Path

import numpy as np

from interplot import (
    Bar,
    BarChart,
    FrameContext,
    HLine,
    Legend,
    Line,
    LinkedAxisGroup,
    Plot,
    PlotInput,
    PlotMemoryStore,
    PlotUi,
    Points,
    ScreenRect,
    Text,
    Values,
)
from interplot.raster import render_frame, save_png


WIDTH = 640
HEIGHT = 360


def _build_waves(ui: PlotUi) -> None:
    xs = np.linspace(0.0, 4.0 * math.pi, 200)
    ui.line(Line(Values.from_xy(xs, np.sin(xs)), name="sin"))
    ui.line(Line(Values.from_explicit_callback(math.cos, (0.0, 4.0 * math.pi), points=200), name="cos"))
    ui.points(Points(Values.from_xy(xs[::10], np.sin(xs[::10])), name="samples", radius=2.0))
    ui.hline(HLine(0.0, name="zero"))
    ui.text(Text((2.0 * math.pi, 1.2), "two waves"))


def _build_bars(ui: PlotUi) -> None:
    heights = [3.0, -1.5, 2.0, 4.5, 1.0]
    ui.bar_chart(BarChart([Bar(float(i), h, width=0.6) for i, h in enumerate(heights)], name="bars"))


def _frames() -> list[tuple[str, PlotInput]]:
    return [
        ("auto_fit", PlotInput()),
        ("hover", PlotInput(pointer_pos=(200.0, 120.0))),
        ("box_press", PlotInput(pointer_pos=(150.0, 80.0), dragged_button="secondary", drag_started=True)),
        ("box_drag", PlotInput(pointer_pos=(400.0, 260.0), dragged_button="secondary")),
        ("box_commit", PlotInput(pointer_pos=(400.0, 260.0), released_button="secondary")),
        ("pan", PlotInput(pointer_pos=(300.0, 180.0), dragged_button="primary", drag_delta=(60.0, 0.0))),
        ("pinch", PlotInput(pointer_pos=(300.0, 180.0), zoom_delta=0.5)),
        ("reset", PlotInput(double_clicked_button="primary")),
    ]


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a scripted sequence of plot frames to PNG files.")
    parser.add_argument("--out", type=Path, default=Path("interplot_frames"))
    args = parser.parse_args()
    out_dir: Path = args.out
    out_dir.mkdir(parents=True, exist_ok=True)

    memory = PlotMemoryStore()
    link = LinkedAxisGroup.x()
    waves = Plot("waves").set_legend(Legend("right_top")).set_link_axis(link)
    bars = Plot("bars").set_link_axis(link).set_show_hover_label(False)
    top = ScreenRect(0.0, 0.0, WIDTH, HEIGHT)
    bottom = ScreenRect(0.0, HEIGHT, WIDTH, HEIGHT * 2)

    for index, (label, plot_input) in enumerate(_frames()):
        waves_response = waves.show(FrameContext(memory=memory, available_rect=top, input=plot_input), _build_waves)
        bars_response = bars.show(FrameContext(memory=memory, available_rect=bottom), _build_bars)
        canvas = render_frame(WIDTH, HEIGHT * 2, waves_response.shapes + bars_response.shapes)
        path = out_dir / f"{index:02d}_{label}.png"
        save_png(canvas, str(path))
        b = waves_response.transform.bounds
        print(
            f"wrote {path} phase={waves_response.phase} auto={waves_response.auto_bounds} "
            f"x=[{b.min[0]:.3f}, {b.max[0]:.3f}] y=[{b.min[1]:.3f}, {b.max[1]:.3f}]"
        )


if __name__ == "__main__":
    main()
