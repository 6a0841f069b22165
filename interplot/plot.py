from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Any, Callable, Hashable, Literal

from interplot.bounds import PlotBounds, Value
from interplot.colors import auto_color, background_color, frame_color, text_color
from interplot.geometry import Pos2, ScreenRect, Vec2
from interplot.hover import HoverConfig, HoverFormatter, PlotConfig, default_hover_formatter, hover, validate_hover_line
from interplot.input import PlotInput, PointerButton
from interplot.interaction import InteractionConfig, InteractionPhase, apply_interactions
from interplot.items import BarChart, BoxPlot, HLine, Line, PlotImage, PlotItem, Points, Polygon, Text, VLine
from interplot.layout import DEFAULT_MIN_SIZE, allocate_rect, resolve_plot_size
from interplot.legend import Legend
from interplot.linking import LinkedAxisGroup
from interplot.memory import PlotMemory, PlotMemoryStore
from interplot.shapes import RectShape, Shape, Stroke
from interplot.ticks import AxisFormatter, axis_shapes, generate_axis_ticks
from interplot.transform import ScreenTransform


LOGGER = logging.getLogger(__name__)

CursorIcon = Literal["grabbing", "crosshair"]

DEFAULT_MARGIN_FRACTION: Vec2 = (0.05, 0.05)

_BUTTONS = ("primary", "secondary", "middle")


@dataclass(frozen=True)
class FrameContext:
    """What the host hands a plot for one frame."""

    memory: PlotMemoryStore
    available_rect: ScreenRect
    input: PlotInput = field(default_factory=PlotInput)
    dark_mode: bool = True


@dataclass(frozen=True)
class PlotResponse:
    inner: Any
    shapes: list[Shape]
    transform: ScreenTransform
    rect: ScreenRect
    hovered: bool
    auto_bounds: bool
    hovered_item: str | None
    cursor: CursorIcon | None
    phase: InteractionPhase


class PlotUi:
    """Handle passed to the build callback.

    Coordinate queries answer with the previous frame's transform: this
    frame's bounds are only known after every item has been added.
    """

    def __init__(
        self,
        plot_input: PlotInput,
        rect: ScreenRect,
        last_screen_transform: ScreenTransform,
        *,
        dark_mode: bool = True,
    ) -> None:
        self._input = plot_input
        self._rect = rect
        self._last_screen_transform = last_screen_transform
        self._dark_mode = dark_mode
        self._items: list[PlotItem] = []
        self._next_auto_color_idx = 0

    @property
    def items(self) -> list[PlotItem]:
        return self._items

    def _auto_color(self) -> tuple[int, int, int, int]:
        color = auto_color(self._next_auto_color_idx)
        self._next_auto_color_idx += 1
        return color

    def _add_colored(self, item: Any) -> None:
        if item.has_auto_color():
            item.set_color(self._auto_color())
        self._items.append(item)

    def plot_bounds(self) -> PlotBounds:
        return self._last_screen_transform.bounds.copy()

    def plot_hovered(self) -> bool:
        return self._input.hover_pos(self._rect) is not None

    def pointer_coordinate(self) -> Value | None:
        pos = self._input.pointer_pos
        if pos is None:
            return None
        # Undo this frame's drag so the position matches the one-frame-old transform.
        dx, dy = self._input.drag_delta
        return self.plot_from_screen((pos[0] - dx, pos[1] - dy))

    def pointer_coordinate_drag_delta(self) -> Vec2:
        dx, dy = self._input.drag_delta
        vx, vy = self._last_screen_transform.dvalue_dpos()
        # A zero-size frame has no data scale; report no movement on that axis.
        return (dx * vx if math.isfinite(vx) else 0.0, dy * vy if math.isfinite(vy) else 0.0)

    def screen_from_plot(self, value: Value) -> Pos2:
        return self._last_screen_transform.position_from_value(value)

    def plot_from_screen(self, pos: Pos2) -> Value:
        return self._last_screen_transform.value_from_position(pos)

    def line(self, line: Line) -> None:
        if line.series.is_empty():
            return
        self._add_colored(line)

    def points(self, points: Points) -> None:
        if points.series.is_empty():
            return
        self._add_colored(points)

    def polygon(self, polygon: Polygon) -> None:
        if polygon.series.is_empty():
            return
        self._add_colored(polygon)

    def text(self, text: Text) -> None:
        if not text.text:
            return
        # Text follows the theme instead of the palette.
        if text.has_auto_color():
            text.set_color(text_color(dark_mode=self._dark_mode))
        self._items.append(text)

    def hline(self, hline: HLine) -> None:
        self._add_colored(hline)

    def vline(self, vline: VLine) -> None:
        self._add_colored(vline)

    def image(self, image: PlotImage) -> None:
        self._items.append(image)

    def bar_chart(self, chart: BarChart) -> None:
        if not chart.bars:
            return
        self._add_colored(chart)

    def box_plot(self, box_plot: BoxPlot) -> None:
        if not box_plot.boxes:
            return
        self._add_colored(box_plot)


@dataclass
class PreparedPlot:
    """Items and transform resolved for this frame, ready to turn into shapes."""

    items: list[PlotItem]
    transform: ScreenTransform
    hover_config: HoverConfig
    hover_formatter: HoverFormatter
    axis_formatters: tuple[AxisFormatter | None, AxisFormatter | None]
    show_axes: tuple[bool, bool]
    dark_mode: bool

    def get_shapes(self, pointer: Pos2 | None, shapes: list[Shape]) -> PlotItem | None:
        for axis in (0, 1):
            if self.show_axes[axis]:
                ticks = generate_axis_ticks(self.transform, axis, self.axis_formatters[axis])
                shapes.extend(axis_shapes(ticks, self.transform, dark_mode=self.dark_mode))

        # Highlighted items paint last; sorted() is stable so the rest keep their order.
        for item in sorted(self.items, key=lambda it: it.highlighted()):
            item.get_shapes(self.transform, shapes)

        if pointer is None:
            return None
        config = PlotConfig(
            transform=self.transform,
            hover_config=self.hover_config,
            hover_formatter=self.hover_formatter,
            dark_mode=self.dark_mode,
        )
        return hover(self.items, pointer, config, shapes)


class Plot:
    """Per-frame plot builder.

    Construct (or keep) one ``Plot`` per widget, configure it with the
    ``set_*``-style methods and call ``show`` once per frame. State that must
    survive between frames lives in the ``PlotMemoryStore`` under ``id_source``.
    """

    def __init__(self, id_source: Hashable) -> None:
        self.id_source = id_source
        self.center_x_axis = False
        self.center_y_axis = False
        self.allow_zoom = True
        self.allow_drag = True
        self.allow_boxed_zoom = True
        self.boxed_zoom_pointer_button: PointerButton = "secondary"
        self.min_auto_bounds = PlotBounds.nothing()
        self.margin_fraction: Vec2 = DEFAULT_MARGIN_FRACTION
        self.min_size: Vec2 = DEFAULT_MIN_SIZE
        self.width: float | None = None
        self.height: float | None = None
        self.data_aspect: float | None = None
        self.view_aspect: float | None = None
        self.hover_config = HoverConfig()
        self.hover_formatter: HoverFormatter = default_hover_formatter
        self.axis_formatters: tuple[AxisFormatter | None, AxisFormatter | None] = (None, None)
        self.show_axes: tuple[bool, bool] = (True, True)
        self.show_background = True
        self.linked_axes: LinkedAxisGroup | None = None
        self.legend_widget: Legend | None = None

    def set_center_x_axis(self, on: bool = True) -> "Plot":
        self.center_x_axis = bool(on)
        return self

    def set_center_y_axis(self, on: bool = True) -> "Plot":
        self.center_y_axis = bool(on)
        return self

    def set_allow_zoom(self, on: bool) -> "Plot":
        self.allow_zoom = bool(on)
        return self

    def set_allow_drag(self, on: bool) -> "Plot":
        self.allow_drag = bool(on)
        return self

    def set_allow_boxed_zoom(self, on: bool) -> "Plot":
        self.allow_boxed_zoom = bool(on)
        return self

    def set_boxed_zoom_pointer_button(self, button: PointerButton) -> "Plot":
        if button not in _BUTTONS:
            raise ValueError(f"boxed zoom button must be one of {_BUTTONS}, got {button!r}")
        self.boxed_zoom_pointer_button = button
        return self

    def set_data_aspect(self, data_aspect: float) -> "Plot":
        if not data_aspect > 0:
            raise ValueError("data_aspect must be > 0")
        self.data_aspect = float(data_aspect)
        return self

    def set_view_aspect(self, view_aspect: float) -> "Plot":
        if not view_aspect > 0:
            raise ValueError("view_aspect must be > 0")
        self.view_aspect = float(view_aspect)
        return self

    def set_width(self, width: float) -> "Plot":
        if not width > 0:
            raise ValueError("width must be > 0")
        # An explicit width overrides the minimum width.
        self.min_size = (0.0, self.min_size[1])
        self.width = float(width)
        return self

    def set_height(self, height: float) -> "Plot":
        if not height > 0:
            raise ValueError("height must be > 0")
        self.min_size = (self.min_size[0], 0.0)
        self.height = float(height)
        return self

    def set_min_size(self, width: float, height: float) -> "Plot":
        if width < 0 or height < 0:
            raise ValueError("min_size must be >= 0")
        self.min_size = (float(width), float(height))
        return self

    def set_margin_fraction(self, x: float, y: float) -> "Plot":
        if x < 0 or y < 0:
            raise ValueError("margin_fraction must be >= 0")
        self.margin_fraction = (float(x), float(y))
        return self

    def set_hover_line(self, hover_line: str) -> "Plot":
        self.hover_config = HoverConfig(
            hover_line=validate_hover_line(hover_line),
            show_hover_label=self.hover_config.show_hover_label,
        )
        return self

    def set_show_hover_label(self, on: bool) -> "Plot":
        self.hover_config = HoverConfig(hover_line=self.hover_config.hover_line, show_hover_label=bool(on))
        return self

    def set_hover_formatter(self, formatter: HoverFormatter) -> "Plot":
        self.hover_formatter = formatter
        return self

    def set_x_axis_formatter(self, formatter: AxisFormatter | None) -> "Plot":
        self.axis_formatters = (formatter, self.axis_formatters[1])
        return self

    def set_y_axis_formatter(self, formatter: AxisFormatter | None) -> "Plot":
        self.axis_formatters = (self.axis_formatters[0], formatter)
        return self

    def include_x(self, x: float) -> "Plot":
        self.min_auto_bounds.extend_with_x(float(x))
        return self

    def include_y(self, y: float) -> "Plot":
        self.min_auto_bounds.extend_with_y(float(y))
        return self

    def set_link_axis(self, group: LinkedAxisGroup | None) -> "Plot":
        self.linked_axes = group
        return self

    def set_legend(self, legend: Legend | None) -> "Plot":
        self.legend_widget = legend
        return self

    def set_show_background(self, on: bool) -> "Plot":
        self.show_background = bool(on)
        return self

    def set_show_axes(self, x: bool, y: bool) -> "Plot":
        self.show_axes = (bool(x), bool(y))
        return self

    def _load_memory(self, store: PlotMemoryStore, rect: ScreenRect) -> PlotMemory:
        memory = store.load(self.id_source)
        if memory is None:
            return PlotMemory.initial(
                rect,
                self.min_auto_bounds,
                x_centered=self.center_x_axis,
                y_centered=self.center_y_axis,
            )
        if memory.min_auto_bounds != self.min_auto_bounds:
            # Hidden items, the last transform and a pending box zoom survive the reset.
            LOGGER.debug("minimum auto bounds changed for %r, resetting", self.id_source)
            memory.auto_bounds = not self.min_auto_bounds.is_valid()
            memory.hovered_entry = None
            memory.min_auto_bounds = self.min_auto_bounds.copy()
        return memory

    def _apply_link(self, bounds: PlotBounds) -> bool:
        group = self.linked_axes
        if group is None:
            return False
        linked = group.get()
        if linked is None:
            return False
        if group.link_x:
            bounds.set_x(linked)
        if group.link_y:
            bounds.set_y(linked)
        return True

    def show(self, frame: FrameContext, build_fn: Callable[[PlotUi], Any]) -> PlotResponse:
        size = resolve_plot_size(
            frame.available_rect.size,
            width=self.width,
            height=self.height,
            view_aspect=self.view_aspect,
            min_size=self.min_size,
        )
        rect = allocate_rect(frame.available_rect, size)
        plot_input = frame.input
        hover_pos = plot_input.hover_pos(rect)

        memory = self._load_memory(frame.memory, rect)
        auto_bounds = memory.auto_bounds

        plot_ui = PlotUi(plot_input, rect, memory.last_screen_transform, dark_mode=frame.dark_mode)
        inner = build_fn(plot_ui)
        all_items = plot_ui.items

        shapes: list[Shape] = []
        if self.show_background:
            shapes.append(
                RectShape(
                    rect=rect,
                    fill=background_color(dark_mode=frame.dark_mode),
                    stroke=Stroke(1.0, frame_color(dark_mode=frame.dark_mode)),
                )
            )

        over_legend = False
        legend = self.legend_widget
        if legend is not None:
            over_legend = legend.handle_pointer(hover_pos, clicked=plot_input.clicked_by("primary"), frame=rect)

        hover_config = self.hover_config
        if memory.hovered_entry is not None:
            hover_config = HoverConfig(hover_line="none", show_hover_label=hover_config.show_hover_label)

        items = [item for item in all_items if item.name() not in memory.hidden_items]
        if memory.hovered_entry is not None:
            for item in items:
                if item.name() == memory.hovered_entry:
                    item.highlight()

        bounds = memory.last_screen_transform.bounds.copy()
        linked = self._apply_link(bounds)
        if linked:
            LOGGER.debug("plot %r took bounds from its link group", self.id_source)
            auto_bounds = False

        if plot_input.double_clicked_by("primary"):
            auto_bounds = True

        if auto_bounds or not bounds.is_valid():
            bounds = self.min_auto_bounds.copy()
            for item in items:
                bounds.merge(item.get_bounds())
            bounds.add_relative_margin(self.margin_fraction)
            if linked:
                # Linked axes keep the group's value; auto-fit only fills the rest.
                self._apply_link(bounds)

        transform = ScreenTransform(rect, bounds, self.center_x_axis, self.center_y_axis)

        if self.data_aspect is not None:
            group = self.linked_axes
            preserve_y = group is not None and group.link_y and not group.link_x
            transform.set_aspect(self.data_aspect, preserve_y)

        result = apply_interactions(
            transform,
            plot_input,
            hover_pos,
            InteractionConfig(
                allow_zoom=self.allow_zoom,
                allow_drag=self.allow_drag,
                allow_boxed_zoom=self.allow_boxed_zoom,
                boxed_zoom_button=self.boxed_zoom_pointer_button,
                uniform_zoom=self.data_aspect is not None,
            ),
            auto_bounds=auto_bounds,
            last_click_pos_for_zoom=memory.last_click_pos_for_zoom,
        )

        x_range = transform.bounds.range_x()
        for item in items:
            item.initialize(x_range)

        prepared = PreparedPlot(
            items=items,
            transform=transform.copy(),
            hover_config=hover_config,
            hover_formatter=self.hover_formatter,
            axis_formatters=self.axis_formatters,
            show_axes=self.show_axes,
            dark_mode=frame.dark_mode,
        )
        hovered_item = prepared.get_shapes(None if over_legend else hover_pos, shapes)

        if result.zoom_box is not None:
            shapes.append(RectShape(rect=result.zoom_box, stroke=Stroke(4.0, (0, 0, 139, 255))))
            shapes.append(RectShape(rect=result.zoom_box, stroke=Stroke(2.0, (255, 255, 255, 255))))

        hidden_items = memory.hidden_items
        hovered_entry = memory.hovered_entry
        if legend is not None:
            outcome = legend.update(all_items, hidden_items)
            shapes.extend(legend.get_shapes(rect, dark_mode=frame.dark_mode))
            hidden_items = set(outcome.hidden_items)
            hovered_entry = outcome.hovered_entry

        if self.linked_axes is not None:
            self.linked_axes.set(transform.bounds)

        frame.memory.store(
            self.id_source,
            PlotMemory(
                auto_bounds=result.auto_bounds,
                hovered_entry=hovered_entry,
                hidden_items=hidden_items,
                min_auto_bounds=self.min_auto_bounds,
                last_screen_transform=transform,
                last_click_pos_for_zoom=result.last_click_pos_for_zoom,
            ),
        )

        cursor: CursorIcon | None = None
        if result.phase == "panning":
            cursor = "grabbing"
        elif hover_pos is not None and not over_legend and hover_config.hover_line != "none":
            cursor = "crosshair"

        return PlotResponse(
            inner=inner,
            shapes=shapes,
            transform=transform,
            rect=rect,
            hovered=hover_pos is not None,
            auto_bounds=result.auto_bounds,
            hovered_item=None if hovered_item is None else hovered_item.name(),
            cursor=cursor,
            phase=result.phase,
        )

