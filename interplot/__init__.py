from interplot.bounds import PlotBounds, Value
from interplot.errors import PlotDataError
from interplot.geometry import ScreenRect
from interplot.hover import HoverConfig, default_hover_formatter
from interplot.input import PlotInput, parse_plot_input
from interplot.items import (
    Bar,
    BarChart,
    BoxElem,
    BoxPlot,
    BoxSpread,
    HLine,
    Line,
    PlotImage,
    PlotItem,
    Points,
    Polygon,
    Text,
    Values,
    VLine,
)
from interplot.legend import Legend, LegendCollaborator, LegendOutcome
from interplot.linking import LinkedAxisGroup
from interplot.memory import PlotMemory, PlotMemoryStore
from interplot.plot import FrameContext, Plot, PlotResponse, PlotUi
from interplot.transform import ScreenTransform

__all__ = [
    "Bar",
    "BarChart",
    "BoxElem",
    "BoxPlot",
    "BoxSpread",
    "FrameContext",
    "HLine",
    "HoverConfig",
    "Legend",
    "LegendCollaborator",
    "LegendOutcome",
    "Line",
    "LinkedAxisGroup",
    "Plot",
    "PlotBounds",
    "PlotDataError",
    "PlotImage",
    "PlotInput",
    "PlotItem",
    "PlotMemory",
    "PlotMemoryStore",
    "PlotResponse",
    "PlotUi",
    "Points",
    "Polygon",
    "ScreenRect",
    "ScreenTransform",
    "Text",
    "VLine",
    "Value",
    "Values",
    "default_hover_formatter",
    "parse_plot_input",
]
