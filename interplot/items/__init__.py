from interplot.items.bars import Bar, BarChart, Orientation
from interplot.items.base import ClosestElem, ItemBase, PlotItem
from interplot.items.boxplot import BoxElem, BoxPlot, BoxSpread
from interplot.items.image import PlotImage
from interplot.items.reference import HLine, Text, VLine
from interplot.items.series import Line, MarkerShape, Points, Polygon
from interplot.items.values import ExplicitGenerator, Values

__all__ = [
    "Bar",
    "BarChart",
    "BoxElem",
    "BoxPlot",
    "BoxSpread",
    "ClosestElem",
    "ExplicitGenerator",
    "HLine",
    "ItemBase",
    "Line",
    "MarkerShape",
    "Orientation",
    "PlotImage",
    "PlotItem",
    "Points",
    "Polygon",
    "Text",
    "VLine",
    "Values",
]
