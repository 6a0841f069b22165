from __future__ import annotations


class PlotDataError(ValueError):
    """Raised when series input cannot be turned into plottable values."""
