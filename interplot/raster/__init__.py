from .canvas import blit, draw_hline, draw_vline, fill_rect, new_canvas
from .draw_lines import draw_polyline, draw_segment
from .draw_markers import draw_disc
from .draw_text import draw_text, text_size
from .paint import render_frame, render_shapes, save_png

__all__ = [
    "blit",
    "draw_disc",
    "draw_hline",
    "draw_polyline",
    "draw_segment",
    "draw_text",
    "draw_vline",
    "fill_rect",
    "new_canvas",
    "render_frame",
    "render_shapes",
    "save_png",
    "text_size",
]
