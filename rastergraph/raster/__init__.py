from .canvas import draw_hline, draw_pixel, draw_vline, fill_rect, new_canvas, stroke_rect
from .draw_lines import draw_polyline, draw_segment
from .draw_markers import draw_markers
from .draw_text import draw_text, text_size
from .fonts import FontAsset, get_font_asset, reset_font_asset

__all__ = [
    "FontAsset",
    "draw_hline",
    "draw_markers",
    "draw_pixel",
    "draw_polyline",
    "draw_segment",
    "draw_text",
    "draw_vline",
    "fill_rect",
    "get_font_asset",
    "new_canvas",
    "reset_font_asset",
    "stroke_rect",
    "text_size",
]
