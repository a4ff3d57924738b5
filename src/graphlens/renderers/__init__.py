# src/graphlens/renderers/__init__.py
"""
渲染器套件，負責呼叫佈局引擎並處理其輸出的圖片。
"""

from .error_formatter import format_error
from .image_store import decode, write
from .process_renderer import RawOutput, render_raster, render_vector, run_layout

__all__ = [
    "RawOutput",
    "decode",
    "format_error",
    "render_raster",
    "render_vector",
    "run_layout",
    "write",
]
