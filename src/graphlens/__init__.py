# src/graphlens/__init__.py
"""
graphlens：以 Graphviz 佈局引擎將圖與樹渲染為圖片，並在可重複使用的視窗中檢視或儲存。
"""

from .builders import graph_to_dot, networkx_args, networkx_to_dot, tree_to_dot
from .core.facade import (
    dot_to_image,
    dot_to_svg,
    graph_to_image,
    graph_to_svg,
    save_graph,
    save_image,
    save_tree,
    tree_to_image,
    tree_to_svg,
    view_graph,
    view_image,
    view_tree,
)
from .errors import DecodeError, MissingDestinationError, RenderError, UnsupportedFormatError
from .viewer import ViewerWindow, create_window, default_window, run_event_loop

__all__ = [
    "DecodeError",
    "MissingDestinationError",
    "RenderError",
    "UnsupportedFormatError",
    "ViewerWindow",
    "create_window",
    "default_window",
    "dot_to_image",
    "dot_to_svg",
    "graph_to_dot",
    "graph_to_image",
    "graph_to_svg",
    "networkx_args",
    "networkx_to_dot",
    "run_event_loop",
    "save_graph",
    "save_image",
    "save_tree",
    "tree_to_dot",
    "tree_to_image",
    "tree_to_svg",
    "view_graph",
    "view_image",
    "view_tree",
]
