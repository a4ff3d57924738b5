# src/graphlens/core/facade.py
"""
面向使用者的渲染介面。

將描述產生 (builders) → 佈局引擎 (renderers) → 圖片儲存或檢視視窗 (viewer) 串連起來。
除了檢視視窗中的平台啟用步驟外，任何一層的例外都會原封不動地傳給呼叫端。

所有 `*_graph` / `*_tree` 函式接受相同的關鍵字選項：
`command`, `dpi`, `timeout`, `filename`, `image_format`, `output_format` 由渲染流程使用，
`output_format` 若有指定，必須與函式產生的格式一致 (`*_image` / `save_*` 為 png，`*_svg` 為 svg)，
其餘選項 (例如 `directed`, `vertical`, `node_descriptor`) 原樣交給描述產生器。
"""

# 1. 標準庫導入
import logging
from collections.abc import Callable, Hashable, Iterable
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
from PIL import Image

# 3. 本專案導入
from graphlens.builders.descriptor_builder import graph_to_dot, tree_to_dot
from graphlens.core.options import RenderOptions
from graphlens.errors import MissingDestinationError
from graphlens.renderers import image_store
from graphlens.renderers.image_store import DEFAULT_IMAGE_FORMAT
from graphlens.renderers.process_renderer import RASTER_FORMAT, VECTOR_FORMAT, render_raster, render_vector
from graphlens.viewer.window import ViewerWindow, default_window

Nodes = Iterable[Hashable]
Adjacent = Callable[[Any], Iterable[Hashable]]
Branch = Callable[[Any], bool]
Children = Callable[[Any], Iterable[Any]]


def _split_options(options: dict[str, Any], expected_format: str) -> tuple[RenderOptions, dict[str, Any]]:
    render_options, descriptor_options = RenderOptions.from_options(options)
    render_options.check_output_format(expected_format)
    return render_options, descriptor_options


def view_image(image: Image.Image, window: ViewerWindow | None = None):
    """在檢視視窗中顯示圖片；未指定 `window` 時使用預設視窗。"""
    (window or default_window).show(image)


def save_image(image: Image.Image, filename: str | Path, image_format: str = DEFAULT_IMAGE_FORMAT):
    """將圖片以指定格式 (預設 png) 儲存到 `filename`。"""
    image_store.write(image, filename, image_format)


def dot_to_image(descriptor: str, **options: Any) -> Image.Image:
    """將 DOT 原始碼渲染為圖片；`command` 選擇佈局引擎，預設為 'dot'。"""
    render_options, _ = _split_options(options, RASTER_FORMAT)
    return render_raster(descriptor, **render_options.engine_kwargs())


def dot_to_svg(descriptor: str, **options: Any) -> str:
    """將 DOT 原始碼渲染為 SVG 文字。"""
    render_options, _ = _split_options(options, VECTOR_FORMAT)
    return render_vector(descriptor, **render_options.engine_kwargs())


def graph_to_image(nodes: Nodes, adjacent: Adjacent, **options: Any) -> Image.Image:
    """
    將圖渲染為圖片。

    需要 Graphviz 的佈局指令位於 PATH 上；預設使用 'dot'，可用 `command` 指定其他引擎。
    """
    render_options, descriptor_options = _split_options(options, RASTER_FORMAT)
    descriptor = graph_to_dot(nodes, adjacent, **descriptor_options)
    return render_raster(descriptor, **render_options.engine_kwargs())


def graph_to_svg(nodes: Nodes, adjacent: Adjacent, **options: Any) -> str:
    """將圖渲染為 SVG 文字。"""
    render_options, descriptor_options = _split_options(options, VECTOR_FORMAT)
    descriptor = graph_to_dot(nodes, adjacent, **descriptor_options)
    return render_vector(descriptor, **render_options.engine_kwargs())


def tree_to_image(branch: Branch, children: Children, root: Any, **options: Any) -> Image.Image:
    """將樹渲染為圖片。"""
    render_options, descriptor_options = _split_options(options, RASTER_FORMAT)
    descriptor = tree_to_dot(branch, children, root, **descriptor_options)
    return render_raster(descriptor, **render_options.engine_kwargs())


def tree_to_svg(branch: Branch, children: Children, root: Any, **options: Any) -> str:
    """將樹渲染為 SVG 文字。"""
    render_options, descriptor_options = _split_options(options, VECTOR_FORMAT)
    descriptor = tree_to_dot(branch, children, root, **descriptor_options)
    return render_vector(descriptor, **render_options.engine_kwargs())


def view_graph(
    nodes: Nodes,
    adjacent: Adjacent,
    window: ViewerWindow | None = None,
    **options: Any,
):
    """渲染圖並顯示在檢視視窗中。"""
    view_image(graph_to_image(nodes, adjacent, **options), window)


def view_tree(
    branch: Branch,
    children: Children,
    root: Any,
    window: ViewerWindow | None = None,
    **options: Any,
):
    """渲染樹並顯示在檢視視窗中。"""
    view_image(tree_to_image(branch, children, root, **options), window)


def _require_destination(render_options: RenderOptions) -> str:
    if not render_options.filename:
        raise MissingDestinationError("儲存圖片需要指定 'filename' 選項。")
    return render_options.filename


def save_graph(nodes: Nodes, adjacent: Adjacent, **options: Any):
    """渲染圖並儲存到 `filename` 選項指定的路徑。"""
    render_options, descriptor_options = _split_options(options, RASTER_FORMAT)
    filename = _require_destination(render_options)
    descriptor = graph_to_dot(nodes, adjacent, **descriptor_options)
    image = render_raster(descriptor, **render_options.engine_kwargs())
    save_image(image, filename, render_options.image_format)


def save_tree(branch: Branch, children: Children, root: Any, **options: Any):
    """渲染樹並儲存到 `filename` 選項指定的路徑。"""
    render_options, descriptor_options = _split_options(options, RASTER_FORMAT)
    filename = _require_destination(render_options)
    descriptor = tree_to_dot(branch, children, root, **descriptor_options)
    image = render_raster(descriptor, **render_options.engine_kwargs())
    logging.debug(f"樹狀圖渲染完成 ({image.width}x{image.height})，準備儲存。")
    save_image(image, filename, render_options.image_format)
