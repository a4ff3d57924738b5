# src/graphlens/renderers/process_renderer.py
"""
封裝 Graphviz 佈局引擎的子程序呼叫。

此模組負責把 DOT 原始碼交給外部佈局引擎 (dot, neato, fdp, sfdp, twopi, circo ...)，
擷取其標準輸出與標準錯誤，並將結果轉換成點陣圖或 SVG 文字。

成功與否只看輸出內容，不看引擎的結束碼：
點陣圖路徑要求輸出非空且可解碼，向量路徑只要求輸出非空。
"""

# 1. 標準庫導入
import logging
import subprocess
from dataclasses import dataclass

# 2. 第三方庫導入
from PIL import Image

# 3. 本專案導入
from graphlens.errors import DecodeError, RenderError
from graphlens.renderers import image_store
from graphlens.renderers.error_formatter import format_error

DEFAULT_COMMAND = "dot"
RASTER_FORMAT = "png"
VECTOR_FORMAT = "svg"


@dataclass(frozen=True)
class RawOutput:
    """一次引擎呼叫擷取到的完整輸出。"""

    stdout: bytes
    stderr: str
    returncode: int


def build_command(command: str, output_format: str, dpi: int | str | None = None) -> list[str]:
    """組合引擎的命令列參數。"""
    args = [command, f"-T{output_format}"]
    if dpi is not None:
        args.append(f"-Gdpi={dpi}")
    return args


def run_layout(
    descriptor: str,
    command: str = DEFAULT_COMMAND,
    output_format: str = RASTER_FORMAT,
    dpi: int | str | None = None,
    timeout: float | None = None,
) -> RawOutput:
    """
    執行一次佈局引擎並等待其結束。

    Args:
        descriptor: DOT 原始碼，會以 UTF-8 完整寫入引擎的標準輸入。
        command: 佈局引擎執行檔名稱，必須位於 PATH 上。
        output_format: 引擎的輸出格式 (`-T` 參數)。
        dpi: 選填的解析度，以 `-Gdpi` 傳給引擎。
        timeout: 選填的逾時秒數；預設為 None，即無限等待。

    Returns:
        包含標準輸出位元組、標準錯誤文字與結束碼的 RawOutput。

    Raises:
        OSError: 執行檔不存在或無法執行。
        subprocess.TimeoutExpired: 設定了 timeout 且引擎逾時 (子程序已被終止)。
    """
    args = build_command(command, output_format, dpi)
    logging.debug(f"執行佈局引擎: {' '.join(args)}")
    process = subprocess.run(
        args, input=descriptor.encode("utf-8"), capture_output=True, check=False, timeout=timeout
    )
    return RawOutput(
        stdout=process.stdout,
        stderr=process.stderr.decode("utf-8", errors="replace"),
        returncode=process.returncode,
    )


def _warn_on_exit_code(command: str, output: RawOutput):
    if output.returncode != 0:
        logging.warning(f"Graphviz ({command}) 結束碼為 {output.returncode}，但仍產生了輸出，將沿用此輸出。")


def render_raster(
    descriptor: str,
    command: str = DEFAULT_COMMAND,
    dpi: int | str | None = None,
    timeout: float | None = None,
) -> Image.Image:
    """
    將 DOT 原始碼渲染為 PNG 並解碼成圖片。

    Raises:
        RenderError: 引擎沒有輸出，或輸出無法解碼為圖片。
    """
    output = run_layout(descriptor, command, RASTER_FORMAT, dpi=dpi, timeout=timeout)
    try:
        image = image_store.decode(output.stdout)
    except DecodeError:
        raise RenderError(format_error(descriptor, output.stderr), descriptor, output.stderr) from None
    _warn_on_exit_code(command, output)
    return image


def render_vector(
    descriptor: str,
    command: str = DEFAULT_COMMAND,
    dpi: int | str | None = None,
    timeout: float | None = None,
) -> str:
    """
    將 DOT 原始碼渲染為 SVG 文字。

    Raises:
        RenderError: 引擎沒有輸出。
    """
    output = run_layout(descriptor, command, VECTOR_FORMAT, dpi=dpi, timeout=timeout)
    if not output.stdout:
        raise RenderError(format_error(descriptor, output.stderr), descriptor, output.stderr)
    _warn_on_exit_code(command, output)
    return output.stdout.decode("utf-8", errors="replace")
