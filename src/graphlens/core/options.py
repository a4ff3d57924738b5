# src/graphlens/core/options.py
"""
單次渲染呼叫的選項。
"""

# 1. 標準庫導入
from dataclasses import dataclass, fields
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from graphlens.renderers.image_store import DEFAULT_IMAGE_FORMAT
from graphlens.renderers.process_renderer import DEFAULT_COMMAND


@dataclass(frozen=True)
class RenderOptions:
    """
    渲染選項。

    Attributes:
        command: 佈局引擎執行檔 ('dot', 'neato', 'fdp', 'sfdp', 'twopi', 'circo' ...)。
        output_format: 選填，'png' (點陣) 或 'svg' (向量)；必須與所呼叫的操作一致。
        filename: 儲存目的地，只有儲存操作需要。
        image_format: 儲存時的圖片格式。
        dpi: 選填，傳給引擎的 `-Gdpi`。
        timeout: 選填，引擎逾時秒數；None 表示無限等待。
    """

    command: str = DEFAULT_COMMAND
    output_format: str | None = None
    filename: str | None = None
    image_format: str = DEFAULT_IMAGE_FORMAT
    dpi: int | str | None = None
    timeout: float | None = None

    @classmethod
    def from_options(cls, options: dict[str, Any]) -> tuple["RenderOptions", dict[str, Any]]:
        """
        從關鍵字選項中分離出渲染選項。

        Returns:
            `(render_options, remaining)`；`remaining` 原封不動地交給描述產生器。
        """
        own_keys = {f.name for f in fields(cls)}
        render_kwargs = {k: v for k, v in options.items() if k in own_keys and v is not None}
        remaining = {k: v for k, v in options.items() if k not in own_keys}
        return cls(**render_kwargs), remaining

    def check_output_format(self, expected: str):
        """
        確認 `output_format` (若有指定) 與操作產生的格式一致。

        Raises:
            ValueError: 例如對 `graph_to_image` 指定了 `output_format="svg"`。
        """
        if self.output_format is not None and self.output_format.lower() != expected:
            raise ValueError(
                f"此操作產生 '{expected}' 輸出，與指定的 output_format='{self.output_format}' 不符。"
            )

    def engine_kwargs(self) -> dict[str, Any]:
        """傳給 `render_raster` / `render_vector` 的參數。"""
        return {"command": self.command, "dpi": self.dpi, "timeout": self.timeout}
