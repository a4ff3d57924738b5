# src/graphlens/errors.py
"""
定義渲染流程中會向呼叫端拋出的例外類型。
"""

# 1. 標準庫導入
# (無)

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)


class RenderError(ValueError):
    """
    佈局引擎沒有產生可用輸出 (空輸出或無法解碼) 時拋出。

    Attributes:
        descriptor: 交給引擎的原始 DOT 描述。
        engine_error: 引擎在標準錯誤串流上輸出的文字。
    """

    def __init__(self, message: str, descriptor: str, engine_error: str):
        super().__init__(message)
        self.descriptor = descriptor
        self.engine_error = engine_error


class DecodeError(ValueError):
    """位元組內容不是可辨識的點陣圖格式。"""


class MissingDestinationError(OSError):
    """儲存操作沒有指定 `filename`。"""


class UnsupportedFormatError(OSError):
    """Pillow 無法以指定的格式寫出圖片。"""
