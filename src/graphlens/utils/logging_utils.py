# src/graphlens/utils/logging_utils.py
"""
提供與日誌記錄相關的通用工具和過濾器。
"""

# 1. 標準庫導入
import logging

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)

QT_NOISE_MARKERS: tuple[str, ...] = (
    "propagateSizeHints",
    "QWindowsWindow::setGeometry",
    "Could not load the Qt platform plugin \"wayland\"",
)


class QtNoiseFilter(logging.Filter):
    """
    一個自訂的日誌過濾器，用於攔截 Qt 平台外掛常見且無害的警告訊息。
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """
        如果日誌訊息不包含任何已知的雜訊標記，則回傳 True。
        """
        message = record.getMessage()
        return not any(marker in message for marker in QT_NOISE_MARKERS)


def setup_logging(level: int = logging.INFO) -> None:
    """設定根日誌記錄器；若已存在處理器則不重複加入。"""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not root_logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        console_handler.setFormatter(formatter)
        console_handler.addFilter(QtNoiseFilter())
        root_logger.addHandler(console_handler)
