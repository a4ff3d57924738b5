# src/graphlens/viewer/activator.py
"""
平台層級的應用程式啟用 (把整個程式帶到前景)。

這只是外觀上的加強：任何失敗都由呼叫端丟棄，不影響視窗的正確性。
"""

# 1. 標準庫導入
import os
import shutil
import subprocess
import sys

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)


class PlatformActivator:
    """預設實作：在沒有對應腳本機制的平台上什麼都不做。"""

    def activate(self) -> None:
        """嘗試把目前的程序帶到前景。"""


class AppleScriptActivator(PlatformActivator):
    """透過 `osascript` 要求 macOS 將目前程序設為最前方的應用程式。"""

    SCRIPT_TEMPLATE = (
        'tell application "System Events" to '
        'set frontmost of (first process whose unix id is {pid}) to true'
    )

    def __init__(self, executable: str = "osascript", timeout: float = 5.0):
        self.executable = executable
        self.timeout = timeout

    def activate(self) -> None:
        script = self.SCRIPT_TEMPLATE.format(pid=os.getpid())
        subprocess.run(
            [self.executable, "-e", script], capture_output=True, check=True, timeout=self.timeout
        )


def create_platform_activator() -> PlatformActivator:
    """依目前平台選擇合適的啟用器。"""
    if sys.platform == "darwin" and shutil.which("osascript"):
        return AppleScriptActivator()
    return PlatformActivator()
