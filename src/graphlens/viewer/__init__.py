# src/graphlens/viewer/__init__.py
"""
檢視器套件：單一可重複使用的圖片視窗與其 UI 執行緒協調。
"""

from .activator import AppleScriptActivator, PlatformActivator, create_platform_activator
from .application import UiTaskQueue, ensure_application, get_task_queue, run_event_loop
from .window import ImageFrame, ViewerWindow, create_window, default_window

__all__ = [
    "AppleScriptActivator",
    "ImageFrame",
    "PlatformActivator",
    "UiTaskQueue",
    "ViewerWindow",
    "create_platform_activator",
    "create_window",
    "default_window",
    "ensure_application",
    "get_task_queue",
    "run_event_loop",
]
