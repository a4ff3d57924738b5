# src/graphlens/core/__init__.py
"""
graphlens 的核心協調器套件。

此套件負責將描述產生、佈局引擎與圖片儲存/檢視串連起來。
"""

from .config_loader import ConfigLoader
from .job_runner import JobRunner
from .options import RenderOptions

__all__ = [
    "ConfigLoader",
    "JobRunner",
    "RenderOptions",
]
