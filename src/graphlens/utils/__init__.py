# src/graphlens/utils/__init__.py
"""
通用工具函式套件。
"""

from .lazy_utils import LazyCell
from .logging_utils import QtNoiseFilter, setup_logging
from .path_utils import find_project_root, resolve_relative

__all__ = [
    "LazyCell",
    "QtNoiseFilter",
    "find_project_root",
    "resolve_relative",
    "setup_logging",
]
