# src/graphlens/core/config_loader.py
"""
負責載入並合併工作區設定檔 (YAML)。
"""

# 1. 標準庫導入
import copy
import logging
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
import yaml

# 3. 本專案導入
from graphlens.renderers.image_store import DEFAULT_IMAGE_FORMAT
from graphlens.renderers.process_renderer import DEFAULT_COMMAND
from graphlens.viewer.window import DEFAULT_HEIGHT, DEFAULT_TITLE, DEFAULT_WIDTH

DEFAULT_CONFIG: dict[str, Any] = {
    "rendering": {
        "command": DEFAULT_COMMAND,
        "dpi": None,
        "timeout": None,
        "image_format": DEFAULT_IMAGE_FORMAT,
    },
    "viewer": {
        "title": DEFAULT_TITLE,
        "width": DEFAULT_WIDTH,
        "height": DEFAULT_HEIGHT,
    },
    "jobs": [],
}


class ConfigLoader:
    """一個處理設定檔載入與預設值合併的類別。"""

    def __init__(self, config_path: Path):
        self.config_path = config_path
        self.config = self._load_yaml(config_path)
        if self.config is not None:
            self.config = self._merge_configs(copy.deepcopy(DEFAULT_CONFIG), self.config)

    @property
    def base_dir(self) -> Path:
        """設定檔中相對路徑的基準目錄。"""
        return self.config_path.parent

    @staticmethod
    def _load_yaml(path: Path) -> dict[str, Any] | None:
        """安全地載入一個 YAML 檔案。"""
        if not path.is_file():
            logging.error(f"指定的設定檔不存在: {path}")
            return None
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logging.error(f"解析設定檔 '{path.name}' 時發生錯誤: {e}")
            return None
        if data is None:
            return {}
        if not isinstance(data, dict):
            logging.error(f"設定檔 '{path.name}' 的頂層必須是映射 (mapping)。")
            return None
        return data

    @staticmethod
    def _merge_configs(default: dict, user: dict) -> dict:
        """遞迴地合併使用者設定到預設設定中。"""
        for key, value in user.items():
            if isinstance(value, dict) and isinstance(default.get(key), dict):
                default[key] = ConfigLoader._merge_configs(default[key], value)
            else:
                default[key] = value
        return default
