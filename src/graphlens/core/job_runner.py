# src/graphlens/core/job_runner.py
"""
依工作區設定檔批次渲染 DOT 檔案。
"""

# 1. 標準庫導入
import logging
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from graphlens.core import facade
from graphlens.core.config_loader import ConfigLoader
from graphlens.utils.path_utils import resolve_relative
from graphlens.viewer.window import ViewerWindow, create_window


class JobRunner:
    """一個執行工作區中所有渲染工作的類別。"""

    def __init__(self, config_path: Path):
        self.config_path = config_path
        self.config_loader = ConfigLoader(config_path)
        self.config = self.config_loader.config
        self._window: ViewerWindow | None = None

    def _viewer_window(self) -> ViewerWindow:
        if self._window is None:
            viewer_config = self.config["viewer"]
            self._window = create_window(viewer_config["title"], viewer_config["width"], viewer_config["height"])
        return self._window

    def _job_options(self, job: dict[str, Any]) -> dict[str, Any]:
        """以工作本身的設定覆寫 `rendering` 區段的預設值。"""
        options = dict(self.config["rendering"])
        for key in ("command", "dpi", "timeout", "image_format"):
            if key in job:
                options[key] = job[key]
        return options

    def run_job(self, job: dict[str, Any]) -> bool:
        """
        執行單一工作。

        Returns:
            此工作是否開啟了檢視視窗。
        """
        source = job.get("source")
        if not source:
            raise ValueError("工作缺少 'source' 欄位。")

        source_path = resolve_relative(self.config_loader.base_dir, source)
        descriptor = source_path.read_text(encoding="utf-8")
        options = self._job_options(job)

        image = None
        output = job.get("output")
        if output:
            output_path = resolve_relative(self.config_loader.base_dir, output)
            if output_path.suffix.lower() == ".svg":
                output_path.write_text(facade.dot_to_svg(descriptor, **options), encoding="utf-8")
                logging.info(f"SVG 已成功儲存至: {output_path}")
            else:
                image = facade.dot_to_image(descriptor, **options)
                image_format = job.get("image_format") or output_path.suffix[1:] or options["image_format"]
                facade.save_image(image, output_path, image_format)

        if job.get("view"):
            if image is None:
                image = facade.dot_to_image(descriptor, **options)
            facade.view_image(image, self._viewer_window())
            return True
        return False

    def run(self) -> bool:
        """
        執行所有工作；單一工作失敗時記錄錯誤並繼續。

        Returns:
            是否有任何工作開啟了檢視視窗。
        """
        if self.config is None:
            logging.error(f"因設定檔 '{self.config_path.name}' 載入失敗，終止處理。")
            return False

        jobs = self.config.get("jobs", [])
        if not isinstance(jobs, list) or not jobs:
            logging.warning(f"設定檔 '{self.config_path.name}' 中 'jobs' 為空或格式不正確。")
            return False

        logging.info(f"========== 開始處理 {len(jobs)} 個渲染工作 ==========")
        viewed = False
        for index, job in enumerate(jobs, start=1):
            if not isinstance(job, dict):
                logging.error(f"工作 #{index} 格式不正確 (應為映射，實際為 {type(job).__name__})，已跳過。")
                continue
            name = job.get("name") or job.get("source") or f"#{index}"
            try:
                viewed = self.run_job(job) or viewed
                logging.info(f"工作 '{name}' 完成。")
            except Exception as e:
                logging.error(f"處理工作 '{name}' 時發生錯誤: {e}", exc_info=True)
        return viewed
