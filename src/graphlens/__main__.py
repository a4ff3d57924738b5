# src/graphlens/__main__.py
"""
graphlens 主執行入口。
"""

# 1. 標準庫導入
import logging
import sys
from pathlib import Path

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from graphlens.core.job_runner import JobRunner
from graphlens.utils.logging_utils import setup_logging
from graphlens.utils.path_utils import find_project_root
from graphlens.viewer.application import run_event_loop


def main(argv: list[str] | None = None) -> int:
    """主函式，讀取工作區設定並執行其中的所有渲染工作。"""
    setup_logging(logging.DEBUG)
    argv = sys.argv[1:] if argv is None else argv

    if argv:
        config_path = Path(argv[0])
    else:
        try:
            project_root = find_project_root()
        except FileNotFoundError as e:
            logging.error(f"初始化失敗: {e}")
            return 1
        config_path = project_root / "configs" / "workspace.yaml"

    if not config_path.is_file():
        logging.error(f"工作區設定檔 '{config_path}' 不存在。")
        logging.info("請從 'workspace.template.yaml' 複製一份並進行設定。")
        return 1

    runner = JobRunner(config_path)
    if runner.run():
        run_event_loop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
