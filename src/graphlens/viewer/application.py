# src/graphlens/viewer/application.py
"""
管理 QApplication 與 UI 執行緒上的任務佇列。

核心職責：
1. 在第一次需要時建立 (或沿用既有的) QApplication；建立它的執行緒即為 UI 執行緒。
2. 提供一個綁定在 UI 執行緒的任務佇列，讓任何執行緒都能以「發送即忘」的方式排入工作。
3. 將 Qt 自身的訊息轉送到 logging。
"""

# 1. 標準庫導入
import logging
import sys
from collections.abc import Callable

# 2. 第三方庫導入
from PySide6.QtCore import QObject, Qt, QThread, QtMsgType, Signal, Slot, qInstallMessageHandler
from PySide6.QtWidgets import QApplication

# 3. 本專案導入
from graphlens.utils.lazy_utils import LazyCell

APP_NAME = "graphlens"

_QT_LOG_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def _forward_qt_message(mode: QtMsgType, context, message: str):
    """將 Qt 訊息轉送到根日誌記錄器。"""
    logging.log(_QT_LOG_LEVELS.get(mode, logging.WARNING), f"[Qt] {message}")


def ensure_application() -> QApplication:
    """取得現有的 QApplication，若不存在則在目前執行緒上建立一個。"""
    app = QApplication.instance()
    if app is None:
        qInstallMessageHandler(_forward_qt_message)
        app = QApplication(sys.argv)
        app.setApplicationName(APP_NAME)
        logging.debug("已建立 QApplication，目前執行緒即為 UI 執行緒。")
    return app


class UiTaskQueue(QObject):
    """
    綁定在 UI 執行緒上的任務佇列。

    `submit()` 可從任何執行緒呼叫；任務會透過 Qt 的佇列式連線在 UI 執行緒的事件迴圈中執行，
    呼叫端不會取得任何完成通知。
    """

    _task_posted = Signal(object)

    def __init__(self):
        super().__init__()
        self._task_posted.connect(self._run_task, Qt.ConnectionType.QueuedConnection)

    def on_ui_thread(self) -> bool:
        """目前執行緒是否為此佇列所屬的 UI 執行緒。"""
        return QThread.currentThread() == self.thread()

    def submit(self, task: Callable[[], None]):
        """將任務排入 UI 執行緒，立即返回。"""
        self._task_posted.emit(task)

    def run_or_submit(self, task: Callable[[], None]):
        """在 UI 執行緒上時直接執行任務，否則排入佇列。"""
        if self.on_ui_thread():
            task()
        else:
            self.submit(task)

    @Slot(object)
    def _run_task(self, task: Callable[[], None]):
        try:
            task()
        except Exception as e:
            logging.error(f"UI 執行緒上的任務執行失敗: {e}", exc_info=True)


def _create_task_queue() -> UiTaskQueue:
    app = ensure_application()
    queue = UiTaskQueue()
    queue.moveToThread(app.thread())
    return queue


_TASK_QUEUE: LazyCell[UiTaskQueue] = LazyCell(_create_task_queue)


def get_task_queue() -> UiTaskQueue:
    """取得全域唯一的 UI 任務佇列。"""
    return _TASK_QUEUE.get()


def run_event_loop() -> int:
    """
    執行 Qt 事件迴圈，直到最後一個可見視窗被關閉 (隱藏) 為止。

    必須在 UI 執行緒上呼叫。
    """
    app = ensure_application()
    logging.info("進入檢視器事件迴圈，關閉所有視窗後返回。")
    return app.exec()
