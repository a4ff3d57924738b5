# src/graphlens/viewer/window.py
"""
可重複使用的圖片檢視視窗。

每個 ViewerWindow 持有一個延遲建立的 Qt 視窗與一個圖片槽位。
關閉視窗只會將其隱藏，之後的 `show()` 會沿用同一個視窗。
同一個 ViewerWindow 被多個執行緒同時 `show()` 時，以最後寫入者為準，呼叫端需自行序列化。
"""

# 1. 標準庫導入
import contextlib
import logging

# 2. 第三方庫導入
from PIL import Image
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QImage, QKeySequence, QPixmap, QShortcut
from PySide6.QtWidgets import QLabel, QMainWindow, QScrollArea

# 3. 本專案導入
from graphlens.utils.lazy_utils import LazyCell
from graphlens.viewer.activator import PlatformActivator, create_platform_activator
from graphlens.viewer.application import get_task_queue

DEFAULT_TITLE = "graphlens"
DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 768


def pil_to_qimage(image: Image.Image) -> QImage:
    """將 Pillow 圖片複製為獨立的 QImage。"""
    rgba = image.convert("RGBA")
    data = rgba.tobytes("raw", "RGBA")
    qimage = QImage(data, rgba.width, rgba.height, rgba.width * 4, QImage.Format.Format_RGBA8888)
    return qimage.copy()


class ImageFrame(QMainWindow):
    """
    顯示單張圖片的捲動視窗。

    未設定 WA_DeleteOnClose，因此關閉 (標題列或 Ctrl+W / Cmd+W) 只會隱藏視窗，
    底層資源保留供下次顯示使用。
    """

    visibility_changed = Signal(bool)

    def __init__(self, title: str, width: int, height: int):
        super().__init__()
        self.setWindowTitle(title)

        self.image_label = QLabel()
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        scroll_area = QScrollArea()
        scroll_area.setWidget(self.image_label)
        scroll_area.setWidgetResizable(True)
        self.setCentralWidget(scroll_area)
        self.resize(width, height)

        close_shortcut = QShortcut(QKeySequence(QKeySequence.StandardKey.Close), self)
        close_shortcut.setContext(Qt.ShortcutContext.WindowShortcut)
        close_shortcut.activated.connect(self.close)

    def set_image(self, image: Image.Image):
        self.image_label.setPixmap(QPixmap.fromImage(pil_to_qimage(image)))

    def showEvent(self, event):
        super().showEvent(event)
        self.visibility_changed.emit(True)

    def hideEvent(self, event):
        super().hideEvent(event)
        self.visibility_changed.emit(False)


class ViewerWindow:
    """
    檢視視窗的控制代碼。

    Attributes:
        image: 最近一次 `show()` 傳入的圖片 (圖片槽位)。
        visible: 視窗目前是否可見。
    """

    def __init__(
        self,
        title: str = DEFAULT_TITLE,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        activator: PlatformActivator | None = None,
    ):
        self.title = title
        self.width = width
        self.height = height
        self.activator = activator or create_platform_activator()
        self.image: Image.Image | None = None
        self.visible = False
        self._frame_cell: LazyCell[ImageFrame] = LazyCell(self._create_frame)

    @property
    def materialized(self) -> bool:
        """Qt 視窗是否已經建立。"""
        return self._frame_cell.initialized

    @property
    def frame(self) -> ImageFrame:
        """底層的 Qt 視窗；只能在 UI 執行緒上存取。"""
        return self._frame_cell.get()

    def _create_frame(self) -> ImageFrame:
        frame = ImageFrame(self.title, self.width, self.height)
        frame.visibility_changed.connect(self._on_visibility_changed)
        logging.debug(f"已建立檢視視窗 '{self.title}' ({self.width}x{self.height})。")
        return frame

    def _on_visibility_changed(self, visible: bool):
        self.visible = visible

    def show(self, image: Image.Image):
        """
        在視窗中顯示 `image`，並將視窗帶到最前方。

        圖片槽位與可見旗標會在呼叫端執行緒上同步更新；
        把視窗帶到前景的動作則非同步地排入 UI 執行緒。
        """
        queue = get_task_queue()
        self.image = image
        self.visible = True
        queue.run_or_submit(self._present)
        queue.submit(self._send_to_front)

    def _present(self):
        frame = self.frame
        if self.image is not None:
            frame.set_image(self.image)
        frame.setVisible(True)

    def _send_to_front(self):
        """
        確保視窗真的被移到最前方。

        部分視窗管理器只在「永遠置頂」旗標切換的瞬間才接受提升請求，
        因此先設定再清除該旗標，避免視窗永久釘在最上層。
        """
        frame = self.frame
        frame.setWindowState(frame.windowState() & ~Qt.WindowState.WindowMinimized)
        frame.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)
        frame.show()
        frame.repaint()
        frame.raise_()
        frame.activateWindow()
        frame.setFocus()
        frame.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, False)
        frame.show()

        with contextlib.suppress(Exception):
            self.activator.activate()


def create_window(
    title: str = DEFAULT_TITLE,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    activator: PlatformActivator | None = None,
) -> ViewerWindow:
    """建立一個獨立的檢視視窗控制代碼；Qt 視窗會在第一次顯示時才建立。"""
    return ViewerWindow(title, width, height, activator)


default_window = create_window()
