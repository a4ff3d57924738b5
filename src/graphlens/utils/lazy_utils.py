# src/graphlens/utils/lazy_utils.py
"""
提供延遲初始化 (initialize-once) 的通用容器。
"""

# 1. 標準庫導入
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)

T = TypeVar("T")


class LazyCell(Generic[T]):
    """
    包裝一個工廠函式，在第一次 `get()` 時才建立值，且保證最多只建立一次。

    多個執行緒同時呼叫 `get()` 時，只有一個會執行工廠函式，其餘會等待並取得同一個值。
    若工廠函式拋出例外，例外會傳給當次的呼叫者，下一次 `get()` 會重新嘗試。
    """

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._lock = threading.Lock()
        self._value: T | None = None
        self._initialized = False

    @property
    def initialized(self) -> bool:
        """值是否已經建立。"""
        return self._initialized

    def get(self) -> T:
        """取得值，必要時先建立。"""
        if self._initialized:
            return self._value  # type: ignore[return-value]
        with self._lock:
            if not self._initialized:
                self._value = self._factory()
                self._initialized = True
        return self._value  # type: ignore[return-value]
