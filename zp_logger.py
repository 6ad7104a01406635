# ======================================================================================================================
# 📁 file        : zp_logger.py — Rich LogRouter для Zap Core
# 🕒 created     : 13.10.2025 09:40
# 🎉 contains    : TLogRouter, LOG_ROUTER, init_log_router, TLogRouterMixin, LoggableComponent
# 🌅 project     : Zap Core 2025 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
import threading
import time
from datetime import datetime
from typing import Callable
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text
# 💎🧩⚙️ ... __ALL__ ...
__all__ = ["TLogRouter", "LOG_ROUTER", "init_log_router", "get_log_router", "TLogRouterMixin", "LoggableComponent",
           "CONSOLE"]
# 💎 ... CONFIG / CONSTS ...
BUFFER_LIMIT = 200
CONSOLE = Console(highlight=False)
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TLogRouter — лог-центр с несколькими окнами
# ----------------------------------------------------------------------------------------------------------------------
class TLogRouter:
    """Глобальный Rich лог-центр с несколькими окнами."""

    # ⚡🛠️ ▸ __init__
    def __init__(self, window_count: int = 3, refresh_rate: float = 0.5, console: Console | None = None):
        self.console = console or CONSOLE
        self.window_count = window_count
        self.refresh_rate = refresh_rate
        self.buffers: dict[int, list[str]] = {i: [] for i in range(1, window_count + 1)}
        self.lock = threading.Lock()
        self._stop = False
        # Подписчики на логи: callables вида fn(message: str, window: int)
        self.subscribers: list[Callable[[str, int], None]] = []
        # поток рендера создаётся только через start()
        self.thread: threading.Thread | None = None
        # ⚡🛠️ TLogRouter ▸ End of __init__
    # ..................................................................................................................
    # 📡 API
    # ..................................................................................................................
    def write(self, message: str, window: int = 1):
        """Добавляет строку в окно и рассылает подписчикам."""
        with self.lock:
            buf = self.buffers.setdefault(window, [])
            buf.append(message)
            if len(buf) > BUFFER_LIMIT:
                buf.pop(0)
        # уведомляем внешних подписчиков
        for fn in list(self.subscribers):
            try:
                fn(message, window)
            except Exception as exc:
                # ни один подписчик не должен уронить лог-центр
                self.console.print(f"[TLogRouter.write] subscriber {fn!r} failed: {exc!r}", markup=False)
    # ---
    def lines(self, window: int = 1) -> list[str]:
        """Копия буфера окна (для тестов и отладочных страниц)."""
        with self.lock:
            return list(self.buffers.get(window, []))
    # ---
    def clear(self, window: int | None = None):
        with self.lock:
            if window is None:
                for buf in self.buffers.values():
                    buf.clear()
            else:
                self.buffers.get(window, []).clear()
    # ---
    def add_subscriber(self, fn: Callable[[str, int], None] | None):
        """Регистрирует внешнего подписчика логов.

        fn: callable(message: str, window: int)
        """
        if not fn:
            return
        if fn not in self.subscribers:
            self.subscribers.append(fn)
    # ---
    def remove_subscriber(self, fn):
        """Отписывает подписчика логов."""
        if fn in self.subscribers:
            self.subscribers.remove(fn)
    # ..................................................................................................................
    # 🚀 Live-консоль
    # ..................................................................................................................
    def start(self):
        """Запускает фоновое обновление Rich Live Console."""
        if self.thread is not None:
            return
        self._stop = False
        self.thread = threading.Thread(target=self._render_loop, daemon=True)
        self.thread.start()
    # ---
    def stop(self):
        """Останавливает обновление консоли."""
        self._stop = True
        if self.thread is not None:
            self.thread.join(timeout=2)
            self.thread = None
    # ..................................................................................................................
    # 🎨 Render
    # ..................................................................................................................
    def _render_loop(self):
        """Фоновый цикл обновления Rich Live Console."""
        with Live(console=self.console, refresh_per_second=max(1, int(1 / self.refresh_rate))) as live:
            while not self._stop:
                live.update(self._layout())
                time.sleep(self.refresh_rate)
    # ---
    def _layout(self) -> Panel:
        """Создаёт layout из панелей (по окнам)."""
        panels = []
        with self.lock:
            for i in range(1, self.window_count + 1):
                lines = self.buffers.get(i, [])
                text = "\n".join(lines[-20:]) or "(no logs)"
                panels.append(Panel(Text(text), title=f"Log Window {i}"))
        # объединяем панели вертикально
        return Panel.fit(
            Text("\n\n".join(p.renderable.plain for p in panels)),
            title="Zap Log Console",
        )
# ----------------------------------------------------------------------------------------------------------------------
# 🌍 Global instance
# ----------------------------------------------------------------------------------------------------------------------
LOG_ROUTER: TLogRouter | None = None


def init_log_router(window_count: int = 3, live: bool = False) -> TLogRouter:
    global LOG_ROUTER
    if LOG_ROUTER is None:
        LOG_ROUTER = TLogRouter(window_count=window_count)
    if live:
        LOG_ROUTER.start()
    return LOG_ROUTER


def get_log_router() -> TLogRouter | None:
    return LOG_ROUTER


def reset_log_router():
    """Снимает глобальный роутер (останавливая Live, если он был запущен)."""
    global LOG_ROUTER
    if LOG_ROUTER is not None:
        LOG_ROUTER.stop()
    LOG_ROUTER = None
# ----------------------------------------------------------------------------------------------------------------------
# 🧪 TLogRouterMixin
# ----------------------------------------------------------------------------------------------------------------------
class TLogRouterMixin:
    """
    Миксин для классов, которые хотят использовать Rich LogRouter напрямую.
    Добавляет метод route_log() и свойство router.
    """

    @property
    def router(self) -> TLogRouter | None:
        return LOG_ROUTER

    def route_log(self, msg: str, window: int = 1):
        """Упрощённая отправка строки напрямую в лог-окно."""
        from zp_sys import _key
        if self.router:
            self.router.write(msg, window)
        elif _key("ZP_LOG_ECHO", "0") == "1":
            CONSOLE.print(msg, markup=False)
# ----------------------------------------------------------------------------------------------------------------------
# 🧪 LoggableComponent
# ----------------------------------------------------------------------------------------------------------------------
class LoggableComponent(TLogRouterMixin):
    """
    Базовый миксин, добавляющий поддержку централизованного логгирования.
    Все потомки автоматически используют Rich LogRouter (если активен).
    """

    def log_name(self) -> str:
        return self.__class__.__name__

    def log(self, function: str, *parts, window: int = 1):
        from zp_sys import _key

        project_symbol = _key("ZP_PROJECT_SYMBOL", "ZP")
        project_version = _key("ZP_PROJECT_VERSION", "1")
        now = datetime.now().strftime("%H:%M:%S")
        msg = " ".join(str(p) for p in parts)
        text = f"[{project_symbol}_{project_version}][{now}][{self.log_name()}]{function}(): {msg}"
        self.route_log(text, window)
# 📁🌄 zp_logger.py 🜂 The End — See You Next Session 2025
