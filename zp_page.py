# ======================================================================================================================
# 📁 file        : zp_page.py — Страница: драйвер одного запроса init → process → display
# 🕒 created     : 13.11.2025 09:20
# 🎉 contains    : TPage
# 🌅 project     : Zap Core 2025 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
from zp_sys import *
from zp_tag import TRenderContext, minimize_entities
from zp_request import TRequest
from zp_widget import TWidget
from zp_container import TContainer, TForm
# 💎🧩⚙️ ... __ALL__ ...
__all__ = ["TPage"]
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TPage — корень UI-дерева одного запроса
# ----------------------------------------------------------------------------------------------------------------------
class TPage(TContainer):
    # ⚡🛠️ ▸ __init__
    def __init__(self, request: TRequest | None = None, title: str = ""):
        """
        Страница.
        💠 держит TRequest запроса и раздаёт его формам без своего request.
        run() прогоняет дерево по фазам и собирает документ:
        тело рендерится первым, потому что head-записи регистрируют только показанные виджеты.
        """
        super().__init__(None)
        self.request: TRequest = request if request is not None else TRequest()
        self.title: str = title
        self.resource_prefix: str = _key("ZP_RESOURCE_PREFIX", "")
        # ⚡🛠️ TPage ▸ End of __init__
    # ..................................................................................................................
    # 👨‍👩‍👧‍👧 Формы
    # ..................................................................................................................
    def notify_of_add(self, widget: TWidget):
        super().notify_of_add(widget)
        self.bind_forms()
    # ---
    def bind_forms(self):
        for form in self.get_descendants(TForm):
            if form.request is None:
                form.request = self.request
    # ..................................................................................................................
    # 🚀 Жизненный цикл
    # ..................................................................................................................
    def init(self):
        self.bind_forms()
        super().init()
    # ---
    def run(self) -> str:
        """Один запрос: init → process → display. Возвращает готовый HTML-документ."""
        self.init()
        self.process()
        body = TRenderContext()
        self.display(body)
        head = body.child()
        self.render_head(head)
        # ... 🔊 ...
        self.log("run", f"{self.request.method} {self.request.path} rendered, {len(self.get_messages())} message(s)")
        return ("<!DOCTYPE html>\n<html>\n<head>\n"
                '<meta http-equiv="Content-Type" content="text/html; charset=utf-8" />\n'
                f"<title>{minimize_entities(self.title)}</title>\n"
                f"{head.html()}</head>\n<body>\n{body.html()}\n</body>\n</html>\n")
    # ---
    def render_head(self, ctx: TRenderContext):
        """Пишет собранные CSS/JS записи (стили раньше скриптов, без повторов)."""
        entries = self.get_html_head_entry_set()
        entries.add_entry_set(ctx.head)
        entries.display(ctx, self.resource_prefix)
# 📁🌄 zp_page.py 🜂 The End — See You Next Session 2025
