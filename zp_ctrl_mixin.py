# ======================================================================================================================
# 📁 file        : zp_ctrl_mixin.py — Mixin library: capability-интерфейсы UI-объектов
# 🕒 created     : 06.11.2025 13:15
# 🎉 contains    : TStateMixin, TTitleableMixin, TUIParentMixin, TViewSelectorMixin
# 🌅 project     : Zap Core 2025 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
from itertools import islice
from typing import Any
from zp_sys import *
# 💎🧩⚙️🧪 ... __ALL__ ...
__all__ = [
    "TStateMixin",
    "TTitleableMixin",
    "TUIParentMixin",
    "TViewSelectorMixin",
]
# ----------------------------------------------------------------------------------------------------------------------
# 🧪 TStateMixin — виджет со снимком состояния
# ----------------------------------------------------------------------------------------------------------------------
class TStateMixin:
    """
    Виджет умеет отдать/принять сериализуемый снимок своего значения
    (введённый текст, выбранная опция, список значений). Нужен для переноса
    значений между запросами без повторного process() (мастера, шаги).
    """

    def get_state(self) -> Any:
        raise NotImplementedError(f"{self.__class__.__name__}.get_state()")

    def set_state(self, state: Any):
        raise NotImplementedError(f"{self.__class__.__name__}.set_state()")
# ----------------------------------------------------------------------------------------------------------------------
# 🧪 TTitleableMixin — объект с заголовком
# ----------------------------------------------------------------------------------------------------------------------
class TTitleableMixin:
    title: str | None = None
    title_content_type: str = "text/plain"

    def get_title(self) -> str | None:
        return self.title

    def get_title_content_type(self) -> str:
        return self.title_content_type
# ----------------------------------------------------------------------------------------------------------------------
# 🧪 TUIParentMixin — объект, который держит детей
# ----------------------------------------------------------------------------------------------------------------------
class TUIParentMixin:
    """
    Общий поиск по потомкам. Опирается на iter_tree()/iter_children() узла,
    поэтому композиты и рендереры попадают в выборку наравне с детьми.
    """

    def add_child(self, child: Any):
        raise NotImplementedError(f"{self.__class__.__name__}.add_child()")

    def get_descendants(self, kind: Any = None) -> list:
        """Все потомки (без self) в порядке обхода, подходящие под kind."""
        return [node for node in islice(self.iter_tree(), 1, None) if is_kind(node, kind)]

    def get_first_descendant(self, kind: Any) -> Any:
        for node in islice(self.iter_tree(), 1, None):
            if is_kind(node, kind):
                return node
        return None

    def get_descendant_states(self) -> dict[str, Any]:
        return {
            node.id: node.get_state()
            for node in self.get_descendants(TStateMixin)
            if node.id is not None
        }

    def set_descendant_states(self, states: dict[str, Any]):
        for node in self.get_descendants(TStateMixin):
            if node.id is not None and node.id in states:
                node.set_state(states[node.id])
# ----------------------------------------------------------------------------------------------------------------------
# 🧪 TViewSelectorMixin — источник выделения строк во View
# ----------------------------------------------------------------------------------------------------------------------
class TViewSelectorMixin:
    """
    Селектор выделения (checkbox/radio-рендерер внутри View).
    View при init() регистрирует его по get_id() и хранит для него TViewSelection.
    """

    def get_id(self) -> str | None:
        return getattr(self, "id", None)

    def get_view(self) -> Any:
        from zp_view import TView
        return self.get_first_ancestor(TView)
# 📁🌄 zp_ctrl_mixin.py 🜂 The End — See You Next Session 2025
