# ======================================================================================================================
# 📁 file        : zp_widget.py — Виджет: жизненный цикл init → process → display
# 🕒 created     : 02.11.2025 15:02
# 🎉 contains    : TWidgetPhase, TWidget, TControl, TInputControl
# 🌅 project     : Zap Core 2025 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
from enum import Enum
from typing import Any
from zp_sys import *
from zp_tag import TRenderContext, THtmlHeadEntrySet, minimize_entities, CONTENT_PLAIN, CONTENT_XML
from zp_message import TMessage, TMessageType
from zp_ctrl_mixin import TTitleableMixin
# 💎🧩⚙️ ... __ALL__ ...
__all__ = ["TWidgetPhase", "TWidget", "TControl", "TInputControl"]
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TWidgetPhase — фазы жизненного цикла
# ----------------------------------------------------------------------------------------------------------------------
class TWidgetPhase(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    PROCESSED = "processed"
    DISPLAYED = "displayed"
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TWidget — узел UI-дерева с init / process / display
# ----------------------------------------------------------------------------------------------------------------------
class TWidget(TUIObject):
    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None):
        """
        Базовый виджет Zap.
        💠 init() — разовая настройка сверху вниз (тут создаются композиты),
        process() — только на postback: читает свой кусок данных формы, валидирует, копит TMessage,
        display(ctx) — каждый запрос: пишет свою разметку в ctx и уходит в детей.
        Фазы не переключаются сами: каждая ставит свой флаг.
        """
        super().__init__()
        self.id = id
        self.sensitive: bool = True
        self.stylesheet: str | None = None
        self.requires_id: bool = False
        # 👨‍👩‍👧‍👧 ... Композиты и сообщения ...
        self.Messages: list[TMessage] = []
        self.Composites: dict[str, TWidget] = {}
        self._composites_created: bool = False
        # --- Флаги фаз ---
        self._initialized: bool = False
        self._processed: bool = False
        self._displayed: bool = False
        self.add_style_sheet(ZP_STYLE_SHEET, ZP_PACKAGE_ID)
        # ⚡🛠️ TWidget ▸ End of __init__
    # ..................................................................................................................
    # 🚀 Жизненный цикл
    # ..................................................................................................................
    def init(self):
        if self.requires_id and self.id is None:
            self.id = self._get_unique_id()
        if self.stylesheet is not None:
            self.add_style_sheet(self.stylesheet)
        for widget in self.get_composite_widgets().values():
            widget.init()
        self._initialized = True
        # корень дерева проверяет уникальность id после полной инициализации
        if self.Owner is None:
            self._check_unique_ids()
        self.debug("init", f"{self.log_name()} initialized")
    # ---
    def process(self):
        if not self.is_initialized():
            self.init()
        self._confirm_id("process")
        for widget in self.get_composite_widgets().values():
            if not widget.is_processed():
                widget.process()
        self._processed = True
    # ---
    def display(self, ctx: TRenderContext):
        if not self.is_initialized():
            self.init()
        self._confirm_id("display")
        self._displayed = True
    # ---
    def is_initialized(self) -> bool:
        return self._initialized
    # ---
    def is_processed(self) -> bool:
        return self._processed
    # ---
    def is_displayed(self) -> bool:
        return self._displayed
    # ---
    @property
    def phase(self) -> TWidgetPhase:
        if self._displayed:
            return TWidgetPhase.DISPLAYED
        if self._processed:
            return TWidgetPhase.PROCESSED
        if self._initialized:
            return TWidgetPhase.INITIALIZED
        return TWidgetPhase.UNINITIALIZED
    # ---
    def _confirm_id(self, function: str):
        if self.requires_id and self.id is None:
            self.fail(function, "this widget requires an id but none is set")
    # ---
    def _check_unique_ids(self):
        seen: dict[str, TUIObject] = {}
        for node in self.iter_tree():
            if node.id is None:
                continue
            if node.id in seen and seen[node.id] is not node:
                self.fail("init", f"duplicate id '{node.id}' in widget tree "
                                  f"({seen[node.id].__class__.__name__} and {node.__class__.__name__})",
                          EDuplicateIdError)
            seen[node.id] = node
    # ..................................................................................................................
    # 🧩 Композиты
    # ..................................................................................................................
    def create_composite_widgets(self):
        """Хук: потомки создают тут свои внутренние виджеты через add_composite_widget()."""
        pass
    # ---
    def confirm_composite_widgets(self):
        if not self._composites_created:
            self._composites_created = True
            self.create_composite_widgets()
    # ---
    def add_composite_widget(self, widget: "TWidget", key: str):
        if key in self.Composites:
            self.fail("add_composite_widget", f"a composite widget with the key '{key}' already exists",
                      EDuplicateIdError)
        if widget.Owner is not None:
            self.fail("add_composite_widget", "cannot add a composite widget that already has a parent")
        self.Composites[key] = widget
        widget.Owner = self
        # ... 🔊 ...
        self.debug("add_composite_widget", f"{key} → {widget.__class__.__name__}")
    # ---
    def get_composite_widget(self, key: str) -> "TWidget":
        self.confirm_composite_widgets()
        if key not in self.Composites:
            self.fail("get_composite_widget", f"composite widget with key of '{key}' not found",
                      EWidgetNotFoundError)
        return self.Composites[key]
    # ---
    def get_composite_widgets(self, kind: Any = None) -> dict[str, "TWidget"]:
        self.confirm_composite_widgets()
        return {key: w for key, w in self.Composites.items() if is_kind(w, kind)}
    # ---
    def iter_children(self):
        yield from self.get_composite_widgets().values()
    # ..................................................................................................................
    # 💬 Сообщения
    # ..................................................................................................................
    def add_message(self, message: TMessage):
        self.Messages.append(message)
        # ... 🔊 ...
        self.log("add_message", f"[{message.type.value}] {message.primary_content}")
    # ---
    def get_messages(self) -> list[TMessage]:
        messages = list(self.Messages)
        for widget in self.get_composite_widgets().values():
            messages.extend(widget.get_messages())
        return messages
    # ---
    def has_message(self) -> bool:
        if self.Messages:
            return True
        return any(w.has_message() for w in self.get_composite_widgets().values())
    # ..................................................................................................................
    # 🏷️ Разное
    # ..................................................................................................................
    def is_sensitive(self) -> bool:
        owner = self.Owner
        if isinstance(owner, TWidget):
            return owner.is_sensitive() and self.sensitive
        return self.sensitive
    # ---
    def get_focusable_html_id(self) -> str | None:
        return None
    # ---
    def get_html_head_entry_set(self) -> THtmlHeadEntrySet:
        # невидимый / не показанный виджет ничего не регистрирует
        if self.is_displayed():
            entries = THtmlHeadEntrySet(self.html_head_entry_set)
        else:
            entries = THtmlHeadEntrySet()
        for widget in self.get_composite_widgets().values():
            entries.add_entry_set(widget.get_html_head_entry_set())
        return entries
    # ---
    def get_css_class_names(self) -> list[str]:
        classes = []
        if not self.is_sensitive():
            classes.append(zp_class("insensitive"))
        classes.extend(super().get_css_class_names())
        return classes
    # ---
    def replace_with_container(self, container: Any = None) -> Any:
        """Встаёт в контейнер на своё же место у родителя. Возвращает контейнер."""
        from zp_container import TContainer

        parent = self.Owner
        if parent is None:
            self.fail("replace_with_container", "widget does not have a parent")
        if container is None:
            container = TContainer()
        parent.replace(self, container)
        container.add(self)
        return container
    # ---
    def print_widget_tree(self, depth: int = 0) -> str:
        lines = [f"{'  ' * depth}{self.__class__.__name__} {self.id or ''}".rstrip()]
        for child in self.iter_children():
            if isinstance(child, TWidget):
                lines.append(child.print_widget_tree(depth + 1))
        return "\n".join(lines)
    # ..................................................................................................................
    # ♻️ Копирование
    # ..................................................................................................................
    def _copy_into(self, clone: "TWidget", id_suffix: str):
        super()._copy_into(clone, id_suffix)
        clone.Messages = [m.model_copy() for m in self.Messages]
        clone.Composites = {}
        for key, widget in self.Composites.items():
            widget_copy = widget.copy(id_suffix)
            clone.Composites[key] = widget_copy
            widget_copy.Owner = clone
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TControl — виджет-контрол (без детей)
# ----------------------------------------------------------------------------------------------------------------------
class TControl(TWidget):

    def add_message(self, message: TMessage):
        """
        Подставляет заголовок поля (у titleable-родителя) в %s текста сообщения.
        Итоговое сообщение всегда text/xml.
        """
        owner = self.Owner
        field_title = ""
        if isinstance(owner, TTitleableMixin):
            title = owner.get_title()
            if title is not None:
                if owner.get_title_content_type() == CONTENT_XML:
                    field_title = f"<strong>{title}</strong>"
                else:
                    field_title = f"<strong>{minimize_entities(title)}</strong>"
        if message.content_type == CONTENT_PLAIN:
            content = minimize_entities(message.primary_content)
        else:
            content = message.primary_content
        message.primary_content = content.replace("%s", field_title)
        message.content_type = CONTENT_XML
        super().add_message(message)
    # ---
    def get_note(self) -> TMessage | None:
        return None
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TInputControl — контрол, принимающий ввод из формы
# ----------------------------------------------------------------------------------------------------------------------
class TInputControl(TControl):
    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None):
        super().__init__(id)
        self.required: bool = False
        self.show_field_title_in_messages: bool = True
        # ⚡🛠️ TInputControl ▸ End of __init__
    # ---
    def init(self):
        from zp_container import TFormField

        super().init()
        if self.required and isinstance(self.Owner, TFormField):
            self.Owner.required = True
    # ---
    def get_form(self) -> Any:
        """Ближайшая форма-предок. Нет формы → EConfigurationError с путём по дереву."""
        from zp_container import TForm

        form = self.get_first_ancestor(TForm)
        if form is None:
            path = [self.__class__.__name__]
            node = self.Owner
            while node is not None:
                path.append(node.__class__.__name__)
                node = node.Owner
            self.fail("get_form", "input controls must reside inside a TForm widget. UI-Object path: "
                      + "/".join(reversed(path)))
        return form
    # ---
    def get_form_data(self) -> dict[str, Any]:
        return self.get_form().get_form_data()
    # ---
    def get_validation_message(self, kind: str) -> TMessage:
        titled = self.show_field_title_in_messages
        if kind == "required":
            text = translate("The %s field is required.") if titled else translate("This field is required.")
        elif kind == "too-long":
            text = (translate("The %%s field can be at most %s characters long.") if titled
                    else translate("This field can be at most %s characters long."))
        elif kind == "too-short":
            text = (translate("The %%s field must be at least %s characters long.") if titled
                    else translate("This field must be at least %s characters long."))
        else:
            text = (translate("There is a problem with the %s field.") if titled
                    else translate("There is a problem with this field."))
        return TMessage.create(text, TMessageType.ERROR)
# 📁🌄 zp_widget.py 🜂 The End — See You Next Session 2025
