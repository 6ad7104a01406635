# ======================================================================================================================
# 📁 file        : zp_container.py — Контейнеры: дети, форма, поле формы, фрейм
# 🕒 created     : 03.11.2025 11:47
# 🎉 contains    : TContainer, TDisplayableContainer, TFrame, TFormField, TForm
# 🌅 project     : Zap Core 2025 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
import hashlib
import hmac
import json
from typing import Any
from zp_sys import *
from zp_tag import TRenderContext, THtmlTag, THtmlHeadEntrySet, CONTENT_PLAIN
from zp_message import TMessage
from zp_ctrl_mixin import TUIParentMixin, TTitleableMixin
from zp_widget import TWidget, TControl
from zp_request import TRequest
# 💎🧩⚙️ ... __ALL__ ...
__all__ = ["TContainer", "TDisplayableContainer", "TFrame", "TFormField", "TForm"]
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TContainer — виджет с упорядоченными детьми
# ----------------------------------------------------------------------------------------------------------------------
class TContainer(TUIParentMixin, TWidget):
    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None):
        super().__init__(id)
        # 👨‍👩‍👧‍👧 ... Дети, добавленные приложением ...
        self.Children: list[TWidget] = []
        self.children_by_id: dict[str, TWidget] = {}
        # ⚡🛠️ TContainer ▸ End of __init__
    # ..................................................................................................................
    # 🛡️ Политика детей
    # ..................................................................................................................
    def _allowed_child_types(self) -> tuple[type, ...] | None:
        """
        Какие типы детей может держать контейнер. None → любые TWidget.
        """
        return None
    # ---
    def _accept_child(self, widget: TWidget, function: str):
        if widget.Owner is not None:
            self.fail(function, f"attempting to add {widget.log_name()} that already has a parent")
        allowed = self._allowed_child_types()
        if allowed is not None and not isinstance(widget, allowed):
            self.fail(function, f"{self.__class__.__name__} cannot hold {widget.__class__.__name__}",
                      EInvalidClassError)
    # ..................................................................................................................
    # 👨‍👩‍👧‍👧 Дети
    # ..................................................................................................................
    def add(self, widget: TWidget) -> TWidget:
        return self.pack_end(widget)
    # ---
    def pack_end(self, widget: TWidget) -> TWidget:
        self._accept_child(widget, "pack_end")
        self.Children.append(widget)
        self._attach(widget)
        return widget
    # ---
    def pack_start(self, widget: TWidget) -> TWidget:
        self._accept_child(widget, "pack_start")
        self.Children.insert(0, widget)
        self._attach(widget)
        return widget
    # ---
    def _attach(self, widget: TWidget):
        widget.Owner = self
        if widget.id is not None:
            self.children_by_id[widget.id] = widget
        self.send_add_notify_signal(widget)
        # ... 🔊 ...
        self.debug("add", f"{widget.log_name()} → {self.log_name()}")
    # ---
    def replace(self, widget: TWidget, new_widget: TWidget) -> TWidget:
        for i, child in enumerate(self.Children):
            if child is widget:
                self._accept_child(new_widget, "replace")
                self.Children[i] = new_widget
                new_widget.Owner = self
                widget.Owner = None
                if widget.id is not None:
                    self.children_by_id.pop(widget.id, None)
                if new_widget.id is not None:
                    self.children_by_id[new_widget.id] = new_widget
                return widget
        self.fail("replace", f"{widget.log_name()} is not a child of {self.log_name()}", ENotFoundError)
    # ---
    def remove(self, widget: TWidget) -> TWidget:
        for i, child in enumerate(self.Children):
            if child is widget:
                del self.Children[i]
                widget.Owner = None
                if widget.id is not None:
                    self.children_by_id.pop(widget.id, None)
                # ... 🔊 ...
                self.debug("remove", f"{widget.log_name()} removed")
                return widget
        self.fail("remove", f"{widget.log_name()} is not a child of {self.log_name()}", ENotFoundError)
    # ---
    def add_child(self, child: Any):
        if not isinstance(child, TWidget):
            self.fail("add_child", f"only TWidget objects may be nested within {self.__class__.__name__}. "
                                   f"Attempting to add '{child.__class__.__name__}'", EInvalidClassError)
        self.add(child)
    # ---
    def has_child(self, id: str) -> bool:
        return id in self.children_by_id
    # ---
    def get_child(self, id: str) -> TWidget:
        if id not in self.children_by_id:
            self.fail("get_child", f"child with an id of '{id}' not found", EWidgetNotFoundError)
        return self.children_by_id[id]
    # ---
    def get_first(self) -> TWidget | None:
        return self.Children[0] if self.Children else None
    # ---
    def get_children(self, kind: Any = None) -> list[TWidget]:
        return [child for child in self.Children if is_kind(child, kind)]
    # ---
    def iter_children(self):
        yield from super().iter_children()
        yield from self.Children
    # ---
    def notify_of_add(self, widget: TWidget):
        """Хук: контейнер узнаёт о каждом новом потомке (в том числе внуках)."""
        pass
    # ---
    def send_add_notify_signal(self, widget: TWidget):
        self.notify_of_add(widget)
        owner = self.Owner
        if isinstance(owner, TContainer):
            owner.send_add_notify_signal(widget)
    # ..................................................................................................................
    # 🚀 Жизненный цикл
    # ..................................................................................................................
    def init(self):
        super().init()
        for child in self.Children:
            child.init()
    # ---
    def process(self):
        super().process()
        for child in self.Children:
            if not child.is_processed():
                child.process()
    # ---
    def display(self, ctx: TRenderContext):
        if not self.visible:
            return
        super().display(ctx)
        self.display_children(ctx)
    # ---
    def display_children(self, ctx: TRenderContext):
        for child in self.Children:
            child.display(ctx)
    # ..................................................................................................................
    # 💬 Сообщения / head / фокус
    # ..................................................................................................................
    def get_messages(self) -> list[TMessage]:
        messages = super().get_messages()
        for child in self.Children:
            messages.extend(child.get_messages())
        return messages
    # ---
    def has_message(self) -> bool:
        if super().has_message():
            return True
        return any(child.has_message() for child in self.Children)
    # ---
    def get_html_head_entry_set(self) -> THtmlHeadEntrySet:
        entries = super().get_html_head_entry_set()
        for child in self.Children:
            entries.add_entry_set(child.get_html_head_entry_set())
        return entries
    # ---
    def get_focusable_html_id(self) -> str | None:
        for child in self.Children:
            focus_id = child.get_focusable_html_id()
            if focus_id is not None:
                return focus_id
        return None
    # ..................................................................................................................
    # ♻️ Копирование
    # ..................................................................................................................
    def _copy_into(self, clone: "TContainer", id_suffix: str):
        super()._copy_into(clone, id_suffix)
        clone.Children = []
        clone.children_by_id = {}
        for child in self.Children:
            child_copy = child.copy(id_suffix)
            child_copy.Owner = clone
            clone.Children.append(child_copy)
            if child_copy.id is not None:
                clone.children_by_id[child_copy.id] = child_copy
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TDisplayableContainer — контейнер в обёртке <div>
# ----------------------------------------------------------------------------------------------------------------------
class TDisplayableContainer(TContainer):

    def display(self, ctx: TRenderContext):
        if not self.visible:
            return
        TWidget.display(self, ctx)
        div = THtmlTag("div", {"id": self.id, "class": self.get_css_class_string()})
        div.open(ctx)
        self.display_children(ctx)
        div.close(ctx)
    # ---
    def get_css_class_names(self) -> list[str]:
        return [zp_class("displayable-container")] + super().get_css_class_names()
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TFrame — контейнер с заголовком
# ----------------------------------------------------------------------------------------------------------------------
class TFrame(TTitleableMixin, TDisplayableContainer):
    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None, title: str | None = None):
        super().__init__(id)
        self.title: str | None = title
        self.subtitle: str | None = None
        self.title_separator: str = ": "
        self.title_content_type: str = CONTENT_PLAIN
        self.header_level: int | None = None
        # ⚡🛠️ TFrame ▸ End of __init__
    # ---
    def get_title(self) -> str | None:
        if self.subtitle is None:
            return self.title
        if self.title is None:
            return self.subtitle
        return f"{self.title}{self.title_separator}{self.subtitle}"
    # ..................................................................................................................
    # 🎨 Рендеринг
    # ..................................................................................................................
    def display(self, ctx: TRenderContext):
        if not self.visible:
            return
        TWidget.display(self, ctx)
        outer_div = THtmlTag("div", {"id": self.id, "class": self.get_css_class_string()})
        outer_div.open(ctx)
        # заголовок строго перед содержимым
        self.display_title(ctx)
        self.display_content(ctx)
        outer_div.close(ctx)
    # ---
    def display_title(self, ctx: TRenderContext):
        if self.title is None:
            return
        header_tag = THtmlTag(f"h{self.get_header_level()}", {"class": zp_class("frame", "title")})
        header_tag.set_content(self.title, self.title_content_type)
        if self.subtitle is None:
            header_tag.display(ctx)
            return
        span_tag = THtmlTag("span", {"class": zp_class("frame", "subtitle")})
        span_tag.set_content(self.subtitle, self.title_content_type)
        header_tag.open(ctx)
        header_tag.display_content(ctx)
        ctx.text(self.title_separator)
        span_tag.display(ctx)
        header_tag.close(ctx)
    # ---
    def display_content(self, ctx: TRenderContext):
        inner_div = THtmlTag("div", {"class": zp_class("frame", "contents")})
        inner_div.open(ctx)
        self.display_children(ctx)
        inner_div.close(ctx)
    # ---
    def get_header_level(self) -> int:
        """h2 для внешнего фрейма, +1 на каждый вложенный фрейм, не глубже h6."""
        if self.header_level is not None:
            return self.header_level
        ancestor = self.get_first_ancestor(TFrame)
        if ancestor is None:
            return 2
        return min(ancestor.get_header_level() + 1, 6)
    # ---
    def get_css_class_names(self) -> list[str]:
        return [zp_class("frame")] + super().get_css_class_names()
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TFormField — поле формы: заголовок, содержимое, сообщения, заметки
# ----------------------------------------------------------------------------------------------------------------------
class TFormField(TTitleableMixin, TDisplayableContainer):
    DISPLAY_REQUIRED = 1
    DISPLAY_OPTIONAL = 2

    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None, title: str | None = None):
        super().__init__(id)
        self.title: str | None = title
        self.title_content_type: str = CONTENT_PLAIN
        self.required: bool = False
        self.required_status_display: int = self.DISPLAY_REQUIRED
        self.note: str | None = None
        self.note_content_type: str = CONTENT_PLAIN
        self.access_key: str | None = None
        self.show_colon: bool = True
        self.title_reversed: bool | None = None
        self.display_messages: bool = True
        self.container_tag: str = "div"
        self.contents_tag: str = "div"
        self.widget_class: str | None = None
        self.add_style_sheet(f"packages/{ZP_PACKAGE_ID}/styles/{ZP_CSS_PREFIX}-message.css", ZP_PACKAGE_ID)
        # ⚡🛠️ TFormField ▸ End of __init__
    # ..................................................................................................................
    # 🎨 Рендеринг
    # ..................................................................................................................
    def display(self, ctx: TRenderContext):
        if not self.visible:
            return
        if self.get_first() is None:
            return
        TWidget.display(self, ctx)
        container_tag = THtmlTag(self.container_tag, {"id": self.id, "class": self.get_css_class_string()})
        container_tag.open(ctx)
        # порядок: заголовок → содержимое → сообщения → заметки
        if self.title_reversed is True:
            self.display_content(ctx)
            self.display_title(ctx)
        else:
            self.display_title(ctx)
            self.display_content(ctx)
        self.display_messages_list(ctx)
        self.display_notes(ctx)
        container_tag.close(ctx)
    # ---
    def display_title(self, ctx: TRenderContext):
        if self.title is None and self.access_key is None:
            return
        title_tag = self.get_title_tag()
        title_tag.open(ctx)
        title_tag.display_content(ctx)
        self.display_required_status(ctx)
        title_tag.close(ctx)
    # ---
    def display_required_status(self, ctx: TRenderContext):
        if self.required and self.required_status_display & self.DISPLAY_REQUIRED:
            span_tag = THtmlTag("span", {"class": zp_class("required")})
            span_tag.set_content(f" ({translate('required')})")
            span_tag.display(ctx)
        elif not self.required and self.required_status_display & self.DISPLAY_OPTIONAL:
            span_tag = THtmlTag("span", {"class": zp_class("optional")})
            span_tag.set_content(f" ({translate('optional')})")
            span_tag.display(ctx)
    # ---
    def display_content(self, ctx: TRenderContext):
        contents_tag = THtmlTag(self.contents_tag, {"class": zp_class("form", "field", "contents")})
        contents_tag.open(ctx)
        self.display_children(ctx)
        contents_tag.close(ctx)
    # ---
    def display_messages_list(self, ctx: TRenderContext):
        if not self.display_messages or not self.has_message():
            return
        message_ul = THtmlTag("ul", {"class": zp_class("form", "field", "messages")})
        message_ul.open(ctx)
        for message in self.get_messages():
            message_li = THtmlTag("li", {"class": message.get_css_class()})
            message_li.set_content(message.primary_content, message.content_type)
            if message.secondary_content is None:
                message_li.display(ctx)
                continue
            secondary_span = THtmlTag("span")
            secondary_span.set_content(message.secondary_content, message.content_type)
            message_li.open(ctx)
            message_li.display_content(ctx)
            ctx.text(" ")
            secondary_span.display(ctx)
            message_li.close(ctx)
        message_ul.close(ctx)
    # ---
    def display_notes(self, ctx: TRenderContext):
        notes: list[TMessage] = []
        if self.note is not None:
            notes.append(TMessage.create(self.note, content_type=self.note_content_type))
        control = self.get_first_descendant(TControl)
        if control is not None:
            note = control.get_note()
            if note is not None:
                notes.append(note)
        if len(notes) == 1:
            note_div = THtmlTag("div", {"class": zp_class("note")})
            note_div.set_content(notes[0].primary_content, notes[0].content_type)
            note_div.display(ctx)
        elif len(notes) > 1:
            note_list = THtmlTag("ul", {"class": zp_class("note")})
            note_list.open(ctx)
            for note in notes:
                li_tag = THtmlTag("li")
                li_tag.set_content(note.primary_content, note.content_type)
                li_tag.display(ctx)
            note_list.close(ctx)
    # ---
    def get_title_tag(self) -> THtmlTag:
        label_tag = THtmlTag("label")
        if self.title is not None:
            if self.show_colon:
                label_tag.set_content(translate("%s: ") % self.title, self.title_content_type)
            else:
                label_tag.set_content(self.title, self.title_content_type)
        label_tag["for"] = self.get_focusable_html_id()
        label_tag["accesskey"] = self.access_key
        return label_tag
    # ---
    def notify_of_add(self, widget: TWidget):
        from zp_ctrl_atom import TCheckbox

        if isinstance(widget, TCheckbox):
            self.widget_class = zp_class("form", "field", "checkbox")
            if self.title_reversed is None:
                self.title_reversed = True
                self.show_colon = False
    # ---
    def get_css_class_names(self) -> list[str]:
        classes = [zp_class("form", "field")]
        if self.widget_class is not None:
            classes.append(self.widget_class)
        if self.display_messages and self.has_message():
            classes.append(zp_class("form", "field", "with", "messages"))
        if self.required:
            classes.append(zp_class("required"))
        return classes + super().get_css_class_names()
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TForm — форма: источник данных process() и скрытые поля
# ----------------------------------------------------------------------------------------------------------------------
class TForm(TDisplayableContainer):
    METHOD_POST = "post"
    METHOD_GET = "get"
    PROCESS_FIELD = "_zap_form_process"
    HIDDEN_FIELD = "_zap_form_hidden_fields"
    SERIALIZED_PREFIX = "_zap_form_serialized_"

    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None, request: TRequest | None = None):
        """
        Форма Zap.
        💠 знает свой TRequest (разобранные данные запроса), решает «отправлена ли именно эта форма»
        по скрытому полю PROCESS_FIELD == id и только тогда запускает process() у детей.
        """
        super().__init__(id)
        self.request: TRequest | None = request
        self.action: str = "#"
        self.encoding_type: str | None = None
        self.accept_charset: str = "utf-8"
        self.autocomplete: bool = True
        self.hidden_fields: dict[str, Any] = {}
        self.salt: str = _key("ZP_FORM_SALT", "")
        self.f_method: str = self.METHOD_POST
        self.button: TWidget | None = None
        self.requires_id = True
        self.add_java_script(zp_script("form"), ZP_PACKAGE_ID)
        # ⚡🛠️ TForm ▸ End of __init__
    # ..................................................................................................................
    # 📡 Данные формы
    # ..................................................................................................................
    @property
    def method(self) -> str:
        return self.f_method
    # ---
    @method.setter
    def method(self, value: str):
        self.set_method(value)
    # ---
    def set_method(self, method: str):
        if method not in (self.METHOD_POST, self.METHOD_GET):
            self.fail("set_method", f"'{method}' is not a valid form method")
        self.f_method = method
    # ---
    def get_form_data(self) -> dict[str, Any]:
        if self.request is None:
            return {}
        return self.request.get_form_data(self.method)
    # ---
    def is_submitted(self) -> bool:
        data = self.get_form_data()
        return self.id is not None and data.get(self.PROCESS_FIELD) == self.id
    # ---
    def process(self):
        if not self.is_initialized():
            self.init()
        if not self.is_submitted():
            self.debug("process", f"form {self.id} was not submitted")
            return
        self._process_hidden_fields()
        super().process()
        # ... 🔊 ...
        self.log("process", f"form {self.id} submitted and processed")
    # ..................................................................................................................
    # 🕶️ Скрытые поля
    # ..................................................................................................................
    def add_hidden_field(self, name: str, value: Any):
        self.hidden_fields[name] = value
    # ---
    def get_hidden_field(self, name: str) -> Any:
        if name in self.hidden_fields:
            return self.hidden_fields[name]
        if not self.is_processed() and self.is_submitted():
            raw = self.get_form_data().get(self.SERIALIZED_PREFIX + name)
            if raw is not None:
                return self.unserialize_value(raw)
        return None
    # ---
    def clear_hidden_fields(self):
        self.hidden_fields = {}
    # ---
    def add_with_field(self, widget: TWidget, title: str) -> TFormField:
        field = TFormField(title=title)
        field.add(widget)
        self.add(field)
        return field
    # ---
    def _process_hidden_fields(self):
        data = self.get_form_data()
        raw_names = data.get(self.HIDDEN_FIELD)
        if raw_names is None:
            return
        for name in self.unserialize_value(raw_names):
            raw = data.get(self.SERIALIZED_PREFIX + name)
            if raw is not None:
                self.hidden_fields[name] = self.unserialize_value(raw)
    # ---
    def _signature(self, payload: str) -> str:
        return hmac.new(self.salt.encode("utf-8"), payload.encode("utf-8"), hashlib.sha256).hexdigest()
    # ---
    def serialize_value(self, value: Any) -> str:
        payload = json.dumps(value, separators=(",", ":"))
        return f"{self._signature(payload)}|{payload}"
    # ---
    def unserialize_value(self, raw: str) -> Any:
        signature, sep, payload = str(raw).partition("|")
        if not sep or not hmac.compare_digest(signature, self._signature(payload)):
            self.fail("unserialize_value", "hidden field data has an invalid signature", EZapError)
        return json.loads(payload)
    # ..................................................................................................................
    # 🎨 Рендеринг
    # ..................................................................................................................
    def display(self, ctx: TRenderContext):
        if not self.visible:
            return
        TWidget.display(self, ctx)
        self.add_hidden_field(self.PROCESS_FIELD, self.id)
        form_tag = self.get_form_tag()
        form_tag.open(ctx)
        self.display_children(ctx)
        self.display_hidden_fields(ctx)
        form_tag.close(ctx)
        ctx.inline_java_script(self.get_inline_java_script())
    # ---
    def display_hidden_fields(self, ctx: TRenderContext):
        ctx.text(f'<div class="{zp_class("hidden")}">')
        input_tag = THtmlTag("input", {"type": "hidden"})
        for name, value in self.hidden_fields.items():
            if value is not None and not isinstance(value, (list, tuple, dict)):
                input_tag["name"] = name
                input_tag["value"] = value
                input_tag.display(ctx)
            input_tag["name"] = self.SERIALIZED_PREFIX + name
            input_tag["value"] = self.serialize_value(value)
            input_tag.display(ctx)
        if self.hidden_fields:
            input_tag["name"] = self.HIDDEN_FIELD
            input_tag["value"] = self.serialize_value(list(self.hidden_fields))
            input_tag.display(ctx)
        ctx.text("</div>")
    # ---
    def get_form_tag(self) -> THtmlTag:
        return THtmlTag("form", {
            "id": self.id,
            "method": self.method,
            "enctype": self.encoding_type,
            "accept-charset": self.accept_charset,
            "action": self.action,
            "autocomplete": None if self.autocomplete else "off",
            "class": self.get_css_class_string(),
        })
    # ---
    def get_inline_java_script(self) -> str:
        return f"var {self.id}_obj = new ZapForm('{self.id}');"
    # ---
    def get_css_class_names(self) -> list[str]:
        return [zp_class("form")] + super().get_css_class_names()
# 📁🌄 zp_container.py 🜂 The End — See You Next Session 2025
