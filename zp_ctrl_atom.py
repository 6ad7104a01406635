# ======================================================================================================================
# 📁 file        : zp_ctrl_atom.py — Атомарные контролы ввода: entry, checkbox, button
# 🕒 created     : 07.11.2025 10:40
# 🎉 contains    : TEntry, TCheckbox, TButton, STOCK_BUTTONS
# 🌅 project     : Zap Core 2025 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
import secrets
from typing import Any
from zp_sys import *
from zp_tag import TRenderContext, THtmlTag
from zp_ctrl_mixin import TStateMixin
from zp_widget import TInputControl
# 💎🧩⚙️ ... __ALL__ ...
__all__ = ["TEntry", "TCheckbox", "TButton", "STOCK_BUTTONS"]
# 💎 ... CONFIG / CONSTS ...
# stock_id → (заголовок, css-суффикс)
STOCK_BUTTONS: dict[str, tuple[str, str]] = {
    "submit": ("Submit", "submit"),
    "create": ("Create", "create"),
    "add":    ("Add", "add"),
    "apply":  ("Apply", "apply"),
    "delete": ("Delete", "delete"),
    "cancel": ("Cancel", "cancel"),
}
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TEntry — однострочное текстовое поле
# ----------------------------------------------------------------------------------------------------------------------
class TEntry(TStateMixin, TInputControl):
    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None):
        """
        Текстовое поле.
        💠 process(): нет сырого значения → value = None; иначе trim (auto_trim),
        пустая строка → None, дальше по порядку: required → too-long → too-short.
        При autocomplete=False имя поля заменяется одноразовым nonce,
        а сам nonce уходит в скрытый <id>_nonce.
        """
        super().__init__(id)
        self.value: str | None = None
        self.size: int | None = 50
        self.maxlength: int | None = None
        self.minlength: int | None = None
        self.access_key: str | None = None
        self.tab_index: int | None = None
        self.autocomplete: bool = True
        self.read_only: bool = False
        self.auto_trim: bool = True
        self.requires_id = True
        self._nonce: str | None = None
        # ⚡🛠️ TEntry ▸ End of __init__
    # ..................................................................................................................
    # 📡 Process
    # ..................................................................................................................
    def process(self):
        super().process()
        if not self.has_raw_value():
            self.value = None
            return
        self.value = self.get_raw_value()
        if self.auto_trim and self.value is not None:
            self.value = self.value.strip()
            if self.value == "":
                self.value = None
        length = 0 if self.value is None else len(self.value)
        if self.value is None:
            if self.required:
                self.add_message(self.get_validation_message("required"))
        elif self.maxlength is not None and length > self.maxlength:
            message = self.get_validation_message("too-long")
            message.primary_content = message.primary_content % self.maxlength
            self.add_message(message)
        elif self.minlength is not None and length < self.minlength:
            message = self.get_validation_message("too-short")
            message.primary_content = message.primary_content % self.minlength
            self.add_message(message)
    # ---
    def _data_key(self, data: dict[str, Any]) -> str | None:
        if self.autocomplete:
            return self.id
        return data.get(f"{self.id}_nonce")
    # ---
    def has_raw_value(self) -> bool:
        data = self.get_form_data()
        key = self._data_key(data)
        return key is not None and key in data
    # ---
    def get_raw_value(self) -> str | None:
        data = self.get_form_data()
        key = self._data_key(data)
        raw = data.get(key) if key is not None else None
        if raw is None or raw == "":
            return None
        return str(raw)
    # ---
    def get_nonce(self) -> str:
        if self._nonce is None:
            self._nonce = "n" + secrets.token_hex(16)
        return self._nonce
    # ..................................................................................................................
    # 🧪 State
    # ..................................................................................................................
    def get_state(self) -> Any:
        return self.value
    # ---
    def set_state(self, state: Any):
        self.value = state
    # ..................................................................................................................
    # 🎨 Рендеринг
    # ..................................................................................................................
    def display(self, ctx: TRenderContext):
        if not self.visible:
            return
        super().display(ctx)
        self.get_input_tag().display(ctx)
        if not self.autocomplete:
            nonce_tag = THtmlTag("input", {"type": "hidden", "name": f"{self.id}_nonce", "value": self.get_nonce()})
            nonce_tag.display(ctx)
    # ---
    def get_input_tag(self) -> THtmlTag:
        name = self.id if self.autocomplete else self.get_nonce()
        tag = THtmlTag("input", {
            "type": "text",
            "name": name,
            "id": name,
            "class": self.get_css_class_string(),
            "value": self.get_display_value(self.value),
            "size": self.size,
            "maxlength": self.maxlength,
            "accesskey": self.access_key,
            "tabindex": self.tab_index,
        })
        if self.read_only:
            tag["readonly"] = "readonly"
        if not self.is_sensitive():
            tag["disabled"] = "disabled"
        return tag
    # ---
    def get_display_value(self, value: Any) -> Any:
        return value
    # ---
    def get_focusable_html_id(self) -> str | None:
        if not self.visible:
            return None
        return self.id if self.autocomplete else self.get_nonce()
    # ---
    def get_css_class_names(self) -> list[str]:
        return [zp_class("entry")] + super().get_css_class_names()
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TCheckbox — булев флажок
# ----------------------------------------------------------------------------------------------------------------------
class TCheckbox(TStateMixin, TInputControl):
    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None):
        """
        Флажок.
        💠 браузер не шлёт неотмеченный checkbox, поэтому display() регистрирует
        скрытое поле <id>_submitted: без него process() ничего не меняет.
        """
        super().__init__(id)
        self.value: bool = False
        self.access_key: str | None = None
        self.requires_id = True
        # ⚡🛠️ TCheckbox ▸ End of __init__
    # ---
    def process(self):
        super().process()
        form = self.get_form()
        input_id = self.get_input_id()
        if form.get_hidden_field(f"{input_id}_submitted") is None:
            return
        self.value = input_id in form.get_form_data()
    # ---
    def get_state(self) -> bool:
        return self.value
    # ---
    def set_state(self, state: Any):
        self.value = bool(state)
    # ---
    def display(self, ctx: TRenderContext):
        if not self.visible:
            return
        super().display(ctx)
        input_id = self.get_input_id()
        self.get_form().add_hidden_field(f"{input_id}_submitted", 1)
        input_tag = THtmlTag("input", {
            "type": "checkbox",
            "class": self.get_css_class_string(),
            "name": input_id,
            "id": input_id,
            "value": "1",
            "accesskey": self.access_key,
        })
        if self.value:
            input_tag["checked"] = "checked"
        if not self.is_sensitive():
            input_tag["disabled"] = "disabled"
        input_tag.display(ctx)
    # ---
    def get_input_id(self) -> str:
        """Имя/id самого <input>. Наследники (TCheckAll) уводят его от id обёртки."""
        return self.id
    # ---
    def get_focusable_html_id(self) -> str | None:
        return self.get_input_id() if self.visible else None
    # ---
    def get_css_class_names(self) -> list[str]:
        return [zp_class("checkbox")] + super().get_css_class_names()
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TButton — submit-кнопка со stock-типами
# ----------------------------------------------------------------------------------------------------------------------
class TButton(TInputControl):
    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None):
        super().__init__(id)
        self.title: str | None = None
        self.stock_id: str | None = None
        self.access_key: str | None = None
        self.tab_index: int | None = None
        self.confirmation_message: str | None = None
        self.stock_class: str | None = None
        self.clicked: bool = False
        self.requires_id = True
        self.add_java_script(zp_script("button"), ZP_PACKAGE_ID)
        # ⚡🛠️ TButton ▸ End of __init__
    # ---
    def init(self):
        super().init()
        self.set_from_stock(self.stock_id or "submit", overwrite_properties=False)
    # ---
    def set_from_stock(self, stock_id: str, overwrite_properties: bool = True):
        """
        Подставляет заголовок и css-класс по stock id.
        Неизвестный id → EUndefinedStockTypeError.
        """
        if stock_id not in STOCK_BUTTONS:
            self.fail("set_from_stock", f"stock type with id of '{stock_id}' not found",
                      EUndefinedStockTypeError)
        title, suffix = STOCK_BUTTONS[stock_id]
        if overwrite_properties or self.title is None:
            self.title = translate(title)
        self.stock_class = zp_class("button", suffix)
    # ---
    def process(self):
        super().process()
        form = self.get_form()
        if self.id in form.get_form_data():
            self.clicked = True
            form.button = self
            # ... 🔊 ...
            self.log("process", f"button {self.id} clicked")
    # ---
    def has_been_clicked(self) -> bool:
        return self.clicked
    # ..................................................................................................................
    # 🎨 Рендеринг
    # ..................................................................................................................
    def display(self, ctx: TRenderContext):
        if not self.visible:
            return
        super().display(ctx)
        tag = THtmlTag("input", {
            "type": "submit",
            "name": self.id,
            "id": self.id,
            "value": self.title,
            "class": self.get_css_class_string(),
            "tabindex": self.tab_index,
            "accesskey": self.access_key,
        })
        if not self.is_sensitive():
            tag["disabled"] = "disabled"
        tag.display(ctx)
        if self.confirmation_message is not None:
            ctx.inline_java_script(self.get_inline_java_script())
    # ---
    def get_inline_java_script(self) -> str:
        message = self.confirmation_message.replace("\\", "\\\\").replace("'", "\\'")
        return (f"var {self.id}_obj = new ZapButton('{self.id}');\n"
                f"{self.id}_obj.setConfirmationMessage('{message}');")
    # ---
    def get_css_class_names(self) -> list[str]:
        from zp_container import TForm

        classes = [zp_class("button")]
        form = self.get_first_ancestor(TForm)
        if form is not None and form.get_first_descendant(TButton) is self:
            classes.append(zp_class("primary"))
        if self.stock_class is not None:
            classes.append(self.stock_class)
        return classes + super().get_css_class_names()
# 📁🌄 zp_ctrl_atom.py 🜂 The End — See You Next Session 2025
