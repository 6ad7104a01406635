# ======================================================================================================================
# 📁 file        : zp_cell_atom.py — Конкретные cell-рендереры: текст, булево, checkbox / radio-селекторы
# 🕒 created     : 11.11.2025 16:05
# 🎉 contains    : TTextCellRenderer, TBooleanCellRenderer, TCheckboxCellRenderer, TRadioButtonCellRenderer
# 🌅 project     : Zap Core 2025 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
from typing import Any, Mapping
from zp_sys import *
from zp_tag import TRenderContext, THtmlTag, minimize_entities, CONTENT_PLAIN, CONTENT_XML
from zp_ctrl_mixin import TViewSelectorMixin
from zp_cell import TCellRenderer
# 💎🧩⚙️ ... __ALL__ ...
__all__ = ["TTextCellRenderer", "TBooleanCellRenderer", "TSelectorCellRenderer", "TCheckboxCellRenderer", "TRadioButtonCellRenderer"]
# 🍍 ... global utilities ...
def _format(template: str, value: Any) -> str:
    """printf-подстановка value в шаблон; шаблон без '%' возвращается как есть."""
    if "%" not in template:
        return template
    if isinstance(value, (list, tuple)):
        return template % tuple(value)
    if isinstance(value, Mapping):
        return template % dict(value)
    return template % (value,)
# ---
def _emit(ctx: TRenderContext, content: Any, content_type: str | None):
    if content_type == CONTENT_XML:
        ctx.text("" if content is None else content)
    else:
        ctx.text(minimize_entities(content))
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TTextCellRenderer — текст по шаблону
# ----------------------------------------------------------------------------------------------------------------------
class TTextCellRenderer(TCellRenderer):
    def __init__(self):
        super().__init__()
        self.text: str = ""
        self.content_type: str = CONTENT_PLAIN
        self.value: Any = None

    def render(self, ctx: TRenderContext):
        if not self.visible:
            return
        super().render(ctx)
        text = self.text if self.value is None else _format(_s(self.text), self.value)
        _emit(ctx, text, self.content_type)
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TBooleanCellRenderer — да/нет или галочка
# ----------------------------------------------------------------------------------------------------------------------
class TBooleanCellRenderer(TCellRenderer):
    CHECK_IMAGE = f"packages/{ZP_PACKAGE_ID}/images/check.png"

    # ⚡🛠️ ▸ __init__
    def __init__(self):
        """
        Булев рендерер.
        💠 stock_id 'yes-no' — текст Yes/No, 'check-only' (по умолчанию) — картинка-галочка для True.
        Незаданные true/false content и content_type берутся из stock-набора при каждом render().
        """
        super().__init__()
        self.value: Any = None
        self.true_content: str | None = None
        self.false_content: str | None = None
        self.content_type: str | None = None
        self.stock_id: str | None = None
        # ⚡🛠️ TBooleanCellRenderer ▸ End of __init__
    # ---
    def set_from_stock(self, stock_id: str, overwrite_properties: bool = True):
        content_type = CONTENT_PLAIN
        if stock_id == "yes-no":
            false_content = translate("No")
            true_content = translate("Yes")
        elif stock_id == "check-only":
            content_type = CONTENT_XML
            false_content = "&#160;"
            true_content = self.get_check_tag().to_string()
        else:
            self.fail("set_from_stock", f"stock type with id of '{stock_id}' not found", EUndefinedStockTypeError)
        if overwrite_properties or self.false_content is None:
            self.false_content = false_content
        if overwrite_properties or self.true_content is None:
            self.true_content = true_content
        if overwrite_properties or self.content_type is None:
            self.content_type = content_type
    # ---
    def get_check_tag(self) -> THtmlTag:
        return THtmlTag("img", {"src": self.CHECK_IMAGE, "alt": translate("Yes"), "height": "14", "width": "14"})
    # ---
    def render(self, ctx: TRenderContext):
        if not self.visible:
            return
        super().render(ctx)
        self.set_from_stock(self.stock_id or "check-only", overwrite_properties=False)
        if self.content_type is None:
            self.content_type = CONTENT_PLAIN
        if self.value:
            _emit(ctx, self.true_content, self.content_type)
        else:
            _emit(ctx, self.false_content, self.content_type)
    # ---
    def get_data_specific_css_class_names(self) -> list[str]:
        if self.value:
            return [zp_class("boolean", "cell", "renderer", "checked")]
        return []
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TSelectorCellRenderer — общее для checkbox / radio селекторов
# ----------------------------------------------------------------------------------------------------------------------
class TSelectorCellRenderer(TViewSelectorMixin, TCellRenderer):
    STATIC_PROPERTIES = ("id",)
    INPUT_TYPE = "checkbox"
    JS_CLASS = "ZapCheckboxCellRenderer"

    # ⚡🛠️ ▸ __init__
    def __init__(self):
        """
        Рендерер-селектор строк view.
        💠 id статичен (не маппится) и выдаётся в init(), если не задан.
        process() заменяет выделение этого селектора во view целиком,
        render() отмечает строку, если её value входит в текущее выделение.
        """
        super().__init__()
        self.value: Any = None
        self.title: str | None = None
        self.content_type: str = CONTENT_PLAIN
        # ⚡🛠️ TSelectorCellRenderer ▸ End of __init__
    # ---
    def init(self):
        super().init()
        if self.id is None:
            self.id = self._get_unique_id()
    # ---
    def get_form(self) -> Any:
        from zp_container import TForm

        form = self.get_first_ancestor(TForm)
        if form is None:
            self.fail("get_form", f"{self.__class__.__name__} must have a TForm ancestor in the UI tree")
        return form
    # ---
    def get_selected_values(self, raw: Any) -> list[Any]:
        raise NotImplementedError(f"{self.__class__.__name__}.get_selected_values()")
    # ---
    def process(self):
        from zp_view import TViewSelection

        super().process()
        form = self.get_form()
        if not form.is_submitted():
            return
        values = self.get_selected_values(form.get_form_data().get(self.id))
        view = self.get_view()
        if view is not None:
            view.set_selection(TViewSelection(values), self)
    # ---
    def is_selected(self) -> bool:
        view = self.get_view()
        return view is not None and view.get_selection(self).contains(self.value)
    # ..................................................................................................................
    # 🎨 Рендеринг
    # ..................................................................................................................
    def get_input_id(self) -> str:
        return f"{self.id}_{self.INPUT_TYPE}_{_s(self.value)}"
    # ---
    def get_input_name(self) -> str:
        return self.id
    # ---
    def render(self, ctx: TRenderContext):
        if not self.visible:
            return
        super().render(ctx)
        label_tag = None
        if self.title is not None:
            label_tag = THtmlTag("label", {"for": self.get_input_id()})
            label_tag.set_content(self.title, self.content_type)
            label_tag.open(ctx)
        input_tag = THtmlTag("input", {
            "type": self.INPUT_TYPE,
            "name": self.get_input_name(),
            "id": self.get_input_id(),
            "value": self.value,
        })
        if not self.is_sensitive():
            input_tag["disabled"] = "disabled"
        if self.is_selected():
            input_tag["checked"] = "checked"
        input_tag.display(ctx)
        if label_tag is not None:
            label_tag.display_content(ctx)
            label_tag.close(ctx)
    # ---
    def get_inline_java_script(self) -> str:
        view = self.get_view()
        if view is None:
            return ""
        return f"var {self.id} = new {self.JS_CLASS}('{self.id}', {view.id}_obj);"
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TCheckboxCellRenderer — множественный выбор строк
# ----------------------------------------------------------------------------------------------------------------------
class TCheckboxCellRenderer(TSelectorCellRenderer):
    INPUT_TYPE = "checkbox"
    JS_CLASS = "ZapCheckboxCellRenderer"

    def __init__(self):
        super().__init__()
        self.add_java_script(zp_script("checkbox-cell-renderer"), ZP_PACKAGE_ID)

    def get_input_name(self) -> str:
        return f"{self.id}[]"

    def get_selected_values(self, raw: Any) -> list[Any]:
        if isinstance(raw, Mapping):
            return list(raw.values())
        if isinstance(raw, (list, tuple)):
            return list(raw)
        return []
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TRadioButtonCellRenderer — одиночный выбор строки
# ----------------------------------------------------------------------------------------------------------------------
class TRadioButtonCellRenderer(TSelectorCellRenderer):
    INPUT_TYPE = "radio"
    JS_CLASS = "ZapRadioButtonCellRenderer"

    def __init__(self):
        super().__init__()
        self.add_java_script(zp_script("radio-button-cell-renderer"), ZP_PACKAGE_ID)

    def get_selected_values(self, raw: Any) -> list[Any]:
        if raw is None or raw == "" or isinstance(raw, (list, dict)):
            return []
        return [raw]
# 📁🌄 zp_cell_atom.py 🜂 The End — See You Next Session 2025
