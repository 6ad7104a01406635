# ======================================================================================================================
# 📁 file        : zp_ctrl_option.py — Контролы выбора: check-all, список флажков, flydown, дерево-flydown
# 🕒 created     : 08.11.2025 14:20
# 🎉 contains    : TCheckAll, TCheckboxList, TFlydown, TTreeFlydownNode, TTreeFlydown
# 🌅 project     : Zap Core 2025 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
from copy import copy as shallow_copy
from typing import Any
from zp_sys import *
from zp_tag import TRenderContext, THtmlTag, CONTENT_PLAIN
from zp_message import TMessage, TMessageType
from zp_ctrl_mixin import TStateMixin
from zp_ctrl_atom import TCheckbox
from zp_option import TOption, TFlydownDivider, TFlydownBlankOption, TOptionControl, DIVIDER_TITLE
from zp_tree import TTreeNode, TDataTreeNode
# 💎🧩⚙️ ... __ALL__ ...
__all__ = ["TCheckAll", "TCheckboxList", "TFlydown", "TTreeFlydownNode", "TTreeFlydown"]
# 🍍 ... global utilities ...
def _js_string(text: str) -> str:
    return "'" + str(text).replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n") + "'"
# ---
def _as_str(value: Any) -> str:
    return "" if value is None else str(value)
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TCheckAll — «отметить все» для списка флажков / колонки таблицы
# ----------------------------------------------------------------------------------------------------------------------
class TCheckAll(TCheckbox):
    JS_STRINGS_MARKER = "zap-check-all-strings"

    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None):
        """
        Флажок «отметить все».
        💠 сам <input> живёт под id '<id>_value', id занят обёрткой <div>.
        Если строк больше, чем видно на странице (extended_count > visible_count),
        показывается композит extended_checkbox «выбрать все N».
        Общие JS-строки печатаются один раз за проход рендера.
        """
        super().__init__(id)
        self.title: str | None = translate("Check All")
        self.content_type: str = CONTENT_PLAIN
        self.extended_count: int = 0
        self.visible_count: int = 0
        self.unit: str | None = None
        self.add_java_script(zp_script("check-all"), ZP_PACKAGE_ID)
        # ⚡🛠️ TCheckAll ▸ End of __init__
    # ---
    def create_composite_widgets(self):
        self.add_composite_widget(TCheckbox(), "extended_checkbox")
    # ---
    def get_input_id(self) -> str:
        return f"{self.id}_value"
    # ---
    def is_extended_selected(self) -> bool:
        return self.get_composite_widget("extended_checkbox").value
    # ..................................................................................................................
    # 🎨 Рендеринг
    # ..................................................................................................................
    def display(self, ctx: TRenderContext):
        if not self.visible:
            return
        div_tag = THtmlTag("div", {"id": self.id, "class": self.get_css_class_string()})
        div_tag.open(ctx)
        label_tag = THtmlTag("label", {"for": self.get_input_id()})
        label_tag.set_content(self.title, self.content_type)
        label_tag.open(ctx)
        super().display(ctx)
        label_tag.display_content(ctx)
        label_tag.close(ctx)
        if self.extended_count > self.visible_count:
            extended_div = THtmlTag("div", {
                "id": f"{self.id}_extended",
                "class": zp_join_classes(zp_class("hidden"), zp_class("extended", "check", "all")),
            })
            extended_div.open(ctx)
            self.display_extended_title(ctx)
            extended_div.close(ctx)
        div_tag.close(ctx)
        if ctx.once(self.JS_STRINGS_MARKER):
            ctx.inline_java_script(self.get_inline_java_script_translations())
        ctx.inline_java_script(self.get_inline_java_script())
    # ---
    def display_extended_title(self, ctx: TRenderContext):
        entity = translate("items") if self.unit is None else self.unit
        checkbox = self.get_composite_widget("extended_checkbox")
        sub = ctx.child()
        label_tag = THtmlTag("label", {"for": checkbox.get_input_id()})
        label_tag.set_content(translate("select all %s %s") % (self.extended_count, entity))
        label_tag.open(sub)
        checkbox.display(sub)
        label_tag.display_content(sub)
        label_tag.close(sub)
        ctx.text(translate("All %s %s on this page are selected. (%s)") % (self.visible_count, entity, sub.html()))
    # ---
    def get_inline_java_script_translations(self) -> str:
        return (f"ZapCheckAll.check_all_text = {_js_string(translate('Check All'))};\n"
                f"ZapCheckAll.uncheck_all_text = {_js_string(translate('Uncheck All'))};")
    # ---
    def get_inline_java_script(self) -> str:
        return f"var {self.id}_obj = new ZapCheckAll('{self.id}');"
    # ---
    def get_css_class_names(self) -> list[str]:
        return [zp_class("check", "all")] + super().get_css_class_names()
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TCheckboxList — набор флажков по опциям (множественный выбор)
# ----------------------------------------------------------------------------------------------------------------------
class TCheckboxList(TStateMixin, TOptionControl):
    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None):
        """
        Список флажков.
        💠 values — выбранные значения опций (строки, как пришли из формы);
        дубли value среди опций запрещены и ловятся один раз в init().
        columns — число колонок или список длин колонок.
        """
        super().__init__(id)
        self.values: list[Any] = []
        self.show_check_all: bool = True
        self.columns: int | list[int] = 1
        self.requires_id = True
        self.add_java_script(zp_script("checkbox-list"), ZP_PACKAGE_ID)
        # ⚡🛠️ TCheckboxList ▸ End of __init__
    # ---
    def create_composite_widgets(self):
        self.add_composite_widget(TCheckAll(), "check_all")
    # ---
    def init(self):
        super().init()
        if self.has_duplicate_values():
            self.fail("init", f"duplicate option values found in {self.id}", EDuplicateIdError)
    # ..................................................................................................................
    # 📡 Process
    # ..................................................................................................................
    def process(self):
        if not self.get_form().is_submitted():
            return
        super().process()
        self.process_values()
        if self.required and not self.values and self.is_sensitive():
            self.add_message(TMessage.create(translate("The %s field is required."), TMessageType.ERROR))
    # ---
    def process_values(self):
        raw = self.get_form_data().get(self.id)
        if isinstance(raw, dict):
            self.values = list(raw.values())
        elif isinstance(raw, list):
            self.values = list(raw)
        elif raw is not None and raw != "":
            self.values = [raw]
        else:
            self.values = []
    # ---
    def reset(self):
        self.values = []
    # ---
    def get_state(self) -> list[Any]:
        return list(self.values)
    # ---
    def set_state(self, state: Any):
        self.values = list(state)
    # ---
    def is_option_checked(self, option: TOption) -> bool:
        return _as_str(option.value) in {_as_str(v) for v in self.values}
    # ..................................................................................................................
    # 🎨 Рендеринг
    # ..................................................................................................................
    def display(self, ctx: TRenderContext):
        options = self.get_options()
        if not self.visible or not options:
            return
        super().display(ctx)
        div_tag = THtmlTag("div", {"id": self.id, "class": self.get_css_class_string()})
        div_tag.open(ctx)
        if isinstance(self.columns, (list, tuple)):
            columns = list(self.columns)
        else:
            per_column = -(-len(options) // (self.columns if self.columns > 0 else 1))
            columns = [per_column]
        multiple_columns = len(options) > columns[0]
        maximum_options = columns.pop(0)
        current_column = 1
        current_option = 0
        ul_tag = THtmlTag("ul")
        if multiple_columns:
            ul_tag["id"] = f"{self.id}_column_{current_column}"
            ul_tag["class"] = zp_class("checkbox", "list", "column")
        ul_tag.open(ctx)
        for index, option in enumerate(options):
            if current_option == maximum_options:
                ul_tag.close(ctx)
                current_column += 1
                current_option = 0
                if columns:
                    maximum_options = columns.pop(0)
                ul_tag["id"] = f"{self.id}_column_{current_column}"
                ul_tag["class"] = zp_class("checkbox", "list", "column")
                ul_tag.open(ctx)
            current_option += 1
            self.display_option(ctx, option, index)
        ul_tag.close(ctx)
        if multiple_columns:
            ctx.text(f'<div class="{zp_class("clear")}"></div>')
        check_all = self.get_composite_widget("check_all")
        check_all.visible = self.show_check_all and len(options) > 1
        check_all.display(ctx)
        div_tag.close(ctx)
        ctx.inline_java_script(self.get_inline_java_script())
    # ---
    def display_option(self, ctx: TRenderContext, option: TOption, index: int):
        input_tag = THtmlTag("input", {
            "type": "checkbox",
            "name": f"{self.id}[{index}]",
            "value": _as_str(option.value),
            "id": f"{self.id}_{index}",
        })
        if self.is_option_checked(option):
            input_tag["checked"] = "checked"
        if not self.is_sensitive():
            input_tag["disabled"] = "disabled"
        label_tag = THtmlTag("label", {"class": zp_class("control"), "for": f"{self.id}_{index}"})
        label_tag.set_content(option.title, option.content_type)
        li_tag = THtmlTag("li", {"class": self.get_option_classes(option)})
        li_tag.open(ctx)
        input_tag.display(ctx)
        label_tag.display(ctx)
        li_tag.close(ctx)
    # ---
    def get_inline_java_script(self) -> str:
        javascript = f"var {self.id}_obj = new ZapCheckboxList('{self.id}');"
        check_all = self.get_composite_widget("check_all")
        if check_all.visible:
            javascript += f"\n{check_all.id}_obj.setController({self.id}_obj);"
        return javascript
    # ---
    def get_css_class_names(self) -> list[str]:
        return [zp_class("checkbox", "list")] + super().get_css_class_names()
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TFlydown — выпадающий список (одиночный выбор)
# ----------------------------------------------------------------------------------------------------------------------
class TFlydown(TStateMixin, TOptionControl):
    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None):
        """
        Выпадающий список.
        💠 без serialize_values value — строка как пришла из формы ('' у пустой опции),
        с serialize_values значения опций уходят в форму подписанным JSON и возвращаются как были.
        Ровно одна опция → вместо <select> скрытый input + текст.
        """
        super().__init__(id)
        self.value: Any = None
        self.show_blank: bool = True
        self.blank_title: str = ""
        self.requires_id = True
        # ⚡🛠️ TFlydown ▸ End of __init__
    # ---
    def add_divider(self, title: str = DIVIDER_TITLE) -> TOption:
        return self.add_option(TFlydownDivider(None, title))
    # ---
    def get_blank_option(self) -> TOption:
        return TFlydownBlankOption(None, self.blank_title)
    # ---
    def get_display_options(self) -> list[TOption]:
        options = self.get_options()
        if self.show_blank:
            options = [self.get_blank_option()] + options
        return options
    # ---
    def get_selected_value(self) -> Any:
        """Что подсвечивать как выбранное при рендере."""
        return self.value
    # ..................................................................................................................
    # 📡 Process
    # ..................................................................................................................
    def process(self):
        super().process()
        if not self.process_value():
            return
        if self.required and self.is_sensitive():
            if (self.serialize_values and self.value is None) or \
                    (not self.serialize_values and _as_str(self.value) == ""):
                self.add_message(self.get_validation_message("required"))
    # ---
    def process_value(self) -> bool:
        form = self.get_form()
        data = form.get_form_data()
        if self.id not in data:
            return False
        if self.serialize_values:
            self.value = form.unserialize_value(data[self.id])
        else:
            self.value = _as_str(data[self.id])
        return True
    # ---
    def reset(self):
        self.value = None
    # ---
    def get_state(self) -> Any:
        return self.value
    # ---
    def set_state(self, state: Any):
        self.value = state
    # ---
    def get_focusable_html_id(self) -> str | None:
        if self.visible and len(self.get_display_options()) > 1:
            return self.id
        return None
    # ..................................................................................................................
    # 🎨 Рендеринг
    # ..................................................................................................................
    def _option_value_attr(self, value: Any) -> str:
        if self.serialize_values:
            return self.get_form().serialize_value(value)
        return _as_str(value)
    # ---
    def display(self, ctx: TRenderContext):
        if not self.visible:
            return
        super().display(ctx)
        options = self.get_display_options()
        if len(options) == 1:
            self.display_single(ctx, options[0])
            return
        if not options:
            return
        selected_value = self.get_selected_value()
        if not self.serialize_values:
            selected_value = _as_str(selected_value)
        select_tag = THtmlTag("select", {"name": self.id, "id": self.id, "class": self.get_css_class_string()})
        if not self.is_sensitive():
            select_tag["disabled"] = "disabled"
        select_tag.open(ctx)
        selected = False
        for option in options:
            option_tag = THtmlTag("option", {"value": self._option_value_attr(option.value)})
            if isinstance(option, TFlydownDivider):
                option_tag["disabled"] = "disabled"
                option_tag["class"] = zp_class("flydown", "option", "divider")
            elif isinstance(option, TFlydownBlankOption):
                option_tag["class"] = zp_class("blank", "option")
            else:
                option_tag["class"] = self.get_option_classes(option)
            value = option.value if self.serialize_values else _as_str(option.value)
            if not selected and option.is_selectable() and value == selected_value:
                option_tag["selected"] = "selected"
                selected = True
            option_tag.set_content(option.title, option.content_type)
            option_tag.display(ctx)
        select_tag.close(ctx)
    # ---
    def display_single(self, ctx: TRenderContext, option: TOption):
        hidden_tag = THtmlTag("input", {"type": "hidden", "name": self.id,
                                        "value": self._option_value_attr(option.value)})
        hidden_tag.display(ctx)
        span_tag = THtmlTag("span", {"class": zp_class("flydown", "single")})
        span_tag.set_content(option.title, option.content_type)
        span_tag.display(ctx)
    # ---
    def get_css_class_names(self) -> list[str]:
        return [zp_class("flydown")] + super().get_css_class_names()
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TTreeFlydownNode — узел дерева с опцией
# ----------------------------------------------------------------------------------------------------------------------
class TTreeFlydownNode(TTreeNode):
    def __init__(self, value: Any, title: str | None = None):
        """TTreeFlydownNode(TOption(...)) или TTreeFlydownNode(value, title)."""
        super().__init__()
        if title is None and isinstance(value, TOption):
            self.option = value
        elif title is None:
            self.fail("__init__", "first parameter must be a TOption or a title must be given")
        else:
            self.option = TOption(value, title)
    # ---
    def get_option(self) -> TOption:
        return self.option
    # ---
    def add_child(self, child: TTreeNode) -> TTreeNode:
        if isinstance(child, TDataTreeNode):
            child = TTreeFlydownNode.convert_from_data_tree(child)
        return super().add_child(child)
    # ---
    @classmethod
    def convert_from_data_tree(cls, tree: TDataTreeNode) -> "TTreeFlydownNode":
        new_tree = cls(tree.value, _as_str(tree.title))
        for child in tree.get_children():
            new_tree.add_child(cls.convert_from_data_tree(child))
        return new_tree
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TTreeFlydown — flydown по дереву, значение опции = путь от корня
# ----------------------------------------------------------------------------------------------------------------------
class TTreeFlydown(TFlydown):
    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None):
        """
        Flydown по дереву.
        💠 дерево разворачивается в опции с отступом по уровню, value каждой опции —
        путь значений от верхнего уровня до узла. После process(): path — выбранный путь,
        value — последний элемент пути.
        """
        super().__init__(id)
        self.path: list[Any] = []
        self.serialize_values = True
        self.tree: TTreeFlydownNode = TTreeFlydownNode(None, "root")
        # ⚡🛠️ TTreeFlydown ▸ End of __init__
    # ---
    def set_tree(self, tree: TTreeNode):
        if isinstance(tree, TDataTreeNode):
            tree = TTreeFlydownNode.convert_from_data_tree(tree)
        elif not isinstance(tree, TTreeFlydownNode):
            self.fail("set_tree", "tree must be an instance of either TDataTreeNode or TTreeFlydownNode",
                      EInvalidClassError)
        self.tree = tree
    # ---
    def get_tree(self) -> TTreeFlydownNode:
        return self.tree
    # ---
    def get_options(self, only_selectable: bool = False) -> list[TOption]:
        options: list[TOption] = []
        for child in self.tree.get_children():
            self._flatten_tree(options, child, 0, [])
        return options
    # ---
    def _flatten_tree(self, options: list[TOption], node: TTreeFlydownNode, level: int, path: list[Any]):
        tree_option = shallow_copy(node.get_option())
        path = path + [tree_option.value]
        tree_option.title = "&nbsp;" * (level * 3) + _as_str(tree_option.title)
        tree_option.value = path
        options.append(tree_option)
        for child in node.get_children():
            self._flatten_tree(options, child, level + 1, path)
    # ---
    def get_selected_value(self) -> Any:
        if not self.path and self.value is not None:
            return [self.value]
        return list(self.path)
    # ---
    def process_value(self) -> bool:
        if not super().process_value():
            return False
        self.path = [] if self.value is None else list(self.value)
        self.value = self.path[-1] if self.path else None
        return True
# 📁🌄 zp_ctrl_option.py 🜂 The End — See You Next Session 2025
