# ======================================================================================================================
# 📁 file        : zp_view.py — View: выделение строк, таблица, details-view
# 🕒 created     : 12.11.2025 11:50
# 🎉 contains    : TViewSelection, TView, TTableViewColumn, TTableView, TDetailsViewField, TDetailsView
# 🌅 project     : Zap Core 2025 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
from typing import Any, Iterable, Iterator
from zp_sys import *
from zp_tag import TRenderContext, THtmlTag, THtmlHeadEntrySet, minimize_entities, CONTENT_PLAIN, CONTENT_XML
from zp_message import TMessage
from zp_ctrl_mixin import TUIParentMixin, TViewSelectorMixin
from zp_widget import TControl
from zp_cell import TCellRenderer, TCellRendererContainer
# 💎🧩⚙️ ... __ALL__ ...
__all__ = ["TViewSelection", "TView", "TTableViewColumn", "TTableView", "TDetailsViewField", "TDetailsView"]
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TViewSelection — выбранные идентификаторы строк одного селектора
# ----------------------------------------------------------------------------------------------------------------------
class TViewSelection:
    def __init__(self, selected_items: Iterable[Any] = ()):
        """
        Упорядоченный набор идентификаторов строк (не самих строк).
        Принадлежность — по равенству значений; '3' и 3 считаются одним идентификатором,
        так как из формы идентификаторы приходят строками.
        """
        self.selected_items: list[Any] = list(selected_items)
    # ---
    def contains(self, item: Any) -> bool:
        if item in self.selected_items:
            return True
        if isinstance(item, (str, int)) and not isinstance(item, bool):
            key = str(item)
            return any(str(i) == key for i in self.selected_items
                       if isinstance(i, (str, int)) and not isinstance(i, bool))
        return False
    # ---
    def __contains__(self, item: Any) -> bool:
        return self.contains(item)
    # ---
    def __iter__(self) -> Iterator[Any]:
        return iter(self.selected_items)
    # ---
    def __len__(self) -> int:
        return len(self.selected_items)
    # ---
    def count(self) -> int:
        return len(self.selected_items)
    # ---
    def __repr__(self):
        return f"<TViewSelection {self.selected_items!r}>"
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TView — контрол, показывающий набор строк и хранящий выделения селекторов
# ----------------------------------------------------------------------------------------------------------------------
class TView(TUIParentMixin, TControl):
    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None):
        """
        Базовый view.
        💠 в init() регистрирует всех потомков-селекторов, чей ближайший view — он сам
        (селекторы вложенных view не берёт), и заводит каждому пустое TViewSelection.
        process() селектора заменяет его выделение целиком, render() строки читает его.
        """
        super().__init__(id)
        self.model: Any = None
        self.selections: dict[str, TViewSelection] = {}
        self.selectors: dict[str, TViewSelectorMixin] = {}
        self.add_java_script(zp_script("view"), ZP_PACKAGE_ID)
        # ⚡🛠️ TView ▸ End of __init__
    # ..................................................................................................................
    # 🚀 Жизненный цикл
    # ..................................................................................................................
    def init(self):
        super().init()
        self.init_parts()
        for selector in self.get_descendants(TViewSelectorMixin):
            if selector.get_view() is self:
                self.add_selector(selector)
        # id колонок и рендереров появляются только в init_parts
        if self.Owner is None:
            self._check_unique_ids()
    # ---
    def init_parts(self):
        """Хук: колонки / поля инициализируются до регистрации селекторов."""
        pass
    # ---
    def process(self):
        super().process()
        self.process_parts()
    # ---
    def process_parts(self):
        pass
    # ..................................................................................................................
    # 🎯 Селекторы и выделение
    # ..................................................................................................................
    def add_selector(self, selector: TViewSelectorMixin):
        selector_id = selector.get_id()
        self.selections[selector_id] = TViewSelection()
        self.selectors[selector_id] = selector
        # ... 🔊 ...
        self.debug("add_selector", f"{selector_id} registered")
    # ---
    def get_selectors(self) -> list[TViewSelectorMixin]:
        return list(self.selectors.values())
    # ---
    def _resolve_selector(self, selector: Any, function: str) -> str:
        if selector is None:
            if not self.selectors:
                self.fail(function, "this view does not have any selectors")
            return next(iter(self.selectors))
        if isinstance(selector, str):
            if selector not in self.selectors:
                self.fail(function, f"selector with an id of '{selector}' does not exist in this view",
                          ENotFoundError)
            return selector
        if not isinstance(selector, TViewSelectorMixin):
            self.fail(function, f"{selector.__class__.__name__} is not a TViewSelectorMixin object",
                      EInvalidClassError)
        selector_id = selector.get_id()
        if self.selectors.get(selector_id) is not selector:
            self.fail(function, "specified selector is not a selector of this view")
        return selector_id
    # ---
    def get_selection(self, selector: Any = None) -> TViewSelection:
        """
        selector: None → первый зарегистрированный, строка → по id, объект → сам селектор.
        """
        return self.selections[self._resolve_selector(selector, "get_selection")]
    # ---
    def set_selection(self, selection: TViewSelection, selector: Any = None):
        selector_id = self._resolve_selector(selector, "set_selection")
        self.selections[selector_id] = selection
        # ... 🔊 ...
        self.log("set_selection", f"{selector_id} → {len(selection)} item(s)")
    # ---
    def get_model_rows(self) -> list[Any]:
        return [] if self.model is None else list(self.model)
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TTableViewColumn — колонка таблицы
# ----------------------------------------------------------------------------------------------------------------------
class TTableViewColumn(TCellRendererContainer):
    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None, title: str = ""):
        super().__init__(id)
        self.title: str = title
        self.abbreviated_title: str | None = None
        self.has_auto_id: bool = False
        # ⚡🛠️ TTableViewColumn ▸ End of __init__
    # ---
    @property
    def view(self) -> "TTableView | None":
        return self.get_first_ancestor(TView)
    # ---
    def init(self):
        super().init()
        if self.id is None:
            self.id = self._get_unique_id()
            self.has_auto_id = True
    # ..................................................................................................................
    # 🎨 Заголовок
    # ..................................................................................................................
    def has_header(self) -> bool:
        return self.visible and self.title != ""
    # ---
    def display_header_cell(self, ctx: TRenderContext):
        if not self.visible:
            return
        th_tag = THtmlTag("th", self.get_th_attributes())
        th_tag["scope"] = "col"
        colspan = self.get_xhtml_colspan()
        if colspan > 1:
            th_tag["colspan"] = colspan
        th_tag.open(ctx)
        self.display_header(ctx)
        th_tag.close(ctx)
    # ---
    def display_header(self, ctx: TRenderContext):
        if self.abbreviated_title is None:
            ctx.text(minimize_entities(self.title) if self.title != "" else "&#160;")
        else:
            abbr_tag = THtmlTag("abbr", {"title": self.title})
            abbr_tag.set_content(self.abbreviated_title)
            abbr_tag.display(ctx)
    # ..................................................................................................................
    # 🎨 Ячейки
    # ..................................................................................................................
    def display(self, ctx: TRenderContext, row: Any):
        if not self.visible:
            return
        self.setup_renderers(row)
        self.display_renderers(ctx, row)
    # ---
    def setup_renderers(self, row: Any):
        if len(self.renderers) == 0:
            self.fail("setup_renderers", "no renderer has been provided for this column")
        view = self.view
        self.apply_mappings(row, True if view is None else view.is_sensitive())
    # ---
    def display_renderers(self, ctx: TRenderContext, row: Any):
        td_tag = THtmlTag("td", self.get_td_attributes())
        colspan = self.get_xhtml_colspan()
        if colspan > 1:
            td_tag["colspan"] = colspan
        td_tag.open(ctx)
        if len(self.renderers) == 1:
            self.renderers.get_first().render(ctx)
        else:
            first = True
            for renderer in self.renderers:
                if not renderer.visible:
                    continue
                if not first:
                    ctx.text(" ")
                first = False
                classes = ([zp_class("table", "view", "column", "renderer")]
                           + renderer.get_inheritance_css_class_names()
                           + renderer.get_base_css_class_names()
                           + renderer.get_data_specific_css_class_names()
                           + list(renderer.classes))
                div_tag = THtmlTag("div", {"class": " ".join(classes)})
                div_tag.open(ctx)
                renderer.render(ctx)
                div_tag.close(ctx)
        td_tag.close(ctx)
    # ---
    def get_messages(self, row: Any) -> list[TMessage]:
        messages: list[TMessage] = []
        for renderer in self.renderers:
            self.renderers.apply_mappings_to_renderer(renderer, row)
            messages.extend(renderer.get_messages())
        return messages
    # ---
    def has_message(self, row: Any) -> bool:
        return len(self.get_messages(row)) > 0
    # ---
    def get_td_attributes(self) -> dict[str, Any]:
        return {"class": self.get_css_class_string()}
    # ---
    def get_th_attributes(self) -> dict[str, Any]:
        return {"class": self.get_css_class_string()}
    # ---
    def get_tr_attributes(self, row: Any) -> dict[str, Any]:
        return {}
    # ---
    def get_xhtml_colspan(self) -> int:
        return 1
    # ---
    def get_base_css_class_names(self) -> list[str]:
        return []
    # ---
    def get_css_class_names(self) -> list[str]:
        classes = []
        if self.id is not None and not self.has_auto_id:
            classes.append(self.id.replace("_", "-"))
        classes += self.get_base_css_class_names()
        classes += list(self.classes)
        return classes + self.get_renderer_css_class_names()
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TTableView — таблица строк model по колонкам
# ----------------------------------------------------------------------------------------------------------------------
class TTableView(TView):
    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None):
        super().__init__(id)
        self.columns: list[TTableViewColumn] = []
        self.columns_by_id: dict[str, TTableViewColumn] = {}
        self.no_records_message: str | None = "<none>"
        self.no_records_message_type: str = CONTENT_PLAIN
        self.add_java_script(zp_script("table-view"), ZP_PACKAGE_ID)
        self.add_style_sheet(f"packages/{ZP_PACKAGE_ID}/styles/{ZP_CSS_PREFIX}-table-view.css", ZP_PACKAGE_ID)
        # ⚡🛠️ TTableView ▸ End of __init__
    # ..................................................................................................................
    # 👨‍👩‍👧‍👧 Колонки
    # ..................................................................................................................
    def append_column(self, column: TTableViewColumn) -> TTableViewColumn:
        if column.id is not None and column.id in self.columns_by_id:
            self.fail("append_column", f"a column with the id '{column.id}' already exists in this table view",
                      EDuplicateIdError)
        if column.Owner is not None:
            self.fail("append_column", f"{column.log_name()} already has a parent")
        self.columns.append(column)
        if column.id is not None:
            self.columns_by_id[column.id] = column
        column.Owner = self
        return column
    # ---
    def add_child(self, child: Any):
        if not isinstance(child, TTableViewColumn):
            self.fail("add_child", "only TTableViewColumn objects may be nested within TTableView objects. "
                                   f"Attempting to add '{child.__class__.__name__}'", EInvalidClassError)
        self.append_column(child)
    # ---
    def get_column(self, id: str) -> TTableViewColumn:
        if id not in self.columns_by_id:
            self.fail("get_column", f"column with an id of '{id}' not found", EWidgetNotFoundError)
        return self.columns_by_id[id]
    # ---
    def has_column(self, id: str) -> bool:
        return id in self.columns_by_id
    # ---
    def get_columns(self) -> list[TTableViewColumn]:
        return list(self.columns)
    # ---
    def get_visible_columns(self) -> list[TTableViewColumn]:
        return [column for column in self.columns if column.visible]
    # ---
    def get_visible_column_count(self) -> int:
        return len(self.get_visible_columns())
    # ---
    def iter_children(self):
        yield from super().iter_children()
        yield from self.columns
    # ..................................................................................................................
    # 🚀 Жизненный цикл
    # ..................................................................................................................
    def init_parts(self):
        for column in self.columns:
            column.init()
            if column.id not in self.columns_by_id:
                self.columns_by_id[column.id] = column
    # ---
    def process_parts(self):
        for column in self.columns:
            column.process()
    # ..................................................................................................................
    # 💬 Сообщения
    # ..................................................................................................................
    def get_messages(self) -> list[TMessage]:
        messages = super().get_messages()
        for row in self.get_model_rows():
            for column in self.columns:
                messages.extend(column.get_messages(row))
        return messages
    # ---
    def has_message(self) -> bool:
        return len(self.get_messages()) > 0
    # ---
    def row_has_message(self, row: Any) -> bool:
        return any(column.has_message(row) for column in self.columns)
    # ..................................................................................................................
    # 🎨 Рендеринг
    # ..................................................................................................................
    def display(self, ctx: TRenderContext):
        if not self.visible:
            return
        if self.model is None:
            return
        super().display(ctx)
        rows = self.get_model_rows()
        if not rows and self.no_records_message is not None:
            div_tag = THtmlTag("div", {"class": zp_class("none")})
            div_tag.set_content(self.no_records_message, self.no_records_message_type)
            div_tag.display(ctx)
            return
        table_tag = THtmlTag("table", {"id": self.id, "class": self.get_css_class_string(), "cellspacing": "0"})
        table_tag.open(ctx)
        if self.has_header():
            self.display_header(ctx)
        self.display_body(ctx, rows)
        table_tag.close(ctx)
        ctx.inline_java_script(self.get_inline_java_script())
    # ---
    def has_header(self) -> bool:
        return any(column.has_header() for column in self.columns)
    # ---
    def display_header(self, ctx: TRenderContext):
        ctx.text("<thead><tr>")
        for column in self.columns:
            column.display_header_cell(ctx)
        ctx.text("</tr></thead>")
    # ---
    def display_body(self, ctx: TRenderContext, rows: list[Any]):
        ctx.text("<tbody>")
        for count, row in enumerate(rows, start=1):
            self.display_row(ctx, row, count, len(rows))
        ctx.text("</tbody>")
    # ---
    def display_row(self, ctx: TRenderContext, row: Any, count: int, total: int):
        tr_tag = THtmlTag("tr")
        for column in self.columns:
            tr_tag.add_attributes(column.get_tr_attributes(row))
        classes = self.get_row_classes(row, count, total)
        if self.row_has_message(row):
            classes.append(zp_class("error"))
        tr_tag["class"] = " ".join(classes) or None
        tr_tag.open(ctx)
        for column in self.columns:
            column.display(ctx, row)
        tr_tag.close(ctx)
        self.display_row_messages(ctx, row)
    # ---
    def display_row_messages(self, ctx: TRenderContext, row: Any):
        messages: list[TMessage] = []
        for column in self.columns:
            messages.extend(column.get_messages(row))
        if not messages:
            return
        ctx.text(f'<tr class="{zp_class("table", "view", "input", "row", "messages")}">')
        td_tag = THtmlTag("td", {"colspan": self.get_visible_column_count()})
        td_tag.open(ctx)
        ul_tag = THtmlTag("ul", {"class": zp_class("table", "view", "input", "row", "messages")})
        ul_tag.open(ctx)
        for message in messages:
            li_tag = THtmlTag("li", {"class": message.get_css_class()})
            li_tag.set_content(message.primary_content, message.content_type)
            li_tag.display(ctx)
        ul_tag.close(ctx)
        td_tag.close(ctx)
        ctx.text("</tr>")
    # ---
    def get_row_classes(self, row: Any, count: int, total: int) -> list[str]:
        classes = []
        if count % 2 == 1:
            classes.append("odd")
        if count == 1:
            classes.append("first")
        if count == total:
            classes.append("last")
        return classes
    # ---
    def get_html_head_entry_set(self) -> THtmlHeadEntrySet:
        entries = super().get_html_head_entry_set()
        for column in self.columns:
            entries.add_entry_set(column.get_html_head_entry_set())
        return entries
    # ---
    def get_inline_java_script(self) -> str:
        scripts = [f"var {self.id}_obj = new ZapTableView('{self.id}');"]
        for column in self.columns:
            renderer_js = column.get_renderer_inline_java_script()
            if renderer_js:
                scripts.append(renderer_js)
        return "\n".join(scripts)
    # ---
    def get_css_class_names(self) -> list[str]:
        return [zp_class("table", "view")] + super().get_css_class_names()
    # ..................................................................................................................
    # ♻️ Копирование
    # ..................................................................................................................
    def _copy_into(self, clone: "TTableView", id_suffix: str):
        super()._copy_into(clone, id_suffix)
        clone.selections = {}
        clone.selectors = {}
        clone.columns = []
        clone.columns_by_id = {}
        for column in self.columns:
            column_copy = column.copy(id_suffix)
            column_copy.Owner = clone
            clone.columns.append(column_copy)
            if column_copy.id is not None:
                clone.columns_by_id[column_copy.id] = column_copy
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TDetailsViewField — строка details-view: заголовок + рендереры
# ----------------------------------------------------------------------------------------------------------------------
class TDetailsViewField(TCellRendererContainer):
    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None, title: str = ""):
        super().__init__(id)
        self.title: str = title
        self.title_content_type: str = CONTENT_PLAIN
        self.odd: bool = False
        # ⚡🛠️ TDetailsViewField ▸ End of __init__
    # ---
    @property
    def view(self) -> "TDetailsView | None":
        return self.get_first_ancestor(TView)
    # ---
    def display(self, ctx: TRenderContext, data: Any, odd: bool):
        if not self.visible:
            return
        self.odd = odd
        # маппинги до классов строки: data-specific классы зависят от данных
        self.setup_renderers(data)
        tr_tag = THtmlTag("tr", {"id": self.id, "class": self.get_css_class_string()})
        tr_tag.open(ctx)
        self.display_header(ctx)
        self.display_renderers(ctx, data)
        tr_tag.close(ctx)
    # ---
    def display_header(self, ctx: TRenderContext):
        th_tag = THtmlTag("th", {"scope": "row"})
        if self.title == "":
            th_tag.set_content("&#160;", CONTENT_XML)
        else:
            th_tag.set_content(translate("%s:") % self.title, self.title_content_type)
        th_tag.display(ctx)
    # ---
    def setup_renderers(self, data: Any):
        if len(self.renderers) == 0:
            self.fail("setup_renderers", "no renderer has been provided for this field")
        view = self.view
        self.apply_mappings(data, True if view is None else view.is_sensitive())
    # ---
    def display_renderers(self, ctx: TRenderContext, data: Any):
        td_tag = THtmlTag("td", {"class": " ".join(self.get_renderer_css_class_names()) or None})
        td_tag.open(ctx)
        first = True
        for renderer in self.renderers:
            if not first:
                ctx.text(" ")
            first = False
            renderer.render(ctx)
        td_tag.close(ctx)
    # ---
    def get_base_css_class_names(self) -> list[str]:
        return [zp_class("details", "view", "field")]
    # ---
    def get_css_class_names(self) -> list[str]:
        classes = self.get_base_css_class_names()
        if self.odd:
            classes.append("odd")
        classes += list(self.classes)
        return classes + self.get_renderer_css_class_names()
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TDetailsView — одна запись data, поле на строку
# ----------------------------------------------------------------------------------------------------------------------
class TDetailsView(TView):
    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None):
        super().__init__(id)
        self.data: Any = None
        self.fields: list[TDetailsViewField] = []
        self.fields_by_id: dict[str, TDetailsViewField] = {}
        self.add_style_sheet(f"packages/{ZP_PACKAGE_ID}/styles/{ZP_CSS_PREFIX}-details-view.css", ZP_PACKAGE_ID)
        # ⚡🛠️ TDetailsView ▸ End of __init__
    # ..................................................................................................................
    # 👨‍👩‍👧‍👧 Поля
    # ..................................................................................................................
    def append_field(self, field: TDetailsViewField) -> TDetailsViewField:
        return self.insert_field(field)
    # ---
    def insert_field_before(self, field: TDetailsViewField, reference_field: TDetailsViewField):
        return self.insert_field(field, reference_field, after=False)
    # ---
    def insert_field_after(self, field: TDetailsViewField, reference_field: TDetailsViewField):
        return self.insert_field(field, reference_field, after=True)
    # ---
    def insert_field(self, field: TDetailsViewField, reference_field: TDetailsViewField | None = None,
                     after: bool = True) -> TDetailsViewField:
        if field.id is not None and field.id in self.fields_by_id:
            self.fail("insert_field", f"a field with the id '{field.id}' already exists in this details-view",
                      EDuplicateIdError)
        if field.Owner is not None:
            self.fail("insert_field", f"{field.log_name()} already has a parent")
        if reference_field is None:
            if after:
                self.fields.append(field)
            else:
                self.fields.insert(0, field)
        else:
            position = next((i for i, f in enumerate(self.fields) if f is reference_field), None)
            if position is None:
                self.fail("insert_field", "the reference field could not be found in this details-view",
                          EWidgetNotFoundError)
            self.fields.insert(position + 1 if after else position, field)
        if field.id is not None:
            self.fields_by_id[field.id] = field
        field.Owner = self
        return field
    # ---
    def add_child(self, child: Any):
        if not isinstance(child, TDetailsViewField):
            self.fail("add_child", f"unable to add '{child.__class__.__name__}' object to TDetailsView. "
                                   "Only TDetailsViewField objects may be nested within TDetailsView objects",
                      EInvalidClassError)
        self.append_field(child)
    # ---
    def get_field_count(self) -> int:
        return len(self.fields)
    # ---
    def get_fields(self) -> list[TDetailsViewField]:
        return list(self.fields)
    # ---
    def get_field(self, id: str) -> TDetailsViewField:
        if id not in self.fields_by_id:
            self.fail("get_field", f"field with an id of '{id}' not found", EWidgetNotFoundError)
        return self.fields_by_id[id]
    # ---
    def has_field(self, id: str) -> bool:
        return id in self.fields_by_id
    # ---
    def iter_children(self):
        yield from super().iter_children()
        yield from self.fields
    # ..................................................................................................................
    # 🚀 Жизненный цикл
    # ..................................................................................................................
    def init_parts(self):
        for field in self.fields:
            field.init()
    # ---
    def process_parts(self):
        for field in self.fields:
            field.process()
    # ..................................................................................................................
    # 🎨 Рендеринг
    # ..................................................................................................................
    def display(self, ctx: TRenderContext):
        if not self.visible:
            return
        super().display(ctx)
        table_tag = THtmlTag("table", {"id": self.id, "class": self.get_css_class_string()})
        table_tag.open(ctx)
        self.display_content(ctx)
        table_tag.close(ctx)
        ctx.inline_java_script(self.get_inline_java_script())
    # ---
    def display_content(self, ctx: TRenderContext):
        # нечётность считается только по реально показанным полям
        count = 1
        for field in self.fields:
            sub = ctx.child()
            field.display(sub, self.data, count % 2 == 1)
            content = sub.html()
            if content:
                ctx.text(content)
                count += 1
    # ---
    def get_html_head_entry_set(self) -> THtmlHeadEntrySet:
        entries = super().get_html_head_entry_set()
        for field in self.fields:
            entries.add_entry_set(field.get_html_head_entry_set())
        return entries
    # ---
    def get_inline_java_script(self) -> str:
        scripts = [field.get_renderer_inline_java_script() for field in self.fields]
        return "\n".join(s for s in scripts if s)
    # ---
    def get_css_class_names(self) -> list[str]:
        return [zp_class("details", "view")] + super().get_css_class_names()
    # ..................................................................................................................
    # ♻️ Копирование
    # ..................................................................................................................
    def _copy_into(self, clone: "TDetailsView", id_suffix: str):
        super()._copy_into(clone, id_suffix)
        clone.selections = {}
        clone.selectors = {}
        clone.fields = []
        clone.fields_by_id = {}
        for field in self.fields:
            field_copy = field.copy(id_suffix)
            field_copy.Owner = clone
            clone.fields.append(field_copy)
            if field_copy.id is not None:
                clone.fields_by_id[field_copy.id] = field_copy
# 📁🌄 zp_view.py 🜂 The End — See You Next Session 2025
