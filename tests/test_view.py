"""Tests for view selections, table views and details views."""

import pytest

from zp_sys import (EConfigurationError, EDuplicateIdError, EInvalidClassError, ENotFoundError,
                    EWidgetNotFoundError)
from zp_cell_atom import TCheckboxCellRenderer, TRadioButtonCellRenderer, TTextCellRenderer
from zp_view import TDetailsView, TDetailsViewField, TTableView, TTableViewColumn, TViewSelection

ROWS = [
    {"id": 3, "title": "Apples"},
    {"id": 7, "title": "Pears"},
    {"id": 9, "title": "Plums"},
]


def selector_column(column_id, renderer, selector_id):
    """Column holding a selector renderer bound to the row id."""
    column = TTableViewColumn(column_id)
    renderer.id = selector_id
    column.add_renderer(renderer)
    column.add_mapping_to_renderer(renderer, "id", "value")
    return column


def text_column(column_id="title", title="Title"):
    """Column rendering the row title."""
    column = TTableViewColumn(column_id, title)
    renderer = column.add_renderer(TTextCellRenderer())
    column.add_mapping_to_renderer(renderer, "title", "text")
    return column


@pytest.fixture
def table():
    """Table view with a checkbox selector and a title column."""
    table = TTableView("tv")
    table.append_column(selector_column("select", TCheckboxCellRenderer(), "sel"))
    table.append_column(text_column())
    table.model = ROWS
    return table


def text_field(field_id, title, data_field):
    """Details field rendering one data field as text."""
    field = TDetailsViewField(field_id, title)
    renderer = field.add_renderer(TTextCellRenderer())
    field.add_mapping_to_renderer(renderer, data_field, "text")
    return field


class TestViewSelection:
    """Test selection membership."""

    def test_membership(self):
        """Ids match by value, ignoring str/int differences."""
        selection = TViewSelection(["3", "7"])
        assert 3 in selection
        assert selection.contains("7")
        assert 9 not in selection
        assert len(selection) == selection.count() == 2
        assert list(selection) == ["3", "7"]

    def test_bool_is_not_an_id(self):
        """Booleans do not match numeric ids loosely."""
        assert not TViewSelection(["1"]).contains(True)


class TestTableViewSelection:
    """Test selectors inside a table view."""

    def test_round_trip(self, table, submitted, form_with):
        """Submitted checkbox values become the selector's selection."""
        form_with(submitted("f", {"sel": ["3", "7", "9"]}), table).process()
        assert table.get_selection("sel").selected_items == ["3", "7", "9"]
        assert table.get_selection().selected_items == ["3", "7", "9"]

    def test_empty_submission(self, table, submitted, form_with):
        """Nothing checked replaces the selection with an empty one."""
        table.model = ROWS
        form = form_with(submitted("f"), table)
        form.init()
        table.set_selection(TViewSelection(["3"]), "sel")
        form.process()
        assert len(table.get_selection("sel")) == 0

    def test_not_submitted_keeps_selection(self, table, form_with):
        """Without a submission the selection is untouched."""
        form = form_with(None, table)
        form.init()
        table.set_selection(TViewSelection(["9"]))
        form.process()
        assert table.get_selection().contains(9)

    def test_selected_row_rendered_checked(self, ctx, table, form_with):
        """Rows in the selection render checked inputs."""
        form = form_with(None, table)
        form.init()
        table.set_selection(TViewSelection(["3"]), "sel")
        form.display(ctx)
        html = ctx.html()
        assert 'id="sel_checkbox_3" value="3" checked="checked"' in html
        assert 'id="sel_checkbox_7" value="7" />' in html

    def test_independent_selectors(self, submitted, form_with):
        """Each selector keeps its own selection."""
        table = TTableView("multi")
        table.append_column(selector_column("ca", TCheckboxCellRenderer(), "a"))
        table.append_column(selector_column("cb", TCheckboxCellRenderer(), "b"))
        table.append_column(selector_column("cr", TRadioButtonCellRenderer(), "r"))
        table.model = ROWS
        form_with(submitted("f", {"a": ["3"], "b": ["7", "9"], "r": "9"}), table).process()
        assert table.get_selection("a").selected_items == ["3"]
        assert table.get_selection("b").selected_items == ["7", "9"]
        assert table.get_selection("r").selected_items == ["9"]
        assert [s.id for s in table.get_selectors()] == ["a", "b", "r"]

    def test_table_without_selectors(self):
        """Plain renderers are not registered as selectors."""
        table = TTableView("outer")
        table.append_column(text_column())
        table.init()
        assert table.get_selectors() == []


class TestTableViewSelectionErrors:
    """Test selector resolution failures."""

    def test_no_selectors(self):
        """A view without selectors has no default selection."""
        table = TTableView("t")
        table.append_column(text_column())
        table.init()
        with pytest.raises(EConfigurationError):
            table.get_selection()

    def test_unknown_selector_id(self, table):
        """Unknown selector ids raise."""
        table.init()
        with pytest.raises(ENotFoundError):
            table.get_selection("nope")

    def test_wrong_type(self, table):
        """Selectors must be selector objects or ids."""
        table.init()
        with pytest.raises(EInvalidClassError):
            table.get_selection(42)

    def test_foreign_selector(self, table):
        """A selector of another view is rejected."""
        other = TTableView("other")
        foreign = TCheckboxCellRenderer()
        other.append_column(selector_column("s", foreign, "sel"))
        other.init()
        table.init()
        with pytest.raises(EConfigurationError):
            table.set_selection(TViewSelection(), foreign)


class TestTableViewDisplay:
    """Test table rendering."""

    def test_row_classes(self, ctx, table, form_with):
        """Rows carry odd/first/last classes."""
        form_with(None, table).display(ctx)
        html = ctx.html()
        assert '<table id="tv" class="zap-table-view" cellspacing="0">' in html
        assert '<tr class="odd first">' in html
        assert '<tr class="odd last">' in html
        assert html.count("<tr>") == 2

    def test_header(self, ctx, table, form_with):
        """Column titles fill the header; untitled columns get a blank cell."""
        form_with(None, table).display(ctx)
        html = ctx.html()
        assert "<thead><tr>" in html
        assert 'scope="col">&#160;</th>' in html
        assert 'scope="col">Title</th>' in html

    def test_abbreviated_header(self, ctx):
        """An abbreviation keeps the full title in the abbr element."""
        column = text_column()
        column.abbreviated_title = "T"
        column.display_header(ctx)
        assert ctx.html() == '<abbr title="Title">T</abbr>'

    def test_inline_script(self, ctx, table, form_with):
        """The table and its selectors register their scripts."""
        form_with(None, table).display(ctx)
        html = ctx.html()
        assert "var tv_obj = new ZapTableView('tv');" in html
        assert "var sel = new ZapCheckboxCellRenderer('sel', tv_obj);" in html

    def test_head_entries_after_render(self, ctx, table, form_with):
        """Renderer scripts are requested only once rows rendered."""
        form = form_with(None, table)
        form.init()
        assert "packages/zap/javascript/zap-checkbox-cell-renderer.js" not in table.get_html_head_entry_set()
        form.display(ctx)
        entries = table.get_html_head_entry_set()
        assert "packages/zap/javascript/zap-checkbox-cell-renderer.js" in entries
        assert "packages/zap/javascript/zap-table-view.js" in entries

    def test_no_records(self, ctx):
        """An empty model shows the no-records message."""
        table = TTableView("t")
        table.append_column(text_column())
        table.model = []
        table.display(ctx)
        assert ctx.html() == '<div class="zap-none">&lt;none&gt;</div>'

    def test_no_model(self, ctx):
        """Without a model nothing is rendered."""
        table = TTableView("t")
        table.append_column(text_column())
        table.display(ctx)
        assert ctx.html() == ""

    def test_insensitive_view_disables_inputs(self, ctx, table, form_with):
        """Renderers follow the view's sensitivity."""
        table.sensitive = False
        form_with(None, table).display(ctx)
        assert 'value="3" disabled="disabled"' in ctx.html()

    def test_multiple_renderers_wrapped(self, ctx):
        """Several renderers in one column are wrapped in divs."""
        table = TTableView("t")
        column = text_column()
        second = column.add_renderer(TTextCellRenderer())
        second.text = "!"
        table.append_column(column)
        table.model = ROWS[:1]
        table.display(ctx)
        html = ctx.html()
        assert html.count('<div class="zap-table-view-column-renderer zap-text-cell-renderer">') == 2
        assert "Apples</div> <div" in html


class TestTableViewColumns:
    """Test column management."""

    def test_duplicate_column(self, table):
        """Column ids are unique within a table."""
        with pytest.raises(EDuplicateIdError):
            table.append_column(TTableViewColumn("title"))

    def test_missing_column(self, table):
        """Unknown column ids raise."""
        assert table.get_column("title").title == "Title"
        assert table.has_column("select")
        with pytest.raises(EWidgetNotFoundError):
            table.get_column("nope")

    def test_add_child_type_check(self, table):
        """Only columns may be nested."""
        with pytest.raises(EInvalidClassError):
            table.add_child(TTextCellRenderer())

    def test_auto_id(self):
        """Columns without an id get one that does not become a class."""
        table = TTableView("t")
        column = table.append_column(TTableViewColumn())
        column.add_renderer(TTextCellRenderer())
        table.init()
        assert column.id == "TableViewColumn1"
        assert column.has_auto_id
        assert table.get_column("TableViewColumn1") is column
        assert "TableViewColumn1" not in column.get_css_class_names()

    def test_explicit_id_css(self):
        """Explicit ids become hyphenated class names."""
        column = TTableViewColumn("unit_price")
        column.add_renderer(TTextCellRenderer())
        assert column.get_css_class_names() == ["unit-price", "zap-text-cell-renderer"]

    def test_column_without_renderer(self, ctx):
        """Rendering a column without renderers fails."""
        table = TTableView("t")
        table.append_column(TTableViewColumn("empty", "Empty"))
        table.model = ROWS
        with pytest.raises(EConfigurationError):
            table.display(ctx)

    def test_copy_with_suffix(self, table):
        """A copy gets suffixed ids and its own columns."""
        clone = table.copy("_2")
        assert clone.id == "tv_2"
        column = clone.get_column("select_2")
        assert column.Owner is clone
        assert column.get_first_renderer().id == "sel_2"
        assert table.get_column("select").Owner is table


class TestDetailsView:
    """Test details views."""

    @pytest.fixture
    def details(self):
        """Details view over one record."""
        details = TDetailsView("dv")
        details.append_field(text_field("name", "Name", "name"))
        details.append_field(text_field("city", "City", "city"))
        details.data = {"name": "Bob", "city": "Oslo"}
        return details

    def test_display(self, ctx, details):
        """Each field renders a header and its value."""
        details.display(ctx)
        html = ctx.html()
        assert html.startswith('<table id="dv" class="zap-details-view">')
        assert ('<tr id="name" class="zap-details-view-field odd zap-text-cell-renderer">'
                '<th scope="row">Name:</th><td class="zap-text-cell-renderer">Bob</td></tr>') in html
        assert '<tr id="city" class="zap-details-view-field zap-text-cell-renderer">' in html

    def test_odd_skips_hidden_fields(self, ctx, details):
        """Hidden fields do not advance the odd/even count."""
        details.append_field(text_field("zip", "Zip", "city"))
        details.get_field("city").visible = False
        details.display(ctx)
        html = ctx.html()
        assert '<tr id="zip" class="zap-details-view-field zap-text-cell-renderer">' in html
        assert 'id="city"' not in html

    def test_blank_title(self, ctx):
        """An empty title renders a non-breaking space."""
        details = TDetailsView("dv")
        details.append_field(text_field("x", "", "name"))
        details.data = {"name": "Bob"}
        details.display(ctx)
        assert '<th scope="row">&#160;</th>' in ctx.html()

    def test_insert_positions(self, details):
        """Fields can be inserted around a reference field."""
        name = details.get_field("name")
        details.insert_field_before(text_field("first", "First", "name"), name)
        details.insert_field_after(text_field("second", "Second", "name"), name)
        assert [f.id for f in details.get_fields()] == ["first", "name", "second", "city"]
        assert details.get_field_count() == 4

    def test_insert_errors(self, details):
        """Duplicates and unknown reference fields raise."""
        with pytest.raises(EDuplicateIdError):
            details.append_field(TDetailsViewField("name"))
        with pytest.raises(EWidgetNotFoundError):
            details.insert_field_before(TDetailsViewField("n2"), TDetailsViewField("ghost"))
        with pytest.raises(EWidgetNotFoundError):
            details.get_field("ghost")
        with pytest.raises(EInvalidClassError):
            details.add_child(TTableViewColumn())

    def test_field_without_renderer(self, ctx):
        """A field needs at least one renderer to display."""
        details = TDetailsView("dv")
        details.append_field(TDetailsViewField("empty", "Empty"))
        details.data = {}
        with pytest.raises(EConfigurationError):
            details.display(ctx)

    def test_copy(self, details):
        """Copies own their fields."""
        clone = details.copy("_2")
        assert clone.has_field("name_2")
        assert clone.get_field("name_2").Owner is clone
        assert not details.has_field("name_2")
