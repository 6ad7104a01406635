"""Tests for containers, frames, form fields and forms."""

import pytest

from zp_sys import EConfigurationError, EInvalidClassError, ENotFoundError, EWidgetNotFoundError, EZapError
from zp_request import TRequest
from zp_widget import TWidget
from zp_container import TContainer, TForm, TFormField, TFrame
from zp_ctrl_atom import TCheckbox, TEntry


class TestContainer:
    """Test child management."""

    def test_add_and_lookup(self):
        """Children are ordered and indexed by id."""
        root = TContainer()
        first = root.add(TWidget("a"))
        second = root.pack_start(TWidget("b"))
        assert root.get_children() == [second, first]
        assert root.get_child("a") is first
        assert root.has_child("b")

    def test_missing_child(self):
        """Unknown child ids raise."""
        with pytest.raises(EWidgetNotFoundError):
            TContainer().get_child("nope")

    def test_owned_widget_rejected(self):
        """A widget has at most one parent."""
        first = TContainer()
        second = TContainer()
        widget = first.add(TWidget())
        with pytest.raises(EConfigurationError):
            second.add(widget)

    def test_add_child_type_check(self):
        """Only widgets can be nested."""
        with pytest.raises(EInvalidClassError):
            TContainer().add_child("text")

    def test_remove(self):
        """remove() detaches the child."""
        root = TContainer()
        widget = root.add(TWidget("a"))
        assert root.remove(widget) is widget
        assert widget.Owner is None
        assert not root.has_child("a")
        with pytest.raises(ENotFoundError):
            root.remove(widget)

    def test_lifecycle_reaches_children(self):
        """init and process walk the children."""
        root = TContainer()
        widget = root.add(TWidget())
        root.process()
        assert widget.is_initialized()
        assert widget.is_processed()
        assert root.is_processed()

    def test_copy_is_deep(self):
        """A copy has its own children."""
        root = TContainer("root")
        root.add(TWidget("a"))
        clone = root.copy("_2")
        assert clone.get_child("a_2").Owner is clone
        assert root.get_child("a").Owner is root


class TestFrame:
    """Test titled frames."""

    def test_title_before_content(self, ctx):
        """The header precedes the contents."""
        frame = TFrame("box", "Outer")
        frame.add(TWidget())
        frame.display(ctx)
        html = ctx.html()
        assert '<h2 class="zap-frame-title">Outer</h2>' in html
        assert html.index("zap-frame-title") < html.index("zap-frame-contents")

    def test_nested_header_levels(self, ctx):
        """Each nested frame drops one header level."""
        outer = TFrame("outer", "Outer")
        inner = TFrame("inner", "Inner")
        outer.add(inner)
        outer.display(ctx)
        assert "<h3" in ctx.html()
        assert inner.get_header_level() == 3

    def test_subtitle(self):
        """Titles join with the separator."""
        frame = TFrame(title="Account")
        frame.subtitle = "Details"
        assert frame.get_title() == "Account: Details"


class TestFormField:
    """Test form field rendering."""

    def test_display_order(self, ctx, submitted, form_with):
        """Title, content, messages and notes appear in order."""
        entry = TEntry("name")
        entry.required = True
        form = form_with(submitted("f", {"name": ""}))
        field = form.add_with_field(entry, "Name")
        field.note = "Your full name"
        form.process()
        form.display(ctx)
        html = ctx.html()
        assert field.required
        assert html.index("<label") < html.index('<input type="text"')
        assert html.index('<input type="text"') < html.index("zap-form-field-messages")
        assert html.index("zap-form-field-messages") < html.index("Your full name")
        assert "The <strong>Name</strong> field is required." in html

    def test_checkbox_field_reverses_title(self):
        """Checkbox fields put the title after the control."""
        field = TFormField(title="Agree")
        field.add(TCheckbox("agree"))
        assert field.title_reversed is True
        assert field.show_colon is False
        assert "zap-form-field-checkbox" in field.get_css_class_names()

    def test_empty_field_not_displayed(self, ctx):
        """A field without children renders nothing."""
        TFormField(title="Empty").display(ctx)
        assert ctx.html() == ""


class TestForm:
    """Test submission detection and hidden fields."""

    def test_not_submitted_skips_children(self, form_with):
        """Children are not processed for another form."""
        entry = TEntry("name")
        form = form_with(TRequest(post={TForm.PROCESS_FIELD: "other", "name": "x"}), entry)
        form.process()
        assert not form.is_submitted()
        assert not entry.is_processed()
        assert entry.value is None

    def test_submitted_processes_children(self, submitted, form_with):
        """A submitted form processes its children."""
        entry = TEntry("name")
        form = form_with(submitted("f", {"name": "Bob"}), entry)
        form.process()
        assert form.is_submitted()
        assert entry.value == "Bob"

    def test_hidden_fields_round_trip(self, submitted, form_with):
        """Signed hidden values come back as they were."""
        form = form_with(submitted("f", hidden={"token": {"step": 2, "ids": [1, 2]}}))
        form.process()
        assert form.get_hidden_field("token") == {"step": 2, "ids": [1, 2]}

    def test_tampered_hidden_field(self, submitted, form_with):
        """A bad signature is rejected."""
        request = submitted("f", hidden={"token": 1})
        request.post[TForm.SERIALIZED_PREFIX + "token"] = "forged|1"
        form = form_with(request)
        with pytest.raises(EZapError):
            form.process()

    def test_display_emits_process_field(self, ctx, form_with):
        """Rendering a form writes its hidden fields."""
        form = form_with(None, TEntry("name"))
        form.add_hidden_field("step", 3)
        form.display(ctx)
        html = ctx.html()
        assert html.startswith('<form id="f" method="post"')
        assert 'name="_zap_form_process" value="f"' in html
        assert 'name="step" value="3"' in html
        assert 'name="_zap_form_serialized_step"' in html
        assert "new ZapForm('f');" in html

    def test_invalid_method(self):
        """Only post and get are accepted."""
        with pytest.raises(EConfigurationError):
            TForm("f").method = "put"

    def test_get_method_reads_query(self):
        """GET forms read the query string."""
        form = TForm("f", TRequest(url="/?_zap_form_process=f&q=1"))
        form.method = TForm.METHOD_GET
        assert form.is_submitted()
        assert form.get_form_data()["q"] == "1"

    def test_input_outside_form(self):
        """Input controls need a form ancestor."""
        root = TContainer()
        entry = root.add(TEntry("e"))
        with pytest.raises(EConfigurationError, match="UI-Object path: TContainer/TEntry"):
            entry.get_form()
