"""Tests for the concrete cell renderers."""

import pytest

from zp_sys import EConfigurationError, EInvalidPropertyError, EUndefinedStockTypeError
from zp_cell import TCellRendererContainer
from zp_cell_atom import TBooleanCellRenderer, TCheckboxCellRenderer, TRadioButtonCellRenderer, TTextCellRenderer


class TestTextCellRenderer:
    """Test template formatting."""

    def test_plain_text(self, ctx):
        """Without a value the text is printed as is."""
        renderer = TTextCellRenderer()
        renderer.text = "50% off"
        renderer.render(ctx)
        assert ctx.html() == "50% off"

    def test_scalar_value(self, ctx):
        """A scalar fills one placeholder."""
        renderer = TTextCellRenderer()
        renderer.text = "%s items"
        renderer.value = 3
        renderer.render(ctx)
        assert ctx.html() == "3 items"

    def test_list_value(self, ctx):
        """A list fills positional placeholders."""
        renderer = TTextCellRenderer()
        renderer.text = "%s of %s"
        renderer.value = [1, 2]
        renderer.render(ctx)
        assert ctx.html() == "1 of 2"

    def test_mapping_value(self, ctx):
        """A mapping fills named placeholders."""
        renderer = TTextCellRenderer()
        renderer.text = "<b>%(name)s</b>"
        renderer.value = {"name": "Bob"}
        renderer.content_type = "text/xml"
        renderer.render(ctx)
        assert ctx.html() == "<b>Bob</b>"

    def test_hidden(self, ctx):
        """Invisible renderers draw nothing."""
        renderer = TTextCellRenderer()
        renderer.text = "x"
        renderer.visible = False
        renderer.render(ctx)
        assert ctx.html() == ""
        assert renderer.render_count == 0


class TestBooleanCellRenderer:
    """Test boolean stock rendering."""

    def test_check_only_default(self, ctx):
        """True shows the check image by default."""
        renderer = TBooleanCellRenderer()
        renderer.value = True
        renderer.render(ctx)
        assert ctx.html() == '<img src="packages/zap/images/check.png" alt="Yes" height="14" width="14" />'
        assert renderer.get_data_specific_css_class_names() == ["zap-boolean-cell-renderer-checked"]

    def test_check_only_false(self, ctx):
        """False shows a non-breaking space."""
        renderer = TBooleanCellRenderer()
        renderer.value = False
        renderer.render(ctx)
        assert ctx.html() == "&#160;"
        assert renderer.get_data_specific_css_class_names() == []

    def test_yes_no(self, ctx):
        """The yes-no stock prints words."""
        renderer = TBooleanCellRenderer()
        renderer.stock_id = "yes-no"
        renderer.value = 1
        renderer.render(ctx)
        renderer.value = 0
        renderer.render(ctx)
        assert ctx.html() == "YesNo"

    def test_custom_content_kept(self, ctx):
        """Explicit contents are not replaced by the stock."""
        renderer = TBooleanCellRenderer()
        renderer.stock_id = "yes-no"
        renderer.true_content = "On"
        renderer.value = True
        renderer.render(ctx)
        assert ctx.html() == "On"

    def test_unknown_stock(self):
        """Unknown stock ids raise."""
        with pytest.raises(EUndefinedStockTypeError):
            TBooleanCellRenderer().set_from_stock("bogus")


class TestSelectorCellRenderers:
    """Test checkbox and radio renderers outside a view."""

    def test_checkbox_markup(self, ctx):
        """The checkbox input uses name[] and a value-specific id."""
        renderer = TCheckboxCellRenderer()
        renderer.id = "sel"
        renderer.value = 3
        renderer.title = "Pick"
        renderer.render(ctx)
        assert ctx.html() == ('<label for="sel_checkbox_3">'
                              '<input type="checkbox" name="sel[]" id="sel_checkbox_3" value="3" />'
                              'Pick</label>')

    def test_radio_markup(self, ctx):
        """Radio inputs share a plain name."""
        renderer = TRadioButtonCellRenderer()
        renderer.id = "pick"
        renderer.value = "a"
        renderer.parent_sensitive = False
        renderer.render(ctx)
        assert ctx.html() == '<input type="radio" name="pick" id="pick_radio_a" value="a" disabled="disabled" />'

    def test_auto_id(self):
        """init() assigns an id when none is set."""
        container = TCellRendererContainer()
        renderer = container.add_renderer(TCheckboxCellRenderer())
        container.init()
        assert renderer.id == "CheckboxCellRenderer1"
        assert container.get_renderer("CheckboxCellRenderer1") is renderer

    def test_id_is_static(self):
        """The id cannot be data-mapped."""
        container = TCellRendererContainer()
        renderer = container.add_renderer(TCheckboxCellRenderer())
        with pytest.raises(EInvalidPropertyError):
            container.add_mapping_to_renderer(renderer, "row_id", "id")

    def test_process_needs_form(self):
        """Selectors outside a form cannot process."""
        container = TCellRendererContainer()
        renderer = container.add_renderer(TRadioButtonCellRenderer())
        with pytest.raises(EConfigurationError):
            renderer.process()

    def test_selected_values(self):
        """Raw form data is normalised per selector kind."""
        checkbox = TCheckboxCellRenderer()
        radio = TRadioButtonCellRenderer()
        assert checkbox.get_selected_values({"0": "3", "1": "7"}) == ["3", "7"]
        assert checkbox.get_selected_values(None) == []
        assert radio.get_selected_values("5") == ["5"]
        assert radio.get_selected_values("") == []

    def test_no_script_without_view(self):
        """Inline script needs a view."""
        assert TCheckboxCellRenderer().get_inline_java_script() == ""
