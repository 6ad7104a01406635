"""Tests for options and the option arena."""

import pytest

from zp_sys import ENotFoundError
from zp_option import DIVIDER_TITLE, TFlydownBlankOption, TFlydownDivider, TOption, TOptionControl


@pytest.fixture
def control():
    """Option control with three options, two sharing a value."""
    control = TOptionControl("o")
    control.add_option("nz", "New Zealand")
    control.add_option("ca", "Canada", metadata={"classes": ["big", "red"]})
    control.add_option("nz", "Aotearoa")
    return control


class TestOptionVariants:
    """Test option kinds."""

    def test_divider_not_selectable(self):
        """Dividers cannot be chosen."""
        divider = TFlydownDivider()
        assert divider.title == DIVIDER_TITLE
        assert not divider.is_selectable()

    def test_blank_option(self):
        """Blank options are selectable with an empty title."""
        blank = TFlydownBlankOption()
        assert blank.title == ""
        assert blank.is_selectable()


class TestOptionControl:
    """Test adding, removing and metadata."""

    def test_add_returns_option(self, control):
        """add_option() creates options in order."""
        assert [o.title for o in control.get_options()] == ["New Zealand", "Canada", "Aotearoa"]

    def test_add_existing_option_with_metadata(self):
        """A TOption can be added with a metadata mapping."""
        control = TOptionControl()
        option = control.add_option(TOption("x", "X"), {"classes": "wide"})
        assert control.get_option_metadata(option, "classes") == "wide"
        assert control.get_option_classes(option) == "wide"

    def test_metadata_is_per_option(self, control):
        """Equal values keep separate metadata."""
        first, _, second = control.get_options()
        control.add_option_metadata(first, "flag", 1)
        assert control.get_option_metadata(first) == {"flag": 1}
        assert control.get_option_metadata(second) == {}
        assert control.get_option_metadata(second, "flag") is None

    def test_option_classes(self, control):
        """The classes metadata joins into a class string."""
        canada = control.get_options_by_value("ca")[0]
        assert control.get_option_classes(canada) == "big red"

    def test_remove_option(self, control):
        """Removal is by identity and drops metadata."""
        canada = control.get_options_by_value("ca")[0]
        assert control.remove_option(canada) is canada
        assert control.remove_option(canada) is None
        assert control.get_option_metadata(canada) == {}

    def test_remove_options_by_value(self, control):
        """All options with a value are removed."""
        removed = control.remove_options_by_value("nz")
        assert [o.title for o in removed] == ["New Zealand", "Aotearoa"]
        assert [o.value for o in control.get_options()] == ["ca"]

    def test_slots_are_stable(self, control):
        """Slots survive removals and are not reused."""
        canada = control.get_options_by_value("ca")[0]
        slot = control.get_option_slot(canada)
        control.remove_options_by_value("nz")
        new = control.add_option("us", "United States")
        assert control.get_option(slot) is canada
        assert control.get_option_slot(new) > slot

    def test_missing_slot(self, control):
        """Unknown slots raise."""
        with pytest.raises(ENotFoundError):
            control.get_option(99)

    def test_metadata_for_foreign_option(self, control):
        """Metadata cannot be attached to a foreign option."""
        with pytest.raises(ENotFoundError):
            control.add_option_metadata(TOption("x", "X"), "k", 1)

    def test_duplicate_values(self, control):
        """Duplicates are reported, dividers ignored."""
        assert control.has_duplicate_values()
        other = TOptionControl()
        other.add_option("a", "A")
        other.add_divider()
        other.add_divider()
        assert not other.has_duplicate_values()
        assert len(other.get_options(only_selectable=True)) == 1

    def test_options_by_array(self):
        """A mapping adds value/title pairs in order."""
        control = TOptionControl()
        control.add_options_by_array({1: "One", 2: "Two"})
        assert [(o.value, o.title) for o in control.options] == [(1, "One"), (2, "Two")]

    def test_copy_isolates_metadata(self, control):
        """A copy has its own arena and metadata."""
        canada = control.get_options_by_value("ca")[0]
        clone = control.copy()
        clone.add_option_metadata(canada, "classes", ["small"])
        clone.add_option("us", "United States")
        assert control.get_option_classes(canada) == "big red"
        assert len(control.get_options()) == 3
