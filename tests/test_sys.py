"""Tests for configuration, error taxonomy and the UI object base."""

import pytest

from zp_sys import (
    EConfigurationError,
    EDuplicateIdError,
    EInvalidClassError,
    EInvalidPropertyError,
    ENotFoundError,
    EUndefinedStockTypeError,
    EWidgetNotFoundError,
    EZapError,
    TObject,
    TUIObject,
    _key,
    key_bool,
    key_int,
    set_translator,
    translate,
    zp_class,
    zp_join_classes,
    zp_script,
)
from zp_container import TContainer
from zp_ctrl_atom import TEntry


class TestEnvConfig:
    """Test env-mapping configuration helpers."""

    def test_key_writes_default_back(self, isolated_env):
        """A missing key returns the default and stores it."""
        assert _key("ZP_SAMPLE", "abc") == "abc"
        assert isolated_env["ZP_SAMPLE"] == "abc"

    def test_key_prefers_existing_value(self, isolated_env):
        """An existing non-empty value wins over the default."""
        isolated_env["ZP_SAMPLE"] = "x"
        assert _key("ZP_SAMPLE", "abc") == "x"

    def test_key_without_name(self):
        """An empty key name yields None."""
        assert _key("", "abc") is None

    def test_key_int_falls_back_on_garbage(self, isolated_env):
        """Unparsable integers fall back to the default."""
        isolated_env["ZP_COUNT"] = "many"
        assert key_int("ZP_COUNT", 7) == 7
        isolated_env["ZP_COUNT"] = "12"
        assert key_int("ZP_COUNT", 7) == 12

    def test_key_bool_accepts_common_spellings(self, isolated_env):
        """yes / on / true / 1 are truthy."""
        for raw in ("1", "true", "Yes", "on"):
            isolated_env["ZP_FLAG"] = raw
            assert key_bool("ZP_FLAG") is True
        isolated_env["ZP_FLAG"] = "off"
        assert key_bool("ZP_FLAG") is False


class TestCssHelpers:
    """Test CSS and script naming helpers."""

    def test_zp_class_joins_parts(self):
        """Parts are joined with the prefix."""
        assert zp_class("check", "all") == "zap-check-all"

    def test_join_classes_skips_empty(self):
        """None and empty names are dropped."""
        assert zp_join_classes(zp_class("a"), None, "", "b") == "zap-a b"

    def test_script_path(self):
        """Script names map into the package javascript folder."""
        assert zp_script("check-all") == "packages/zap/javascript/zap-check-all.js"


class TestTranslate:
    """Test the translation hook."""

    def test_identity_by_default(self):
        """Without a translator text is returned unchanged."""
        assert translate("Submit") == "Submit"

    def test_custom_translator(self):
        """An installed translator is applied."""
        set_translator(str.upper)
        assert translate("Submit") == "SUBMIT"


class TestErrors:
    """Test the error taxonomy and fail()."""

    def test_hierarchy(self):
        """Specific errors keep their standard-library relatives."""
        assert issubclass(EDuplicateIdError, EConfigurationError)
        assert issubclass(EInvalidClassError, TypeError)
        assert issubclass(EInvalidPropertyError, AttributeError)
        assert issubclass(EUndefinedStockTypeError, EConfigurationError)
        assert issubclass(EWidgetNotFoundError, ENotFoundError)
        assert issubclass(ENotFoundError, LookupError)
        assert issubclass(EConfigurationError, EZapError)

    def test_fail_raises_with_location(self):
        """fail() prefixes the message with class and function."""
        with pytest.raises(EConfigurationError, match=r"TObject\.build\(\): boom"):
            TObject().fail("build", "boom")

    def test_fail_uses_given_type(self):
        """fail() raises the requested exception type."""
        with pytest.raises(ENotFoundError):
            TObject().fail("find", "missing", ENotFoundError)

    def test_fail_writes_trace_file(self, isolated_env, tmp_path):
        """ZP_FAIL_LOG receives a stack excerpt."""
        path = tmp_path / "logs" / "fail.log"
        isolated_env["ZP_FAIL_LOG"] = str(path)
        with pytest.raises(EConfigurationError):
            TObject().fail("build", "boom")
        text = path.read_text(encoding="utf-8")
        assert "TObject.build() FAILED" in text
        assert "boom" in text


class TestOwnership:
    """Test owner links and ancestry."""

    def test_cycle_rejected(self):
        """An object cannot be owned by its own descendant."""
        parent = TUIObject()
        child = TUIObject()
        child.Owner = parent
        with pytest.raises(EConfigurationError):
            parent.Owner = child

    def test_self_ownership_rejected(self):
        """An object cannot own itself."""
        node = TUIObject()
        with pytest.raises(EConfigurationError):
            node.Owner = node

    def test_visibility_follows_parent(self):
        """A hidden parent hides its children."""
        parent = TUIObject()
        child = TUIObject()
        child.Owner = parent
        assert child.is_visible()
        parent.visible = False
        assert not child.is_visible()

    def test_first_ancestor_by_class_and_predicate(self):
        """Ancestors are matched by class or by predicate."""
        root = TContainer("root")
        middle = TContainer("middle")
        entry = TEntry("e")
        root.add(middle)
        middle.add(entry)
        assert entry.get_first_ancestor(TContainer) is middle
        assert entry.get_first_ancestor(lambda node: node.id == "root") is root
        assert entry.get_first_ancestor(TEntry) is None
        assert entry.get_root() is root


class TestUniqueIds:
    """Test automatic id generation."""

    def test_ids_numbered_per_class(self):
        """Auto ids use the class name without the T prefix."""
        root = TContainer()
        first = TEntry()
        second = TEntry()
        root.add(first)
        root.add(second)
        root.init()
        assert first.id == "Entry1"
        assert second.id == "Entry2"

    def test_taken_ids_are_skipped(self):
        """An explicit id is never handed out again."""
        root = TContainer()
        root.add(TEntry("Entry1"))
        auto = TEntry()
        root.add(auto)
        root.init()
        assert auto.id == "Entry2"

    def test_tree_ids_unique_after_init(self):
        """After init() no two nodes of the tree share an id."""
        root = TContainer()
        for _ in range(3):
            inner = TContainer()
            inner.add(TEntry())
            root.add(inner)
        root.add(TEntry("Entry2"))
        root.init()
        ids = [node.id for node in root.iter_tree() if node.id is not None]
        assert len(ids) == len(set(ids))

    def test_duplicate_explicit_ids_rejected(self):
        """Two explicit equal ids fail the root init."""
        root = TContainer()
        root.add(TEntry("same"))
        inner = TContainer()
        inner.add(TEntry("same"))
        root.add(inner)
        with pytest.raises(EDuplicateIdError):
            root.init()


class TestClassesAndCopy:
    """Test CSS classes and structural copies."""

    def test_add_class_is_idempotent(self):
        """Classes keep order and never repeat."""
        node = TUIObject()
        node.add_class("a b", "a", None)
        assert node.classes == ["a", "b"]
        node.remove_class("a")
        assert node.get_css_class_string() == "b"

    def test_empty_class_string_is_none(self):
        """No classes renders no class attribute."""
        assert TUIObject().get_css_class_string() is None

    def test_copy_renames_and_detaches(self):
        """A copy gets the suffix, its own classes and no owner."""
        parent = TUIObject()
        node = TUIObject()
        node.id = "x"
        node.add_class("a")
        node.Owner = parent
        clone = node.copy("_2")
        clone.add_class("b")
        assert clone.id == "x_2"
        assert clone.Owner is None
        assert node.classes == ["a"]
