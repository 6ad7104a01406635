"""Tests for tags, render context and head entries."""

from zp_tag import (
    CONTENT_XML,
    HEAD_COMMENT,
    HEAD_SCRIPT,
    HEAD_STYLE,
    THtmlHeadEntry,
    THtmlHeadEntrySet,
    THtmlTag,
    TRenderContext,
    minimize_entities,
)


class TestMinimizeEntities:
    """Test entity escaping."""

    def test_escapes_markup(self):
        """Markup characters are escaped."""
        assert minimize_entities('<a href="x">') == "&lt;a href=&quot;x&quot;&gt;"

    def test_keeps_existing_entities(self):
        """Ready entities are not escaped twice."""
        assert minimize_entities("&amp; & &#160; &nbsp;") == "&amp; &amp; &#160; &nbsp;"

    def test_none_is_empty(self):
        """None renders as an empty string."""
        assert minimize_entities(None) == ""


class TestHtmlTag:
    """Test explicit-attribute tags."""

    def test_none_attributes_skipped(self):
        """Unset attributes are omitted and empty tags self-close."""
        tag = THtmlTag("input", {"type": "text", "value": None})
        assert tag.to_string() == '<input type="text" />'

    def test_attribute_values_escaped(self):
        """Attribute values are entity-escaped."""
        tag = THtmlTag("span", {"title": 'say "hi"'})
        assert 'title="say &quot;hi&quot;"' in tag.to_string()

    def test_boolean_attributes(self):
        """True renders the attribute name, False drops it."""
        tag = THtmlTag("input", {"checked": True, "disabled": False})
        assert tag.to_string() == '<input checked="checked" />'

    def test_plain_content_escaped(self):
        """text/plain content is escaped."""
        tag = THtmlTag("b")
        tag.set_content("a < b")
        assert tag.to_string() == "<b>a &lt; b</b>"

    def test_xml_content_verbatim(self):
        """text/xml content is written as is."""
        tag = THtmlTag("b")
        tag.set_content("<i>x</i>", CONTENT_XML)
        assert str(tag) == "<b><i>x</i></b>"

    def test_mapping_access(self):
        """Attributes behave like a mapping."""
        tag = THtmlTag("div")
        tag["class"] = "box"
        assert "class" in tag
        assert tag.get("id", "none") == "none"
        del tag["class"]
        assert "class" not in tag

    def test_open_close_wrap_children(self, ctx):
        """open() and close() frame other output."""
        tag = THtmlTag("ul", {"class": "list"})
        tag.open(ctx)
        ctx.text("<li>x</li>")
        tag.close(ctx)
        assert ctx.html() == '<ul class="list"><li>x</li></ul>'


class TestRenderContext:
    """Test the render sink."""

    def test_once_per_pass(self, ctx):
        """A marker is granted only once."""
        assert ctx.once("m") is True
        assert ctx.once("m") is False
        assert ctx.was_emitted("m")

    def test_child_shares_flags_not_canvas(self, ctx):
        """A child buffer shares markers and head entries."""
        ctx.once("m")
        sub = ctx.child()
        sub.text("x")
        assert sub.once("m") is False
        assert sub.head is ctx.head
        assert ctx.html() == ""
        assert sub.html() == "x"

    def test_new_pass_resets_flags(self):
        """Separate passes do not share markers."""
        TRenderContext().once("m")
        assert TRenderContext().once("m") is True

    def test_inline_script_skips_empty(self, ctx):
        """Empty scripts produce no markup."""
        ctx.inline_java_script("")
        ctx.inline_java_script(None)
        assert ctx.html() == ""
        ctx.inline_java_script("var a = 1;")
        assert "var a = 1;" in ctx.html()
        assert ctx.html().startswith('<script type="text/javascript">')


class TestHeadEntrySet:
    """Test head entry collection."""

    def test_deduplicated_by_uri(self):
        """The same entry is stored once."""
        entries = THtmlHeadEntrySet()
        entries.add_entry(THtmlHeadEntry("a.js", HEAD_SCRIPT))
        entries.add_entry(THtmlHeadEntry("a.js", HEAD_SCRIPT))
        entries.add_entry(THtmlHeadEntry("a.css", HEAD_STYLE))
        assert len(entries) == 2
        assert "a.css" in entries
        assert [e.uri for e in entries.get_by_type(HEAD_SCRIPT)] == ["a.js"]

    def test_styles_before_scripts_before_comments(self, ctx):
        """Display orders entries by kind."""
        entries = THtmlHeadEntrySet([
            THtmlHeadEntry("note", HEAD_COMMENT),
            THtmlHeadEntry("a.js", HEAD_SCRIPT),
            THtmlHeadEntry("a.css", HEAD_STYLE),
        ])
        entries.display(ctx, "/static/")
        html = ctx.html()
        assert html.index("/static/a.css") < html.index("/static/a.js") < html.index("<!-- note -->")

    def test_add_entry_set_merges(self):
        """Sets merge without duplicates."""
        first = THtmlHeadEntrySet([THtmlHeadEntry("a.js")])
        second = THtmlHeadEntrySet([THtmlHeadEntry("a.js"), THtmlHeadEntry("b.js")])
        first.add_entry_set(second)
        assert [e.uri for e in first] == ["a.js", "b.js"]
