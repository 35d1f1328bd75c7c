"""Test Markdown rendering."""

from __future__ import annotations

from macrodoc import convert
from macrodoc.links import TemplatedLinkProvider

LINKS = TemplatedLinkProvider(plugin_link_template="https://docs/{plugin_fqcn_slashes}.html")


def md(source, link_provider=None):
    output, _ = convert(source, "md", link_provider=link_provider)
    return output


class TestInline:
    def test_italic(self):
        assert md("Hello I(world)!") == "Hello <em>world</em>\\!"

    def test_bold(self):
        assert md("B(a_b)") == "<b>a\\_b</b>"

    def test_code(self):
        assert md("C(x)") == "<code>x</code>"

    def test_env(self):
        assert md("E(HOME)") == "<code>HOME</code>"

    def test_text_escaped(self):
        assert md("foo_bar.") == "foo\\_bar\\."

    def test_cross_ref(self):
        assert md("R(the guide, guide_label)") == "the guide"

    def test_horizontal_rule(self):
        assert md("HORIZONTALLINE") == "<hr>"


class TestLinks:
    def test_url(self):
        assert md("U(https://example.com)") == (
            "[https\\://example\\.com](https\\://example\\.com)"
        )

    def test_link(self):
        assert md("L(text, https://x.org)") == "[text](https\\://x\\.org)"

    def test_module(self):
        assert md("M(ns.coll.mod)") == "ns\\.coll\\.mod"

    def test_module_link(self):
        assert md("M(ns.coll.mod)", LINKS) == (
            "[ns\\.coll\\.mod](https\\://docs/ns/coll/mod\\.html)"
        )


class TestOptionLike:
    def test_bare(self):
        assert md("O(foo)") == "<code><strong>foo</strong></code>"

    def test_value(self):
        assert md("O(foo=bar)") == "<code>foo\\=bar</code>"

    def test_return_value(self):
        assert md("RV(a_b)") == "<code>a\\_b</code>"
