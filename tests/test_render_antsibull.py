"""Test the antsibull-flavoured RST and HTML renderers."""

from __future__ import annotations

from macrodoc import convert
from macrodoc.links import TemplatedLinkProvider
from macrodoc.options import ParseContext
from macrodoc.parser import parse_paragraphs
from macrodoc.references import PluginIdentifier
from macrodoc.render import render_paragraphs

MODULE_CONTEXT = ParseContext(current_plugin=PluginIdentifier("ns.coll.mod", "module"))

LINKS = TemplatedLinkProvider(
    plugin_link_template="https://docs/{plugin_fqcn_slashes}/{plugin_type}.html",
    option_like_link_template=(
        "https://docs/{plugin_fqcn_slashes}_{plugin_type}.html#{what}-{name_dots}"
    ),
)


def rst(source, context=None):
    output, _ = convert(source, "antsibull-rst", context=context)
    return output


def html(source, context=None, link_provider=None):
    output, _ = convert(source, "antsibull-html", context=context, link_provider=link_provider)
    return output


class TestAntsibullRst:
    def test_value(self):
        assert rst("V(x)") == "\\ :ansval:`x`\\ "

    def test_option_without_plugin(self):
        assert rst("O(foo=bar)") == "\\ :ansopt:`foo=bar`\\ "

    def test_option_with_context_plugin(self):
        assert rst("O(foo)", MODULE_CONTEXT) == "\\ :ansopt:`ns.coll.mod#module:foo`\\ "

    def test_return_value_with_role(self):
        assert rst("RV(ns.coll.r#role:main:a_b)") == (
            "\\ :ansretval:`ns.coll.r#role:main:a\\_b`\\ "
        )

    def test_horizontal_rule(self):
        assert rst("HORIZONTALLINE") == "\n\n.. raw:: html\n\n  <hr>\n\n"

    def test_shared_with_plain_rst(self):
        assert rst("C(x) E(HOME)") == "\\ :literal:`x`\\  \\ :envvar:`HOME`\\ "
        assert rst("M(ns.coll.mod)") == (
            "\\ :ref:`ns.coll.mod <ansible_collections.ns.coll.mod_module>`\\ "
        )

    def test_paragraphs(self):
        docs = [doc for doc, _ in parse_paragraphs(["a", ""])]
        assert render_paragraphs(docs, "antsibull-rst") == "a\n\n\\ "


class TestAntsibullHtml:
    def test_code(self):
        assert html("C(x)") == "<code class='docutils literal notranslate'>x</code>"

    def test_value(self):
        assert html("V(a<b)") == '<code class="ansible-value literal notranslate">a&lt;b</code>'

    def test_env(self):
        assert html("E(HOME)") == (
            '<code class="xref std std-envvar literal notranslate">HOME</code>'
        )

    def test_cross_ref(self):
        assert html("R(text, label)") == "<span class='module'>text</span>"

    def test_module(self):
        assert html("M(ns.coll.mod)") == "<span class='module'>ns.coll.mod</span>"

    def test_module_link(self):
        assert html("M(ns.coll.mod)", link_provider=LINKS) == (
            "<a href='https://docs/ns/coll/mod/module.html' class='module'>ns.coll.mod</a>"
        )

    def test_horizontal_rule(self):
        assert html("HORIZONTALLINE") == "<hr/>"

    def test_bare_option(self):
        assert html("O(foo)") == (
            '<code class="ansible-option literal notranslate"><strong>foo</strong></code>'
        )

    def test_option_value(self):
        assert html("O(foo=bar)") == (
            '<code class="ansible-option-value literal notranslate">foo=bar</code>'
        )

    def test_return_value(self):
        assert html("RV(foo)") == (
            '<code class="ansible-return-value literal notranslate">foo</code>'
        )

    def test_option_link(self):
        assert html("O(foo)", MODULE_CONTEXT, LINKS) == (
            '<code class="ansible-option literal notranslate"><strong>'
            '<a class="reference internal" href="https://docs/ns/coll/mod_module.html#option-foo">'
            '<span class="std std-ref"><span class="pre">foo</span></span></a>'
            "</strong></code>"
        )

    def test_shared_with_plain_html(self):
        assert html("B(x) L(t, http://x/a'b)") == "<b>x</b> <a href='http://x/a%27b'>t</a>"

    def test_paragraphs(self):
        docs = [doc for doc, _ in parse_paragraphs(["a", "b"])]
        assert render_paragraphs(docs, "antsibull-html") == "<p>a</p><p>b</p>"
