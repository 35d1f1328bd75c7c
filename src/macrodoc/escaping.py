"""Escaping helpers for the output formats."""

from __future__ import annotations

import re
from urllib.parse import quote

# Characters encodeURI() leaves alone besides letters, digits and "-_.~".
_URL_SAFE = "!*'();/?:@&=+$,#"

_RST_SPECIAL = frozenset("\\<>_*`")

_MD_SPECIAL_RE = re.compile(r"([!\"#$%&'()*+,:;<=>?@\[\\\]^_`{|}~.-])")


def escape_html(text: str) -> str:
    """Escape text for HTML body content."""
    result: list[str] = []
    for ch in text:
        if ch == "&":
            result.append("&amp;")
        elif ch == "<":
            result.append("&lt;")
        elif ch == ">":
            result.append("&gt;")
        else:
            result.append(ch)
    return "".join(result)


def escape_url(url: str) -> str:
    """Percent-encode a URL the way JavaScript's encodeURI() does."""
    return quote(url, safe=_URL_SAFE)


def escape_url_attr(url: str) -> str:
    """Percent-encode a URL, then make it safe inside a quoted HTML attribute.

    encodeURI() leaves single quotes alone, so they are percent-encoded here.
    """
    return escape_url(url).replace("&", "&amp;").replace("'", "%27")


def escape_rst(
    text: str,
    escape_ending_whitespace: bool = False,
    must_not_be_empty: bool = False,
) -> str:
    """Backslash-escape RST inline markup characters.

    escape_ending_whitespace protects leading and trailing spaces inside an
    interpreted-text role; must_not_be_empty turns "" into an escaped space
    so a role never ends up empty.
    """
    if not text:
        return "\\ " if must_not_be_empty else ""
    result = "".join(f"\\{ch}" if ch in _RST_SPECIAL else ch for ch in text)
    if escape_ending_whitespace:
        if text.startswith(" "):
            result = "\\ " + result
        if text.endswith(" "):
            result += "\\ "
    return result


def escape_md(text: str) -> str:
    """Backslash-escape Markdown punctuation."""
    return _MD_SPECIAL_RE.sub(r"\\\1", text)
