from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Tuple

from chatfmt.services.protected_tags import restore_protected_tags

logger = logging.getLogger(__name__)

# Longest marker first so "###" is never taken as "#"
_HEADING_PATTERNS: Tuple[Tuple[int, re.Pattern[str]], ...] = tuple(
    (level, re.compile(r"^" + "#" * level + r"\s*(.*)$", re.MULTILINE))
    for level in range(6, 0, -1)
)

# Order matters: "&" first so later entities are not double-escaped
_ESCAPES: Tuple[Tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)

_re_fenced_code = re.compile(r"```(.*?)```", re.DOTALL)
# Existing <pre><code> blocks are matched first and passed through untouched
_re_inline_code = re.compile(
    r"(?P<block><pre><code>.*?</code></pre>)|`(?P<code>[^`]+)`", re.DOTALL
)
_re_bold = re.compile(r"\*\*(.*?)\*\*")
_re_italic = re.compile(r"\*(.*?)\*")
_re_ul_item = re.compile(r"^\s*-\s+(.*)$", re.MULTILINE)
# ASCII digits only
_re_ol_item = re.compile(r"^\s*[0-9]+\.\s+(.*)$", re.MULTILINE)
_re_link = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

_LI_RUN = r"<li>.*?</li>(?:\n<li>.*?</li>)*"
# A run already wrapped by an earlier list pass, or a bare run of <li> lines
_re_list_run = re.compile(
    rf"(?P<wrapped><(?P<kind>ul|ol)>{_LI_RUN}</(?P=kind)>)|(?P<run>{_LI_RUN})"
)


def convert_headings(text: str) -> str:
    for level, pattern in _HEADING_PATTERNS:
        text = pattern.sub(rf"<h{level}>\1</h{level}>", text)
    return text


def escape_html(text: str) -> str:
    for raw, entity in _ESCAPES:
        text = text.replace(raw, entity)
    return text


def convert_fenced_code(text: str) -> str:
    return _re_fenced_code.sub(r"<pre><code>\1</code></pre>", text)


def convert_inline_code(text: str) -> str:
    def repl(m: re.Match[str]) -> str:
        if m.group("block") is not None:
            return m.group("block")
        return f"<code>{m.group('code')}</code>"

    return _re_inline_code.sub(repl, text)


def convert_bold(text: str) -> str:
    return _re_bold.sub(r"<strong>\1</strong>", text)


def convert_italic(text: str) -> str:
    # Runs after bold; leftover or unbalanced stars pair up first-match
    return _re_italic.sub(r"<em>\1</em>", text)


def _wrap_list_runs(text: str, tag: str) -> str:
    def repl(m: re.Match[str]) -> str:
        if m.group("wrapped") is not None:
            return m.group("wrapped")
        return f"<{tag}>{m.group('run')}</{tag}>"

    return _re_list_run.sub(repl, text)


def convert_unordered_lists(text: str) -> str:
    text = _re_ul_item.sub(r"<li>\1</li>", text)
    return _wrap_list_runs(text, "ul")


def convert_ordered_lists(text: str) -> str:
    text = _re_ol_item.sub(r"<li>\1</li>", text)
    return _wrap_list_runs(text, "ol")


def convert_links(text: str) -> str:
    return _re_link.sub(r'<a href="\2" target="_blank">\1</a>', text)


def convert_line_breaks(text: str) -> str:
    return text.replace("\n", "<br>")


# Pipeline order; each stage receives the previous stage's full output
STAGES: Tuple[Callable[[str], str], ...] = (
    convert_headings,
    escape_html,
    restore_protected_tags,
    convert_fenced_code,
    convert_inline_code,
    convert_bold,
    convert_italic,
    convert_unordered_lists,
    convert_ordered_lists,
    convert_links,
    convert_line_breaks,
)


def format_message(text: Any) -> str:
    """Convert a chat message written in a small Markdown subset to HTML.

    Supported: ATX headings, fenced and inline code, bold, italic, flat
    unordered and ordered lists, inline links, and line breaks. All other
    characters are HTML-escaped; only the heading tags produced here are
    emitted as real markup before the later stages run.

    Falsy input yields an empty string. The function never raises.
    """
    if not text:
        return ""
    if not isinstance(text, str):
        text = str(text)

    formatted = text
    for stage in STAGES:
        formatted = stage(formatted)
    logger.debug(
        "Formatted message: %d chars in, %d chars out", len(text), len(formatted)
    )
    return formatted


@dataclass
class MarkdownService:
    """Renders chat message Markdown to an embeddable HTML fragment.

    Thin object wrapper around ``format_message`` for callers that hold
    services rather than functions.
    """

    def to_html(self, markdown_text: Any) -> str:
        return format_message(markdown_text)
