"""Lightweight markup-to-HTML conversion for guide documents.

Handles a deliberately reduced Markdown dialect: fenced code blocks,
headings, bold/italic, inline code, links, flat unordered lists and
paragraphs. Nested lists, tables, blockquotes, ordered lists and
reference-style links are not supported.

The conversion is a fixed chain of string rewrites. Each stage takes the
previous stage's output and returns a new string, so the order below is
part of the contract:

    normalize -> escape -> fences -> headings -> emphasis
        -> inline code -> links -> lists -> paragraphs

Example:
    >>> render_markup("# Title")
    '<h1>Title</h1>'
"""

from __future__ import annotations

import html
import re

__all__ = ["convert", "escape_html", "render_markup"]

# Fenced code: non-greedy up to the next fence, or to end of text when the
# fence is never closed.
_FENCE_RE = re.compile(r"```(.*?)(?:```|\Z)", re.DOTALL)
_FENCE_LANG_RE = re.compile(r"^([A-Za-z0-9_+-]+)[ \t]*\n")
_FENCE_PLACEHOLDER_RE = re.compile(r"<pre data-fence=(\d+)></pre>")

_HEADING_RE = re.compile(r"^[ \t]*(#{1,6}) (.*)$", re.MULTILINE)

_BOLD_ITALIC_RE = re.compile(r"\*\*\*(.+?)\*\*\*")
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_ITALIC_RE = re.compile(r"\*(.+?)\*")

_INLINE_CODE_RE = re.compile(r"`([^`]+)`")

_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

_LIST_ITEM_RE = re.compile(r"^[ \t]*[-*] (.*)$", re.MULTILINE)
_LIST_RUN_RE = re.compile(r"<li>.*</li>(?:\n(?:[ \t]*\n)*<li>.*</li>)*")

_BLOCK_SPLIT_RE = re.compile(r"\n(?:[ \t]*\n)+")
_STRUCTURAL_TAG_RE = re.compile(r"^<(h[1-6]|ul|ol|li|pre|blockquote)")


def escape_html(text: str | None) -> str:
    """HTML-escape ``&``, ``<`` and ``>``, returning empty string for None."""
    return html.escape(str(text), quote=False) if text else ""


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n")


def extract_fences(text: str) -> tuple[str, list[str]]:
    """Replace fenced code blocks with placeholders.

    Returns the rewritten text and the rendered ``<pre>`` blocks, indexed by
    placeholder number. Placeholders start with ``<pre`` so the paragraph
    pass leaves them alone, and contain no characters any later pass
    rewrites.
    """
    blocks: list[str] = []

    def _replace(m: re.Match) -> str:
        code = m.group(1)
        lang = ""
        lang_match = _FENCE_LANG_RE.match(code)
        if lang_match:
            lang = lang_match.group(1)
            code = code[lang_match.end():]
        code = code.strip()
        if lang:
            blocks.append(f'<pre><code class="language-{lang}">{code}</code></pre>')
        else:
            blocks.append(f"<pre><code>{code}</code></pre>")
        return f"<pre data-fence={len(blocks) - 1}></pre>"

    return _FENCE_RE.sub(_replace, text), blocks


def restore_fences(text: str, blocks: list[str]) -> str:
    if not blocks:
        return text
    return _FENCE_PLACEHOLDER_RE.sub(lambda m: blocks[int(m.group(1))], text)


def render_headings(text: str) -> str:
    def _replace(m: re.Match) -> str:
        level = len(m.group(1))
        return f"<h{level}>{m.group(2)}</h{level}>"

    return _HEADING_RE.sub(_replace, text)


def render_emphasis(text: str) -> str:
    # Longest delimiter first so *** is never read as ** plus *.
    text = _BOLD_ITALIC_RE.sub(r"<strong><em>\1</em></strong>", text)
    text = _BOLD_RE.sub(r"<strong>\1</strong>", text)
    return _ITALIC_RE.sub(r"<em>\1</em>", text)


def render_inline_code(text: str) -> str:
    return _INLINE_CODE_RE.sub(r"<code>\1</code>", text)


def render_links(text: str) -> str:
    def _replace(m: re.Match) -> str:
        label = m.group(1)
        href = m.group(2).strip().replace('"', "&quot;")
        return f'<a href="{href}" target="_blank" rel="noreferrer">{label}</a>'

    return _LINK_RE.sub(_replace, text)


def render_lists(text: str) -> str:
    """Turn bullet lines into ``<li>`` and wrap each run in one ``<ul>``.

    Runs are adjacency based: items separated only by newlines (blank or
    whitespace-only lines included) end up in the same list. Lists are flat.
    """
    text = _LIST_ITEM_RE.sub(r"<li>\1</li>", text)

    def _wrap(m: re.Match) -> str:
        items = [line for line in m.group(0).split("\n") if line.strip()]
        return "<ul>\n" + "\n".join(items) + "\n</ul>"

    return _LIST_RUN_RE.sub(_wrap, text)


def render_paragraphs(text: str) -> str:
    processed = []
    for block in _BLOCK_SPLIT_RE.split(text):
        trimmed = block.strip()
        if not trimmed:
            continue
        if _STRUCTURAL_TAG_RE.match(trimmed):
            processed.append(trimmed)
        else:
            processed.append(f"<p>{trimmed}</p>")
    return "\n".join(processed)


def render_markup(source: str | None) -> str:
    """Convert guide markup to an HTML fragment.

    Never raises. Unmatched delimiters and malformed constructs pass through
    as (escaped) literal text.

    Args:
        source: Raw markup text. ``\\r\\n`` line endings are accepted.

    Returns:
        HTML ready to be injected into a page, or ``""`` for empty input.
    """
    if not source:
        return ""

    text = normalize_newlines(source)
    text = escape_html(text)
    text, fences = extract_fences(text)
    text = render_headings(text)
    text = render_emphasis(text)
    text = render_inline_code(text)
    text = render_links(text)
    text = render_lists(text)
    text = render_paragraphs(text)
    return restore_fences(text, fences)


convert = render_markup
