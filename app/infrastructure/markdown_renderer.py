"""Markdown Renderer: converts page content to HTML with Python-Markdown.

Invariants:
    - render_markdown is total: any str (including "") yields a str
    - Output depends only on the input (fresh converter per call, no shared state)

Design Decisions:
    - "extra" + "sane_lists": tables, fenced code, footnotes, definition lists,
      the same ground the common GitHub-flavoured feature set covers
    - New Markdown instance per call: Markdown objects keep per-document state
      (footnotes, abbreviations) and are not safe to share across threads
"""

import markdown

MARKDOWN_EXTENSIONS: list[str] = ["extra", "sane_lists"]


def render_markdown(source: str) -> str:
    """Render Markdown source to an HTML fragment."""
    md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS, output_format="html")
    return md.convert(source or "")
