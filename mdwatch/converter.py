"""Markdown to HTML conversion.

The converter is a pure function: no I/O and no state carried between calls.
Only basic Markdown plus the table and strikethrough extensions are enabled.
"""

from __future__ import annotations

import mistune

MARKDOWN_PLUGINS = ("strikethrough", "table")


def render_markdown(text: str) -> str:
    """Render Markdown source to HTML.

    Malformed input is rendered best-effort; Markdown has no parse failures.
    Raw HTML in the source is passed through untouched.

    Args:
        text: Markdown source.

    Returns:
        Rendered HTML string.
    """
    markdown = mistune.create_markdown(escape=False, plugins=list(MARKDOWN_PLUGINS))
    return markdown(text)
