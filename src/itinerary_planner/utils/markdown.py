"""Markdown to HTML rendering for generated plans."""

from markdown_it import MarkdownIt

_parser = MarkdownIt("commonmark")

def render_markdown(text: str) -> str:
    """Renders markdown text to HTML. Irregular input is rendered best-effort."""
    return _parser.render(text)
