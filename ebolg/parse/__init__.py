"""Front matter parsing and Markdown rendering."""

from .frontmatter import FrontMatterError, parse_post_text, read_post, split_front_matter
from .md_render import TailwindExtension, render_html

__all__ = [
    "FrontMatterError",
    "split_front_matter",
    "parse_post_text",
    "read_post",
    "render_html",
    "TailwindExtension",
]
