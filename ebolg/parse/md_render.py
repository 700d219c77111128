"""Render Markdown to HTML carrying Tailwind utility classes."""

from __future__ import annotations

import re
from collections.abc import Mapping
from html import unescape
from xml.etree.ElementTree import Element

import markdown
from markdown.extensions import Extension
from markdown.postprocessors import Postprocessor
from markdown.treeprocessors import Treeprocessor

from ..config import MARKDOWN_EXTENSIONS, TAILWIND_CLASSES, UNSAFE_URL_SCHEMES

_CLASS_ATTR_RE = re.compile(r"""\sclass=(["'])(?P<value>.*?)\1""", re.IGNORECASE | re.DOTALL)
_OPEN_TAG_RE = re.compile(r"<[A-Za-z][^<>]*>")
_HREF_ATTR_RE = re.compile(
    r"""\s+href\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>[^\s"'>]+))""",
    re.IGNORECASE,
)


class TailwindPostprocessor(Postprocessor):
    """Stamp utility classes onto opening tags of the final HTML.

    Works on the serialized output so fenced code blocks and raw HTML, which
    never reach the element tree, are styled too.
    """

    def __init__(self, md: markdown.Markdown, classes: Mapping[str, str]) -> None:
        super().__init__(md)
        self.classes = {tag.lower(): value for tag, value in classes.items() if value}
        if self.classes:
            tags = "|".join(re.escape(t) for t in sorted(self.classes, key=len, reverse=True))
            self._tag_re = re.compile(rf"<(?P<tag>{tags})(?P<attrs>\s[^<>]*?)?(?P<close>/?)>", re.IGNORECASE)
        else:
            self._tag_re = None

    def run(self, text: str) -> str:
        if self._tag_re is None:
            return text
        return self._tag_re.sub(self._stamp, text)

    def _stamp(self, match: re.Match[str]) -> str:
        tag = match.group("tag")
        attrs = match.group("attrs") or ""
        extra = self.classes[tag.lower()]

        existing = _CLASS_ATTR_RE.search(attrs)
        if existing:
            merged = _merge_classes(existing.group("value"), extra)
            attrs = attrs[: existing.start()] + f' class="{merged}"' + attrs[existing.end() :]
        else:
            attrs = f' class="{extra}"' + attrs
        return f"<{tag}{attrs}{match.group('close')}>"


class SafeLinkTreeprocessor(Treeprocessor):
    """Drop link targets using script-capable URL schemes.

    Covers links built from Markdown and those in raw HTML, which sits in the
    html stash until the postprocessors run.
    """

    def run(self, root: Element) -> None:
        for el in root.iter("a"):
            if _is_unsafe_url(el.get("href")):
                del el.attrib["href"]

        stash = self.md.htmlStash.rawHtmlBlocks
        for i, block in enumerate(stash):
            if isinstance(block, str):
                stash[i] = _OPEN_TAG_RE.sub(_strip_unsafe_hrefs, block)


class TailwindExtension(Extension):
    def __init__(self, **kwargs) -> None:
        self.config = {
            "classes": [dict(TAILWIND_CLASSES), "Tag name -> utility classes"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md: markdown.Markdown) -> None:
        md.treeprocessors.register(SafeLinkTreeprocessor(md), "safe_links", 0)
        # Below raw_html (30) so restored HTML blocks are styled as well.
        md.postprocessors.register(
            TailwindPostprocessor(md, self.getConfig("classes")), "tailwind", 5
        )


def render_html(md_text: str, classes: Mapping[str, str] | None = None) -> str:
    """Convert Markdown to an HTML fragment.

    Args:
        md_text: Markdown source (front matter already removed)
        classes: Optional tag -> class map replacing the configured defaults

    Returns:
        HTML fragment with Tailwind classes applied
    """
    md_text = md_text.replace("\r\n", "\n").replace("\r", "\n")
    extensions = [
        *MARKDOWN_EXTENSIONS,
        TailwindExtension(classes=dict(TAILWIND_CLASSES if classes is None else classes)),
    ]
    return markdown.markdown(md_text, extensions=extensions)


def _merge_classes(existing: str | None, extra: str) -> str:
    names = (existing or "").split()
    for name in extra.split():
        if name not in names:
            names.append(name)
    return " ".join(names)


def _is_unsafe_url(value: str | None) -> bool:
    if value is None:
        return False
    # Browsers ignore whitespace and control characters inside the scheme.
    normalized = "".join(ch for ch in unescape(value) if ch > " ").lower()
    return normalized.startswith(UNSAFE_URL_SCHEMES)


def _strip_unsafe_hrefs(tag: re.Match[str]) -> str:
    def _attr(match: re.Match[str]) -> str:
        value = match.group("dq") or match.group("sq") or match.group("bare") or ""
        return "" if _is_unsafe_url(value) else match.group(0)

    return _HREF_ATTR_RE.sub(_attr, tag.group(0))
