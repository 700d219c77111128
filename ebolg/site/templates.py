"""HTML templates for generated pages."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from html import escape

from ..config import NAV_BUTTON_CLASSES


@dataclass(frozen=True)
class NavLink:
    href: str
    title: str


@dataclass(frozen=True)
class IndexEntry:
    title: str
    date: str
    href: str
    summary: str | None = None


def html_doc(
    title: str,
    body: str,
    stylesheet_href: str,
    prev_link: NavLink | None = None,
    next_link: NavLink | None = None,
) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '    <meta charset="UTF-8">\n'
        '    <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"    <title>{escape(title)}</title>\n"
        f'    <link rel="stylesheet" href="{escape(stylesheet_href, quote=True)}">\n'
        "</head>\n"
        '<body class="bg-gray-800 text-white">\n'
        '    <div class="container mx-auto px-4 py-8">\n'
        '        <div class="flex justify-between items-center mb-6">\n'
        f"            {back_button(prev_link)}\n"
        f'            <h1 class="text-3xl font-bold">{escape(title)}</h1>\n'
        f"            {next_button(next_link)}\n"
        "        </div>\n"
        "        <article>\n"
        f"{body}\n"
        "        </article>\n"
        "    </div>\n"
        "</body>\n"
        "</html>\n"
    )


def nav_button(link: NavLink | None, label: str) -> str:
    if link is None:
        return ""
    return (
        f'<a href="{escape(link.href, quote=True)}" title="{escape(link.title, quote=True)}" '
        f'class="{NAV_BUTTON_CLASSES}"><span>{label}</span></a>'
    )


def back_button(link: NavLink | None) -> str:
    return nav_button(link, "&larr; Back")


def next_button(link: NavLink | None) -> str:
    return nav_button(link, "Next &rarr;")


def index_page(title: str, entries: Iterable[IndexEntry], stylesheet_href: str) -> str:
    lines = ['<ul class="space-y-4">']
    for e in entries:
        lines.append(
            "<li>"
            f'<span class="text-gray-500 mr-2">{escape(e.date)}</span>'
            f'<a class="text-green-300 hover:underline" href="{escape(e.href, quote=True)}">'
            f"{escape(e.title)}</a>"
        )
        if e.summary:
            lines.append(f'<p class="text-gray-400 mb-4">{escape(e.summary)}</p>')
        lines.append("</li>")
    lines.append("</ul>")
    return html_doc(title=title, body="\n".join(lines), stylesheet_href=stylesheet_href)
