"""Tests for Markdown -> HTML rendering."""

import unittest

from ebolg.parse.md_render import render_html


class TestRenderHtml(unittest.TestCase):
    def test_headings_get_classes(self) -> None:
        html = render_html("# Title\n\n## Subtitle\n\n### Section\n")
        self.assertIn('<h1 class="text-3xl font-bold">Title</h1>', html)
        self.assertIn('<h2 class="text-2xl font-bold mb-2">Subtitle</h2>', html)
        self.assertIn("<h3>Section</h3>", html)

    def test_paragraphs_get_classes(self) -> None:
        html = render_html("First paragraph.\n\nSecond paragraph.\n")
        self.assertEqual(html.count('<p class="text-gray-400 mb-4">'), 2)

    def test_fenced_code_block(self) -> None:
        html = render_html("```python\nprint('<hi>')\n```\n")
        self.assertIn(
            '<pre class="bg-gray-700 text-green-300 p-4 rounded mb-4 overflow-x-auto">', html
        )
        self.assertIn('<code class="language-python inline-block">', html)
        self.assertIn("&lt;hi&gt;", html)

    def test_inline_code(self) -> None:
        html = render_html("Run `make` now.\n")
        self.assertIn('<code class="inline-block">make</code>', html)

    def test_tables(self) -> None:
        html = render_html("| Name | Value |\n| --- | --- |\n| A | 1 |\n")
        self.assertIn("<table>", html)
        self.assertIn("<th>Name</th>", html)
        self.assertIn("<td>1</td>", html)

    def test_custom_class_map(self) -> None:
        html = render_html("# Title\n\nText\n", classes={"h1": "title"})
        self.assertIn('<h1 class="title">Title</h1>', html)
        self.assertIn("<p>Text</p>", html)

    def test_empty_class_map_leaves_markup_plain(self) -> None:
        html = render_html("# Title\n", classes={})
        self.assertEqual(html, "<h1>Title</h1>")

    def test_markdown_link_with_script_scheme_loses_href(self) -> None:
        html = render_html("See [the archive](JavaScript:void(0)) or [home](/index.html).")
        self.assertIn("<a>the archive</a>", html)
        self.assertIn('<a href="/index.html">home</a>', html)

    def test_raw_inline_html_link_loses_unsafe_href(self) -> None:
        html = render_html('Click <a href="javascript:alert(1)">x</a> now.')
        self.assertNotIn("javascript:", html.lower())
        self.assertIn("<a>x</a>", html)

    def test_raw_block_html_links(self) -> None:
        html = render_html(
            '<div>\n<a href=\'data:text/html,hi\' title="t">bad</a>\n'
            '<a href="https://example.org/post">good</a>\n</div>\n'
        )
        self.assertNotIn("data:", html)
        self.assertIn('<a title="t">bad</a>', html)
        self.assertIn('href="https://example.org/post"', html)

    def test_obfuscated_scheme_is_caught(self) -> None:
        html = render_html('<a href="  java&#x73;cript:alert(1)">x</a>')
        self.assertNotIn("cript:", html)

    def test_code_samples_keep_their_text(self) -> None:
        html = render_html('```html\n<a href="javascript:go()">x</a>\n```\n')
        self.assertIn("javascript:go()", html)

    def test_normalizes_line_endings(self) -> None:
        html = render_html("# Title\r\n\r\nText\r\n")
        self.assertNotIn("\r", html)
        self.assertIn("Text", html)


if __name__ == "__main__":
    unittest.main()
