import re
import unittest

from licensereport.renderers import HTML, HtmlRenderer
from licensereport.renderers.html import html_encode


class TestHtmlDocument(unittest.TestCase):
    """Document level markup of the HTML renderer."""

    def setUp(self):
        self.renderer = HtmlRenderer()

    def test_document_start_without_style(self):
        self.assertEqual(
            self.renderer.document_start("Licenses"),
            "<html><head><title>Licenses</title></head><body>",
        )

    def test_document_start_with_style(self):
        result = self.renderer.document_start("Licenses", "td { padding: 2px; }")
        self.assertEqual(
            result,
            '<html><head><title>Licenses</title>'
            '<style media="screen" type="text/css">td { padding: 2px; }</style>'
            "</head><body>",
        )

    def test_document_end(self):
        self.assertEqual(self.renderer.document_end(), "</body></html>")

    def test_header1_and_blank_line(self):
        self.assertEqual(self.renderer.header1("Licenses"), "<h1>Licenses</h1>")
        self.assertEqual(self.renderer.blank_line(), "<p>&nbsp;</p>")

    def test_ext(self):
        self.assertEqual(self.renderer.ext, "html")


class TestHtmlTable(unittest.TestCase):
    """Table rendering in HTML."""

    def test_table_header(self):
        result = HTML.table_header("Notes", "Library", "Version")
        self.assertTrue(result.startswith('<table border="0" cellspacing="0"'))
        self.assertIn(
            "<thead><tr><th>Library</th><th>Version</th><th>Notes</th></tr></thead>",
            result,
        )
        self.assertTrue(result.endswith("<tbody>"))

    def test_header_cell_count(self):
        for n in range(0, 5):
            columns = [f"c{i}" for i in range(n)]
            result = HTML.table_header("Notes", *columns)
            self.assertEqual(len(re.findall("<th>", result)), n + 1)

    def test_table_row(self):
        self.assertEqual(
            HTML.table_row("MIT", "libfoo", "1.0"),
            "<tr><td>libfoo&nbsp;</td><td>1.0&nbsp;</td><td>MIT</td></tr>",
        )

    def test_notes_are_escaped(self):
        result = HTML.table_row('<a href="x">&</a> | \'q\'', "libfoo")
        self.assertIn("&lt;a href=&#34;x&#34;&gt;&amp;&lt;/a&gt; &#124; &#39;q&#39;", result)
        self.assertNotIn("<a", result)
        self.assertNotIn("|", result)

    def test_non_ascii_notes_use_named_entities(self):
        result = HTML.table_row("\u00a9 2020 J\u00e9r\u00f4me", "libfoo")
        self.assertEqual(
            result,
            "<tr><td>libfoo&nbsp;</td><td>&copy; 2020 J&eacute;r&ocirc;me</td></tr>",
        )

    def test_characters_without_entity_name_pass_through(self):
        self.assertEqual(html_encode("\u2603 \u4e2d"), "\u2603 \u4e2d")

    def test_none_notes(self):
        self.assertEqual(HTML.table_row(None, "libfoo"), "<tr><td>libfoo&nbsp;</td><td></td></tr>")

    def test_table_end(self):
        self.assertEqual(HTML.table_end(), "</tbody></table>")


class TestHtmlLinks(unittest.TestCase):

    def test_hyperlink(self):
        self.assertEqual(
            HTML.create_hyperlink("https://example.com/a", "site"),
            '<a href="https://example.com/a">site</a>',
        )

    def test_href_is_attribute_escaped(self):
        result = HTML.create_hyperlink('https://example.com/?a=1&b="2"', "site")
        self.assertEqual(
            result,
            '<a href="https://example.com/?a=1&amp;b=&#34;2&#34;">site</a>',
        )

    def test_missing_link_renders_content(self):
        self.assertEqual(HTML.create_hyperlink(None, "X"), "X")
        self.assertEqual(HTML.create_hyperlink("", "X"), "X")
        self.assertEqual(HTML.create_hyperlink(" ", "X"), "X")

    def test_html_encode_none(self):
        self.assertEqual(html_encode(None), "")


if __name__ == '__main__':
    unittest.main()
