"""Tests for slide markdown rendering."""

from slidedeck.utils.markdown import parse_markdown_to_html


class TestParseMarkdownToHtml:
    """Tests for markdown to HTML."""

    def test_headers(self):
        html = parse_markdown_to_html('# One\n## Two\n### Three')

        assert html == (
            '<h1 class="text-4xl font-bold mb-6">One</h1>\n'
            '<h2 class="text-2xl font-bold mb-4">Two</h2>\n'
            '<h3 class="text-xl font-semibold mb-3">Three</h3>'
        )

    def test_inline_emphasis(self):
        html = parse_markdown_to_html('**bold** and *italic*')

        assert html == (
            '<strong class="font-bold">bold</strong> and <em class="italic">italic</em>'
        )

    def test_bullets_wrapped_in_list(self):
        html = parse_markdown_to_html('- one\n- two')

        assert html.startswith('<ul class="space-y-1 mb-4"><li class="mb-2 ml-4">• one</li>')
        assert html.endswith('<li class="mb-2 ml-4">• two</li></ul>')

    def test_plain_lines_become_paragraphs(self):
        html = parse_markdown_to_html('First line\n\nSecond line')

        assert html == '<p class="mb-3 leading-relaxed">First line</p>\n<p class="mb-3 leading-relaxed">Second line</p>'

    def test_empty(self):
        assert parse_markdown_to_html('') == ''

