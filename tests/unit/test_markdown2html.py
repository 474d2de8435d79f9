"""Unit tests for the Markdown to HTML transcoder."""

import pytest

from plugdoc.renderers.html import DEFAULT_MARKDOWN_RULES, MarkdownToHtmlTranscoder, markdown_to_html


@pytest.mark.unit
class TestHeaders:
    """Test ATX header conversion."""

    @pytest.mark.parametrize("level", range(1, 7))
    def test_each_level(self, level):
        assert markdown_to_html("#" * level + " Title") == f"<h{level}>Title</h{level}>"

    def test_longest_prefix_runs_first(self):
        assert [rule.name for rule in DEFAULT_MARKDOWN_RULES[:6]] == ["h6", "h5", "h4", "h3", "h2", "h1"]

    def test_seven_hashes_not_a_header(self):
        assert markdown_to_html("####### x") == "####### x"

    def test_requires_space(self):
        assert markdown_to_html("#tag") == "#tag"

    def test_only_at_line_start(self):
        assert markdown_to_html("text # not header") == "text # not header"

    def test_multiple_lines(self):
        assert markdown_to_html("# A\ntext\n## B") == "<h1>A</h1>\ntext\n<h2>B</h2>"


@pytest.mark.unit
class TestInline:
    """Test bold, italic and list items."""

    def test_bold(self):
        assert markdown_to_html("a **b** c") == "a <strong>b</strong> c"

    def test_italic(self):
        assert markdown_to_html("a *b* c") == "a <em>b</em> c"

    def test_bold_before_italic(self):
        assert markdown_to_html("**b** and *i*") == "<strong>b</strong> and <em>i</em>"

    def test_list_item(self):
        assert markdown_to_html("- one\n- two") == "<li>one</li>\n<li>two</li>"

    def test_list_item_with_bold(self):
        assert markdown_to_html("- **x**") == "<li><strong>x</strong></li>"

    def test_indented_dash_not_list_item(self):
        assert markdown_to_html("  - x") == "  - x"

    def test_plain_text_passes_through(self):
        assert markdown_to_html("just text & <stuff>") == "just text & <stuff>"

    def test_header_with_bold(self):
        assert markdown_to_html("## **Big** news") == "<h2><strong>Big</strong> news</h2>"

    def test_empty(self):
        assert markdown_to_html("") == ""


@pytest.mark.unit
def test_transcoder_instance_matches_function():
    text = "# T\n- **a** *b*"
    assert MarkdownToHtmlTranscoder().convert(text) == markdown_to_html(text)
