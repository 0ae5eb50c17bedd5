"""Integration tests for the Markdown to styled-text pipeline."""

import pytest

pytest.importorskip("mistune")

from md2styled import markdown_to_styled_text, to_styled_text  # noqa: E402
from md2styled.ast import Document, Paragraph, Text  # noqa: E402
from md2styled.options import StyledTextRendererOptions  # noqa: E402


@pytest.mark.integration
class TestMarkdownToStyledText:
    """End-to-end conversion from Markdown source to styled runs."""

    @pytest.mark.parametrize("source", ["**bold _and italic_**", "**bold *and italic***"])
    def test_bold_with_nested_italic(self, source):
        result = markdown_to_styled_text(source)
        assert [run.text for run in result] == ["bold ", "and italic"]
        first, second = (run.attributes.font for run in result)
        assert first.bold and not first.italic
        assert second.bold and second.italic
        assert first.size == second.size == 15.0

    def test_sample_document_plain_text(self, sample_markdown):
        result = markdown_to_styled_text(sample_markdown)
        assert result.plain_text == (
            "Sample Document\n\n"
            "This is a sample document with italic text and some inline code.\n\n"
            "\t•\tItem 1\n\t•\tItem 2\n\n"
            "\t1.\tFirst item\n\t2.\tSecond item\n\n"
            "\tQuoted text\n\n"
            'print("Hello")\n'
        )

    def test_sample_document_attributes(self, sample_markdown):
        runs = list(markdown_to_styled_text(sample_markdown))
        by_text = {run.text: run.attributes for run in runs}

        assert by_text["Sample Document"].font.size == 27.0
        assert by_text["sample document"].font.bold
        assert by_text["italic text"].font.italic
        assert by_text["inline code"].font.monospace
        assert by_text["Quoted text"].color == "muted"
        assert by_text['print("Hello")\n'].font.family == "Courier"

    def test_link_pipeline(self):
        result = markdown_to_styled_text("See [the docs](https://example.com/docs).")
        link_run = next(run for run in result if run.text == "the docs")
        assert link_run.attributes.link == "https://example.com/docs"
        assert link_run.attributes.color == "link"

    def test_nested_lists(self):
        source = "- outer\n  1. one\n  2. two\n- next"
        result = markdown_to_styled_text(source)
        assert result.plain_text == "\t•\touter\n\t1.\tone\n\t2.\ttwo\n\t•\tnext"

    def test_renderer_options_are_applied(self):
        options = StyledTextRendererOptions(base_font_size=12.0, bullet_glyph="-")
        result = markdown_to_styled_text("- item", renderer_options=options)
        assert result.plain_text == "\t-\titem"
        assert result.runs[-1].attributes.font.size == 12.0

    def test_source_file(self, tmp_path):
        path = tmp_path / "note.md"
        path.write_text("# Note\n\nBody", encoding="utf-8")
        assert markdown_to_styled_text(path).plain_text == "Note\n\nBody"

    def test_to_styled_text_on_hand_built_tree(self):
        doc = Document(children=[Paragraph(content=[Text(content="hand built")])])
        assert to_styled_text(doc).plain_text == "hand built"

    def test_table_cell_text_is_kept(self):
        result = markdown_to_styled_text("| Name | Qty |\n|------|-----|\n| pen  | 2   |")
        assert result.plain_text == "Name\tQty\npen\t2"
