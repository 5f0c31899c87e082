#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for HtmlRenderer."""

from io import BytesIO, StringIO

import pytest

from lex2html.ast import (
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Paragraph,
    Quote,
    Tab,
    Table,
    TableCell,
    TableRow,
    Text,
    UnknownNode,
)
from lex2html.ast.serialization import dict_to_node
from lex2html.constants import TextFormat
from lex2html.exceptions import InvalidOptionsError, RenderingError
from lex2html.options import HtmlRendererOptions, PostProcessOptions
from lex2html.renderers.html import HtmlRenderer, render_node


def render(*children, options=None) -> str:
    return HtmlRenderer(options).render_to_string(Document(children=list(children)))


def item(value: str, **kwargs) -> ListItem:
    return ListItem(children=[Text(text=value)], **kwargs)


@pytest.mark.unit
class TestHtmlRendererBasic:
    """Test basic HTML rendering."""

    def test_render_empty_document(self) -> None:
        """Test rendering an empty document."""
        assert render() == ""

    def test_render_heading(self) -> None:
        """Test rendering a heading with escaped text."""
        assert render(Heading(level=2, children=[Text(text="Hi & Bye")])) == "<h2>Hi &amp; Bye</h2>"

    def test_render_heading_levels(self) -> None:
        """Test that each level maps to its tag."""
        for level in range(1, 7):
            assert render(Heading(level=level, children=[Text(text="T")])) == f"<h{level}>T</h{level}>"

    def test_render_paragraph(self) -> None:
        """Test rendering a paragraph with mixed runs in stored order."""
        doc = Paragraph(children=[Text(text="Hello "), Text(text="world", format=TextFormat.BOLD)])
        assert render(doc) == "<p>Hello <strong>world</strong></p>"

    def test_render_quote(self) -> None:
        """Test rendering a quote."""
        assert render(Quote(children=[Text(text="Cited")])) == "<blockquote>Cited</blockquote>"

    def test_empty_blocks_render_nothing(self) -> None:
        """Test that blocks without content produce no markup."""
        assert render(Paragraph(), Heading(level=1), Quote(children=[Text(text="")])) == ""

    def test_root_skips_empty_children(self) -> None:
        """Test that empty children do not disturb their siblings."""
        result = render(Paragraph(), Paragraph(children=[Text(text="A")]), Paragraph())
        assert result == "<p>A</p>"

    def test_render_void_elements(self) -> None:
        """Test horizontal rule, line break and tab."""
        doc = Paragraph(children=[Text(text="a"), LineBreak(), Tab(), Text(text="b")])
        assert render(doc, HorizontalRule()) == "<p>a<br />\tb</p><hr />"

    def test_render_node_function(self) -> None:
        """Test rendering a node outside a document."""
        assert render_node(Text(text="x", format=TextFormat.ITALIC)) == "<em>x</em>"

    def test_render_is_deterministic(self) -> None:
        """Test that rendering the same tree twice gives identical output."""
        doc = Document(children=[Paragraph(children=[Text(text="Same", format=3)])])
        renderer = HtmlRenderer()
        assert renderer.render_to_string(doc) == renderer.render_to_string(doc)


@pytest.mark.unit
class TestHtmlRendererLists:
    """Test list rendering."""

    def test_unordered_list(self) -> None:
        """Test a bullet list."""
        doc = List(children=[item("A"), item("B")])
        assert render(doc) == "<ul><li>A</li><li>B</li></ul>"

    def test_ordered_list_default_start(self) -> None:
        """Test that a list starting at 1 has no start attribute."""
        doc = List(ordered=True, children=[item("A")])
        assert render(doc) == "<ol><li>A</li></ol>"

    def test_ordered_list_custom_start(self) -> None:
        """Test the start attribute for lists starting above 1."""
        doc = List(ordered=True, start=3, children=[item("A")])
        assert render(doc) == '<ol start="3"><li>A</li></ol>'

    def test_start_ignored_for_unordered(self) -> None:
        """Test that unordered lists never carry start."""
        assert render(List(start=5, children=[item("A")])) == "<ul><li>A</li></ul>"

    def test_nested_list_inside_item(self) -> None:
        """Test that a nested list renders inside its parent item."""
        inner = List(children=[item("child")])
        doc = List(children=[ListItem(children=[Text(text="parent"), inner])])
        assert render(doc) == "<ul><li>parent<ul><li>child</li></ul></li></ul>"

    def test_deep_nesting(self) -> None:
        """Test that nesting depth is not limited."""
        node = List(children=[item("leaf")])
        for _ in range(50):
            node = List(children=[ListItem(children=[node])])
        result = render(node)
        assert result.count("<ul>") == 51
        assert "<li>leaf</li>" in result

    def test_non_item_child_is_wrapped(self) -> None:
        """Test that a stray child of a list gets its own item."""
        doc = List(children=[Paragraph(children=[Text(text="loose")]), Paragraph()])
        assert render(doc) == "<ul><li><p>loose</p></li></ul>"

    def test_list_without_items_renders_nothing(self) -> None:
        """Test that an empty list produces no markup."""
        assert render(List(ordered=True)) == ""

    def test_checklist_markers(self) -> None:
        """Test checked and unchecked markers in a checklist."""
        doc = List(checklist=True, children=[item("done", checked=True), item("todo", checked=False)])
        assert render(doc) == "<ul><li>&#9745; done</li><li>&#9744; todo</li></ul>"

    def test_empty_item_kept(self) -> None:
        """Test that an empty item still renders so numbering is preserved."""
        doc = List(ordered=True, children=[ListItem(), item("B")])
        assert render(doc) == "<ol><li></li><li>B</li></ol>"


@pytest.mark.unit
class TestHtmlRendererTables:
    """Test table rendering."""

    @staticmethod
    def row(*values: str, **kwargs) -> TableRow:
        return TableRow(children=[TableCell(children=[Text(text=v)]) for v in values], **kwargs)

    def test_first_row_is_header(self) -> None:
        """Test that the first row goes into thead."""
        doc = Table(children=[self.row("H"), self.row("1")])
        assert render(doc) == "<table><thead><tr><th>H</th></tr></thead><tbody><tr><td>1</td></tr></tbody></table>"

    def test_first_row_explicitly_not_header(self) -> None:
        """Test that isHeader false keeps every row in tbody."""
        doc = Table(children=[self.row("1", is_header=False), self.row("2")])
        assert render(doc) == "<table><tbody><tr><td>1</td></tr><tr><td>2</td></tr></tbody></table>"

    def test_multiple_leading_header_rows(self) -> None:
        """Test that explicit header rows after the first join thead."""
        doc = Table(children=[self.row("A"), self.row("B", is_header=True), self.row("1")])
        result = render(doc)
        assert result.startswith("<table><thead><tr><th>A</th></tr><tr><th>B</th></tr></thead><tbody>")

    def test_flagged_header_row_after_body_row(self) -> None:
        """Test that a header row following a body row keeps th cells."""
        doc = Table(children=[self.row("A"), self.row("1"), self.row("B", is_header=True)])
        assert render(doc) == (
            "<table><thead><tr><th>A</th></tr></thead>"
            "<tbody><tr><td>1</td></tr><tr><th>B</th></tr></tbody></table>"
        )

    def test_header_cell_in_body(self) -> None:
        """Test that header cells outside thead still render th."""
        key = TableCell(header=True, children=[Text(text="k")])
        body = TableRow(children=[key, TableCell(children=[Text(text="v")])])
        doc = Table(children=[self.row("Key", "Value"), body])
        assert "<tbody><tr><th>k</th><td>v</td></tr></tbody>" in render(doc)

    def test_table_without_rows_renders_nothing(self) -> None:
        """Test that an empty table produces no markup."""
        assert render(Table()) == ""

    def test_cell_content_is_rendered(self) -> None:
        """Test that block content inside cells is rendered."""
        cell = TableCell(children=[Paragraph(children=[Text(text="x", format=TextFormat.BOLD)])])
        doc = Table(children=[TableRow(children=[cell])])
        assert render(doc) == "<table><thead><tr><th><p><strong>x</strong></p></th></tr></thead></table>"


@pytest.mark.unit
class TestHtmlRendererImages:
    """Test image rendering."""

    def test_image_with_max_width(self) -> None:
        """Test that maxWidth suppresses width/height attributes."""
        result = render(Image(src="/a.png", alt_text="A", width=800, height=600, max_width=400))
        assert 'class="lexical-image"' in result
        assert 'style="max-width: 400px"' in result
        assert "width=" not in result.replace("max-width", "")
        assert "height=" not in result

    def test_image_with_dimensions(self) -> None:
        """Test explicit dimensions when both are known."""
        result = render(Image(src="/a.png", alt_text="A", width=800, height=600))
        assert result == (
            '<img src="/a.png" alt="A" width="800" height="600" '
            'loading="lazy" decoding="async" class="lexical-image" />'
        )

    def test_image_with_single_dimension(self) -> None:
        """Test that a lone width is not emitted."""
        result = render(Image(src="/a.png", width=800))
        assert "width=" not in result

    def test_image_without_src_renders_nothing(self) -> None:
        """Test that an image missing its source produces no markup."""
        assert render(Image(src="  ", alt_text="A")) == ""

    def test_image_with_script_src_renders_nothing(self) -> None:
        """Test that a javascript: source is dropped."""
        assert render(Image(src="javascript:alert(1)", alt_text="A")) == ""

    def test_image_alt_is_escaped(self) -> None:
        """Test escaping of alt text in the attribute."""
        assert 'alt="&quot;&gt;&lt;script&gt;"' in render(Image(src="/a.png", alt_text='"><script>'))

    def test_lazy_loading_can_be_disabled(self) -> None:
        """Test that lazy loading attributes follow the option."""
        result = render(Image(src="/a.png"), options=HtmlRendererOptions(lazy_images=False))
        assert "loading=" not in result
        assert "decoding=" not in result

    def test_custom_image_class(self) -> None:
        """Test a configured marker class."""
        result = render(Image(src="/a.png"), options=HtmlRendererOptions(image_class="article-img"))
        assert 'class="article-img"' in result

    def test_cloudinary_image_optimized(self) -> None:
        """Test srcset and optimized src for Cloudinary images."""
        src = "https://res.cloudinary.com/demo/image/upload/v1/cat.jpg"
        result = render(Image(src=src, width=800, height=600))
        assert 'src="https://res.cloudinary.com/demo/image/upload/w_800,h_600,' in result
        assert "srcset=" in result
        assert " 400w, " in result
        assert 'sizes="(max-width: 768px) 100vw, (max-width: 1200px) 80vw, 800px"' in result

    def test_cloudinary_optimization_disabled(self) -> None:
        """Test that the URL is kept when optimization is off."""
        src = "https://res.cloudinary.com/demo/image/upload/v1/cat.jpg"
        result = render(Image(src=src), options=HtmlRendererOptions(optimize_cloudinary_images=False))
        assert f'src="{src}"' in result
        assert "srcset=" not in result


@pytest.mark.unit
class TestHtmlRendererLinks:
    """Test link rendering."""

    def test_simple_link(self) -> None:
        """Test a link with a plain URL."""
        doc = Link(url="https://example.com?a=1&b=2", children=[Text(text="site")])
        assert render(doc) == '<a href="https://example.com?a=1&amp;b=2">site</a>'

    def test_blank_target_gets_rel(self) -> None:
        """Test that _blank links always carry noopener noreferrer."""
        doc = Link(url="https://example.com", target="_blank", children=[Text(text="x")])
        assert render(doc) == '<a href="https://example.com" target="_blank" rel="noopener noreferrer">x</a>'

    def test_blank_target_keeps_stored_rel(self) -> None:
        """Test that stored rel tokens are kept and missing ones appended."""
        doc = Link(url="https://example.com", target="_blank", rel="nofollow noopener", children=[Text(text="x")])
        assert 'rel="nofollow noopener noreferrer"' in render(doc)

    def test_title_attribute(self) -> None:
        """Test that a title is emitted when present."""
        doc = Link(url="/about", title="About us", children=[Text(text="x")])
        assert render(doc) == '<a href="/about" title="About us">x</a>'

    @pytest.mark.parametrize(
        "url",
        ["javascript:alert(1)", "JavaScript:alert(1)", " java\tscript:alert(1)", "vbscript:x", "data:text/html,x", ""],
    )
    def test_unsafe_or_empty_url_drops_anchor(self, url: str) -> None:
        """Test that unusable URLs keep the text but drop the anchor."""
        doc = Paragraph(children=[Link(url=url, children=[Text(text="click")])])
        assert render(doc) == "<p>click</p>"


@pytest.mark.unit
class TestHtmlRendererCode:
    """Test code block rendering."""

    def test_code_block(self) -> None:
        """Test escaping, line breaks and the language attribute."""
        doc = CodeBlock(
            language="python",
            children=[Text(text="if a < b:", format=TextFormat.BOLD), LineBreak(), Tab(), Text(text="pass")],
        )
        assert render(doc) == '<pre><code data-language="python">if a &lt; b:\n\tpass</code></pre>'

    def test_code_block_without_language(self) -> None:
        """Test that no language attribute is emitted when unset."""
        assert render(CodeBlock(children=[Text(text="x")])) == "<pre><code>x</code></pre>"

    def test_empty_code_block(self) -> None:
        """Test that a code block without text produces no markup."""
        assert render(CodeBlock(language="js")) == ""

    def test_editor_codehighlight_block(self) -> None:
        """Test that an editor codehighlight block renders as pre/code."""
        node = dict_to_node(
            {"type": "codehighlight", "language": "js", "children": [{"type": "text", "text": "let a = 1;"}]}
        )
        assert render(node) == '<pre><code data-language="js">let a = 1;</code></pre>'


@pytest.mark.unit
class TestHtmlRendererUnknown:
    """Test handling of unrecognized node kinds."""

    def test_unknown_node_renders_nothing(self) -> None:
        """Test that unknown kinds do not disturb their siblings."""
        doc = Paragraph(children=[Text(text="a"), UnknownNode(type_name="poll"), Text(text="b")])
        assert render(doc) == "<p>ab</p>"

    def test_unknown_node_strict(self) -> None:
        """Test that strict mode raises for unknown kinds."""
        with pytest.raises(RenderingError) as exc_info:
            render(UnknownNode(type_name="poll"), options=HtmlRendererOptions(fail_on_unknown_nodes=True))
        assert exc_info.value.node_kind == "poll"


@pytest.mark.unit
class TestHtmlRendererOutput:
    """Test options validation and output targets."""

    def test_wrong_options_type(self) -> None:
        """Test that a mismatched options class is rejected."""
        with pytest.raises(InvalidOptionsError):
            HtmlRenderer(PostProcessOptions())  # type: ignore[arg-type]

    def test_render_to_text_stream(self) -> None:
        """Test writing to a text stream."""
        buffer = StringIO()
        HtmlRenderer().render(Document(children=[Paragraph(children=[Text(text="x")])]), buffer)
        assert buffer.getvalue() == "<p>x</p>"

    def test_render_to_binary_stream(self) -> None:
        """Test writing to a binary stream."""
        buffer = BytesIO()
        HtmlRenderer().render(Document(children=[Paragraph(children=[Text(text="é")])]), buffer)
        assert buffer.getvalue() == "<p>é</p>".encode("utf-8")

    def test_render_to_path(self, tmp_path) -> None:
        """Test writing to a file path."""
        target = tmp_path / "out.html"
        HtmlRenderer().render(Document(children=[HorizontalRule()]), target)
        assert target.read_text(encoding="utf-8") == "<hr />"
