"""Tests for the Markdown report exporter."""

from figflow.backend.markdown import MarkdownExporter, format_number
from figflow.core.ir import FlowConnection, FlowGraph


class TestMarkdownExporter:

    def test_heading_and_counts(self, shop_graph):
        output = MarkdownExporter.to_markdown(shop_graph)

        assert output.startswith("# Shop App - Checkout\n\nExtracted: 2026-01-15T09:30:00.000Z\n")
        assert "## Screens (4)" in output

    def test_only_interactive_screens_get_sections(self, shop_graph):
        output = MarkdownExporter.to_markdown(shop_graph)

        assert "### Home" in output
        assert "### Cart" in output
        assert "### Promo Dialog" not in output
        assert "### Empty Frame" not in output

    def test_screen_section(self, shop_graph):
        output = MarkdownExporter.to_markdown(shop_graph)

        expected = "\n".join([
            "### Home",
            "- ID: `1:1`",
            "- Type: FRAME",
            "- Size: 375 x 812",
            "",
            "#### Interactions",
            "- **Home** (FRAME)",
            "  - Trigger: Click",
            "  - Action: Navigate",
            "    - Destination: Cart",
            "    - Transition: DISSOLVE (0.3s)",
            "",
        ])
        assert expected in output

    def test_transition_table(self, shop_graph):
        output = MarkdownExporter.to_markdown(shop_graph)

        assert "## Screen Transitions" in output
        assert "| From | Trigger | Action | To | Transition |" in output
        assert "| Home | Click | Navigate | Cart | DISSOLVE |" in output
        assert "| Buy Button | Hover | Open overlay | Promo Dialog | - |" in output
        assert "| Buy Button | After 800ms | Swap | Unknown | - |" in output

    def test_no_table_without_connections(self):
        graph = FlowGraph(document_name="Doc", page_name="Page", extracted_at="t")

        output = MarkdownExporter.to_markdown(graph)

        assert "## Screens (0)" in output
        assert "Screen Transitions" not in output

    def test_pipes_in_names_are_escaped(self):
        graph = FlowGraph(
            document_name="Doc",
            page_name="Page",
            extracted_at="t",
            connections=(FlowConnection("1", "A | B", "2", "C", "Click", "Navigate"),),
        )

        output = MarkdownExporter.to_markdown(graph)

        assert "| A \\| B | Click | Navigate | C | - |" in output

    def test_output_is_deterministic(self, shop_graph):
        assert MarkdownExporter.to_markdown(shop_graph) == MarkdownExporter.to_markdown(shop_graph)


def test_format_number():
    assert format_number(375) == "375"
    assert format_number(375.0) == "375"
    assert format_number(0.3) == "0.3"
