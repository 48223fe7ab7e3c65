from typing import List, Union

from figflow.core.ir import FlowGraph, FlowScreen


def format_number(value: Union[int, float]) -> str:
    """Render whole floats without a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class MarkdownExporter:
    """Exports a FlowGraph to a Markdown report with a transition table."""

    TABLE_HEADER = "| From | Trigger | Action | To | Transition |"
    TABLE_RULE = "|------|---------|--------|----|------------|"

    @staticmethod
    def _escape_cell(text: str) -> str:
        return text.replace("|", "\\|").replace("\n", " ")

    @staticmethod
    def _screen_section(screen: FlowScreen) -> List[str]:
        lines = [
            f"### {screen.name}",
            f"- ID: `{screen.id}`",
            f"- Type: {screen.type}",
            f"- Size: {format_number(screen.width)} x {format_number(screen.height)}",
            "",
            "#### Interactions",
        ]
        for interaction in screen.interactions:
            lines.append(f"- **{interaction.node_name}** ({interaction.node_type})")
            lines.append(f"  - Trigger: {interaction.trigger.label}")
            for action in interaction.actions:
                lines.append(f"  - Action: {action.label}")
                if action.destination_name:
                    lines.append(f"    - Destination: {action.destination_name}")
                if action.transition:
                    duration = format_number(action.transition.duration)
                    lines.append(f"    - Transition: {action.transition.type} ({duration}s)")
        lines.append("")
        return lines

    @staticmethod
    def to_markdown(graph: FlowGraph) -> str:
        """
        Convert a flow graph to a Markdown report.

        Screens without interactions are counted in the heading but get no
        section of their own.
        """
        lines = [
            f"# {graph.document_name} - {graph.page_name}",
            "",
            f"Extracted: {graph.extracted_at}",
            "",
            f"## Screens ({len(graph.screens)})",
            "",
        ]

        for screen in graph.interactive_screens():
            lines.extend(MarkdownExporter._screen_section(screen))

        if graph.connections:
            lines.append("## Screen Transitions")
            lines.append("")
            lines.append(MarkdownExporter.TABLE_HEADER)
            lines.append(MarkdownExporter.TABLE_RULE)
            for conn in graph.connections:
                cells = [
                    conn.from_node_name,
                    conn.trigger,
                    conn.action_type,
                    conn.to_node_name,
                    conn.transition or "-",
                ]
                lines.append("| " + " | ".join(MarkdownExporter._escape_cell(c) for c in cells) + " |")

        return "\n".join(lines) + "\n"
