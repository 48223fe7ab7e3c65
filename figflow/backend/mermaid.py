from typing import Iterator, Tuple

from figflow.core.ir import FlowGraph

NO_DATA_LABEL = "No interactions found"


def sanitize_id(node_id: str) -> str:
    """Make a node id safe to use as a diagram identifier."""
    return node_id.replace(":", "_").replace("-", "_")


def iter_declarations(graph: FlowGraph) -> Iterator[Tuple[str, str]]:
    """
    Yield ``(sanitized_id, name)`` once per node, in first-seen order.

    Connections are scanned in graph order, source before destination.
    """
    seen = set()
    for conn in graph.connections:
        for node_id, name in ((conn.from_node_id, conn.from_node_name), (conn.to_node_id, conn.to_node_name)):
            sid = sanitize_id(node_id)
            if sid not in seen:
                seen.add(sid)
                yield sid, name


class MermaidExporter:
    """Exports a FlowGraph to a Mermaid.js flowchart."""

    @staticmethod
    def _sanitize(text: str) -> str:
        """Escape characters that would end a Mermaid label early."""
        return text.replace('"', "#quot;").replace("|", "#124;")

    @staticmethod
    def to_mermaid(graph: FlowGraph, direction: str = "TD") -> str:
        """
        Convert a flow graph to Mermaid flowchart syntax.

        Args:
            graph: The flow graph to convert
            direction: Flowchart direction (TD, LR, etc.)
        """
        lines = [f"flowchart {direction}"]

        if not graph.connections:
            lines.append(f"  NoData[{NO_DATA_LABEL}]")
            return "\n".join(lines) + "\n"

        for sid, name in iter_declarations(graph):
            lines.append(f'  {sid}["{MermaidExporter._sanitize(name)}"]')

        lines.append("")

        for conn in graph.connections:
            label = MermaidExporter._sanitize(conn.trigger)
            lines.append(f"  {sanitize_id(conn.from_node_id)} -->|{label}| {sanitize_id(conn.to_node_id)}")

        return "\n".join(lines) + "\n"
