import graphviz

from figflow.backend.mermaid import NO_DATA_LABEL, iter_declarations, sanitize_id
from figflow.core.ir import FlowGraph


class GraphvizExporter:
    """Exports a FlowGraph to Graphviz/Dot format or renders it."""

    SCREEN_SHAPE = "box"

    @staticmethod
    def to_digraph(graph: FlowGraph, rankdir: str = "TB") -> graphviz.Digraph:
        """
        Converts a FlowGraph to a graphviz.Digraph object.

        Node identities and declaration order match the Mermaid output.
        """
        title = f"{graph.document_name} - {graph.page_name}"
        dot = graphviz.Digraph(name=title, comment=title)
        dot.attr(rankdir=rankdir)

        if not graph.connections:
            dot.node("NoData", label=NO_DATA_LABEL, shape="plaintext")
            return dot

        for sid, name in iter_declarations(graph):
            dot.node(sid, label=name, shape=GraphvizExporter.SCREEN_SHAPE)

        for conn in graph.connections:
            dot.edge(sanitize_id(conn.from_node_id), sanitize_id(conn.to_node_id), label=conn.trigger)

        return dot

    @staticmethod
    def to_dot(graph: FlowGraph) -> str:
        """Returns the DOT source string for the flow graph."""
        return GraphvizExporter.to_digraph(graph).source

    @staticmethod
    def to_svg(graph: FlowGraph) -> str:
        """
        Render the flow graph to an SVG string.

        Raises:
            RuntimeError: If the Graphviz ``dot`` executable is not installed
        """
        try:
            svg_bytes = GraphvizExporter.to_digraph(graph).pipe(format="svg")
        except graphviz.ExecutableNotFound as e:
            raise RuntimeError(
                "Graphviz executable not found. "
                "Please install Graphviz: https://graphviz.org/download/"
            ) from e
        return svg_bytes.decode("utf-8")
