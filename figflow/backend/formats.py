"""Output format selection for rendered flow graphs."""

from enum import Enum
from typing import Optional

from figflow.backend.markdown import MarkdownExporter
from figflow.backend.mermaid import MermaidExporter
from figflow.core.ir import FlowGraph
from figflow.core.serialization import JsonSerializer


class OutputFormat(Enum):
    STRUCTURED = "json"
    TABULAR = "markdown"
    DIAGRAM = "mermaid"

    @classmethod
    def parse(cls, value: Optional[str]) -> "OutputFormat":
        """
        Accept a wire value (``json``) or a name (``structured``).

        Anything unrecognized, including None, selects STRUCTURED.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            for fmt in cls:
                if text in (fmt.value, fmt.name.lower()):
                    return fmt
        return cls.STRUCTURED


def render(graph: FlowGraph, fmt: Optional[str] = None) -> str:
    """Render ``graph`` as text in the requested format."""
    fmt = OutputFormat.parse(fmt)
    if fmt is OutputFormat.TABULAR:
        return MarkdownExporter.to_markdown(graph)
    if fmt is OutputFormat.DIAGRAM:
        return MermaidExporter.to_mermaid(graph)
    return JsonSerializer.to_json(graph)
