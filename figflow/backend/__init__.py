"""Backend exporters for flow graphs."""

from figflow.backend.formats import OutputFormat, render
from figflow.backend.graphviz import GraphvizExporter
from figflow.backend.markdown import MarkdownExporter
from figflow.backend.mermaid import MermaidExporter

__all__ = [
    "GraphvizExporter",
    "MarkdownExporter",
    "MermaidExporter",
    "OutputFormat",
    "render",
]
