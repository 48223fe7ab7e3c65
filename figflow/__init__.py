"""
figflow - Extract prototype flows from design documents.

Main APIs:
- DocumentSnapshot: Read a design document exported as JSON
- FlowExtractor: Walk a document and build a FlowGraph
- FlowStore: Keep the latest FlowGraph per document page
- FlowToolDispatcher: Serve flow graphs as tools, proxying unknown tools

Backends:
- MarkdownExporter: Tabular Markdown report
- MermaidExporter: Mermaid.js flowchart syntax
- GraphvizExporter: Graphviz DOT format
- JsonSerializer: Structured JSON
"""

from figflow.core.ir import FlowGraph, FlowScreen, FlowConnection, FlowInteraction, Trigger, Action
from figflow.core.serialization import JsonSerializer
from figflow.frontend import DocumentSnapshot, FlowExtractor, NodeSource, DesignNode
from figflow.backend import MarkdownExporter, MermaidExporter, GraphvizExporter, OutputFormat, render
from figflow.server import FlowStore, FlowToolDispatcher, JsonRpcToolProvider, ToolResult

__all__ = [
    # Core model
    "FlowGraph",
    "FlowScreen",
    "FlowConnection",
    "FlowInteraction",
    "Trigger",
    "Action",
    # Serialization
    "JsonSerializer",
    # Frontends
    "DocumentSnapshot",
    "FlowExtractor",
    "NodeSource",
    "DesignNode",
    # Backends
    "MarkdownExporter",
    "MermaidExporter",
    "GraphvizExporter",
    "OutputFormat",
    "render",
    # Serving
    "FlowStore",
    "FlowToolDispatcher",
    "JsonRpcToolProvider",
    "ToolResult",
]
