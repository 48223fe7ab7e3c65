"""
figflow frontend modules for reading design documents.

- DocumentSnapshot: NodeSource over a JSON document export
- FlowExtractor: Walks a NodeSource and builds a FlowGraph
"""

from .nodes import DesignNode, DocumentSnapshot, NodeSource, SnapshotError
from .normalizer import extract_interactions, normalize_action, normalize_reaction, normalize_trigger
from .walker import FlowExtractor, FlowFragment, walk, walk_all

__all__ = [
    "DesignNode",
    "DocumentSnapshot",
    "NodeSource",
    "SnapshotError",
    "extract_interactions",
    "normalize_action",
    "normalize_reaction",
    "normalize_trigger",
    "FlowExtractor",
    "FlowFragment",
    "walk",
    "walk_all",
]
