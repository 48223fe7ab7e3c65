"""
Design document nodes and the sources that supply them.

A ``NodeSource`` is the read-only view of a design document that the
extractor walks. ``DocumentSnapshot`` implements it over a JSON export of a
document, accepting both the plugin shape (``reactions``, ``width`` and
``height`` on each node) and the REST file shape (``interactions`` and
``absoluteBoundingBox``).

Example:
    source = DocumentSnapshot.from_file("checkout.json")
    graph = FlowExtractor(source).extract_page()
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union


class SnapshotError(ValueError):
    """Raised when a document snapshot cannot be read."""


@dataclass(frozen=True)
class DesignNode:
    """A node of the design document. Never mutated by figflow."""
    id: str
    name: str
    type: str
    width: float = 0
    height: float = 0
    children: Tuple["DesignNode", ...] = ()
    reactions: Tuple[Mapping[str, Any], ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DesignNode":
        box = data.get("absoluteBoundingBox") or {}
        width = data.get("width", box.get("width", 0))
        height = data.get("height", box.get("height", 0))
        reactions = data.get("reactions")
        if reactions is None:
            reactions = data.get("interactions") or ()
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name", ""),
            type=data.get("type", ""),
            width=width,
            height=height,
            children=tuple(cls.from_dict(child) for child in data.get("children") or ()),
            reactions=tuple(reactions),
        )


class NodeSource(ABC):
    """
    Read-only access to a design document.

    Subclasses supply the current page, node lookup and the selection; the
    extractor never reaches into the document any other way.
    """

    @property
    @abstractmethod
    def document_name(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def page_name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def page_children(self) -> List[DesignNode]:
        """Top-level nodes of the current page, in document order."""
        raise NotImplementedError

    def children_of(self, node: DesignNode) -> List[DesignNode]:
        return list(node.children)

    @abstractmethod
    def resolve_by_id(self, node_id: str) -> Optional[DesignNode]:
        raise NotImplementedError

    def current_selection(self) -> List[DesignNode]:
        return []


class DocumentSnapshot(NodeSource):
    """A NodeSource backed by a JSON document export."""

    def __init__(self, data: Mapping[str, Any], page: Optional[str] = None, selection: Optional[List[str]] = None):
        root = data.get("document", data)
        self._document_name = data.get("name") or root.get("name") or "Untitled"

        pages = [DesignNode.from_dict(p) for p in root.get("children") or ()]
        if not pages:
            raise SnapshotError("Document has no pages")
        self._page = self._select_page(pages, page or data.get("currentPage"))

        self._index: Dict[str, DesignNode] = {}
        for p in pages:
            self._index_node(p)

        selected_ids = selection if selection is not None else data.get("selection") or []
        self._selection = [self._index[i] for i in selected_ids if i in self._index]

    @staticmethod
    def _select_page(pages: List[DesignNode], wanted: Optional[str]) -> DesignNode:
        if wanted is None:
            for p in pages:
                if p.type == "CANVAS":
                    return p
            return pages[0]
        for p in pages:
            if wanted in (p.id, p.name):
                return p
        raise SnapshotError(f"Page not found: {wanted}")

    def _index_node(self, node: DesignNode) -> None:
        self._index[node.id] = node
        for child in node.children:
            self._index_node(child)

    @classmethod
    def from_file(cls, path: Union[str, Path], page: Optional[str] = None) -> "DocumentSnapshot":
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise SnapshotError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(data, dict):
            raise SnapshotError(f"Expected a JSON object in {path}")
        return cls(data, page=page)

    @property
    def document_name(self) -> str:
        return self._document_name

    @property
    def page_name(self) -> str:
        return self._page.name

    def page_children(self) -> List[DesignNode]:
        return list(self._page.children)

    def resolve_by_id(self, node_id: str) -> Optional[DesignNode]:
        return self._index.get(node_id)

    def current_selection(self) -> List[DesignNode]:
        return list(self._selection)
