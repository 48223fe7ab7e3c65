"""
Tree walker that turns a design document into a FlowGraph.

The walk is a pure pre-order traversal over an explicit stack. Each root
yields an immutable ``FlowFragment`` and fragments are concatenated left to
right, so screen and connection order always follows document order.

Example:
    extractor = FlowExtractor(DocumentSnapshot.from_file("app.json"))
    graph = extractor.extract_selection()
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional, Tuple

from figflow.core.ir import (
    CONTAINER_TYPES,
    FlowConnection,
    FlowGraph,
    FlowInteraction,
    FlowScreen,
    UNKNOWN_NAME,
)
from figflow.frontend.nodes import DesignNode, NodeSource
from figflow.frontend.normalizer import NameResolver, extract_interactions


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 text with a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class FlowFragment:
    """Screens and connections found in one subtree."""
    screens: Tuple[FlowScreen, ...] = ()
    connections: Tuple[FlowConnection, ...] = ()

    def __add__(self, other: "FlowFragment") -> "FlowFragment":
        return FlowFragment(self.screens + other.screens, self.connections + other.connections)


def connections_for(node: DesignNode, interactions: Iterable[FlowInteraction]) -> Tuple[FlowConnection, ...]:
    """One connection per action that names a destination."""
    connections = []
    for interaction in interactions:
        for action in interaction.actions:
            if not action.destination_id:
                continue
            connections.append(FlowConnection(
                from_node_id=node.id,
                from_node_name=node.name,
                to_node_id=action.destination_id,
                to_node_name=action.destination_name or UNKNOWN_NAME,
                trigger=interaction.trigger.label,
                action_type=action.label,
                transition=action.transition.type if action.transition else None,
            ))
    return tuple(connections)


def _visit(node: DesignNode, resolve: NameResolver) -> FlowFragment:
    """Screen and connections contributed by ``node`` alone."""
    interactions = extract_interactions(node, resolve)

    screens: Tuple[FlowScreen, ...] = ()
    if node.type in CONTAINER_TYPES:
        screens = (FlowScreen(
            id=node.id,
            name=node.name,
            type=node.type,
            width=node.width,
            height=node.height,
            interactions=interactions,
        ),)
    return FlowFragment(screens, connections_for(node, interactions))


def walk(
    node: DesignNode,
    resolve: NameResolver,
    children_of: Callable[[DesignNode], Iterable[DesignNode]] = lambda n: n.children,
) -> FlowFragment:
    """Collect screens and connections from ``node`` and its descendants."""
    screens: List[FlowScreen] = []
    connections: List[FlowConnection] = []
    stack = [node]
    while stack:
        current = stack.pop()
        part = _visit(current, resolve)
        screens.extend(part.screens)
        connections.extend(part.connections)
        # Reversed so the first child is popped next.
        stack.extend(reversed(list(children_of(current))))
    return FlowFragment(tuple(screens), tuple(connections))


def walk_all(
    roots: Iterable[DesignNode],
    resolve: NameResolver,
    children_of: Callable[[DesignNode], Iterable[DesignNode]] = lambda n: n.children,
) -> FlowFragment:
    fragment = FlowFragment()
    for root in roots:
        fragment = fragment + walk(root, resolve, children_of)
    return fragment


class FlowExtractor:
    """
    Builds FlowGraphs from a NodeSource.

    A new graph is built on every call; nothing is cached between
    extractions.
    """

    def __init__(self, source: NodeSource, clock: Callable[[], str] = utc_timestamp):
        self.source = source
        self.clock = clock

    def _resolve_name(self, node_id: str) -> Optional[str]:
        node = self.source.resolve_by_id(node_id)
        return node.name if node is not None else None

    def _build(self, roots: List[DesignNode]) -> FlowGraph:
        fragment = walk_all(roots, self._resolve_name, self.source.children_of)
        return FlowGraph(
            document_name=self.source.document_name,
            page_name=self.source.page_name,
            extracted_at=self.clock(),
            screens=fragment.screens,
            connections=fragment.connections,
        )

    def extract_page(self) -> FlowGraph:
        """Extract every top-level node of the current page."""
        return self._build(self.source.page_children())

    def extract_selection(self, nodes: Optional[List[DesignNode]] = None) -> FlowGraph:
        """
        Extract the given nodes, or the source's current selection.

        An empty selection extracts the whole page instead.
        """
        roots = list(nodes) if nodes is not None else self.source.current_selection()
        if not roots:
            return self.extract_page()
        return self._build(roots)
