"""
In-memory store for extracted flow graphs.

Each graph is kept under ``{document}_{page}``; a later write for the same
key replaces the earlier one wholesale. The most recent write is also the
store's latest graph. Listeners are told about every write, and a new
listener first receives the latest graph as a snapshot.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from figflow.core.ir import FlowGraph
from figflow.core.serialization import JsonSerializer
from figflow.frontend.walker import utc_timestamp

logger = logging.getLogger(__name__)

INITIAL_DATA = "initial-data"
FLOW_DATA_UPDATED = "flow-data-updated"


@dataclass(frozen=True)
class StoredFlow:
    key: str
    graph: FlowGraph
    received_at: str

    def summary(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "receivedAt": self.received_at,
            "screens": len(self.graph.screens),
            "connections": len(self.graph.connections),
        }


@dataclass(frozen=True)
class FlowEvent:
    type: str
    key: str
    payload: Dict[str, Any] = field(default_factory=dict)
    graph: Optional[FlowGraph] = None


Listener = Callable[[FlowEvent], None]


class FlowStore:
    """Latest-value cache of flow graphs with listener fan-out."""

    def __init__(self, clock: Callable[[], str] = utc_timestamp):
        self._clock = clock
        self._entries: Dict[str, StoredFlow] = {}
        self._latest: Optional[StoredFlow] = None
        self._listeners: List[Listener] = []

    def store(self, graph: FlowGraph) -> str:
        """Store ``graph`` and notify listeners. Returns the store key."""
        key = graph.store_key
        entry = StoredFlow(key=key, graph=graph, received_at=self._clock())
        self._entries[key] = entry
        self._latest = entry

        logger.info(
            "Flow data received: %s (%d screens, %d connections)",
            key, len(graph.screens), len(graph.connections),
        )
        self._broadcast(FlowEvent(
            type=FLOW_DATA_UPDATED,
            key=key,
            payload={"screens": len(graph.screens), "connections": len(graph.connections)},
        ))
        return key

    def store_payload(self, payload: Dict[str, Any]) -> str:
        """Store a structured-format payload posted by the plugin."""
        return self.store(JsonSerializer.from_dict(payload))

    def latest(self) -> Optional[FlowGraph]:
        return self._latest.graph if self._latest else None

    def get(self, key: str) -> Optional[FlowGraph]:
        entry = self._entries.get(key)
        return entry.graph if entry else None

    def get_entry(self, key: str) -> Optional[StoredFlow]:
        return self._entries.get(key)

    def entries(self) -> List[StoredFlow]:
        return list(self._entries.values())

    def subscribe(self, listener: Listener) -> None:
        """Add ``listener``; it receives the latest graph first, if any."""
        self._listeners.append(listener)
        if self._latest is not None:
            self._deliver(listener, FlowEvent(
                type=INITIAL_DATA,
                key=self._latest.key,
                graph=self._latest.graph,
            ))

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _broadcast(self, event: FlowEvent) -> None:
        for listener in list(self._listeners):
            self._deliver(listener, event)

    @staticmethod
    def _deliver(listener: Listener, event: FlowEvent) -> None:
        try:
            listener(event)
        except Exception:
            logger.exception("Flow listener failed on %s event", event.type)
