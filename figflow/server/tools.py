"""
Tool dispatch for flow graphs.

Local tools read the latest graph from a FlowStore. Any other tool name is
forwarded to the external ToolProvider. ``call_tool`` never raises: every
failure becomes a ToolResult with ``is_error`` set.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional

from figflow.backend.formats import OutputFormat, render
from figflow.backend.markdown import MarkdownExporter
from figflow.server.provider import ToolProvider, ToolProviderError
from figflow.server.store import FlowStore

logger = logging.getLogger(__name__)

NO_FLOW_DATA = (
    "No flow data available. Please extract flow data from the design tool "
    "using the flow extractor plugin first."
)
DESIGN_CONTEXT_TOOL = "get_design_context"

LOCAL_TOOLS: List[Dict[str, Any]] = [
    {
        "name": "get_flows",
        "description": (
            "Get prototype flow information (interactions, transitions, navigation). "
            "Includes trigger types, destination screens and animation settings."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "format": {
                    "type": "string",
                    "enum": [fmt.value for fmt in OutputFormat],
                    "description": "Output format for the flow data",
                    "default": OutputFormat.STRUCTURED.value,
                },
            },
        },
    },
    {
        "name": "get_full_context",
        "description": (
            "Get design metadata for a node from the design tool provider together "
            "with the flow and interaction report."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "nodeId": {
                    "type": "string",
                    "description": "The ID of the node in the design document",
                },
                "includeFlows": {
                    "type": "boolean",
                    "description": "Whether to include flow/interaction data",
                    "default": True,
                },
            },
        },
    },
    {
        "name": "list_flow_screens",
        "description": "List all screens/frames that have interactions defined",
        "inputSchema": {"type": "object", "properties": {}},
    },
    {
        "name": "list_flows",
        "description": "List all stored flow data with screen and connection counts",
        "inputSchema": {"type": "object", "properties": {}},
    },
]


@dataclass(frozen=True)
class ToolResult:
    text: str
    is_error: bool = False

    @classmethod
    def error(cls, text: str) -> "ToolResult":
        return cls(text=text, is_error=True)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": [{"type": "text", "text": self.text}],
            "isError": self.is_error,
        }


def _result_text(result: Dict[str, Any]) -> str:
    parts = [item.get("text", "") for item in result.get("content") or [] if isinstance(item, dict)]
    return "\n".join(p for p in parts if p)


Handler = Callable[[Dict[str, Any]], Awaitable[ToolResult]]


class FlowToolDispatcher:
    """Routes tool calls to local handlers or to the external provider."""

    def __init__(self, store: FlowStore, provider: ToolProvider):
        self.store = store
        self.provider = provider
        self._handlers: Dict[str, Handler] = {
            "get_flows": self.get_flows,
            "get_full_context": self.get_full_context,
            "list_flow_screens": self.list_flow_screens,
            "list_flows": self.list_flows,
        }

    async def list_tools(self) -> List[Dict[str, Any]]:
        """Local tool descriptors followed by the provider's tools."""
        try:
            remote = list(await self.provider.list_tools() or [])
        except Exception as e:
            logger.warning("Failed to fetch provider tools: %s", e)
            remote = []
        local_names = set(self._handlers)
        return list(LOCAL_TOOLS) + [
            t for t in remote
            if isinstance(t, dict) and t.get("name") not in local_names
        ]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        arguments = arguments or {}
        handler = self._handlers.get(name)
        try:
            if handler is not None:
                return await handler(arguments)
            return await self.forward(name, arguments)
        except Exception as e:
            logger.exception("Tool %s failed", name)
            return ToolResult.error(f"Tool {name} failed: {e}")

    async def forward(self, name: str, arguments: Dict[str, Any]) -> ToolResult:
        """Forward a call to the provider, keeping its content as text."""
        try:
            result = await self.provider.call_tool(name, arguments)
        except ToolProviderError as e:
            logger.warning("Proxy call %s failed: %s", name, e)
            return ToolResult.error(f"Failed to proxy to tool provider: {e}")
        return ToolResult(text=_result_text(result), is_error=bool(result.get("isError")))

    async def get_flows(self, arguments: Dict[str, Any]) -> ToolResult:
        graph = self.store.latest()
        if graph is None:
            return ToolResult(NO_FLOW_DATA)
        return ToolResult(render(graph, arguments.get("format")))

    async def get_full_context(self, arguments: Dict[str, Any]) -> ToolResult:
        """
        Combine the provider's design context with the local flow report.

        A provider failure only replaces the design section with a failure
        note; the flow section is still returned in full.
        """
        sections = ["## Design Context\n"]
        try:
            design = await self.provider.call_tool(DESIGN_CONTEXT_TOOL, {"nodeId": arguments.get("nodeId")})
            if design.get("isError"):
                raise ToolProviderError(_result_text(design) or "provider returned an error")
            sections.append(json.dumps(design, indent=2, ensure_ascii=False))
        except Exception as e:
            logger.warning("Design context unavailable: %s", e)
            sections.append(f"Failed to fetch design context: {e}")

        if arguments.get("includeFlows", True) is not False:
            sections.append("\n\n## Flow & Interactions\n")
            graph = self.store.latest()
            sections.append(MarkdownExporter.to_markdown(graph) if graph is not None else NO_FLOW_DATA)

        return ToolResult("\n".join(sections))

    async def list_flow_screens(self, arguments: Dict[str, Any]) -> ToolResult:
        graph = self.store.latest()
        if graph is None:
            return ToolResult(NO_FLOW_DATA)
        screens = [
            {"id": s.id, "name": s.name, "interactionCount": len(s.interactions)}
            for s in graph.interactive_screens()
        ]
        return ToolResult(json.dumps(screens, indent=2, ensure_ascii=False))

    async def list_flows(self, arguments: Dict[str, Any]) -> ToolResult:
        entries = [entry.summary() for entry in self.store.entries()]
        return ToolResult(json.dumps(entries, indent=2, ensure_ascii=False))
