"""
Serving side of figflow: the flow store, the external tool provider
client and the tool dispatcher that combines them.
"""

from .provider import JsonRpcToolProvider, ToolProvider, ToolProviderError
from .store import FlowEvent, FlowStore, StoredFlow
from .tools import LOCAL_TOOLS, FlowToolDispatcher, ToolResult

__all__ = [
    "JsonRpcToolProvider",
    "ToolProvider",
    "ToolProviderError",
    "FlowEvent",
    "FlowStore",
    "StoredFlow",
    "LOCAL_TOOLS",
    "FlowToolDispatcher",
    "ToolResult",
]
