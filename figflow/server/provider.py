"""
Client for the external tool provider.

The provider speaks JSON-RPC 2.0 over HTTP POST and exposes the
``tools/list`` and ``tools/call`` methods. Every failure (connection,
timeout, malformed body, JSON-RPC error member) surfaces as
``ToolProviderError``.
"""

import asyncio
import itertools
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import aiohttp

logger = logging.getLogger(__name__)


class ToolProviderError(RuntimeError):
    """Raised when the external tool provider cannot answer a request."""


class ToolProvider(ABC):
    """Interface of a remote tool source."""

    @abstractmethod
    async def list_tools(self) -> List[Dict[str, Any]]:
        raise NotImplementedError

    @abstractmethod
    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        raise NotImplementedError


class JsonRpcToolProvider(ToolProvider):
    """ToolProvider reached through JSON-RPC requests posted with aiohttp."""

    def __init__(self, url: str, timeout: Optional[float] = None):
        self.url = url
        self.timeout = timeout
        self._ids = itertools.count(1)

    async def _request(self, method: str, params: Optional[Dict[str, Any]] = None) -> Any:
        payload: Dict[str, Any] = {"jsonrpc": "2.0", "method": method, "id": next(self._ids)}
        if params is not None:
            payload["params"] = params

        logger.debug("Provider request %s -> %s", method, self.url)
        try:
            async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout)) as session:
                async with session.post(self.url, json=payload) as response:
                    body = await response.json(content_type=None)
        except asyncio.TimeoutError as e:
            raise ToolProviderError(f"{method} timed out after {self.timeout}s") from e
        except aiohttp.ClientError as e:
            raise ToolProviderError(f"{method} request to {self.url} failed: {e}") from e
        except ValueError as e:
            raise ToolProviderError(f"{method} returned invalid JSON: {e}") from e

        if not isinstance(body, dict):
            raise ToolProviderError(f"{method} returned an unexpected body")

        error = body.get("error")
        if error:
            message = error.get("message", str(error)) if isinstance(error, dict) else str(error)
            raise ToolProviderError(f"Error from tool provider: {message}")

        return body.get("result")

    async def list_tools(self) -> List[Dict[str, Any]]:
        result = await self._request("tools/list")
        tools = result.get("tools") if isinstance(result, dict) else None
        return list(tools or [])

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        result = await self._request("tools/call", {"name": name, "arguments": arguments or {}})
        if not isinstance(result, dict):
            raise ToolProviderError(f"tools/call {name} returned no result")
        return result
