"""Demo serving a stored flow graph through the tool dispatcher.

The design-context half of ``get_full_context`` needs a running tool
provider at FIGFLOW_PROVIDER_URL; without one the report still prints,
with the design section marked as failed.
"""

import asyncio
import logging

from figflow.config import Settings
from figflow.frontend.nodes import DocumentSnapshot
from figflow.frontend.walker import FlowExtractor
from figflow.server.provider import JsonRpcToolProvider
from figflow.server.store import FlowStore
from figflow.server.tools import FlowToolDispatcher

document = {
    "name": "Tour",
    "children": [{
        "id": "0:1",
        "name": "Onboarding",
        "type": "CANVAS",
        "children": [
            {"id": "2:1", "name": "Welcome", "type": "FRAME", "width": 390, "height": 844,
             "reactions": [{"trigger": {"type": "AFTER_TIMEOUT", "timeout": 2000},
                            "actions": [{"type": "NODE", "destinationId": "2:2", "navigation": "NAVIGATE"}]}]},
            {"id": "2:2", "name": "Permissions", "type": "FRAME", "width": 390, "height": 844},
        ],
    }],
}


async def main():
    settings = Settings.from_env()
    store = FlowStore()
    store.subscribe(lambda event: print(f"[event] {event.type} {event.key} {event.payload}"))
    store.store(FlowExtractor(DocumentSnapshot(document)).extract_page())

    provider = JsonRpcToolProvider(settings.provider_url, timeout=settings.provider_timeout or 5)
    dispatcher = FlowToolDispatcher(store, provider)

    for name, arguments in [
        ("list_flow_screens", {}),
        ("get_flows", {"format": "mermaid"}),
        ("get_full_context", {"nodeId": "2:1"}),
    ]:
        result = await dispatcher.call_tool(name, arguments)
        print(f"=== {name} (error={result.is_error}) ===")
        print(result.text)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
