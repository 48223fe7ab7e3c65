"""Demo extracting a small prototype and printing every output format.

Run with:
    python examples/demo.py
"""

from figflow.backend.graphviz import GraphvizExporter
from figflow.backend.markdown import MarkdownExporter
from figflow.backend.mermaid import MermaidExporter
from figflow.core.serialization import JsonSerializer
from figflow.frontend.nodes import DocumentSnapshot
from figflow.frontend.walker import FlowExtractor


def click_to(destination_id, navigation="NAVIGATE"):
    return {
        "trigger": {"type": "ON_CLICK"},
        "actions": [{
            "type": "NODE",
            "destinationId": destination_id,
            "navigation": navigation,
            "transition": {"type": "SMART_ANIMATE", "duration": 0.3, "easing": {"type": "EASE_OUT"}},
        }],
    }


document = {
    "name": "Login Prototype",
    "children": [{
        "id": "0:1",
        "name": "Mobile",
        "type": "CANVAS",
        "children": [
            {"id": "1:1", "name": "Login", "type": "FRAME", "width": 390, "height": 844,
             "reactions": [click_to("1:2")],
             "children": [
                 {"id": "1:5", "name": "Forgot password", "type": "TEXT",
                  "reactions": [{"trigger": {"type": "ON_CLICK"},
                                 "actions": [{"type": "URL", "url": "https://example.com/reset"}]}]},
             ]},
            {"id": "1:2", "name": "Home", "type": "FRAME", "width": 390, "height": 844,
             "reactions": [click_to("1:3", navigation="OVERLAY")]},
            {"id": "1:3", "name": "Menu", "type": "COMPONENT", "width": 280, "height": 600,
             "reactions": [{"trigger": {"type": "ON_CLICK"}, "actions": [{"type": "CLOSE"}]}]},
        ],
    }],
}


if __name__ == "__main__":
    graph = FlowExtractor(DocumentSnapshot(document)).extract_page()

    print("=== JSON ===")
    print(JsonSerializer.to_json(graph))
    print("\n=== Markdown ===")
    print(MarkdownExporter.to_markdown(graph))
    print("=== Mermaid ===")
    print(MermaidExporter.to_mermaid(graph))
    print("=== DOT ===")
    print(GraphvizExporter.to_dot(graph))
