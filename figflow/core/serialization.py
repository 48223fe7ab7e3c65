"""
JSON serialization for FlowGraph objects.

The serialized format is the structured output format of figflow and the
payload format posted by the design-tool plugin. Keys are camelCase and
optional fields are omitted rather than written as null.

Each trigger and action carries its display label under ``type`` and the
document tag under ``rawType``. Payloads without ``rawType`` (older plugin
builds) load as OTHER variants whose label is the posted text.
"""

import json
from typing import Any, Dict, Optional

from figflow.core.ir import (
    Action,
    ActionKind,
    CubicBezier,
    Easing,
    FlowConnection,
    FlowGraph,
    FlowInteraction,
    FlowScreen,
    NavigationKind,
    Overlay,
    Transition,
    Trigger,
    TriggerKind,
    UNKNOWN_NAME,
)


def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


class JsonSerializer:
    """Serializes and deserializes FlowGraph objects to/from JSON."""

    @staticmethod
    def trigger_to_dict(trigger: Trigger) -> Dict[str, Any]:
        return _compact({
            "type": trigger.label,
            "rawType": trigger.raw,
            "delay": trigger.delay,
        })

    @staticmethod
    def transition_to_dict(transition: Transition) -> Dict[str, Any]:
        easing: Dict[str, Any] = {"type": transition.easing.type}
        bezier = transition.easing.cubic_bezier
        if bezier is not None:
            easing["easingFunctionCubicBezier"] = {
                "x1": bezier.x1,
                "y1": bezier.y1,
                "x2": bezier.x2,
                "y2": bezier.y2,
            }
        return {
            "type": transition.type,
            "duration": transition.duration,
            "easing": easing,
        }

    @staticmethod
    def action_to_dict(action: Action) -> Dict[str, Any]:
        overlay = None
        if action.overlay is not None:
            overlay = _compact({
                "position": action.overlay.position,
                "offsetX": action.overlay.offset_x,
                "offsetY": action.overlay.offset_y,
            })
        return _compact({
            "type": action.label,
            "rawType": action.raw,
            "navigation": action.navigation.value if action.navigation else None,
            "destinationId": action.destination_id,
            "destinationName": action.destination_name,
            "url": action.url,
            "transition": JsonSerializer.transition_to_dict(action.transition) if action.transition else None,
            "overlay": overlay,
        })

    @staticmethod
    def interaction_to_dict(interaction: FlowInteraction) -> Dict[str, Any]:
        return {
            "nodeId": interaction.node_id,
            "nodeName": interaction.node_name,
            "nodeType": interaction.node_type,
            "trigger": JsonSerializer.trigger_to_dict(interaction.trigger),
            "actions": [JsonSerializer.action_to_dict(a) for a in interaction.actions],
        }

    @staticmethod
    def to_dict(graph: FlowGraph) -> Dict[str, Any]:
        screens_data = []
        for screen in graph.screens:
            screens_data.append({
                "id": screen.id,
                "name": screen.name,
                "type": screen.type,
                "width": screen.width,
                "height": screen.height,
                "interactions": [JsonSerializer.interaction_to_dict(i) for i in screen.interactions],
            })

        connections_data = []
        for conn in graph.connections:
            connections_data.append(_compact({
                "fromNodeId": conn.from_node_id,
                "fromNodeName": conn.from_node_name,
                "toNodeId": conn.to_node_id,
                "toNodeName": conn.to_node_name,
                "trigger": conn.trigger,
                "actionType": conn.action_type,
                "transition": conn.transition,
            }))

        return {
            "documentName": graph.document_name,
            "pageName": graph.page_name,
            "extractedAt": graph.extracted_at,
            "screens": screens_data,
            "flowConnections": connections_data,
        }

    @staticmethod
    def to_json(graph: FlowGraph, indent: int = 2) -> str:
        return json.dumps(JsonSerializer.to_dict(graph), indent=indent, ensure_ascii=False)

    @staticmethod
    def _trigger_from_dict(data: Dict[str, Any]) -> Trigger:
        raw = data.get("rawType") or data.get("type") or ""
        kind = TriggerKind.from_tag(raw)
        delay = data.get("delay")
        if kind is TriggerKind.AFTER_TIMEOUT and delay is None:
            delay = 0
        return Trigger(kind=kind, raw=raw, delay=delay)

    @staticmethod
    def _transition_from_dict(data: Optional[Dict[str, Any]]) -> Optional[Transition]:
        if not data:
            return None
        easing_data = data.get("easing") or {}
        bezier_data = easing_data.get("easingFunctionCubicBezier")
        bezier = None
        if bezier_data:
            bezier = CubicBezier(
                x1=bezier_data["x1"],
                y1=bezier_data["y1"],
                x2=bezier_data["x2"],
                y2=bezier_data["y2"],
            )
        return Transition(
            type=data.get("type", ""),
            duration=data.get("duration", 0),
            easing=Easing(type=easing_data.get("type", ""), cubic_bezier=bezier),
        )

    @staticmethod
    def _action_from_dict(data: Dict[str, Any]) -> Action:
        raw = data.get("rawType") or data.get("type") or ""
        kind = ActionKind.from_tag(raw)
        navigation = None
        if kind is ActionKind.NODE:
            navigation = NavigationKind.from_tag(data.get("navigation"))
        overlay = None
        overlay_data = data.get("overlay")
        if overlay_data:
            overlay = Overlay(
                position=overlay_data.get("position", "CENTER"),
                offset_x=overlay_data.get("offsetX"),
                offset_y=overlay_data.get("offsetY"),
            )
        return Action(
            kind=kind,
            raw=raw,
            navigation=navigation,
            destination_id=data.get("destinationId"),
            destination_name=data.get("destinationName"),
            url=data.get("url"),
            transition=JsonSerializer._transition_from_dict(data.get("transition")),
            overlay=overlay,
        )

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> FlowGraph:
        screens = []
        for screen_data in data.get("screens") or []:
            interactions = tuple(
                FlowInteraction(
                    node_id=item.get("nodeId", ""),
                    node_name=item.get("nodeName", ""),
                    node_type=item.get("nodeType", ""),
                    trigger=JsonSerializer._trigger_from_dict(item.get("trigger") or {}),
                    actions=tuple(JsonSerializer._action_from_dict(a) for a in item.get("actions") or []),
                )
                for item in screen_data.get("interactions") or []
            )
            screens.append(FlowScreen(
                id=screen_data.get("id", ""),
                name=screen_data.get("name", ""),
                type=screen_data.get("type", ""),
                width=screen_data.get("width", 0),
                height=screen_data.get("height", 0),
                interactions=interactions,
            ))

        connections = tuple(
            FlowConnection(
                from_node_id=conn["fromNodeId"],
                from_node_name=conn.get("fromNodeName", ""),
                to_node_id=conn["toNodeId"],
                to_node_name=conn.get("toNodeName") or UNKNOWN_NAME,
                trigger=conn.get("trigger", ""),
                action_type=conn.get("actionType", ""),
                transition=conn.get("transition"),
            )
            for conn in data.get("flowConnections") or []
        )

        return FlowGraph(
            document_name=data.get("documentName", ""),
            page_name=data.get("pageName", ""),
            extracted_at=data.get("extractedAt", ""),
            screens=tuple(screens),
            connections=connections,
        )

    @staticmethod
    def from_json(json_str: str) -> FlowGraph:
        data = json.loads(json_str)
        return JsonSerializer.from_dict(data)
