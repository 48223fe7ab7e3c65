"""Normalization of raw reaction records into FlowInteractions."""

from numbers import Real
from typing import Any, Callable, Mapping, Optional, Tuple

from figflow.core.ir import (
    Action,
    ActionKind,
    CubicBezier,
    Easing,
    FlowInteraction,
    NavigationKind,
    Overlay,
    Transition,
    Trigger,
    TriggerKind,
    UNKNOWN_NAME,
)
from figflow.frontend.nodes import DesignNode

CUSTOM_CUBIC_BEZIER = "CUSTOM_CUBIC_BEZIER"

# Maps a node id to its display name, or None when the node does not exist.
NameResolver = Callable[[str], Optional[str]]


def _number(value: Any) -> Optional[float]:
    if isinstance(value, Real) and not isinstance(value, bool):
        return value
    return None


def _resolve_name(resolve: NameResolver, node_id: str) -> str:
    try:
        name = resolve(node_id)
    except LookupError:
        name = None
    return name if name else UNKNOWN_NAME


def normalize_trigger(raw: Mapping[str, Any]) -> Trigger:
    tag = raw.get("type") or ""
    kind = TriggerKind.from_tag(tag)
    delay = None
    if kind is TriggerKind.AFTER_TIMEOUT:
        delay = _number(raw.get("timeout")) or 0
    return Trigger(kind=kind, raw=tag, delay=delay)


def _cubic_bezier(points: Any) -> Optional[CubicBezier]:
    """Control points, or None unless all four coordinates are numbers."""
    if not isinstance(points, Mapping):
        return None
    coords = [_number(points.get(k)) for k in ("x1", "y1", "x2", "y2")]
    if any(c is None for c in coords):
        return None
    return CubicBezier(*coords)


def extract_transition(raw: Mapping[str, Any]) -> Optional[Transition]:
    """Transition of a NODE action, or None when it declares none."""
    if raw.get("type") != ActionKind.NODE.value or not raw.get("transition"):
        return None
    transition = raw["transition"]
    if not isinstance(transition, Mapping):
        return None
    easing = transition.get("easing")
    if not isinstance(easing, Mapping):
        easing = {}
    easing_type = easing.get("type", "")

    # Bezier points only make sense for the custom curve; other easings may
    # still carry leftover points from an earlier edit.
    bezier = None
    if easing_type == CUSTOM_CUBIC_BEZIER:
        bezier = _cubic_bezier(easing.get("easingFunctionCubicBezier"))

    return Transition(
        type=transition.get("type", ""),
        duration=_number(transition.get("duration")) or 0,
        easing=Easing(type=easing_type, cubic_bezier=bezier),
    )


def extract_overlay(raw: Mapping[str, Any]) -> Overlay:
    position = raw.get("overlayRelativePosition")
    if isinstance(position, str):
        return Overlay(position=position)
    offset_x = offset_y = None
    if isinstance(position, Mapping):
        offset_x = _number(position.get("x"))
        offset_y = _number(position.get("y"))
    return Overlay(position="CENTER", offset_x=offset_x, offset_y=offset_y)


def normalize_action(raw: Mapping[str, Any], resolve: NameResolver) -> Action:
    tag = raw.get("type") or ""
    kind = ActionKind.from_tag(tag)

    if kind is ActionKind.OPEN_URL:
        url = raw.get("url")
        return Action(kind=kind, raw=tag, url=url, destination_name=url)

    if kind is not ActionKind.NODE:
        return Action(kind=kind, raw=tag)

    navigation = NavigationKind.from_tag(raw.get("navigation"))
    destination_id = raw.get("destinationId")
    return Action(
        kind=kind,
        raw=tag,
        navigation=navigation,
        destination_id=destination_id,
        destination_name=_resolve_name(resolve, destination_id) if destination_id else None,
        transition=extract_transition(raw),
        overlay=extract_overlay(raw) if navigation is NavigationKind.OVERLAY else None,
    )


def normalize_reaction(node: DesignNode, reaction: Mapping[str, Any], resolve: NameResolver) -> Optional[FlowInteraction]:
    """
    Normalize one reaction record of ``node``.

    Returns None for records without a trigger. Records written with the
    legacy single ``action`` field are read as a one-action list.
    """
    trigger = reaction.get("trigger")
    if not trigger:
        return None

    actions = reaction.get("actions")
    if actions is None:
        legacy = reaction.get("action")
        actions = [legacy] if legacy else []

    return FlowInteraction(
        node_id=node.id,
        node_name=node.name,
        node_type=node.type,
        trigger=normalize_trigger(trigger),
        actions=tuple(normalize_action(a, resolve) for a in actions if a),
    )


def extract_interactions(node: DesignNode, resolve: NameResolver) -> Tuple[FlowInteraction, ...]:
    interactions = []
    for reaction in node.reactions:
        interaction = normalize_reaction(node, reaction, resolve)
        if interaction is not None:
            interactions.append(interaction)
    return tuple(interactions)
