"""Core data structures for figflow flow graphs."""

from .ir import (
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
)
from .serialization import JsonSerializer

__all__ = [
    "Action",
    "ActionKind",
    "CubicBezier",
    "Easing",
    "FlowConnection",
    "FlowGraph",
    "FlowInteraction",
    "FlowScreen",
    "NavigationKind",
    "Overlay",
    "Transition",
    "Trigger",
    "TriggerKind",
    "JsonSerializer",
]
