from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

UNKNOWN_NAME = "Unknown"

# Node kinds that become screens in a flow graph.
CONTAINER_TYPES = frozenset({"FRAME", "COMPONENT", "COMPONENT_SET"})


class TriggerKind(Enum):
    """Normalized trigger kinds. Values are the raw document tags."""
    CLICK = "ON_CLICK"
    HOVER = "ON_HOVER"
    PRESS = "ON_PRESS"
    DRAG = "ON_DRAG"
    AFTER_TIMEOUT = "AFTER_TIMEOUT"
    MOUSE_ENTER = "MOUSE_ENTER"
    MOUSE_LEAVE = "MOUSE_LEAVE"
    MOUSE_UP = "MOUSE_UP"
    MOUSE_DOWN = "MOUSE_DOWN"
    KEY_DOWN = "ON_KEY_DOWN"
    OTHER = "OTHER"

    @classmethod
    def from_tag(cls, tag: str) -> "TriggerKind":
        for kind in cls:
            if kind is not cls.OTHER and kind.value == tag:
                return kind
        return cls.OTHER


class ActionKind(Enum):
    """Normalized action kinds. Values are the raw document tags."""
    BACK = "BACK"
    CLOSE = "CLOSE"
    OPEN_URL = "URL"
    SET_VARIABLE = "SET_VARIABLE"
    SET_VARIABLE_MODE = "SET_VARIABLE_MODE"
    CONDITIONAL = "CONDITIONAL"
    UPDATE_MEDIA = "UPDATE_MEDIA_RUNTIME"
    NODE = "NODE"
    OTHER = "OTHER"

    @classmethod
    def from_tag(cls, tag: str) -> "ActionKind":
        for kind in cls:
            if kind is not cls.OTHER and kind.value == tag:
                return kind
        return cls.OTHER


class NavigationKind(Enum):
    """Sub-kind of a NODE action, taken from its ``navigation`` attribute."""
    NAVIGATE = "NAVIGATE"
    SWAP = "SWAP"
    OVERLAY = "OVERLAY"
    SCROLL_TO = "SCROLL_TO"
    CHANGE_TO = "CHANGE_TO"
    UNSPECIFIED = "UNSPECIFIED"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "NavigationKind":
        for kind in cls:
            if kind is not cls.UNSPECIFIED and kind.value == tag:
                return kind
        return cls.UNSPECIFIED


TRIGGER_LABELS: Dict[TriggerKind, str] = {
    TriggerKind.CLICK: "Click",
    TriggerKind.HOVER: "Hover",
    TriggerKind.PRESS: "Press",
    TriggerKind.DRAG: "Drag",
    TriggerKind.MOUSE_ENTER: "Mouse enter",
    TriggerKind.MOUSE_LEAVE: "Mouse leave",
    TriggerKind.MOUSE_UP: "Mouse up",
    TriggerKind.MOUSE_DOWN: "Mouse down",
    TriggerKind.KEY_DOWN: "Key down",
}

ACTION_LABELS: Dict[ActionKind, str] = {
    ActionKind.BACK: "Back",
    ActionKind.CLOSE: "Close",
    ActionKind.OPEN_URL: "Open URL",
    ActionKind.SET_VARIABLE: "Set variable",
    ActionKind.SET_VARIABLE_MODE: "Set variable mode",
    ActionKind.CONDITIONAL: "Conditional",
    ActionKind.UPDATE_MEDIA: "Update media",
}

NAVIGATION_LABELS: Dict[NavigationKind, str] = {
    NavigationKind.NAVIGATE: "Navigate",
    NavigationKind.SWAP: "Swap",
    NavigationKind.OVERLAY: "Open overlay",
    NavigationKind.SCROLL_TO: "Scroll to",
    NavigationKind.CHANGE_TO: "Change to",
    NavigationKind.UNSPECIFIED: "Node action",
}


@dataclass(frozen=True)
class Trigger:
    """What starts an interaction. ``delay`` is set only for AFTER_TIMEOUT."""
    kind: TriggerKind
    raw: str
    delay: Optional[float] = None

    @property
    def label(self) -> str:
        if self.kind is TriggerKind.AFTER_TIMEOUT:
            delay = self.delay or 0
            if isinstance(delay, float) and delay.is_integer():
                delay = int(delay)
            return f"After {delay}ms"
        if self.kind is TriggerKind.OTHER:
            return self.raw
        return TRIGGER_LABELS[self.kind]


@dataclass(frozen=True)
class CubicBezier:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class Easing:
    type: str
    cubic_bezier: Optional[CubicBezier] = None


@dataclass(frozen=True)
class Transition:
    type: str
    duration: float
    easing: Easing


@dataclass(frozen=True)
class Overlay:
    position: str = "CENTER"
    offset_x: Optional[float] = None
    offset_y: Optional[float] = None


@dataclass(frozen=True)
class Action:
    """A single normalized action of a reaction record."""
    kind: ActionKind
    raw: str
    navigation: Optional[NavigationKind] = None
    destination_id: Optional[str] = None
    destination_name: Optional[str] = None
    url: Optional[str] = None
    transition: Optional[Transition] = None
    overlay: Optional[Overlay] = None

    @property
    def label(self) -> str:
        if self.kind is ActionKind.NODE:
            return NAVIGATION_LABELS[self.navigation or NavigationKind.UNSPECIFIED]
        if self.kind is ActionKind.OTHER:
            return self.raw
        return ACTION_LABELS[self.kind]


@dataclass(frozen=True)
class FlowInteraction:
    node_id: str
    node_name: str
    node_type: str
    trigger: Trigger
    actions: Tuple[Action, ...] = ()


@dataclass(frozen=True)
class FlowScreen:
    id: str
    name: str
    type: str
    width: float
    height: float
    interactions: Tuple[FlowInteraction, ...] = ()


@dataclass(frozen=True)
class FlowConnection:
    """An edge between two nodes, labelled by what triggers it."""
    from_node_id: str
    from_node_name: str
    to_node_id: str
    to_node_name: str
    trigger: str
    action_type: str
    transition: Optional[str] = None


@dataclass(frozen=True)
class FlowGraph:
    """The screens and connections found by one extraction."""
    document_name: str
    page_name: str
    extracted_at: str
    screens: Tuple[FlowScreen, ...] = field(default_factory=tuple)
    connections: Tuple[FlowConnection, ...] = field(default_factory=tuple)

    @property
    def store_key(self) -> str:
        return f"{self.document_name}_{self.page_name}"

    def interactive_screens(self) -> Tuple[FlowScreen, ...]:
        """Screens with at least one interaction."""
        return tuple(screen for screen in self.screens if screen.interactions)
