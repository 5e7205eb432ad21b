"""Raw input state and mapping of device inputs to player actions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional

from promethean.events import EventBus

NUM_SCANCODES = 512
MOUSE_BUTTON_COUNT = 8


class PlayerAction(enum.Enum):
    """Logical player actions decoupled from input devices."""

    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    MOVE_UP = 2
    MOVE_DOWN = 3
    JUMP = 4
    CONFIRM = 5
    CANCEL = 6


@dataclass(frozen=True)
class ActionStateChangedEvent:
    """Published when a mapped action changes state."""

    action: PlayerAction
    pressed: bool


class EventType(enum.Enum):
    KEY_DOWN = "key_down"
    KEY_UP = "key_up"
    MOUSE_BUTTON_DOWN = "mouse_button_down"
    MOUSE_BUTTON_UP = "mouse_button_up"
    MOUSE_MOTION = "mouse_motion"
    FINGER_DOWN = "finger_down"
    FINGER_UP = "finger_up"


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    w: int
    h: int

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h


@dataclass(frozen=True)
class KeyEvent:
    type: EventType
    scancode: int


@dataclass(frozen=True)
class MouseButtonEvent:
    type: EventType
    button: int
    x: float
    y: float


@dataclass(frozen=True)
class MouseMotionEvent:
    x: float
    y: float
    type: EventType = field(default=EventType.MOUSE_MOTION, init=False)


@dataclass(frozen=True)
class FingerEvent:
    type: EventType
    x: float
    y: float


class ActionMapper:
    """Maps keys and touch areas to player actions."""

    def __init__(self, bus: Optional[EventBus] = None) -> None:
        self._bus = bus if bus is not None else EventBus.instance()
        self._key_to_action: dict[int, PlayerAction] = {}
        self._touch_areas: list[tuple[Rect, PlayerAction]] = []
        self._pressed: set[PlayerAction] = set()

    def map_key(self, scancode: int, action: PlayerAction) -> None:
        self._key_to_action[scancode] = action

    def map_touch_area(self, area: Rect, action: PlayerAction) -> None:
        self._touch_areas.append((area, action))

    def is_action_pressed(self, action: PlayerAction) -> bool:
        return action in self._pressed

    def _set(self, action: PlayerAction, pressed: bool) -> None:
        if (action in self._pressed) == pressed:
            return
        if pressed:
            self._pressed.add(action)
        else:
            self._pressed.discard(action)
        self._bus.publish(ActionStateChangedEvent(action, pressed))

    def handle_event(self, event: Any) -> None:
        """Update action states from an input event."""
        if isinstance(event, KeyEvent) and event.type in (EventType.KEY_DOWN, EventType.KEY_UP):
            action = self._key_to_action.get(event.scancode)
            if action is not None:
                self._set(action, event.type is EventType.KEY_DOWN)
        elif isinstance(event, FingerEvent) and event.type in (
            EventType.FINGER_DOWN,
            EventType.FINGER_UP,
        ):
            x, y = int(event.x), int(event.y)
            down = event.type is EventType.FINGER_DOWN
            for area, action in self._touch_areas:
                if area.contains(x, y):
                    self._set(action, down)


class InputManager:
    """Keeps raw device state and forwards events to an action mapper."""

    def __init__(self, bus: Optional[EventBus] = None) -> None:
        self._bus = bus
        self._keys: set[int] = set()
        self._mouse_buttons: set[int] = set()
        self._pointer_down = False
        self._pointer_x = 0.0
        self._pointer_y = 0.0
        self._mapper = ActionMapper(bus)

    def handle_event(self, event: Any) -> None:
        """Process an input event to update state."""
        if isinstance(event, KeyEvent):
            if 0 <= event.scancode < NUM_SCANCODES:
                if event.type is EventType.KEY_DOWN:
                    self._keys.add(event.scancode)
                elif event.type is EventType.KEY_UP:
                    self._keys.discard(event.scancode)
        elif isinstance(event, MouseButtonEvent):
            down = event.type is EventType.MOUSE_BUTTON_DOWN
            if 0 <= event.button < MOUSE_BUTTON_COUNT:
                if down:
                    self._mouse_buttons.add(event.button)
                else:
                    self._mouse_buttons.discard(event.button)
            self._pointer_down = down
            self._pointer_x = float(event.x)
            self._pointer_y = float(event.y)
        elif isinstance(event, MouseMotionEvent):
            self._pointer_x = float(event.x)
            self._pointer_y = float(event.y)
        elif isinstance(event, FingerEvent):
            self._pointer_down = event.type is EventType.FINGER_DOWN
            self._pointer_x = float(event.x)
            self._pointer_y = float(event.y)
        self._mapper.handle_event(event)

    def update(self) -> None:
        """Per-frame update; state is fully event driven."""

    def is_key_pressed(self, keycode: int) -> bool:
        return keycode in self._keys

    def is_mouse_button_pressed(self, button: int) -> bool:
        return button in self._mouse_buttons

    @property
    def pointer_down(self) -> bool:
        """True if a mouse button or finger is down."""
        return self._pointer_down

    @property
    def pointer_position(self) -> tuple[float, float]:
        return (self._pointer_x, self._pointer_y)

    def is_action_pressed(self, action: PlayerAction) -> bool:
        return self._mapper.is_action_pressed(action)

    @property
    def mapper(self) -> ActionMapper:
        return self._mapper