import pytest

from promethean.events import EventBus
from promethean.input import (
    ActionMapper,
    ActionStateChangedEvent,
    EventType,
    FingerEvent,
    InputManager,
    KeyEvent,
    MouseButtonEvent,
    MouseMotionEvent,
    PlayerAction,
    Rect,
)


@pytest.fixture
def bus_and_events():
    bus = EventBus()
    events = []
    bus.subscribe(ActionStateChangedEvent, events.append)
    return bus, events


def test_key_press_and_release_publish(bus_and_events):
    bus, events = bus_and_events
    mapper = ActionMapper(bus)
    mapper.map_key(44, PlayerAction.JUMP)
    mapper.handle_event(KeyEvent(EventType.KEY_DOWN, 44))
    assert mapper.is_action_pressed(PlayerAction.JUMP)
    mapper.handle_event(KeyEvent(EventType.KEY_UP, 44))
    assert not mapper.is_action_pressed(PlayerAction.JUMP)
    assert events == [
        ActionStateChangedEvent(PlayerAction.JUMP, True),
        ActionStateChangedEvent(PlayerAction.JUMP, False),
    ]


def test_repeated_press_published_once(bus_and_events):
    bus, events = bus_and_events
    mapper = ActionMapper(bus)
    mapper.map_key(4, PlayerAction.MOVE_LEFT)
    mapper.handle_event(KeyEvent(EventType.KEY_DOWN, 4))
    mapper.handle_event(KeyEvent(EventType.KEY_DOWN, 4))
    assert len(events) == 1


def test_unmapped_key_ignored(bus_and_events):
    bus, events = bus_and_events
    mapper = ActionMapper(bus)
    mapper.handle_event(KeyEvent(EventType.KEY_DOWN, 9))
    assert events == []
    assert not any(mapper.is_action_pressed(a) for a in PlayerAction)


def test_touch_area_inside_and_edge(bus_and_events):
    bus, events = bus_and_events
    mapper = ActionMapper(bus)
    mapper.map_touch_area(Rect(10, 10, 20, 20), PlayerAction.CONFIRM)
    mapper.handle_event(FingerEvent(EventType.FINGER_DOWN, 30.0, 15.0))
    assert not mapper.is_action_pressed(PlayerAction.CONFIRM)
    mapper.handle_event(FingerEvent(EventType.FINGER_DOWN, 10.0, 29.9))
    assert mapper.is_action_pressed(PlayerAction.CONFIRM)
    mapper.handle_event(FingerEvent(EventType.FINGER_UP, 12.0, 12.0))
    assert not mapper.is_action_pressed(PlayerAction.CONFIRM)
    assert [e.pressed for e in events] == [True, False]


def test_rect_contains_is_half_open():
    rect = Rect(0, 0, 5, 5)
    assert rect.contains(0, 0)
    assert rect.contains(4, 4)
    assert not rect.contains(5, 0)
    assert not rect.contains(-1, 2)


def test_manager_key_state():
    manager = InputManager(EventBus())
    manager.handle_event(KeyEvent(EventType.KEY_DOWN, 26))
    assert manager.is_key_pressed(26)
    manager.handle_event(KeyEvent(EventType.KEY_UP, 26))
    assert not manager.is_key_pressed(26)


def test_manager_ignores_out_of_range_scancode():
    manager = InputManager(EventBus())
    manager.handle_event(KeyEvent(EventType.KEY_DOWN, 600))
    assert not manager.is_key_pressed(600)


def test_manager_mouse_buttons_and_pointer():
    manager = InputManager(EventBus())
    manager.handle_event(MouseButtonEvent(EventType.MOUSE_BUTTON_DOWN, 1, 40, 50))
    assert manager.is_mouse_button_pressed(1)
    assert manager.pointer_down
    assert manager.pointer_position == (40.0, 50.0)
    manager.handle_event(MouseMotionEvent(70, 80))
    assert manager.pointer_position == (70.0, 80.0)
    manager.handle_event(MouseButtonEvent(EventType.MOUSE_BUTTON_UP, 1, 70, 80))
    assert not manager.is_mouse_button_pressed(1)
    assert not manager.pointer_down


def test_manager_out_of_range_button_still_moves_pointer():
    manager = InputManager(EventBus())
    manager.handle_event(MouseButtonEvent(EventType.MOUSE_BUTTON_DOWN, 9, 3, 4))
    assert not manager.is_mouse_button_pressed(9)
    assert manager.pointer_down
    assert manager.pointer_position == (3.0, 4.0)


def test_manager_finger_updates_pointer():
    manager = InputManager(EventBus())
    manager.handle_event(FingerEvent(EventType.FINGER_DOWN, 0.25, 0.75))
    assert manager.pointer_down
    assert manager.pointer_position == (0.25, 0.75)
    manager.handle_event(FingerEvent(EventType.FINGER_UP, 0.25, 0.75))
    assert not manager.pointer_down


def test_manager_forwards_to_mapper():
    manager = InputManager(EventBus())
    manager.mapper.map_key(41, PlayerAction.CANCEL)
    manager.handle_event(KeyEvent(EventType.KEY_DOWN, 41))
    assert manager.is_action_pressed(PlayerAction.CANCEL)
    assert manager.mapper.is_action_pressed(PlayerAction.CANCEL)


def test_motion_event_type_is_fixed():
    assert MouseMotionEvent(1, 2).type is EventType.MOUSE_MOTION