"""Game states and a stack that applies state changes once per frame."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any, NamedTuple, Optional


class State(ABC):
    """Base class for a game state.

    The default lifecycle hooks keep ``active`` and ``paused`` up to date;
    subclasses overriding them should call the base implementation.
    """

    active: bool = False
    paused: bool = False

    def on_enter(self) -> None:
        """Called when the state becomes active."""
        self.active = True
        self.paused = False

    def on_exit(self) -> None:
        """Called when the state is leaving."""
        self.active = False
        self.paused = False

    def pause(self) -> None:
        """Called when another state is pushed on top."""
        self.paused = True

    def resume(self) -> None:
        """Called when the state becomes active again."""
        self.paused = False

    def handle_event(self, event: Any) -> bool:
        """Receive an input event; return True if it was consumed."""
        return False

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance logic by ``dt`` seconds."""

    @abstractmethod
    def render(self, renderer: Any) -> None:
        """Draw the state with ``renderer``."""


class StateAction(enum.Enum):
    PUSH = "push"
    POP = "pop"
    REPLACE = "replace"


class _Pending(NamedTuple):
    action: StateAction
    state: Optional[State]


class StateStack:
    """LIFO stack of states whose mutations are deferred to ``apply_requests``."""

    def __init__(self) -> None:
        self._stack: list[State] = []
        self._pending: list[_Pending] = []

    def request(self, action: StateAction, state: Optional[State] = None) -> None:
        """Queue a mutation for the next ``apply_requests`` call."""
        action = StateAction(action)
        if action is StateAction.PUSH and state is None:
            raise ValueError("a push request needs a state")
        self._pending.append(_Pending(action, state))

    def apply_requests(self) -> None:
        """Apply all queued mutations in order."""
        pending, self._pending = self._pending, []
        for action, state in pending:
            if action is StateAction.PUSH:
                if self._stack:
                    self._stack[-1].pause()
                self._stack.append(state)
                state.on_enter()
            elif action is StateAction.POP:
                if self._stack:
                    self._stack.pop().on_exit()
                    if self._stack:
                        self._stack[-1].resume()
            else:
                if self._stack:
                    self._stack.pop().on_exit()
                if state is not None:
                    self._stack.append(state)
                    state.on_enter()

    @property
    def current(self) -> Optional[State]:
        """The active state, or None when the stack is empty."""
        return self._stack[-1] if self._stack else None

    def __len__(self) -> int:
        return len(self._stack)

    def handle_event(self, event: Any) -> bool:
        """Forward ``event`` to the current state; return whether it was consumed."""
        if self.current is not None:
            return bool(self.current.handle_event(event))
        return False

    def update(self, dt: float) -> None:
        if self.current is not None:
            self.current.update(dt)

    def render(self, renderer: Any) -> None:
        if self.current is not None:
            self.current.render(renderer)