"""Input event callbacks: subscription, dispatch and held-key tracking."""

from __future__ import annotations

import enum
import itertools
from collections import defaultdict
from dataclasses import dataclass, field, replace
from typing import Callable, Optional, Union


def _to_char(code: Union[int, str]) -> int:
    """Narrow a key code to a signed 8-bit value, the width keys are stored in."""
    if isinstance(code, str):
        code = ord(code)
    return (code + 128) % 256 - 128


class EventType(enum.Enum):
    """Kinds of input events a callback can subscribe to."""

    PRESS_TAP = enum.auto()
    PINCH_TAP = enum.auto()
    RELEASE_TAP = enum.auto()
    PRESS_KEY = enum.auto()
    PINCH_KEY = enum.auto()
    RELEASE_KEY = enum.auto()
    MOVE = enum.auto()
    SCROLL = enum.auto()


@dataclass(frozen=True)
class CursorPos:
    """Cursor position in window coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class EventData:
    """Snapshot of the input state handed to every handler."""

    cursor_pos: CursorPos = field(default_factory=CursorPos)
    key: int = 0
    mouse_button: int = 0
    scroll_offset: float = 0.0


class VirtualKey(enum.IntEnum):
    """Key codes, narrowed to the 8-bit width keys are compared in."""

    VK_0 = 48
    VK_1 = 49
    VK_2 = 50
    VK_3 = 51
    VK_4 = 52
    VK_5 = 53
    VK_6 = 54
    VK_7 = 55
    VK_8 = 56
    VK_9 = 57
    TILDE = 96

    ENTER = 1
    SPACE = 32
    ESCAPE = _to_char(256)
    RETURN = _to_char(259)

    RIGHT = _to_char(262)
    LEFT = _to_char(263)
    DOWN = _to_char(264)
    UP = _to_char(265)

    F1 = _to_char(290)
    F2 = _to_char(291)
    F3 = _to_char(292)
    F4 = _to_char(293)
    F5 = _to_char(294)
    F6 = _to_char(295)
    F7 = _to_char(296)
    F8 = _to_char(297)
    F9 = _to_char(298)
    F10 = _to_char(299)
    F11 = _to_char(300)
    F12 = _to_char(301)

    SHIFT = _to_char(340)
    CONTROL = _to_char(341)


class VirtualTap(enum.IntEnum):
    """Mouse button codes."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


Handler = Callable[[EventData], None]


@dataclass
class _Slot:
    fun_id: int
    fun: Optional[Handler]


class EventDispatcher:
    """Routes input events to subscribed callbacks and tracks held keys and buttons."""

    def __init__(self) -> None:
        self._listeners: dict[EventType, list[Optional[Callback]]] = {
            event_type: [] for event_type in EventType
        }
        self._pinched_keys: set[int] = set()
        self._pinched_buttons: set[int] = set()
        self._current = EventData()

    @property
    def pinched_keys(self) -> frozenset[int]:
        return frozenset(self._pinched_keys)

    @property
    def pinched_buttons(self) -> frozenset[int]:
        return frozenset(self._pinched_buttons)

    @property
    def current_event_data(self) -> EventData:
        return self._current

    def on_cursor_pos(self, x: float, y: float) -> None:
        self._current = replace(self._current, cursor_pos=CursorPos(float(x), float(y)))
        self.dispatch(EventType.MOVE, self._current)

    def on_mouse_button(self, event_type: EventType, button: int) -> None:
        self._current = replace(self._current, mouse_button=int(button))
        if event_type is EventType.PRESS_TAP:
            self._pinched_buttons.add(self._current.mouse_button)
        elif event_type is EventType.RELEASE_TAP:
            self._pinched_buttons.discard(self._current.mouse_button)
        self.dispatch(event_type, self._current)

    def on_key(self, event_type: EventType, key: Union[int, str]) -> None:
        self._current = replace(self._current, key=_to_char(key))
        if event_type is EventType.PRESS_KEY:
            self._pinched_keys.add(self._current.key)
        elif event_type is EventType.RELEASE_KEY:
            self._pinched_keys.discard(self._current.key)
        self.dispatch(event_type, self._current)

    def on_scroll(self, offset: float) -> None:
        self._current = replace(self._current, scroll_offset=float(offset))
        self.dispatch(EventType.SCROLL, self._current)

    def dispatch(self, event_type: EventType, event_data: EventData) -> None:
        """Call every live handler subscribed to ``event_type``.

        Handlers added while dispatching are not called until the next event;
        handlers removed while dispatching are skipped.
        """
        listeners = self._listeners[event_type]
        # Positions matter here: handlers may blank out entries while we walk.
        for index in range(len(listeners)):
            callback = listeners[index]
            if callback is None:
                continue

            slots = callback._slots[event_type]
            for slot in list(slots):
                if slot.fun is not None:
                    slot.fun(event_data)
                if not self._listening_at(listeners, index, callback):
                    break

            if self._listening_at(listeners, index, callback):
                slots[:] = [slot for slot in slots if slot.fun is not None]
                if not slots:
                    listeners[index] = None

        listeners[:] = [callback for callback in listeners if callback is not None]

    def update(self) -> None:
        """Send a pinch event for every key and mouse button still held."""
        for key in list(self._pinched_keys):
            self._current = replace(self._current, key=key)
            self.dispatch(EventType.PINCH_KEY, self._current)

        for button in list(self._pinched_buttons):
            self._current = replace(self._current, mouse_button=button)
            self.dispatch(EventType.PINCH_TAP, self._current)

    @staticmethod
    def _listening_at(listeners: list, index: int, callback: Callback) -> bool:
        return index < len(listeners) and listeners[index] is callback

    def _find(self, callback: Callback, event_type: EventType) -> Optional[int]:
        for index, listener in enumerate(self._listeners[event_type]):
            if listener is callback:
                return index
        return None

    def _register(self, callback: Callback, event_type: EventType) -> None:
        if self._find(callback, event_type) is None:
            self._listeners[event_type].append(callback)

    def _is_registered(self, callback: Callback, event_type: EventType) -> bool:
        return self._find(callback, event_type) is not None

    def _unregister(self, callback: Callback) -> None:
        for event_type, listeners in self._listeners.items():
            index = self._find(callback, event_type)
            if index is not None:
                listeners[index] = None


dispatcher = EventDispatcher()


class Callback:
    """A set of event handlers owned by one object."""

    _ids = itertools.count(1)

    def __init__(self, dispatcher: Optional[EventDispatcher] = None) -> None:
        super().__init__()
        self._dispatcher = dispatcher if dispatcher is not None else globals_dispatcher()
        self._slots: dict[EventType, list[_Slot]] = defaultdict(list)

    def __enter__(self) -> Callback:
        return self

    def __exit__(self, *exc_info) -> None:
        self.clear()

    @property
    def dispatcher(self) -> EventDispatcher:
        return self._dispatcher

    def key_pressed(self, key: Union[int, str]) -> bool:
        return _to_char(key) in self._dispatcher.pinched_keys

    def mouse_button_pressed(self, button: int) -> bool:
        return int(button) in self._dispatcher.pinched_buttons

    def add(self, event_type: EventType, fun: Handler) -> int:
        """Subscribe ``fun`` to ``event_type`` and return an id for removing it."""
        fun_id = next(Callback._ids)
        self._slots[event_type].append(_Slot(fun_id, fun))
        self._dispatcher._register(self, event_type)
        return fun_id

    def remove(self, fun_id: int, event_type: Optional[EventType] = None) -> None:
        """Drop the handler with ``fun_id`` from one event type, or from all of them."""
        event_types = list(EventType) if event_type is None else [event_type]
        for current_type in event_types:
            if not self._dispatcher._is_registered(self, current_type):
                continue
            for slot in self._slots[current_type]:
                if slot.fun_id == fun_id:
                    slot.fun = None
                    break

    def clear(self) -> None:
        """Stop receiving events of every type."""
        self._dispatcher._unregister(self)


def globals_dispatcher() -> EventDispatcher:
    """Return the dispatcher shared by callbacks created without one."""
    return dispatcher