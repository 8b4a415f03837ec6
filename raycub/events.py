"""Window event hooks and a queue-driven event loop."""

from __future__ import annotations

from collections import deque
from enum import IntEnum, IntFlag
from typing import Any, Callable

MAX_EVENT = 36
DELETE_WINDOW = "WM_DELETE_WINDOW"


class EventType(IntEnum):
    """Codes of the window events a hook can be attached to."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


class EventMask(IntFlag):
    """Masks selecting which events a window wants to receive."""

    NO_EVENT = 0
    KEY_PRESS = 1 << 0
    KEY_RELEASE = 1 << 1
    BUTTON_PRESS = 1 << 2
    BUTTON_RELEASE = 1 << 3
    ENTER_WINDOW = 1 << 4
    LEAVE_WINDOW = 1 << 5
    POINTER_MOTION = 1 << 6
    POINTER_MOTION_HINT = 1 << 7
    BUTTON1_MOTION = 1 << 8
    BUTTON2_MOTION = 1 << 9
    BUTTON3_MOTION = 1 << 10
    BUTTON4_MOTION = 1 << 11
    BUTTON5_MOTION = 1 << 12
    BUTTON_MOTION = 1 << 13
    KEYMAP_STATE = 1 << 14
    EXPOSURE = 1 << 15
    VISIBILITY_CHANGE = 1 << 16
    STRUCTURE_NOTIFY = 1 << 17
    RESIZE_REDIRECT = 1 << 18
    SUBSTRUCTURE_NOTIFY = 1 << 19
    SUBSTRUCTURE_REDIRECT = 1 << 20
    FOCUS_CHANGE = 1 << 21
    PROPERTY_CHANGE = 1 << 22
    COLORMAP_CHANGE = 1 << 23
    OWNER_GRAB_BUTTON = 1 << 24


_KEY_EVENTS = (EventType.KEY_PRESS, EventType.KEY_RELEASE)
_BUTTON_EVENTS = (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE)


def _require(args: tuple, count: int, event_type: int) -> None:
    if len(args) < count:
        raise ValueError(f"event {event_type} needs {count} argument(s), got {len(args)}")


class HookTable:
    """The hooks attached to one window, one per event type.

    Key hooks receive the key symbol, button hooks (button, x, y), motion
    hooks (x, y); every other hook is called without arguments.
    """

    def __init__(self) -> None:
        self._hooks: dict[int, tuple[Callable[..., Any], int]] = {}

    def hook(self, event_type: int, func: Callable[..., Any] | None, mask: int) -> None:
        """Attach func to an event type with the mask that selects it; None detaches."""
        code = int(event_type)
        if not 0 <= code < MAX_EVENT:
            raise ValueError(f"invalid event type: {code}")
        if func is None:
            self._hooks.pop(code, None)
        else:
            self._hooks[code] = (func, int(mask))

    def key_hook(self, func: Callable[[int], Any]) -> None:
        """Call func with the key symbol whenever a key is released."""
        self.hook(EventType.KEY_RELEASE, func, EventMask.KEY_RELEASE)

    def mouse_hook(self, func: Callable[[int, int, int], Any]) -> None:
        """Call func with (button, x, y) whenever a mouse button is pressed."""
        self.hook(EventType.BUTTON_PRESS, func, EventMask.BUTTON_PRESS)

    def expose_hook(self, func: Callable[[], Any]) -> None:
        """Call func whenever the window needs redrawing."""
        self.hook(EventType.EXPOSE, func, EventMask.EXPOSURE)

    def event_mask(self) -> EventMask:
        """Return the union of the masks of all attached hooks."""
        mask = EventMask.NO_EVENT
        for _, hook_mask in self._hooks.values():
            mask |= EventMask(hook_mask)
        return mask

    def dispatch(self, event_type: int, *args: Any) -> bool:
        """Run the hook for an event with its arguments; return whether one ran.

        An expose event whose first argument (the count of exposures still to
        come) is not zero is not passed on.
        """
        code = int(event_type)
        entry = self._hooks.get(code)
        if entry is None or code < EventType.KEY_PRESS:
            return False
        func = entry[0]
        if code in _KEY_EVENTS:
            _require(args, 1, code)
            func(args[0])
        elif code in _BUTTON_EVENTS:
            _require(args, 3, code)
            func(*args[:3])
        elif code == EventType.MOTION_NOTIFY:
            _require(args, 2, code)
            func(*args[:2])
        elif code == EventType.EXPOSE:
            if args and args[0]:
                return False
            func()
        else:
            func()
        return True


class EventLoop:
    """Delivers queued events to registered windows and runs an idle hook.

    The loop runs while at least one window is registered and loop_end has
    not been called. Without an idle hook it returns once the queue is empty.
    """

    def __init__(self) -> None:
        self.windows: list[HookTable] = []
        self._queue: deque[tuple[HookTable, int, tuple]] = deque()
        self._loop_hook: Callable[[], Any] | None = None
        self._ended = False

    @property
    def pending(self) -> int:
        """Number of events waiting in the queue."""
        return len(self._queue)

    @property
    def ended(self) -> bool:
        """Whether loop_end has been called."""
        return self._ended

    def loop_hook(self, func: Callable[[], Any] | None) -> None:
        """Set the function called each time the queue has been drained."""
        self._loop_hook = func

    def post(self, target: HookTable, event_type: int, *args: Any) -> None:
        """Queue an event for a window."""
        self._queue.append((target, int(event_type), args))

    def flush(self) -> None:
        """Discard every queued event."""
        self._queue.clear()

    def loop_end(self) -> None:
        """Make the loop stop at its next check."""
        self._ended = True

    def _deliver(self, target: HookTable, code: int, args: tuple) -> None:
        if target not in self.windows:
            return
        if code == EventType.CLIENT_MESSAGE and args and args[0] == DELETE_WINDOW:
            target.dispatch(EventType.DESTROY_NOTIFY)
        if code < MAX_EVENT:
            target.dispatch(code, *args)

    def loop(self) -> None:
        """Deliver events and call the idle hook until the loop is ended."""
        while self.windows and not self._ended:
            while not self._ended and (self._loop_hook is None or self._queue):
                if not self._queue:
                    return
                self._deliver(*self._queue.popleft())
            if self._loop_hook is not None:
                self._loop_hook()