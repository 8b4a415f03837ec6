import pytest

from raycub.events import (
    DELETE_WINDOW,
    EventLoop,
    EventMask,
    EventType,
    HookTable,
)

ESCAPE = 0xFF1B


def make_loop():
    table = HookTable()
    loop = EventLoop()
    loop.windows.append(table)
    return table, loop


def test_key_hook_receives_key():
    table = HookTable()
    keys = []
    table.key_hook(keys.append)
    assert table.dispatch(EventType.KEY_RELEASE, ESCAPE) is True
    assert keys == [ESCAPE]
    assert table.event_mask() == EventMask.KEY_RELEASE


def test_masks_combine():
    table = HookTable()
    table.key_hook(lambda key: None)
    table.mouse_hook(lambda b, x, y: None)
    table.expose_hook(lambda: None)
    expected = EventMask.KEY_RELEASE | EventMask.BUTTON_PRESS | EventMask.EXPOSURE
    assert table.event_mask() == expected


def test_empty_table_has_no_mask():
    assert HookTable().event_mask() == EventMask.NO_EVENT


def test_mouse_and_motion_arguments():
    table = HookTable()
    seen = []
    table.mouse_hook(lambda b, x, y: seen.append(("button", b, x, y)))
    table.hook(EventType.MOTION_NOTIFY, lambda x, y: seen.append(("move", x, y)),
               EventMask.POINTER_MOTION)
    table.dispatch(EventType.BUTTON_PRESS, 1, 20, 30)
    table.dispatch(EventType.MOTION_NOTIFY, 5, 6)
    assert seen == [("button", 1, 20, 30), ("move", 5, 6)]


def test_expose_waits_for_last_exposure():
    table = HookTable()
    calls = []
    table.expose_hook(lambda: calls.append("expose"))
    assert table.dispatch(EventType.EXPOSE, 2) is False
    assert table.dispatch(EventType.EXPOSE, 0) is True
    assert calls == ["expose"]


def test_generic_hook_called_without_arguments():
    table = HookTable()
    calls = []
    table.hook(EventType.CLIENT_MESSAGE, lambda: calls.append("quit"), EventMask.NO_EVENT)
    assert table.dispatch(EventType.CLIENT_MESSAGE, DELETE_WINDOW) is True
    assert calls == ["quit"]


def test_dispatch_without_hook_returns_false():
    assert HookTable().dispatch(EventType.KEY_PRESS, ESCAPE) is False


def test_missing_key_argument_is_an_error():
    table = HookTable()
    table.key_hook(lambda key: None)
    with pytest.raises(ValueError):
        table.dispatch(EventType.KEY_RELEASE)


def test_invalid_event_type_rejected():
    with pytest.raises(ValueError):
        HookTable().hook(99, lambda: None, EventMask.NO_EVENT)


def test_detaching_hook():
    table = HookTable()
    table.key_hook(lambda key: None)
    table.hook(EventType.KEY_RELEASE, None, EventMask.NO_EVENT)
    assert table.dispatch(EventType.KEY_RELEASE, ESCAPE) is False


def test_loop_delivers_then_calls_idle_hook():
    table, loop = make_loop()
    calls = []
    table.key_hook(lambda key: calls.append(("key", key)))
    loop.post(table, EventType.KEY_RELEASE, ESCAPE)

    def tick():
        calls.append("tick")
        loop.loop_end()

    loop.loop_hook(tick)
    loop.loop()
    assert calls == [("key", ESCAPE), "tick"]
    assert loop.ended is True


def test_events_posted_by_idle_hook_arrive_next_round():
    table, loop = make_loop()
    keys = []
    table.key_hook(keys.append)
    ticks = []

    def tick():
        ticks.append(len(ticks))
        if len(ticks) == 3:
            loop.loop_end()
        else:
            loop.post(table, EventType.KEY_RELEASE, len(ticks))

    loop.loop_hook(tick)
    loop.loop()
    assert keys == [1, 2]
    assert len(ticks) == 3


def test_loop_without_windows_returns_immediately():
    loop = EventLoop()
    ticks = []
    loop.loop_hook(lambda: ticks.append(1))
    loop.loop()
    assert ticks == []


def test_loop_without_idle_hook_drains_queue():
    table, loop = make_loop()
    keys = []
    table.key_hook(keys.append)
    loop.post(table, EventType.KEY_RELEASE, 1)
    loop.post(table, EventType.KEY_RELEASE, 2)
    loop.loop()
    assert keys == [1, 2]
    assert loop.pending == 0


def test_events_for_unknown_window_ignored():
    table, loop = make_loop()
    stranger = HookTable()
    keys = []
    stranger.key_hook(keys.append)
    loop.post(stranger, EventType.KEY_RELEASE, ESCAPE)
    loop.loop()
    assert keys == []


def test_delete_window_message_calls_destroy_hook():
    table, loop = make_loop()
    calls = []
    table.hook(EventType.DESTROY_NOTIFY, lambda: calls.append("destroy"),
               EventMask.STRUCTURE_NOTIFY)
    table.hook(EventType.CLIENT_MESSAGE, lambda: calls.append("message"),
               EventMask.NO_EVENT)
    loop.post(table, EventType.CLIENT_MESSAGE, DELETE_WINDOW)
    loop.loop()
    assert calls == ["destroy", "message"]


def test_loop_stops_when_last_window_removed():
    table, loop = make_loop()
    ticks = []
    table.key_hook(lambda key: loop.windows.remove(table))
    loop.post(table, EventType.KEY_RELEASE, ESCAPE)
    loop.loop_hook(lambda: ticks.append(1))
    loop.loop()
    assert loop.windows == []
    assert ticks == [1]


def test_flush_discards_events():
    table, loop = make_loop()
    keys = []
    table.key_hook(keys.append)
    loop.post(table, EventType.KEY_RELEASE, ESCAPE)
    assert loop.pending == 1
    loop.flush()
    assert loop.pending == 0
    loop.loop()
    assert keys == []