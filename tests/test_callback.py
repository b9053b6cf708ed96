import pytest

from gravity.callback import (
    Callback,
    CursorPos,
    EventData,
    EventDispatcher,
    EventType,
    VirtualKey,
    VirtualTap,
)


@pytest.fixture
def hub():
    return EventDispatcher()


def test_key_press_reaches_handler(hub):
    callback = Callback(hub)
    received = []
    callback.add(EventType.PRESS_KEY, received.append)
    hub.on_key(EventType.PRESS_KEY, 65)
    assert [data.key for data in received] == [65]
    assert callback.key_pressed(65)
    assert callback.key_pressed("A")


def test_key_release_clears_pressed_state(hub):
    callback = Callback(hub)
    hub.on_key(EventType.PRESS_KEY, 70)
    hub.on_key(EventType.RELEASE_KEY, 70)
    assert not callback.key_pressed(70)
    assert hub.pinched_keys == frozenset()


def test_wide_key_codes_match_virtual_keys(hub):
    callback = Callback(hub)
    received = []
    callback.add(EventType.PRESS_KEY, received.append)
    hub.on_key(EventType.PRESS_KEY, 256)
    assert received[0].key == VirtualKey.ESCAPE
    assert callback.key_pressed(VirtualKey.ESCAPE)


def test_handler_only_gets_its_event_type(hub):
    callback = Callback(hub)
    received = []
    callback.add(EventType.RELEASE_KEY, received.append)
    hub.on_key(EventType.PRESS_KEY, 66)
    assert received == []
    hub.on_key(EventType.RELEASE_KEY, 66)
    assert len(received) == 1


def test_cursor_position_is_reported(hub):
    callback = Callback(hub)
    received = []
    callback.add(EventType.MOVE, received.append)
    hub.on_cursor_pos(1.5, 2.5)
    assert received[0].cursor_pos == CursorPos(1.5, 2.5)
    assert hub.current_event_data.cursor_pos == CursorPos(1.5, 2.5)


def test_scroll_offset_is_reported(hub):
    callback = Callback(hub)
    received = []
    callback.add(EventType.SCROLL, received.append)
    hub.on_scroll(-3.0)
    assert received[0].scroll_offset == -3.0


def test_mouse_button_press_and_release(hub):
    callback = Callback(hub)
    pressed = []
    callback.add(EventType.PRESS_TAP, pressed.append)
    hub.on_mouse_button(EventType.PRESS_TAP, VirtualTap.RIGHT)
    assert pressed[0].mouse_button == VirtualTap.RIGHT
    assert callback.mouse_button_pressed(VirtualTap.RIGHT)
    hub.on_mouse_button(EventType.RELEASE_TAP, VirtualTap.RIGHT)
    assert not callback.mouse_button_pressed(VirtualTap.RIGHT)


def test_update_sends_pinch_events_for_held_input(hub):
    callback = Callback(hub)
    keys = []
    buttons = []
    callback.add(EventType.PINCH_KEY, keys.append)
    callback.add(EventType.PINCH_TAP, buttons.append)
    hub.on_key(EventType.PRESS_KEY, 68)
    hub.on_mouse_button(EventType.PRESS_TAP, VirtualTap.LEFT)
    hub.update()
    assert [data.key for data in keys] == [68]
    assert [data.mouse_button for data in buttons] == [VirtualTap.LEFT]

    hub.on_key(EventType.RELEASE_KEY, 68)
    hub.on_mouse_button(EventType.RELEASE_TAP, VirtualTap.LEFT)
    hub.update()
    assert len(keys) == 1
    assert len(buttons) == 1


def test_fun_ids_are_unique(hub):
    callback = Callback(hub)
    ids = {callback.add(EventType.MOVE, lambda data: None) for _ in range(5)}
    assert len(ids) == 5


def test_remove_stops_handler(hub):
    callback = Callback(hub)
    received = []
    fun_id = callback.add(EventType.SCROLL, received.append)
    callback.remove(fun_id)
    hub.on_scroll(1.0)
    assert received == []


def test_remove_for_one_type_keeps_other_types(hub):
    callback = Callback(hub)
    moves = []
    scrolls = []
    fun_id = callback.add(EventType.MOVE, moves.append)
    callback.add(EventType.SCROLL, scrolls.append)
    callback.remove(fun_id, EventType.SCROLL)
    hub.on_cursor_pos(1.0, 1.0)
    assert len(moves) == 1
    callback.remove(fun_id, EventType.MOVE)
    hub.on_cursor_pos(2.0, 2.0)
    hub.on_scroll(1.0)
    assert len(moves) == 1
    assert len(scrolls) == 1


def test_handler_removing_itself_runs_once(hub):
    callback = Callback(hub)
    calls = []

    def once(data):
        calls.append(data.scroll_offset)
        callback.remove(fun_id)

    fun_id = callback.add(EventType.SCROLL, once)
    hub.on_scroll(1.0)
    hub.on_scroll(2.0)
    assert calls == [1.0]
    assert hub.current_event_data.scroll_offset == 2.0


def test_handler_added_during_dispatch_waits_for_next_event(hub):
    callback = Callback(hub)
    late = []
    late_ids = []

    def adder(data):
        late_ids.append(callback.add(EventType.SCROLL, late.append))

    first_id = callback.add(EventType.SCROLL, adder)
    hub.on_scroll(1.0)
    assert late == []
    assert len(late_ids) == 1
    assert late_ids[0] != first_id
    callback.remove(first_id)
    hub.on_scroll(2.0)
    assert [data.scroll_offset for data in late] == [2.0]
    assert len(late_ids) == 1
    assert hub.current_event_data.scroll_offset == 2.0


def test_clear_stops_all_events(hub):
    callback = Callback(hub)
    received = []
    callback.add(EventType.MOVE, received.append)
    callback.add(EventType.SCROLL, received.append)
    callback.clear()
    hub.on_cursor_pos(0.0, 0.0)
    hub.on_scroll(1.0)
    assert received == []


def test_clear_inside_handler_skips_remaining_handlers(hub):
    callback = Callback(hub)
    calls = []
    callback.add(EventType.SCROLL, lambda data: (calls.append("first"), callback.clear()))
    callback.add(EventType.SCROLL, lambda data: calls.append("second"))
    hub.on_scroll(1.0)
    assert calls == ["first"]


def test_handlers_of_several_callbacks_run_in_subscription_order(hub):
    order = []
    first = Callback(hub)
    second = Callback(hub)
    second.add(EventType.MOVE, lambda data: order.append(second))
    first.add(EventType.MOVE, lambda data: order.append(first))
    hub.on_cursor_pos(0.0, 0.0)
    assert order == [second, first]


def test_context_manager_clears_on_exit(hub):
    received = []
    with Callback(hub) as callback:
        callback.add(EventType.SCROLL, received.append)
        hub.on_scroll(1.0)
    hub.on_scroll(2.0)
    assert [data.scroll_offset for data in received] == [1.0]


def test_dispatch_passes_given_data(hub):
    callback = Callback(hub)
    received = []
    callback.add(EventType.PRESS_KEY, received.append)
    data = EventData(key=5)
    hub.dispatch(EventType.PRESS_KEY, data)
    assert received == [data]