from widgetkit.api.input_events import Modifiers
from widgetkit.ui_runtime.context import CURSOR_SENTINEL, InteractionContext


def test_context_defaults_to_sentinel_cursor_and_free_capture() -> None:
    context = InteractionContext()
    assert context.cursor == CURSOR_SENTINEL
    assert context.modifiers == Modifiers()
    assert context.mouse_captured is False


def test_try_capture_only_succeeds_when_free() -> None:
    context = InteractionContext()
    assert context.try_capture() is True
    assert context.try_capture() is False
    assert context.mouse_captured is True
    context.release_capture()
    assert context.mouse_captured is False
    context.release_capture()
    assert context.mouse_captured is False
