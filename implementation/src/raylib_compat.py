"""raylib compatibility layer for the desktop front end.

Prefers the snake_case ``pyray`` API; falls back to the CamelCase C bindings
from ``raylib`` and wraps the calls that take ``const char*`` so callers can
pass plain ``str``. Only the handful of calls the front end uses are exported.
"""
from __future__ import annotations

try:
    import pyray as _rl  # type: ignore
    _SNAKE = True
except Exception:
    try:
        import raylib as _rl  # type: ignore
        _SNAKE = False
    except Exception as exc:
        raise ImportError(
            "Could not import raylib bindings. Install the 'raylib' package."
        ) from exc


_CAMEL_MAP = {
    "init_window": "InitWindow",
    "set_target_fps": "SetTargetFPS",
    "set_exit_key": "SetExitKey",
    "window_should_close": "WindowShouldClose",
    "close_window": "CloseWindow",
    "begin_drawing": "BeginDrawing",
    "end_drawing": "EndDrawing",
    "clear_background": "ClearBackground",
    "draw_rectangle": "DrawRectangle",
    "draw_rectangle_lines": "DrawRectangleLines",
    "draw_text": "DrawText",
    "measure_text": "MeasureText",
    "get_mouse_position": "GetMousePosition",
    "is_mouse_button_pressed": "IsMouseButtonPressed",
    "is_mouse_button_down": "IsMouseButtonDown",
    "is_mouse_button_released": "IsMouseButtonReleased",
}


def _resolve(snake: str):
    if _SNAKE:
        return getattr(_rl, snake)
    return getattr(_rl, _CAMEL_MAP[snake])


def _encode_text(value):
    if not _SNAKE and isinstance(value, str):
        return value.encode("utf-8")
    return value


MOUSE_BUTTON_LEFT = getattr(_rl, "MOUSE_BUTTON_LEFT", 0)

set_target_fps = _resolve("set_target_fps")
set_exit_key = _resolve("set_exit_key")
window_should_close = _resolve("window_should_close")
close_window = _resolve("close_window")
begin_drawing = _resolve("begin_drawing")
end_drawing = _resolve("end_drawing")
clear_background = _resolve("clear_background")
draw_rectangle = _resolve("draw_rectangle")
draw_rectangle_lines = _resolve("draw_rectangle_lines")
get_mouse_position = _resolve("get_mouse_position")
is_mouse_button_pressed = _resolve("is_mouse_button_pressed")
is_mouse_button_down = _resolve("is_mouse_button_down")
is_mouse_button_released = _resolve("is_mouse_button_released")

_init_window = _resolve("init_window")
_draw_text = _resolve("draw_text")
_measure_text = _resolve("measure_text")


def Color(r: int, g: int, b: int, a: int = 255):
    if _SNAKE:
        return _rl.Color(r, g, b, a)
    return (r, g, b, a)


def init_window(width: int, height: int, title: str) -> None:
    _init_window(width, height, _encode_text(title))


def draw_text(text: str, x: int, y: int, size: int, color) -> None:
    _draw_text(_encode_text(text), int(x), int(y), size, color)


def measure_text(text: str, size: int) -> int:
    return _measure_text(_encode_text(text), size)
