"""On-screen window with a GL 3.3 core context and polled input state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Set, Tuple


class Key(IntEnum):
    """Key symbols, valued as the window toolkit reports them."""

    A = ord("a")
    D = ord("d")
    E = ord("e")
    Q = ord("q")
    S = ord("s")
    W = ord("w")
    LSHIFT = 0xFFE1
    ESCAPE = 0xFF1B


@dataclass
class _InputState:
    """Held keys and a virtual cursor whose y grows downward."""

    pressed: Set[int] = field(default_factory=set)
    cursor_x: float = 0.0
    cursor_y: float = 0.0

    def press(self, symbol: int) -> None:
        self.pressed.add(symbol)

    def release(self, symbol: int) -> None:
        self.pressed.discard(symbol)

    def move(self, dx: float, dy: float) -> None:
        self.cursor_x += dx
        self.cursor_y -= dy

    def is_pressed(self, key: int) -> bool:
        return key in self.pressed

    @property
    def cursor(self) -> Tuple[float, float]:
        return (self.cursor_x, self.cursor_y)


class Window:
    """A window whose cursor is captured for mouse-look."""

    def __init__(self, width: int = 800, height: int = 600, title: str = "meshview") -> None:
        import pyglet
        from pyglet import gl

        config = gl.Config(
            major_version=3,
            minor_version=3,
            forward_compatible=True,
            double_buffer=True,
            depth_size=24,
        )
        self._window = pyglet.window.Window(
            width, height, caption=title, config=config, resizable=True
        )
        self._handled = pyglet.event.EVENT_HANDLED
        self._input = _InputState()
        self._should_close = False
        self._closed = False

        self._window.push_handlers(
            on_key_press=self._on_key_press,
            on_key_release=self._on_key_release,
            on_mouse_motion=self._on_mouse_motion,
            on_mouse_drag=self._on_mouse_drag,
            on_close=self._on_close,
            on_resize=self._on_resize,
        )
        self._window.set_exclusive_mouse(True)

    def _on_key_press(self, symbol, modifiers):
        self._input.press(symbol)

    def _on_key_release(self, symbol, modifiers):
        self._input.release(symbol)

    def _on_mouse_motion(self, x, y, dx, dy):
        self._input.move(dx, dy)

    def _on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        self._input.move(dx, dy)

    def _on_close(self):
        self._should_close = True
        return self._handled

    def _on_resize(self, width, height):
        from pyglet import gl

        fb_width, fb_height = self._window.get_framebuffer_size()
        gl.glViewport(0, 0, fb_width, fb_height)

    def poll_events(self) -> None:
        self._window.dispatch_events()

    def swap_buffers(self) -> None:
        self._window.flip()

    def should_close(self) -> bool:
        return self._should_close or self._closed

    def update(self) -> None:
        """Present the frame, process events and honour the escape key."""
        self.swap_buffers()
        self.poll_events()
        if self._input.is_pressed(Key.ESCAPE):
            self._should_close = True

    def is_key_pressed(self, key: int) -> bool:
        return self._input.is_pressed(key)

    def cursor_position(self) -> Tuple[float, float]:
        return self._input.cursor

    def close(self) -> None:
        """Destroy the window and its context."""
        if not self._closed:
            self._window.close()
            self._closed = True