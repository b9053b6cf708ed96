"""Window, main loop and the program interface the engine drives."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

import pygame

from gravity.callback import Callback, EventDispatcher, EventType, globals_dispatcher

logger = logging.getLogger(__name__)

APPLICATION_INFO = ""

_COLOR_STEP = 0.001


class Program:
    """A program run by the engine; override the hooks that are needed.

    The base hooks keep a small record of the program's life: frames
    updated and drawn, how often the window was resized or moved, and
    whether a close was requested.
    """

    frames_updated: int = 0
    frames_drawn: int = 0
    resize_count: int = 0
    close_requested: bool = False

    def init(self, params: str) -> bool:
        """Prepare the program; return False to abort start-up."""
        return False

    def update(self) -> None:
        """Advance the program by one frame."""
        self.frames_updated += 1

    def draw(self) -> None:
        """Render one frame."""
        self.frames_drawn += 1

    def on_resize(self) -> None:
        """React to the window being resized or moved."""
        self.resize_count += 1

    def on_close(self) -> None:
        """React to the window being asked to close."""
        self.close_requested = True


@dataclass
class Settings:
    """Initial window placement and title."""

    title: str = "Gravity"
    screen_left: int = 1600
    screen_top: int = 100
    screen_width: int = 600
    screen_height: int = 400
    frame_rate: int = 60

    @property
    def window_title(self) -> str:
        return f"{self.title}_{APPLICATION_INFO}"


settings = Settings()


@dataclass
class ClearColorCycle:
    """Background colour that drifts each frame and bounces inside [0, 1]."""

    color: list[float] = field(default_factory=lambda: [0.3, 0.6, 0.9])
    direction: list[float] = field(default_factory=lambda: [_COLOR_STEP] * 3)

    def step(self) -> tuple[float, float, float]:
        """Advance one frame and return the new colour."""
        for channel, delta in enumerate(self.direction):
            value = self.color[channel] + delta
            if value > 1.0:
                value, self.direction[channel] = 1.0, -_COLOR_STEP
            elif value < 0.0:
                value, self.direction[channel] = 0.0, _COLOR_STEP
            self.color[channel] = value
        return tuple(self.color)


_SPECIAL_KEYS = {
    pygame.K_ESCAPE: 256,
    pygame.K_RETURN: 257,
    pygame.K_TAB: 258,
    pygame.K_BACKSPACE: 259,
    pygame.K_INSERT: 260,
    pygame.K_DELETE: 261,
    pygame.K_RIGHT: 262,
    pygame.K_LEFT: 263,
    pygame.K_DOWN: 264,
    pygame.K_UP: 265,
    pygame.K_LSHIFT: 340,
    pygame.K_LCTRL: 341,
    pygame.K_LALT: 342,
    pygame.K_RSHIFT: 344,
    pygame.K_RCTRL: 345,
    pygame.K_RALT: 346,
}
_SPECIAL_KEYS.update(
    {getattr(pygame, f"K_F{number}"): 289 + number for number in range(1, 13)}
)

_MOUSE_BUTTONS = {1: 0, 3: 1, 2: 2, 6: 3, 7: 4}


def _key_code(pygame_key: int) -> Optional[int]:
    """Translate a pygame key into the engine's key code, or None if unknown."""
    if pygame_key in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[pygame_key]
    if 32 <= pygame_key < 127:
        return ord(chr(pygame_key).upper())
    return None


def _handle_event(event, program: Program, dispatcher: EventDispatcher) -> bool:
    """Route one window event; return False when the window should close."""
    if event.type == pygame.QUIT:
        program.on_close()
        return False
    if event.type == pygame.MOUSEMOTION:
        x, y = event.pos
        dispatcher.on_cursor_pos(x, y)
    elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
        button = _MOUSE_BUTTONS.get(event.button)
        if button is not None:
            pressed = event.type == pygame.MOUSEBUTTONDOWN
            dispatcher.on_mouse_button(
                EventType.PRESS_TAP if pressed else EventType.RELEASE_TAP, button
            )
    elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
        key = _key_code(event.key)
        if key is not None:
            pressed = event.type == pygame.KEYDOWN
            dispatcher.on_key(EventType.PRESS_KEY if pressed else EventType.RELEASE_KEY, key)
    elif event.type == pygame.MOUSEWHEEL:
        dispatcher.on_scroll(event.y)
    elif event.type in (pygame.WINDOWRESIZED, pygame.WINDOWMOVED):
        program.on_resize()
    return True


def _main_loop(program: Program, surface, dispatcher: EventDispatcher) -> None:
    background = ClearColorCycle()
    clock = pygame.time.Clock()
    running = True
    while running:
        red, green, blue = background.step()
        surface.fill((round(red * 255), round(green * 255), round(blue * 255)))

        program.update()
        program.draw()

        dispatcher.update()

        pygame.display.flip()
        for event in pygame.event.get():
            if not _handle_event(event, program, dispatcher):
                running = False
        clock.tick(settings.frame_rate)


def _run(program: Program, params: str) -> int:
    os.environ["SDL_VIDEO_WINDOW_POS"] = f"{settings.screen_left},{settings.screen_top}"
    try:
        pygame.display.init()
    except pygame.error as exc:
        logger.error("display initialisation failed: %s", exc)
        return 1

    try:
        try:
            surface = pygame.display.set_mode((settings.screen_width, settings.screen_height))
        except pygame.error as exc:
            logger.error("window creation failed: %s", exc)
            return 1
        pygame.display.set_caption(settings.window_title)
        logger.info("SDL version: %s", ".".join(map(str, pygame.get_sdl_version())))

        settings.screen_width, settings.screen_height = surface.get_size()

        if not program.init(params):
            logger.error("program initialisation failed")
            return 2

        program.on_resize()

        dispatcher = program.dispatcher if isinstance(program, Callback) else globals_dispatcher()
        _main_loop(program, surface, dispatcher)
        return 0
    finally:
        pygame.display.quit()


def execute(program: Optional[Program], params: str) -> int:
    """Open the window and run ``program`` until it closes; return an exit status."""
    if program is None:
        logger.error("no program to execute")
        return 1
    return _run(program, params)