"""
Game loop orchestration.

One tick, in order: drain input -> update player -> clear, render, present
-> sleep to the frame cadence. A quit event or Escape stops the loop; the
stopping tick neither renders nor sleeps.
"""
import logging
from enum import Enum
from typing import Callable, Iterable, Optional

import pygame

from config import BG, FPS
from .input import InputHandler
from .utils import split_rgb
from ..debug.overlays import DebugOverlays
from ..entities.player import Direction, Player
from ..level.playground import Playground
from ..tiles.tile_renderer import TileRenderer

logger = logging.getLogger(__name__)


class GameState(Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class GameLoop:
    """Drives one game session from first tick until stopped.

    Args:
        playground: the loaded grid
        player: the player, already at its spawn
        get_surface: returns the surface to draw on this tick; called every
            tick so window resizes are picked up
        present: makes the finished frame visible
        clock: anything with a pygame.time.Clock-style ``tick(fps)``
        event_source: returns the pending events, polled once per tick
    """

    def __init__(self, playground: Playground, player: Player,
                 get_surface: Callable[[], pygame.Surface],
                 present: Callable[[], None] = pygame.display.flip,
                 clock=None,
                 event_source: Callable[[], Iterable] = pygame.event.get,
                 renderer: Optional[TileRenderer] = None,
                 show_debug: bool = False):
        self.playground = playground
        self.player = player
        self.get_surface = get_surface
        self.present = present
        self.clock = clock if clock is not None else pygame.time.Clock()
        self.event_source = event_source
        self.renderer = renderer or TileRenderer()
        self.input_handler = InputHandler()
        self.overlays = DebugOverlays(self)
        self.debug_grid_position = show_debug
        self.state = GameState.RUNNING
        self.frames = 0

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    def stop(self):
        if self.running:
            logger.info("Game loop stopping after %d frames", self.frames)
        self.state = GameState.STOPPED

    def move_player(self, direction: Direction) -> bool:
        return self.player.move(direction, self.playground)

    def toggle_debug(self):
        self.debug_grid_position = not self.debug_grid_position
        logger.info("Debug overlay %s", "ON" if self.debug_grid_position else "OFF")

    def draw(self, surface: pygame.Surface):
        surface.fill(split_rgb(BG))
        commands = self.renderer.render(self.playground, self.player, surface.get_size())
        self.renderer.draw(surface, commands)
        self.overlays.draw_grid_position_overlay(surface)

    def tick(self) -> bool:
        """Run one iteration. Returns True while the loop is still running."""
        self.input_handler.process_events(self, self.event_source())
        if not self.running:
            return False

        self.draw(self.get_surface())
        self.present()
        self.frames += 1
        self.clock.tick(FPS)
        return True

    def run(self):
        logger.info("Game loop started at %s", self.player.position)
        while self.tick():
            pass
