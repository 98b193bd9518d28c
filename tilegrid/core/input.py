"""
Input handling for the tile game.

`InputHandler.translate(event)` turns one pygame event into a command and
`InputHandler.process_events(loop, events)` applies a batch of them to the
game loop: quit and Escape stop it, movement keys step the player, F3
toggles the debug overlay. Everything else is ignored without error.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Union
import logging
import pygame

from ..entities.player import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quit:
    """Stop the game loop."""


@dataclass(frozen=True)
class Move:
    direction: Direction


@dataclass(frozen=True)
class ToggleDebug:
    """Flip the debug overlay on or off."""


Command = Union[Quit, Move, ToggleDebug]

MOVEMENT_KEYS: Dict[int, Direction] = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
}


class InputHandler:
    """Centralized input/event processing.

    Usage:
        handler = InputHandler()
        handler.process_events(loop, pygame.event.get())
    """

    def __init__(self, key_bindings: Optional[Dict[int, Direction]] = None):
        self.key_bindings = dict(MOVEMENT_KEYS if key_bindings is None else key_bindings)

    def translate(self, event) -> Optional[Command]:
        if event.type == pygame.QUIT:
            return Quit()
        if event.type != pygame.KEYDOWN:
            return None
        if event.key == pygame.K_ESCAPE:
            return Quit()
        if event.key == pygame.K_F3:
            return ToggleDebug()
        direction = self.key_bindings.get(event.key)
        if direction is not None:
            return Move(direction)
        return None

    def process_events(self, loop, events: Iterable) -> None:
        """Apply every pending event to the loop.

        Events after a quit are still drained but no longer applied.
        """
        for ev in events:
            command = self.translate(ev)
            if command is None or not loop.running:
                continue
            if isinstance(command, Quit):
                loop.stop()
            elif isinstance(command, Move):
                loop.move_player(command.direction)
            elif isinstance(command, ToggleDebug):
                loop.toggle_debug()
