import pygame
from dataclasses import dataclass
from typing import List, Tuple

from config import PLAYER_COLOR, TILE_OUTLINE_WIDTH
from ..core.utils import split_rgb
from ..entities.player import Player
from ..level.playground import Playground

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class DrawCommand:
    """A filled and outlined rectangle in screen pixels."""
    rect: Tuple[int, int, int, int]
    color: RGB
    outline_width: int = TILE_OUTLINE_WIDTH


class TileRenderer:
    """Handles rendering of the playground and player."""

    def __init__(self, player_color: int = PLAYER_COLOR):
        self.player_color = player_color

    def render(self, playground: Playground, player: Player,
               output_size: Tuple[int, int]) -> List[DrawCommand]:
        """Produce this frame's draw commands, player last so it sits on top."""
        tile_w, tile_h = playground.scale_factor(*output_size)
        commands = []
        for x, y, tile in playground.cells():
            if not tile.is_visible:
                continue
            rect = (x * tile_w, y * tile_h, tile_w, tile_h)
            commands.append(DrawCommand(rect, split_rgb(tile.color)))

        player_rect = (player.column * tile_w, player.row * tile_h, tile_w, tile_h)
        commands.append(DrawCommand(player_rect, split_rgb(self.player_color)))
        return commands

    def draw(self, surface: pygame.Surface, commands: List[DrawCommand]):
        """Issue draw commands to a surface: fill, then outline."""
        for command in commands:
            rect = pygame.Rect(command.rect)
            if rect.width <= 0 or rect.height <= 0:
                # Degenerate scale: nothing visible to draw
                continue
            pygame.draw.rect(surface, command.color, rect)
            pygame.draw.rect(surface, command.color, rect, width=command.outline_width)


def render(playground: Playground, player: Player, output_size: Tuple[int, int]) -> List[DrawCommand]:
    return TileRenderer().render(playground, player, output_size)
