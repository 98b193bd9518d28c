import pygame
import logging
logger = logging.getLogger(__name__)

from ..core.utils import draw_text


class DebugOverlays:
    """Grid-position readout drawn above the frame when enabled (F3)."""

    def __init__(self, loop):
        self.loop = loop

    def get_grid_position(self, mouse_screen_pos, output_size):
        loop = self.loop
        playground = loop.playground
        scale = playground.scale_factor(*output_size)
        tile = playground.tile_at_pixel(mouse_screen_pos[0], mouse_screen_pos[1], scale)
        if tile is None:
            return None, "Out of bounds"
        grid_x = mouse_screen_pos[0] // scale[0]
        grid_y = mouse_screen_pos[1] // scale[1]
        return (grid_x, grid_y), tile.tile_type.name.title()

    def info_lines(self, mouse_screen_pos, output_size):
        loop = self.loop
        scale = loop.playground.scale_factor(*output_size)
        grid_pos, tile_name = self.get_grid_position(mouse_screen_pos, output_size)
        lines = [
            f"Player: {loop.player.position}",
            f"Scale: {scale[0]}x{scale[1]} px",
        ]
        if grid_pos is None:
            lines.append(f"Mouse: {tile_name}")
        else:
            lines.append(f"Mouse: {grid_pos} {tile_name}")
        return lines

    def draw_grid_position_overlay(self, surface, mouse_screen_pos=None):
        if not self.loop.debug_grid_position:
            return
        if mouse_screen_pos is None:
            mouse_screen_pos = pygame.mouse.get_pos()
        lines = self.info_lines(mouse_screen_pos, surface.get_size())
        panel_rect = pygame.Rect(5, 5, 220, len(lines) * 18 + 10)
        overlay = pygame.Surface(panel_rect.size, pygame.SRCALPHA)
        pygame.draw.rect(overlay, (20, 20, 30, 220), overlay.get_rect(), border_radius=5)
        pygame.draw.rect(overlay, (255, 255, 100, 180), overlay.get_rect(), width=1, border_radius=5)
        for i, line in enumerate(lines):
            draw_text(overlay, line, (5, 5 + i * 18), (255, 255, 255), size=14)
        surface.blit(overlay, panel_rect.topleft)
