import pygame
from config import WHITE


def split_rgb(color):
    """Split a 0xRRGGBB integer into an (r, g, b) byte tuple."""
    return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


def compose_color(r, g, b):
    """Pack three byte channels back into a 0xRRGGBB integer."""
    rgb = r & 0xFF
    rgb = (rgb << 8) + (g & 0xFF)
    rgb = (rgb << 8) + (b & 0xFF)
    return rgb

# Lazy font getter to avoid init-order issues
_fonts = {}

def get_font(size=18, bold=False):
    key = (size, bold)
    if key not in _fonts:
        if not pygame.font.get_init():
            pygame.font.init()
        _fonts[key] = pygame.font.SysFont("consolas", size, bold=bold)
    return _fonts[key]

def draw_text(surf, text, pos, col=WHITE, size=18, bold=False):
    font = get_font(size=size, bold=bold)
    surf.blit(font.render(text, True, col), pos)
