import pygame
import pytest

from tilegrid.core.utils import compose_color, split_rgb
from tilegrid.entities.player import Player
from tilegrid.level.playground import Playground
from tilegrid.tiles.tile_renderer import DrawCommand, TileRenderer, render
from tilegrid.tiles.tile_types import floor


RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


# --- Color channels ---

def test_split_rgb():
    assert split_rgb(0xFF0000) == RED
    assert split_rgb(0x123456) == (0x12, 0x34, 0x56)


def test_compose_color_inverts_split():
    assert compose_color(0x12, 0x34, 0x56) == 0x123456
    assert compose_color(*split_rgb(0xABCDEF)) == 0xABCDEF


# --- Draw commands ---

def test_one_command_per_visible_tile_plus_player(sample_world):
    playground, spawn = sample_world
    player = Player.spawn(spawn)
    commands = render(playground, player, (400, 300))

    visible = [t for t in playground.tiles if t.is_visible]
    assert len(commands) == len(visible) + 1

    # Sample map has one empty tile at (2, 1)
    rects = [tuple(c.rect) for c in commands[:-1]]
    assert (200, 100, 100, 100) not in rects
    assert rects[0] == (0, 0, 100, 100)
    assert commands[0].color == BLUE


def test_tile_rects_follow_scale(sample_world):
    playground, spawn = sample_world
    commands = render(playground, Player.spawn(spawn), (80, 30))
    sx, sy = playground.scale_factor(80, 30)
    expected = [
        (x * sx, y * sy, sx, sy)
        for x, y, tile in playground.cells() if tile.is_visible
    ]
    assert [tuple(c.rect) for c in commands[:-1]] == expected


def test_player_drawn_last(sample_world):
    playground, spawn = sample_world
    commands = render(playground, Player.spawn(spawn), (400, 300))
    assert commands[-1] == DrawCommand((100, 100, 100, 100), GREEN)
    assert commands[5].color == RED  # spawn floor tile under the player


def test_render_is_pure(sample_world):
    playground, spawn = sample_world
    player = Player.spawn(spawn)
    first = render(playground, player, (400, 300))
    second = render(playground, player, (400, 300))
    assert first == second
    assert player.position == spawn


def test_degenerate_scale_does_not_crash():
    playground = Playground.filled(10, 10, floor())
    renderer = TileRenderer()
    commands = renderer.render(playground, Player(0, 0), (5, 5))
    assert all(c.rect[2:] == (0, 0) for c in commands)

    surface = pygame.Surface((5, 5))
    renderer.draw(surface, commands)
    assert surface.get_at((0, 0))[:3] == (0, 0, 0)


def test_player_outside_grid_is_still_emitted(sample_world):
    playground, _ = sample_world
    commands = render(playground, Player(-2, 7), (400, 300))
    assert tuple(commands[-1].rect) == (-200, 700, 100, 100)


# --- Surface output ---

def test_draw_fills_tiles(sample_world):
    playground, spawn = sample_world
    renderer = TileRenderer()
    surface = pygame.Surface((40, 30))
    renderer.draw(surface, renderer.render(playground, Player.spawn(spawn), surface.get_size()))

    assert surface.get_at((5, 5))[:3] == BLUE      # wall
    assert surface.get_at((15, 15))[:3] == GREEN   # player over spawn
    assert surface.get_at((25, 15))[:3] == (0, 0, 0)  # empty, untouched


def test_draw_commands_are_hashable(sample_world):
    playground, spawn = sample_world
    player = Player.spawn(spawn)
    first = render(playground, player, (400, 300))
    second = render(playground, player, (400, 300))
    assert set(first) == set(second)
    assert len(set(first)) == len(first)
