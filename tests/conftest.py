import os
import sys

import pytest

# Headless pygame for every test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pygame

from tilegrid.entities.player import Player
from tilegrid.tiles.tile_parser import parse_map


SAMPLE_MAP = "||||\n|@_|\n||||\n"

OPEN_MAP = (
    "|||||\n"
    "|%%%|\n"
    "|%@%|\n"
    "|%%%|\n"
    "|||||\n"
)


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def sample_world():
    return parse_map(SAMPLE_MAP)


@pytest.fixture
def open_world():
    return parse_map(OPEN_MAP)


@pytest.fixture
def open_player(open_world):
    _, spawn = open_world
    return Player.spawn(spawn)


def key_event(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def quit_event():
    return pygame.event.Event(pygame.QUIT)
