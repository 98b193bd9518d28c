"""Scoped ownership of the pygame window and clock for one game session."""
import logging

import pygame

from config import WIDTH, HEIGHT, WINDOW_TITLE

logger = logging.getLogger(__name__)


class SessionError(Exception):
    """The display or input system could not be acquired."""


class GameSession:
    """
    Acquires pygame on enter and always releases it on exit.

    Usage:
        with GameSession() as session:
            GameLoop(..., get_surface=session.get_surface,
                     present=session.present, clock=session.clock).run()
    """

    def __init__(self, size=(WIDTH, HEIGHT), title=WINDOW_TITLE):
        self.size = size
        self.title = title
        self.screen = None
        self.clock = None

    def __enter__(self):
        pygame.init()
        try:
            self.screen = pygame.display.set_mode(self.size, pygame.RESIZABLE)
        except pygame.error as e:
            pygame.quit()
            raise SessionError(f"Unable to create window: {e}") from e
        pygame.display.set_caption(self.title)
        self.clock = pygame.time.Clock()
        logger.info("Opened %dx%d window '%s'", self.size[0], self.size[1], self.title)
        return self

    def __exit__(self, exc_type, exc, tb):
        pygame.quit()
        self.screen = None
        logger.info("Session closed")
        return False

    def get_surface(self) -> pygame.Surface:
        # The display surface tracks window resizes
        surface = pygame.display.get_surface()
        return surface if surface is not None else self.screen

    def present(self):
        pygame.display.flip()
