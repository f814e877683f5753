import os
import sys

import pytest

# Add repository root to Python path for tests
ROOT_DIR = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, ROOT_DIR)

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402

from retween.ticker import Ticker  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    """Initialise Pygame in headless mode for tests."""
    pygame.init()
    yield
    pygame.quit()


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class FrameDriver:
    """Advance a fake clock and dispatch a frame in one step."""

    def __init__(self):
        self.clock = FakeClock()
        self.ticker = Ticker(clock=self.clock)

    def advance(self, ms: float) -> None:
        self.clock.now += ms
        self.ticker.tick()

    def at(self, ms: float) -> None:
        self.clock.now = ms
        self.ticker.tick()


@pytest.fixture
def driver():
    return FrameDriver()


class DummySprite(pygame.sprite.Sprite):
    """Minimal sprite used by the adapter tests."""

    def __init__(self, pos=(0, 0), with_pos=True):
        super().__init__()
        self.image = pygame.Surface((1, 1))
        self.rect = self.image.get_rect(center=pos)
        if with_pos:
            self.pos = pygame.math.Vector2(self.rect.center)
        self.scale = 1.0

    def set_scale(self, value):
        self.scale = value
