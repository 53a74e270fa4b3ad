import os

# headless pygame for every test module
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest


class ScriptedSource:
    """In-memory byte source that replays fixed chunks, then returns b""."""

    def __init__(self, chunks):
        self.chunks = list(chunks)
        self.closed = False

    def read(self) -> bytes:
        return self.chunks.pop(0) if self.chunks else b""

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def scripted():
    return ScriptedSource


@pytest.fixture
def display():
    pygame.display.init()
    yield
    pygame.display.quit()
