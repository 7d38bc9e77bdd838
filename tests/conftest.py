"""
conftest.py
-----------
Shared pytest configuration and fixtures for Skyline Jump tests.

Contains:
- Headless SDL setup (dummy video and audio drivers)
- Common fixtures used across multiple test modules
- Pytest configuration and hooks
"""

import os
import sys
from collections import defaultdict
from unittest.mock import MagicMock

# Headless SDL before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Project root for imports without an editable install
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pygame
import pytest

from skyline.core.debug.debug_logger import LoggerConfig
from skyline.core.services.input_manager import InputManager, InputFrame


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    """Initialize pygame once for the whole run."""
    pygame.init()
    pygame.font.init()
    yield
    pygame.quit()


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep test output readable; restore the level afterwards."""
    level, enabled = LoggerConfig.LOG_LEVEL, LoggerConfig.ENABLE_LOGGING
    LoggerConfig.set_level("ERROR")
    yield
    LoggerConfig.LOG_LEVEL, LoggerConfig.ENABLE_LOGGING = level, enabled


# Common mock fixtures
@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager with common methods."""
    draw_manager = MagicMock()
    draw_manager.queue_draw = MagicMock()
    draw_manager.queue_shape = MagicMock()
    return draw_manager


@pytest.fixture
def mock_sound_manager():
    """Mock for SoundManager."""
    sound_manager = MagicMock()
    sound_manager.play = MagicMock()
    sound_manager.pause = MagicMock()
    return sound_manager


@pytest.fixture
def mock_assets():
    """Mock AssetSelection returning real surfaces."""
    assets = MagicMock()
    assets.background.return_value = pygame.Surface((800, 600))
    assets.player_texture.return_value = pygame.Surface((50, 50))
    assets.thumbnail.return_value = pygame.Surface((200, 200))
    return assets


# Test utilities
def make_key_state(*pressed):
    """Key-state lookup with the given pygame key constants held down."""
    state = defaultdict(bool)
    for key in pressed:
        state[key] = True
    return state


def make_input_manager(*pressed):
    """InputManager reading a fixed set of held keys."""
    return InputManager(key_state_source=lambda: make_key_state(*pressed))


def controls(left=False, right=False, jump=False):
    return InputFrame(left=left, right=right, jump=jump)


def click_event(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


def motion_event(pos):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=pos, rel=(0, 0), buttons=(0, 0, 0))


def key_down_event(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=0, unicode="", scancode=0)


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Add the unit marker to everything not marked integration."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
