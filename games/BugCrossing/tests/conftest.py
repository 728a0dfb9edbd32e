"""
Shared pytest setup for the Bug Crossing tests.

Runs pygame headless and keeps the per-module log configuration from
leaking between tests.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from arcadekit import logging as arcade_logging


@pytest.fixture(autouse=True)
def restore_log_config():
    """Snapshot and restore the logging configuration around each test."""
    saved_default = arcade_logging._config['default_level']
    saved_modules = dict(arcade_logging._config['module_levels'])
    yield
    arcade_logging._config['default_level'] = saved_default
    arcade_logging._config['module_levels'].clear()
    arcade_logging._config['module_levels'].update(saved_modules)
