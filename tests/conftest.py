"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# The modules live at the project root (flat layout)
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from scene_settings import SceneSettings  # noqa: E402
from world import World  # noqa: E402


@pytest.fixture
def default_world():
    """The two-sphere scene most world tests start from."""
    return World.default()


@pytest.fixture
def fine_settings():
    """Small offsets for scenarios whose reference colors assume a 1e-4 acne offset."""
    return SceneSettings(epsilon=1e-5, shadow_epsilon=1e-4)


@pytest.fixture
def fine_world(fine_settings):
    return World.default(settings=fine_settings)


@pytest.fixture(scope="session")
def project_root_path():
    return project_root
