"""Shared test fixtures for regen-engine."""

import pytest

from regen_engine.config import ProjectConfig
from regen_engine.registry.store import GenerationRegistry


@pytest.fixture
def project(tmp_path):
    return ProjectConfig(root=tmp_path)


@pytest.fixture
def registry(project):
    return GenerationRegistry(project)
