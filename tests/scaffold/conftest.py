"""Shared fixtures for scaffold tests."""

import os
import sys

import pytest

# Ensure tests/scaffold/ is on sys.path so test files can import the fakes
# unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_command_runner import FakeCommandRunner  # noqa: E402

from scaffed.project import ProjectConfiguration  # noqa: E402


def pytest_collection_modifyitems(items):
    for item in items:
        if "scaffold" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def project(tmp_path):
    return ProjectConfiguration(name="demo", directory=tmp_path)


@pytest.fixture
def runner():
    return FakeCommandRunner()
