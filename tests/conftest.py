"""Pytest configuration and shared fixtures for the textbridge test suite.

This module provides shared fixtures, test configuration, and Hypothesis
profiles used across the entire test suite.
"""

import logging
import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose, deadline=None)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Restore root logger handlers and level changed by CLI tests."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty working directory and home so no real config file is found.

    Returns
    -------
    Path
        The working directory

    """
    workdir = tmp_path / "work"
    home = tmp_path / "home"
    workdir.mkdir()
    home.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.delenv("TEXTBRIDGE_CONFIG", raising=False)
    return workdir


@pytest.fixture
def sample_ini_text() -> str:
    """Provide loosely written settings text as typed into a text frame."""
    return (
        "# Export settings\n"
        "[Page Setup]\n"
        "Width = 210mm\n"
        "width = 297mm\n"
        "Bleed Size = 3 mm   \n"
        "title = “Annual Report”\n"
        "stray line without equals\n"
        "\n"
        "[Colors] ignored trailing text\n"
        "swatch = [ 255, 128, 0 ]\n"
        "facing pages = yes\n"
    )
