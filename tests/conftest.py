"""
Pytest configuration and fixtures for test isolation.
"""
import pytest

from propcheck.config.environment import EnvironmentVariables
from propcheck.utils.logging_config import logging_config


@pytest.fixture(autouse=True)
def isolate_tests(tmp_path, monkeypatch):
    """
    Automatically isolate each test by:
    1. Running from a temporary working directory with a temporary HOME,
       so no real .propcheck/config.yaml is picked up
    2. Removing PROPCHECK_* environment variables
    3. Detaching logging handlers installed by the CLI
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)

    for name in EnvironmentVariables.get_all_variables():
        monkeypatch.delenv(name, raising=False)

    yield

    logging_config.reset()
