import pytest

from pokerlog import config
from pokerlog.config import Config


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Run every test against built-in defaults, not a user config file."""
    cfg = Config()
    monkeypatch.setattr(config, "_config", cfg)
    return cfg
