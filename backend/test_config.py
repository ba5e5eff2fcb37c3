"""Settings parsing used by the app lifespan and run_server.py."""
from medadvisor.core import config


def test_env_bool(monkeypatch):
    monkeypatch.setenv("MEDADVISOR_FLAG", " Yes ")
    assert config._env_bool("MEDADVISOR_FLAG", "false") is True
    monkeypatch.setenv("MEDADVISOR_FLAG", "0")
    assert config._env_bool("MEDADVISOR_FLAG", "true") is False
    monkeypatch.delenv("MEDADVISOR_FLAG")
    assert config._env_bool("MEDADVISOR_FLAG", "on") is True


def test_server_settings_are_typed():
    settings = config.Settings()
    assert isinstance(settings.HOST, str) and settings.HOST
    assert isinstance(settings.PORT, int)
    assert isinstance(settings.RELOAD, bool)
    assert settings.LOG_LEVEL == settings.LOG_LEVEL.upper()
