"""Unit tests for environment settings."""

from ipsync.core.settings import EnvSettings


def test_settings_defaults(monkeypatch):
    """Test default settings initialization."""
    for var in ("NETBOX_URL", "NETBOX_TOKEN", "NETBOX_VERIFY_SSL", "NETBOX_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)

    test_settings = EnvSettings(_env_file=None)

    assert test_settings.netbox_url == ""
    assert test_settings.netbox_verify_ssl is True
    assert test_settings.netbox_timeout == 10.0
    assert test_settings.log_level == "WARNING"
    assert test_settings.netbox_configured is False


def test_settings_from_environment(monkeypatch):
    """Test environment variables override defaults."""
    monkeypatch.setenv("NETBOX_URL", "https://netbox.lab")
    monkeypatch.setenv("NETBOX_TOKEN", "abc123")
    monkeypatch.setenv("NETBOX_VERIFY_SSL", "false")
    monkeypatch.setenv("NETBOX_TIMEOUT", "2.5")

    test_settings = EnvSettings(_env_file=None)

    assert test_settings.netbox_url == "https://netbox.lab"
    assert test_settings.netbox_verify_ssl is False
    assert test_settings.netbox_timeout == 2.5
    assert test_settings.netbox_configured is True
