import pytest

from config import DEFAULT_OVERPASS_URL, Settings, load_settings
from nearby.errors import ConfigurationError

ENV_VARS = [
    "OVERPASS_URL", "OVERPASS_TIMEOUT", "OVERPASS_QUERY_TIMEOUT", "UTC_OFFSET_HOURS",
    "OPEN_HOUR", "CLOSE_HOUR", "RADIUS_OPTIONS", "DEFAULT_RADIUS_KM", "MAX_RESULTS",
    "DELIVERY_URL", "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLoadSettings:
    def test_defaults(self, clean_env):
        settings = load_settings()
        assert settings.overpass_url == DEFAULT_OVERPASS_URL
        assert settings.overpass_query_timeout == 25
        assert settings.utc_offset_hours == 5
        assert (settings.open_hour, settings.close_hour) == (7, 23)
        assert settings.radius_options == (2.0, 3.0, 6.0)
        assert settings.max_results == 5
        assert settings.delivery_url is None

    def test_reads_environment(self, clean_env):
        clean_env.setenv("OVERPASS_URL", "https://overpass.example/api/interpreter")
        clean_env.setenv("RADIUS_OPTIONS", "1, 5,10")
        clean_env.setenv("OPEN_HOUR", "8")
        clean_env.setenv("CLOSE_HOUR", "20")
        clean_env.setenv("DELIVERY_URL", "https://transport.example/send")
        clean_env.setenv("LOG_LEVEL", "debug")

        settings = load_settings()
        assert settings.overpass_url == "https://overpass.example/api/interpreter"
        assert settings.radius_options == (1.0, 5.0, 10.0)
        assert (settings.open_hour, settings.close_hour) == (8, 20)
        assert settings.delivery_url == "https://transport.example/send"
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("name,value", [
        ("OVERPASS_URL", "   "),
        ("OPEN_HOUR", "seven"),
        ("OPEN_HOUR", "23"),
        ("CLOSE_HOUR", "25"),
        ("RADIUS_OPTIONS", "2,three"),
        ("RADIUS_OPTIONS", "0,2"),
        ("RADIUS_OPTIONS", ","),
        ("MAX_RESULTS", "0"),
        ("LOG_LEVEL", "LOUD"),
    ])
    def test_invalid_values_are_fatal(self, clean_env, name, value):
        clean_env.setenv(name, value)
        with pytest.raises(ConfigurationError):
            load_settings()


class TestSettings:
    def test_window_must_be_ordered(self):
        with pytest.raises(ValueError):
            Settings(open_hour=10, close_hour=9)
