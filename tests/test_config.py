"""
Test environment configuration and the process entry point.
"""
import pytest
from pydantic import ValidationError

from conftest import TEST_API_KEY, TEST_HOST
from vyos_mcp import server
from vyos_mcp.config import Settings, get_settings
from vyos_mcp.models import ProtocolVersion


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """No stray VYOS_* variables or .env file, and a fresh settings cache."""
    for name in ("HOST", "API_KEY", "LOG_LEVEL", "VERIFY_SSL", "DEFAULT_PROTOCOL_VERSION"):
        monkeypatch.delenv(f"VYOS_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_reads_environment(self, vyos_env):
        settings = Settings()

        assert settings.host == TEST_HOST
        assert settings.api_key == TEST_API_KEY
        assert settings.verify_ssl is False
        assert settings.timeout == 30
        assert settings.connect_timeout == 10
        assert settings.log_level == "INFO"
        assert settings.default_protocol_version == ProtocolVersion.V2025_06_18

    def test_overrides(self, vyos_env, monkeypatch):
        monkeypatch.setenv("VYOS_VERIFY_SSL", "true")
        monkeypatch.setenv("VYOS_LOG_LEVEL", "debug")
        monkeypatch.setenv("VYOS_DEFAULT_PROTOCOL_VERSION", "2024-11-05")

        settings = Settings()

        assert settings.verify_ssl is True
        assert settings.log_level == "DEBUG"
        assert settings.default_protocol_version == ProtocolVersion.V2024_11_05

    def test_reads_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text(f"VYOS_HOST={TEST_HOST}\nVYOS_API_KEY={TEST_API_KEY}\n")
        assert Settings().host == TEST_HOST

    @pytest.mark.parametrize("missing", ["VYOS_HOST", "VYOS_API_KEY"])
    def test_required(self, vyos_env, monkeypatch, missing):
        monkeypatch.delenv(missing)
        with pytest.raises(ValidationError):
            Settings()

    def test_empty_host_rejected(self, vyos_env, monkeypatch):
        monkeypatch.setenv("VYOS_HOST", "")
        with pytest.raises(ValidationError):
            Settings()

    def test_unknown_log_level_rejected(self, vyos_env, monkeypatch):
        monkeypatch.setenv("VYOS_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            Settings()

    def test_settings_cached(self, vyos_env):
        assert get_settings() is get_settings()


class TestMain:
    def test_missing_configuration_exits_nonzero(self, monkeypatch):
        started = []

        async def fake_run(settings):
            started.append(settings)

        monkeypatch.setattr(server, "run", fake_run)

        assert server.main() == 1
        assert started == []

    def test_runs_with_configuration(self, vyos_env, monkeypatch):
        started = []

        async def fake_run(settings):
            started.append(settings)

        monkeypatch.setattr(server, "run", fake_run)

        assert server.main() == 0
        assert [s.host for s in started] == [TEST_HOST]

    def test_api_key_not_logged(self, vyos_env, monkeypatch, caplog):
        async def fake_run(settings):
            pass

        monkeypatch.setattr(server, "run", fake_run)
        server.main()

        assert TEST_API_KEY not in caplog.text
