"""Unit tests for application settings."""

from qanda.config import CORSSettings, ObservabilitySettings, Settings, read_git_sha
from qanda.util.observability import should_send_to_logfire


class TestCORSSettings:
    """Tests for the allowed frontend origins."""

    def test_localhost_uses_dev_server(self):
        cors = CORSSettings(frontend_host="localhost")

        assert cors.frontend_url == "http://localhost:3000"
        assert cors.allowed_origins == ["http://localhost:3000"]

    def test_production_host_uses_https(self):
        # Arrange
        settings = Settings(environment="production", frontend_host="qanda.example.com")

        # Act
        origins = settings.cors.allowed_origins

        # Assert
        assert origins == ["https://qanda.example.com", "http://localhost:3000"]

    def test_development_host_uses_http(self):
        settings = Settings(environment="development", frontend_host="dev.example.com")

        assert settings.cors.frontend_url == "http://dev.example.com"


class TestReadGitSha:
    """Tests for reading the build's commit SHA."""

    def test_reads_stripped_sha(self, tmp_path):
        version_file = tmp_path / "version.txt"
        version_file.write_text("abc123\n")

        assert read_git_sha(version_file) == "abc123"

    def test_missing_file_is_unknown(self, tmp_path):
        assert read_git_sha(tmp_path / "missing.txt") == "unknown"

    def test_empty_file_is_unknown(self, tmp_path):
        version_file = tmp_path / "version.txt"
        version_file.write_text("")

        assert read_git_sha(version_file) == "unknown"


class TestShouldSendToLogfire:
    """Tests for choosing whether records leave the process."""

    def test_token_enables_sending(self):
        observability = ObservabilitySettings(logfire_token="tok")

        assert should_send_to_logfire(observability) is True

    def test_no_token_keeps_logs_local(self):
        assert should_send_to_logfire(ObservabilitySettings()) is False

    def test_explicit_setting_overrides_token(self):
        observability = ObservabilitySettings(logfire_token="tok", send_to_logfire=False)

        assert should_send_to_logfire(observability) is False
