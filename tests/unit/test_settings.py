import pytest

from error_normalizer.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_error_field(self) -> None:
        s = Settings()
        assert s.error_field == "error_message"

    def test_default_payload_fallback_message(self) -> None:
        s = Settings()
        assert s.payload_fallback_message == "An error occurred."

    def test_default_unknown_details(self) -> None:
        s = Settings()
        assert s.unknown_request_detail == "unknown request error"
        assert s.unknown_client_detail == "unknown error"


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_error_field(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ERROR_FIELD", "error_details")
        s = Settings()
        assert s.error_field == "error_details"

    def test_loads_payload_fallback_message(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAYLOAD_FALLBACK_MESSAGE", "Please retry.")
        s = Settings()
        assert s.payload_fallback_message == "Please retry."
