import pytest

_SETTINGS_ENV_VARS = (
    "APP_ENV",
    "LOG_LEVEL",
    "ERROR_FIELD",
    "PAYLOAD_FALLBACK_MESSAGE",
    "UNKNOWN_REQUEST_DETAIL",
    "UNKNOWN_CLIENT_DETAIL",
)


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Settings tests independent of the developer's environment."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
