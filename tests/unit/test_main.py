import io
import json

import pytest

from error_normalizer.main import main


class TestMain:
    def test_prints_payload_message(self, capsys: pytest.CaptureFixture[str]) -> None:
        raw = json.dumps({"response": {"data": {"error_message": "Quota exceeded"}}})
        exit_code = main([raw])
        assert exit_code == 1
        assert capsys.readouterr().out.strip() == "Quota exceeded"

    def test_reads_stdin_without_argument(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO('{"request": {}, "message": "timeout"}'))
        main([])
        assert capsys.readouterr().out.strip() == "No response received: timeout"

    def test_non_json_input_is_a_client_error(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["boom"])
        assert capsys.readouterr().out.strip() == "Unexpected client error: unknown error"

    def test_honours_error_field_env(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("ERROR_FIELD", "error_details")
        raw = json.dumps({
            "response": {"data": {"error_message": "short", "error_details": "long"}},
        })
        main([raw])
        assert capsys.readouterr().out.strip() == "long"
