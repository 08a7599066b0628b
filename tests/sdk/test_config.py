import os

import pytest
from pydantic import ValidationError

from network_manager import Config
from network_manager._utils import describe_body, redact_headers


class TestConfig:
    def test_defaults(self):
        config = Config()

        assert config.log_bodies is False
        assert config.max_workers is None
        assert "authorization" in config.redacted_headers

    def test_redacted_headers_are_lowercased(self):
        config = Config(redacted_headers={"X-Secret"})

        assert config.redacted_headers == frozenset({"x-secret"})

    def test_max_workers_must_be_positive(self):
        with pytest.raises(ValidationError):
            Config(max_workers=0)

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NETWORK_MANAGER_LOG_BODIES", "true")
        monkeypatch.setenv("NETWORK_MANAGER_MAX_WORKERS", "3")

        config = Config.from_env(dotenv=False)

        assert config.log_bodies is True
        assert config.max_workers == 3

    def test_from_env_defaults(self):
        config = Config.from_env(dotenv=False)

        assert config == Config()

    @pytest.mark.parametrize("value", ["abc", "0", "-2"])
    def test_from_env_rejects_invalid_max_workers(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ):
        monkeypatch.setenv("NETWORK_MANAGER_MAX_WORKERS", value)

        with pytest.raises(ValidationError):
            Config.from_env(dotenv=False)

    def test_from_env_reads_dotenv(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path
    ):
        (tmp_path / ".env").write_text("NETWORK_MANAGER_LOG_BODIES=1\n")
        monkeypatch.chdir(tmp_path)

        try:
            config = Config.from_env()
        finally:
            os.environ.pop("NETWORK_MANAGER_LOG_BODIES", None)

        assert config.log_bodies is True


class TestRedaction:
    def test_sensitive_headers_are_masked(self):
        headers = {
            "authorization": "Bearer abc",
            "Cookie": "sid=1",
            "X-Api-Key": "k",
            "Accept": "application/json",
        }

        assert redact_headers(headers) == {
            "authorization": "***",
            "Cookie": "***",
            "X-Api-Key": "***",
            "Accept": "application/json",
        }

    def test_custom_sensitive_set(self):
        assert redact_headers({"X-Secret": "s", "Authorization": "a"}, {"x-secret"}) == {
            "X-Secret": "***",
            "Authorization": "a",
        }

    def test_describe_body(self):
        assert describe_body(None, log_bodies=True) == "<no body>"
        assert describe_body(b"abc", log_bodies=False) == "<3 bytes>"
        assert describe_body(b"abc", log_bodies=True) == "abc"
