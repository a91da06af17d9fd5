import pytest
from pydantic import ValidationError

from settings.auth import AuthSettings


class TestAuthSettings:
    def test_secret_key_is_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("AUTH_SECRET_KEY", raising=False)

        with pytest.raises(ValidationError, match="secret_key"):
            AuthSettings(_env_file=None)

    def test_empty_secret_key_is_rejected(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("AUTH_SECRET_KEY", "")

        with pytest.raises(ValidationError, match="secret_key"):
            AuthSettings(_env_file=None)

    def test_secret_key_from_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("AUTH_SECRET_KEY", "deployment-secret")

        settings = AuthSettings(_env_file=None)

        assert settings.secret_key == "deployment-secret"
        assert settings.algorithm == "HS256"
