from __future__ import annotations

import pytest

from app.core.credentials import (
    EnvironmentCredentialSource,
    SecretParamCredentialSource,
    get_credential_source,
)


def test_environment_source_reads_at_call_time(monkeypatch) -> None:
    source = EnvironmentCredentialSource()
    monkeypatch.delenv("SENDGRID_API_KEY", raising=False)
    assert source.get_api_key() is None

    monkeypatch.setenv("SENDGRID_API_KEY", "  SG.live  ")
    assert source.get_api_key() == "SG.live"


def test_environment_source_treats_blank_as_missing() -> None:
    source = EnvironmentCredentialSource(environ={"SENDGRID_API_KEY": "   "})

    assert source.get_api_key() is None
    assert source.function_secrets == []


def test_secret_source_declares_the_secret(monkeypatch) -> None:
    monkeypatch.setenv("MAIL_KEY", "SG.secret")
    source = SecretParamCredentialSource("MAIL_KEY")

    assert [param.name for param in source.function_secrets] == ["MAIL_KEY"]
    assert source.get_api_key() == "SG.secret"


def test_get_credential_source_selects_implementation(config) -> None:
    config.SENDGRID_CREDENTIAL_SOURCE = "env"
    assert isinstance(get_credential_source(config), EnvironmentCredentialSource)

    config.SENDGRID_CREDENTIAL_SOURCE = "secret"
    config.SENDGRID_SECRET_NAME = "SENDGRID_API_KEY"
    assert isinstance(get_credential_source(config), SecretParamCredentialSource)


def test_get_credential_source_rejects_unknown_values(config) -> None:
    config.SENDGRID_CREDENTIAL_SOURCE = "vault"

    with pytest.raises(ValueError, match="vault"):
        get_credential_source(config)


def test_secret_sources_share_one_declaration(monkeypatch) -> None:
    monkeypatch.setenv("SHARED_MAIL_KEY", "SG.shared")

    first = SecretParamCredentialSource("SHARED_MAIL_KEY")
    second = SecretParamCredentialSource("SHARED_MAIL_KEY")

    assert first.function_secrets[0] is second.function_secrets[0]
    assert second.get_api_key() == "SG.shared"


def test_get_credential_source_can_run_twice_in_secret_mode(config) -> None:
    config.SENDGRID_CREDENTIAL_SOURCE = "secret"
    config.SENDGRID_SECRET_NAME = "REPEATED_MAIL_KEY"

    first = get_credential_source(config)
    second = get_credential_source(config)

    assert first.function_secrets == second.function_secrets
