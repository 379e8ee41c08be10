from __future__ import annotations

from unittest.mock import patch

import pytest
from botocore.credentials import CredentialResolver

from albsync.auth import create_credential_resolver, credential_providers
from albsync.auth.resolvers import EnvCredentialProvider, InstanceRoleCredentialProvider, StaticCredentialProvider
from albsync.contracts.config import AWSConfig


@pytest.fixture(autouse=True)
def _clear_aws_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_SESSION_TOKEN", "AWS_SECURITY_TOKEN"):
        monkeypatch.delenv(name, raising=False)


def test_providers_are_ordered_static_env_instance_role() -> None:
    providers = credential_providers(AWSConfig(access_key_id="AKIA", secret_access_key="x"))

    assert [type(p) for p in providers] == [
        StaticCredentialProvider,
        EnvCredentialProvider,
        InstanceRoleCredentialProvider,
    ]


def test_static_provider_omitted_without_aws_block() -> None:
    providers = credential_providers(None)

    assert [type(p) for p in providers] == [EnvCredentialProvider, InstanceRoleCredentialProvider]


def test_static_provider_loads_configured_keys() -> None:
    provider = StaticCredentialProvider(
        AWSConfig(access_key_id="AKIA", secret_access_key="s3cret", security_token="tok")
    )

    creds = provider.load()

    assert creds is not None
    assert creds.access_key == "AKIA"
    assert creds.secret_key == "s3cret"
    assert creds.token == "tok"


def test_static_provider_with_empty_keys_is_not_applicable() -> None:
    assert StaticCredentialProvider(AWSConfig()).load() is None


def test_env_provider_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "ENVKEY")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "envsecret")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "envtoken")

    creds = EnvCredentialProvider().load()

    assert creds is not None
    assert creds.access_key == "ENVKEY"
    assert creds.token == "envtoken"


def test_env_provider_missing_secret_is_not_applicable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "ENVKEY")

    assert EnvCredentialProvider().load() is None


def test_resolver_prefers_static_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "ENVKEY")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "envsecret")

    resolver = create_credential_resolver(AWSConfig(access_key_id="AKIA", secret_access_key="s3cret"))

    assert isinstance(resolver, CredentialResolver)
    creds = resolver.load_credentials()
    assert creds is not None
    assert creds.access_key == "AKIA"


def test_resolver_falls_back_to_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "ENVKEY")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "envsecret")

    creds = create_credential_resolver(AWSConfig()).load_credentials()

    assert creds is not None
    assert creds.access_key == "ENVKEY"


def test_resolver_falls_back_to_instance_role() -> None:
    with patch.object(InstanceRoleCredentialProvider, "load", return_value=None) as mock_load:
        creds = create_credential_resolver(None).load_credentials()

    assert creds is None
    mock_load.assert_called_once_with()
