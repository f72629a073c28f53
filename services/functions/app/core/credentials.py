"""Sources for the email provider API key.

The key is either a plain environment variable (local runs, emulator, CI)
or a managed secret bound to the deployed function. Both expose the same
``get_api_key`` call so the dispatcher does not care where the key lives.
"""

from __future__ import annotations

import os
from typing import Dict, List, Mapping, Optional, Protocol

from firebase_functions import params

from app.core.config import Settings, settings

# SecretParam registers itself with the SDK and rejects a second declaration
# of the same name, so each secret is declared once per process.
_SECRET_PARAMS: Dict[str, params.SecretParam] = {}


def _secret_param(name: str) -> params.SecretParam:
    if name not in _SECRET_PARAMS:
        _SECRET_PARAMS[name] = params.SecretParam(name)
    return _SECRET_PARAMS[name]


class CredentialSource(Protocol):
    def get_api_key(self) -> Optional[str]:
        ...

    @property
    def function_secrets(self) -> List[params.SecretParam]:
        ...


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


class EnvironmentCredentialSource:
    """Read the API key from an environment variable on every call."""

    def __init__(
        self,
        variable: str = "SENDGRID_API_KEY",
        *,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._variable = variable
        self._environ = environ

    @property
    def function_secrets(self) -> List[params.SecretParam]:
        return []

    def get_api_key(self) -> Optional[str]:
        environ = os.environ if self._environ is None else self._environ
        return _clean(environ.get(self._variable))


class SecretParamCredentialSource:
    """Read the API key from a secret managed by Cloud Secret Manager.

    The secret has to be declared on the function (see ``function_secrets``)
    for the runtime to expose it; its value is only available while an
    invocation is running.
    """

    def __init__(self, name: str = "SENDGRID_API_KEY") -> None:
        self._param = _secret_param(name)

    @property
    def function_secrets(self) -> List[params.SecretParam]:
        return [self._param]

    def get_api_key(self) -> Optional[str]:
        return _clean(self._param.value)


def get_credential_source(config: Settings | None = None) -> CredentialSource:
    config = config or settings
    source = config.SENDGRID_CREDENTIAL_SOURCE
    if source == "env":
        return EnvironmentCredentialSource()
    if source == "secret":
        return SecretParamCredentialSource(config.SENDGRID_SECRET_NAME)
    raise ValueError(
        f"Unsupported SENDGRID_CREDENTIAL_SOURCE '{source}'; expected 'env' or 'secret'"
    )


__all__ = [
    "CredentialSource",
    "EnvironmentCredentialSource",
    "SecretParamCredentialSource",
    "get_credential_source",
]
