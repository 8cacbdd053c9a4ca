"""Deployer credential resolution."""

import re
from typing import Mapping, Optional, Union

from eth_account import Account
from eth_account.signers.local import LocalAccount
from pydantic import SecretStr

from deployconf import config
from deployconf.errors import InvalidCredentialError, MissingCredentialError
from deployconf.models import EnvironmentContext

_PRIVATE_KEY_RE = re.compile(r"^(0x)?[0-9a-fA-F]{64}$")
_MNEMONIC_WORD_COUNTS = (12, 15, 18, 21, 24)

CredentialSource = Union[EnvironmentContext, Mapping[str, str]]


class CredentialProvider:
    """Reads the deployer secret from an injected variable source."""

    def __init__(self, source: CredentialSource, variable: str = config.CREDENTIAL_VARIABLE):
        """
        Args:
            source: Where variables are read from, usually an EnvironmentContext
            variable: Name of the variable holding the secret
        """
        self.source = source
        self.variable = variable

    def get_credential(self) -> SecretStr:
        """
        Return the deployer secret.

        Raises:
            MissingCredentialError: If the variable is unset or blank
        """
        value: Optional[str] = self.source.get(self.variable)
        if value is None or not value.strip():
            raise MissingCredentialError(self.variable)
        return SecretStr(value.strip())

    def __repr__(self) -> str:
        return f"CredentialProvider(variable={self.variable!r})"


def account_from_credential(
    credential: SecretStr,
    derivation_path: str = config.DEFAULT_DERIVATION_PATH,
) -> LocalAccount:
    """
    Derive the signing account from a private key or a seed phrase.

    Raises:
        InvalidCredentialError: If the secret is neither. The message never
            contains the secret itself.
    """
    secret = credential.get_secret_value()

    if _PRIVATE_KEY_RE.match(secret):
        return Account.from_key(secret if secret.startswith("0x") else "0x" + secret)

    words = secret.split()
    if len(words) in _MNEMONIC_WORD_COUNTS:
        Account.enable_unaudited_hdwallet_features()
        try:
            return Account.from_mnemonic(" ".join(words), account_path=derivation_path)
        except Exception as e:
            raise InvalidCredentialError(
                f"Seed phrase could not be decoded ({type(e).__name__})"
            ) from None

    raise InvalidCredentialError(
        "Credential must be a 32-byte hex private key or a 12-24 word seed phrase"
    )
