"""Signing transports for EVM networks."""

import logging
from typing import Optional

from web3 import Web3
from web3.middleware import SignAndSendRawMiddlewareBuilder

from deployconf.credentials import CredentialProvider, account_from_credential
from deployconf.errors import ChainIdMismatchError
from deployconf.models import NetworkProfile

logger = logging.getLogger(__name__)


class SigningTransport:
    """Web3 connection that signs outgoing transactions with the deployer account."""

    def __init__(self, profile: NetworkProfile, w3: Web3, address: str):
        self.profile = profile
        self.w3 = w3
        self.address = address

    @property
    def rpc_url(self) -> str:
        return self.profile.rpc_url

    @property
    def chain_id(self) -> int:
        return self.profile.chain_id

    def verify(self) -> int:
        """
        Check that the endpoint is reachable and serves the registered chain.

        Returns:
            The chain id reported by the node

        Raises:
            ConnectionError: If the RPC endpoint is unreachable
            ChainIdMismatchError: If the node reports a different chain id
        """
        if not self.w3.is_connected():
            raise ConnectionError(f"Failed to connect to RPC endpoint: {self.profile.rpc_url}")

        remote_chain_id = self.w3.eth.chain_id
        if remote_chain_id != self.profile.chain_id:
            raise ChainIdMismatchError(
                f"{self.profile.name} expects chain id {self.profile.chain_id}, "
                f"but {self.profile.rpc_url} reports {remote_chain_id}"
            )
        return remote_chain_id

    def __repr__(self) -> str:
        return f"SigningTransport(network={self.profile.name!r}, address={self.address!r})"


def create_transport(profile: NetworkProfile, provider: CredentialProvider) -> SigningTransport:
    """
    Bind the deployer credential to a network's RPC endpoint.

    No request is sent to the endpoint here.

    Raises:
        MissingCredentialError: If the credential is not set
        InvalidCredentialError: If the credential cannot be decoded
    """
    account = account_from_credential(provider.get_credential())

    w3 = Web3(Web3.HTTPProvider(profile.rpc_url))
    w3.middleware_onion.inject(SignAndSendRawMiddlewareBuilder.build(account), layer=0)
    w3.eth.default_account = account.address

    logger.info("Signing transport for %s (chain %d) as %s", profile.name, profile.chain_id, account.address)
    return SigningTransport(profile, w3, account.address)


class TransportBuilder:
    """
    Deferred transport for one network.

    Nothing is resolved until build() is called, so selecting one network
    never touches the credential or endpoint of another. Calling the builder
    is the same as calling build().
    """

    def __init__(self, profile: NetworkProfile, provider: CredentialProvider):
        self.profile = profile
        self.provider = provider
        self._transport: Optional[SigningTransport] = None

    @property
    def built(self) -> bool:
        return self._transport is not None

    def build(self) -> SigningTransport:
        if self._transport is None:
            self._transport = create_transport(self.profile, self.provider)
        return self._transport

    __call__ = build

    def __repr__(self) -> str:
        return f"TransportBuilder(network={self.profile.name!r}, built={self.built})"
