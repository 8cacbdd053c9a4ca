"""
Configuration module for deployconf.
Stores the deployable networks, the compiler profile and the names of the
variables read from the environment.
"""

from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping

from deployconf.errors import DuplicateNetworkError, UnknownNetworkError
from deployconf.models import CompilerProfile, NetworkProfile

# Variable holding the deployer's private key or seed phrase
CREDENTIAL_VARIABLE = "DEPLOYER_PRIVATE_KEY"

# Variable selecting which environment file set is loaded
RUNTIME_ENV_VARIABLE = "DEPLOY_ENV"
DEFAULT_ENVIRONMENT = "test"
DEFAULT_ENVS_DIR = "envs"

# First account of a BIP44 Ethereum wallet
DEFAULT_DERIVATION_PATH = "m/44'/60'/0'/0/0"


class NetworkRegistry:
    """Read-only table of deployable networks, keyed by name."""

    def __init__(self, profiles: Iterable[NetworkProfile]):
        table: Dict[str, NetworkProfile] = {}
        for profile in profiles:
            if profile.name in table:
                raise DuplicateNetworkError(f"Network '{profile.name}' is registered twice")
            table[profile.name] = profile
        self._profiles: Mapping[str, NetworkProfile] = MappingProxyType(table)

    def resolve(self, name: str) -> NetworkProfile:
        """
        Get the profile registered under a network name.

        Args:
            name: Network name (e.g., "testnet", "mainnet")

        Returns:
            The registered NetworkProfile

        Raises:
            UnknownNetworkError: If no network is registered under that name
        """
        profile = self._profiles.get(name)
        if profile is None:
            known = ", ".join(self._profiles) or "none"
            raise UnknownNetworkError(f"Unknown network '{name}'. Registered networks: {known}")
        return profile

    def names(self) -> List[str]:
        """List all registered network names."""
        return list(self._profiles)

    def __contains__(self, name: object) -> bool:
        return name in self._profiles

    def __iter__(self) -> Iterator[NetworkProfile]:
        return iter(self._profiles.values())

    def __len__(self) -> int:
        return len(self._profiles)


NETWORKS = NetworkRegistry([
    NetworkProfile(
        name="testnet",
        rpc_url="https://data-seed-prebsc-2-s3.binance.org:8545/",  # BSC Testnet
        chain_id=97,
        native_symbol="BNB",
    ),
    NetworkProfile(
        name="mainnet",
        rpc_url="https://bsc-dataseed1.binance.org/",  # BSC Mainnet
        chain_id=56,
        native_symbol="BNB",
    ),
])


# Pinned so bytecode does not depend on the target network
COMPILER_PROFILE = CompilerProfile(
    language_version="^0.6.0",
    optimizer_enabled=True,
    optimizer_runs=200,
    evm_version="istanbul",
    docker=False,
)


# Passed through untouched to the test runner
TEST_SETTINGS: Mapping[str, Any] = MappingProxyType({})


def resolve(name: str) -> NetworkProfile:
    """Resolve a network name against the built-in registry."""
    return NETWORKS.resolve(name)


def list_networks() -> List[str]:
    """List all available network names."""
    return NETWORKS.names()
