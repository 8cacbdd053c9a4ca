"""Data models for deployconf."""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Tuple

from deployconf.errors import ConfigLoadWarning, UnknownNetworkError

if TYPE_CHECKING:
    from deployconf.evm import TransportBuilder


@dataclass(frozen=True)
class EnvironmentContext:
    """Variables of one deployment stage, read-only once loaded."""
    name: str
    variables: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    loaded_files: Tuple[Path, ...] = ()
    warnings: Tuple[ConfigLoadWarning, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.variables, MappingProxyType):
            object.__setattr__(self, "variables", MappingProxyType(dict(self.variables)))

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.variables.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self.variables


@dataclass(frozen=True)
class NetworkProfile:
    """A deployable network."""
    name: str
    rpc_url: str
    chain_id: int
    native_symbol: str = "ETH"


@dataclass(frozen=True)
class CompilerProfile:
    """Compiler settings shared by every network."""
    language_version: str
    optimizer_enabled: bool
    optimizer_runs: int
    evm_version: str
    docker: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Render the profile in the layout solc-based tooling expects."""
        return {
            "version": self.language_version,
            "docker": self.docker,
            "settings": {
                "optimizer": {
                    "enabled": self.optimizer_enabled,
                    "runs": self.optimizer_runs,
                },
                "evmVersion": self.evm_version,
            },
        }


@dataclass(frozen=True)
class ResolvedConfiguration:
    """
    Configuration handed to the deployment tool.

    ``networks`` maps each network name to a deferred transport builder.
    Nothing secret is resolved until one of those builders is invoked.
    """
    environment: str
    networks: Mapping[str, "TransportBuilder"]
    compiler_profile: CompilerProfile
    test_settings: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "networks", MappingProxyType(dict(self.networks)))
        object.__setattr__(self, "test_settings", MappingProxyType(dict(self.test_settings)))

    def select(self, name: str) -> "TransportBuilder":
        """
        Return the transport builder for the active network.

        Raises:
            UnknownNetworkError: If the network is not configured
        """
        try:
            return self.networks[name]
        except KeyError:
            known = ", ".join(sorted(self.networks)) or "none"
            raise UnknownNetworkError(
                f"Unknown network '{name}'. Registered networks: {known}"
            ) from None

    def to_dict(self) -> Dict[str, Any]:
        """Secret-free rendering, safe to print or serialize."""
        return {
            "environment": self.environment,
            "networks": {
                name: {
                    "rpc_url": builder.profile.rpc_url,
                    "chain_id": builder.profile.chain_id,
                }
                for name, builder in self.networks.items()
            },
            "compilers": {"solc": self.compiler_profile.to_dict()},
            "test_settings": dict(self.test_settings),
        }
