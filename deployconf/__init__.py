"""
deployconf: environment-aware configuration for smart contract deployments
"""

from importlib.metadata import PackageNotFoundError, version

from .assembler import assemble, resolve_transport
from .config import COMPILER_PROFILE, NETWORKS, NetworkRegistry
from .credentials import CredentialProvider
from .environment import get_context, load_environment
from .errors import (
    ChainIdMismatchError,
    ConfigLoadWarning,
    DeployConfigError,
    DuplicateNetworkError,
    InvalidCredentialError,
    MissingCredentialError,
    UnknownNetworkError,
)
from .evm import SigningTransport, TransportBuilder
from .models import CompilerProfile, EnvironmentContext, NetworkProfile, ResolvedConfiguration

try:
    __version__ = version("deployconf")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "assemble",
    "resolve_transport",
    "load_environment",
    "get_context",
    "CredentialProvider",
    "NetworkRegistry",
    "NETWORKS",
    "COMPILER_PROFILE",
    "SigningTransport",
    "TransportBuilder",
    "CompilerProfile",
    "EnvironmentContext",
    "NetworkProfile",
    "ResolvedConfiguration",
    "DeployConfigError",
    "UnknownNetworkError",
    "DuplicateNetworkError",
    "MissingCredentialError",
    "InvalidCredentialError",
    "ChainIdMismatchError",
    "ConfigLoadWarning",
]
