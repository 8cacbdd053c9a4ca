"""Exception and warning classes for deployconf."""


class DeployConfigError(Exception):
    """Base exception for fatal configuration errors."""

    pass


class UnknownNetworkError(DeployConfigError, ValueError):
    """Raised when a requested network is not in the registry."""

    pass


class DuplicateNetworkError(DeployConfigError, ValueError):
    """Raised when a registry is declared with the same network name twice."""

    pass


class MissingCredentialError(DeployConfigError, LookupError):
    """Raised when a signing transport is requested but no credential is set."""

    def __init__(self, variable: str):
        super().__init__(
            f"{variable} is not set. Add it to the environment file or export it in the shell."
        )
        self.variable = variable


class InvalidCredentialError(DeployConfigError, ValueError):
    """Raised when the credential is neither a private key nor a seed phrase."""

    pass


class ChainIdMismatchError(DeployConfigError, ValueError):
    """Raised when the node reports a chain id other than the registered one."""

    pass


class ConfigLoadWarning(UserWarning):
    """Soft failure while loading environment files. Logged, never raised."""

    pass
