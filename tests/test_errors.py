"""Unit tests for exception classes."""

import pytest

from deployconf.errors import (
    ChainIdMismatchError,
    ConfigLoadWarning,
    DeployConfigError,
    DuplicateNetworkError,
    InvalidCredentialError,
    MissingCredentialError,
    UnknownNetworkError,
)


class TestExceptionCatching:
    """Test that exceptions can be caught as their base types."""

    def test_catch_unknown_network_as_value_error(self):
        with pytest.raises(ValueError):
            raise UnknownNetworkError("test")

    def test_catch_missing_credential_as_lookup_error(self):
        with pytest.raises(LookupError):
            raise MissingCredentialError("DEPLOYER_PRIVATE_KEY")

    def test_catch_all_as_deploy_config_error(self):
        exceptions = [
            UnknownNetworkError("test"),
            DuplicateNetworkError("test"),
            MissingCredentialError("TEST_KEY"),
            InvalidCredentialError("test"),
            ChainIdMismatchError("test"),
        ]

        for exc in exceptions:
            with pytest.raises(DeployConfigError):
                raise exc

    def test_config_load_warning_is_not_an_error(self):
        assert issubclass(ConfigLoadWarning, UserWarning)
        assert not issubclass(ConfigLoadWarning, DeployConfigError)


class TestMissingCredentialError:

    def test_message_names_the_variable(self):
        exc = MissingCredentialError("DEPLOYER_PRIVATE_KEY")
        assert exc.variable == "DEPLOYER_PRIVATE_KEY"
        assert "DEPLOYER_PRIVATE_KEY is not set" in str(exc)
