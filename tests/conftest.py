"""Shared pytest fixtures for deployconf tests."""

import logging
from pathlib import Path
from typing import Dict

import pytest

from deployconf import environment
from deployconf.models import EnvironmentContext

# Well-known development account (hardhat/anvil account #0). Holds no real funds.
DEV_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
DEV_MNEMONIC = "test test test test test test test test test test test junk"
DEV_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


class SpyProvider:
    """Credential provider that records how often it was asked."""

    def __init__(self, provider):
        self.provider = provider
        self.calls = 0

    @property
    def variable(self) -> str:
        return self.provider.variable

    def get_credential(self):
        self.calls += 1
        return self.provider.get_credential()


@pytest.fixture(autouse=True)
def clean_context():
    """Make every test start without a cached process-wide context."""
    environment.reset_context()
    yield
    environment.reset_context()
    # Handlers installed by the CLI hold on to the captured stderr of one test
    logging.getLogger("deployconf").handlers.clear()


@pytest.fixture
def envs_dir(tmp_path: Path) -> Path:
    """Create an envs directory with a layered set of files."""
    envs = tmp_path / "envs"
    envs.mkdir()
    (envs / ".env").write_text("SHARED=base\nOVERRIDDEN=base\n")
    (envs / ".env.local").write_text("OVERRIDDEN=local\nLOCAL_ONLY=yes\n")
    (envs / ".env.test").write_text("OVERRIDDEN=test\nTEST_ONLY=yes\n")
    (envs / ".env.staging").write_text("OVERRIDDEN=staging\n")
    (envs / ".env.staging.local").write_text("OVERRIDDEN=staging-local\n")
    return envs


def make_context(variables: Dict[str, str], name: str = "test") -> EnvironmentContext:
    return EnvironmentContext(name=name, variables=variables)


@pytest.fixture
def keyed_context() -> EnvironmentContext:
    return make_context({"DEPLOYER_PRIVATE_KEY": DEV_PRIVATE_KEY})


@pytest.fixture
def empty_context() -> EnvironmentContext:
    return make_context({})
