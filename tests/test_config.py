"""Tests for the network registry and compiler profile."""

import pytest

from deployconf import config
from deployconf.config import COMPILER_PROFILE, NETWORKS, NetworkRegistry
from deployconf.errors import DuplicateNetworkError, UnknownNetworkError
from deployconf.models import NetworkProfile


class TestNetworkRegistry:

    @pytest.mark.parametrize("name,chain_id", [("testnet", 97), ("mainnet", 56)])
    def test_registered_chain_ids(self, name, chain_id):
        profile = config.resolve(name)
        assert profile.name == name
        assert profile.chain_id == chain_id

    def test_rpc_endpoints(self):
        assert NETWORKS.resolve("testnet").rpc_url == "https://data-seed-prebsc-2-s3.binance.org:8545/"
        assert NETWORKS.resolve("mainnet").rpc_url == "https://bsc-dataseed1.binance.org/"

    def test_unknown_network(self):
        with pytest.raises(UnknownNetworkError, match="Unknown network 'unknown'"):
            config.resolve("unknown")

    def test_no_fuzzy_matching(self):
        with pytest.raises(UnknownNetworkError):
            config.resolve("Testnet")

    def test_duplicate_names_rejected(self):
        with pytest.raises(DuplicateNetworkError):
            NetworkRegistry([
                NetworkProfile("devnet", "http://localhost:8545", 1337),
                NetworkProfile("devnet", "http://localhost:8546", 31337),
            ])

    def test_list_networks(self):
        assert config.list_networks() == ["testnet", "mainnet"]
        assert len(NETWORKS) == 2
        assert "testnet" in NETWORKS

    def test_profiles_are_immutable(self):
        profile = NETWORKS.resolve("testnet")
        with pytest.raises(AttributeError):
            profile.chain_id = 1


class TestCompilerProfile:

    def test_pinned_values(self):
        assert COMPILER_PROFILE.to_dict() == {
            "version": "^0.6.0",
            "docker": False,
            "settings": {
                "optimizer": {"enabled": True, "runs": 200},
                "evmVersion": "istanbul",
            },
        }

    def test_profile_is_immutable(self):
        with pytest.raises(AttributeError):
            COMPILER_PROFILE.optimizer_runs = 1
