"""Tests for the network type registry."""

import pytest

from monerokit.exceptions import UnsupportedNetworkError
from monerokit.models import NetworkType
from monerokit.network import address_prefix, default_port, engine_code, to_network_type


class TestAddressPrefix:
    """Tests for address_prefix."""

    @pytest.mark.parametrize(
        ("network_type", "prefix"),
        [
            (NetworkType.MAINNET, "4-"),
            (NetworkType.TESTNET, "9A-"),
            (NetworkType.STAGENET, "5-"),
        ],
    )
    def test_known_networks(self, network_type: NetworkType, prefix: str) -> None:
        """Test each network maps to its prefix label."""
        assert address_prefix(network_type) == prefix

    def test_accepts_network_name(self) -> None:
        """Test string network names are accepted, any case."""
        assert address_prefix("Stagenet") == "5-"

    @pytest.mark.parametrize("value", ["regtest", "", 0, None, "4-"])
    def test_unknown_network_fails(self, value: object) -> None:
        """Test anything outside the three networks is rejected."""
        with pytest.raises(UnsupportedNetworkError) as exc_info:
            address_prefix(value)
        assert exc_info.value.network == value


class TestEngineNumbering:
    """Tests for engine codes and default ports."""

    def test_engine_codes(self) -> None:
        """Test the engine's network numbering."""
        assert engine_code(NetworkType.MAINNET) == 0
        assert engine_code(NetworkType.TESTNET) == 1
        assert engine_code(NetworkType.STAGENET) == 2

    def test_default_ports(self) -> None:
        """Test default daemon RPC ports."""
        assert default_port(NetworkType.MAINNET) == 18081
        assert default_port(NetworkType.TESTNET) == 28081
        assert default_port(NetworkType.STAGENET) == 38081

    def test_to_network_type_passthrough(self) -> None:
        """Test members are returned unchanged."""
        assert to_network_type(NetworkType.TESTNET) is NetworkType.TESTNET
