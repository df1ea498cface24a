"""Network type registry: address prefixes, engine codes and default ports."""

from monerokit.exceptions import UnsupportedNetworkError
from monerokit.models import NetworkType

ADDRESS_PREFIXES: dict[NetworkType, str] = {
    NetworkType.MAINNET: "4-",
    NetworkType.TESTNET: "9A-",
    NetworkType.STAGENET: "5-",
}

# Numbering used by the engine's NetworkType enum
ENGINE_CODES: dict[NetworkType, int] = {
    NetworkType.MAINNET: 0,
    NetworkType.TESTNET: 1,
    NetworkType.STAGENET: 2,
}

DEFAULT_RPC_PORTS: dict[NetworkType, int] = {
    NetworkType.MAINNET: 18081,
    NetworkType.TESTNET: 28081,
    NetworkType.STAGENET: 38081,
}


def to_network_type(value: object) -> NetworkType:
    """Coerce a value to a NetworkType.

    Accepts NetworkType members and their string values (any case).

    Raises:
        UnsupportedNetworkError: If the value names no known network.
    """
    if isinstance(value, NetworkType):
        return value
    if isinstance(value, str):
        try:
            return NetworkType(value.lower())
        except ValueError:
            pass
    raise UnsupportedNetworkError(value)


def address_prefix(network_type: object) -> str:
    """Return the address prefix label for a network.

    Raises:
        UnsupportedNetworkError: If the value names no known network.
    """
    return ADDRESS_PREFIXES[to_network_type(network_type)]


def engine_code(network_type: NetworkType) -> int:
    """Return the integer the engine uses for a network."""
    return ENGINE_CODES[to_network_type(network_type)]


def default_port(network_type: NetworkType) -> int:
    """Return the default daemon RPC port for a network."""
    return DEFAULT_RPC_PORTS[to_network_type(network_type)]
