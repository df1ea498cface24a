"""Wallet manager facade over a native Monero wallet engine."""

from monerokit.daemon import BindResult, DaemonBinder
from monerokit.exceptions import (
    ConfigurationError,
    DiscoveryError,
    FilesystemError,
    NetworkMismatchError,
    NodeParseError,
    NotConfiguredError,
    UnsupportedDeviceError,
    UnsupportedNetworkError,
    WalletClosedError,
    WalletError,
    WalletManagerError,
)
from monerokit.interfaces.engine import WalletEngine
from monerokit.manager import ManagerContext, WalletManager, get_instance
from monerokit.models import (
    DaemonBinding,
    Device,
    LogLevel,
    NetworkType,
    Node,
    WalletInfo,
    WalletState,
)
from monerokit.nodes import default_nodes, parse_node
from monerokit.wallet import Wallet, find_wallets

__all__ = [
    "BindResult",
    "ConfigurationError",
    "DaemonBinder",
    "DaemonBinding",
    "Device",
    "DiscoveryError",
    "FilesystemError",
    "LogLevel",
    "ManagerContext",
    "NetworkMismatchError",
    "NetworkType",
    "Node",
    "NodeParseError",
    "NotConfiguredError",
    "UnsupportedDeviceError",
    "UnsupportedNetworkError",
    "Wallet",
    "WalletClosedError",
    "WalletEngine",
    "WalletError",
    "WalletInfo",
    "WalletManager",
    "WalletManagerError",
    "WalletState",
    "default_nodes",
    "find_wallets",
    "get_instance",
    "parse_node",
]
