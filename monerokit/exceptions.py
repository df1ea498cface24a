"""Custom exceptions for the monerokit wallet manager."""

from pathlib import Path


class WalletManagerError(Exception):
    """Base exception for all wallet-manager errors."""

    pass


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(WalletManagerError):
    """Base exception for errors raised locally before reaching the engine."""

    pass


class UnsupportedNetworkError(ConfigurationError):
    """Raised when a value is not one of the known network types."""

    def __init__(self, network: object) -> None:
        super().__init__(f"Unsupported network: {network!r}")
        self.network = network


class NetworkMismatchError(ConfigurationError):
    """Raised when a node belongs to a different network than the manager.

    Attributes:
        expected: The manager's active network type.
        actual: The network type of the rejected node.
    """

    def __init__(self, expected: object, actual: object) -> None:
        super().__init__(f"Network type does not match: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class NotConfiguredError(ConfigurationError, RuntimeError):
    """Raised when state is read before it has been configured."""

    pass


# =============================================================================
# Discovery Exceptions
# =============================================================================


class DiscoveryError(WalletManagerError):
    """Base exception for wallet discovery errors."""

    pass


class FilesystemError(DiscoveryError):
    """Raised when a directory cannot be scanned for wallets."""

    def __init__(self, message: str, directory: Path) -> None:
        super().__init__(message)
        self.directory = directory


# =============================================================================
# Wallet Exceptions
# =============================================================================


class WalletError(WalletManagerError):
    """Base exception for wallet handle errors."""

    pass


class WalletClosedError(WalletError):
    """Raised when a closed wallet handle is used or closed again."""

    pass


class UnsupportedDeviceError(WalletError):
    """Raised when the engine reports a device code with no known variant."""

    def __init__(self, code: int) -> None:
        super().__init__(f"Unsupported device code: {code}")
        self.code = code


# =============================================================================
# Node Exceptions
# =============================================================================


class NodeParseError(WalletManagerError, ValueError):
    """Raised when a node descriptor string cannot be parsed."""

    pass
