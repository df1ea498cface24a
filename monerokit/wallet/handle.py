"""Wallet objects owning a single engine handle."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

from monerokit.exceptions import UnsupportedDeviceError, WalletClosedError
from monerokit.models import Device, NetworkType, WalletState

# Engine code -> Device. The engine counts from -1 (no device), so every
# code is shifted by one against the declaration order of Device.
DEVICE_BY_ENGINE_CODE: dict[int, Device] = {
    -1: Device.UNDEFINED,
    0: Device.SOFTWARE,
    1: Device.LEDGER,
}


def device_from_engine_code(code: int) -> Device:
    """Map an engine device code to a Device.

    Raises:
        UnsupportedDeviceError: If the code has no entry in the table.
    """
    try:
        return DEVICE_BY_ENGINE_CODE[code]
    except KeyError:
        raise UnsupportedDeviceError(code) from None


class Wallet:
    """An open wallet session inside the engine.

    The Wallet exclusively owns its handle. Once closed, the handle can no
    longer be read and any further close is rejected.

    Usage:
        with manager.open_wallet(path, password) as wallet:
            engine_call(wallet.handle)
        # closed through the manager on exit
    """

    def __init__(
        self,
        handle: int,
        path: Path,
        network_type: NetworkType,
        closer: Callable[["Wallet"], bool] | None = None,
    ) -> None:
        """Initialize a wallet around a freshly opened handle.

        Args:
            handle: Engine handle returned by open/recover/create.
            path: Wallet base path.
            network_type: Network the wallet was opened on.
            closer: Called with this wallet when leaving a ``with`` block.
        """
        self._handle = handle
        self._path = path
        self._network_type = network_type
        self._closer = closer
        self._state = WalletState.OPEN

    @property
    def handle(self) -> int:
        """Get the engine handle.

        Raises:
            WalletClosedError: If the wallet has been closed.
        """
        self.ensure_open()
        return self._handle

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return self._path.name

    @property
    def network_type(self) -> NetworkType:
        return self._network_type

    @property
    def state(self) -> WalletState:
        return self._state

    @property
    def is_closed(self) -> bool:
        return self._state is WalletState.CLOSED

    def ensure_open(self) -> None:
        """Raise WalletClosedError if the handle has been released."""
        if self.is_closed:
            raise WalletClosedError(f"Wallet {self.name} is closed")

    def mark_closed(self) -> None:
        """Record that the engine released the handle."""
        self.ensure_open()
        self._state = WalletState.CLOSED

    def __enter__(self) -> "Wallet":
        self.ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        if not self.is_closed and self._closer is not None:
            self._closer(self)

    def __repr__(self) -> str:
        return f"Wallet(name={self.name!r}, network={self._network_type.value}, state={self._state.value})"
