"""WalletManager: the entry point for wallet lifecycle, daemon and keys."""

import importlib
import threading
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from monerokit import keys
from monerokit.config import get_settings
from monerokit.daemon import BindResult, DaemonBinder
from monerokit.exceptions import NotConfiguredError
from monerokit.interfaces.engine import WalletEngine
from monerokit.models import Device, LogLevel, NetworkType, Node, WalletInfo
from monerokit.network import address_prefix, engine_code, to_network_type
from monerokit.wallet.discovery import find_wallets
from monerokit.wallet.handle import Wallet, device_from_engine_code


@dataclass
class ManagerContext:
    """Mutable state of one manager: active network and daemon binding."""

    network_type: NetworkType
    daemon: DaemonBinder

    @classmethod
    def for_network(cls, network_type: NetworkType | str) -> "ManagerContext":
        network_type = to_network_type(network_type)
        return cls(network_type=network_type, daemon=DaemonBinder(network_type))


class WalletManager:
    """Opens, recovers and closes wallets, and binds the daemon.

    All work is delegated to a WalletEngine. Every engine call is
    synchronous and may block for a long time; keep them off
    latency-sensitive threads. The manager adds no locking: serialize
    ``set_daemon``/``reset_network_type`` against readers yourself.

    Usage:
        manager = WalletManager(engine, NetworkType.STAGENET)
        manager.set_daemon(parse_node("localhost:38081/stagenet"))

        with manager.open_wallet("wallets/alice", "secret") as wallet:
            ...

        for info in manager.find_wallets("wallets"):
            print(info.name)
    """

    def __init__(
        self,
        engine: WalletEngine,
        network_type: NetworkType | str = NetworkType.MAINNET,
        context: ManagerContext | None = None,
    ) -> None:
        """Initialize the manager.

        Args:
            engine: Engine that performs all wallet work.
            network_type: Active network. Ignored when context is given.
            context: Prebuilt state, e.g. shared with another component.
        """
        self._engine = engine
        self._context = context or ManagerContext.for_network(network_type)

    @property
    def engine(self) -> WalletEngine:
        return self._engine

    @property
    def context(self) -> ManagerContext:
        return self._context

    @property
    def network_type(self) -> NetworkType:
        """Get the active network type."""
        return self._context.network_type

    def reset_network_type(self, network_type: NetworkType | str) -> None:
        """Switch the active network.

        The daemon binding belongs to the old network and is cleared; the
        engine is not disconnected.
        """
        network_type = to_network_type(network_type)
        logger.info(
            "Network reset | {} -> {}", self._context.network_type.value, network_type.value
        )
        self._context.network_type = network_type
        self._context.daemon = DaemonBinder(network_type)

    def address_prefix(self, network_type: NetworkType | str | None = None) -> str:
        """Return the address prefix label of a network.

        Args:
            network_type: Network to look up. Defaults to the active network.

        Raises:
            UnsupportedNetworkError: If network_type is not a known network.
        """
        if network_type is None:
            network_type = self.network_type
        return address_prefix(network_type)

    # =========================================================================
    # Wallet lifecycle
    # =========================================================================

    def open_wallet(self, path: Path | str, password: str) -> Wallet:
        """Open an existing wallet on the active network.

        Args:
            path: Wallet base path (without the .keys suffix).
            password: Wallet password.

        Returns:
            An open Wallet owning the new handle.
        """
        path = Path(path).absolute()
        handle = self._engine.open(str(path), password, engine_code(self.network_type))
        logger.info("Opened wallet {} on {}", path.name, self.network_type.value)
        return self._wrap(handle, path)

    def recovery_wallet(
        self,
        file: Path | str,
        password: str,
        mnemonic: str,
        offset: str,
        restore_height: int,
    ) -> Wallet:
        """Recreate a wallet from its mnemonic.

        Args:
            file: Wallet base path to write.
            password: Password for the new wallet files.
            mnemonic: Seed phrase.
            offset: Seed offset passphrase, empty for none.
            restore_height: Height to start scanning from, 0 for genesis.

        Returns:
            An open Wallet owning the new handle.
        """
        _check_restore_height(restore_height)
        path = Path(file).absolute()
        handle = self._engine.recover(
            str(path),
            password,
            mnemonic,
            offset,
            engine_code(self.network_type),
            restore_height,
        )
        logger.info(
            "Recovered wallet {} on {} from height {}",
            path.name,
            self.network_type.value,
            restore_height,
        )
        return self._wrap(handle, path)

    def create_wallet_with_keys(
        self,
        file: Path | str,
        password: str,
        language: str,
        restore_height: int,
        address: str,
        view_key: str,
        spend_key: str,
    ) -> Wallet:
        """Recreate a wallet from key material.

        Pass an empty spend_key for a watch-only wallet.

        Returns:
            An open Wallet owning the new handle.
        """
        _check_restore_height(restore_height)
        path = Path(file).absolute()
        handle = self._engine.create_from_keys(
            str(path),
            password,
            language,
            engine_code(self.network_type),
            restore_height,
            address,
            view_key,
            spend_key,
        )
        logger.info(
            "Created wallet {} from keys on {} | watch_only={}",
            path.name,
            self.network_type.value,
            not spend_key,
        )
        return self._wrap(handle, path)

    def close(self, wallet: Wallet) -> bool:
        """Release a wallet's handle in the engine.

        The wallet is marked closed only when the engine reports success, so
        a failed close can be retried.

        Returns:
            True if the engine closed the handle.

        Raises:
            WalletClosedError: If the wallet is already closed.
        """
        closed = self._engine.close(wallet.handle)
        if closed:
            wallet.mark_closed()
            logger.info("Closed wallet {}", wallet.name)
        else:
            logger.warning("Engine failed to close wallet {}", wallet.name)
        return closed

    def wallet_exists(self, file: Path | str) -> bool:
        return self._engine.wallet_exists(_absolute(file))

    def verify_wallet_password(
        self, keys_file: Path | str, password: str, watch_only: bool
    ) -> bool:
        return self._engine.verify_password(_absolute(keys_file), password, watch_only)

    def verify_wallet_password_only(self, keys_file: Path | str, password: str) -> bool:
        """Check a password without knowing if the wallet is watch-only."""
        return self._engine.query_device(_absolute(keys_file), password) >= 0

    def query_wallet_device(self, keys_file: Path | str, password: str) -> Device:
        """Return the key storage device of a wallet.

        Raises:
            UnsupportedDeviceError: If the engine reports an unknown code.
        """
        return device_from_engine_code(self._engine.query_device(_absolute(keys_file), password))

    def find_wallets(self, directory: Path | str) -> list[WalletInfo]:
        """List wallets in directory, sorted by name (case-insensitive).

        Raises:
            FilesystemError: If the directory cannot be scanned.
        """
        return find_wallets(directory)

    def _wrap(self, handle: int, path: Path) -> Wallet:
        return Wallet(handle, path, self.network_type, closer=self.close)

    # =========================================================================
    # Daemon
    # =========================================================================

    def bind_daemon(self, node: Node) -> BindResult:
        """Bind node and connect the engine to it.

        Blocks while the engine connects; never call this from a
        latency-sensitive thread.

        Returns:
            BindResult holding the binding, or the NetworkMismatchError when
            node is on another network (binding left unchanged, engine not
            called).
        """
        result = self._context.daemon.bind(node)
        if result.ok:
            logger.info("Connecting to daemon {} ({})", node.address, node.network_type.value)
            self._engine.set_daemon_address(node.address)
        return result

    def set_daemon(self, node: Node | None) -> None:
        """Bind node, or clear the binding when node is None.

        Binding blocks while the engine connects. Clearing only forgets the
        local configuration: the engine is not told to disconnect, since that
        blocks for tens of seconds, so its connection stays up.

        Raises:
            NetworkMismatchError: If node is on another network.
        """
        if node is None:
            self._context.daemon.clear()
            logger.info("Daemon binding cleared (engine stays connected)")
            return
        self.bind_daemon(node).unwrap()

    def get_daemon_address(self) -> str:
        """Get the bound daemon address.

        Raises:
            NotConfiguredError: If no daemon is bound.
        """
        return self._context.daemon.address

    def get_daemon_username(self) -> str:
        return self._context.daemon.username

    def get_daemon_password(self) -> str:
        return self._context.daemon.password

    def get_daemon_version(self) -> int:
        return self._engine.get_daemon_version()

    def get_blockchain_height(self) -> int:
        return self._engine.get_blockchain_height()

    def get_blockchain_target_height(self) -> int:
        return self._engine.get_blockchain_target_height()

    def get_network_difficulty(self) -> int:
        return self._engine.get_network_difficulty()

    def get_mining_hash_rate(self) -> float:
        return self._engine.get_mining_hash_rate()

    def get_block_target(self) -> int:
        return self._engine.get_block_target()

    def is_mining(self) -> bool:
        return self._engine.is_mining()

    def start_mining(self, address: str, background_mining: bool, ignore_battery: bool) -> bool:
        return self._engine.start_mining(address, background_mining, ignore_battery)

    def stop_mining(self) -> bool:
        return self._engine.stop_mining()

    def resolve_open_alias(self, address: str, dnssec_valid: bool) -> str:
        return self._engine.resolve_open_alias(address, dnssec_valid)

    def set_proxy(self, address: str) -> bool:
        return self._engine.set_proxy(address)

    # =========================================================================
    # Engine logging
    # =========================================================================

    def init_logger(self, argv0: str, log_base_name: str) -> None:
        self._engine.init_logger(argv0, log_base_name)

    def set_log_level(self, level: LogLevel | int) -> None:
        """Set engine log verbosity.

        Raises:
            ValueError: If level is outside SILENT..MAX.
        """
        self._engine.set_log_level(int(LogLevel(level)))

    def log_debug(self, category: str, message: str) -> None:
        self._engine.log_debug(category, message)

    def log_info(self, category: str, message: str) -> None:
        self._engine.log_info(category, message)

    def log_warning(self, category: str, message: str) -> None:
        self._engine.log_warning(category, message)

    def log_error(self, category: str, message: str) -> None:
        self._engine.log_error(category, message)

    def monero_version(self) -> str:
        return self._engine.version()

    # =========================================================================
    # Key derivation
    # =========================================================================

    def get_private_spend_key(self, mnemonic: str, passphrase: str) -> str:
        return keys.get_private_spend_key(self._engine, mnemonic, passphrase)

    def get_public_spend_key(self, mnemonic: str, passphrase: str) -> str:
        return keys.get_public_spend_key(self._engine, mnemonic, passphrase)

    def get_private_view_key(self, mnemonic: str, passphrase: str) -> str:
        return keys.get_private_view_key(self._engine, mnemonic, passphrase)

    def get_public_view_key(self, mnemonic: str, passphrase: str) -> str:
        return keys.get_public_view_key(self._engine, mnemonic, passphrase)

    def get_address(
        self, mnemonic: str, passphrase: str, account_index: int, address_index: int
    ) -> str:
        """Derive an address. Always mainnet-style, see ``keys.get_address``."""
        return keys.get_address(
            self._engine, mnemonic, passphrase, account_index, address_index
        )


def _check_restore_height(restore_height: int) -> None:
    if restore_height < 0:
        raise ValueError(f"Restore height must be >= 0, got {restore_height}")


def _absolute(path: Path | str) -> str:
    """Return path as the absolute string the engine expects."""
    return str(Path(path).absolute())


# =============================================================================
# Process-wide instance
# =============================================================================

_instance: WalletManager | None = None
_instance_lock = threading.Lock()


def load_engine_factory(path: str) -> Callable[[], WalletEngine]:
    """Import an engine factory from a ``module:attribute`` path."""
    module_name, _, attribute = path.partition(":")
    if not module_name or not attribute:
        raise NotConfiguredError(f"Engine path must look like 'module:attribute', got {path!r}")
    module = importlib.import_module(module_name)
    return getattr(module, attribute)


def get_instance(engine: WalletEngine | None = None) -> WalletManager:
    """Get or create the process-wide WalletManager.

    Only the first call builds the manager; exactly one is built even when
    several threads race on first access. Later calls ignore engine.

    Args:
        engine: Engine for the first call. Falls back to the configured
            ``MONEROKIT_ENGINE`` factory when None.

    Raises:
        NotConfiguredError: If the manager must be built and no engine is
            available.
    """
    global _instance
    if _instance is not None:
        return _instance

    with _instance_lock:
        if _instance is None:
            config = get_settings().monerokit
            if engine is None:
                if config.engine is None:
                    raise NotConfiguredError(
                        "No wallet engine: pass one to get_instance() or set MONEROKIT_ENGINE"
                    )
                engine = load_engine_factory(config.engine)()
            manager = WalletManager(engine, config.network_type)
            manager.set_log_level(config.engine_log_level)
            _instance = manager
            logger.info("WalletManager created on {}", config.network_type.value)
    return _instance


def reset_instance() -> None:
    """Drop the process-wide manager. Meant for tests."""
    global _instance
    with _instance_lock:
        _instance = None
