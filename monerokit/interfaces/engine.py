"""Abstract base class defining the wallet engine interface."""

from abc import ABC, abstractmethod


class WalletEngine(ABC):
    """Call contract of the native wallet engine.

    The engine does all cryptography, network I/O and blockchain scanning.
    Every method is synchronous and may block the calling thread for a long
    time (opening wallets, connecting to daemons, mining queries). Failures
    are signalled by whatever exceptions the implementation raises; the
    manager passes them through untouched.

    Network types cross this boundary as the engine's integer codes
    (see ``monerokit.network.ENGINE_CODES``).
    """

    # -------------------------------------------------------------------------
    # Wallet lifecycle
    # -------------------------------------------------------------------------

    @abstractmethod
    def open(self, path: str, password: str, network_type: int) -> int:
        """Open an existing wallet and return its handle."""
        raise NotImplementedError

    @abstractmethod
    def recover(
        self,
        path: str,
        password: str,
        mnemonic: str,
        offset: str,
        network_type: int,
        restore_height: int,
    ) -> int:
        """Recreate a wallet from a mnemonic and return its handle."""
        raise NotImplementedError

    @abstractmethod
    def create_from_keys(
        self,
        path: str,
        password: str,
        language: str,
        network_type: int,
        restore_height: int,
        address: str,
        view_key: str,
        spend_key: str,
    ) -> int:
        """Recreate a wallet from explicit key material and return its handle."""
        raise NotImplementedError

    @abstractmethod
    def close(self, handle: int) -> bool:
        """Release a wallet handle. Returns True on success."""
        raise NotImplementedError

    @abstractmethod
    def wallet_exists(self, path: str) -> bool:
        """Check if a wallet exists at path."""
        raise NotImplementedError

    @abstractmethod
    def verify_password(self, path: str, password: str, watch_only: bool) -> bool:
        """Check a password against a keys file."""
        raise NotImplementedError

    @abstractmethod
    def query_device(self, path: str, password: str) -> int:
        """Return the device code of a keys file, -1 when there is none."""
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Daemon and telemetry
    # -------------------------------------------------------------------------

    @abstractmethod
    def set_daemon_address(self, address: str) -> None:
        """Point the engine at a daemon. Blocks until connected."""
        raise NotImplementedError

    @abstractmethod
    def get_daemon_version(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def get_blockchain_height(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def get_blockchain_target_height(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def get_network_difficulty(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def get_mining_hash_rate(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def get_block_target(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def is_mining(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def start_mining(
        self, address: str, background_mining: bool, ignore_battery: bool
    ) -> bool:
        raise NotImplementedError

    @abstractmethod
    def stop_mining(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def resolve_open_alias(self, address: str, dnssec_valid: bool) -> str:
        """Resolve an OpenAlias name to a wallet address."""
        raise NotImplementedError

    @abstractmethod
    def set_proxy(self, address: str) -> bool:
        """Route engine traffic through a proxy (``host:port``, empty to clear)."""
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Key derivation
    # -------------------------------------------------------------------------

    @abstractmethod
    def derive_key(
        self, seed: str, offset: str, is_private: bool, is_spend: bool
    ) -> str:
        """Derive a spend or view key, private or public, from a seed."""
        raise NotImplementedError

    @abstractmethod
    def derive_address(
        self,
        seed: str,
        offset: str,
        account_index: int,
        address_index: int,
        is_testnet: bool,
    ) -> str:
        """Derive a (sub)address from a seed."""
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Engine logging
    # -------------------------------------------------------------------------

    @abstractmethod
    def init_logger(self, argv0: str, log_base_name: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_log_level(self, level: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def log_debug(self, category: str, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def log_info(self, category: str, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def log_warning(self, category: str, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def log_error(self, category: str, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def version(self) -> str:
        """Return the engine's version string."""
        raise NotImplementedError
