"""Domain models for the monerokit wallet manager."""

from enum import Enum, IntEnum
from pathlib import Path

from pydantic import BaseModel, Field, SecretStr


class NetworkType(str, Enum):
    """Monero network a wallet or daemon belongs to."""

    MAINNET = "mainnet"
    TESTNET = "testnet"
    STAGENET = "stagenet"


class Device(Enum):
    """Key storage device behind a wallet.

    Declaration order matters: the engine numbers devices starting at -1,
    see ``monerokit.wallet.handle.DEVICE_BY_ENGINE_CODE``.
    """

    UNDEFINED = (0, 0)
    SOFTWARE = (50, 200)
    LEDGER = (5, 20)

    def __init__(self, account_lookahead: int, subaddress_lookahead: int) -> None:
        self.account_lookahead = account_lookahead
        self.subaddress_lookahead = subaddress_lookahead


class LogLevel(IntEnum):
    """Verbosity levels understood by the engine's logger."""

    SILENT = -1
    WARN = 0
    INFO = 1
    DEBUG = 2
    TRACE = 3
    MAX = 4


class WalletState(str, Enum):
    """Lifecycle state of a wallet handle."""

    OPEN = "OPEN"
    CLOSED = "CLOSED"


class Node(BaseModel):
    """A remote daemon the engine can connect to.

    Immutable descriptor; parse one from a string with
    ``monerokit.nodes.parse_node``.
    """

    model_config = {"frozen": True}

    host: str = Field(..., min_length=1, description="Hostname, IP or onion address")
    port: int = Field(..., gt=0, le=65535, description="Daemon RPC port")
    network_type: NetworkType = Field(
        default=NetworkType.MAINNET, description="Network served by the daemon"
    )
    name: str = Field(default="", description="Human-readable label")
    username: str = Field(default="", description="RPC login user")
    password: SecretStr = Field(default=SecretStr(""), description="RPC login password")

    @property
    def address(self) -> str:
        """Return the ``host:port`` address handed to the engine."""
        return f"{self.host}:{self.port}"

    @property
    def is_onion(self) -> bool:
        """Check if the node is a Tor hidden service."""
        return self.host.endswith(".onion")

    def __str__(self) -> str:
        text = f"{self.address}/{self.network_type.value}"
        if self.name:
            text = f"{text}/{self.name}"
        return text


class DaemonBinding(BaseModel):
    """The daemon configuration currently held by a manager."""

    model_config = {"frozen": True}

    address: str
    username: str = ""
    password: SecretStr = SecretStr("")
    network_type: NetworkType

    @classmethod
    def from_node(cls, node: Node) -> "DaemonBinding":
        """Build a binding from a node descriptor."""
        return cls(
            address=node.address,
            username=node.username,
            password=node.password,
            network_type=node.network_type,
        )


class WalletInfo(BaseModel):
    """A wallet found on disk during discovery.

    Snapshot only; nothing here tracks the wallet after the scan.
    """

    model_config = {"frozen": True}

    directory: Path = Field(..., description="Directory containing the wallet files")
    name: str = Field(..., min_length=1, description="Wallet name without the .keys suffix")

    @property
    def path(self) -> Path:
        """Return the wallet base path accepted by ``open_wallet``."""
        return self.directory / self.name

    @property
    def sort_key(self) -> tuple[str, str]:
        """Case-insensitive ordering key, exact name breaks ties."""
        return (self.name.lower(), self.name)
