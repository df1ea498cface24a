"""Wallet discovery: find wallets by their keys files."""

from pathlib import Path

from loguru import logger

from monerokit.exceptions import FilesystemError
from monerokit.models import WalletInfo

KEYS_SUFFIX = ".keys"


def find_wallets(directory: Path | str) -> list[WalletInfo]:
    """List the wallets stored directly in a directory.

    Every entry named ``<name>.keys`` is one wallet called ``<name>``.
    Subdirectories are not searched.

    Args:
        directory: Directory to scan.

    Returns:
        WalletInfo list sorted by name, case-insensitive.

    Raises:
        FilesystemError: If the directory is missing or cannot be listed.
    """
    directory = Path(directory)
    logger.debug("Scanning: {}", directory.absolute())

    if not directory.is_dir():
        raise FilesystemError(f"Not a directory: {directory}", directory)

    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise FilesystemError(f"Cannot list {directory}: {e}", directory) from e

    wallets = []
    for entry in entries:
        if not entry.name.endswith(KEYS_SUFFIX):
            continue
        name = entry.name[: -len(KEYS_SUFFIX)]
        if not name:
            continue
        wallets.append(WalletInfo(directory=entry.parent, name=name))

    wallets.sort(key=lambda info: info.sort_key)
    logger.debug("Found {} wallet(s) in {}", len(wallets), directory)
    return wallets
