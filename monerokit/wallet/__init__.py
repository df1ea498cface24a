"""Wallet handles and discovery."""

from monerokit.wallet.discovery import KEYS_SUFFIX, find_wallets
from monerokit.wallet.handle import DEVICE_BY_ENGINE_CODE, Wallet, device_from_engine_code

__all__ = [
    "DEVICE_BY_ENGINE_CODE",
    "KEYS_SUFFIX",
    "Wallet",
    "device_from_engine_code",
    "find_wallets",
]
