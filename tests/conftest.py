"""Shared fixtures for monerokit tests."""

from collections.abc import Iterator

import pytest

from fake_engine import FakeWalletEngine
from monerokit.config import reset_settings
from monerokit.manager import WalletManager, reset_instance
from monerokit.models import NetworkType

MNEMONIC = " ".join(["abbey"] * 24 + ["ability"])


@pytest.fixture
def engine() -> FakeWalletEngine:
    """Fresh fake engine."""
    return FakeWalletEngine()


@pytest.fixture
def manager(engine: FakeWalletEngine) -> WalletManager:
    """Mainnet manager over the fake engine."""
    return WalletManager(engine, NetworkType.MAINNET)


@pytest.fixture
def mnemonic() -> str:
    """A 25-word seed phrase."""
    return MNEMONIC


@pytest.fixture
def clean_globals(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate the process-wide manager and settings from the environment."""
    for name in (
        "MONEROKIT_NETWORK_TYPE",
        "MONEROKIT_ENGINE",
        "MONEROKIT_DAEMON",
        "MONEROKIT_LOG_LEVEL",
        "MONEROKIT_LOG_FILE",
        "MONEROKIT_ENGINE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_instance()
    reset_settings()
    yield
    reset_instance()
    reset_settings()
