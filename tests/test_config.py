"""Tests for configuration loading and logging setup."""

from pathlib import Path

import pytest
from loguru import logger
from pydantic import ValidationError

from monerokit.config import MonerokitConfig, get_settings, reset_settings
from monerokit.log_config import setup_logging, setup_logging_from_settings
from monerokit.models import LogLevel, NetworkType


@pytest.mark.usefixtures("clean_globals")
class TestMonerokitConfig:
    """Tests for MonerokitConfig."""

    def test_defaults(self) -> None:
        """Test defaults without environment."""
        config = MonerokitConfig()
        assert config.network_type == NetworkType.MAINNET
        assert config.engine is None
        assert config.daemon is None
        assert config.log_level == "INFO"
        assert config.engine_log_level == LogLevel.WARN

    def test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test values are read from MONEROKIT_ variables."""
        monkeypatch.setenv("MONEROKIT_NETWORK_TYPE", "Testnet")
        monkeypatch.setenv("MONEROKIT_LOG_LEVEL", "debug")
        monkeypatch.setenv("MONEROKIT_ENGINE_LOG_LEVEL", "-1")

        config = MonerokitConfig()

        assert config.network_type == NetworkType.TESTNET
        assert config.log_level == "DEBUG"
        assert config.engine_log_level == LogLevel.SILENT

    def test_unknown_network(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test an unknown network is a validation error."""
        monkeypatch.setenv("MONEROKIT_NETWORK_TYPE", "regtest")
        with pytest.raises(ValidationError):
            MonerokitConfig()

    def test_unknown_engine_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test an unknown engine log level is a validation error."""
        monkeypatch.setenv("MONEROKIT_ENGINE_LOG_LEVEL", "loud")
        with pytest.raises(ValidationError):
            MonerokitConfig()

    def test_settings_cached(self) -> None:
        """Test get_settings returns one object until reset."""
        first = get_settings()
        assert get_settings() is first
        reset_settings()
        assert get_settings() is not first


@pytest.mark.usefixtures("clean_globals")
class TestLogging:
    """Tests for loguru setup."""

    def test_file_sink(self, tmp_path: Path) -> None:
        """Test DEBUG messages reach the log file."""
        log_file = tmp_path / "monerokit.log"
        setup_logging("WARNING", log_file)
        try:
            logger.debug("scan finished")
        finally:
            logger.remove()

        assert "scan finished" in log_file.read_text()

    def test_from_settings(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test level and file come from the environment."""
        log_file = tmp_path / "env.log"
        monkeypatch.setenv("MONEROKIT_LOG_FILE", str(log_file))
        reset_settings()

        setup_logging_from_settings()
        try:
            logger.info("configured")
        finally:
            logger.remove()

        assert "configured" in log_file.read_text()
