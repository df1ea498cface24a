"""Interfaces to collaborators outside the manager."""

from monerokit.interfaces.engine import WalletEngine

__all__ = ["WalletEngine"]
