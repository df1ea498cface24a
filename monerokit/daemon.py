"""Daemon binding: the one remote node a manager talks to."""

from dataclasses import dataclass

from loguru import logger

from monerokit.exceptions import NetworkMismatchError, NotConfiguredError
from monerokit.models import DaemonBinding, NetworkType, Node


@dataclass(frozen=True)
class BindResult:
    """Outcome of a bind attempt.

    Exactly one of ``binding`` and ``error`` is set.
    """

    binding: DaemonBinding | None = None
    error: NetworkMismatchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> DaemonBinding:
        """Return the binding, or raise the mismatch error."""
        if self.error is not None:
            raise self.error
        assert self.binding is not None
        return self.binding


class DaemonBinder:
    """Holds at most one daemon binding for a network.

    The binder only tracks configuration; connecting is done by the manager
    through the engine once ``bind`` succeeds.

    Not thread-safe: serialize ``bind``/``clear`` against the accessors.
    """

    def __init__(self, network_type: NetworkType) -> None:
        self._network_type = network_type
        self._binding: DaemonBinding | None = None

    @property
    def network_type(self) -> NetworkType:
        return self._network_type

    @property
    def binding(self) -> DaemonBinding | None:
        """Get the current binding, None if cleared or never bound."""
        return self._binding

    @property
    def is_bound(self) -> bool:
        return self._binding is not None

    def bind(self, node: Node) -> BindResult:
        """Replace the binding with node if it is on the binder's network.

        On mismatch the current binding is left untouched.
        """
        if node.network_type != self._network_type:
            logger.warning(
                "Rejected daemon {} | node_network={} manager_network={}",
                node.address,
                node.network_type.value,
                self._network_type.value,
            )
            return BindResult(
                error=NetworkMismatchError(self._network_type, node.network_type)
            )

        self._binding = DaemonBinding.from_node(node)
        logger.debug("Daemon binding set to {}", node.address)
        return BindResult(binding=self._binding)

    def clear(self) -> None:
        """Forget the binding. Address becomes absent, credentials empty."""
        self._binding = None

    @property
    def address(self) -> str:
        """Get the bound daemon address.

        Raises:
            NotConfiguredError: If no daemon is bound.
        """
        if self._binding is None:
            raise NotConfiguredError("use set_daemon() to initialise daemon and network first")
        return self._binding.address

    @property
    def username(self) -> str:
        return self._binding.username if self._binding is not None else ""

    @property
    def password(self) -> str:
        if self._binding is None:
            return ""
        return self._binding.password.get_secret_value()
