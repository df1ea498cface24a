"""Node descriptor parsing and the list of well-known public nodes.

Descriptor format::

    [user[:password]@]host[:port][/network[/name]]

e.g. ``node.xmr.rocks:18089/mainnet/xmr.rocks``. A missing port falls back
to the network's default RPC port; a missing network means mainnet.
"""

from loguru import logger
from pydantic import SecretStr, ValidationError

from monerokit.config import get_settings
from monerokit.exceptions import NodeParseError, UnsupportedNetworkError
from monerokit.models import NetworkType, Node
from monerokit.network import default_port, to_network_type

DEFAULT_NODE_DESCRIPTORS: tuple[str, ...] = (
    "xmr.agor.ist:18089/mainnet/agor.ist",
    "xmr-de.boldsuck.org:18081/mainnet/boldsuck.org",
    "6dsdenp6vjkvqzy4wzsnzn6wixkdzihx3khiumyzieauxuxslmcaeiad.onion:18081/mainnet/boldsuck.onion",
    "xmr-node.cakewallet.com:18081/mainnet/cakewallet.com",
    "monero.ds-jetzt.de:18089/mainnet/ds-jetzt.de",
    "qvlr4w7yhnjrdg3txa72jwtpnjn4ezsrivzvocbnvpfbdo342fahhoad.onion:18089/mainnet/ds-jetzt.onion",
    "node.monerodevs.org:18089/mainnet/monerodevs.org",
    "nodex.monerujo.io:18081/mainnet/monerujo.io",
    "monerujods7mbghwe6cobdr6ujih6c22zu5rl7zshmizz2udf7v7fsad.onion:18081/mainnet/monerujo.onion",
    "node.sethforprivacy.com:18089/mainnet/sethforprivacy.com",
    "sfpp2p7wnfjv3lrvfan4jmmkvhnbsbimpa3cqyuf7nt6zd24xhcqcsyd.onion/mainnet/sethforprivacy.onion",
    "monero.stackwallet.com:18081/mainnet/stackwallet.com",
    "xmr.stormycloud.org:18089/mainnet/stormycloud.org",
    "monero.10z.com.ar:18089/mainnet/10z.com.ar",
    "node.xmr.rocks:18089/mainnet/xmr.rocks",
    "xqnnz2xmlmtpy2p4cm4cphg2elkwu5oob7b7so5v4wwgt44p6vbx5ryd.onion/mainnet/xmr.rocks.onion",
    "opennode.xmr-tw.org:18089/mainnet/xmr-tw.org",
)


def parse_node(descriptor: str) -> Node:
    """Parse a node descriptor string.

    Args:
        descriptor: Node in ``[user[:password]@]host[:port][/network[/name]]`` form.

    Returns:
        The parsed Node.

    Raises:
        NodeParseError: If the descriptor is malformed.
    """
    text = descriptor.strip()
    if not text:
        raise NodeParseError("Empty node descriptor")

    parts = text.split("/", 2)

    username = ""
    password = ""
    credentials, at, host_port = parts[0].rpartition("@")
    if at:
        username, _, password = credentials.partition(":")

    try:
        network_type = to_network_type(parts[1]) if len(parts) > 1 else NetworkType.MAINNET
    except UnsupportedNetworkError as e:
        raise NodeParseError(f"Unknown network in node descriptor: {descriptor!r}") from e

    name = parts[2] if len(parts) > 2 else ""

    host, port_text = _split_host_port(host_port, descriptor)
    if port_text is None:
        port = default_port(network_type)
    else:
        try:
            port = int(port_text)
        except ValueError as e:
            raise NodeParseError(f"Invalid port in node descriptor: {descriptor!r}") from e

    try:
        return Node(
            host=host,
            port=port,
            network_type=network_type,
            name=name,
            username=username,
            password=SecretStr(password),
        )
    except ValidationError as e:
        raise NodeParseError(f"Invalid node descriptor {descriptor!r}: {e}") from e


def _split_host_port(host_port: str, descriptor: str) -> tuple[str, str | None]:
    """Split ``host[:port]``, keeping bracketed IPv6 hosts whole."""
    if host_port.startswith("["):
        close = host_port.find("]")
        if close == -1:
            raise NodeParseError(f"Unclosed IPv6 bracket in node descriptor: {descriptor!r}")
        host, rest = host_port[: close + 1], host_port[close + 1 :]
        if not rest:
            return host, None
        if not rest.startswith(":"):
            raise NodeParseError(f"Invalid port in node descriptor: {descriptor!r}")
        return host, rest[1:]
    # Bare IPv6 addresses carry several colons and no port
    if host_port.count(":") != 1:
        return host_port, None
    host, _, port_text = host_port.partition(":")
    return host, port_text


def default_nodes(network_type: NetworkType | None = None) -> list[Node]:
    """Return the well-known public nodes.

    Args:
        network_type: Only return nodes on this network. All nodes if None.
    """
    nodes = []
    for descriptor in DEFAULT_NODE_DESCRIPTORS:
        try:
            node = parse_node(descriptor)
        except NodeParseError as e:
            logger.warning("Skipping default node {}: {}", descriptor, e)
            continue
        if network_type is None or node.network_type == network_type:
            nodes.append(node)
    return nodes


def configured_node() -> Node | None:
    """Return the node set by ``MONEROKIT_DAEMON``, None if unset.

    Raises:
        NodeParseError: If the configured descriptor is malformed.
    """
    descriptor = get_settings().monerokit.daemon
    if not descriptor:
        return None
    return parse_node(descriptor)
