import socket
from typing import TYPE_CHECKING, Tuple

from .errors import SendFailure

if TYPE_CHECKING:
    from .packet import MagicPacket


DEFAULT_SOURCE = ("0.0.0.0", 0)
DEFAULT_DESTINATION = ("255.255.255.255", 9)


def send_magic(packet: "MagicPacket") -> None:
    """Broadcast the packet from 0.0.0.0:0 to 255.255.255.255:9."""
    send_magic_to(packet, DEFAULT_SOURCE, DEFAULT_DESTINATION)


def send_magic_to(packet: "MagicPacket", source: Tuple[str, int], destination: Tuple[str, int]) -> None:
    """Send the packet as a single UDP datagram from ``source`` to ``destination``.

    Hosts may be IPv4 literals or resolvable names. Any socket error is
    raised as :class:`SendFailure`, as is an out-of-range or
    non-integer port. The socket is always closed.
    """
    payload = bytes(packet)
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
            s.bind(source)
            s.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            s.sendto(payload, destination)
    except (OSError, OverflowError, TypeError) as e:
        # OverflowError: port outside 0..65535, TypeError: port not an int
        raise SendFailure(e) from e
