"""wakey

Build and broadcast Wake-on-LAN magic packets.
"""

from .errors import InvalidMacFormat, InvalidMacLength, SendFailure, WakeyError
from .mac import MacAddress, detect_separator, parse_mac
from .packet import MagicPacket, build, build_from_raw_bytes
from .wol import send_magic, send_magic_to

__version__ = "0.1.0"

__all__ = [
    "InvalidMacFormat",
    "InvalidMacLength",
    "MacAddress",
    "MagicPacket",
    "SendFailure",
    "WakeyError",
    "build",
    "build_from_raw_bytes",
    "detect_separator",
    "parse_mac",
    "send_magic",
    "send_magic_to",
]
