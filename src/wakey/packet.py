"""Magic packet construction."""

from dataclasses import dataclass, field
from typing import Iterable, Tuple, Union

from . import wol
from .mac import MAC_SIZE, MacAddress, parse_mac


MAC_PER_MAGIC = 16
HEADER = b"\xff" * 6
PACKET_LEN = len(HEADER) + MAC_SIZE * MAC_PER_MAGIC

RawMac = Union[bytes, bytearray, memoryview, Iterable[int]]


@dataclass(frozen=True)
class MagicPacket:
    """A 102 byte Wake-on-LAN payload: 6 x 0xFF followed by the MAC 16 times.

    The payload is always derived from ``mac``; it cannot be passed in.
    """

    mac: MacAddress
    data: bytes = field(init=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.mac, MacAddress):
            object.__setattr__(self, "mac", MacAddress(self.mac))
        object.__setattr__(self, "data", HEADER + self.mac.octets * MAC_PER_MAGIC)

    @classmethod
    def from_bytes(cls, raw: RawMac) -> "MagicPacket":
        return build_from_raw_bytes(raw)

    @classmethod
    def from_string(cls, text: str, sep: str = ":") -> "MagicPacket":
        return build(parse_mac(text, sep))

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def send_magic(self) -> None:
        wol.send_magic(self)

    def send_magic_to(self, source: Tuple[str, int], destination: Tuple[str, int]) -> None:
        wol.send_magic_to(self, source, destination)


def build(mac: Union[MacAddress, RawMac]) -> MagicPacket:
    """Build a packet from a :class:`MacAddress` or 6 raw bytes."""
    return MagicPacket(mac)


def build_from_raw_bytes(raw: RawMac) -> MagicPacket:
    """Build a packet from MAC bytes that did not come through :func:`parse_mac`.

    Raises :class:`~wakey.errors.InvalidMacLength` unless exactly 6 bytes are given.
    """
    return MagicPacket(MacAddress(raw))
