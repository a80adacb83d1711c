import string
from dataclasses import dataclass
from typing import Iterable, Union

from .errors import InvalidMacFormat, InvalidMacLength


MAC_SIZE = 6
# two hex digits per octet plus a separator between each pair
MAC_STRING_LEN = MAC_SIZE * 3 - 1
SEPARATORS = (":", "-", "/")

_HEX = set(string.hexdigits)


@dataclass(frozen=True)
class MacAddress:
    """Six raw bytes identifying a network interface."""

    octets: bytes

    def __post_init__(self):
        object.__setattr__(self, "octets", _to_bytes(self.octets))
        if len(self.octets) != MAC_SIZE:
            raise InvalidMacLength(f"MAC address must be {MAC_SIZE} bytes, got {len(self.octets)}")

    def __bytes__(self) -> bytes:
        return self.octets

    def __str__(self) -> str:
        return ":".join(f"{b:02X}" for b in self.octets)


def _to_bytes(raw: Union[bytes, bytearray, memoryview, Iterable[int]]) -> bytes:
    if isinstance(raw, (int, str)):
        raise InvalidMacFormat(f"MAC address must be a byte sequence, got {type(raw).__name__}")
    try:
        return bytes(raw)
    except (TypeError, ValueError) as e:
        raise InvalidMacFormat(f"MAC address bytes must be integers in 0..255: {e}") from e


def parse_mac(text: str, sep: str = ":") -> MacAddress:
    """Parse ``AA:BB:CC:DD:EE:FF`` style text into a :class:`MacAddress`.

    The length is checked before the text is split, so a separator in the
    wrong place is rejected as a format error rather than re-tokenized.
    """
    if len(text) != MAC_STRING_LEN:
        raise InvalidMacLength(f"MAC address must be {MAC_STRING_LEN} characters, got {len(text)}")
    if len(sep) != 1:
        raise InvalidMacFormat(f"Separator must be a single character, got {sep!r}")
    parts = text.split(sep)
    if len(parts) != MAC_SIZE or not all(len(p) == 2 and all(c in _HEX for c in p) for p in parts):
        raise InvalidMacFormat(f"Invalid MAC address: {text}")
    return MacAddress(bytes(int(p, 16) for p in parts))


def detect_separator(text: str, default: str = ":") -> str:
    """Return the first of ``:``, ``-`` or ``/`` found in ``text``."""
    for c in text:
        if c in SEPARATORS:
            return c
    return default
