import argparse
import sys

from .config import DEFAULT_CONFIG_PATH, Config, load_config
from .errors import SendFailure, WakeyError
from .mac import detect_separator
from .packet import MagicPacket
from .util import log
from .wol import send_magic_to


EXIT_OK = 0
EXIT_SEND_FAILED = 1
EXIT_BAD_MAC = 2
EXIT_BAD_CONFIG = 3


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Send a Wake-on-LAN magic packet")
    p.add_argument(
        "mac_address",
        help="MAC address (AA:BB:CC:DD:EE:FF, AA-BB-CC-DD-EE-FF or AA/BB/CC/DD/EE/FF) or a host alias from the config",
    )
    p.add_argument("--sep", default=None, help="separator used in the MAC address (default: detect)")
    p.add_argument("--broadcast", default=None, help="destination address (default 255.255.255.255)")
    p.add_argument("--port", type=int, default=None, help="destination UDP port (default 9)")
    p.add_argument("--source", default=None, help="local address to send from (default 0.0.0.0)")
    p.add_argument("--source-port", type=int, default=None, help="local UDP port (default: ephemeral)")
    p.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="path to config.json")
    return p.parse_args(argv)


def _pick(value, fallback):
    return fallback if value is None else value


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        cfg = load_config(args.config) or Config()
    except (OSError, ValueError, TypeError) as e:
        log(f"Could not read config {args.config}: {e}")
        return EXIT_BAD_CONFIG

    mac_text = cfg.hosts.get(args.mac_address, args.mac_address)
    sep = args.sep or cfg.separator or detect_separator(mac_text)
    try:
        packet = MagicPacket.from_string(mac_text, sep)
    except WakeyError as e:
        log(f"{e}. Use one of the formats AA:BB:CC:DD:EE:FF, AA-BB-CC-DD-EE-FF or AA/BB/CC/DD/EE/FF")
        return EXIT_BAD_MAC

    source = (_pick(args.source, cfg.source_ip), _pick(args.source_port, cfg.source_port))
    destination = (_pick(args.broadcast, cfg.broadcast), _pick(args.port, cfg.port))
    try:
        send_magic_to(packet, source, destination)
    except SendFailure as e:
        log(f"Failed to send the magic packet to {packet.mac}: {e.error}")
        return EXIT_SEND_FAILED
    log(f"Sent the magic packet to {packet.mac} via {destination[0]}:{destination[1]}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
