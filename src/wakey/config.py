import json
import os
from dataclasses import dataclass, field
from typing import Dict, Optional


DEFAULT_CONFIG_PATH = os.path.join("~", ".config", "wakey", "config.json")


@dataclass
class Config:
    broadcast: str = "255.255.255.255"
    port: int = 9
    source_ip: str = "0.0.0.0"
    source_port: int = 0
    separator: Optional[str] = None  # None -> detect from the address
    hosts: Dict[str, str] = field(default_factory=dict)


def load_config(path: Optional[str] = None) -> Optional[Config]:
    cfg_path = os.path.expanduser(path or DEFAULT_CONFIG_PATH)
    if not os.path.exists(cfg_path):
        return None
    with open(cfg_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return Config(**data)
