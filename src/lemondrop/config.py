from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

__version__ = "0.1.0"

# Platform fee charged on every order, in basis points (1%).
FEE_BPS = 100


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = "https://lite-api.jup.ag"
    timeout: Optional[float] = None
    user_agent: str = f"lemondrop/{__version__}"


def load_config(config_path: Union[str, Path]) -> ClientConfig:
    with Path(config_path).open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{config_path} must contain a mapping")

    known = {f.name for f in fields(ClientConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"unknown config keys: {sorted(unknown)}")
    return ClientConfig(**data)
