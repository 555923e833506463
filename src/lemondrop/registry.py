"""Static table of swappable assets and the fee account for each output."""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

import yaml

from .errors import RegistryError

DEFAULT_TOKENS_PATH = Path(__file__).with_name("tokens.yaml")


@dataclass(frozen=True)
class Asset:
    name: str
    symbol: str
    mint: str
    decimals: int


class TokenRegistry:
    """Read-only view over the input assets, output assets and fee accounts."""

    def __init__(
        self,
        input_assets: Iterable[Asset],
        output_assets: Iterable[Asset],
        fee_accounts: Mapping[str, str],
    ) -> None:
        inputs = tuple(input_assets)
        outputs = tuple(output_assets)
        _check_assets("input", inputs)
        _check_assets("output", outputs)

        output_mints = {asset.mint for asset in outputs}
        shared = output_mints & {asset.mint for asset in inputs}
        if shared:
            raise RegistryError(f"tokens listed as both input and output: {sorted(shared)}")
        missing = output_mints - set(fee_accounts)
        if missing:
            raise RegistryError(f"output tokens without fee account: {sorted(missing)}")
        stray = set(fee_accounts) - output_mints
        if stray:
            raise RegistryError(f"fee accounts for unknown output tokens: {sorted(stray)}")
        if len(set(fee_accounts.values())) != len(fee_accounts):
            raise RegistryError("fee accounts must be distinct per output token")

        self._inputs: Mapping[str, Asset] = MappingProxyType({a.mint: a for a in inputs})
        self._outputs: Mapping[str, Asset] = MappingProxyType({a.mint: a for a in outputs})
        self._fee_accounts: Mapping[str, str] = MappingProxyType(dict(fee_accounts))

    @property
    def input_assets(self) -> Tuple[Asset, ...]:
        return tuple(self._inputs.values())

    @property
    def output_assets(self) -> Tuple[Asset, ...]:
        return tuple(self._outputs.values())

    def is_valid_input(self, mint: str) -> bool:
        return mint in self._inputs

    def is_valid_output(self, mint: str) -> bool:
        return mint in self._outputs

    def input_asset(self, mint: str) -> Optional[Asset]:
        return self._inputs.get(mint)

    def output_asset(self, mint: str) -> Optional[Asset]:
        return self._outputs.get(mint)

    def fee_account_for(self, output_mint: str) -> str:
        # KeyError here means the caller skipped is_valid_output.
        return self._fee_accounts[output_mint]


def _check_assets(kind: str, assets: Tuple[Asset, ...]) -> None:
    seen = set()
    for asset in assets:
        if not asset.mint:
            raise RegistryError(f"{kind} token {asset.symbol!r} has no mint")
        if isinstance(asset.decimals, bool) or not isinstance(asset.decimals, int) or asset.decimals < 0:
            raise RegistryError(f"{kind} token {asset.symbol!r} has invalid decimals {asset.decimals!r}")
        if asset.mint in seen:
            raise RegistryError(f"duplicate {kind} token mint {asset.mint}")
        seen.add(asset.mint)


def _parse_asset(entry: Dict[str, Any]) -> Asset:
    try:
        return Asset(
            name=str(entry["name"]),
            symbol=str(entry["symbol"]),
            mint=str(entry["mint"]),
            decimals=entry["decimals"],
        )
    except (KeyError, TypeError) as exc:
        raise RegistryError(f"malformed token entry: {entry!r}") from exc


def registry_from_dict(data: Dict[str, Any]) -> TokenRegistry:
    inputs: List[Asset] = [_parse_asset(entry) for entry in data.get("input_tokens") or []]
    outputs: List[Asset] = []
    fee_accounts: Dict[str, str] = {}
    for entry in data.get("output_tokens") or []:
        asset = _parse_asset(entry)
        fee_account = entry.get("fee_account")
        if not fee_account:
            raise RegistryError(f"output token {asset.symbol!r} has no fee_account")
        if asset.mint in fee_accounts:
            raise RegistryError(f"duplicate output token mint {asset.mint}")
        outputs.append(asset)
        fee_accounts[asset.mint] = str(fee_account)
    return TokenRegistry(inputs, outputs, fee_accounts)


def load_registry(path: Optional[Union[str, Path]] = None) -> TokenRegistry:
    tokens_path = Path(path) if path is not None else DEFAULT_TOKENS_PATH
    with tokens_path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise RegistryError(f"{tokens_path} does not contain a token table")
    return registry_from_dict(data)


@lru_cache(maxsize=1)
def default_registry() -> TokenRegistry:
    return load_registry()
