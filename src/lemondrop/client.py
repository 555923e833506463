import logging
from typing import Any, Dict, Optional, Tuple, Union

from requests import RequestException

from .amounts import AmountLike, to_base_units
from .config import FEE_BPS, ClientConfig
from .errors import (
    AggregatorRejected,
    InvalidInputToken,
    InvalidOutputToken,
    InvalidRequestId,
    InvalidSignedTransaction,
    InvalidTaker,
)
from .http_client import HttpClient
from .models import ExecutionResult, OrderQuote
from .registry import Asset, TokenRegistry, default_registry

logger = logging.getLogger(__name__)

ORDER_PATH = "/ultra/v1/order"
EXECUTE_PATH = "/ultra/v1/execute"

AssetRef = Union[Asset, str]


def _mint_of(asset: AssetRef) -> Optional[str]:
    if isinstance(asset, Asset):
        return asset.mint
    if isinstance(asset, str):
        return asset
    return None


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


class Lemondrop:
    """Builds roundup orders against the Ultra API and submits signed swaps.

    Signing happens outside this class: take ``OrderQuote.transaction``, sign
    it, then pass the result to :meth:`execute_order` together with
    ``OrderQuote.request_id`` before ``expire_at``.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        registry: Optional[TokenRegistry] = None,
        http: Optional[HttpClient] = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.base_url = self.config.base_url.rstrip("/")
        self.registry = registry or default_registry()
        self.http = http or HttpClient(timeout=self.config.timeout, user_agent=self.config.user_agent)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "Lemondrop":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def input_assets(self) -> Tuple[Asset, ...]:
        return self.registry.input_assets

    @property
    def output_assets(self) -> Tuple[Asset, ...]:
        return self.registry.output_assets

    def order_params(self, input_asset: AssetRef, output_asset: AssetRef, amount: AmountLike, taker: str) -> Dict[str, str]:
        """Validate an order request and return its query parameters."""
        input_mint = _mint_of(input_asset)
        if input_mint is None or not self.registry.is_valid_input(input_mint):
            raise InvalidInputToken(f"Invalid inputToken: {input_asset!r}")

        output_mint = _mint_of(output_asset)
        if output_mint is None or not self.registry.is_valid_output(output_mint):
            raise InvalidOutputToken(f"Invalid outputToken: {output_asset!r}")

        decimals = self.registry.input_asset(input_mint).decimals
        base_amount = to_base_units(amount, decimals)

        if not _is_non_empty_str(taker):
            raise InvalidTaker(f"Invalid taker: {taker!r}")

        return {
            "inputMint": input_mint,
            "outputMint": output_mint,
            "amount": base_amount,
            "taker": taker,
            "feeAccount": self.registry.fee_account_for(output_mint),
            "feeBps": str(FEE_BPS),
        }

    def create_order(self, input_asset: AssetRef, output_asset: AssetRef, amount: AmountLike, taker: str) -> OrderQuote:
        params = self.order_params(input_asset, output_asset, amount, taker)
        data = self._call("GET", ORDER_PATH, params=params)
        quote = OrderQuote.from_dict(data)
        logger.info("order %s quoted: %s %s -> %s", quote.request_id, params["amount"], params["inputMint"], params["outputMint"])
        return quote

    def execute_order(self, signed_transaction: str, request_id: str) -> ExecutionResult:
        if not _is_non_empty_str(signed_transaction):
            raise InvalidSignedTransaction("Invalid signedTransaction")
        if not _is_non_empty_str(request_id):
            raise InvalidRequestId("Invalid requestId")

        payload = {"signedTransaction": signed_transaction, "requestId": request_id}
        data = self._call("POST", EXECUTE_PATH, payload=payload)
        result = ExecutionResult.from_dict(data)
        if result.failed:
            logger.warning("order %s failed on execution: code=%s error=%s", request_id, result.code, result.error)
        else:
            logger.info("order %s executed: status=%s signature=%s", request_id, result.status, result.signature)
        return result

    def _call(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.http.request(method, url, params=params, payload=payload)
        except RequestException:
            logger.exception("%s %s failed", method, url)
            raise

        if not response.ok:
            logger.error("%s %s rejected with status %s: %s", method, url, response.status_code, response.text)
            raise AggregatorRejected(
                "aggregator rejected request",
                status_code=response.status_code,
                body=response.text,
                url=url,
            )

        data = response.json()
        if not isinstance(data, dict):
            logger.error("%s %s returned non-object JSON: %s", method, url, response.text)
            raise ValueError(f"expected a JSON object from {url}, got {type(data).__name__}")
        return data
