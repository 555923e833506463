"""Typed views over the aggregator's order and execution payloads.

Fields are copied as received. Missing keys become ``None`` (or empty lists)
instead of errors, and the full payload stays available on ``raw``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class SwapState(Enum):
    CREATED = "created"
    QUOTED = "quoted"
    SUBMITTED = "submitted"
    SETTLED = "settled"
    REJECTED = "rejected"
    # only the aggregator can tell, by refusing the execute call
    EXPIRED = "expired"


@dataclass(frozen=True)
class SwapInfo:
    amm_key: Optional[str]
    label: Optional[str]
    input_mint: Optional[str]
    output_mint: Optional[str]
    in_amount: Optional[str]
    out_amount: Optional[str]
    fee_amount: Optional[str]
    fee_mint: Optional[str]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SwapInfo":
        return cls(
            amm_key=data.get("ammKey"),
            label=data.get("label"),
            input_mint=data.get("inputMint"),
            output_mint=data.get("outputMint"),
            in_amount=data.get("inAmount"),
            out_amount=data.get("outAmount"),
            fee_amount=data.get("feeAmount"),
            fee_mint=data.get("feeMint"),
        )


@dataclass(frozen=True)
class RoutePlanStep:
    swap_info: SwapInfo
    percent: Optional[float]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoutePlanStep":
        return cls(swap_info=SwapInfo.from_dict(data.get("swapInfo") or {}), percent=data.get("percent"))


@dataclass(frozen=True)
class PlatformFee:
    amount: Optional[str]
    fee_bps: Optional[int]


@dataclass(frozen=True)
class DynamicSlippageReport:
    slippage_bps: Optional[int]
    category_name: Optional[str]
    heuristic_max_slippage_bps: Optional[int]


@dataclass(frozen=True)
class OrderQuote:
    input_mint: Optional[str]
    output_mint: Optional[str]
    in_amount: Optional[str]
    out_amount: Optional[str]
    other_amount_threshold: Optional[str]
    swap_mode: Optional[str]
    slippage_bps: Optional[int]
    price_impact_pct: Optional[str]
    route_plan: List[RoutePlanStep]
    fee_mint: Optional[str]
    fee_bps: Optional[int]
    prioritization_fee_lamports: Optional[int]
    swap_type: Optional[str]
    transaction: Optional[str]
    gasless: Optional[bool]
    request_id: Optional[str]
    total_time: Optional[float]
    taker: Optional[str]
    quote_id: Optional[str]
    maker: Optional[str]
    expire_at: Optional[str]
    platform_fee: Optional[PlatformFee]
    dynamic_slippage_report: Optional[DynamicSlippageReport]
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderQuote":
        platform_fee = data.get("platformFee")
        report = data.get("dynamicSlippageReport")
        return cls(
            input_mint=data.get("inputMint"),
            output_mint=data.get("outputMint"),
            in_amount=data.get("inAmount"),
            out_amount=data.get("outAmount"),
            other_amount_threshold=data.get("otherAmountThreshold"),
            swap_mode=data.get("swapMode"),
            slippage_bps=data.get("slippageBps"),
            price_impact_pct=data.get("priceImpactPct"),
            route_plan=[RoutePlanStep.from_dict(step) for step in data.get("routePlan") or []],
            fee_mint=data.get("feeMint"),
            fee_bps=data.get("feeBps"),
            prioritization_fee_lamports=data.get("prioritizationFeeLamports"),
            swap_type=data.get("swapType"),
            transaction=data.get("transaction"),
            gasless=data.get("gasless"),
            request_id=data.get("requestId"),
            total_time=data.get("totalTime"),
            taker=data.get("taker"),
            quote_id=data.get("quoteId"),
            maker=data.get("maker"),
            expire_at=data.get("expireAt"),
            platform_fee=(
                PlatformFee(amount=platform_fee.get("amount"), fee_bps=platform_fee.get("feeBps"))
                if isinstance(platform_fee, dict)
                else None
            ),
            dynamic_slippage_report=(
                DynamicSlippageReport(
                    slippage_bps=report.get("slippageBps"),
                    category_name=report.get("categoryName"),
                    heuristic_max_slippage_bps=report.get("heuristicMaxSlippageBps"),
                )
                if isinstance(report, dict)
                else None
            ),
            raw=data,
        )


@dataclass(frozen=True)
class SwapEvent:
    input_mint: Optional[str]
    input_amount: Optional[str]
    output_mint: Optional[str]
    output_amount: Optional[str]


@dataclass(frozen=True)
class ExecutionResult:
    status: Optional[str]
    signature: Optional[str]
    slot: Optional[str]
    error: Optional[str]
    code: Optional[int]
    total_input_amount: Optional[str]
    total_output_amount: Optional[str]
    input_amount_result: Optional[str]
    output_amount_result: Optional[str]
    swap_events: List[SwapEvent]
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def succeeded(self) -> bool:
        return self.status == "Success"

    @property
    def failed(self) -> bool:
        return self.status == "Failed"

    @property
    def state(self) -> SwapState:
        return SwapState.SETTLED if self.succeeded else SwapState.REJECTED

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExecutionResult":
        return cls(
            status=data.get("status"),
            signature=data.get("signature"),
            slot=data.get("slot"),
            error=data.get("error"),
            code=data.get("code"),
            total_input_amount=data.get("totalInputAmount"),
            total_output_amount=data.get("totalOutputAmount"),
            input_amount_result=data.get("inputAmountResult"),
            output_amount_result=data.get("outputAmountResult"),
            swap_events=[
                SwapEvent(
                    input_mint=event.get("inputMint"),
                    input_amount=event.get("inputAmount"),
                    output_mint=event.get("outputMint"),
                    output_amount=event.get("outputAmount"),
                )
                for event in data.get("swapEvents") or []
            ],
            raw=data,
        )
