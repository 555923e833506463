from .amounts import parse_amount, to_base_units
from .client import Lemondrop
from .config import FEE_BPS, ClientConfig, __version__, load_config
from .errors import (
    AggregatorRejected,
    InvalidAmount,
    InvalidInputToken,
    InvalidOutputToken,
    InvalidRequestId,
    InvalidSignedTransaction,
    InvalidTaker,
    LemondropError,
    RegistryError,
    ValidationError,
)
from .logging_setup import configure_logging
from .models import ExecutionResult, OrderQuote, SwapState
from .registry import Asset, TokenRegistry, default_registry, load_registry

__all__ = [
    "AggregatorRejected",
    "Asset",
    "ClientConfig",
    "ExecutionResult",
    "FEE_BPS",
    "InvalidAmount",
    "InvalidInputToken",
    "InvalidOutputToken",
    "InvalidRequestId",
    "InvalidSignedTransaction",
    "InvalidTaker",
    "Lemondrop",
    "LemondropError",
    "OrderQuote",
    "RegistryError",
    "SwapState",
    "TokenRegistry",
    "ValidationError",
    "__version__",
    "configure_logging",
    "default_registry",
    "load_config",
    "load_registry",
    "parse_amount",
    "to_base_units",
]
