"""Error taxonomy for order building and execution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class LemondropError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(LemondropError, ValueError):
    """Raised before any network call when caller input is rejected."""


class InvalidInputToken(ValidationError):
    pass


class InvalidOutputToken(ValidationError):
    pass


class InvalidAmount(ValidationError):
    pass


class InvalidTaker(ValidationError):
    pass


class InvalidSignedTransaction(ValidationError):
    pass


class InvalidRequestId(ValidationError):
    pass


class RegistryError(LemondropError):
    """Raised when a token table breaks the registry invariants."""


@dataclass
class AggregatorRejected(LemondropError):
    """The aggregator answered with a non-success HTTP status."""

    message: str
    status_code: Optional[int] = None
    body: str = ""
    url: Optional[str] = None

    @property
    def detail(self) -> str:
        return self.body

    def __str__(self) -> str:
        suffix = []
        if self.status_code is not None:
            suffix.append(f"status={self.status_code}")
        if self.body:
            suffix.append(f"body={self.body}")
        detail = ", ".join(suffix)
        return f"{self.message} ({detail})" if detail else self.message
