from decimal import ROUND_DOWN, Decimal, InvalidOperation, localcontext
from typing import Union

from .errors import InvalidAmount

AmountLike = Union[str, int, float, Decimal]

# Base-unit amounts on the ledger are u64.
MAX_BASE_UNITS = 2**64 - 1


def parse_amount(amount: AmountLike) -> Decimal:
    """Return ``amount`` as a finite, strictly positive Decimal.

    Floats go through ``str`` first so ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.
    """
    if isinstance(amount, bool) or not isinstance(amount, (str, int, float, Decimal)):
        raise InvalidAmount(f"Invalid amount: {amount!r}")

    try:
        value = Decimal(str(amount)) if isinstance(amount, float) else Decimal(amount)
    except (InvalidOperation, ValueError):
        raise InvalidAmount(f"Invalid amount: {amount!r}") from None

    if not value.is_finite() or value <= 0:
        raise InvalidAmount(f"Invalid amount: {amount!r}")
    return value


def to_base_units(amount: AmountLike, decimals: int) -> str:
    """Scale a human amount to integer base units, truncating toward zero.

    Amounts that would exceed ``MAX_BASE_UNITS`` raise ``InvalidAmount``.
    """
    value = parse_amount(amount)
    magnitude = value.adjusted() + decimals
    if magnitude < 0:
        return "0"
    if magnitude >= len(str(MAX_BASE_UNITS)):
        raise InvalidAmount(f"Amount too large: {amount!r}")

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + decimals + 2)
        scaled = int(value.scaleb(decimals).to_integral_value(rounding=ROUND_DOWN))
    if scaled > MAX_BASE_UNITS:
        raise InvalidAmount(f"Amount too large: {amount!r}")
    return format(scaled, "d")
