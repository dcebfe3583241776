"""Conversion between minimal units (wei-equivalent) and display amounts.

All arithmetic goes through ``decimal.Decimal`` with a context wide enough
for 2**256-sized values, so no binary float ever sits in between.
"""

from __future__ import annotations

from decimal import Context, Decimal, InvalidOperation, ROUND_DOWN

from taraxa_delegator.errors import AmountError

DECIMALS = 18
UNIT = 10**DECIMALS

# 2**256 has 78 digits; leave room for the scale on top of it
_CTX = Context(prec=120, rounding=ROUND_DOWN)


def parse_amount(raw: int | str) -> int:
    """Parse a non-negative minimal-unit amount from an int or base-10 string."""
    if isinstance(raw, bool):
        raise AmountError(f"not an amount: {raw!r}")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str):
        text = raw.strip()
        if not (text.isascii() and text.isdigit()):
            raise AmountError(f"not a base-10 integer: {raw!r}")
        value = int(text)
    else:
        raise AmountError(f"unsupported amount type: {type(raw).__name__}")
    if value < 0:
        raise AmountError(f"negative amount: {raw!r}")
    return value


def _parse_decimal(amount: Decimal | int | str) -> Decimal:
    if isinstance(amount, bool) or isinstance(amount, float):
        raise AmountError(f"unsupported amount type: {type(amount).__name__}")
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, int):
        value = Decimal(amount)
    elif isinstance(amount, str):
        try:
            value = Decimal(amount.strip())
        except InvalidOperation as exc:
            raise AmountError(f"not a decimal amount: {amount!r}") from exc
    else:
        raise AmountError(f"unsupported amount type: {type(amount).__name__}")
    if not value.is_finite():
        raise AmountError(f"not a finite amount: {amount!r}")
    if value < 0:
        raise AmountError(f"negative amount: {amount!r}")
    return value


def to_display_amount(raw: int | str, scale: int = DECIMALS) -> Decimal:
    """Divide a minimal-unit amount by 10**scale, exactly."""
    value = parse_amount(raw)
    return _CTX.divide(Decimal(value), Decimal(10**scale))


def to_minimal_unit(amount: Decimal | int | str, scale: int = DECIMALS) -> int:
    """Multiply a display amount by 10**scale and truncate to an integer."""
    value = _parse_decimal(amount)
    scaled = _CTX.multiply(value, Decimal(10**scale))
    return int(scaled.to_integral_value(rounding=ROUND_DOWN))


def to_whole_units(raw: int | str, scale: int = DECIMALS) -> int:
    """Whole units contained in ``raw``; the fractional remainder is dropped."""
    return parse_amount(raw) // 10**scale


def format_amount(raw: int | str, symbol: str = "TARA", scale: int = DECIMALS) -> str:
    return f"{to_display_amount(raw, scale).normalize(_CTX):f} {symbol}"
