"""
Formatting utilities for rebate rates and token amounts.

Integer inputs only; conversion goes through Decimal so that
display never introduces float rounding.
"""

from decimal import ROUND_DOWN, Decimal, localcontext

from referral_sdk.constants import VOLUME_DECIMALS

# uint256 has 78 decimal digits
_DISPLAY_PRECISION = 100


def format_basis_points(bps: int, decimals: int = 2) -> str:
    """
    Format a basis-point value as a percentage string.

    Args:
        bps: Value in basis points (100 bps = 1%)
        decimals: Number of digits after the decimal point

    Returns:
        Percentage string

    Example:
        >>> format_basis_points(1250)
        '12.50%'
        >>> format_basis_points(5000, decimals=0)
        '50%'
    """
    with localcontext() as ctx:
        ctx.prec = _DISPLAY_PRECISION
        percent = Decimal(bps).scaleb(-2)
        quantum = Decimal(1).scaleb(-decimals)
        return f"{percent.quantize(quantum, rounding=ROUND_DOWN):f}%"


def format_token_amount(
    amount: int,
    decimals: int = VOLUME_DECIMALS,
    symbol: str = "ETH",
    precision: int = 4,
) -> str:
    """
    Format a base-unit integer amount as a human-readable token amount.

    Args:
        amount: Amount in base units (wei for 18 decimals)
        decimals: Token decimals
        symbol: Token symbol appended to the value
        precision: Digits kept after the decimal point (truncated)

    Returns:
        Formatted string

    Example:
        >>> format_token_amount(1_500_000_000_000_000_000)
        '1.5000 ETH'
        >>> format_token_amount(123456789, decimals=9, symbol="PLEX", precision=2)
        '0.12 PLEX'
    """
    with localcontext() as ctx:
        ctx.prec = _DISPLAY_PRECISION
        value = Decimal(amount).scaleb(-decimals)
        quantum = Decimal(1).scaleb(-precision)
        formatted = f"{value.quantize(quantum, rounding=ROUND_DOWN):f}"

    if symbol:
        return f"{formatted} {symbol}"
    return formatted
