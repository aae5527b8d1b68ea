"""Retroactive referral claims."""

import time

from referral_sdk.core.models import RetroactiveClaim
from referral_sdk.utils.validation import ensure_uint, normalize_address


def create_retroactive_claim(
    referee: str,
    referrer: str,
    historical_volume: int,
    signature: str,
    timestamp: int | None = None,
) -> RetroactiveClaim:
    """
    Package a claim crediting historical volume to a referrer.

    Requires contract support for retroactive referrals; the SDK only
    builds the payload.

    Args:
        referee: Referee address
        referrer: Referrer address
        historical_volume: Volume traded before registration (wei)
        signature: Signature authorizing the claim
        timestamp: Unix seconds (defaults to now)

    Returns:
        RetroactiveClaim payload
    """
    ensure_uint(historical_volume, "historical_volume")

    if timestamp is None:
        timestamp = int(time.time())

    return RetroactiveClaim(
        referee=normalize_address(referee),
        referrer=normalize_address(referrer),
        volume=historical_volume,
        signature=signature,
        timestamp=timestamp,
    )
