"""
Utility functions for the referral SDK.

Formatting, boundary validation and logging setup.
"""

from referral_sdk.utils.formatters import format_basis_points, format_token_amount
from referral_sdk.utils.logging import setup_logging
from referral_sdk.utils.validation import (
    ensure_uint,
    normalize_address,
    validate_wallet_address,
)

__all__ = [
    "format_basis_points",
    "format_token_amount",
    "setup_logging",
    "ensure_uint",
    "normalize_address",
    "validate_wallet_address",
]
