"""Boundary validators for addresses and on-chain integers."""

from eth_utils import is_hex_address, to_checksum_address
from loguru import logger

from referral_sdk.constants import UINT256_MAX
from referral_sdk.exceptions import AmountOutOfRangeError, InvalidAddressError

# "0x" plus 40 hex digits
ADDRESS_LENGTH = 42


def validate_wallet_address(address: str) -> tuple[bool, str | None]:
    """
    Check that ``address`` is a 20-byte 0x-prefixed hex address.

    Mixed-case input is accepted without verifying its checksum;
    normalize_address produces the checksummed form.

    Returns:
        (True, None) when valid, otherwise (False, reason)

    Examples:
        >>> validate_wallet_address("0x" + "ab" * 20)
        (True, None)
        >>> validate_wallet_address("invalid")
        (False, 'Address must start with 0x')
    """
    candidate = address.strip() if isinstance(address, str) else ""
    if not candidate:
        return False, "Address is empty"
    if not candidate.startswith("0x"):
        return False, "Address must start with 0x"
    if len(candidate) != ADDRESS_LENGTH:
        return False, f"Address must be {ADDRESS_LENGTH} characters"
    if not is_hex_address(candidate):
        logger.debug(f"Rejected non-hex address {candidate!r}")
        return False, "Invalid address format"
    return True, None


def normalize_address(address: str) -> str:
    """
    Normalize address to checksum format.

    Args:
        address: Wallet address

    Returns:
        Checksummed address

    Raises:
        InvalidAddressError: If address is malformed
    """
    is_valid, error = validate_wallet_address(address)
    if not is_valid:
        raise InvalidAddressError(f"Invalid address {address!r}: {error}")
    return to_checksum_address(address.strip())


def ensure_uint(value: int, name: str, max_value: int = UINT256_MAX) -> int:
    """
    Reject integers that do not fit an unsigned on-chain type.

    Args:
        value: Integer to check
        name: Argument name for the error message
        max_value: Upper bound of the target type (default uint256)

    Returns:
        The value unchanged

    Raises:
        AmountOutOfRangeError: If value is negative or above max_value
        TypeError: If value is not an int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise AmountOutOfRangeError(f"{name} must be non-negative, got {value}")
    if value > max_value:
        raise AmountOutOfRangeError(f"{name} exceeds {max_value}, got {value}")
    return value
