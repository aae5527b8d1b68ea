"""
Exception types for the referral SDK.

Handling strategy by category:
- ValidationError: bad caller input, raised synchronously, never retried
- AmountOutOfRangeError: negative or overflowing integer at the API boundary
- ContractRejectionError: revert forwarded from the contract unchanged
- GatewayError: transport failures talking to the node
"""

REVERT_PREFIX = "execution reverted: "


class ReferralSDKError(Exception):
    """Base exception for all SDK errors."""
    pass


class ValidationError(ReferralSDKError, ValueError):
    """Raised when caller input is malformed."""
    pass


class InvalidUrlError(ValidationError):
    """Raised when a base URL cannot be parsed as an absolute URL."""
    pass


class InvalidWeightsError(ValidationError):
    """Raised when a reward split plan is empty or its weights sum to zero."""
    pass


class InvalidAddressError(ValidationError):
    """Raised when a wallet address is not a valid 20-byte hex address."""
    pass


class AmountOutOfRangeError(ReferralSDKError, ArithmeticError):
    """Raised when an integer input is negative or exceeds its on-chain width."""
    pass


class ContractRejectionError(ReferralSDKError):
    """
    Raised when the contract reverts a call.

    The message is the revert text exactly as reported by the node.
    ``reason`` holds the contract-defined string without the node's prefix.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def reason(self) -> str:
        if self.message.startswith(REVERT_PREFIX):
            return self.message[len(REVERT_PREFIX):]
        return self.message


class GatewayError(ReferralSDKError):
    """Base exception for node/transport errors."""
    pass


class GatewayTimeoutError(GatewayError):
    """Raised when an RPC call exceeds the configured timeout."""
    pass
