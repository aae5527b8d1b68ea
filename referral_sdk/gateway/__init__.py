"""
Contract gateway module.

Abstract read/write interface to the referral contract and its
web3.py implementation.
"""

from referral_sdk.gateway.abi import REFERRAL_ABI
from referral_sdk.gateway.base import ContractGateway, TransactionHandle
from referral_sdk.gateway.web3_gateway import Web3ContractGateway, Web3TransactionHandle

__all__ = [
    "REFERRAL_ABI",
    "ContractGateway",
    "TransactionHandle",
    "Web3ContractGateway",
    "Web3TransactionHandle",
]
