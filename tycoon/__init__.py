"""Tycoon main game contract: initialization, ownership and player registration."""

from tycoon.auth import AuthProof, sign_initialize
from tycoon.contract import ContractState, RewardSystem, TycoonMainGame
from tycoon.errors import (
    AlreadyInitialized,
    AuthenticationFailed,
    ContractError,
    ErrorCode,
    InvalidIdentity,
    NotInitialized,
)
from tycoon.storage import Storage

__all__ = [
    "AlreadyInitialized",
    "AuthProof",
    "AuthenticationFailed",
    "ContractError",
    "ContractState",
    "ErrorCode",
    "InvalidIdentity",
    "NotInitialized",
    "RewardSystem",
    "Storage",
    "TycoonMainGame",
    "sign_initialize",
]
