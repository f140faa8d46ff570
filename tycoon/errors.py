"""Named failures raised by the contract.

Every error aborts the calling operation; nothing inside the contract catches
them. Callers switch on the exception type or on ``code``.
"""

from enum import Enum


class ErrorCode(str, Enum):
    ALREADY_INITIALIZED = "already_initialized"
    NOT_INITIALIZED = "not_initialized"
    AUTHENTICATION_FAILED = "authentication_failed"
    INVALID_IDENTITY = "invalid_identity"


class ContractError(Exception):
    """Base class for contract failures."""

    code: ErrorCode

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AlreadyInitialized(ContractError):
    code = ErrorCode.ALREADY_INITIALIZED

    def __init__(self, message: str = "Contract already initialized"):
        super().__init__(message)


class NotInitialized(ContractError):
    """A write-once key was read before ``initialize`` stored it."""

    code = ErrorCode.NOT_INITIALIZED

    def __init__(self, key: str, message: str):
        super().__init__(message)
        self.key = key


class AuthenticationFailed(ContractError):
    code = ErrorCode.AUTHENTICATION_FAILED


class InvalidIdentity(ContractError, ValueError):
    code = ErrorCode.INVALID_IDENTITY

    def __init__(self, value):
        super().__init__(f"Not a valid address: {value!r}")
        self.value = value
