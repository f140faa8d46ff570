"""Identities and authentication proofs.

An identity is an Algorand address. A call that needs an identity's consent
carries an ``AuthProof``: an Ed25519 signature by that identity's key over a
payload naming the operation, the contract instance and the arguments. On-chain
the transaction signature plays this role (see approval.py).
"""

from dataclasses import dataclass
from typing import Optional

from algosdk import account, encoding, util

from tycoon.errors import AuthenticationFailed, InvalidIdentity

INITIALIZE_DOMAIN = b"tycoon-main-game/initialize"


@dataclass(frozen=True)
class AuthProof:
    signer: str
    signature: str  # base64, as returned by algosdk.util.sign_bytes


def require_identity(value) -> str:
    if not isinstance(value, str) or not encoding.is_valid_address(value):
        raise InvalidIdentity(value)
    return value


def initialize_payload(contract_id: str, owner: str, reward_system: str) -> bytes:
    return (
        INITIALIZE_DOMAIN
        + b"|"
        + contract_id.encode("utf-8")
        + b"|"
        + encoding.decode_address(owner)
        + encoding.decode_address(reward_system)
    )


def sign_initialize(private_key: str, contract_id: str, owner: str, reward_system: str) -> AuthProof:
    """Sign the initialize payload with ``private_key``."""
    signer = account.address_from_private_key(private_key)
    payload = initialize_payload(contract_id, owner, reward_system)
    return AuthProof(signer=signer, signature=util.sign_bytes(payload, private_key))


def require_auth(proof: Optional[AuthProof], identity: str, payload: bytes) -> None:
    """Raise AuthenticationFailed unless ``proof`` shows ``identity`` signed ``payload``."""
    if proof is None:
        raise AuthenticationFailed(f"Missing authorization from {identity}")
    if proof.signer != identity:
        raise AuthenticationFailed(f"Authorization signed by {proof.signer}, expected {identity}")
    if not util.verify_bytes(payload, proof.signature, identity):
        raise AuthenticationFailed(f"Invalid signature for {identity}")
