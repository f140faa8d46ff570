"""
Tycoon main game contract (off-chain reference).

Holds the admin owner, the reward system address and per-player registration
flags. The same state machine runs on-chain as the PyTeal program in
approval.py.

Planned, not implemented here:
- register_player(caller, username): caller auth, 3-20 char username,
  duplicate guard, then reward_system.mint_voucher(caller, amount).
- create_game / join_game / start_game / end_game against the token and
  reward contracts.
"""
import logging
import threading
import uuid
from enum import Enum
from typing import Optional, Protocol, runtime_checkable

from tycoon import storage
from tycoon.auth import AuthProof, initialize_payload, require_auth, require_identity
from tycoon.errors import AlreadyInitialized

logger = logging.getLogger(__name__)


class ContractState(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"


@runtime_checkable
class RewardSystem(Protocol):
    """What the stored reward_system address is expected to implement."""

    def mint_voucher(self, recipient: str, amount: int) -> None: ...


class TycoonMainGame:
    def __init__(self, store: Optional[storage.Storage] = None, contract_id: Optional[str] = None):
        self.store = store if store is not None else storage.Storage()
        self.contract_id = contract_id or uuid.uuid4().hex
        # operations against one instance never interleave
        self._lock = threading.Lock()

    @property
    def state(self) -> ContractState:
        if storage.is_initialized(self.store):
            return ContractState.INITIALIZED
        return ContractState.UNINITIALIZED

    def initialize(self, owner: str, reward_system: str, proof: Optional[AuthProof] = None) -> None:
        """Store the owner and reward system. Must be called exactly once.

        ``proof`` must be signed by ``owner`` over this contract's initialize
        payload (see auth.sign_initialize).

        Raises:
            AlreadyInitialized: the contract was initialized before.
            InvalidIdentity: owner or reward_system is not an address.
            AuthenticationFailed: proof missing or not from ``owner``.
        """
        with self._lock, self.store.transaction():
            if storage.is_initialized(self.store):
                raise AlreadyInitialized()

            require_identity(owner)
            require_identity(reward_system)
            payload = initialize_payload(self.contract_id, owner, reward_system)
            require_auth(proof, owner, payload)

            storage.set_owner(self.store, owner)
            storage.set_reward_system(self.store, reward_system)
            storage.set_initialized(self.store)
        logger.info("contract %s initialized: owner=%s reward_system=%s", self.contract_id, owner, reward_system)

    def register_player(self) -> None:
        """Placeholder. Does nothing and never fails."""
        # TODO: take (caller, username) once the re-registration policy is settled
        return None

    def get_owner(self) -> str:
        with self._lock:
            return storage.get_owner(self.store)

    def get_reward_system(self) -> str:
        with self._lock:
            return storage.get_reward_system(self.store)

    def is_registered(self, address: str) -> bool:
        with self._lock:
            registered = storage.is_registered(self.store, address)
        logger.debug("is_registered(%s) -> %s", address, registered)
        return registered
