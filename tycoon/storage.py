# tycoon/storage.py
# Namespaced key-value store backing the main game contract.
#
# Two retention tiers, matching the on-chain layout in approval.py:
#   instance   -> contract-lifetime config (global state)
#   persistent -> per-address records      (local state)
import copy
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional

from tycoon.errors import NotInitialized

logger = logging.getLogger(__name__)


class Durability(str, Enum):
    INSTANCE = "instance"
    PERSISTENT = "persistent"


class KeyFamily(Enum):
    """Every key the contract may store. Nothing outside this set exists."""

    OWNER = ("Owner", Durability.INSTANCE, False)
    REWARD_SYSTEM = ("RewardSystem", Durability.INSTANCE, False)
    IS_INITIALIZED = ("IsInitialized", Durability.INSTANCE, False)
    REGISTERED = ("Registered", Durability.PERSISTENT, True)

    def __init__(self, label: str, durability: Durability, per_address: bool):
        self.label = label
        self.durability = durability
        self.per_address = per_address


@dataclass(frozen=True)
class DataKey:
    family: KeyFamily
    address: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.family, KeyFamily):
            raise TypeError(f"unknown key family: {self.family!r}")
        if self.family.per_address and self.address is None:
            raise TypeError(f"{self.family.label} key requires an address")
        if not self.family.per_address and self.address is not None:
            raise TypeError(f"{self.family.label} is a singleton key")

    @property
    def durability(self) -> Durability:
        return self.family.durability

    def __str__(self):
        if self.address is None:
            return self.family.label
        return f"{self.family.label}({self.address})"


# -------- Instance keys --------
OWNER = DataKey(KeyFamily.OWNER)
REWARD_SYSTEM = DataKey(KeyFamily.REWARD_SYSTEM)
IS_INITIALIZED = DataKey(KeyFamily.IS_INITIALIZED)


# -------- Persistent keys --------
def registered(address: str) -> DataKey:
    return DataKey(KeyFamily.REGISTERED, address)


class Storage:
    """Plain storage: get/set per key, no validation.

    Write-once rules are the caller's job; ``set`` always overwrites.
    """

    def __init__(self):
        self._tiers: dict[Durability, dict[DataKey, Any]] = {
            Durability.INSTANCE: {},
            Durability.PERSISTENT: {},
        }

    def _tier(self, key: DataKey) -> dict:
        if not isinstance(key, DataKey):
            raise TypeError(f"expected DataKey, got {type(key).__name__}")
        return self._tiers[key.durability]

    def get(self, key: DataKey, default: Any = None) -> Any:
        return self._tier(key).get(key, default)

    def has(self, key: DataKey) -> bool:
        return key in self._tier(key)

    def set(self, key: DataKey, value: Any) -> None:
        self._tier(key)[key] = value

    def keys(self, durability: Durability) -> list[DataKey]:
        return list(self._tiers[durability])

    @contextmanager
    def transaction(self) -> Iterator["Storage"]:
        """Run a block all-or-nothing. Any exception restores the entry state."""
        snapshot = copy.deepcopy(self._tiers)
        try:
            yield self
        except BaseException:
            self._tiers = snapshot
            logger.debug("transaction rolled back")
            raise


# -----------------------------------------------------------------------
# Initialization
# -----------------------------------------------------------------------
def is_initialized(store: Storage) -> bool:
    return store.get(IS_INITIALIZED, False)


def set_initialized(store: Storage) -> None:
    store.set(IS_INITIALIZED, True)


# -----------------------------------------------------------------------
# Owner / reward system
# -----------------------------------------------------------------------
def get_owner(store: Storage) -> str:
    owner = store.get(OWNER)
    if owner is None:
        raise NotInitialized(str(OWNER), "Owner not set")
    return owner


def set_owner(store: Storage, owner: str) -> None:
    store.set(OWNER, owner)


def get_reward_system(store: Storage) -> str:
    """Reward collaborator address; future voucher minting calls go here."""
    reward_system = store.get(REWARD_SYSTEM)
    if reward_system is None:
        raise NotInitialized(str(REWARD_SYSTEM), "Reward system not set")
    return reward_system


def set_reward_system(store: Storage, address: str) -> None:
    store.set(REWARD_SYSTEM, address)


# -----------------------------------------------------------------------
# Player registration
# -----------------------------------------------------------------------
def is_registered(store: Storage, address: str) -> bool:
    return store.get(registered(address), False)


def set_registered(store: Storage, address: str) -> None:
    store.set(registered(address), True)
