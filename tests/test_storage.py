import pytest
from algosdk import account

from tycoon import storage
from tycoon.errors import NotInitialized
from tycoon.storage import Durability, DataKey, KeyFamily, Storage


def test_key_families_declare_durability():
    assert storage.OWNER.durability is Durability.INSTANCE
    assert storage.REWARD_SYSTEM.durability is Durability.INSTANCE
    assert storage.IS_INITIALIZED.durability is Durability.INSTANCE
    assert storage.registered("X").durability is Durability.PERSISTENT


def test_registered_key_requires_address():
    with pytest.raises(TypeError):
        DataKey(KeyFamily.REGISTERED)


def test_singleton_key_rejects_address():
    with pytest.raises(TypeError):
        DataKey(KeyFamily.OWNER, "someone")


def test_unknown_key_rejected():
    with pytest.raises(TypeError):
        Storage().get("Owner")


def test_get_returns_default_only_when_given():
    s = Storage()
    assert s.get(storage.OWNER) is None
    assert s.get(storage.OWNER, "fallback") == "fallback"
    assert not s.has(storage.OWNER)


def test_set_overwrites_and_tiers_are_separate():
    s = Storage()
    s.set(storage.OWNER, "a")
    s.set(storage.OWNER, "b")
    s.set(storage.registered("a"), True)
    assert s.get(storage.OWNER) == "b"
    assert s.keys(Durability.INSTANCE) == [storage.OWNER]
    assert s.keys(Durability.PERSISTENT) == [storage.registered("a")]


def test_transaction_rolls_back_on_error():
    s = Storage()
    s.set(storage.OWNER, "kept")
    with pytest.raises(RuntimeError):
        with s.transaction():
            s.set(storage.OWNER, "dropped")
            s.set(storage.IS_INITIALIZED, True)
            raise RuntimeError("abort")
    assert s.get(storage.OWNER) == "kept"
    assert not s.has(storage.IS_INITIALIZED)


def test_transaction_commits_on_success():
    s = Storage()
    with s.transaction():
        storage.set_initialized(s)
    assert storage.is_initialized(s)


def test_owner_and_reward_system_accessors():
    s = Storage()
    with pytest.raises(NotInitialized, match="Owner not set"):
        storage.get_owner(s)
    with pytest.raises(NotInitialized, match="Reward system not set"):
        storage.get_reward_system(s)

    storage.set_owner(s, "owner")
    storage.set_reward_system(s, "rewards")
    assert storage.get_owner(s) == "owner"
    assert storage.get_reward_system(s) == "rewards"


def test_not_initialized_names_missing_key():
    s = Storage()
    with pytest.raises(NotInitialized) as owner_err:
        storage.get_owner(s)
    with pytest.raises(NotInitialized) as rs_err:
        storage.get_reward_system(s)
    assert owner_err.value.key == "Owner"
    assert rs_err.value.key == "RewardSystem"


def test_registration_flag_defaults_false_and_sticks():
    s = Storage()
    addr = account.generate_account()[1]
    other = account.generate_account()[1]
    assert storage.is_registered(s, addr) is False
    storage.set_registered(s, addr)
    assert storage.is_registered(s, addr) is True
    assert storage.is_registered(s, other) is False
