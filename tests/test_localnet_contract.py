import pytest
from algosdk import account
from algosdk.error import AlgodHTTPError

from tycoon import localnet as ln
from tycoon.build import build


@pytest.fixture(scope="module")
def deployed(localnet, tmp_path_factory):
    artifacts = tmp_path_factory.mktemp("artifacts")
    build(artifacts, localnet.teal_version)
    algod = ln.get_algod(localnet)
    sender, sk = ln.signing_key(ln.get_kmd(localnet))
    app_id = ln.create_app(algod, sender, sk, artifacts)
    return algod, sender, sk, app_id


def test_reads_before_initialize_reject(deployed):
    algod, sender, sk, app_id = deployed
    with pytest.raises(AlgodHTTPError):
        ln.get_owner(algod, sender, sk, app_id)
    with pytest.raises(AlgodHTTPError):
        ln.get_reward_system(algod, sender, sk, app_id)


def test_initialize_then_read(deployed):
    algod, sender, sk, app_id = deployed
    reward_system = account.generate_account()[1]

    # sender must be the claimed owner
    with pytest.raises(AlgodHTTPError):
        ln.call(algod, sender, sk, app_id, "initialize", [bytes(32), bytes(32)])

    ln.initialize(algod, sender, sk, app_id, reward_system)
    assert ln.get_owner(algod, sender, sk, app_id) == sender
    assert ln.get_reward_system(algod, sender, sk, app_id) == reward_system

    ln.register_player(algod, sender, sk, app_id)
    ln.register_player(algod, sender, sk, app_id)
    assert ln.is_registered(algod, sender, sk, app_id, sender) is False

    with pytest.raises(AlgodHTTPError):
        ln.initialize(algod, sender, sk, app_id, reward_system)
