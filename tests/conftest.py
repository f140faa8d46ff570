import pytest
from algosdk import account

from tycoon.auth import sign_initialize
from tycoon.config import load_settings
from tycoon.contract import TycoonMainGame
from tycoon.localnet import is_healthy


@pytest.fixture
def owner_account():
    sk, addr = account.generate_account()
    return addr, sk


@pytest.fixture
def reward_system():
    return account.generate_account()[1]


@pytest.fixture
def game():
    return TycoonMainGame(contract_id="test-game")


@pytest.fixture
def initialized(game, owner_account, reward_system):
    owner, sk = owner_account
    game.initialize(owner, reward_system, sign_initialize(sk, game.contract_id, owner, reward_system))
    return game


@pytest.fixture(scope="session")
def localnet():
    settings = load_settings()
    if not is_healthy(settings.algod_address):
        pytest.skip(f"algod not reachable at {settings.algod_address}")
    return settings
