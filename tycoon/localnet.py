# tycoon/localnet.py
# LocalNet helpers: clients, a funded KMD signer, deploy and method calls.
import base64
import logging
import os
from pathlib import Path
from typing import Optional, Sequence

import requests
from algosdk import encoding
from algosdk.kmd import KMDClient
from algosdk.transaction import (
    ApplicationCreateTxn,
    ApplicationNoOpTxn,
    ApplicationOptInTxn,
    OnComplete,
    StateSchema,
    wait_for_confirmation,
)
from algosdk.v2client.algod import AlgodClient

from tycoon.approval import GLOBAL_SCHEMA, LOCAL_SCHEMA
from tycoon.config import Settings, load_settings

logger = logging.getLogger(__name__)

WALLET_PASSWORDS = ("", "a", "testpassword")


def get_algod(settings: Optional[Settings] = None) -> AlgodClient:
    s = settings or load_settings()
    return AlgodClient(s.algod_token, s.algod_address, headers={"X-Algo-API-Token": s.algod_token})


def get_kmd(settings: Optional[Settings] = None) -> KMDClient:
    s = settings or load_settings()
    return KMDClient(s.kmd_token, s.kmd_address)


def is_healthy(base_url: str, timeout: float = 5) -> bool:
    try:
        r = requests.get(f"{base_url}/health", timeout=timeout)
    except requests.RequestException:
        return False
    return r.status_code == 200


def signing_key(kmd: KMDClient) -> tuple[str, str]:
    """First account of the first unlockable KMD wallet, as (address, private key)."""
    # algosdk versions differ: some return {"wallets": [...]}, others a plain list
    wl = kmd.list_wallets()
    wallets = wl.get("wallets", []) if isinstance(wl, dict) else wl
    if not wallets:
        raise RuntimeError("No KMD wallets found in LocalNet")
    wallet_id = wallets[0]["id"]
    for pw in WALLET_PASSWORDS:
        try:
            handle = kmd.init_wallet_handle(wallet_id, pw)
        except Exception:
            continue
        try:
            keys = kmd.list_keys(handle)
            addr = keys[0] if keys else kmd.generate_key(handle)
            return addr, kmd.export_key(handle, pw, addr)
        finally:
            kmd.release_wallet_handle(handle)
    raise RuntimeError("Could not unlock KMD wallet with '', 'a', or 'testpassword'")


def compile_teal(algod: AlgodClient, source: str) -> bytes:
    return base64.b64decode(algod.compile(source)["result"])


def _send(algod: AlgodClient, txn, sk: str, rounds: int = 10) -> dict:
    txid = algod.send_transaction(txn.sign(sk))
    return wait_for_confirmation(algod, txid, rounds)


def create_app(algod: AlgodClient, sender: str, sk: str, artifacts: Path) -> int:
    approval = compile_teal(algod, (artifacts / "approval.teal").read_text())
    clear = compile_teal(algod, (artifacts / "clear.teal").read_text())
    txn = ApplicationCreateTxn(
        sender=sender,
        sp=algod.suggested_params(),
        on_complete=OnComplete.NoOpOC,
        approval_program=approval,
        clear_program=clear,
        global_schema=StateSchema(**GLOBAL_SCHEMA),
        local_schema=StateSchema(**LOCAL_SCHEMA),
        note=b"tycoon main game create",
    )
    result = _send(algod, txn, sk, 20)
    app_id = result.get("application-index")
    if not app_id:
        raise RuntimeError(f"no app id in result: {result}")
    logger.info("created app %s from %s", app_id, sender)
    return app_id


def opt_in(algod: AlgodClient, sender: str, sk: str, app_id: int) -> None:
    _send(algod, ApplicationOptInTxn(sender=sender, sp=algod.suggested_params(), index=app_id), sk)


def call(
    algod: AlgodClient,
    sender: str,
    sk: str,
    app_id: int,
    method: str,
    args: Sequence[bytes] = (),
    accounts: Optional[list[str]] = None,
) -> list[bytes]:
    """NoOp call to ``method``; returns the decoded logs."""
    txn = ApplicationNoOpTxn(
        sender=sender,
        sp=algod.suggested_params(),
        index=app_id,
        app_args=[method.encode(), *args],
        accounts=accounts,
        note=os.urandom(8),  # identical reads in one round would share a txid
    )
    result = _send(algod, txn, sk)
    return [base64.b64decode(entry) for entry in result.get("logs", [])]


# ---- Contract surface over LocalNet ----

def initialize(algod: AlgodClient, owner: str, sk: str, app_id: int, reward_system: str) -> None:
    call(algod, owner, sk, app_id, "initialize", [encoding.decode_address(owner), encoding.decode_address(reward_system)])
    logger.info("app %s initialized: owner=%s reward_system=%s", app_id, owner, reward_system)


def get_owner(algod: AlgodClient, sender: str, sk: str, app_id: int) -> str:
    (raw,) = call(algod, sender, sk, app_id, "get_owner")
    return encoding.encode_address(raw)


def get_reward_system(algod: AlgodClient, sender: str, sk: str, app_id: int) -> str:
    (raw,) = call(algod, sender, sk, app_id, "get_reward_system")
    return encoding.encode_address(raw)


def is_registered(algod: AlgodClient, sender: str, sk: str, app_id: int, address: str) -> bool:
    (raw,) = call(algod, sender, sk, app_id, "is_registered", accounts=[address])
    return int.from_bytes(raw, "big") == 1


def register_player(algod: AlgodClient, sender: str, sk: str, app_id: int) -> None:
    call(algod, sender, sk, app_id, "register_player")
