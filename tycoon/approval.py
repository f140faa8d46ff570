# tycoon/approval.py
# Tycoon main game as an AVM application: initialize once, stub registration, reads.
from pyteal import *

# -------- Global keys (instance storage) --------
OWNER_KEY = Bytes("owner")        # bytes: 32-byte owner address
REWARD_SYSTEM_KEY = Bytes("rs")   # bytes: 32-byte reward system address
INITIALIZED_KEY = Bytes("init")   # uint (bool)

# -------- Local keys (persistent, per address) --------
REGISTERED_KEY = Bytes("r")       # uint (bool)

GLOBAL_SCHEMA = {"num_uints": 1, "num_byte_slices": 2}
LOCAL_SCHEMA = {"num_uints": 1, "num_byte_slices": 0}

METHODS = ("initialize", "register_player", "get_owner", "get_reward_system", "is_registered")


def approval_program() -> Expr:
    is_initialized = App.globalGet(INITIALIZED_KEY) == Int(1)

    on_create = Seq(
        App.globalPut(INITIALIZED_KEY, Int(0)),
        Approve(),
    )

    # ---- Methods ----

    # initialize(owner: address, reward_system: address)  [owner must sign]
    owner_arg = Txn.application_args[1]
    reward_system_arg = Txn.application_args[2]
    do_initialize = Seq(
        Assert(Txn.application_args.length() == Int(3), comment="initialize takes owner and reward_system"),
        Assert(Not(is_initialized), comment="AlreadyInitialized: Contract already initialized"),
        Assert(Len(owner_arg) == Int(32), comment="InvalidIdentity: owner"),
        Assert(Len(reward_system_arg) == Int(32), comment="InvalidIdentity: reward_system"),
        Assert(Txn.sender() == owner_arg, comment="AuthenticationFailed: owner must sign"),
        App.globalPut(OWNER_KEY, owner_arg),
        App.globalPut(REWARD_SYSTEM_KEY, reward_system_arg),
        App.globalPut(INITIALIZED_KEY, Int(1)),
        Log(Bytes("init")),
        Approve(),
    )

    # register_player()  stub: no checks, no writes
    do_register_player = Approve()

    # get_owner() -> logs 32-byte address
    owner = App.globalGetEx(Global.current_application_id(), OWNER_KEY)
    do_get_owner = Seq(
        owner,
        Assert(owner.hasValue(), comment="NotInitialized: Owner not set"),
        Log(owner.value()),
        Approve(),
    )

    # get_reward_system() -> logs 32-byte address
    reward_system = App.globalGetEx(Global.current_application_id(), REWARD_SYSTEM_KEY)
    do_get_reward_system = Seq(
        reward_system,
        Assert(reward_system.hasValue(), comment="NotInitialized: Reward system not set"),
        Log(reward_system.value()),
        Approve(),
    )

    # is_registered(accounts[1]) -> logs uint64 0/1; accounts never opted in read as 0
    flag = App.localGetEx(Txn.accounts[1], Global.current_application_id(), REGISTERED_KEY)
    do_is_registered = Seq(
        Assert(Txn.accounts.length() >= Int(1), comment="is_registered needs the address in accounts[1]"),
        flag,
        Log(Itob(If(flag.hasValue(), flag.value(), Int(0)))),
        Approve(),
    )

    method = Txn.application_args[0]
    on_noop = Cond(
        [method == Bytes("initialize"), do_initialize],
        [method == Bytes("register_player"), do_register_player],
        [method == Bytes("get_owner"), do_get_owner],
        [method == Bytes("get_reward_system"), do_get_reward_system],
        [method == Bytes("is_registered"), do_is_registered],
    )

    # Update/Delete/CloseOut are rejected: owner, reward system and
    # registration flags are never rewritten or dropped.
    program = Cond(
        [Txn.application_id() == Int(0), on_create],
        [Txn.on_completion() == OnComplete.OptIn, Approve()],
        [Txn.on_completion() == OnComplete.NoOp, on_noop],
        [Int(1), Reject()],
    )
    return program


def clear_state_program() -> Expr:
    return Approve()


if __name__ == "__main__":
    print(compileTeal(approval_program(), mode=Mode.Application, version=8))
