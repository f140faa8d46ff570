# tycoon/build.py
# Compile the approval/clear programs to TEAL and write a hashed manifest.
import hashlib
import json
from pathlib import Path
from typing import Optional

from pyteal import Mode, compileTeal

from tycoon.approval import GLOBAL_SCHEMA, LOCAL_SCHEMA, METHODS, approval_program, clear_state_program
from tycoon.config import load_settings


def sha256_hex(s: str) -> str:
    return hashlib.sha256(s.encode("utf-8")).hexdigest()


def compile_programs(version: int) -> tuple[str, str]:
    approval_teal = compileTeal(approval_program(), mode=Mode.Application, version=version)
    clear_teal = compileTeal(clear_state_program(), mode=Mode.Application, version=version)
    return approval_teal, clear_teal


def build(artifacts: Optional[Path] = None, version: Optional[int] = None) -> dict:
    settings = load_settings()
    artifacts = Path(artifacts) if artifacts is not None else settings.artifacts_dir
    version = version if version is not None else settings.teal_version
    artifacts.mkdir(parents=True, exist_ok=True)

    approval_teal, clear_teal = compile_programs(version)
    (artifacts / "approval.teal").write_text(approval_teal, encoding="utf-8")
    (artifacts / "clear.teal").write_text(clear_teal, encoding="utf-8")

    manifest = {
        "contract": "Tycoon main game",
        "teal_version": version,
        "methods": list(METHODS),
        "global_schema": GLOBAL_SCHEMA,
        "local_schema": LOCAL_SCHEMA,
        "artifacts": {
            "approval": {"file": "approval.teal", "sha256": sha256_hex(approval_teal)},
            "clear": {"file": "clear.teal", "sha256": sha256_hex(clear_teal)},
        },
    }
    (artifacts / "contract.manifest.json").write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return manifest


def main():
    settings = load_settings()
    build(settings.artifacts_dir, settings.teal_version)
    print("Wrote artifacts to", settings.artifacts_dir)


if __name__ == "__main__":
    main()
