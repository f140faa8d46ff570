"""Environment-driven settings. Defaults target AlgoKit LocalNet."""
import os
from dataclasses import dataclass
from pathlib import Path

REPO = Path(__file__).resolve().parents[1]

LOCALNET_TOKEN = "a" * 64


@dataclass(frozen=True)
class Settings:
    algod_address: str
    algod_token: str
    kmd_address: str
    kmd_token: str
    indexer_address: str
    teal_version: int
    artifacts_dir: Path


def load_settings() -> Settings:
    algod_token = os.getenv("ALGOD_LOCAL_TOKEN", LOCALNET_TOKEN)
    return Settings(
        algod_address=os.getenv("ALGOD_LOCAL", "http://localhost:4001"),
        algod_token=algod_token,
        kmd_address=os.getenv("KMD_LOCAL", "http://localhost:4002"),
        kmd_token=os.getenv("KMD_LOCAL_TOKEN", algod_token),  # usually same in sandbox
        indexer_address=os.getenv("INDEXER_LOCAL", "http://localhost:8980"),
        teal_version=int(os.getenv("TEAL_VERSION", "8")),
        artifacts_dir=Path(os.getenv("TYCOON_ARTIFACTS", str(REPO / "artifacts"))),
    )
