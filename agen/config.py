"""Environment-driven settings for the agen CLI and gateway."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment
load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class Settings:
    repo: str = "."
    strict: bool = False
    confine_root: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            repo=os.getenv("AGEN_REPO", "."),
            strict=_env_flag("AGEN_STRICT"),
            confine_root=_env_flag("AGEN_GATEWAY_CONFINE"),
            log_level=os.getenv("AGEN_LOG_LEVEL", "WARNING").upper(),
        )


@dataclass
class GatewayBind:
    """Where the gateway listens. Only read when the server is started."""

    host: str = "127.0.0.1"
    port: int = 8787

    @classmethod
    def from_env(cls) -> "GatewayBind":
        return cls(
            host=os.getenv("AGEN_GATEWAY_HOST", "127.0.0.1"),
            port=_env_int("AGEN_GATEWAY_PORT", 8787),
        )
