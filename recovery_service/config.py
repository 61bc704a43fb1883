import logging
import os
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv

STRATEGIES = ("majority", "first")


@dataclass(frozen=True)
class Settings:
    strategy: str = "majority"
    strict_shares: bool = False
    log_level: str = "WARNING"


def _flag(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def _is_log_level(name: str) -> bool:
    return isinstance(logging.getLevelName(name), int)


def load_settings(env_file: str | None = None, overrides: dict[str, Any] | None = None) -> Settings:
    """Read settings from the environment; ``overrides`` win and are applied before validation."""
    load_dotenv(env_file, override=False)

    values: dict[str, Any] = {
        "strategy": os.getenv("RECOVERY_STRATEGY") or "majority",
        "strict_shares": _flag(os.getenv("RECOVERY_STRICT_SHARES")),
        "log_level": os.getenv("RECOVERY_LOG_LEVEL") or "WARNING",
    }
    values.update({k: v for k, v in (overrides or {}).items() if v is not None})

    strategy = str(values["strategy"]).strip().lower()
    if strategy not in STRATEGIES:
        raise ValueError(f"invalid strategy {strategy!r}, expected one of {', '.join(STRATEGIES)}")

    log_level = str(values["log_level"]).strip().upper()
    if not _is_log_level(log_level):
        raise ValueError(f"invalid log level {log_level!r}")

    return Settings(strategy=strategy, strict_shares=bool(values["strict_shares"]), log_level=log_level)
