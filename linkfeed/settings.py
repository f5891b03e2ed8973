from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    logger.warning(f"Invalid {name} value: {raw}. Expected true/false. Using default: {default}")
    return default


def _parse_int(
    env: Mapping[str, str],
    name: str,
    default: int,
    minimum: int,
    maximum: int,
) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except (ValueError, TypeError) as e:
        logger.warning(f"Invalid {name} value: {raw}. Error: {e}. Using default: {default}")
        return default
    if value < minimum or value > maximum:
        logger.warning(
            f"{name} value {value} is outside {minimum}..{maximum}. Using default: {default}"
        )
        return default
    return value


def _parse_origins(env: Mapping[str, str]) -> List[str]:
    raw = env.get("CORS_ORIGINS", "*")
    origins = [part.strip() for part in raw.split(",") if part.strip()]
    return origins or ["*"]


@dataclass
class Settings:
    log_level: int = 2
    log_file: Optional[str] = None
    decorate_descriptions: bool = False
    graphiql: bool = True
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    host: str = "0.0.0.0"
    port: int = 4000

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read settings from the environment, falling back to defaults on bad values."""
        if env is None:
            env = os.environ
        return cls(
            log_level=_parse_int(env, "LOG_LEVEL", 2, 0, 2),
            log_file=env.get("LOG_FILE") or None,
            decorate_descriptions=_parse_bool(env, "DECORATE_DESCRIPTIONS", False),
            graphiql=_parse_bool(env, "GRAPHIQL", True),
            cors_origins=_parse_origins(env),
            host=env.get("HOST") or "0.0.0.0",
            port=_parse_int(env, "PORT", 4000, 1, 65535),
        )
