"""
Runtime settings, read from the environment (and a .env file, if present).
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv


DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "https://play.battlesnake.com",
]

TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    # Appearance returned from GET /
    author: str = ""
    color: str = "#ff69b4"
    head: str = "default"
    tail: str = "default"
    player_variant: str = "greedy"
    # None means a fresh, unseeded random source
    random_seed: Optional[int] = None
    legacy_vertical_gate: bool = False
    cors_allowed_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))


def _get_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in TRUE_VALUES


def load_settings() -> Settings:
    """
    Build Settings from environment variables.

    Raises:
        ValueError: if PORT or RANDOM_SEED is set but is not an integer.
    """
    load_dotenv()

    # Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
    allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
    if allowed_origins_env:
        allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
    else:
        allowed_origins = list(DEFAULT_CORS_ORIGINS)

    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=_get_int("PORT", 8000),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        author=os.getenv("SNAKE_AUTHOR", ""),
        color=os.getenv("SNAKE_COLOR", "#ff69b4"),
        head=os.getenv("SNAKE_HEAD", "default"),
        tail=os.getenv("SNAKE_TAIL", "default"),
        player_variant=os.getenv("PLAYER_VARIANT", "greedy"),
        random_seed=_get_int("RANDOM_SEED", None),
        legacy_vertical_gate=_get_bool("LEGACY_VERTICAL_GATE", False),
        cors_allowed_origins=allowed_origins,
    )
