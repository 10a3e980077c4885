"""Runtime settings loaded from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env at import time so local overrides apply to every entrypoint.
load_dotenv(dotenv_path=Path(".") / ".env")


@dataclass
class Settings:
    """Settings shared by the HTTP helpers, the web UI, and the tool server.

    Each field reads its environment variable when the instance is created,
    so ``Settings()`` always reflects the current environment.
    """

    pokeapi_base_url: str = field(
        default_factory=lambda: os.getenv("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2")
    )
    # No timeout is required by PokeAPI; keep requests from hanging forever.
    pokeapi_timeout: float = field(default_factory=lambda: float(os.getenv("POKEAPI_TIMEOUT", "10")))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    host: str = field(default_factory=lambda: os.getenv("DEXPROFILE_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("DEXPROFILE_PORT", "7860")))


settings = Settings()
