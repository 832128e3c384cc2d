"""Runtime settings read from the environment (and a local ``.env`` if present)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict

from dotenv import find_dotenv, load_dotenv

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Server settings. ``from_env`` is the normal way to build one."""

    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: str = "*"

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> "Settings":
        """Build settings from environment variables.

        Args:
            dotenv: Load a ``.env`` file first. Variables already set in the
                environment win over the file.

        Raises:
            ValueError: If ``PORT`` is set but is not an integer.
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        raw_port = os.getenv("PORT", "").strip()
        try:
            port = int(raw_port) if raw_port else DEFAULT_PORT
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {raw_port!r}") from None

        return cls(
            port=port,
            host=os.getenv("HOST", DEFAULT_HOST).strip() or DEFAULT_HOST,
            debug=_env_flag("FLASK_DEBUG"),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
            cors_origins=os.getenv("CORS_ORIGINS", "*").strip() or "*",
        )

    def to_flask_config(self) -> Dict[str, Any]:
        return {
            "PORT": self.port,
            "HOST": self.host,
            "DEBUG": self.debug,
            "LOG_LEVEL": self.log_level,
            "CORS_ORIGINS": self.cors_origins,
        }
