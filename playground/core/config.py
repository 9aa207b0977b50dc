from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

# playground/core/config.py -> parents[2] = repo root
PROJECT_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    env: str
    log_level: str
    actors_dir: Path
    host: str = "0.0.0.0"
    port: int = 8001


def load_settings() -> Settings:
    env = (os.getenv("PLAYGROUND_ENV") or "dev").strip().lower()
    log_level = (os.getenv("PLAYGROUND_LOG_LEVEL") or "INFO").strip().upper()
    actors_raw = (os.getenv("PLAYGROUND_ACTORS_DIR") or "").strip()
    actors_dir = Path(actors_raw) if actors_raw else PROJECT_ROOT / "templates" / "actors"
    host = (os.getenv("PLAYGROUND_HOST") or "0.0.0.0").strip()
    port = int((os.getenv("PLAYGROUND_PORT") or "8001").strip())
    return Settings(env=env, log_level=log_level, actors_dir=actors_dir, host=host, port=port)


def apply_log_level(settings: Settings) -> None:
    # Handlers belong to the server process; only the level is ours.
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        logging.getLogger("playground").warning("Unknown PLAYGROUND_LOG_LEVEL %r; using INFO", settings.log_level)
        level = logging.INFO
    logging.getLogger("playground").setLevel(level)
