"""Runtime configuration read from the environment.

Values come from ``FENCELINE_*`` environment variables; a ``.env`` file in
the project root or ``backend/`` is loaded first when present.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

_backend_dir = Path(__file__).resolve().parent.parent
_project_root = _backend_dir.parent

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """fenceline settings."""

    strict_validation: bool = False
    pricing_file: Path | None = None
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.upper().strip()
        if level not in logging.getLevelNamesMapping():
            msg = f"Unknown log level '{v}'"
            raise ValueError(msg)
        return level


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Mapping to read instead of ``os.environ``. When omitted,
            ``.env`` files are loaded into the process environment first.
    """
    if environ is None:
        load_dotenv(_project_root / ".env")
        load_dotenv(_backend_dir / ".env")
        environ = dict(os.environ)

    pricing_file = environ.get("FENCELINE_PRICING_FILE", "").strip()
    origins = environ.get("FENCELINE_CORS_ORIGINS", "").strip()

    settings = Settings(
        strict_validation=(
            environ.get("FENCELINE_STRICT_VALIDATION", "").strip().lower() in _TRUE_VALUES
        ),
        pricing_file=Path(pricing_file) if pricing_file else None,
        log_level=environ.get("FENCELINE_LOG_LEVEL", "INFO"),
    )
    if origins:
        settings.cors_origins = [o.strip() for o in origins.split(",") if o.strip()]
    return settings


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for scripts and the API server.

    The level is applied even when the root logger already has handlers.
    """
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)
