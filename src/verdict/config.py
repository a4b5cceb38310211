"""Process-wide settings for failure rendering.

Settings are resolved once per process from ``VERDICT_*`` environment
variables, falling back to a ``.env`` file found from the working directory.
Real environment variables always win over the file.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)

ENV_PREFIX = "VERDICT_"


class Settings(BaseModel):
    """Rendering switches.

    Attributes:
    ----------
    line_info: bool
        Prefix failure headers with ``[file:line:column]`` when the call site
        location is known.
    repr_limit: int | None
        Truncate operand reprs longer than this many characters. ``None``
        keeps reprs intact.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    line_info: bool = True
    repr_limit: int | None = None

    @field_validator("repr_limit")
    @classmethod
    def _check_repr_limit(cls, v: int | None) -> int | None:
        if v is not None and v <= 3:
            raise ValueError("repr_limit must be greater than 3")
        return v

    @classmethod
    def from_env(cls, dotenv_path: str | Path | None = None) -> Settings:
        """Build settings from the environment and an optional ``.env`` file."""
        if dotenv_path is None:
            dotenv_path = find_dotenv(usecwd=True) or None

        environ: dict[str, str | None] = {}
        if dotenv_path is not None:
            environ.update(dotenv_values(dotenv_path))
            logger.debug(f"Read settings file {dotenv_path}")
        environ.update(os.environ)

        values: dict[str, str] = {}
        for name in cls.model_fields:
            raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is None or raw.strip() == "":
                continue
            values[name] = raw.strip()

        settings = cls.model_validate(values)
        logger.debug(f"Resolved settings: {settings!r}")
        return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the settings for this process, loading them on first use."""
    return Settings.from_env()


def reset_settings() -> None:
    """Forget the cached settings so the next lookup reloads them."""
    get_settings.cache_clear()
