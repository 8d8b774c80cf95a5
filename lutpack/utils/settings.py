from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LutpackSettings(BaseSettings):
    """lutpack settings.

    Values are read from ``LUTPACK_*`` environment variables and an optional
    ``.env`` file. Command line options are passed as init arguments and take
    precedence over both.
    """

    model_config = SettingsConfigDict(env_prefix="LUTPACK_", case_sensitive=False, extra="ignore")

    max_inputs: int = 6
    cell_prefix: str = "GTP_LUT"
    excluded_cells: list[str] = ["GTP_LUT6CARRY"]
    max_jobs: int = 1
    output_dir: Path | None = None

    @field_validator("max_inputs", mode="after")
    @classmethod
    def positive_max_inputs(cls, value: int) -> int:
        """Reject a union limit that no pair could ever satisfy."""
        if value < 1:
            raise ValueError(f"max_inputs must be at least 1, got {value}")
        return value

    @field_validator("max_jobs", mode="after")
    @classmethod
    def valid_job_count(cls, value: int) -> int:
        """Accept a positive job count or -1 for one job per CPU."""
        if value == 0 or value < -1:
            raise ValueError(f"max_jobs must be positive or -1, got {value}")
        return value

    @field_validator("output_dir", mode="before")
    @classmethod
    def empty_output_dir(cls, value: str | Path | None) -> Path | None:
        """Treat an empty string as unset."""
        if value in (None, ""):
            return None
        return Path(value)


# Module-level singleton pattern for settings management
_context_instance: LutpackSettings | None = None


def init_context(dot_env: Path | None = None, **overrides: Any) -> LutpackSettings:
    """Initialize the global lutpack context with settings.

    Subsequent calls replace the existing context.

    Parameters
    ----------
    dot_env : Path | None
        Optional ``.env`` file to read ``LUTPACK_*`` values from.
    **overrides
        Explicit field values. Entries that are ``None`` are ignored so
        unset command line options fall back to the environment.

    Returns
    -------
    LutpackSettings
        The initialized settings instance
    """
    global _context_instance
    env_files: list[Path] = []
    if dot_env is not None:
        if dot_env.exists():
            env_files.append(dot_env)
        else:
            logger.warning(f".env file not found: {dot_env} this is ignored")

    values = {k: v for k, v in overrides.items() if v is not None}
    _context_instance = LutpackSettings(_env_file=tuple(env_files), **values)
    logger.debug("lutpack context initialized")
    return _context_instance


def get_context() -> LutpackSettings:
    """Get the global lutpack context.

    Returns
    -------
    LutpackSettings
        The current settings instance

    Raises
    ------
    RuntimeError
        If context has not been initialized with init_context()
    """
    if _context_instance is None:
        raise RuntimeError("lutpack context not initialized. Call init_context() first.")

    return _context_instance


def reset_context() -> None:
    """Reset the global context (primarily for testing)."""
    global _context_instance
    _context_instance = None
    logger.debug("lutpack context reset")
