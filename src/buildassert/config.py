from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

from buildassert.verbose import setup_logger

logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class AssertionSettings(BaseModel):
    """Process-wide knobs for how assertions report.

    Attributes:
        qualified_type_names: Render types in failure messages as
            ``module.QualName`` instead of the bare qualname.
        verbose: Mirror the debug log to stderr.
        debug_file: When set, failures and narrowing steps are logged here.
        log_level: Level of the ``buildassert`` logger.
    """

    model_config = ConfigDict(extra="forbid")
    qualified_type_names: bool = True
    verbose: bool = False
    debug_file: Path | None = None
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v


_settings = AssertionSettings()


def _expand(value: Any) -> Any:
    """Expand ${VAR} and ${VAR:-default} in every string of a parsed YAML tree."""
    if isinstance(value, str):
        return expandvars(value, nounset=True)
    if isinstance(value, dict):
        return {k: _expand(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand(v) for v in value]
    return value


def load_settings(path: Path) -> AssertionSettings:
    """Load and validate settings from a YAML file."""
    config_dir = Path(path).parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")

    settings = AssertionSettings(**_expand(raw))

    # Resolve a relative debug file against the settings file location
    if settings.debug_file is not None and not settings.debug_file.is_absolute():
        settings.debug_file = (config_dir / settings.debug_file).resolve()

    return settings


def configure(settings: AssertionSettings) -> AssertionSettings:
    """Install settings for the whole process and set up logging to match."""
    global _settings
    _settings = settings

    package_logger = logging.getLogger("buildassert")
    _detach_handlers(package_logger)
    package_logger.setLevel(settings.log_level)
    if settings.debug_file is not None:
        setup_logger(
            settings.debug_file,
            verbose=settings.verbose,
            logger_name="buildassert",
            level=settings.log_level,
        )
    logger.debug(f"Configured buildassert: {settings.model_dump()}")
    return settings


def get_settings() -> AssertionSettings:
    return _settings


def reset_settings() -> None:
    """Restore default settings and detach handlers installed by configure()."""
    global _settings
    _settings = AssertionSettings()
    package_logger = logging.getLogger("buildassert")
    _detach_handlers(package_logger)
    package_logger.setLevel(logging.NOTSET)


def _detach_handlers(target: logging.Logger) -> None:
    for handler in list(target.handlers):
        target.removeHandler(handler)
        handler.close()
