"""
ctf_leaders.config — Engine configuration
=========================================

Settings are read, in increasing precedence, from:
    1. Model defaults
    2. A JSON config file (optional)
    3. Environment variables, including a .env file if present

Environment variables:
    LEADERS_ELECTION_GRACE_SECONDS   Age after which a tick ends an election
    LEADERS_TICK_INTERVAL_SECONDS    Replay clock tick cadence
    LEADERS_LOG_LEVEL                DEBUG, INFO, WARNING, ERROR or CRITICAL
    LEADERS_LOG_FILE                 JSON log file path ("" disables it)
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigurationError

logger = logging.getLogger("ctf_leaders.config")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENV_MAPPINGS = {
    "LEADERS_ELECTION_GRACE_SECONDS": "election_grace_seconds",
    "LEADERS_TICK_INTERVAL_SECONDS": "tick_interval_seconds",
    "LEADERS_LOG_LEVEL": "log_level",
    "LEADERS_LOG_FILE": "log_file",
}


class LeadersConfig(BaseModel):
    """Validated engine settings."""

    election_grace_seconds: float = Field(default=32.0, gt=0)
    tick_interval_seconds: float = Field(default=60.0, gt=0)
    log_level: str = "INFO"
    log_file: Optional[str] = "ctf_leaders.log"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("log_file")
    @classmethod
    def _empty_log_file_disables(cls, value: Optional[str]) -> Optional[str]:
        return value or None


def load_config(config_path: Optional[str] = None) -> LeadersConfig:
    """
    Load configuration from file and environment.

    Args:
        config_path: Optional path to a JSON config file

    Returns:
        The validated configuration

    Raises:
        ConfigurationError: If the file is unreadable or a value is invalid
    """
    load_dotenv()
    raw: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError("Config file not found", source=str(path))
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError("Could not read config file", source=str(path),
                                     problems=[str(e)]) from e
        if not isinstance(raw, dict):
            raise ConfigurationError("Config file must hold a JSON object", source=str(path))

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            raw[config_key] = os.environ[env_key]

    try:
        config = LeadersConfig.model_validate(raw)
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        ]
        raise ConfigurationError("Invalid configuration", source=config_path,
                                 problems=problems) from e

    logger.debug("Configuration loaded: %s", config.model_dump())
    return config
