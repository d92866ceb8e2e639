"""Runtime configuration for the bridge.

Values come from the environment (``BLYNK_*`` variables or a ``.env`` file)
and may be overridden by an optional YAML file passed to the CLI.
"""
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.daylight import DEFAULT_LATITUDE, DEFAULT_LONGITUDE, DEFAULT_UTC_OFFSET
from .io.blynk import DEFAULT_BASE_URL


class BridgeSettings(BaseSettings):
    """Settings handed to the API at startup."""

    model_config = SettingsConfigDict(
        env_prefix="BLYNK_",
        env_file=".env",
        extra="ignore",
    )

    auth_token: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 10.0
    default_latitude: float = DEFAULT_LATITUDE
    default_longitude: float = DEFAULT_LONGITUDE
    utc_offset_hours: float = DEFAULT_UTC_OFFSET

    @property
    def default_coordinate(self) -> Tuple[float, float]:
        return (self.default_latitude, self.default_longitude)


def load_settings(config: Optional[str] = None, **overrides: Any) -> BridgeSettings:
    """Build settings from the environment plus an optional YAML file.

    Args:
        config: Path to a YAML file with a top-level ``blynk`` mapping
        **overrides: Explicit values that win over both sources

    Returns:
        Resolved settings
    """
    values: Dict[str, Any] = {}
    if config:
        cfg = yaml.safe_load(Path(config).read_text(encoding="utf-8")) or {}
        if not isinstance(cfg, dict):
            raise ValueError(f"Configuration file {config} must contain a mapping")
        values.update(cfg.get("blynk", {}) or {})
    values.update({k: v for k, v in overrides.items() if v is not None})
    return BridgeSettings(**values)
