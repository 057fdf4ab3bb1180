"""YAML config loader with environment override and runtime get/set."""

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from skyview.config.schema import AppConfig

logger = logging.getLogger(__name__)

API_KEY_ENV = "SKYVIEW_API_KEY"


def load_config(path: str | Path) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing file yields the defaults. ``SKYVIEW_API_KEY`` in the
    environment takes precedence over ``provider.api_key``.
    """
    path = Path(path)
    raw: dict[str, Any] = {}
    if path.exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    else:
        logger.debug("Config %s not found, using defaults", path)

    api_key = os.environ.get(API_KEY_ENV)
    if api_key:
        raw.setdefault("provider", {})
        raw["provider"]["api_key"] = api_key

    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'alerts.heat_threshold_c'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: AppConfig, dotted_key: str, value: Any) -> AppConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new AppConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target.get(part) if isinstance(target, dict) else None
    if not isinstance(target, dict) or parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    # Attempt type coercion for common cases
    old_value = target[parts[-1]]
    if isinstance(old_value, dict):
        raise KeyError(f"Config key is a section, not a value: {dotted_key}")
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return AppConfig(**data)


def save_config(config: AppConfig, path: str | Path) -> None:
    """Write config back to YAML.

    A key injected from the environment never reaches the file; whatever key
    the file held before is written back instead.
    """
    path = Path(path)
    data = json.loads(config.model_dump_json())
    env_key = os.environ.get(API_KEY_ENV)
    if env_key and data["provider"].get("api_key") == env_key:
        file_key = _file_api_key(path)
        if file_key is None:
            data["provider"].pop("api_key")
        else:
            data["provider"]["api_key"] = file_key
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(data, f, sort_keys=False)


def _file_api_key(path: Path) -> str | None:
    if not path.exists():
        return None
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    provider = raw.get("provider") if isinstance(raw, dict) else None
    if not isinstance(provider, dict):
        return None
    return provider.get("api_key")
