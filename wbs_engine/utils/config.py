"""Configuration management."""

import copy
import json
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from ..exceptions import ConfigError


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(str(config_path), "file not found")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            if path.suffix.lower() in ['.yaml', '.yml']:
                data = yaml.safe_load(f)
            elif path.suffix.lower() == '.json':
                data = json.load(f)
            else:
                raise ConfigError(str(config_path), f"unsupported format {path.suffix}")
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise ConfigError(str(config_path), f"parse error: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(str(config_path), "top level must be a mapping")
    return data


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'calendar': {
            'working_days': [0, 1, 2, 3, 4],  # Monday to Friday
        },
        'effort': {
            'hours_per_day': 7.5,
            'business_days_per_month': 20,
        },
        'delay': {
            'warning_window_days': 3,
        },
        'workload': {
            'normal_max': 3,
            'high_max': 6,
        },
        'sampling': {
            'item_count': 30,
            'project_count': 2,
            'assignee_count': 4,
        },
        'logging': {
            'level': 'WARNING',
            'structured': True,
        },
    }


def merge_config(base: Dict[str, Any], override: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Deep-merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def resolve_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Defaults, overlaid with the given file when there is one."""
    if not config_path:
        return get_default_config()
    return merge_config(get_default_config(), load_config(config_path))
