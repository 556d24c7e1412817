"""Gateway: locate, read and layer YAML settings files."""

from __future__ import annotations

import copy
from pathlib import Path

import yaml

from doubt_solver.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS


def find_config_file(config_path: str | None = None) -> Path | None:
    """Return the explicit *config_path*, or the first default location that exists.

    An explicit path must exist. With no explicit path and no default file,
    returns None and the caller runs on built-in defaults.
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.is_file():
            raise FileNotFoundError(f'Config file not found: {path}')
        return path
    return next((p for p in DEFAULT_CONFIG_PATHS if p.is_file()), None)


def read_config_file(path: Path) -> dict:
    """Parse *path* as a YAML mapping. An empty file reads as no settings."""
    data = yaml.safe_load(path.read_text(encoding='utf-8'))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f'Config file {path} must hold a mapping at the top level, got {type(data).__name__}')
    return data


def layer_settings(*layers: dict) -> dict:
    """Stack settings mappings left to right into a new dict.

    Nested mappings merge key by key; any other value from a later layer
    replaces the earlier one. Inputs are never mutated.
    """
    merged: dict = {}
    for layer in layers:
        for key, value in layer.items():
            current = merged.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                merged[key] = layer_settings(current, value)
            else:
                merged[key] = copy.deepcopy(value)
    return merged


def load_layered_settings(defaults: dict, config_path: str | None = None, overrides: dict | None = None) -> dict:
    """Return *defaults* < config file < *overrides* as one raw mapping."""
    path = find_config_file(config_path)
    from_file = read_config_file(path) if path is not None else {}
    return layer_settings(defaults, from_file, overrides or {})
