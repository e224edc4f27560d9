from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Iterator, Mapping

import structlog
import yaml
from dotenv import load_dotenv

from .defaults import DEFAULT_CONFIG
from .schema import AppConfig, EnvOverrides

log = structlog.get_logger(__name__)

_TOP_LEVEL_KEYS = ("app_name", "environment")

# Flat key (CLI / ENV spelling) -> (section, key inside section)
_FLAT_MAP: dict[str, tuple[str, str]] = {
    "http_timeout_seconds": ("http", "timeout_seconds"),
    "http_user_agent": ("http", "user_agent"),
    "innertube_base_url": ("innertube", "base_url"),
    "innertube_api_key": ("innertube", "api_key"),
    "log_level": ("logging", "level"),
    "log_format": ("logging", "format"),
    "notifications_enabled": ("notifications", "enabled"),
}

_SECTIONS = frozenset(section for section, _ in _FLAT_MAP.values())


def _merge_into(target: dict[str, Any], layer: Mapping[str, Any]) -> None:
    """Overlay *layer* onto *target*; nested sections merge key by key."""
    for key, value in layer.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            _merge_into(current, value)
        else:
            target[key] = value


def _sectioned(layer: Mapping[str, Any]) -> dict[str, Any]:
    """Bring a layer written in flat and/or sectioned keys into sectioned form.

    Unknown keys are dropped so a stray YAML entry never reaches validation.
    """
    out: dict[str, Any] = {
        key: layer[key] for key in _TOP_LEVEL_KEYS if key in layer
    }
    for section in _SECTIONS:
        block = layer.get(section)
        if isinstance(block, Mapping):
            out[section] = dict(block)
    for flat_key, (section, inner_key) in _FLAT_MAP.items():
        if flat_key in layer:
            out.setdefault(section, {})[inner_key] = layer[flat_key]
    return out


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)
    parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    if parsed is None:
        return {}
    if not isinstance(parsed, Mapping):
        raise ValueError(f"Config YAML must be a mapping, got: {type(parsed)!r}")
    return dict(parsed)


def _layers(
    config_path: Path | None, cli_overrides: Mapping[str, Any]
) -> Iterator[tuple[str, Mapping[str, Any]]]:
    yield "defaults", deepcopy(DEFAULT_CONFIG)
    if config_path is not None:
        yield "yaml", _read_yaml(config_path)
    yield "env", EnvOverrides().to_update_dict()
    yield "cli", cli_overrides


def load_config(
    *,
    config_path: Path | None = None,
    dotenv_path: Path | None = None,
    cli_overrides: Mapping[str, Any] | None = None,
) -> AppConfig:
    """
    Build the effective configuration.

    Precedence: defaults < YAML file < env vars (incl. ``.env``) < CLI.
    Nothing is written to disk.
    """
    # .env values become plain env vars; real env vars keep priority.
    if dotenv_path is not None:
        if not dotenv_path.exists():
            raise FileNotFoundError(dotenv_path)
        load_dotenv(dotenv_path, override=False)

    merged: dict[str, Any] = {}
    for name, layer in _layers(config_path, cli_overrides or {}):
        sectioned = _sectioned(layer)
        if sectioned and name != "defaults":
            log.debug("config_layer_applied", layer=name, keys=sorted(sectioned))
        _merge_into(merged, sectioned)

    return AppConfig.model_validate(merged)
