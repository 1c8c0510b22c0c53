from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from scroll_led.errors import ConfigError
from scroll_led.model import (
    DEFAULT_MAX_INDEX,
    DEFAULT_PREFIX,
    DEFAULT_SUFFIX,
    DEFAULT_X11_COMMAND,
    DevicePathTemplate,
)


def _section(cfg: dict[str, Any], key: str) -> dict[str, Any]:
    section = cfg.get(key, {})
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"{key} must be a mapping")
    return section


def load(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {p}: {exc.strerror}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Cannot decode config file {p}: {exc.reason}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {p}: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Top-level config must be a mapping")
    validate(data)
    normalize(data)
    return data


def validate(cfg: dict[str, Any]) -> None:
    device = _section(cfg, "device")
    for key in ("prefix", "suffix"):
        if key in device and not isinstance(device[key], str):
            raise ConfigError(f"device.{key} must be a string")

    if "max_index" in device:
        max_index = device["max_index"]
        if isinstance(max_index, bool) or not isinstance(max_index, int):
            raise ConfigError("device.max_index must be an integer")
        if max_index < 1:
            raise ConfigError("device.max_index must be >= 1")

    x11 = _section(cfg, "x11")
    if "command" in x11:
        command = x11["command"]
        if not isinstance(command, list) or not command:
            raise ConfigError("x11.command must be a non-empty list")
        if not all(isinstance(x, str) and x.strip() for x in command):
            raise ConfigError("x11.command entries must be non-empty strings")


def normalize(cfg: dict[str, Any]) -> None:
    """Fill in defaults so later stages can index the mapping directly."""

    device = cfg.setdefault("device", {}) or {}
    cfg["device"] = device
    device.setdefault("prefix", DEFAULT_PREFIX)
    device.setdefault("suffix", DEFAULT_SUFFIX)
    device.setdefault("max_index", DEFAULT_MAX_INDEX)

    x11 = cfg.setdefault("x11", {}) or {}
    cfg["x11"] = x11
    x11["command"] = [str(x).strip() for x in x11.get("command", DEFAULT_X11_COMMAND)]


def defaults() -> dict[str, Any]:
    cfg: dict[str, Any] = {}
    normalize(cfg)
    return cfg


def template_from(cfg: dict[str, Any]) -> DevicePathTemplate:
    device = cfg["device"]
    return DevicePathTemplate(
        prefix=str(device["prefix"]),
        suffix=str(device["suffix"]),
        max_index=int(device["max_index"]),
    )
