from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from scroll_led.errors import (
    DeviceFileMissing,
    DeviceNotFound,
    DeviceWriteFailed,
    MalformedBrightness,
)
from scroll_led.model import DevicePathTemplate

log = logging.getLogger(__name__)


def _usable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.R_OK)


def locate_device(template: DevicePathTemplate, override: str | None = None) -> Path:
    """Resolve the scroll-lock brightness file.

    An explicit override prefix skips the search; otherwise indices
    1..max_index are probed in ascending order and the first usable file wins.
    """

    if override is not None:
        path = template.override(override)
        if not path.is_file():
            raise DeviceFileMissing(f"Device file does not exist: {path}")
        log.debug("Using device override %s", path)
        return path

    for index in range(1, template.max_index + 1):
        path = template.candidate(index)
        if _usable(path):
            log.debug("Found device at index %d: %s", index, path)
            return path

    raise DeviceNotFound(
        f"No suitable device found ({template.prefix}1..{template.max_index}{template.suffix})"
    )


@dataclass(frozen=True)
class ScrollLockLed:
    brightness_file: Path

    def read_brightness(self) -> int:
        try:
            raw = self.brightness_file.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise DeviceFileMissing(f"Device file does not exist: {self.brightness_file}") from exc
        except OSError as exc:
            raise DeviceFileMissing(f"Cannot read {self.brightness_file}: {exc.strerror}") from exc
        except UnicodeDecodeError as exc:
            raise MalformedBrightness(
                f"Brightness in {self.brightness_file} is not text: {exc.reason}"
            ) from exc

        try:
            return int(raw.strip())
        except ValueError as exc:
            raise MalformedBrightness(
                f"Unexpected brightness value in {self.brightness_file}: {raw.strip()!r}"
            ) from exc

    def write_state(self, value: str) -> None:
        try:
            self.brightness_file.write_text(f"{value}\n", encoding="utf-8")
        except OSError as exc:
            raise DeviceWriteFailed(
                f"Failed to write {self.brightness_file}: {exc.strerror}"
            ) from exc
