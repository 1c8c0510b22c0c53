from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PREFIX = "/sys/class/leds/input"
DEFAULT_SUFFIX = "::scrolllock/brightness"
DEFAULT_MAX_INDEX = 1000
DEFAULT_X11_COMMAND = ("xset",)


class SessionType(enum.Enum):
    X11 = "x11"
    TTY = "tty"
    INTEGRITY = "integrity"


class ToggleMode(enum.Enum):
    ENABLE = "enable"
    DISABLE = "disable"
    AUTO = "auto"


@dataclass(frozen=True)
class DevicePathTemplate:
    prefix: str = DEFAULT_PREFIX
    suffix: str = DEFAULT_SUFFIX
    max_index: int = DEFAULT_MAX_INDEX

    def candidate(self, index: int) -> Path:
        return Path(f"{self.prefix}{index}{self.suffix}")

    def override(self, prefix: str) -> Path:
        """Path used verbatim for an explicit ``-d`` prefix."""

        return Path(f"{prefix}{self.suffix}")


@dataclass(frozen=True)
class Config:
    toggle: ToggleMode
    session: SessionType
    template: DevicePathTemplate
    device_override: str | None = None
    dry_run: bool = False
    verbose: bool = False
    x11_command: tuple[str, ...] = DEFAULT_X11_COMMAND


@dataclass(frozen=True)
class AppliedArgument:
    on: bool

    @property
    def sysfs_value(self) -> str:
        return "1" if self.on else "0"

    @property
    def xset_token(self) -> str:
        return "led" if self.on else "-led"
