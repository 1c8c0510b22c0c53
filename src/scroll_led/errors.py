from __future__ import annotations


class LedError(RuntimeError):
    """Fatal error for a single run; ``main`` maps it to ``exit_code``."""

    exit_code = 1


class InvalidArgument(LedError):
    pass


class ConfigError(LedError, ValueError):
    pass


class DeviceNotFound(LedError):
    pass


class DeviceFileMissing(LedError):
    pass


class MalformedBrightness(LedError):
    pass


class PrivilegeRequired(LedError):
    pass


class UnsupportedSession(LedError):
    pass


class CommandNotFound(LedError):
    pass


class DeviceWriteFailed(LedError):
    pass
