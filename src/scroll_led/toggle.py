from __future__ import annotations

import logging
import os

from scroll_led.errors import PrivilegeRequired, UnsupportedSession
from scroll_led.model import AppliedArgument, Config, SessionType, ToggleMode
from scroll_led.system import xset
from scroll_led.system.led import ScrollLockLed, locate_device

log = logging.getLogger(__name__)


def choose_argument(mode: ToggleMode, led: ScrollLockLed) -> AppliedArgument:
    """Decide the target state; only ``auto`` touches the device file."""

    if mode is ToggleMode.ENABLE:
        return AppliedArgument(on=True)
    if mode is ToggleMode.DISABLE:
        return AppliedArgument(on=False)

    current = led.read_brightness()
    log.debug("Current brightness of %s is %d", led.brightness_file, current)
    # 0 (or below) counts as off, anything positive as on.
    return AppliedArgument(on=current < 1)


def apply(cfg: Config, led: ScrollLockLed, arg: AppliedArgument) -> int:
    session = cfg.session
    if session is SessionType.X11:
        return xset.set_led(cfg.x11_command, arg.xset_token)

    if session is SessionType.TTY:
        if os.geteuid() != 0:
            raise PrivilegeRequired("Writing the LED device in tty mode requires root")
        log.debug("Writing %s to %s", arg.sysfs_value, led.brightness_file)
        led.write_state(arg.sysfs_value)
        return 0

    if session is SessionType.INTEGRITY:
        print(
            f"Integrity check passed: would write {arg.sysfs_value} "
            f"(xset {arg.xset_token}) for {led.brightness_file}"
        )
        return 0

    raise UnsupportedSession(f"No action provided for session type {session!r}")


def run(cfg: Config) -> int:
    """Locate the device, decide the new state, then apply it.

    A dry run goes through the same lookup and, in auto mode, the same read, so a
    missing device or unreadable brightness still fails it; only the change is skipped.
    """

    led = ScrollLockLed(locate_device(cfg.template, cfg.device_override))
    arg = choose_argument(cfg.toggle, led)
    log.info(
        "Mode %s, session %s: turning LED %s",
        cfg.toggle.value,
        cfg.session.value,
        "on" if arg.on else "off",
    )
    return apply(cfg, led, arg)
