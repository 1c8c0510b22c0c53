from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from scroll_led.errors import CommandNotFound

log = logging.getLogger(__name__)

# xset addresses the scroll-lock indicator as LED 3.
SCROLL_LOCK_LED = 3


def set_led(command: Sequence[str], token: str) -> int:
    """Run the display-settings utility and return its exit status."""

    cmd = [*command, token, str(SCROLL_LOCK_LED)]
    log.debug("Running %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, check=False)  # noqa: S603
    except FileNotFoundError as exc:
        raise CommandNotFound(f"Display settings command not found: {cmd[0]}") from exc
    if result.returncode != 0:
        log.warning("%s exited with status %d", cmd[0], result.returncode)
    return result.returncode
