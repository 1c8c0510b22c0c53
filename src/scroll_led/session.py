from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from scroll_led.model import SessionType

log = logging.getLogger(__name__)

SESSION_ENV = "XDG_SESSION_TYPE"


def detect_session(environ: Mapping[str, str] | None = None) -> SessionType:
    """Return X11 only when the environment reports a graphical X11 session."""

    env = os.environ if environ is None else environ
    raw = env.get(SESSION_ENV)
    if raw == SessionType.X11.value:
        log.debug("%s=%s, using x11", SESSION_ENV, raw)
        return SessionType.X11
    log.debug("%s=%s, falling back to tty", SESSION_ENV, raw)
    return SessionType.TTY
