from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Mapping, Sequence
from typing import NoReturn

from scroll_led import __version__, config
from scroll_led.errors import LedError
from scroll_led.model import Config, SessionType, ToggleMode
from scroll_led.session import detect_session
from scroll_led.toggle import run

log = logging.getLogger(__name__)

LOG_FORMAT = "scroll-led: %(levelname)s: %(message)s"


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    ap = _ArgumentParser(
        prog="scroll-led",
        description="Toggle the keyboard scroll-lock LED.",
    )
    ap.add_argument("--version", action="version", version=__version__)
    ap.add_argument(
        "-t",
        "--toggle",
        choices=[m.value for m in ToggleMode],
        default=ToggleMode.AUTO.value,
        help="desired LED state; auto inverts the current one (default: auto)",
    )
    ap.add_argument(
        "-s",
        "--session",
        choices=[SessionType.X11.value, SessionType.TTY.value],
        help="how to apply the change (default: detected from XDG_SESSION_TYPE)",
    )
    ap.add_argument(
        "-d",
        "--device",
        metavar="PREFIX",
        help="device path prefix; skips the search and appends the brightness suffix",
    )
    ap.add_argument(
        "-i",
        "--integrity",
        action="store_true",
        help="dry run: decide everything, change nothing (implies -v)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="print diagnostics")
    ap.add_argument("-c", "--config", help="optional YAML file with device and x11 defaults")
    return ap


def setup_logging(verbose: bool) -> None:
    logger = logging.getLogger("scroll_led")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def build_config(args: argparse.Namespace, environ: Mapping[str, str] | None = None) -> Config:
    file_cfg = config.load(args.config) if args.config else config.defaults()

    if args.integrity:
        session = SessionType.INTEGRITY
    elif args.session is not None:
        session = SessionType(args.session)
    else:
        session = detect_session(environ)

    return Config(
        toggle=ToggleMode(args.toggle),
        session=session,
        template=config.template_from(file_cfg),
        device_override=args.device,
        dry_run=args.integrity,
        verbose=args.verbose or args.integrity,
        x11_command=tuple(file_cfg["x11"]["command"]),
    )


def main(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(args.verbose or args.integrity)

    try:
        cfg = build_config(args, environ)
        return run(cfg)
    except LedError as exc:
        log.error("%s", exc)
        return exc.exit_code


if __name__ == "__main__":
    sys.exit(main())
