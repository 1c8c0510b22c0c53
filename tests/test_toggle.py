from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from scroll_led import toggle
from scroll_led.errors import CommandNotFound, PrivilegeRequired, UnsupportedSession
from scroll_led.model import (
    AppliedArgument,
    Config,
    DevicePathTemplate,
    SessionType,
    ToggleMode,
)
from scroll_led.system import xset
from scroll_led.system.led import ScrollLockLed


def _led(tmp_path: Path, value: str = "0\n") -> ScrollLockLed:
    p = tmp_path / "brightness"
    p.write_text(value, encoding="utf-8")
    return ScrollLockLed(p)


def _config(session: SessionType, leds: Path | None = None, **kw) -> Config:
    prefix = str(leds / "input") if leds else "/nonexistent/input"
    return Config(
        toggle=kw.pop("toggle", ToggleMode.AUTO),
        session=session,
        template=DevicePathTemplate(prefix=prefix, max_index=20),
        **kw,
    )


class _Runs:
    def __init__(self, returncode: int = 0) -> None:
        self.calls: list[list[str]] = []
        self.returncode = returncode

    def __call__(self, cmd, check=False):
        self.calls.append(list(cmd))
        return subprocess.CompletedProcess(cmd, self.returncode)


def test_applied_argument_tokens() -> None:
    assert (AppliedArgument(True).sysfs_value, AppliedArgument(True).xset_token) == ("1", "led")
    assert (AppliedArgument(False).sysfs_value, AppliedArgument(False).xset_token) == ("0", "-led")


@pytest.mark.parametrize(("raw", "on"), [("0\n", True), ("1\n", False), ("255\n", False)])
def test_auto_inverts_current_state(tmp_path: Path, raw: str, on: bool) -> None:
    assert toggle.choose_argument(ToggleMode.AUTO, _led(tmp_path, raw)).on is on


def test_enable_disable_do_not_read(tmp_path: Path) -> None:
    missing = ScrollLockLed(tmp_path / "absent")
    assert toggle.choose_argument(ToggleMode.ENABLE, missing).on is True
    assert toggle.choose_argument(ToggleMode.DISABLE, missing).on is False


def test_apply_x11_runs_xset(tmp_path: Path, monkeypatch) -> None:
    runs = _Runs()
    monkeypatch.setattr(xset.subprocess, "run", runs)
    led = _led(tmp_path, "1\n")

    rc = toggle.apply(_config(SessionType.X11), led, AppliedArgument(on=False))

    assert rc == 0
    assert runs.calls == [["xset", "-led", "3"]]
    assert led.brightness_file.read_text(encoding="utf-8") == "1\n"


def test_apply_x11_propagates_exit_status(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(xset.subprocess, "run", _Runs(returncode=7))
    rc = toggle.apply(_config(SessionType.X11), _led(tmp_path), AppliedArgument(on=True))
    assert rc == 7


def test_apply_x11_missing_command(tmp_path: Path, monkeypatch) -> None:
    def missing(cmd, check=False):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(xset.subprocess, "run", missing)
    with pytest.raises(CommandNotFound):
        toggle.apply(_config(SessionType.X11), _led(tmp_path), AppliedArgument(on=True))


def test_apply_tty_requires_root(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(toggle.os, "geteuid", lambda: 1000)
    led = _led(tmp_path, "0\n")
    with pytest.raises(PrivilegeRequired):
        toggle.apply(_config(SessionType.TTY), led, AppliedArgument(on=True))
    assert led.brightness_file.read_text(encoding="utf-8") == "0\n"


def test_apply_tty_writes_as_root(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(toggle.os, "geteuid", lambda: 0)
    led = _led(tmp_path, "0\n")
    assert toggle.apply(_config(SessionType.TTY), led, AppliedArgument(on=True)) == 0
    assert led.brightness_file.read_text(encoding="utf-8") == "1\n"


def test_apply_integrity_has_no_side_effects(tmp_path: Path, monkeypatch, capsys) -> None:
    runs = _Runs()
    monkeypatch.setattr(xset.subprocess, "run", runs)
    monkeypatch.setattr(toggle.os, "geteuid", lambda: 1000)
    led = _led(tmp_path, "0\n")

    rc = toggle.apply(_config(SessionType.INTEGRITY), led, AppliedArgument(on=True))

    assert rc == 0
    assert runs.calls == []
    assert led.brightness_file.read_text(encoding="utf-8") == "0\n"
    assert "Integrity check passed" in capsys.readouterr().out


def test_apply_unknown_session(tmp_path: Path) -> None:
    cfg = _config("wayland")  # type: ignore[arg-type]
    with pytest.raises(UnsupportedSession, match="No action provided"):
        toggle.apply(cfg, _led(tmp_path), AppliedArgument(on=True))


def test_run_end_to_end_tty(leds: Path, device, monkeypatch) -> None:
    monkeypatch.setattr(toggle.os, "geteuid", lambda: 0)
    path = device(leds, 4, "1\n")
    assert toggle.run(_config(SessionType.TTY, leds)) == 0
    assert path.read_text(encoding="utf-8") == "0\n"
