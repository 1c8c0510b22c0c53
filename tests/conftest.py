from __future__ import annotations

from pathlib import Path

import pytest


def make_device(root: Path, index: int, value: str = "0\n") -> Path:
    """Create a fake ``<root>/input<index>::scrolllock/brightness`` file."""

    path = root / f"input{index}::scrolllock" / "brightness"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(value, encoding="utf-8")
    return path


@pytest.fixture
def device():
    return make_device


@pytest.fixture
def leds(tmp_path: Path) -> Path:
    root = tmp_path / "leds"
    root.mkdir()
    return root


@pytest.fixture
def config_file(tmp_path: Path, leds: Path) -> Path:
    p = tmp_path / "scroll-led.yaml"
    p.write_text(
        f"device:\n  prefix: {leds / 'input'}\n  max_index: 20\nx11:\n  command: [xset]\n",
        encoding="utf-8",
    )
    return p
