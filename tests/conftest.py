"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import os

import pytest

from jarvis_status.config import runtime
from jarvis_status.config.settings import get_status_settings


@pytest.fixture(autouse=True)
def isolated_configuration(monkeypatch, tmp_path):
    """Keep the developer's environment and config files out of every test."""
    for name in list(os.environ):
        if name.startswith("JARVIS_STATUS_"):
            monkeypatch.delenv(name, raising=False)

    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (tmp_path / "missing-env",))
    monkeypatch.setattr(runtime, "_JSON_ENV_CANDIDATES", (tmp_path / "missing-config.json",))
    runtime.reset_default_values()
    get_status_settings.cache_clear()
    yield
    runtime.reset_default_values()
    get_status_settings.cache_clear()


class FakePopen:
    """Stand-in for ``subprocess.Popen`` returning canned listing output."""

    def __init__(self, stdout: str = "", returncode: int = 0, communicate_side_effect: Exception | None = None) -> None:
        self._stdout = stdout
        self.returncode = returncode
        self._communicate_side_effect = communicate_side_effect
        self.args: list[str] | None = None
        self.kwargs: dict | None = None
        self.timeouts: list[float | None] = []
        self.killed = False

    def communicate(self, timeout: float | None = None) -> tuple[str, None]:
        self.timeouts.append(timeout)
        if self._communicate_side_effect is not None and not self.killed:
            raise self._communicate_side_effect
        return self._stdout, None

    def kill(self) -> None:
        self.killed = True


@pytest.fixture
def fake_listing(monkeypatch):
    """Patch ``subprocess.Popen`` so the listing command yields the given output."""
    import subprocess

    def _install(
        stdout: str = "",
        *,
        returncode: int = 0,
        popen_side_effect: Exception | None = None,
        communicate_side_effect: Exception | None = None,
    ) -> FakePopen:
        fake = FakePopen(stdout, returncode, communicate_side_effect)

        def fake_popen(args, **kwargs):
            if popen_side_effect is not None:
                raise popen_side_effect
            fake.args = list(args)
            fake.kwargs = kwargs
            return fake

        monkeypatch.setattr(subprocess, "Popen", fake_popen)
        return fake

    return _install
