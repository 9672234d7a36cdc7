# tests/conftest.py
"""
Shared test setup for project.

Every test starts from the unstamped literals and a clean environment,
so results never depend on how the package under test was built.
"""

import pytest

import build_info.loader as mod_loader
import build_info.runtime as mod_runtime
import build_info.stamp as mod_stamp

UNSTAMPED = {
    "BUILD_VERSION": "unknown",
    "BUILD_GIT_REVISION": "unknown",
    "BUILD_STATUS": "unknown",
    "BUILD_TAG": "unknown",
    "BUILD_HUB": "unknown",
    "BUILD_VENDOR": "oss",
}


@pytest.fixture(autouse=True)
def _unstamped(monkeypatch: pytest.MonkeyPatch) -> None:
    for name, value in UNSTAMPED.items():
        monkeypatch.setattr(mod_stamp, name, value)
        monkeypatch.delenv(mod_loader.stamp_env_key(name), raising=False)


@pytest.fixture(autouse=True)
def _runtime(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(mod_runtime.current_runtime, "log_level", "info")
    monkeypatch.setitem(mod_runtime.current_runtime, "use_color", False)
