# tests/test_utils_logs.py

import re

import pytest

import build_info
import build_info.runtime as mod_runtime
import build_info.utils_logs as mod_logs


ANSI_PATTERN = re.compile(r"\033\[[0-9;]*m")


def strip_ansi(s: str) -> str:
    """Remove ANSI escape sequences for color safety."""
    return ANSI_PATTERN.sub("", s)


@pytest.mark.parametrize(
    ("msg_level", "expected_stream"),
    [
        ("trace", "out"),
        ("debug", "out"),
        ("info", "out"),
        ("warning", "err"),
        ("error", "err"),
        ("critical", "err"),
    ],
)
def test_logger_routes_to_correct_stream(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    msg_level: str,
    expected_stream: str,
) -> None:
    # --- patch ---
    monkeypatch.setitem(mod_runtime.current_runtime, "log_level", "trace")

    # --- execute ---
    logger = mod_logs.get_logger()
    getattr(logger, msg_level)("msg:%s", msg_level)

    # --- verify ---
    captured = capsys.readouterr()
    out, err = strip_ansi(captured.out), strip_ansi(captured.err)
    if expected_stream == "out":
        assert f"msg:{msg_level}" in out
        assert not err
    else:
        assert f"msg:{msg_level}" in err
        assert not out


@pytest.mark.parametrize(
    ("runtime_level", "visible_levels"),
    [
        ("critical", {"critical"}),
        ("error", {"critical", "error"}),
        ("warning", {"critical", "error", "warning"}),
        ("info", {"critical", "error", "warning", "info"}),
        ("trace", {"critical", "error", "warning", "info", "debug", "trace"}),
        ("silent", set()),
    ],
)
def test_logger_respects_runtime_level(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    runtime_level: str,
    visible_levels: set[str],
) -> None:
    # --- patch ---
    monkeypatch.setitem(mod_runtime.current_runtime, "log_level", runtime_level)

    # --- execute ---
    logger = mod_logs.get_logger()
    for level in ("trace", "debug", "info", "warning", "error", "critical"):
        getattr(logger, level)("msg:%s", level)

    # --- verify ---
    captured = capsys.readouterr()
    combined = captured.out + captured.err
    for level in ("trace", "debug", "info", "warning", "error", "critical"):
        assert (f"msg:{level}" in combined) == (level in visible_levels)


def test_tag_prefixes_without_color(capsys: pytest.CaptureFixture[str]) -> None:
    # --- setup ---
    mod_logs.set_log_level("trace")

    # --- execute ---
    logger = mod_logs.get_logger()
    logger.trace("t")
    logger.warning("w")

    # --- verify ---
    captured = capsys.readouterr()
    assert captured.out == "[TRACE] t\n"
    assert captured.err == "⚠️  w\n"


def test_tag_prefix_is_colored_when_enabled(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    # --- patch ---
    monkeypatch.setitem(mod_runtime.current_runtime, "use_color", True)
    monkeypatch.setitem(mod_runtime.current_runtime, "log_level", "debug")

    # --- execute ---
    mod_logs.get_logger().debug("hello")

    # --- verify ---
    out = capsys.readouterr().out
    assert out.startswith(mod_logs.CYAN)
    assert strip_ansi(out) == "[DEBUG] hello\n"


def test_set_log_level_rejects_unknown_level() -> None:
    # --- execute and verify ---
    with pytest.raises(ValueError, match="Unknown log level"):
        mod_logs.set_log_level("verbose")


def test_temporary_log_level_restores_previous() -> None:
    # --- setup ---
    before = mod_runtime.current_runtime["log_level"]

    # --- execute ---
    with mod_logs.temporary_log_level("trace"):
        inside = mod_logs.get_log_level()

    # --- verify ---
    assert inside == "trace"
    assert mod_runtime.current_runtime["log_level"] == before


def test_get_log_level_falls_back_to_error(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    # --- patch ---
    monkeypatch.setitem(mod_runtime.current_runtime, "log_level", "chatty")

    # --- execute and verify ---
    assert mod_logs.get_log_level() == "error"
    capsys.readouterr()


def test_initial_log_level_prefers_program_env(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # --- patch ---
    monkeypatch.setenv("BUILD_INFO_LOG_LEVEL", "trace")
    monkeypatch.setenv("LOG_LEVEL", "error")

    # --- execute and verify ---
    assert mod_runtime._initial_log_level() == "trace"


def test_initial_log_level_default(monkeypatch: pytest.MonkeyPatch) -> None:
    # --- patch ---
    monkeypatch.delenv("BUILD_INFO_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    # --- execute and verify ---
    assert mod_runtime._initial_log_level() == "info"


def test_initial_log_level_is_case_insensitive(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # --- patch ---
    monkeypatch.setenv("BUILD_INFO_LOG_LEVEL", " WARNING ")

    # --- execute and verify ---
    assert mod_runtime._initial_log_level() == "warning"


def test_initial_log_level_skips_unknown_names(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # --- patch ---
    monkeypatch.setenv("BUILD_INFO_LOG_LEVEL", "chatty")
    monkeypatch.setenv("LOG_LEVEL", "error")

    # --- execute and verify ---
    assert mod_runtime._initial_log_level() == "error"


def test_initial_log_level_unknown_falls_back_to_default(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # --- patch ---
    monkeypatch.setenv("BUILD_INFO_LOG_LEVEL", "loud")
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    # --- execute and verify ---
    assert mod_runtime._initial_log_level() == "info"


def test_get_log_level_is_public_api() -> None:
    # --- execute and verify ---
    assert "get_log_level" in build_info.__all__
    assert build_info.get_log_level is mod_logs.get_log_level
