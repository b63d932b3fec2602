from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from recency_tabs.runtime import telemetry


@pytest.fixture(autouse=True)
def restore_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("LOG_LEVEL", "LOG_FILE", "CONSOLE", "LOG_FORMAT"):
        monkeypatch.delenv(f"{telemetry.ENV_PREFIX}{name}", raising=False)
    telemetry.configure()
    yield
    monkeypatch.undo()
    telemetry.configure()


def test_configure_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RECENCY_TABS_LOG_LEVEL", "debug")

    settings = telemetry.configure()

    assert settings.level == "DEBUG"
    assert settings.console is False
    assert telemetry.get_logger().level == logging.DEBUG


def test_configure_overrides_win_over_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("RECENCY_TABS_LOG_LEVEL", "DEBUG")

    settings = telemetry.configure(level="error")

    assert settings.level == "ERROR"
    assert telemetry.get_logger().level == logging.ERROR


def test_configure_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(level="chatty")


def test_component_loggers_are_children_of_package_logger() -> None:
    package = telemetry.get_logger()
    child = telemetry.get_logger("recency_tabs.tabline")

    assert package.name == "recency_tabs"
    assert child.name == "recency_tabs.tabline"
    assert child.parent is package


def test_log_file_receives_events(tmp_path: Path) -> None:
    log_file = tmp_path / "tabs.log"
    telemetry.configure(log_file=str(log_file))

    telemetry.record_event("tabline.setup", data={"max_tabs": 4})

    assert "event::tabline.setup max_tabs=4" in log_file.read_text()


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("tabline.open", level="loud")


def test_span_collects_metadata_on_success(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="recency_tabs"):
        with telemetry.span(
            "recency::visit", component="recency", metadata={"handle": 3}
        ) as trace:
            trace.add_metadata("status", "ignored")

    (line,) = [record.getMessage() for record in caplog.records]
    assert line.startswith("span::done recency::visit handle=3 status=ignored")
    assert "component=recency" in line
    assert "elapsed_ms=" in line


def test_span_logs_failure_and_reraises(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="recency_tabs"):
        with pytest.raises(RuntimeError):
            with telemetry.span("tabline::open", component=True):
                raise RuntimeError("host gone")

    (record,) = caplog.records
    assert record.levelno == logging.ERROR
    assert "span::fail tabline::open" in record.getMessage()
    assert "component=tabline::open" in record.getMessage()
    assert "reason=host gone" in record.getMessage()
