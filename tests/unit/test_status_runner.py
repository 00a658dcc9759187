from __future__ import annotations

import json
import logging
import os
from io import StringIO

import pytest

from jarvis_status import status_runner
from jarvis_status.config.settings import StatusSettings
from jarvis_status.json_emitter import StatusRecord

EMPTY_OUTPUT = '{"text":"  0  0","tooltip":" NAMESPACES:\\n(none)\\n\\n AGENTS:\\n(none)\\n"}\n'


@pytest.fixture(autouse=True)
def logging_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(status_runner, "setup_logging", lambda *args, **kwargs: calls.append(args))
    return calls


@pytest.fixture
def buffer_stream():
    return StringIO()


def test_empty_upstream_output(fake_listing, buffer_stream):
    fake_listing("")

    assert status_runner.main(buffer_stream) == 0
    assert buffer_stream.getvalue() == EMPTY_OUTPUT


def test_upstream_reporting_nothing_matches_empty_output(fake_listing, buffer_stream):
    fake_listing("NAMESPACES:\n(none)\nAGENTS:\n(none)\n")

    status_runner.main(buffer_stream)

    assert buffer_stream.getvalue() == EMPTY_OUTPUT


@pytest.mark.parametrize(
    "install",
    [
        lambda fake_listing: fake_listing(popen_side_effect=FileNotFoundError("jarvisctl")),
        lambda fake_listing: fake_listing("NAMESPACES:\nns1\n", returncode=1),
    ],
    ids=["missing-binary", "non-zero-exit"],
)
def test_unavailable_upstream_looks_like_empty_environment(fake_listing, buffer_stream, install):
    install(fake_listing)

    assert status_runner.main(buffer_stream) == 0
    assert buffer_stream.getvalue() == EMPTY_OUTPUT


def test_populated_listing(fake_listing, buffer_stream):
    fake_listing(
        "NAMESPACES:\n"
        "alpha: 2 windows (created Mon Jan  1 10:00:00 2024)\n"
        "\n"
        "AGENTS:\n"
        '0: claude* (1 panes) [80x24] "quoted title" @1 (active)\n'
        "1: claude- (1 panes) [80x24] @2\n"
    )

    status_runner.main(buffer_stream)

    output = buffer_stream.getvalue()
    assert output.count("\n") == 1
    decoded = json.loads(output)
    assert list(decoded) == ["text", "tooltip"]
    assert decoded["text"] == "  1  2"
    assert decoded["tooltip"] == (
        " NAMESPACES:\n"
        "alpha: 2 windows (created Mon Jan  1 10:00:00 2024)\n"
        "\n"
        " AGENTS:\n"
        '0: claude* (1 panes) [80x24] "quoted title" @1 (active)\n'
        "1: claude- (1 panes) [80x24] @2\n"
    )


def test_identical_listing_gives_identical_output(fake_listing):
    listing = "AGENTS:\na1\nNAMESPACES:\nns1\nns2\n"
    outputs = []
    for _ in range(2):
        fake_listing(listing)
        stream = StringIO()
        status_runner.main(stream)
        outputs.append(stream.getvalue())

    assert outputs[0] == outputs[1]


def test_build_record_applies_icons():
    record = status_runner.build_record("NAMESPACES:\nns1\n", StatusSettings(namespace_icon="N", agent_icon="A"))

    assert record == StatusRecord(text="N  1A  0", tooltip="N NAMESPACES:\nns1\n\nA AGENTS:\n(none)\n")


def test_run_status_returns_emitted_record(fake_listing, buffer_stream):
    fake_listing("AGENTS:\na1\n")

    record = status_runner.run_status(StatusSettings(), buffer_stream)

    assert json.loads(buffer_stream.getvalue()) == {"text": record.text, "tooltip": record.tooltip}


def test_invalid_configuration_falls_back_to_defaults(monkeypatch, fake_listing, buffer_stream, caplog):
    monkeypatch.setenv("JARVIS_STATUS_TIMEOUT_SECONDS", "soon")
    fake = fake_listing("")

    with caplog.at_level(logging.WARNING, logger="jarvis_status.status_runner"):
        exit_code = status_runner.main(buffer_stream)

    assert exit_code == 0
    assert fake.args == ["jarvisctl", "list"]
    assert buffer_stream.getvalue() == EMPTY_OUTPUT
    assert "Invalid configuration" in caplog.text


def test_configured_command_is_used(monkeypatch, fake_listing, buffer_stream):
    monkeypatch.setenv("JARVIS_STATUS_COMMAND", "/usr/local/bin/jarvisctl")
    fake = fake_listing("")

    status_runner.main(buffer_stream)

    assert fake.args == ["/usr/local/bin/jarvisctl", "list"]


def test_logging_follows_settings(monkeypatch, fake_listing, buffer_stream, logging_calls, tmp_path):
    monkeypatch.setenv("JARVIS_STATUS_LOG_LEVEL", "debug")
    monkeypatch.setenv("JARVIS_STATUS_LOG_FILE", str(tmp_path / "status.log"))
    fake_listing("")

    status_runner.main(buffer_stream)

    assert logging_calls == [("DEBUG", tmp_path / "status.log")]


def test_icon_with_invalid_utf8_bytes_still_emits_json(monkeypatch, fake_listing, buffer_stream):
    monkeypatch.setitem(os.environb, b"JARVIS_STATUS_AGENT_ICON", b"\xff")
    fake_listing("AGENTS:\na1\n")

    assert status_runner.main(buffer_stream) == 0
    decoded = json.loads(buffer_stream.getvalue())
    assert decoded["text"] == "  0\ufffd  1"
    assert decoded["tooltip"].endswith("\ufffd AGENTS:\na1\n")
