from __future__ import annotations

import json

from infrastructure.logging.console_logger import ConsoleLogger


def test_console_logger_emits_type_field(capsys) -> None:
    logger = ConsoleLogger()

    logger.info("interaction.start", usecase="SignIn")

    captured = capsys.readouterr()
    line = captured.out.strip()

    assert line.startswith("interaction.start ")
    payload = json.loads(line.replace("interaction.start ", "", 1))
    assert payload["type"] == "interaction.start"
    assert payload["level"] == "info"
    assert payload["usecase"] == "SignIn"


def test_console_logger_bind_merges_fields(capsys) -> None:
    logger = ConsoleLogger().bind(interaction_id="abc").bind(usecase="SignIn")

    logger.warning("interaction.not_authorized", user_type="anonymous")

    line = capsys.readouterr().out.strip()
    payload = json.loads(line.split(" ", 1)[1])
    assert payload["interaction_id"] == "abc"
    assert payload["usecase"] == "SignIn"
    assert payload["level"] == "warning"


def test_console_logger_serializes_unknown_values(capsys) -> None:
    class Opaque:
        def __str__(self) -> str:
            return "opaque"

    ConsoleLogger().error("interaction.failed", error=Opaque())

    payload = json.loads(capsys.readouterr().out.strip().split(" ", 1)[1])
    assert payload["error"] == "opaque"
