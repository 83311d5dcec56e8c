import logging

import pytest

from malt import __main__ as cli
from malt import config


def test_eval_flag_prints_result(capsys):
    assert cli.main(["-e", "(+ 1 2)"]) == 0
    assert capsys.readouterr().out == "3\n"


def test_eval_flag_reports_errors(capsys):
    assert cli.main(["-e", "(/ 1 0)"]) == 1
    assert capsys.readouterr().out == "ERROR: division by zero\n"


def test_eval_flag_blank_input(capsys):
    assert cli.main(["-e", ""]) == 0
    assert capsys.readouterr().out == ""


def test_main_passes_prompt_to_repl(monkeypatch):
    seen = {}

    def fake_repl(prompt):
        seen["prompt"] = prompt
        return 0

    monkeypatch.setattr(cli, "repl", fake_repl)
    assert cli.main(["--prompt", "? "]) == 0
    assert seen["prompt"] == "? "


def test_prompt_from_environment(monkeypatch):
    monkeypatch.delenv("MALT_PROMPT", raising=False)
    assert config.get_prompt() == "user> "
    monkeypatch.setenv("MALT_PROMPT", "$ ")
    assert config.get_prompt() == "$ "


@pytest.mark.parametrize(
    "arg, env_value, expected",
    [
        (None, None, logging.WARNING),
        ("debug", None, logging.DEBUG),
        (None, "INFO", logging.INFO),
        ("error", "INFO", logging.ERROR),
        ("bogus", None, logging.WARNING),
    ]
)
def test_log_level(monkeypatch, arg, env_value, expected):
    if env_value is None:
        monkeypatch.delenv("MALT_LOG_LEVEL", raising=False)
    else:
        monkeypatch.setenv("MALT_LOG_LEVEL", env_value)
    assert config.get_log_level(arg) == expected


def test_server_address(monkeypatch):
    monkeypatch.delenv("MALT_SERVER_HOST", raising=False)
    monkeypatch.delenv("MALT_SERVER_PORT", raising=False)
    assert config.get_server_address() == ("127.0.0.1", 8765)
    monkeypatch.setenv("MALT_SERVER_HOST", "0.0.0.0")
    monkeypatch.setenv("MALT_SERVER_PORT", "9000")
    assert config.get_server_address() == ("0.0.0.0", 9000)
    monkeypatch.setenv("MALT_SERVER_PORT", "not-a-port")
    assert config.get_server_address() == ("0.0.0.0", 8765)
