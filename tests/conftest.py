"""Shared test fixtures and configuration.

Keeps log and config files inside tmp_path and provides scripted console
input so interactive code can run unattended.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console


def _drop_file_handlers() -> None:
    """Close and detach file handlers left on the application logger."""
    logger = logging.getLogger("pomotask_cli")
    for handler in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Redirect platformdirs lookups and reset cached singletons."""
    import pomotask_cli.config as config_mod
    import pomotask_cli.utils.logger as logger_mod

    logger_mod._logger = None
    _drop_file_handlers()
    config_mod._config_manager = None

    with patch("pomotask_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        with patch("pomotask_cli.config.user_config_dir", return_value=str(tmp_path / "config")):
            yield tmp_path

    _drop_file_handlers()
    logger_mod._logger = None
    config_mod._config_manager = None


@pytest.fixture()
def string_console() -> tuple[Console, StringIO]:
    """Return a Console that writes plain text to a StringIO buffer."""
    buf = StringIO()
    con = Console(file=buf, force_terminal=False, no_color=True, width=200)
    return con, buf


class ScriptedInput:
    """Line reader that replays canned answers, then raises EOFError."""

    def __init__(self, lines: Iterable[str]):
        self.lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture()
def scripted_input():
    """Factory for ScriptedInput readers."""
    return ScriptedInput
