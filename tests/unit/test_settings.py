"""Unit tests for server settings and the commands used in separate mode."""

from unittest.mock import patch

import pytest
import pytest_check as check
from pydantic import ValidationError

from docgenie.settings import RunMode, ServerSettings


class TestServerSettings:
    def test_defaults(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            settings = ServerSettings()

        check.equal(settings.host, "0.0.0.0")
        check.equal(settings.port, 8000)
        check.equal(settings.ui_port, 8080)
        check.equal(settings.log_level, "INFO")
        check.equal(settings.run_mode, RunMode.INTEGRATED)
        check.is_false(settings.reload)

    def test_reads_environment(self) -> None:
        env = {
            "PORT": "9000",
            "UI_PORT": "9001",
            "RUN_MODE": " Separate ",
            "RELOAD": "true",
            "LOG_LEVEL": "debug",
        }
        with patch.dict("os.environ", env, clear=True):
            settings = ServerSettings()

        check.equal(settings.port, 9000)
        check.equal(settings.ui_port, 9001)
        check.equal(settings.run_mode, RunMode.SEPARATE)
        check.is_true(settings.reload)
        check.equal(settings.log_level, "DEBUG")

    def test_rejects_unknown_run_mode(self) -> None:
        with pytest.raises(ValidationError):
            ServerSettings(run_mode="clustered")

    def test_rejects_out_of_range_port(self) -> None:
        with pytest.raises(ValidationError):
            ServerSettings(port=70000)


class TestApiCommand:
    def test_uses_configured_port_without_reload(self) -> None:
        settings = ServerSettings(host="127.0.0.1", port=9000, reload=False)

        command = settings.api_command()

        check.is_in("docgenie.api.app:app", command)
        check.equal(command[command.index("--port") + 1], "9000")
        check.equal(command[command.index("--host") + 1], "127.0.0.1")
        check.is_not_in("--reload", command)

    def test_reload_only_when_enabled(self) -> None:
        settings = ServerSettings(reload=True)

        assert "--reload" in settings.api_command()

    def test_ui_command_runs_page_module(self) -> None:
        assert ServerSettings().ui_command()[-1] == "docgenie.ui.chat_page"
