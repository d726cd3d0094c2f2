"""Server settings for running DocGenie.

Read from the environment (and .env) once at startup by ``docgenie.main``.
"""

import os
import sys
from enum import Enum

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()


class RunMode(str, Enum):
    """How the API and the browser UI are served."""

    INTEGRATED = "integrated"  # NiceGUI mounted on the FastAPI app
    SEPARATE = "separate"  # two processes, the UI calling the API over HTTP


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


class ServerSettings(BaseModel):
    """Process-level settings.

    Attributes:
        host: Interface both servers bind to.
        port: API port; in integrated mode the UI is served here too.
        ui_port: NiceGUI port in separate mode.
        log_level: Root logging level name.
        run_mode: Integrated or separate servers.
        reload: Restart the API process on code changes (development only).
        storage_secret: Secret signing NiceGUI's per-browser storage.
    """

    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "8000")), gt=0, lt=65536)
    ui_port: int = Field(
        default_factory=lambda: int(os.getenv("UI_PORT", "8080")), gt=0, lt=65536
    )
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    run_mode: RunMode = Field(
        default_factory=lambda: os.getenv("RUN_MODE", RunMode.INTEGRATED.value)
    )
    reload: bool = Field(default_factory=lambda: _env_flag("RELOAD"))
    storage_secret: str = Field(
        default_factory=lambda: os.getenv("NICEGUI_STORAGE_SECRET", "docgenie-secret")
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper() or "INFO"

    @field_validator("run_mode", mode="before")
    @classmethod
    def normalize_run_mode(cls, v: object) -> object:
        return v.strip().lower() if isinstance(v, str) else v

    def api_command(self) -> list[str]:
        """Command line that serves the API on its own."""
        command = [
            sys.executable,
            "-m",
            "uvicorn",
            "docgenie.api.app:app",
            "--host",
            self.host,
            "--port",
            str(self.port),
            "--log-level",
            self.log_level.lower(),
        ]
        if self.reload:
            command.append("--reload")
        return command

    def ui_command(self) -> list[str]:
        """Command line that serves the NiceGUI page on its own."""
        return [sys.executable, "-m", "docgenie.ui.chat_page"]


def get_settings() -> ServerSettings:
    return ServerSettings()
