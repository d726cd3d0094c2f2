"""DocGenie entry point.

``RUN_MODE=integrated`` (default) serves the API and the NiceGUI page from
one uvicorn process on ``PORT``. ``RUN_MODE=separate`` starts the API on
``PORT`` and the UI on ``UI_PORT`` as two child processes; point the UI at
the API with ``API_BASE_URL``.
"""

import logging
import subprocess
import sys

from docgenie.settings import RunMode, ServerSettings, get_settings

logger = logging.getLogger(__name__)


def configure_logging(settings: ServerSettings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def run_integrated(settings: ServerSettings) -> None:
    """Mount the NiceGUI page on the FastAPI app and serve both."""
    import uvicorn
    from nicegui import ui

    from docgenie.api.app import create_app
    from docgenie.ui.chat_page import index_page  # noqa: F401 - registers "/"

    app = create_app()
    ui.run_with(
        app,
        title="DocGenie",
        favicon="📄",
        storage_secret=settings.storage_secret,
    )

    logger.info(f"Serving DocGenie on http://{settings.host}:{settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


def run_separate(settings: ServerSettings) -> None:
    """Run the API and the UI as child processes until either one exits."""
    logger.info(f"API on port {settings.port}, UI on port {settings.ui_port}")
    api_proc = subprocess.Popen(settings.api_command())
    ui_proc = subprocess.Popen(settings.ui_command())
    procs = (api_proc, ui_proc)

    try:
        while all(proc.poll() is None for proc in procs):
            try:
                api_proc.wait(timeout=1)
            except subprocess.TimeoutExpired:
                continue
    except KeyboardInterrupt:
        logger.info("Shutting down servers...")
    finally:
        for proc in procs:
            if proc.poll() is None:
                proc.terminate()
        for proc in procs:
            proc.wait()


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    logger.info(f"Starting DocGenie in {settings.run_mode.value} mode")

    if settings.run_mode is RunMode.SEPARATE:
        run_separate(settings)
    else:
        run_integrated(settings)


if __name__ == "__main__":
    main()
