"""NiceGUI single-page interface: auth forms, PDF upload and document chat."""

import logging
import os

import httpx
from nicegui import app, events, ui

from docgenie.account.api_key_store import ApiKeyStore
from docgenie.account.history import list_history
from docgenie.models.schemas import ChatMessage, HistoryEntry, Page, UploadedFile
from docgenie.parsing.pdf_parser import MAX_FILE_SIZE, PDFParseError, validate_upload
from docgenie.qa.service import FALLBACK_MESSAGE
from docgenie.qa.session import NO_API_KEY_MESSAGE, QUICK_QUESTIONS, ChatBusyError, ChatSession
from docgenie.settings import get_settings
from docgenie.ui.formatting import format_date, format_file_size, format_time, markdown_to_html
from docgenie.ui.state import AppState

logger = logging.getLogger(__name__)

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }
    body { background: #111827; color: #e5e7eb; min-height: 100vh; }

    .brand {
        background: linear-gradient(90deg, #22d3ee 0%, #a855f7 100%);
        -webkit-background-clip: text;
        color: transparent;
    }
    .panel {
        background: rgba(31, 41, 55, 0.6);
        border: 1px solid rgba(6, 182, 212, 0.3);
        border-radius: 12px;
    }
    .message-user {
        background: linear-gradient(135deg, #06b6d4 0%, #9333ea 100%);
        color: white;
        border-radius: 18px 18px 4px 18px;
    }
    .message-assistant {
        background: #1f2937;
        border: 1px solid rgba(34, 211, 238, 0.5);
        color: #cffafe;
        border-radius: 18px 18px 18px 4px;
    }
    .drop-zone { border: 2px dashed #4b5563; border-radius: 16px; }
    .accent-btn { background: linear-gradient(90deg, #06b6d4 0%, #9333ea 100%) !important; }
</style>
"""


async def ask_api(
    question: str,
    file: UploadedFile,
    api_key: str,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """POST a question to /chat/ask and return the answer text.

    Transport failures and unexpected response bodies become the fallback
    message.
    """
    async with httpx.AsyncClient(
        base_url=API_BASE_URL, timeout=180.0, transport=transport
    ) as client:
        try:
            response = await client.post(
                "/chat/ask",
                files={"file": (file.name, file.content, file.content_type)},
                data={"question": question},
                headers={"X-API-Key": api_key},
            )
            response.raise_for_status()
            return response.json()["answer"]["text"]
        except httpx.HTTPStatusError as e:
            logger.warning(f"Ask request rejected with HTTP {e.response.status_code}")
        except httpx.RequestError as e:
            logger.warning(f"Ask request failed: {e}")
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Unexpected ask response: {e!r}")
    return FALLBACK_MESSAGE


@ui.page("/")
def index_page() -> None:
    """Single-page app; the view router decides what is rendered."""
    ui.add_head_html(CUSTOM_CSS)
    state = AppState()
    key_store = ApiKeyStore(app.storage.user)

    # === Dialogs ===
    with ui.dialog() as settings_dialog, ui.card().classes("w-96 panel"):
        ui.label("Settings").classes("text-xl brand font-semibold")
        key_input = ui.input(
            "Google Studio API Key",
            placeholder="Enter your Google Studio API key",
            password=True,
            password_toggle_button=True,
        ).classes("w-full")
        ui.label("This key enables real-time AI responses for your PDF analysis.").classes(
            "text-xs text-gray-400"
        )
        with ui.column().classes("gap-0 text-xs text-gray-300"):
            ui.label("How to get your API key:").classes("text-sm text-cyan-300")
            for step in (
                "1. Visit Google AI Studio",
                "2. Create or select a project",
                "3. Enable the Gemini API",
                "4. Generate an API key",
                "5. Copy and paste it above",
            ):
                ui.label(step)

        def save_key() -> None:
            if not (key_input.value or "").strip():
                return
            key_store.save(key_input.value)
            settings_dialog.close()
            ui.notify("API key saved", type="positive")

        def cancel_settings() -> None:
            key_input.value = key_store.get()
            settings_dialog.close()

        with ui.row().classes("w-full justify-end"):
            ui.button("Cancel", icon="close", on_click=cancel_settings).props("flat")
            ui.button("Save", icon="save", on_click=save_key).classes("accent-btn")

    def open_settings() -> None:
        key_input.value = key_store.get()
        settings_dialog.open()

    with ui.dialog() as history_dialog, ui.card().classes("w-[36rem] panel"):
        ui.label("Document History").classes("text-2xl brand font-semibold")

        def select_history(entry: HistoryEntry) -> None:
            history_dialog.close()
            state.open_history_entry(entry)
            render.refresh()

        with ui.scroll_area().classes("h-80 w-full"):
            for entry in list_history():
                with ui.row().classes("w-full items-center justify-between py-2"):
                    with ui.column().classes("gap-0"):
                        ui.label(entry.name).classes("text-cyan-200")
                        ui.label(
                            f"{format_file_size(entry.size)} · {format_date(entry.upload_date)}"
                        ).classes("text-xs text-gray-400")
                    if entry.analysis_complete:
                        ui.button(
                            "Open", icon="visibility", on_click=lambda e=entry: select_history(e)
                        ).props("flat dense")
                    else:
                        ui.label("Processing").classes("text-xs text-yellow-400")

    # === Views ===
    def render_header() -> None:
        def go_home() -> None:
            state.start_over()
            render.refresh()

        def logout() -> None:
            state.logout()
            render.refresh()

        def show_login() -> None:
            state.go_to(Page.LOGIN)
            render.refresh()

        with ui.row().classes("w-full px-6 py-4 items-center justify-between border-b border-cyan-900"):
            with ui.row().classes("items-center gap-2 cursor-pointer").on("click", go_home):
                ui.icon("chat").classes("text-cyan-400 text-2xl")
                ui.label("DocGenie").classes("text-xl font-semibold brand")
            with ui.row().classes("gap-1"):
                if state.is_logged_in:
                    ui.button(icon="note_add", on_click=go_home).props("flat round").tooltip(
                        "New Document"
                    )
                    ui.button(icon="history", on_click=history_dialog.open).props(
                        "flat round"
                    ).tooltip("History")
                    ui.button(icon="logout", on_click=logout).props("flat round").tooltip("Logout")
                else:
                    ui.button(icon="person", on_click=show_login).props("flat round").tooltip(
                        "Login"
                    )

    def render_login() -> None:
        with ui.card().classes("w-96 mx-auto mt-16 panel"):
            ui.label("DocGenie").classes("text-3xl brand font-semibold self-center")
            email = ui.input("Email", placeholder="Enter your email").classes("w-full")
            password = ui.input(
                "Password",
                placeholder="Enter your password",
                password=True,
                password_toggle_button=True,
            ).classes("w-full")

            def submit() -> None:
                if not email.value or not password.value:
                    return
                state.login(email.value, password.value)
                render.refresh()

            def show_signup() -> None:
                state.go_to(Page.SIGNUP)
                render.refresh()

            ui.button("Login", on_click=submit).classes("w-full accent-btn")
            with ui.row().classes("self-center items-center gap-1"):
                ui.label("Don't have an account?").classes("text-sm text-gray-400")
                ui.button("Sign up", on_click=show_signup).props("flat dense")

    def render_signup() -> None:
        with ui.card().classes("w-96 mx-auto mt-12 panel"):
            ui.label("DocGenie").classes("text-3xl brand font-semibold self-center")
            error_label = ui.label().classes("text-sm text-red-400")
            error_label.set_visibility(False)
            full_name = ui.input("Full Name", placeholder="Enter your full name").classes("w-full")
            email = ui.input("Email", placeholder="Enter your email").classes("w-full")
            password = ui.input(
                "Password",
                placeholder="Create a password",
                password=True,
                password_toggle_button=True,
            ).classes("w-full")
            confirm = ui.input(
                "Confirm Password",
                placeholder="Confirm your password",
                password=True,
                password_toggle_button=True,
            ).classes("w-full")

            def submit() -> None:
                try:
                    state.signup(full_name.value, email.value, password.value, confirm.value)
                except ValueError as e:
                    error_label.set_text(str(e))
                    error_label.set_visibility(True)
                    return
                render.refresh()

            def show_login() -> None:
                state.go_to(Page.LOGIN)
                render.refresh()

            ui.button("Sign Up", on_click=submit).classes("w-full accent-btn")
            with ui.row().classes("self-center items-center gap-1"):
                ui.label("Already have an account?").classes("text-sm text-gray-400")
                ui.button("Login", on_click=show_login).props("flat dense")

    def render_landing() -> None:
        async def handle_upload(e: events.UploadEventArguments) -> None:
            content = await e.file.read()
            try:
                validate_upload(e.file.name, e.file.content_type, len(content))
            except PDFParseError as err:
                ui.notify(str(err), type="negative")
                return
            state.open_file(
                UploadedFile.from_bytes(e.file.name, content, content_type=e.file.content_type)
            )
            render.refresh()

        def handle_rejected() -> None:
            ui.notify("File size must be less than 10MB", type="negative")

        with ui.column().classes("w-full max-w-3xl mx-auto mt-12 gap-6 px-6"):
            ui.label("Smart PDF Analysis & Chat").classes("text-5xl font-semibold brand")
            ui.label(
                "Upload your PDF and let our AI assistant analyze it instantly. Ask questions "
                "and get intelligent answers about your document content in real-time."
            ).classes("text-gray-300")
            with ui.column().classes("w-full drop-zone p-8 items-center gap-3"):
                ui.icon("upload_file").classes("text-5xl text-cyan-400")
                ui.label("Drop your PDF here or choose a file (max 10MB)").classes("text-gray-300")
                ui.upload(
                    on_upload=handle_upload,
                    on_rejected=handle_rejected,
                    auto_upload=True,
                    max_file_size=MAX_FILE_SIZE,
                ).props('accept=".pdf,application/pdf" flat').classes("w-80")

    def render_chat(chat: ChatSession) -> None:
        messages_container: ui.column
        input_field: ui.input
        send_btn: ui.button

        def render_message(msg: ChatMessage) -> None:
            align = "justify-end" if msg.is_user else "justify-start"
            bubble = "message-user" if msg.is_user else "message-assistant"
            with ui.row().classes(f"w-full {align} gap-3 items-end"):
                if not msg.is_user:
                    ui.icon("smart_toy").classes("text-cyan-400 text-3xl")
                with ui.column().classes("max-w-[70%] gap-1"):
                    with ui.element("div").classes(f"px-4 py-3 {bubble}"):
                        if msg.is_user:
                            ui.label(msg.text).classes("text-sm whitespace-pre-wrap")
                        else:
                            ui.html(markdown_to_html(msg.text), sanitize=False).classes(
                                "text-sm leading-relaxed"
                            )
                    ui.label(format_time(msg.timestamp)).classes("text-[10px] text-gray-400")
                if msg.is_user:
                    ui.icon("person").classes("text-purple-400 text-3xl")

        def refresh_messages() -> None:
            messages_container.clear()
            with messages_container:
                for msg in chat.messages:
                    render_message(msg)
                if chat.is_loading:
                    with ui.row().classes("w-full justify-start gap-3 items-center"):
                        ui.spinner(color="cyan")
                        ui.label("Analyzing your question...").classes("text-cyan-200 italic")

        async def send_message() -> None:
            text = (input_field.value or "").strip()
            try:
                chat.begin_question(text)
            except (ValueError, ChatBusyError):
                return

            input_field.value = ""
            input_field.disable()
            send_btn.disable()
            refresh_messages()

            answer = FALLBACK_MESSAGE
            try:
                api_key = key_store.get()
                if api_key:
                    answer = await ask_api(text, chat.file, api_key)
                else:
                    answer = NO_API_KEY_MESSAGE
            finally:
                chat.finish_question(answer)
                input_field.enable()
                send_btn.enable()
                refresh_messages()

        def back() -> None:
            state.start_over()
            render.refresh()

        with ui.column().classes("w-full max-w-4xl mx-auto px-6 py-4 gap-4").style(
            "height: calc(100vh - 5rem)"
        ):
            with ui.row().classes("w-full items-center justify-between"):
                with ui.row().classes("items-center gap-3"):
                    ui.button("Back", icon="arrow_back", on_click=back).props("flat")
                    with ui.column().classes("gap-0"):
                        ui.label(chat.file.name).classes("text-cyan-200 truncate max-w-xs")
                        ui.label(f"{chat.file.size / 1024 / 1024:.2f} MB").classes(
                            "text-xs text-gray-400"
                        )
                ui.button("Settings", icon="settings", on_click=open_settings).props(
                    "flat color=yellow"
                )

            with ui.row().classes("w-full panel px-4 py-3 items-center gap-2"):
                ui.icon("circle").classes("text-green-400 text-xs")
                ui.label("PDF Analysis Complete - Ready for questions").classes("text-green-300")

            with ui.scroll_area().classes("flex-grow w-full"):
                messages_container = ui.column().classes("w-full gap-4")

            with ui.column().classes("w-full panel p-4 gap-3"):
                with ui.row().classes("w-full gap-3 items-center no-wrap"):
                    input_field = (
                        ui.input(placeholder="Ask questions about your PDF...")
                        .props("dense borderless")
                        .classes("flex-grow")
                        .on("keydown.enter", send_message)
                    )
                    send_btn = ui.button(icon="send", on_click=send_message).classes("accent-btn")
                with ui.row().classes("gap-2"):
                    for question in QUICK_QUESTIONS:
                        ui.button(
                            question,
                            on_click=lambda q=question: input_field.set_value(q),
                        ).props("flat dense size=sm")

            refresh_messages()

    @ui.refreshable
    def render() -> None:
        page = state.visible_page
        if state.shows_header:
            render_header()
        if page is Page.LOGIN:
            render_login()
        elif page is Page.SIGNUP:
            render_signup()
        elif page is Page.CHAT and state.chat is not None:
            render_chat(state.chat)
        else:
            render_landing()

    render()


def main() -> None:
    """Serve the page alone; questions go to the API at API_BASE_URL."""
    settings = get_settings()
    ui.run(
        title="DocGenie",
        host=settings.host,
        port=settings.ui_port,
        reload=False,
        storage_secret=settings.storage_secret,
    )


if __name__ == "__main__":
    main()
