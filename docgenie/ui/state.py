"""View routing state for the single-page UI.

Holds which view is shown, the logged-in user and the chat session for
the current upload. Contains no rendering code so transitions can be
tested without a browser.
"""

from docgenie.account.auth import mock_login, mock_signup
from docgenie.models.schemas import HistoryEntry, Page, UploadedFile, User
from docgenie.qa.session import ChatSession


class AppState:
    """Current view, user and chat session of one browser tab."""

    def __init__(self) -> None:
        self.page: Page = Page.LANDING
        self.user: User | None = None
        self.chat: ChatSession | None = None

    @property
    def is_logged_in(self) -> bool:
        return self.user is not None

    @property
    def visible_page(self) -> Page:
        """The view actually rendered.

        Signed-out users only ever see the login or signup forms.
        """
        if not self.is_logged_in and self.page not in (Page.LOGIN, Page.SIGNUP):
            return Page.LOGIN
        if self.page is Page.CHAT and self.chat is None:
            return Page.LANDING
        return self.page

    @property
    def shows_header(self) -> bool:
        # A signed-out user redirected from another view still gets the header.
        return self.page not in (Page.LOGIN, Page.SIGNUP)

    def go_to(self, page: Page) -> None:
        self.page = page

    def login(self, email: str, password: str) -> User:
        self.user = mock_login(email, password)
        self.page = Page.LANDING
        return self.user

    def signup(self, full_name: str, email: str, password: str, confirm_password: str) -> User:
        self.user = mock_signup(full_name, email, password, confirm_password)
        self.page = Page.LANDING
        return self.user

    def logout(self) -> None:
        self.user = None
        self.chat = None
        self.page = Page.LOGIN

    def open_file(self, file: UploadedFile) -> ChatSession:
        """Start a chat about a file that already passed upload validation."""
        self.chat = ChatSession(file)
        self.page = Page.CHAT
        return self.chat

    def open_history_entry(self, entry: HistoryEntry) -> ChatSession:
        # History entries carry no bytes; questions about them fall through to
        # the pipeline's fallback message.
        placeholder = UploadedFile(name=entry.name, size=entry.size)
        return self.open_file(placeholder)

    def start_over(self) -> None:
        """Logo, New and Back all drop the current file and return to upload."""
        self.chat = None
        self.page = Page.LANDING
