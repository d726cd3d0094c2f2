"""Per-document chat state."""

from docgenie.models.schemas import ChatMessage, UploadedFile

NO_API_KEY_MESSAGE = (
    "Please add your Google Studio API key in Settings to enable real-time answers. "
    "Click the Settings button in the top-right corner to get started."
)

QUICK_QUESTIONS = (
    "Summarize this document",
    "What are the key points?",
    "Find important dates",
    "Extract main conclusions",
)


class ChatBusyError(Exception):
    """Raised when a question is asked while another one is in flight."""


class ChatSession:
    """Append-only conversation about one uploaded file.

    Only one question may be in flight at a time: ``begin_question``
    marks the session busy until ``finish_question`` records the answer.
    """

    def __init__(self, file: UploadedFile) -> None:
        self.file = file
        self._messages: list[ChatMessage] = []
        self.is_loading: bool = False
        self._append(
            f'I\'ve successfully analyzed your PDF "{file.name}". I can now answer '
            "questions about its content, summarize key points, or help you extract "
            "specific information. What would you like to know?",
            is_user=False,
        )

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    def _append(self, text: str, is_user: bool) -> ChatMessage:
        message = ChatMessage(text=text, is_user=is_user)
        self._messages.append(message)
        return message

    def begin_question(self, text: str) -> ChatMessage:
        """Record a user question and mark the session busy.

        Raises:
            ValueError: If the question is blank.
            ChatBusyError: If a previous question has not been answered yet.
        """
        if not text or not text.strip():
            raise ValueError("Question must not be empty")
        if self.is_loading:
            raise ChatBusyError("A question is already being answered")
        self.is_loading = True
        return self._append(text, is_user=True)

    def finish_question(self, answer: str) -> ChatMessage:
        """Record the assistant answer and accept questions again."""
        self.is_loading = False
        return self._append(answer, is_user=False)
