"""Static document history.

There is no storage layer behind the history dialog; it always lists the
same five documents.
"""

from datetime import datetime

from docgenie.models.schemas import HistoryEntry

_MB = 1024 * 1024

HISTORY_ENTRIES: tuple[HistoryEntry, ...] = (
    HistoryEntry(
        id="1",
        name="Annual Report 2023.pdf",
        size=int(2.4 * _MB),
        upload_date=datetime(2024, 12, 15),
        analysis_complete=True,
    ),
    HistoryEntry(
        id="2",
        name="Product Specifications.pdf",
        size=int(1.8 * _MB),
        upload_date=datetime(2024, 12, 12),
        analysis_complete=True,
    ),
    HistoryEntry(
        id="3",
        name="User Manual v2.1.pdf",
        size=int(5.6 * _MB),
        upload_date=datetime(2024, 12, 8),
        analysis_complete=True,
    ),
    HistoryEntry(
        id="4",
        name="Research Paper Draft.pdf",
        size=int(3.2 * _MB),
        upload_date=datetime(2024, 12, 5),
        analysis_complete=False,
    ),
    HistoryEntry(
        id="5",
        name="Meeting Notes Q4.pdf",
        size=int(0.8 * _MB),
        upload_date=datetime(2024, 12, 1),
        analysis_complete=True,
    ),
)


def list_history() -> list[HistoryEntry]:
    """Return history entries, most recent first."""
    return sorted(HISTORY_ENTRIES, key=lambda entry: entry.upload_date, reverse=True)


def get_history_entry(entry_id: str) -> HistoryEntry | None:
    return next((entry for entry in HISTORY_ENTRIES if entry.id == entry_id), None)
