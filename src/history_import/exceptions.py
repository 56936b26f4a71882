"""Custom exception hierarchy for history import."""

from __future__ import annotations


class HistoryImportError(Exception):
    """Base exception for all history_import errors."""


class HistoryFileError(HistoryImportError):
    """The export file is missing or is not a valid JSON export."""


class MalformedRecordError(HistoryImportError):
    """A raw record lacks a field the core cannot do without."""

    def __init__(self, message: str, record_kind: str, record_id: str | None = None) -> None:
        super().__init__(message)
        self.record_kind = record_kind
        self.record_id = record_id
