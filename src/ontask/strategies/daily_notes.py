"""Daily notes strategy - checkboxes from date-named notes."""

from ontask.core.dates import TodayMatcher
from ontask.core.documents import Document
from ontask.ports.daily_notes import DailyNotesSettings
from ontask.ports.document_store import DocumentStore

from .base import DocumentScanStrategy

SOURCE_NAME = "Daily Notes"


class DailyNotesStrategy(DocumentScanStrategy):
    """Scans the daily notes folder when the daily notes feature is enabled."""

    name = "daily-notes"
    source_name = SOURCE_NAME

    def __init__(
        self,
        store: DocumentStore,
        matcher: TodayMatcher,
        settings: DailyNotesSettings,
    ):
        super().__init__(store, matcher)
        self.settings = settings

    def is_available(self) -> bool:
        # Checked on every call: the feature can be switched on or off at runtime
        return self.settings.is_enabled()

    def get_configuration(self) -> dict:
        return {"folder": self.settings.folder()}

    def candidate_documents(self) -> list[Document]:
        folder = self.settings.folder()
        if not folder or not self.store.folder_exists(folder):
            return []
        return self.store.list_documents(folder, recursive=True)
