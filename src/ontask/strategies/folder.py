"""Folder strategy - checkboxes from an arbitrary folder."""

from dataclasses import asdict, dataclass

from ontask.core.dates import TodayMatcher
from ontask.core.documents import Document
from ontask.ports.document_store import DocumentStore

from .base import DocumentScanStrategy


@dataclass(frozen=True)
class FolderStrategyConfig:
    """Which folder to scan and whether to descend into subfolders."""

    folder_path: str = ""
    recursive: bool = True
    include_subfolders: bool = True

    @property
    def descends(self) -> bool:
        return self.recursive or self.include_subfolders


class FolderStrategy(DocumentScanStrategy):
    """Scans the notes in one configured folder."""

    name = "folder"

    def __init__(
        self,
        store: DocumentStore,
        matcher: TodayMatcher,
        config: FolderStrategyConfig | None = None,
    ):
        super().__init__(store, matcher)
        self.config = config or FolderStrategyConfig()

    @property
    def source_name(self) -> str:
        return f"Folder: {self.config.folder_path}"

    def is_available(self) -> bool:
        """Available when a folder is configured and currently exists."""
        if not self.config.folder_path.strip():
            return False
        return self.store.folder_exists(self.config.folder_path)

    def get_configuration(self) -> dict:
        return asdict(self.config)

    def candidate_documents(self) -> list[Document]:
        return self.store.list_documents(self.config.folder_path, recursive=self.config.descends)
