"""Streams strategy - checkboxes from every folder known to the Streams plugin."""

import logging

from ontask.core.checkboxes import CheckboxItem, FinderContext
from ontask.core.dates import TodayMatcher
from ontask.core.documents import Document
from ontask.core.streams import Stream
from ontask.ports.document_store import DocumentStore
from ontask.ports.stream_provider import StreamProvider

from .base import DocumentScanStrategy

logger = logging.getLogger(__name__)

SOURCE_NAME = "Streams"


class StreamsStrategy(DocumentScanStrategy):
    """
    Scans the folder behind each stream.

    Streams are scanned in provider order and share one limit, so the
    result is the first N checkboxes across all streams. When the Streams
    integration is missing or fails, the strategy contributes nothing.
    """

    name = "streams"
    source_name = SOURCE_NAME

    def __init__(
        self,
        store: DocumentStore,
        matcher: TodayMatcher,
        provider: StreamProvider,
    ):
        super().__init__(store, matcher)
        self.provider = provider

    def is_available(self) -> bool:
        return self.provider.is_available()

    def get_configuration(self) -> dict:
        return {"streams": [s.name for s in self._streams()]}

    def _streams(self) -> list[Stream]:
        """Streams with a folder, or nothing if the provider fails."""
        try:
            streams = self.provider.get_all_streams()
        except Exception as e:
            logger.warning(f"Streams provider failed: {e}")
            return []
        return [s for s in streams if s.has_folder]

    def stream_documents(self, stream: Stream) -> list[Document]:
        """Documents in a stream's folder, or the stream's single note."""
        document = self.store.get_document(stream.folder)
        if document is not None:
            return [document]
        return self.store.list_documents(stream.folder, recursive=True)

    def candidate_documents(self) -> list[Document]:
        documents: list[Document] = []
        for stream in self._streams():
            try:
                documents.extend(self.stream_documents(stream))
            except Exception as e:
                logger.warning(f"Skipping stream {stream.name}: {e}")
        return documents

    def find_checkboxes_in_stream(
        self,
        stream: Stream,
        context: FinderContext,
    ) -> list[CheckboxItem]:
        """Scan a single stream's folder with its own limit."""
        if not self._safe_is_available() or not stream.has_folder:
            return []
        try:
            documents = self.stream_documents(stream)
        except Exception as e:
            logger.warning(f"Skipping stream {stream.name}: {e}")
            return []
        return self.scan_documents(documents, context)
