"""Shared scanning algorithm for checkbox source strategies."""

import logging
from abc import ABC, abstractmethod
from typing import Protocol

from ontask.core.checkboxes import CheckboxItem, FinderContext, scan_lines
from ontask.core.dates import TodayMatcher
from ontask.core.documents import Document
from ontask.ports.document_store import DocumentStore

logger = logging.getLogger(__name__)


class TaskSourceStrategy(Protocol):
    """Interface for a pluggable source of checkboxes."""

    name: str

    def is_available(self) -> bool:
        """Cheap readiness check with no side effects."""
        ...

    def find_checkboxes(self, context: FinderContext) -> list[CheckboxItem]:
        """Scan the source. Returns an empty list when unavailable; never raises."""
        ...

    def get_configuration(self) -> dict:
        """Describe the strategy's configuration, for introspection."""
        ...


class DocumentScanStrategy(ABC):
    """
    Base for strategies that scan documents from a DocumentStore.

    Subclasses decide availability and which documents belong to the source;
    resolving explicit paths, the today filter, reading, parsing and the
    limit are handled here.
    """

    name = ""
    source_name = ""

    def __init__(self, store: DocumentStore, matcher: TodayMatcher):
        self.store = store
        self.matcher = matcher

    @abstractmethod
    def is_available(self) -> bool:
        ...

    @abstractmethod
    def candidate_documents(self) -> list[Document]:
        """All documents in this source, in enumeration order."""
        ...

    def get_configuration(self) -> dict:
        return {}

    def find_checkboxes(self, context: FinderContext) -> list[CheckboxItem]:
        """Find checkboxes in this source, honouring the context's filters and limit."""
        if not self._safe_is_available():
            return []

        try:
            if context.file_paths:
                documents = self.resolve_paths(context.file_paths)
            else:
                documents = self.candidate_documents()
        except Exception as e:
            logger.warning(f"{self.name}: failed to enumerate documents: {e}")
            return []

        return self.scan_documents(documents, context)

    def _safe_is_available(self) -> bool:
        try:
            return self.is_available()
        except Exception as e:
            logger.warning(f"{self.name}: availability check failed: {e}")
            return False

    def resolve_paths(self, paths: list[str]) -> list[Document]:
        """Map explicit paths to documents, skipping any that do not resolve."""
        documents = []
        for path in paths:
            try:
                document = self.store.get_document(path)
            except Exception as e:
                logger.warning(f"{self.name}: failed to resolve {path}: {e}")
                continue
            if document is None:
                logger.debug(f"{self.name}: skipping unknown path {path}")
                continue
            documents.append(document)
        return documents

    def scan_documents(
        self,
        documents: list[Document],
        context: FinderContext,
    ) -> list[CheckboxItem]:
        """
        Read documents one at a time and collect their checkboxes.

        The limit bounds the total across all documents. A document that
        cannot be read contributes nothing and the scan moves on.
        """
        items: list[CheckboxItem] = []
        limit = context.limit
        if limit == 0:
            return items

        if context.only_show_today:
            try:
                documents = self.matcher.filter(documents)
            except Exception as e:
                logger.warning(f"{self.name}: today filter failed: {e}")
                return items

        for document in documents:
            remaining = None if limit is None else limit - len(items)
            try:
                content = self.store.read(document)
                found = scan_lines(document, content, self.source_name, remaining)
            except Exception as e:
                logger.warning(f"{self.name}: skipping {document.path}: {e}")
                continue

            items.extend(found)
            if limit is not None and len(items) >= limit:
                break

        logger.debug(f"{self.name}: found {len(items)} checkboxes in {len(documents)} documents")
        return items
