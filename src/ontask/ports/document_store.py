"""Document store interface."""

from typing import Protocol

from ontask.core.documents import Document


class DocumentStore(Protocol):
    """Interface for enumerating and reading markdown documents."""

    def list_documents(self, root: str | None = None, recursive: bool = True) -> list[Document]:
        """List documents under a folder (or the whole store), in a stable order."""
        ...

    def get_document(self, path: str) -> Document | None:
        """Resolve a path to a document. Returns None if there is no such document."""
        ...

    def folder_exists(self, path: str) -> bool:
        """Check if a folder exists in the store."""
        ...

    def read(self, document: Document) -> str:
        """Read the full text content of a document."""
        ...
