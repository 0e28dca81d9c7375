"""File-based document store adapter."""

import logging
from pathlib import Path

from ontask.core.documents import Document

logger = logging.getLogger(__name__)


class FileVault:
    """
    Directory of markdown notes on disk.

    Implements DocumentStore protocol. Paths are vault-relative with forward
    slashes; a leading "/" is ignored. Hidden folders such as `.obsidian`
    are never enumerated.
    """

    def __init__(self, vault_dir: Path | str, extensions: tuple[str, ...] = (".md",)):
        self.vault_dir = Path(vault_dir).expanduser()
        self.extensions = tuple(ext.lower() for ext in extensions)

    def _resolve(self, path: str) -> Path | None:
        """Map a vault-relative path to the filesystem. None if it escapes the vault."""
        relative = path.strip().strip("/")
        if not relative:
            return self.vault_dir
        parts = relative.split("/")
        if ".." in parts:
            return None
        return self.vault_dir.joinpath(*parts)

    def _relative(self, file_path: Path) -> str:
        return file_path.relative_to(self.vault_dir).as_posix()

    def _is_hidden(self, file_path: Path) -> bool:
        return any(part.startswith(".") for part in file_path.relative_to(self.vault_dir).parts)

    def _is_document(self, file_path: Path) -> bool:
        return (
            file_path.is_file()
            and file_path.suffix.lower() in self.extensions
            and not self._is_hidden(file_path)
        )

    def list_documents(self, root: str | None = None, recursive: bool = True) -> list[Document]:
        """List documents under a folder (or the whole vault), sorted by path."""
        base = self._resolve(root) if root else self.vault_dir
        if base is None or not base.is_dir():
            logger.debug(f"Folder not found in vault: {root}")
            return []

        candidates = base.rglob("*") if recursive else base.iterdir()
        documents = [
            Document.from_path(self._relative(p)) for p in candidates if self._is_document(p)
        ]
        return sorted(documents, key=lambda d: d.path)

    def get_document(self, path: str) -> Document | None:
        """Resolve a path to a document. Returns None if not found."""
        file_path = self._resolve(path)
        if file_path is None or file_path == self.vault_dir or not self._is_document(file_path):
            return None
        return Document.from_path(self._relative(file_path))

    def folder_exists(self, path: str) -> bool:
        """Check if a folder exists in the vault."""
        folder = self._resolve(path)
        return folder is not None and folder.is_dir()

    def read(self, document: Document) -> str:
        """Read document content as UTF-8."""
        file_path = self._resolve(document.path)
        if file_path is None:
            raise FileNotFoundError(document.path)
        return file_path.read_text(encoding="utf-8")
