"""Document handle shared between the store and the scanners."""

from dataclasses import dataclass
from pathlib import PurePosixPath


@dataclass(frozen=True)
class Document:
    """A markdown document in the store, identified by its vault-relative path."""

    path: str
    name: str

    @classmethod
    def from_path(cls, path: str) -> "Document":
        return cls(path=path, name=PurePosixPath(path).name)

    @property
    def stem(self) -> str:
        return PurePosixPath(self.name).stem
