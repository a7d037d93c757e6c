"""Note domain models."""

from typing import Literal

from pydantic import BaseModel


class NoteMetadata(BaseModel):
    """Cached metadata of a single note.

    Attributes:
        path: Vault-relative path of the note
        links: Raw outbound link targets in document order, None if not cached yet
        tags: Tags without the leading ``#``, None if the note has no tags
    """

    path: str
    links: list[str] | None = None
    tags: list[str] | None = None


class LinkTarget(BaseModel):
    """Result of resolving a link text relative to a source note."""

    kind: Literal["document", "resource", "missing"]
    path: str | None = None

    @property
    def exists(self) -> bool:
        return self.kind != "missing"

    @property
    def is_document(self) -> bool:
        return self.kind == "document"
