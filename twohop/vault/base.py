from typing import List, Protocol

from twohop.domain.note import LinkTarget, NoteMetadata
from twohop.graph.link_index import LinkIndex


class Vault(Protocol):
    """Read access to a note vault and its cached link metadata."""

    @property
    def resolved_links(self) -> LinkIndex:
        """Links whose destination exists, by source path."""
        ...

    @property
    def unresolved_links(self) -> LinkIndex:
        """Links whose destination does not exist, by source path."""
        ...

    def get_file_cache(self, path: str) -> NoteMetadata | None:
        """Get cached metadata for a note, None if not cached."""
        ...

    def get_first_linkpath_dest(self, link_text: str, source_path: str) -> LinkTarget:
        """Resolve a link text relative to the note at ``source_path``."""
        ...

    def get_markdown_files(self) -> List[str]:
        """Get the paths of all markdown notes."""
        ...

    def read(self, path: str) -> str:
        """Read the text content of a note."""
        ...

    def read_bytes(self, path: str) -> bytes:
        """Read the raw content of a note or attachment."""
        ...

    def get_size(self, path: str) -> int:
        """Get the size of a file in bytes."""
        ...

    def get_resource_path(self, path: str) -> str:
        """Get a URL-like path for serving a file."""
        ...
