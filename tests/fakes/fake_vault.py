from typing import Dict, List

from twohop.domain.note import LinkTarget, NoteMetadata
from twohop.graph.link_index import LinkIndex
from twohop.vault.base import Vault


class FakeVault(Vault):
    """Fake vault with predefined link indices and metadata.

    Link texts resolve to ``<link>`` or ``<link>.md`` when that path is a known file.
    """

    def __init__(
        self,
        *,
        resolved: Dict[str, Dict[str, int]] | None = None,
        unresolved: Dict[str, Dict[str, int]] | None = None,
        file_caches: Dict[str, NoteMetadata] | None = None,
        resources: List[str] | None = None,
        contents: Dict[str, str] | None = None,
    ) -> None:
        self._resolved = LinkIndex(resolved or {})
        self._unresolved = LinkIndex(unresolved or {})
        self._file_caches = file_caches or {}
        self._contents = contents or {}
        self._notes = list(
            dict.fromkeys([*self._file_caches, *(resolved or {}), *self._contents])
        )
        self._files = set(self._notes) | set(resources or [])

    @property
    def resolved_links(self) -> LinkIndex:
        return self._resolved

    @property
    def unresolved_links(self) -> LinkIndex:
        return self._unresolved

    def get_file_cache(self, path: str) -> NoteMetadata | None:
        return self._file_caches.get(path)

    def get_first_linkpath_dest(self, link_text: str, source_path: str) -> LinkTarget:
        for candidate in (link_text, f"{link_text}.md"):
            if candidate in self._files:
                kind = "document" if candidate.endswith(".md") else "resource"
                return LinkTarget(kind=kind, path=candidate)
        return LinkTarget(kind="missing")

    def get_markdown_files(self) -> List[str]:
        return [path for path in self._notes if path.endswith(".md")]

    def read(self, path: str) -> str:
        return self._contents[path]

    def read_bytes(self, path: str) -> bytes:
        return self._contents[path].encode("utf-8")

    def get_size(self, path: str) -> int:
        return len(self.read_bytes(path))

    def get_resource_path(self, path: str) -> str:
        return f"resource://{path}"
