import logging
from collections import Counter
from pathlib import Path
from typing import List
from urllib.parse import quote

from twohop.domain.note import LinkTarget, NoteMetadata
from twohop.graph.link_index import LinkIndex
from twohop.vault.base import Vault

from .content_extractor import ContentExtractor
from .resolver import TEXT_EXTENSION_PATTERN, LinkResolver

logger = logging.getLogger(__name__)


class LocalVault(Vault):
    """Vault backed by a folder of markdown notes and attachments."""

    def __init__(self, folder: str | Path | None = None) -> None:
        """Initialize LocalVault.

        Args:
            folder: Vault folder. If provided and exists, it is indexed right away.
                    If not provided, creates an empty vault in memory only.
        """
        self._folder = Path(folder) if folder else None
        self._content_extractor = ContentExtractor()
        self._contents: dict[str, str] = {}
        self._resources: dict[str, bytes | Path] = {}
        self._file_caches: dict[str, NoteMetadata] = {}
        self._resolver = LinkResolver([])
        self._resolved_links = LinkIndex({})
        self._unresolved_links = LinkIndex({})

        if self._folder and self._folder.exists():
            self.reload()

    @classmethod
    def from_data(
        cls,
        notes: dict[str, str] | None = None,
        resources: dict[str, bytes] | None = None,
    ) -> "LocalVault":
        """Create LocalVault from in-memory content (useful for testing).

        Args:
            notes: Mapping of note path to markdown content
            resources: Mapping of attachment path to file content

        Returns:
            LocalVault instance indexed from the provided data
        """
        instance = cls(folder=None)
        instance._contents = dict(notes or {})
        instance._resources = dict(resources or {})
        instance._build_index()
        return instance

    def reload(self) -> None:
        """Re-read the vault folder and rebuild the metadata cache and link indices."""
        if self._folder is None:
            raise ValueError("No folder set during initialization")

        contents = {}
        resources: dict[str, bytes | Path] = {}
        for file in sorted(self._folder.rglob("*")):
            relative_path = file.relative_to(self._folder)
            if not file.is_file() or any(part.startswith(".") for part in relative_path.parts):
                continue
            path = relative_path.as_posix()
            if file.suffix == ".md":
                try:
                    contents[path] = file.read_text(encoding="utf-8")
                except UnicodeDecodeError:
                    logger.warning(f"Skipping {path}: not valid UTF-8")
            else:
                resources[path] = file

        self._contents = contents
        self._resources = resources
        self._build_index()

    def _build_index(self) -> None:
        """Build the metadata cache and fresh link index snapshots."""
        self._resolver = LinkResolver(list(self._contents) + list(self._resources))

        file_caches = {}
        resolved: dict[str, dict[str, int]] = {}
        unresolved: dict[str, dict[str, int]] = {}

        for path, content in self._contents.items():
            links = self._content_extractor.extract_wikilinks(content)
            tags = self._content_extractor.extract_tags(content)
            file_caches[path] = NoteMetadata(path=path, links=links, tags=tags or None)

            resolved_counts: Counter[str] = Counter()
            unresolved_counts: Counter[str] = Counter()
            for link in links:
                target = self._resolver.resolve(link, path)
                if target.exists:
                    resolved_counts[target.path] += 1
                else:
                    unresolved_counts[link.split("#", 1)[0].strip()] += 1
            resolved[path] = dict(resolved_counts)
            unresolved[path] = dict(unresolved_counts)

        self._file_caches = file_caches
        self._resolved_links = LinkIndex(resolved)
        self._unresolved_links = LinkIndex(unresolved)

        logger.info(
            f"Indexed {len(self._contents)} notes and {len(self._resources)} attachments"
        )

    @property
    def resolved_links(self) -> LinkIndex:
        return self._resolved_links

    @property
    def unresolved_links(self) -> LinkIndex:
        return self._unresolved_links

    def get_file_cache(self, path: str) -> NoteMetadata | None:
        return self._file_caches.get(path)

    def get_first_linkpath_dest(self, link_text: str, source_path: str) -> LinkTarget:
        return self._resolver.resolve(link_text, source_path)

    def get_markdown_files(self) -> List[str]:
        return list(self._contents)

    def read(self, path: str) -> str:
        """Read the text content of a note or plain text attachment."""
        if path in self._contents:
            return self._contents[path]
        if path not in self._resources or not TEXT_EXTENSION_PATTERN.search(path):
            raise KeyError(f"Note {path} not found")
        return self.read_bytes(path).decode("utf-8", errors="replace")

    def read_bytes(self, path: str) -> bytes:
        """Read the raw content of a note or attachment."""
        if path in self._contents:
            return self._contents[path].encode("utf-8")
        if path not in self._resources:
            raise KeyError(f"File {path} not found")
        resource = self._resources[path]
        if isinstance(resource, Path):
            return resource.read_bytes()
        return resource

    def get_size(self, path: str) -> int:
        resource = self._resources.get(path)
        if isinstance(resource, Path):
            return resource.stat().st_size
        return len(self.read_bytes(path))

    def get_resource_path(self, path: str) -> str:
        return f"/api/files/{quote(path)}"
