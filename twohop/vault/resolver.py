"""Resolution of link texts to vault files."""

import logging
import posixpath
import re

from twohop.domain.note import LinkTarget

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSION = ".md"
TEXT_EXTENSION_PATTERN = re.compile(r"\.(?:md|markdown|txt|text)$", re.IGNORECASE)


class LinkResolver:
    """Resolves link texts to vault-relative file paths the way Obsidian does."""

    def __init__(self, files: list[str]):
        """Initialize resolver with the files of a vault.

        Args:
            files: Vault-relative POSIX paths of every note and attachment
        """
        self.files = set(files)
        self._by_name: dict[str, list[str]] = {}
        for path in sorted(files):
            self._by_name.setdefault(posixpath.basename(path).lower(), []).append(path)

    def resolve(self, link_text: str, source_path: str) -> LinkTarget:
        """Resolve a link text relative to the note at ``source_path``.

        Args:
            link_text: Link target, heading and block suffixes are ignored
            source_path: Path of the note containing the link

        Returns:
            LinkTarget describing the note, attachment, or missing target
        """
        linkpath = link_text.split("#", 1)[0].strip()
        if not linkpath:
            # [[#Heading]] points into the source note itself
            return self._to_target(source_path) if source_path in self.files else _missing()

        for candidate in self._candidates(linkpath, source_path):
            if candidate in self.files:
                return self._to_target(candidate)

        match = self._match_by_name(linkpath, source_path)
        if match:
            return self._to_target(match)

        logger.debug(f"Could not resolve link: {link_text} (from {source_path})")
        return _missing()

    def _candidates(self, linkpath: str, source_path: str) -> list[str]:
        """Exact paths to try, vault-absolute first, then relative to the source folder."""
        source_folder = posixpath.dirname(source_path)
        relative = posixpath.normpath(posixpath.join(source_folder, linkpath))
        return [
            linkpath,
            f"{linkpath}{MARKDOWN_EXTENSION}",
            relative,
            f"{relative}{MARKDOWN_EXTENSION}",
        ]

    def _match_by_name(self, linkpath: str, source_path: str) -> str | None:
        """Match by file name, preferring files in the source note's folder."""
        name = posixpath.basename(linkpath).lower()
        suffix = linkpath.lower()
        candidates = self._by_name.get(name, []) + self._by_name.get(
            f"{name}{MARKDOWN_EXTENSION}", []
        )
        # A link with folders must match the end of the path
        candidates = [
            path
            for path in candidates
            if "/" not in linkpath
            or path.lower().endswith(f"/{suffix}")
            or path.lower().endswith(f"/{suffix}{MARKDOWN_EXTENSION}")
        ]
        if not candidates:
            return None

        source_folder = posixpath.dirname(source_path)
        for path in candidates:
            if posixpath.dirname(path) == source_folder:
                return path
        return candidates[0]

    @staticmethod
    def _to_target(path: str) -> LinkTarget:
        kind = "document" if TEXT_EXTENSION_PATTERN.search(path) else "resource"
        return LinkTarget(kind=kind, path=path)


def _missing() -> LinkTarget:
    return LinkTarget(kind="missing")
