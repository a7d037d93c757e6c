"""Preview text for links shown in the panel."""

import re

from loguru import logger

from twohop.config import Settings, settings as default_settings
from twohop.domain.link import LinkRef, remove_block_reference
from twohop.vault.base import Vault
from twohop.vault.content_extractor import ContentExtractor
from twohop.vault.resolver import TEXT_EXTENSION_PATTERN

EXTENSION_PATTERN = re.compile(r"\.[a-z0-9_-]+$", re.IGNORECASE)


class PreviewReader:
    """Derives a one-line preview (or image path) for a linked note."""

    def __init__(self, *, vault: Vault, settings: Settings | None = None):
        self.vault = vault
        self.settings = settings or default_settings
        self.content_extractor = ContentExtractor()

    def read_preview(self, link: LinkRef) -> str:
        """Get the preview for a link.

        Non-text files, missing notes and notes above ``preview_max_size`` give
        an empty preview.

        Args:
            link: Link to preview

        Returns:
            Resource path of the first embedded image when ``show_image`` is
            set and one resolves, otherwise the first content line
        """
        if EXTENSION_PATTERN.search(link.link_text) and not TEXT_EXTENSION_PATTERN.search(
            link.link_text
        ):
            logger.debug(f"{link.link_text} is not a plain text file")
            return ""

        link_text = remove_block_reference(link.link_text)
        target = self.vault.get_first_linkpath_dest(link_text, link.source_path)
        if not target.is_document:
            return ""

        size = self.vault.get_size(target.path)
        if size > self.settings.preview_max_size:
            logger.debug(f"File too large({link.link_text}): {size}")
            return ""

        content = self.vault.read(target.path)

        if self.settings.show_image:
            image_path = self._find_image(content, target.path)
            if image_path:
                return image_path

        return self.first_content_line(content)

    def _find_image(self, content: str, source_path: str) -> str | None:
        images = self.content_extractor.extract_image_embeds(content)
        if not images:
            return None
        image = self.vault.get_first_linkpath_dest(images[0], source_path)
        if not image.exists:
            return None
        logger.debug(f"Found image: {images[0]} = {image.path}")
        return self.vault.get_resource_path(image.path)

    def first_content_line(self, content: str) -> str:
        """First line that is not blank, a header/tag line, or a bare URL."""
        _, body = self.content_extractor.split_front_matter(content)
        for line in body.split("\n"):
            if not re.search(r"\S", line):
                continue
            if line.startswith("#") or re.match(r"https?://", line):
                continue
            return line
        return ""
