"""Content extraction for markdown notes."""

import logging
import re
from typing import Any, List

import yaml

logger = logging.getLogger(__name__)

FRONT_MATTER_PATTERN = re.compile(
    r"^---[ \t]*\n(.*?)^---[ \t]*(?:\n|$)", re.DOTALL | re.MULTILINE
)


class ContentExtractor:
    """Extracts links, tags and front matter from markdown text."""

    @staticmethod
    def split_front_matter(content: str) -> tuple[dict[str, Any], str]:
        """Split YAML front matter from the note body.

        Args:
            content: Full markdown content

        Returns:
            Tuple of (front matter mapping, body). Invalid YAML yields an empty mapping.
        """
        match = FRONT_MATTER_PATTERN.match(content)
        if not match:
            return {}, content

        try:
            front_matter = yaml.safe_load(match.group(1)) or {}
        except yaml.YAMLError as e:
            logger.warning(f"Invalid front matter: {e}")
            front_matter = {}
        if not isinstance(front_matter, dict):
            front_matter = {}
        return front_matter, content[match.end() :]

    @staticmethod
    def extract_wikilinks(content: str) -> List[str]:
        """Extract wikilink targets from markdown content.

        Extracts links in the form of [[link name]] or [[link name|display text]],
        keeping heading and block reference suffixes. Embeds (![[...]]) are skipped.

        Args:
            content: Markdown content to extract wikilinks from

        Returns:
            List of wikilink targets in document order
        """
        wikilink_pattern = r"(?<!!)\[\[([^\]|]+)(?:\|[^\]]*)?\]\]"
        return [link.strip() for link in re.findall(wikilink_pattern, content)]

    @staticmethod
    def extract_inline_tags(content: str) -> List[str]:
        """Extract #tags from markdown content, without the leading '#'.

        Headings, heading links (Note#Heading) and block references (#^id) are
        not tags. A tag needs at least one non-numeric character.
        """
        tag_pattern = r"(?<![\w#/&\[(])#([\w/-]*[^\W\d][\w/-]*)"
        return re.findall(tag_pattern, content)

    @staticmethod
    def extract_front_matter_tags(front_matter: dict[str, Any]) -> List[str]:
        """Extract tags from the ``tags`` (or ``tag``) front matter field."""
        raw = front_matter.get("tags", front_matter.get("tag"))
        if raw is None:
            return []
        if isinstance(raw, str):
            raw = re.split(r"[,\s]+", raw)
        return [str(tag).lstrip("#") for tag in raw if tag and str(tag).lstrip("#")]

    def extract_tags(self, content: str) -> List[str]:
        """Extract front matter and inline tags, deduplicated in order of appearance."""
        front_matter, body = self.split_front_matter(content)
        tags = self.extract_front_matter_tags(front_matter) + self.extract_inline_tags(body)
        return list(dict.fromkeys(tags))

    @staticmethod
    def extract_image_embeds(content: str) -> List[str]:
        """Extract embedded image references (![[image.png]]) from markdown content."""
        image_pattern = r"!\[\[([^\]]+\.(?:png|bmp|jpg))\]\]"
        return re.findall(image_pattern, content)
