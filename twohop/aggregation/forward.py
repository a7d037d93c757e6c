"""Forward links of a single note."""

from loguru import logger

from twohop.domain.link import LinkRef, remove_block_reference
from twohop.domain.note import NoteMetadata


def get_forward_links(path: str, file_cache: NoteMetadata | None) -> list[LinkRef]:
    """Get the outbound links of a note, deduplicated by block-stripped link text.

    Args:
        path: Path of the note
        file_cache: Cached metadata of the note, None if not cached yet

    Returns:
        Links in first-occurrence order
    """
    if file_cache is None:
        # The cache is populated asynchronously by the host
        logger.debug(f"Missing file cache '{path}'")
        return []
    if file_cache.links is None:
        return []

    seen: set[str] = set()
    forward_links = []
    for link_text in file_cache.links:
        key = remove_block_reference(link_text)
        if key in seen:
            continue
        seen.add(key)
        forward_links.append(LinkRef(source_path=path, link_text=link_text))
    return forward_links


def get_forward_link_keys(forward_links: list[LinkRef]) -> set[str]:
    return {link.key() for link in forward_links}
