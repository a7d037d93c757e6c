"""Tag co-membership links."""

from twohop.domain.link import LinkRef, TagGroup, path_to_link_text
from twohop.domain.note import NoteMetadata
from twohop.vault.base import Vault


def get_tag_links(path: str, file_cache: NoteMetadata | None, vault: Vault) -> list[TagGroup]:
    """Group other notes by the tags they share with the focal note.

    A note is listed once, under the first shared tag it is found with.

    Args:
        path: Path of the focal note
        file_cache: Cached metadata of the focal note
        vault: Vault providing the other notes and their metadata

    Returns:
        Non-empty tag groups in first-encountered tag order
    """
    if file_cache is None or not file_cache.tags:
        return []

    active_tags = set(file_cache.tags)
    tag_map: dict[str, list[LinkRef]] = {}
    seen: set[str] = set()

    for note_path in vault.get_markdown_files():
        if note_path == path:
            continue
        note_cache = vault.get_file_cache(note_path)
        if note_cache is None or not note_cache.tags:
            continue

        for tag in note_cache.tags:
            if tag not in active_tags:
                continue
            members = tag_map.setdefault(tag, [])
            if note_path not in seen:
                members.append(LinkRef(source_path=path, link_text=path_to_link_text(note_path)))
                seen.add(note_path)

    return [TagGroup(tag=tag, members=members) for tag, members in tag_map.items() if members]
