from loguru import logger

from twohop.domain.link import LinkRef, remove_block_reference
from twohop.domain.results import LinkResolution
from twohop.vault.base import Vault


def resolve_link(link: LinkRef, vault: Vault) -> LinkResolution:
    """Resolve a link the user is about to follow.

    A missing target carries the confirmation text to show before the note is created.
    """
    link_text = remove_block_reference(link.link_text)
    logger.debug(f"Open file: linkText='{link_text}', sourcePath='{link.source_path}'")

    target = vault.get_first_linkpath_dest(link_text, link.source_path)
    if target.exists:
        return LinkResolution(
            link_text=link.link_text,
            source_path=link.source_path,
            exists=True,
            path=target.path,
        )
    return LinkResolution(
        link_text=link.link_text,
        source_path=link.source_path,
        exists=False,
        confirm_message=f"Create new file: {link_text}?",
    )
