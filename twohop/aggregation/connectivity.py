from twohop.domain.link import LinkRef, remove_block_reference
from twohop.vault.base import Vault


def split_links_by_connectivity(
    links: list[LinkRef], two_hop_link_keys: set[str], vault: Vault
) -> tuple[list[LinkRef], list[LinkRef]]:
    """Split forward links into links to existing files and new links.

    Missing targets already shown as a two-hop intermediate are dropped.

    Returns:
        Tuple of (connected links, new links)
    """
    connected_links = []
    new_links = []
    seen: set[str] = set()

    for link in links:
        key = link.key()
        if key in seen:
            continue
        seen.add(key)

        target = vault.get_first_linkpath_dest(
            remove_block_reference(link.link_text), link.source_path
        )
        if target.exists:
            connected_links.append(link)
        elif key not in two_hop_link_keys:
            new_links.append(link)

    return connected_links, new_links
