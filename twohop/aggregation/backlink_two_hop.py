"""Two-hop links through the focal note's backlinks."""

from loguru import logger

from twohop.aggregation.forward import get_forward_links
from twohop.aggregation.two_hop import to_member_links
from twohop.aggregation.visitation import VisitationContext
from twohop.domain.link import LinkRef, TwoHopGroup, remove_block_reference
from twohop.graph.link_index import LinkIndex
from twohop.vault.base import Vault


def get_backlink_two_hop_links(
    path: str,
    backward_links: list[LinkRef],
    *,
    vault: Vault,
    resolved_links: LinkIndex,
    unresolved_links: LinkIndex,
    forward_link_keys: set[str],
    visitation: VisitationContext | None = None,
) -> tuple[list[TwoHopGroup], list[TwoHopGroup]]:
    """Group the forward links of every backlink under that backlink.

    Args:
        path: Path of the focal note
        backward_links: Backward links of the focal note
        vault: Vault used to resolve links and read cached metadata
        resolved_links: Resolved link index of the vault
        unresolved_links: Unresolved link index of the vault
        forward_link_keys: Keys of the focal note's forward links
        visitation: Paths already shown, shared across the aggregation pass

    Returns:
        Tuple of (unresolved groups, resolved groups)
    """
    unresolved_groups: list[TwoHopGroup] = []
    resolved_groups: list[TwoHopGroup] = []

    for backward_link in backward_links:
        backward_file = vault.get_first_linkpath_dest(
            backward_link.link_text, backward_link.source_path
        )
        if not backward_file.is_document:
            logger.debug(f"Backlink is not a note: {backward_link.link_text}")
            continue

        backward_path = backward_file.path
        candidates = _get_candidates(path, backward_path, vault, visitation)
        members = to_member_links(path, candidates, forward_link_keys)

        unresolved_groups.extend(_to_groups(path, backward_path, unresolved_links, members))
        resolved_groups.extend(_to_groups(path, backward_path, resolved_links, members))

    return unresolved_groups, resolved_groups


def _get_candidates(
    path: str,
    backward_path: str,
    vault: Vault,
    visitation: VisitationContext | None,
) -> list[str]:
    """Link texts of the backlink's forward links that resolve to other notes."""
    candidates = []
    for link in get_forward_links(backward_path, vault.get_file_cache(backward_path)):
        target = vault.get_first_linkpath_dest(
            remove_block_reference(link.link_text), link.source_path
        )
        if not target.is_document or target.path == path:
            continue
        if visitation is not None and not visitation.claim(target.path):
            continue
        candidates.append(link.link_text)
    return candidates


def _to_groups(
    path: str, backward_path: str, links: LinkIndex, members: list[LinkRef]
) -> list[TwoHopGroup]:
    if not members:
        return []
    return [
        TwoHopGroup(
            link=LinkRef(source_path=backward_path, link_text=backward_path),
            members=members,
        )
        for dest in links.destinations(backward_path)
        if dest == path
    ]
