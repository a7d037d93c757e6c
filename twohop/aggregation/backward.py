"""Backward links of a single note."""

from twohop.aggregation.visitation import VisitationContext
from twohop.domain.link import LinkRef, path_to_link_text
from twohop.graph.link_index import LinkIndex


def get_backward_links(
    path: str,
    resolved_links: LinkIndex,
    forward_link_keys: set[str],
    visitation: VisitationContext | None = None,
) -> list[LinkRef]:
    """Get notes linking to ``path`` that are not already forward links.

    Every linking source is recorded in ``visitation``, including the ones
    skipped because they are forward links too.

    Args:
        path: Path of the focal note
        resolved_links: Resolved link index of the vault
        forward_link_keys: Keys of the focal note's forward links
        visitation: Paths already shown, shared across the aggregation pass

    Returns:
        Backward links in index order
    """
    backward_links = []
    for src in resolved_links.edges_to(path):
        if visitation is not None:
            visitation.mark(src)
        link = LinkRef(source_path=path, link_text=path_to_link_text(src))
        if link.key() in forward_link_keys:
            continue
        backward_links.append(link)
    return backward_links
