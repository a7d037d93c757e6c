"""Two-hop links through the focal note's forward links."""

from twohop.aggregation.visitation import VisitationContext
from twohop.domain.link import LinkRef, TwoHopGroup, path_to_link_text
from twohop.graph.link_index import LinkIndex


def aggregate_two_hop_candidates(
    path: str,
    links: LinkIndex,
    visitation: VisitationContext | None = None,
) -> dict[str, list[str]]:
    """Collect candidate paths grouped by the forward link they are reached through.

    A single pass over every edge ``src -> dest`` not leaving the focal note:

    - ``src`` is a forward link: ``dest`` is reachable via ``src``
      (focal -> src -> dest).
    - ``dest`` is a forward link: ``src`` is reachable via ``dest``
      (focal -> dest <- src).

    Args:
        path: Path of the focal note
        links: Resolved or unresolved link index
        visitation: Paths already shown, first claim wins

    Returns:
        Mapping from intermediate to candidate paths in discovery order
    """
    active_file_links = set(links.destinations(path))
    candidates: dict[str, list[str]] = {}

    for src, dest in links.edges():
        if src == path:
            continue
        if src in active_file_links:
            _add_candidate(candidates, src, dest, path, visitation)
        if dest in active_file_links:
            _add_candidate(candidates, dest, src, path, visitation)

    return candidates


def _add_candidate(
    candidates: dict[str, list[str]],
    via: str,
    candidate: str,
    path: str,
    visitation: VisitationContext | None,
) -> None:
    members = candidates.setdefault(via, [])
    if candidate == path:
        return
    if visitation is not None and not visitation.claim(candidate):
        return
    members.append(candidate)


def to_member_links(path: str, candidates: list[str], forward_link_keys: set[str]) -> list[LinkRef]:
    """Convert candidate paths to links, dropping forward links and duplicates."""
    seen: set[str] = set()
    members = []
    for candidate in candidates:
        link = LinkRef(source_path=path, link_text=path_to_link_text(candidate))
        key = link.key()
        if key in forward_link_keys or key in seen:
            continue
        seen.add(key)
        members.append(link)
    return members


def get_two_hop_links(
    path: str,
    links: LinkIndex,
    forward_link_keys: set[str],
    visitation: VisitationContext | None = None,
) -> list[TwoHopGroup]:
    """Get two-hop link groups of the focal note within one link index.

    Args:
        path: Path of the focal note
        links: Resolved or unresolved link index
        forward_link_keys: Keys of the focal note's forward links
        visitation: Paths already shown, shared across the aggregation pass

    Returns:
        One group per forward link in ``links`` with at least one member,
        ordered like the focal note's entry in the index
    """
    if path not in links:
        return []

    candidates = aggregate_two_hop_candidates(path, links, visitation)

    groups = []
    for dest in links.destinations(path):
        members = to_member_links(path, candidates.get(dest, []), forward_link_keys)
        if members:
            groups.append(
                TwoHopGroup(link=LinkRef(source_path=path, link_text=dest), members=members)
            )
    return groups
