"""Aggregation of every link group shown for a focal note."""

from loguru import logger

from twohop.config import Settings, settings as default_settings
from twohop.domain.results import TwoHopLinks
from twohop.vault.base import Vault

from .backlink_two_hop import get_backlink_two_hop_links
from .backward import get_backward_links
from .connectivity import split_links_by_connectivity
from .forward import get_forward_link_keys, get_forward_links
from .tags import get_tag_links
from .two_hop import get_two_hop_links
from .visitation import VisitationContext


class TwoHopLinksEngine:
    """Computes the links panel content for a focal note.

    The engine holds no state between calls: every ``build`` works on the
    vault's current link index snapshot and its own visitation context.
    """

    def __init__(self, *, vault: Vault, settings: Settings | None = None):
        """Initialize the engine.

        Args:
            vault: Vault providing cached metadata, link indices and resolution
            settings: Aggregation flags, defaults to the environment settings
        """
        self.vault = vault
        self.settings = settings or default_settings

    def build(self, path: str) -> TwoHopLinks:
        """Aggregate forward, backward, two-hop and tag links for ``path``.

        Args:
            path: Path of the focal note

        Returns:
            TwoHopLinks bundle for the focal note
        """
        file_cache = self.vault.get_file_cache(path)
        resolved_links = self.vault.resolved_links
        unresolved_links = self.vault.unresolved_links

        forward_links = get_forward_links(path, file_cache)
        forward_link_keys = get_forward_link_keys(forward_links)

        visitation = VisitationContext() if self.settings.excludes_duplicate_links else None

        backward_links = get_backward_links(path, resolved_links, forward_link_keys, visitation)

        if self.settings.exclude_front_link:
            unresolved_two_hop_links = []
            resolved_two_hop_links = []
        else:
            unresolved_two_hop_links = get_two_hop_links(
                path, unresolved_links, forward_link_keys, visitation
            )
            resolved_two_hop_links = get_two_hop_links(
                path, resolved_links, forward_link_keys, visitation
            )

        if self.settings.exclude_backlink:
            backlink_unresolved_two_hop_links, backlink_resolved_two_hop_links = [], []
        else:
            (
                backlink_unresolved_two_hop_links,
                backlink_resolved_two_hop_links,
            ) = get_backlink_two_hop_links(
                path,
                backward_links,
                vault=self.vault,
                resolved_links=resolved_links,
                unresolved_links=unresolved_links,
                forward_link_keys=forward_link_keys,
                visitation=visitation,
            )

        two_hop_link_keys = {
            group.link.key() for group in unresolved_two_hop_links + resolved_two_hop_links
        }
        forward_connected_links, new_links = split_links_by_connectivity(
            forward_links, two_hop_link_keys, self.vault
        )

        tag_links = [] if self.settings.exclude_tag else get_tag_links(path, file_cache, self.vault)

        logger.debug(
            f"Aggregated links for '{path}': {len(forward_links)} forward, "
            f"{len(backward_links)} backward, "
            f"{len(unresolved_two_hop_links) + len(resolved_two_hop_links)} two-hop, "
            f"{len(backlink_unresolved_two_hop_links) + len(backlink_resolved_two_hop_links)} "
            f"backlink two-hop, {len(tag_links)} tag groups"
        )

        return TwoHopLinks(
            forward_connected_links=forward_connected_links,
            new_links=new_links,
            backward_links=backward_links,
            unresolved_two_hop_links=unresolved_two_hop_links,
            resolved_two_hop_links=resolved_two_hop_links,
            backlink_unresolved_two_hop_links=backlink_unresolved_two_hop_links,
            backlink_resolved_two_hop_links=backlink_resolved_two_hop_links,
            tag_links=tag_links,
        )
