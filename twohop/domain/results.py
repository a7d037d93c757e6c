"""Aggregation result models."""

from pydantic import BaseModel, ConfigDict

from twohop.domain.link import LinkRef, TagGroup, TwoHopGroup


class TwoHopLinks(BaseModel):
    """Everything the links panel shows for one focal note."""

    model_config = ConfigDict(frozen=True)

    forward_connected_links: list[LinkRef] = []
    new_links: list[LinkRef] = []
    backward_links: list[LinkRef] = []
    unresolved_two_hop_links: list[TwoHopGroup] = []
    resolved_two_hop_links: list[TwoHopGroup] = []
    backlink_unresolved_two_hop_links: list[TwoHopGroup] = []
    backlink_resolved_two_hop_links: list[TwoHopGroup] = []
    tag_links: list[TagGroup] = []


class LinkResolution(BaseModel):
    """Outcome of following a link from the panel."""

    link_text: str
    source_path: str
    exists: bool
    path: str | None = None
    confirm_message: str | None = None
