"""Tests for splitting forward links by connectivity."""

from tests.fakes import FakeVault
from twohop.aggregation.connectivity import split_links_by_connectivity
from twohop.domain.link import LinkRef


def _link(link_text: str) -> LinkRef:
    return LinkRef(source_path="A.md", link_text=link_text)


def test_existing_targets_are_connected() -> None:
    """Links to existing notes and attachments are connected."""
    vault = FakeVault(resolved={"A.md": {}, "B.md": {}}, resources=["image.png"])

    connected, new = split_links_by_connectivity(
        [_link("B"), _link("image.png")], set(), vault
    )

    assert connected == [_link("B"), _link("image.png")]
    assert new == []


def test_missing_target_is_new() -> None:
    """A link to a note that does not exist is offered as a new note."""
    vault = FakeVault(resolved={"A.md": {}, "B.md": {}})

    connected, new = split_links_by_connectivity([_link("B"), _link("Missing")], set(), vault)

    assert connected == [_link("B")]
    assert new == [_link("Missing")]


def test_missing_target_shown_as_two_hop_is_dropped() -> None:
    """A missing note already heading a two-hop group is not listed again."""
    vault = FakeVault(resolved={"A.md": {}})

    connected, new = split_links_by_connectivity([_link("Idea")], {"A.md|Idea"}, vault)

    assert connected == []
    assert new == []


def test_block_references_resolve_and_deduplicate() -> None:
    """Block references are ignored for resolution and only the first link is kept."""
    vault = FakeVault(resolved={"A.md": {}, "B.md": {}})

    connected, new = split_links_by_connectivity(
        [_link("B#^one"), _link("B#^two"), _link("C#^one")], set(), vault
    )

    assert connected == [_link("B#^one")]
    assert new == [_link("C#^one")]
