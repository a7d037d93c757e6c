"""Tests for link identity and normalization."""

import pytest
from pydantic import ValidationError

from twohop.domain.link import LinkRef, path_to_link_text, remove_block_reference


@pytest.mark.parametrize(
    ("link_text", "expected"),
    [
        ("Note", "Note"),
        ("Note#^abc123", "Note"),
        ("Note#Heading", "Note#Heading"),
        ("Note#Heading#^abc", "Note#Heading"),
        ("#^abc", ""),
        ("", ""),
    ],
)
def test_remove_block_reference(link_text: str, expected: str) -> None:
    """Everything from the first block reference marker is stripped."""
    assert remove_block_reference(link_text) == expected


def test_remove_block_reference_is_idempotent() -> None:
    """Normalizing twice gives the same key as normalizing once."""
    for link_text in ["Note#^a#^b", "Folder/Note#^x", "Plain"]:
        once = remove_block_reference(link_text)
        assert remove_block_reference(once) == once


def test_path_to_link_text() -> None:
    """Only a trailing .md extension is removed."""
    assert path_to_link_text("Folder/Note.md") == "Folder/Note"
    assert path_to_link_text("image.png") == "image.png"
    assert path_to_link_text("Note.md.txt") == "Note.md.txt"


def test_link_key_ignores_block_reference() -> None:
    """Links to different blocks of one note share a key but keep their text."""
    first = LinkRef(source_path="A.md", link_text="Note#^block1")
    second = LinkRef(source_path="A.md", link_text="Note#^block2")

    assert first.key() == second.key() == "A.md|Note"
    assert first.link_text == "Note#^block1"
    assert second.link_text == "Note#^block2"


def test_link_key_includes_source_path() -> None:
    """The same link text resolved from another note is a different link."""
    assert (
        LinkRef(source_path="A.md", link_text="Note").key()
        != LinkRef(source_path="B.md", link_text="Note").key()
    )


def test_link_ref_is_immutable() -> None:
    """Links are value objects."""
    link = LinkRef(source_path="A.md", link_text="Note")
    with pytest.raises(ValidationError):
        link.link_text = "Other"  # type: ignore[misc]
    assert link == LinkRef(source_path="A.md", link_text="Note")
    assert len({link, LinkRef(source_path="A.md", link_text="Note")}) == 1
