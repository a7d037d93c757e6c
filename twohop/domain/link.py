"""Link domain models."""

from pydantic import BaseModel, ConfigDict

BLOCK_REFERENCE_MARKER = "#^"


def remove_block_reference(link_text: str) -> str:
    """Strip a block reference suffix (``Note#^abc123`` -> ``Note``)."""
    index = link_text.find(BLOCK_REFERENCE_MARKER)
    if index < 0:
        return link_text
    return link_text[:index]


def path_to_link_text(path: str) -> str:
    """Convert a vault path to the link text used to reference it."""
    if path.endswith(".md"):
        return path[: -len(".md")]
    return path


class LinkRef(BaseModel):
    """A link as written in a note, resolved relative to ``source_path``.

    Attributes:
        source_path: Path of the note the link is resolved relative to
        link_text: Raw link target, possibly with a block reference suffix
    """

    model_config = ConfigDict(frozen=True)

    source_path: str
    link_text: str

    def key(self) -> str:
        """Identity key used for equality and set membership."""
        return f"{self.source_path}|{remove_block_reference(self.link_text)}"


class TwoHopGroup(BaseModel):
    """Notes reached through ``link``, an intermediate or a backlink."""

    model_config = ConfigDict(frozen=True)

    link: LinkRef
    members: list[LinkRef]


class TagGroup(BaseModel):
    """Notes sharing ``tag`` with the focal note."""

    model_config = ConfigDict(frozen=True)

    tag: str
    members: list[LinkRef]
