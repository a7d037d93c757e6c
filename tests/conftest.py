import pytest

from tests.fakes import FakeVault
from twohop.config import Settings
from twohop.domain.note import NoteMetadata
from twohop.vault.local import LocalVault


def note(path: str, links: list[str] | None = None, tags: list[str] | None = None) -> NoteMetadata:
    return NoteMetadata(path=path, links=links, tags=tags)


@pytest.fixture
def default_settings() -> Settings:
    return Settings()


@pytest.fixture
def dedup_settings() -> Settings:
    return Settings(excludes_duplicate_links=True)


@pytest.fixture
def cycle_vault() -> FakeVault:
    """Three notes linking in a cycle: A -> B -> C -> A."""
    return FakeVault(
        resolved={
            "A.md": {"B.md": 1},
            "B.md": {"C.md": 1},
            "C.md": {"A.md": 1},
        },
        unresolved={"A.md": {}, "B.md": {}, "C.md": {}},
        file_caches={
            "A.md": note("A.md", ["B"]),
            "B.md": note("B.md", ["C"]),
            "C.md": note("C.md", ["A"]),
        },
    )


@pytest.fixture
def shared_target_vault() -> FakeVault:
    """A links B, B links D, and the backlink C links both A and D."""
    return FakeVault(
        resolved={
            "A.md": {"B.md": 1},
            "B.md": {"D.md": 1},
            "C.md": {"A.md": 1, "D.md": 1},
            "D.md": {},
        },
        unresolved={"A.md": {}, "B.md": {}, "C.md": {}, "D.md": {}},
        file_caches={
            "A.md": note("A.md", ["B"]),
            "B.md": note("B.md", ["D"]),
            "C.md": note("C.md", ["A", "D"]),
            "D.md": note("D.md", []),
        },
    )


@pytest.fixture
def project_notes() -> dict[str, str]:
    """Markdown content of a small project vault."""
    return {
        "Home.md": (
            "---\ntags: [project]\n---\n"
            "# Home\n\n"
            "Start at [[Plan]] and [[Ideas]], see also [[Plan#^goals|goals]].\n"
            "![[diagram.png]]\n"
        ),
        "Plan.md": "# Plan\n\nThe plan links [[Tasks]] and [[Home]].\n#project\n",
        "Tasks.md": "# Tasks\n\nTracked for [[Plan]] and [[Ideas]].\n",
        "Journal/Today.md": "Worked on [[Home]] and [[Tasks]] today. #project #daily\n",
        "Archive.md": "Old [[Tasks]] and [[Ideas]]. #daily\n",
    }


@pytest.fixture
def project_vault(project_notes: dict[str, str]) -> LocalVault:
    return LocalVault.from_data(notes=project_notes, resources={"diagram.png": b"png"})
