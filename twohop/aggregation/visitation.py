"""Per-pass bookkeeping of notes already shown in some group."""


class VisitationContext:
    """Paths already claimed by an earlier group during one aggregation pass.

    Created fresh for every pass and handed to each stage in order (backlinks,
    unresolved two-hop, resolved two-hop, backlink two-hop). The first stage
    to claim a path keeps it.
    """

    def __init__(self) -> None:
        self._visited: set[str] = set()

    def __contains__(self, path: object) -> bool:
        return path in self._visited

    def __len__(self) -> int:
        return len(self._visited)

    def mark(self, path: str) -> None:
        """Record ``path`` as linked without checking."""
        self._visited.add(path)

    def claim(self, path: str) -> bool:
        """Record ``path`` and return True if nobody claimed it before."""
        if path in self._visited:
            return False
        self._visited.add(path)
        return True
