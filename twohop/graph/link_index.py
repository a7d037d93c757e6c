"""Adjacency view over a whole-vault link map."""

from typing import Iterator, Mapping

LinkMap = Mapping[str, Mapping[str, int]]


class LinkIndex:
    """Read-only adjacency map of ``source path -> {destination: count}``.

    Wraps the resolved or unresolved link map of a vault snapshot. The reverse
    index backing ``edges_to`` is built on first use and reused afterwards, so
    one instance should be shared by every stage of an aggregation pass.
    """

    def __init__(self, links: LinkMap) -> None:
        self._links = links
        self._reverse: dict[str, list[str]] | None = None

    def __contains__(self, path: object) -> bool:
        return path in self._links and self._links[path] is not None  # type: ignore[index]

    def destinations(self, path: str) -> list[str]:
        """Destinations of ``path`` in snapshot order, empty if unknown."""
        return [dest for dest, _ in self.edges_from(path)]

    def edges_from(self, path: str) -> Iterator[tuple[str, int]]:
        """Iterate ``(destination, count)`` pairs leaving ``path``."""
        destinations = self._links.get(path) or {}
        return iter(destinations.items())

    def edges_to(self, path: str) -> list[str]:
        """Sources linking to ``path``, in snapshot order."""
        if self._reverse is None:
            self._reverse = self._build_reverse_index()
        return self._reverse.get(path, [])

    def edges(self) -> Iterator[tuple[str, str]]:
        """Iterate every ``(source, destination)`` edge in snapshot order."""
        for src in self._links:
            for dest, _ in self.edges_from(src):
                yield src, dest

    def _build_reverse_index(self) -> dict[str, list[str]]:
        reverse: dict[str, list[str]] = {}
        for src, dest in self.edges():
            reverse.setdefault(dest, []).append(src)
        return reverse
