"""A small weighted graph of lettered vertices with shortest-path search."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

VERTEX_COUNT = 5
MAX_VERTICES = 26
INT_MAX = 2**31 - 1


def _letter(index: int) -> str:
    return chr(ord("A") + index)


def _chain(parent: Sequence[int], vertex: int) -> tuple[int, ...]:
    """Return the vertices from the root of ``parent`` down to ``vertex``."""
    chain = []
    seen = set()
    current = vertex
    while current != -1:
        if current in seen:
            raise ValueError(f"parent links loop at vertex {_letter(current)}")
        if not 0 <= current < len(parent):
            raise IndexError(f"vertex {current} is outside the parent list")
        seen.add(current)
        chain.append(current)
        current = parent[current]
    return tuple(reversed(chain))


def format_path(parent: Sequence[int], vertex: int) -> str:
    """Spell the path to ``vertex`` as space-separated letters.

    ``parent`` gives each vertex's predecessor, with ``-1`` marking the start.
    """
    return " ".join(_letter(v) for v in _chain(parent, vertex))


@dataclass(frozen=True)
class PathEntry:
    """The shortest route from the start vertex to one vertex.

    ``distance``, ``previous`` are None and ``path`` is empty when the
    vertex cannot be reached; the start itself has no ``previous``.
    """

    vertex: int
    distance: int | None
    previous: int | None
    path: tuple[int, ...]

    @property
    def name(self) -> str:
        """The vertex's letter."""
        return _letter(self.vertex)

    @property
    def reachable(self) -> bool:
        """Whether a path from the start exists."""
        return self.distance is not None


class Graph:
    """A graph given by a square adjacency matrix of integer weights; 0 means no edge."""

    def __init__(self, matrix: Sequence[Sequence[int]]) -> None:
        rows = [tuple(int(w) for w in row) for row in matrix]
        size = len(rows)
        if not 0 < size <= MAX_VERTICES:
            raise ValueError(f"a graph needs 1 to {MAX_VERTICES} vertices, got {size}")
        if any(len(row) != size for row in rows):
            raise ValueError("adjacency matrix must be square")
        self.matrix: tuple[tuple[int, ...], ...] = tuple(rows)

    @property
    def size(self) -> int:
        """The number of vertices."""
        return len(self.matrix)

    @classmethod
    def from_file(cls, path) -> "Graph":
        """Read a 5x5 matrix from the first 25 whitespace-separated integers of a file."""
        words = Path(path).read_text(encoding="utf-8").split()
        needed = VERTEX_COUNT * VERTEX_COUNT
        if len(words) < needed:
            raise ValueError(f"{path} holds {len(words)} numbers, {needed} are needed")
        try:
            values = [int(word) for word in words[:needed]]
        except ValueError as exc:
            raise ValueError(f"{path} holds a value that is not an integer") from exc
        return cls(
            [values[row * VERTEX_COUNT : (row + 1) * VERTEX_COUNT] for row in range(VERTEX_COUNT)]
        )

    def asymmetric_pairs(self) -> list[tuple[int, int]]:
        """Return, for each row ``i``, the first ``(i, j)`` whose weight differs from ``(j, i)``."""
        pairs = []
        for i, row in enumerate(self.matrix):
            mismatch = next((j for j, w in enumerate(row) if w != self.matrix[j][i]), None)
            if mismatch is not None:
                pairs.append((i, mismatch))
        return pairs

    def edges(self) -> list[tuple[int, int, int]]:
        """Return ``(a, b, weight)`` for each pair ``a < b`` linked in both directions."""
        return [
            (a, b, self.matrix[a][b])
            for a in range(self.size)
            for b in range(a + 1, self.size)
            if self.matrix[a][b] != 0 and self.matrix[b][a] != 0
        ]

    def _closest(self, distances: list[int], visited: list[bool]) -> int:
        best = INT_MAX
        index = 0
        for i, (dist, done) in enumerate(zip(distances, visited)):
            if not done and dist <= best:
                best = dist
                index = i
        return index

    def shortest_paths(self, start: int = 0) -> list[PathEntry]:
        """Run Dijkstra's search from ``start`` and return one entry per vertex."""
        n = self.size
        if not 0 <= start < n:
            raise IndexError(f"start vertex {start} is outside 0..{n - 1}")
        distances = [INT_MAX] * n
        visited = [False] * n
        parent = [0] * n
        distances[start] = 0
        parent[start] = -1

        for _ in range(n - 1):
            u = self._closest(distances, visited)
            visited[u] = True
            if distances[u] == INT_MAX:
                continue
            for j, weight in enumerate(self.matrix[u]):
                if not visited[j] and weight and distances[u] + weight < distances[j]:
                    distances[j] = distances[u] + weight
                    parent[j] = u

        entries = []
        for v in range(n):
            if distances[v] == INT_MAX:
                entries.append(PathEntry(v, None, None, ()))
            elif v == start:
                entries.append(PathEntry(v, 0, None, (start,)))
            else:
                entries.append(PathEntry(v, distances[v], parent[v], _chain(parent, v)))
        return entries