"""Read-only view over several sequences laid end to end."""

from bisect import bisect_right
from collections.abc import Iterator, Sequence
from itertools import accumulate, chain
from typing import TypeVar

T = TypeVar("T")


class ListConcatenation(Sequence[T]):
    """Concatenation of sequences without copying their elements.

    Indexing locates the source sequence by binary search over the cumulative
    lengths taken at construction, so the sources must not change size.
    """

    def __init__(self, sources: Sequence[Sequence[T]]) -> None:
        self._sources = tuple(sources)
        self._ends = tuple(accumulate(len(s) for s in self._sources))

    def __len__(self) -> int:
        return self._ends[-1] if self._ends else 0

    def __getitem__(self, index):  # type: ignore[override]
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        if index < 0:
            index += len(self)
        source, local = self.locate(index)
        return self._sources[source][local]

    def __iter__(self) -> Iterator[T]:
        return chain.from_iterable(self._sources)

    def locate(self, index: int) -> tuple[int, int]:
        """(source position, index within that source) of a global index."""
        if not 0 <= index < len(self):
            raise IndexError(f"index {index} out of range for length {len(self)}")
        source = bisect_right(self._ends, index)
        start = self._ends[source - 1] if source else 0
        return source, index - start
