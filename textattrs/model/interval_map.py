"""
Интервальное отображение: непересекающиеся полуоткрытые диапазоны -> значения.

EN: Ordered map from disjoint half-open integer ranges to values, with
overwrite-on-insert semantics. Storage is three parallel sorted lists
(starts, stops, values) searched with ``bisect``; point lookups are
O(log n), inserts cost O(log n) plus the entries they touch and the list
shift.

Keys are plain ``range`` objects with step 1, e.g. ``range(3, 8)`` is [3, 8).
"""

import logging
from bisect import bisect_left, bisect_right
from typing import Final, Generic, Iterator, List, Optional, Tuple, TypeVar

logger: Final = logging.getLogger(__name__)

V = TypeVar("V")


class IntervalMapInvariantError(AssertionError):
    """Caller bookkeeping referenced a key that is not in the map."""


def _check_key(key: range) -> None:
    if not isinstance(key, range):
        raise TypeError(f"Key must be range, got {type(key).__name__}")
    if key.step != 1:
        raise ValueError(f"Key range must have step 1, got {key.step}")
    if key.start >= key.stop:
        raise ValueError(f"Key range must be non-empty, got [{key.start}, {key.stop})")


class IntervalMap(Generic[V]):
    """
    Disjoint half-open ranges mapped to values.

    Invariants (hold after every public call):
        - ``_starts`` is strictly increasing;
        - ``_starts[i] < _stops[i] <= _starts[i + 1]``;
        - all three lists have the same length.

    Example:
        >>> m: IntervalMap[str] = IntervalMap()
        >>> m.insert(range(0, 5), "b")
        >>> m.insert(range(3, 8), "c")
        >>> list(m)
        [(range(0, 3), 'b'), (range(3, 8), 'c')]
    """

    __slots__ = ("_starts", "_stops", "_values")

    def __init__(self) -> None:
        self._starts: List[int] = []
        self._stops: List[int] = []
        self._values: List[V] = []

    def _index_of(self, point: int) -> int:
        """Index of the entry containing ``point``, or -1."""
        i = bisect_right(self._starts, point) - 1
        if i >= 0 and point < self._stops[i]:
            return i
        return -1

    def insert(self, key: range, value: V) -> None:
        """
        Map every point of ``key`` to ``value``.

        Overlapped entries are trimmed to what lies outside ``key``; an entry
        covering ``key`` on both sides is split in two. The new entry is
        stored on its own even when a neighbour holds an equal value.

        Raises:
            TypeError: If ``key`` is not a range.
            ValueError: If ``key`` is empty or has a step other than 1.
        """
        _check_key(key)
        start, stop = key.start, key.stop

        # Entries lo..hi-1 overlap [start, stop): stop > start and start < stop.
        lo = bisect_right(self._stops, start)
        hi = bisect_left(self._starts, stop)

        new_starts = [start]
        new_stops = [stop]
        new_values = [value]
        if lo < hi:
            if self._starts[lo] < start:
                new_starts.insert(0, self._starts[lo])
                new_stops.insert(0, start)
                new_values.insert(0, self._values[lo])
            if self._stops[hi - 1] > stop:
                new_starts.append(stop)
                new_stops.append(self._stops[hi - 1])
                new_values.append(self._values[hi - 1])

        self._starts[lo:hi] = new_starts
        self._stops[lo:hi] = new_stops
        self._values[lo:hi] = new_values
        logger.debug(f"insert [{start}, {stop}): replaced {hi - lo} entries")

    def get(self, point: int) -> Optional[V]:
        i = self._index_of(point)
        return self._values[i] if i >= 0 else None

    def get_key_value(self, point: int) -> Optional[Tuple[range, V]]:
        """Return the exact stored range containing ``point`` and its value."""
        i = self._index_of(point)
        if i < 0:
            return None
        return range(self._starts[i], self._stops[i]), self._values[i]

    def remove(self, key: range) -> None:
        """
        Delete the entry whose range equals ``key`` exactly.

        Raises:
            IntervalMapInvariantError: If no entry has exactly this range.
                Keys must come from enumerating this same map, so a miss
                means the caller's bookkeeping is broken.
            TypeError: If ``key`` is not a range.
            ValueError: If ``key`` is empty or has a step other than 1.
        """
        _check_key(key)
        i = bisect_left(self._starts, key.start)
        if i >= len(self._starts) or self._starts[i] != key.start or self._stops[i] != key.stop:
            logger.error(f"remove: no entry with key [{key.start}, {key.stop})")
            raise IntervalMapInvariantError(
                f"Interval map has no entry with key [{key.start}, {key.stop})"
            )
        del self._starts[i]
        del self._stops[i]
        del self._values[i]

    def iterate(self) -> Iterator[Tuple[range, V]]:
        """Iterate over a snapshot of (range, value) pairs in ascending order."""
        snapshot = [
            (range(s, e), v) for s, e, v in zip(self._starts, self._stops, self._values)
        ]
        return iter(snapshot)

    def clear(self) -> None:
        self._starts.clear()
        self._stops.clear()
        self._values.clear()

    def copy(self) -> "IntervalMap[V]":
        """Shallow copy: the values themselves are shared."""
        other: IntervalMap[V] = IntervalMap()
        other._starts = list(self._starts)
        other._stops = list(self._stops)
        other._values = list(self._values)
        return other

    def __iter__(self) -> Iterator[Tuple[range, V]]:
        return self.iterate()

    def __len__(self) -> int:
        return len(self._starts)

    def __bool__(self) -> bool:
        return bool(self._starts)

    def __contains__(self, point: object) -> bool:
        if not isinstance(point, int):
            return False
        return self._index_of(point) >= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntervalMap):
            return NotImplemented
        return (
            self._starts == other._starts
            and self._stops == other._stops
            and self._values == other._values
        )

    def __repr__(self) -> str:
        items = ", ".join(
            f"[{s}, {e}): {v!r}" for s, e, v in zip(self._starts, self._stops, self._values)
        )
        return f"IntervalMap({{{items}}})"
