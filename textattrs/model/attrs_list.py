"""
Список атрибутов строки (AttrsList): значения по умолчанию + переопределения по диапазонам.

EN: Attribute assignment for one line of text. A default ``Attrs`` applies
everywhere except where a span overrides it; spans never overlap and later
spans overwrite earlier ones. When the layout engine splits a line,
``split_off`` splits the attribute list the same way.

Offsets are byte offsets into the line's text buffer.
"""

import logging
from typing import Any, Dict, Final, List, Mapping, Optional, Tuple

from .attrs import Attrs
from .interval_map import IntervalMap, IntervalMapInvariantError

logger: Final = logging.getLogger(__name__)

Span = Tuple[range, Attrs]


class AttrsList:
    """
    Default attributes plus non-overlapping attribute spans for one line.

    Example:
        >>> attrs_list = AttrsList(Attrs())
        >>> attrs_list.add_span(range(0, 5), Attrs().with_weight(Weight.BOLD))
        >>> attrs_list.get_span(2).weight
        Weight.BOLD
        >>> attrs_list.get_span(7) == attrs_list.defaults()
        True
    """

    __slots__ = ("_defaults", "_spans")

    def __init__(self, defaults: Attrs) -> None:
        if not isinstance(defaults, Attrs):
            raise TypeError(f"defaults must be Attrs, got {type(defaults).__name__}")
        self._defaults: Attrs = defaults
        self._spans: IntervalMap[Attrs] = IntervalMap()

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "AttrsList":
        """Empty list whose defaults come from a loaded configuration."""
        return cls(Attrs.from_config(config))

    def defaults(self) -> Attrs:
        return self._defaults

    def spans(self) -> List[Span]:
        """Snapshot of the current spans, ascending by start."""
        return list(self._spans.iterate())

    def clear_spans(self) -> None:
        self._spans.clear()

    def add_span(self, span_range: range, attrs: Attrs) -> None:
        """
        Apply ``attrs`` to ``span_range``, replacing whatever covered it before.

        An empty range (start == end) is ignored. Attributes outside the range
        are left alone.

        Raises:
            TypeError: If arguments have the wrong types.
            ValueError: If the range is negative, reversed or stepped.
        """
        if not isinstance(span_range, range):
            raise TypeError(f"span_range must be range, got {type(span_range).__name__}")
        if not isinstance(attrs, Attrs):
            raise TypeError(f"attrs must be Attrs, got {type(attrs).__name__}")
        if span_range.start < 0:
            raise ValueError(f"Span start must be >= 0, got {span_range.start}")
        if span_range.start > span_range.stop:
            raise ValueError(
                f"Span start after end: [{span_range.start}, {span_range.stop})"
            )

        # 1..1 is never stored, even by accident
        if span_range.start == span_range.stop:
            logger.debug(f"add_span: ignoring empty range at {span_range.start}")
            return

        self._spans.insert(span_range, attrs)

    def get_span(self, index: int) -> Attrs:
        """Attributes in effect at byte ``index``."""
        attrs = self._spans.get(index)
        return attrs if attrs is not None else self._defaults

    def split_off(self, index: int) -> "AttrsList":
        """
        Split at byte ``index``.

        Offsets [0, index) stay in this list; offsets from ``index`` on move to
        the returned list, renumbered from 0. A span straddling ``index`` is cut
        in two. The new list gets the same defaults.

        Raises:
            ValueError: If ``index`` is negative.
            IntervalMapInvariantError: If span bookkeeping is inconsistent;
                raised before anything is modified.
        """
        if index < 0:
            raise ValueError(f"Split index must be >= 0, got {index}")

        new = AttrsList(self._defaults)

        # Keys to move, and whether the span straddles the split point.
        removes: List[Tuple[range, bool]] = []
        for key, _ in self._spans.iterate():
            if key.stop <= index:
                continue
            elif key.start >= index:
                removes.append((key, False))
            else:
                removes.append((key, True))

        # Resolve every key before touching the map.
        resolved: List[Tuple[range, bool, Attrs]] = []
        for key, resize in removes:
            found: Optional[Tuple[range, Attrs]] = self._spans.get_key_value(key.start)
            if found is None or found[0] != key:
                logger.error(
                    f"split_off({index}): attrs span [{key.start}, {key.stop}) not found"
                )
                raise IntervalMapInvariantError("attrs span not found")
            resolved.append((found[0], resize, found[1]))

        for span_range, resize, attrs in resolved:
            self._spans.remove(span_range)
            if resize:
                new._spans.insert(range(0, span_range.stop - index), attrs)
                self._spans.insert(range(span_range.start, index), attrs)
            else:
                new._spans.insert(
                    range(span_range.start - index, span_range.stop - index), attrs
                )

        logger.debug(
            f"split_off({index}): kept {len(self._spans)} spans, moved {len(new._spans)}"
        )
        return new

    def runs(self, length: int) -> List[Span]:
        """
        Contiguous runs covering [0, length).

        Gaps between spans are filled with the defaults; spans reaching past
        ``length`` are clipped.
        """
        if length < 0:
            raise ValueError(f"Length must be >= 0, got {length}")
        result: List[Span] = []
        pos = 0
        for key, attrs in self._spans.iterate():
            if key.start >= length:
                break
            if key.start > pos:
                result.append((range(pos, key.start), self._defaults))
            stop = min(key.stop, length)
            result.append((range(key.start, stop), attrs))
            pos = stop
        if pos < length:
            result.append((range(pos, length), self._defaults))
        return result

    def shaping_runs(self, length: int) -> List[Span]:
        """
        Like ``runs`` but adjacent runs that can be shaped together are merged.

        A merged run carries the attributes of its first piece; color and
        metadata differences do not break a run.
        """
        merged: List[Span] = []
        for key, attrs in self.runs(length):
            if merged and merged[-1][1].compatible(attrs):
                prev_range, prev_attrs = merged[-1]
                merged[-1] = (range(prev_range.start, key.stop), prev_attrs)
            else:
                merged.append((key, attrs))
        logger.debug(f"shaping_runs({length}): {len(merged)} runs")
        return merged

    def copy(self) -> "AttrsList":
        out = AttrsList(self._defaults)
        out._spans = self._spans.copy()
        return out

    def to_dict(self) -> Dict[str, Any]:
        return {
            "defaults": self._defaults.to_dict(),
            "spans": [
                {"start": key.start, "end": key.stop, "attrs": attrs.to_dict()}
                for key, attrs in self._spans.iterate()
            ],
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "AttrsList":
        if not isinstance(data, Mapping):
            raise TypeError(f"Expected mapping, got {type(data).__name__}")
        if "defaults" not in data:
            raise KeyError("Missing required key 'defaults' in attrs list data")
        out = AttrsList(Attrs.from_dict(data["defaults"]))
        for span in data.get("spans", []):
            out.add_span(
                range(int(span["start"]), int(span["end"])), Attrs.from_dict(span["attrs"])
            )
        return out

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttrsList):
            return NotImplemented
        return self._defaults == other._defaults and self._spans == other._spans

    def __repr__(self) -> str:
        return f"AttrsList(spans={len(self._spans)}, defaults={self._defaults!r})"
