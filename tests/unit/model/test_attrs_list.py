"""
Tests for textattrs/model/attrs_list.py

AttrsList: default fallback, overwrite spans, empty-range no-op, split_off
decomposition law, runs for shaping, serialization.
"""

import logging
import random
from typing import List, Tuple

import pytest

from textattrs.model.attrs import Attrs
from textattrs.model.attrs_list import AttrsList
from textattrs.model.color import Color
from textattrs.model.enums import Style, Weight
from textattrs.model.family import Family
from textattrs.model.interval_map import IntervalMap, IntervalMapInvariantError

A = Attrs()
B = Attrs().with_weight(Weight.BOLD)
C = Attrs().with_style(Style.ITALIC)
D = Attrs().with_color(Color.rgb(255, 0, 0))


def _spans(attrs_list: AttrsList) -> List[Tuple[Tuple[int, int], Attrs]]:
    return [((r.start, r.stop), a) for r, a in attrs_list.spans()]


@pytest.fixture
def scenario() -> AttrsList:
    attrs_list = AttrsList(A)
    attrs_list.add_span(range(0, 5), B)
    attrs_list.add_span(range(3, 8), C)
    return attrs_list


class TestBasics:
    """Construction, defaults, add_span/get_span"""

    def test_new_list_is_empty(self) -> None:
        attrs_list = AttrsList(A)
        assert attrs_list.defaults() == A
        assert attrs_list.spans() == []

    def test_defaults_type_checked(self) -> None:
        with pytest.raises(TypeError):
            AttrsList("not attrs")  # type: ignore[arg-type]

    def test_scenario_spans(self, scenario: AttrsList) -> None:
        assert _spans(scenario) == [((0, 3), B), ((3, 8), C)]

    def test_scenario_lookups(self, scenario: AttrsList) -> None:
        assert scenario.get_span(2) == B
        assert scenario.get_span(3) == C
        assert scenario.get_span(7) == C
        assert scenario.get_span(8) == A
        assert scenario.get_span(10) == A

    def test_empty_range_is_noop(self, scenario: AttrsList) -> None:
        before = scenario.spans()
        scenario.add_span(range(4, 4), D)
        scenario.add_span(range(0, 0), D)
        assert scenario.spans() == before

    def test_empty_range_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        attrs_list = AttrsList(A)
        with caplog.at_level(logging.DEBUG, logger="textattrs.model.attrs_list"):
            attrs_list.add_span(range(1, 1), B)
        assert "ignoring empty range" in caplog.text

    @pytest.mark.parametrize("bad", [range(-1, 3), range(5, 2)])
    def test_invalid_ranges(self, bad: range) -> None:
        attrs_list = AttrsList(A)
        with pytest.raises(ValueError):
            attrs_list.add_span(bad, B)

    def test_add_span_type_errors(self) -> None:
        attrs_list = AttrsList(A)
        with pytest.raises(TypeError):
            attrs_list.add_span((0, 3), B)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            attrs_list.add_span(range(0, 3), "bold")  # type: ignore[arg-type]

    def test_clear_spans_keeps_defaults(self, scenario: AttrsList) -> None:
        scenario.clear_spans()
        assert scenario.spans() == []
        assert scenario.defaults() == A
        assert scenario.get_span(2) == A

    def test_spans_is_snapshot(self, scenario: AttrsList) -> None:
        snapshot = scenario.spans()
        scenario.clear_spans()
        assert len(snapshot) == 2

    def test_last_write_wins_random(self) -> None:
        rng = random.Random(7)
        palette = [A, B, C, D, Attrs().with_family(Family.monospace())]
        attrs_list = AttrsList(A)
        model = [A] * 40
        for _ in range(200):
            start = rng.randrange(0, 40)
            stop = rng.randrange(start, 41)
            value = rng.choice(palette)
            attrs_list.add_span(range(start, stop), value)
            for i in range(start, stop):
                model[i] = value
            keys = [r for r, _ in attrs_list.spans()]
            assert all(r.start < r.stop for r in keys)
            assert all(a.stop <= b.start for a, b in zip(keys, keys[1:]))
        for i in range(45):
            assert attrs_list.get_span(i) == (model[i] if i < 40 else A)


class TestSplitOff:
    """split_off at various offsets"""

    def test_scenario_split(self, scenario: AttrsList) -> None:
        new = scenario.split_off(5)
        assert _spans(scenario) == [((0, 3), B), ((3, 5), C)]
        assert _spans(new) == [((0, 3), C)]
        assert new.defaults() == scenario.defaults()

    def test_split_at_zero_moves_everything(self, scenario: AttrsList) -> None:
        original = _spans(scenario)
        new = scenario.split_off(0)
        assert scenario.spans() == []
        assert _spans(new) == original

    def test_split_past_end_moves_nothing(self, scenario: AttrsList) -> None:
        original = _spans(scenario)
        new = scenario.split_off(100)
        assert _spans(scenario) == original
        assert new.spans() == []

    def test_split_on_span_boundary(self, scenario: AttrsList) -> None:
        new = scenario.split_off(3)
        assert _spans(scenario) == [((0, 3), B)]
        assert _spans(new) == [((0, 5), C)]

    def test_split_inside_gap(self) -> None:
        attrs_list = AttrsList(A)
        attrs_list.add_span(range(0, 2), B)
        attrs_list.add_span(range(6, 9), C)
        new = attrs_list.split_off(4)
        assert _spans(attrs_list) == [((0, 2), B)]
        assert _spans(new) == [((2, 5), C)]

    def test_split_negative_index(self, scenario: AttrsList) -> None:
        with pytest.raises(ValueError):
            scenario.split_off(-1)

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_decomposition_law(self, seed: int) -> None:
        rng = random.Random(seed)
        palette = [B, C, D]
        attrs_list = AttrsList(A)
        for _ in range(25):
            start = rng.randrange(0, 50)
            attrs_list.add_span(range(start, rng.randrange(start, 51)), rng.choice(palette))
        before = [attrs_list.get_span(i) for i in range(60)]
        index = rng.randrange(0, 55)

        new = attrs_list.split_off(index)

        for i in range(60):
            if i < index:
                assert attrs_list.get_span(i) == before[i]
            else:
                assert new.get_span(i - index) == before[i]
        assert all(r.stop <= index for r, _ in attrs_list.spans())

    def test_split_bookkeeping_failure_leaves_list_untouched(
        self, scenario: AttrsList, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        original = _spans(scenario)
        monkeypatch.setattr(IntervalMap, "get_key_value", lambda self, point: None)
        with pytest.raises(IntervalMapInvariantError):
            scenario.split_off(4)
        monkeypatch.undo()
        assert _spans(scenario) == original


class TestRuns:
    """runs / shaping_runs"""

    def test_runs_fill_gaps_with_defaults(self) -> None:
        attrs_list = AttrsList(A)
        attrs_list.add_span(range(2, 4), B)
        attrs_list.add_span(range(6, 12), C)
        runs = [((r.start, r.stop), a) for r, a in attrs_list.runs(10)]
        assert runs == [((0, 2), A), ((2, 4), B), ((4, 6), A), ((6, 10), C)]

    def test_runs_empty_line(self, scenario: AttrsList) -> None:
        assert scenario.runs(0) == []

    def test_runs_without_spans(self) -> None:
        assert AttrsList(A).runs(5) == [(range(0, 5), A)]

    def test_runs_negative_length(self) -> None:
        with pytest.raises(ValueError):
            AttrsList(A).runs(-1)

    def test_shaping_runs_merge_color_only_changes(self) -> None:
        attrs_list = AttrsList(A)
        attrs_list.add_span(range(0, 3), D)
        attrs_list.add_span(range(5, 7), A.with_metadata(9))
        attrs_list.add_span(range(7, 9), B)
        runs = [((r.start, r.stop), a) for r, a in attrs_list.shaping_runs(10)]
        assert runs == [((0, 7), D), ((7, 9), B), ((9, 10), A)]


class TestCopyEqSerialization:
    def test_copy_is_independent(self, scenario: AttrsList) -> None:
        clone = scenario.copy()
        assert clone == scenario
        clone.add_span(range(0, 10), D)
        assert clone != scenario
        assert _spans(scenario) == [((0, 3), B), ((3, 8), C)]

    def test_eq_considers_defaults(self) -> None:
        assert AttrsList(A) == AttrsList(A)
        assert AttrsList(A) != AttrsList(B)
        assert AttrsList(A).__eq__("x") is NotImplemented

    def test_to_dict_from_dict(self, scenario: AttrsList) -> None:
        data = scenario.to_dict()
        assert data["spans"][0]["start"] == 0
        assert data["spans"][0]["end"] == 3
        restored = AttrsList.from_dict(data)
        assert restored == scenario

    def test_from_dict_errors(self) -> None:
        with pytest.raises(TypeError):
            AttrsList.from_dict([])  # type: ignore[arg-type]
        with pytest.raises(KeyError):
            AttrsList.from_dict({"spans": []})

    def test_from_config(self) -> None:
        attrs_list = AttrsList.from_config({"default_family": "monospace", "default_weight": 700})
        assert attrs_list.defaults().family == Family.monospace()
        assert attrs_list.defaults().weight == Weight.BOLD

    def test_repr(self, scenario: AttrsList) -> None:
        assert repr(scenario).startswith("AttrsList(spans=2")
