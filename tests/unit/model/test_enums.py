import logging

import pytest

from textattrs.model.enums import (
    DEFAULT_SCALING,
    DEFAULT_STRETCH,
    DEFAULT_STYLE,
    DEFAULT_WEIGHT,
    FamilyKind,
    Stretch,
    Style,
    Weight,
)


def test_defaults() -> None:
    assert DEFAULT_STRETCH is Stretch.NORMAL
    assert DEFAULT_STYLE is Style.NORMAL
    assert DEFAULT_WEIGHT == Weight.NORMAL
    assert DEFAULT_SCALING == 1.0


def test_stretch_numbering_and_percentage() -> None:
    assert [s.value for s in Stretch] == list(range(1, 10))
    assert Stretch.NORMAL.percentage == 100.0
    assert Stretch.ULTRA_CONDENSED.percentage == 50.0
    assert Stretch.ULTRA_EXPANDED.percentage == 200.0


def test_stretch_localization() -> None:
    assert Stretch.SEMI_CONDENSED.localized_name("en") == "Semi Condensed"
    assert Stretch.SEMI_CONDENSED.localized_name("ru") == "Полусжатый"
    assert Stretch.EXPANDED.localized_name() == "Широкий"
    ru_names = [s.localized_name("ru") for s in Stretch]
    assert len(set(ru_names)) == len(ru_names)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("semi-condensed", Stretch.SEMI_CONDENSED),
        ("SemiCondensed", Stretch.SEMI_CONDENSED),
        ("SEMI_CONDENSED", Stretch.SEMI_CONDENSED),
        (" ultra expanded ", Stretch.ULTRA_EXPANDED),
        ("normal", Stretch.NORMAL),
    ],
)
def test_stretch_from_name(name: str, expected: Stretch) -> None:
    assert Stretch.from_name(name) is expected


def test_stretch_from_unknown_name() -> None:
    with pytest.raises(ValueError, match="Unknown stretch name"):
        Stretch.from_name("squashed")


def test_style_props_and_localization() -> None:
    assert not Style.NORMAL.is_slanted
    assert Style.ITALIC.is_slanted
    assert Style.OBLIQUE.is_slanted
    assert Style.ITALIC.localized_name("ru") == "Курсив"
    assert Style.ITALIC.localized_name("en") == "Italic"


class TestWeight:
    """Weight value type"""

    def test_named_constants(self) -> None:
        assert [w.value for w in Weight.named()] == list(range(100, 1000, 100))
        assert Weight.SEMIBOLD == Weight(600)
        assert Weight.BOLD.name == "BOLD"

    @pytest.mark.parametrize("value", [1, 350, 450, 1000])
    def test_any_value_in_range(self, value: int) -> None:
        weight = Weight(value)
        assert weight.value == value
        assert int(weight) == value

    @pytest.mark.parametrize("bad", [0, 1001, -5])
    def test_out_of_range(self, bad: int) -> None:
        with pytest.raises(ValueError):
            Weight(bad)

    @pytest.mark.parametrize("bad", ["400", True, 400.0])
    def test_wrong_type(self, bad: object) -> None:
        with pytest.raises(TypeError):
            Weight(bad)  # type: ignore[arg-type]

    def test_value_semantics(self) -> None:
        assert Weight(450) == Weight(450)
        assert hash(Weight(450)) == hash(Weight(450))
        assert Weight(450) != Weight.NORMAL
        assert Weight.LIGHT < Weight(350) < Weight.NORMAL
        with pytest.raises(AttributeError):
            Weight.NORMAL.value = 500  # type: ignore[misc]

    def test_unnamed_weight(self) -> None:
        weight = Weight(350)
        assert weight.name is None
        assert repr(weight) == "Weight(350)"
        assert repr(Weight.BOLD) == "Weight.BOLD"
        assert weight.localized_name("en") == "350"
        assert weight.localized_name("ru") == "350"

    def test_bold_and_localization(self) -> None:
        assert Weight.BOLD.is_bold
        assert Weight.SEMIBOLD.is_bold
        assert Weight(650).is_bold
        assert not Weight(599).is_bold
        assert not Weight.MEDIUM.is_bold
        assert Weight.EXTRA_BOLD.localized_name("en") == "Extra Bold"
        assert Weight.EXTRA_BOLD.localized_name("ru") == "Сверхжирный"
        assert Weight.NORMAL.localized_name() == "Обычный"

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("semibold", Weight.SEMIBOLD),
            ("semi-bold", Weight.SEMIBOLD),
            ("Semi Bold", Weight.SEMIBOLD),
            ("SEMI_BOLD", Weight.SEMIBOLD),
            ("extra-bold", Weight.EXTRA_BOLD),
            ("ExtraLight", Weight.EXTRA_LIGHT),
            ("regular", Weight.NORMAL),
            ("  Black ", Weight.BLACK),
        ],
    )
    def test_from_name(self, name: str, expected: Weight) -> None:
        assert Weight.from_name(name) is expected

    def test_from_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown weight name"):
            Weight.from_name("featherweight")

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, Weight.THIN),
            (100, Weight.THIN),
            (149, Weight.THIN),
            (150, Weight.THIN),
            (151, Weight.EXTRA_LIGHT),
            (350, Weight.LIGHT),
            (400, Weight.NORMAL),
            (450, Weight.NORMAL),
            (950, Weight.BLACK),
            (1000, Weight.BLACK),
        ],
    )
    def test_nearest(self, value: int, expected: Weight) -> None:
        assert Weight.nearest(value) is expected

    def test_nearest_logs_snapping(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="textattrs.model.enums"):
            Weight.nearest(450)
        assert "Weight 450 snapped to NORMAL" in caplog.text

    @pytest.mark.parametrize("bad", [0, 1001, -5])
    def test_nearest_range(self, bad: int) -> None:
        with pytest.raises(ValueError):
            Weight.nearest(bad)

    def test_nearest_type(self) -> None:
        with pytest.raises(TypeError):
            Weight.nearest("400")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            Weight.nearest(True)


def test_family_kind_generic() -> None:
    assert not FamilyKind.NAME.is_generic
    assert all(k.is_generic for k in FamilyKind if k is not FamilyKind.NAME)
    assert FamilyKind("sans-serif") is FamilyKind.SANS_SERIF
