"""
model/enums.py

(Кратко RU: Перечисления для атрибутов шрифта: ширина, начертание, насыщенность, семейство.)

EN: Font attribute enums used by the attribute model (stretch, style/slant,
weight, generic family kinds). Values follow the OpenType OS/2 conventions
so descriptors read from font files map onto them directly. ``Weight`` is a
small value type rather than an enum: any usWeightClass in 1..1000 is valid.

NO font matching strategy here!
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar, Dict, Final, Literal, Optional, Tuple

_logger: Final[logging.Logger] = logging.getLogger(__name__)


def _name_key(name: str) -> str:
    """Normalize a constant name: "Semi-Bold", "semi_bold", "SEMIBOLD" -> "semibold"."""
    key = name.strip().lower()
    for ch in " -_":
        key = key.replace(ch, "")
    return key


class Stretch(IntEnum):
    """Font width, numbered like OS/2 usWidthClass (1..9)."""

    ULTRA_CONDENSED = 1
    EXTRA_CONDENSED = 2
    CONDENSED = 3
    SEMI_CONDENSED = 4
    NORMAL = 5
    SEMI_EXPANDED = 6
    EXPANDED = 7
    EXTRA_EXPANDED = 8
    ULTRA_EXPANDED = 9

    @classmethod
    def from_name(cls, name: str) -> "Stretch":
        """Look up a width by name, ignoring case, spaces, hyphens and underscores."""
        key = _name_key(name)
        for member in cls:
            if _name_key(member.name) == key:
                return member
        raise ValueError(f"Unknown stretch name: {name!r}")

    @property
    def percentage(self) -> float:
        mapping = {
            1: 50.0,
            2: 62.5,
            3: 75.0,
            4: 87.5,
            5: 100.0,
            6: 112.5,
            7: 125.0,
            8: 150.0,
            9: 200.0,
        }
        return mapping[self.value]

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            Stretch.ULTRA_CONDENSED: "Сверхсжатый",
            Stretch.EXTRA_CONDENSED: "Очень сжатый",
            Stretch.CONDENSED: "Сжатый",
            Stretch.SEMI_CONDENSED: "Полусжатый",
            Stretch.NORMAL: "Обычный",
            Stretch.SEMI_EXPANDED: "Полуширокий",
            Stretch.EXPANDED: "Широкий",
            Stretch.EXTRA_EXPANDED: "Очень широкий",
            Stretch.ULTRA_EXPANDED: "Сверхширокий",
        }
        return names_ru[self] if lang == "ru" else self.name.replace("_", " ").title()


class Style(str, Enum):
    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"

    @property
    def is_slanted(self) -> bool:
        return self is not Style.NORMAL

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            self.NORMAL: "Обычный",
            self.ITALIC: "Курсив",
            self.OBLIQUE: "Наклонный",
        }
        return names_ru[self] if lang == "ru" else self.value.capitalize()


MIN_WEIGHT: Final[int] = 1
MAX_WEIGHT: Final[int] = 1000


@dataclass(frozen=True, slots=True, order=True)
class Weight:
    """
    Font weight, numbered like OS/2 usWeightClass.

    Any integer in 1..1000 is a valid weight (variable fonts use values such
    as 350 or 450). The nine CSS weight classes are available as class
    constants: ``Weight.THIN`` .. ``Weight.BLACK``.

    Attributes:
        value: Weight class number.
    """

    value: int

    THIN: ClassVar["Weight"]
    EXTRA_LIGHT: ClassVar["Weight"]
    LIGHT: ClassVar["Weight"]
    NORMAL: ClassVar["Weight"]
    MEDIUM: ClassVar["Weight"]
    SEMIBOLD: ClassVar["Weight"]
    BOLD: ClassVar["Weight"]
    EXTRA_BOLD: ClassVar["Weight"]
    BLACK: ClassVar["Weight"]

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"Weight value must be int, got {type(self.value).__name__}")
        if not MIN_WEIGHT <= self.value <= MAX_WEIGHT:
            raise ValueError(f"Weight value out of range 1..1000: {self.value}")

    @classmethod
    def named(cls) -> Tuple["Weight", ...]:
        """The nine named weight classes, lightest first."""
        return _NAMED_WEIGHTS

    @classmethod
    def from_name(cls, name: str) -> "Weight":
        """
        Look up a named weight class.

        Spelling is loose: "semibold", "semi-bold", "Semi Bold" and
        "SEMI_BOLD" all give ``Weight.SEMIBOLD``.

        Raises:
            ValueError: If the name is not a known weight class.
        """
        weight = _WEIGHTS_BY_KEY.get(_name_key(name))
        if weight is None:
            raise ValueError(f"Unknown weight name: {name!r}")
        return weight

    @classmethod
    def nearest(cls, value: int) -> "Weight":
        """
        Snap an arbitrary numeric weight class to the closest named weight.

        Ties resolve to the lighter weight. Values outside 1..1000 are rejected.
        """
        exact = cls(value)
        best = min(_NAMED_WEIGHTS, key=lambda w: (abs(w.value - exact.value), w.value))
        if best != exact:
            _logger.debug("Weight %d snapped to %s", value, best.name)
        return best

    @property
    def name(self) -> Optional[str]:
        """Constant name ("BOLD", ...) for the nine named classes, else None."""
        return _NAMES_BY_VALUE.get(self.value)

    @property
    def is_bold(self) -> bool:
        return self.value >= 600

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            100: "Тонкий",
            200: "Сверхсветлый",
            300: "Светлый",
            400: "Обычный",
            500: "Средний",
            600: "Полужирный",
            700: "Жирный",
            800: "Сверхжирный",
            900: "Чёрный",
        }
        if lang == "ru":
            return names_ru.get(self.value, str(self.value))
        name = self.name
        return name.replace("_", " ").title() if name else str(self.value)

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        name = self.name
        return f"Weight.{name}" if name else f"Weight({self.value})"


Weight.THIN = Weight(100)
Weight.EXTRA_LIGHT = Weight(200)
Weight.LIGHT = Weight(300)
Weight.NORMAL = Weight(400)
Weight.MEDIUM = Weight(500)
Weight.SEMIBOLD = Weight(600)
Weight.BOLD = Weight(700)
Weight.EXTRA_BOLD = Weight(800)
Weight.BLACK = Weight(900)

_NAMED_WEIGHTS: Final[Tuple[Weight, ...]] = (
    Weight.THIN,
    Weight.EXTRA_LIGHT,
    Weight.LIGHT,
    Weight.NORMAL,
    Weight.MEDIUM,
    Weight.SEMIBOLD,
    Weight.BOLD,
    Weight.EXTRA_BOLD,
    Weight.BLACK,
)
_NAMES_BY_VALUE: Final[Dict[int, str]] = {
    100: "THIN",
    200: "EXTRA_LIGHT",
    300: "LIGHT",
    400: "NORMAL",
    500: "MEDIUM",
    600: "SEMIBOLD",
    700: "BOLD",
    800: "EXTRA_BOLD",
    900: "BLACK",
}
_WEIGHTS_BY_KEY: Final[Dict[str, Weight]] = {
    **{_name_key(name): getattr(Weight, name) for name in _NAMES_BY_VALUE.values()},
    "regular": Weight.NORMAL,
}


class FamilyKind(str, Enum):
    NAME = "name"
    SERIF = "serif"
    SANS_SERIF = "sans-serif"
    CURSIVE = "cursive"
    FANTASY = "fantasy"
    MONOSPACE = "monospace"

    @property
    def is_generic(self) -> bool:
        return self is not FamilyKind.NAME


# === DEFAULTS ===
DEFAULT_STRETCH: Final[Stretch] = Stretch.NORMAL
DEFAULT_STYLE: Final[Style] = Style.NORMAL
DEFAULT_WEIGHT: Final[Weight] = Weight.NORMAL
DEFAULT_SCALING: Final[float] = 1.0
