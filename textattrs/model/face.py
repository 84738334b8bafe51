"""
Дескриптор шрифтового начертания (face) для предиката Attrs.matches.

EN: Minimal font-face descriptor consumed by ``Attrs.matches``. Faces can be
described by hand or derived from a Pillow ``FreeTypeFont``: the style name
reported by FreeType ("Bold Italic", "SemiBold Condensed", ...) is decoded
into style, weight and stretch.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, Optional, Tuple, Union

from PIL import ImageFont

from .enums import Stretch, Style, Weight

logger: Final = logging.getLogger(__name__)

# Compound keywords first: "extralight" must win over "light".
_WEIGHT_KEYWORDS: Final[Tuple[Tuple[str, Weight], ...]] = (
    ("extralight", Weight.EXTRA_LIGHT),
    ("ultralight", Weight.EXTRA_LIGHT),
    ("semibold", Weight.SEMIBOLD),
    ("demibold", Weight.SEMIBOLD),
    ("extrabold", Weight.EXTRA_BOLD),
    ("ultrabold", Weight.EXTRA_BOLD),
    ("hairline", Weight.THIN),
    ("thin", Weight.THIN),
    ("light", Weight.LIGHT),
    ("medium", Weight.MEDIUM),
    ("bold", Weight.BOLD),
    ("black", Weight.BLACK),
    ("heavy", Weight.BLACK),
)

_STRETCH_KEYWORDS: Final[Tuple[Tuple[str, Stretch], ...]] = (
    ("ultracondensed", Stretch.ULTRA_CONDENSED),
    ("extracondensed", Stretch.EXTRA_CONDENSED),
    ("semicondensed", Stretch.SEMI_CONDENSED),
    ("condensed", Stretch.CONDENSED),
    ("narrow", Stretch.CONDENSED),
    ("ultraexpanded", Stretch.ULTRA_EXPANDED),
    ("extraexpanded", Stretch.EXTRA_EXPANDED),
    ("semiexpanded", Stretch.SEMI_EXPANDED),
    ("expanded", Stretch.EXPANDED),
    ("extended", Stretch.EXPANDED),
)


def parse_style_name(style_name: Optional[str]) -> Tuple[Style, Weight, Stretch]:
    """Decode a FreeType style name into (style, weight, stretch)."""
    key = (style_name or "").lower()
    for ch in " -_":
        key = key.replace(ch, "")

    if "italic" in key:
        style = Style.ITALIC
    elif "oblique" in key:
        style = Style.OBLIQUE
    else:
        style = Style.NORMAL

    weight = next((w for kw, w in _WEIGHT_KEYWORDS if kw in key), Weight.NORMAL)
    stretch = next((s for kw, s in _STRETCH_KEYWORDS if kw in key), Stretch.NORMAL)
    return style, weight, stretch


@dataclass(frozen=True, slots=True)
class FaceInfo:
    """
    Font face as seen by the matching predicate.

    Attributes:
        post_script_name: PostScript name, e.g. "NotoColorEmoji-Regular".
        family: Family name as reported by the font.
        style: Slant of the face.
        weight: Weight class of the face.
        stretch: Width class of the face.
    """

    post_script_name: str
    family: str = ""
    style: Style = Style.NORMAL
    weight: Weight = Weight.NORMAL
    stretch: Stretch = Stretch.NORMAL

    @property
    def is_emoji(self) -> bool:
        return "Emoji" in self.post_script_name

    @classmethod
    def from_font(cls, font: Any) -> "FaceInfo":
        """
        Build a descriptor from a Pillow FreeTypeFont (anything with ``getname()``).

        FreeType does not expose the PostScript name through Pillow, so it is
        synthesised the usual way: family and style with spaces removed,
        joined by a hyphen.
        """
        family, style_name = font.getname()
        family = family or ""
        style_name = style_name or "Regular"
        style, weight, stretch = parse_style_name(style_name)
        ps_name = f"{family.replace(' ', '')}-{style_name.replace(' ', '')}"
        logger.debug(
            "Face from font: family=%r style=%r -> %s/%s/%s",
            family,
            style_name,
            style.value,
            weight.name,
            stretch.name,
        )
        return cls(
            post_script_name=ps_name,
            family=family,
            style=style,
            weight=weight,
            stretch=stretch,
        )

    @classmethod
    def from_file(cls, path: Union[str, Path], size: int = 12) -> "FaceInfo":
        """Load a TrueType/OpenType file with Pillow and describe its face."""
        font = ImageFont.truetype(str(path), size)
        return cls.from_font(font)
