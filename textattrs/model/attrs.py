"""
Атрибуты текста (Attrs): неизменяемый снимок стиля для фрагмента строки.

EN: Owned, immutable set of text attributes (color, family, stretch, style,
weight, scaling, metadata tag) as stored in attribute spans.

Equality and hashing cover every dataclass field. They are computed by
walking ``dataclasses.fields()``, so a newly added field is picked up
automatically; ``scaling`` is compared by its IEEE-754 total-order key
instead of float ``==`` so that NaN equals itself and the hash contract holds.

Module: textattrs/model/attrs.py
"""

import logging
import struct
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Final, FrozenSet, Mapping, Optional, Tuple, Union

from .color import Color
from .enums import (
    DEFAULT_SCALING,
    DEFAULT_STRETCH,
    DEFAULT_STYLE,
    DEFAULT_WEIGHT,
    FamilyKind,
    Stretch,
    Style,
    Weight,
)
from .face import FaceInfo
from .family import Family

logger: Final = logging.getLogger(__name__)

_SIGN_MASK: Final[int] = 0x7FFF_FFFF_FFFF_FFFF

# Fields compared through total_order_key rather than ==
_TOTAL_ORDER_FIELDS: Final[FrozenSet[str]] = frozenset({"scaling"})


def total_order_key(value: float) -> int:
    """
    Integer key whose ordering is the IEEE-754 totalOrder of ``value``.

    -NaN < -inf < ... < -0.0 < 0.0 < ... < inf < NaN. Two floats get the same
    key only if their bit patterns are identical.
    """
    bits: int = struct.unpack("<q", struct.pack("<d", value))[0]
    return bits ^ ((bits >> 63) & _SIGN_MASK)


def total_cmp(a: float, b: float) -> int:
    """Three-way comparison under total order: -1, 0 or 1."""
    ka, kb = total_order_key(a), total_order_key(b)
    return (ka > kb) - (ka < kb)


@dataclass(frozen=True, slots=True, eq=False)
class Attrs:
    """
    Text attributes applied to a span of a line.

    Attributes:
        color: Optional packed text color; None means "use the renderer's".
        family: Font family request.
        stretch: Requested width class.
        style: Requested slant.
        weight: Requested weight class.
        scaling: Scale factor applied on top of the font size.
        metadata: Opaque caller tag, carried through untouched.

    Instances are immutable; use the ``with_*`` helpers to derive variants:

        >>> bold = Attrs().with_weight(Weight.BOLD)
    """

    color: Optional[Color] = None
    family: Family = field(default_factory=Family.sans_serif)
    stretch: Stretch = DEFAULT_STRETCH
    style: Style = DEFAULT_STYLE
    weight: Weight = DEFAULT_WEIGHT
    scaling: float = DEFAULT_SCALING
    metadata: int = 0

    def __post_init__(self) -> None:
        if self.color is not None and not isinstance(self.color, Color):
            raise TypeError(f"color must be Color or None, got {type(self.color).__name__}")
        if not isinstance(self.family, Family):
            raise TypeError(f"family must be Family, got {type(self.family).__name__}")
        if not isinstance(self.stretch, Stretch):
            raise TypeError(f"stretch must be Stretch, got {type(self.stretch).__name__}")
        if not isinstance(self.style, Style):
            raise TypeError(f"style must be Style, got {type(self.style).__name__}")
        if not isinstance(self.weight, Weight):
            raise TypeError(f"weight must be Weight, got {type(self.weight).__name__}")
        if isinstance(self.scaling, bool) or not isinstance(self.scaling, (int, float)):
            raise TypeError(f"scaling must be float, got {type(self.scaling).__name__}")
        if isinstance(self.metadata, bool) or not isinstance(self.metadata, int):
            raise TypeError(f"metadata must be int, got {type(self.metadata).__name__}")
        if self.metadata < 0:
            raise ValueError(f"metadata must be >= 0, got {self.metadata}")
        # ints are accepted for convenience but stored as float
        object.__setattr__(self, "scaling", float(self.scaling))

    # --- builder helpers ---

    def with_color(self, color: Optional[Color]) -> "Attrs":
        return replace(self, color=color)

    def with_family(self, family: Family) -> "Attrs":
        return replace(self, family=family)

    def with_stretch(self, stretch: Stretch) -> "Attrs":
        return replace(self, stretch=stretch)

    def with_style(self, style: Style) -> "Attrs":
        return replace(self, style=style)

    def with_weight(self, weight: Weight) -> "Attrs":
        return replace(self, weight=weight)

    def with_scaling(self, scaling: float) -> "Attrs":
        return replace(self, scaling=scaling)

    def with_metadata(self, metadata: int) -> "Attrs":
        return replace(self, metadata=metadata)

    # --- predicates ---

    def matches(self, face: FaceInfo) -> bool:
        """
        Check whether a font face satisfies this request.

        Emoji faces always match: they have no usable style axis.
        """
        # TODO: replace the name check once FaceInfo carries a color-glyph flag
        return face.is_emoji or (
            face.style == self.style
            and face.weight == self.weight
            and face.stretch == self.stretch
        )

    def compatible(self, other: "Attrs") -> bool:
        """Check whether text with these attributes can be shaped with ``other`` as one run."""
        return (
            self.family == other.family
            and self.stretch == other.stretch
            and self.style == other.style
            and self.weight == other.weight
            and total_cmp(self.scaling, other.scaling) == 0
        )

    # --- equality / hashing ---

    def _identity(self) -> Tuple[Any, ...]:
        return tuple(
            total_order_key(getattr(self, f.name))
            if f.name in _TOTAL_ORDER_FIELDS
            else getattr(self, f.name)
            for f in fields(self)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attrs):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    # --- serialization ---

    def to_dict(self) -> Dict[str, Any]:
        return {
            "color": self.color.value if self.color is not None else None,
            "family": {"kind": self.family.kind.value, "name": self.family.name},
            "stretch": self.stretch.value,
            "style": self.style.value,
            "weight": self.weight.value,
            "scaling": self.scaling,
            "metadata": self.metadata,
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Attrs":
        if not isinstance(data, Mapping):
            raise TypeError(f"Expected mapping, got {type(data).__name__}")
        family_data = data.get("family")
        if family_data is None:
            family = Family.sans_serif()
        else:
            family = Family(FamilyKind(family_data["kind"]), family_data.get("name"))
        color = data.get("color")
        return Attrs(
            color=Color(color) if color is not None else None,
            family=family,
            stretch=Stretch(data.get("stretch", DEFAULT_STRETCH.value)),
            style=Style(data.get("style", DEFAULT_STYLE.value)),
            weight=Weight(data.get("weight", DEFAULT_WEIGHT.value)),
            scaling=float(data.get("scaling", DEFAULT_SCALING)),
            metadata=int(data.get("metadata", 0)),
        )

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "Attrs":
        """
        Build default attributes from a loaded configuration mapping.

        Recognised keys: default_family, default_weight, default_style,
        default_stretch, default_scaling, default_color. Missing keys keep
        the built-in defaults.
        """
        attrs = cls()
        if config.get("default_family"):
            attrs = attrs.with_family(Family.parse(config["default_family"]))
        if config.get("default_weight") is not None:
            attrs = attrs.with_weight(_coerce_weight(config["default_weight"]))
        if config.get("default_style"):
            attrs = attrs.with_style(Style(str(config["default_style"]).lower()))
        if config.get("default_stretch") is not None:
            attrs = attrs.with_stretch(_coerce_stretch(config["default_stretch"]))
        if config.get("default_scaling") is not None:
            attrs = attrs.with_scaling(float(config["default_scaling"]))
        if config.get("default_color"):
            attrs = attrs.with_color(Color.from_str(config["default_color"]))
        logger.debug(f"Default attrs from config: {attrs!r}")
        return attrs


def _coerce_weight(value: Union[int, str]) -> Weight:
    # Numeric weights are stored exactly, without snapping to a named class.
    if isinstance(value, str) and not value.strip().isdigit():
        return Weight.from_name(value)
    return Weight(int(value))


def _coerce_stretch(value: Union[int, str]) -> Stretch:
    if isinstance(value, str) and not value.strip().isdigit():
        return Stretch.from_name(value)
    return Stretch(int(value))
