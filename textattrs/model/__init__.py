"""Модель атрибутов текста: значения, интервальное отображение, список атрибутов строки."""

from .attrs import Attrs, total_cmp, total_order_key
from .attrs_list import AttrsList, Span
from .color import Color
from .enums import FamilyKind, Stretch, Style, Weight
from .face import FaceInfo, parse_style_name
from .family import Family
from .interval_map import IntervalMap, IntervalMapInvariantError

__all__ = [
    "Attrs",
    "AttrsList",
    "Color",
    "FaceInfo",
    "Family",
    "FamilyKind",
    "IntervalMap",
    "IntervalMapInvariantError",
    "Span",
    "Stretch",
    "Style",
    "Weight",
    "parse_style_name",
    "total_cmp",
    "total_order_key",
]
