"""
Семейство шрифтов: именованное или одно из общих (serif, sans-serif, ...).

EN: Owned font-family descriptor. A single immutable value is used both when
building attributes and when storing them in spans, so no string data is
ever borrowed from the caller.
"""

from dataclasses import dataclass
from typing import Optional

from .enums import FamilyKind


@dataclass(frozen=True, slots=True)
class Family:
    kind: FamilyKind
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, FamilyKind):
            raise TypeError(f"kind must be FamilyKind, got {type(self.kind).__name__}")
        if self.kind is FamilyKind.NAME:
            if not isinstance(self.name, str):
                raise TypeError("Named family requires a str name")
        elif self.name is not None:
            raise ValueError(f"Generic family {self.kind.value!r} cannot carry a name")

    @classmethod
    def named(cls, name: str) -> "Family":
        return cls(FamilyKind.NAME, name)

    @classmethod
    def serif(cls) -> "Family":
        return cls(FamilyKind.SERIF)

    @classmethod
    def sans_serif(cls) -> "Family":
        return cls(FamilyKind.SANS_SERIF)

    @classmethod
    def cursive(cls) -> "Family":
        return cls(FamilyKind.CURSIVE)

    @classmethod
    def fantasy(cls) -> "Family":
        return cls(FamilyKind.FANTASY)

    @classmethod
    def monospace(cls) -> "Family":
        return cls(FamilyKind.MONOSPACE)

    @classmethod
    def parse(cls, text: str) -> "Family":
        """
        Parse a CSS-style family token.

        Generic keywords (``serif``, ``sans-serif``, ``cursive``, ``fantasy``,
        ``monospace``) map to generic families, anything else is a font name.
        Surrounding quotes force a name: ``"serif"`` is a font called serif.
        """
        if not isinstance(text, str):
            raise TypeError(f"Family must be str, got {type(text).__name__}")
        stripped = text.strip()
        if len(stripped) >= 2 and stripped[0] == stripped[-1] and stripped[0] in "\"'":
            return cls.named(stripped[1:-1])
        if stripped.lower() in {k.value for k in FamilyKind if k.is_generic}:
            return cls(FamilyKind(stripped.lower()))
        return cls.named(stripped)

    def to_css(self) -> str:
        if self.kind is FamilyKind.NAME:
            return f'"{self.name}"'
        return self.kind.value

    def __str__(self) -> str:
        return str(self.name) if self.kind is FamilyKind.NAME else self.kind.value
