from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Union

# Host reflection flag bits (JVM access flags).
PUBLIC = 0x0001
PRIVATE = 0x0002
PROTECTED = 0x0004
STATIC = 0x0008
FINAL = 0x0010
SYNCHRONIZED = 0x0020
VOLATILE = 0x0040
TRANSIENT = 0x0080
NATIVE = 0x0100
INTERFACE = 0x0200
ABSTRACT = 0x0400
STRICT = 0x0800

# canonical rendering order, keyword -> flag
CANONICAL_ORDER = (
    ("public", PUBLIC),
    ("protected", PROTECTED),
    ("private", PRIVATE),
    ("abstract", ABSTRACT),
    ("static", STATIC),
    ("final", FINAL),
    ("transient", TRANSIENT),
    ("volatile", VOLATILE),
    ("synchronized", SYNCHRONIZED),
    ("native", NATIVE),
    ("strictfp", STRICT),
    ("interface", INTERFACE),
)

KEYWORDS = frozenset(kw for kw, _ in CANONICAL_ORDER)

ModifierLike = Union["ModifierSet", int, Iterable[str], None]


@dataclass(frozen=True)
class ModifierSet:
    """
    Immutable set of modifier keywords.
    Renders in canonical order regardless of how it was built, so
    ModifierSet({"static", "public"}).render() == "public static".
    """
    keywords: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        kws = frozenset(self.keywords)
        unknown = kws - KEYWORDS
        if unknown:
            raise ValueError(f"Unknown modifier keyword(s): {', '.join(sorted(unknown))}")
        object.__setattr__(self, "keywords", kws)

    @classmethod
    def of(cls, *keywords: str) -> "ModifierSet":
        return cls(frozenset(keywords))

    @classmethod
    def from_flags(cls, flags: int) -> "ModifierSet":
        return cls(frozenset(kw for kw, bit in CANONICAL_ORDER if flags & bit))

    @classmethod
    def coerce(cls, value: ModifierLike) -> "ModifierSet":
        """Accept a ModifierSet, a host flag mask, or an iterable of keywords."""
        if value is None:
            return cls()
        if isinstance(value, ModifierSet):
            return value
        if isinstance(value, int):
            return cls.from_flags(value)
        if isinstance(value, str):
            return cls(frozenset(value.split()))
        return cls(frozenset(value))

    @property
    def flags(self) -> int:
        mask = 0
        for kw, bit in CANONICAL_ORDER:
            if kw in self.keywords:
                mask |= bit
        return mask

    def with_keyword(self, keyword: str) -> "ModifierSet":
        return ModifierSet(self.keywords | {keyword})

    def without(self, keyword: str) -> "ModifierSet":
        return ModifierSet(self.keywords - {keyword})

    def render(self) -> str:
        return " ".join(kw for kw, _ in CANONICAL_ORDER if kw in self.keywords)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self.keywords

    def __bool__(self) -> bool:
        return bool(self.keywords)

    def __str__(self) -> str:
        return self.render()


def to_string(flags: int) -> str:
    """Render a host flag mask the way host reflection does."""
    return ModifierSet.from_flags(flags).render()
