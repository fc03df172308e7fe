"""
Scripting-engine authorities consulted by the formatter.

These answer questions about a TypeRef that the engine owns: whether the
type was generated by a script, which modifiers the engine reports for it,
and how its class name is normalized for display.
"""
from __future__ import annotations

import re

from .cir.model import TypeRef
from .cir.modifiers import ModifierSet

# nested/anonymous class separators reported by the host, e.g. Outer$Inner, Outer$1
_NESTED_SEP = re.compile(r"\$")


def is_generated_class(t: TypeRef | None) -> bool:
    return t is not None and t.is_generated


def class_modifiers(t: TypeRef) -> ModifierSet:
    """
    Modifiers of a generated type as the engine reports them.
    The type kind is rendered separately, so the interface keyword is dropped.
    """
    return t.modifiers.without("interface")


def normalize_class_name(t: TypeRef | None) -> str:
    if t is None:
        return "java.lang.Object"
    name = t.qualified_name or t.name
    return _NESTED_SEP.sub(".", name)
