"""
Source-like declaration strings for types, methods, fields and script
variables, used by describe/inspect output.

Everything here is a pure function of its arguments.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence

from . import reflect
from .adapters import adapt
from .cir.model import Primitive, TypeRef
from .config import MEMBER_INDENT


# ---------------- Type names ----------------

def type_name(t: Optional[TypeRef]) -> str:
    """Simple name of a type; an absent type displays as Object."""
    return "Object" if t is None else t.name


def _type_names(types: Iterable[Optional[TypeRef]]) -> List[str]:
    return [type_name(t) for t in types]


def _type_names_with_params(types: Sequence[Optional[TypeRef]], names: Sequence[str]) -> List[str]:
    # strict: a names list of the wrong length is a caller bug
    return [f"{tname} {pname}" for tname, pname in zip(_type_names(types), names, strict=True)]


def _type_extends(t: TypeRef) -> str:
    return "" if t.is_interface else " extends " + type_name(t.supertype)


def _type_implements(t: TypeRef) -> str:
    if not t.interfaces:
        return ""
    keyword = " extends " if t.is_interface else " implements "
    return keyword + ", ".join(_type_names(t.interfaces))


def type_ref_of(value: Any) -> Optional[TypeRef]:
    """Runtime type of an argument value; None stays absent."""
    if value is None:
        return None
    if isinstance(value, Primitive):
        return value.type
    return TypeRef(type(value).__name__)


# ---------------- Signatures ----------------

def method_string(name: str, type_names: Sequence[str]) -> str:
    """name(T1, T2, ...)"""
    return f"{name}({', '.join(type_names)})"


def method_string_of_types(
    name: str,
    types: Sequence[Optional[TypeRef]],
    names: Optional[Sequence[str]] = None,
) -> str:
    if names is None:
        return method_string(name, _type_names(types))
    return method_string(name, _type_names_with_params(types, names))


def method_string_of_values(name: str, args: Sequence[Any]) -> str:
    """Signature a call with these argument values would have."""
    return method_string_of_types(name, [type_ref_of(a) for a in args])


# ---------------- Declarations ----------------

def method_declaration(method: Any) -> str:
    """
    Full method declaration: modifiers, return type, name and parameters.
    Abstract methods end with ";", everything else with an empty body.
    """
    m = adapt(method)
    mods = m.modifier_text()
    names = m.parameter_names()
    signature = method_string_of_types(m.name(), m.parameter_types(), names or None)
    terminator = ";" if "abstract" in mods else " {}"
    return f"{mods} {type_name(m.return_or_field_type())} {signature}{terminator}"


def variable_declaration(var: Any) -> str:
    """Field or script variable: modifiers, type and name."""
    v = adapt(var)
    return f"{v.modifier_text()} {type_name(v.return_or_field_type())} {v.name()};"


def _generated_class_declaration(t: TypeRef) -> str:
    parts = [
        reflect.class_modifiers(t).render(),
        " interface" if t.is_interface else " class",
        " ", type_name(t),
        _type_extends(t),
        _type_implements(t),
        " {",
    ]
    return "".join(parts).strip()


def class_declaration(t: TypeRef) -> str:
    """
    Class or interface header: modifiers, kind, name, extends, implements.
    Host modifiers already include "interface" for interfaces, so the
    host path only adds the "class" keyword.
    """
    if reflect.is_generated_class(t):
        return _generated_class_declaration(t)
    parts = [
        t.modifiers.render(),
        "" if t.is_interface else " class",
        " ", type_name(t),
        _type_extends(t),
        _type_implements(t),
        " {",
    ]
    return "".join(parts).strip()


def describe_type(t: TypeRef, fields: Iterable[Any] = (), methods: Iterable[Any] = ()) -> List[str]:
    """Header, indented member declarations and the closing brace."""
    lines = [class_declaration(t)]
    lines.extend(MEMBER_INDENT + variable_declaration(f) for f in fields)
    lines.extend(MEMBER_INDENT + method_declaration(m) for m in methods)
    lines.append("}")
    return lines


# ---------------- Utilities ----------------

def type_string(value: Any) -> str:
    """Type name of a runtime value: "null", a primitive's logical type, or its class."""
    if value is None:
        return "null"
    if isinstance(value, Primitive):
        return type_name(value.type)
    return type(value).__name__


def _region_matches(one: str, two: str, length: int) -> bool:
    if length > len(one) or length > len(two):
        return False
    return one[:length] == two[:length]


def max_common_prefix(one: str, two: str) -> str:
    """
    Longest common prefix. The loop runs one past the last matching
    length and backs off by one; at length 0 it always matches, so the
    result is never a negative slice.
    """
    i = 0
    while _region_matches(one, two, i):
        i += 1
    return one[: i - 1]


def normalize_class_name(t: Optional[TypeRef]) -> str:
    return reflect.normalize_class_name(t)
