from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Literal, Optional, Tuple

from .modifiers import ModifierLike, ModifierSet

Origin = Literal["native", "generated"]


@dataclass(frozen=True)
class TypeRef:
    name: str
    is_interface: bool = False
    supertype: Optional["TypeRef"] = None    # absent for interfaces
    interfaces: Tuple["TypeRef", ...] = ()
    origin: Origin = "native"                # host platform or scripting engine
    modifiers: ModifierSet = field(default_factory=ModifierSet)
    qualified_name: Optional[str] = None     # e.g. com.example.Outer$Inner

    def __post_init__(self) -> None:
        mods = ModifierSet.coerce(self.modifiers)
        # host modifiers carry the interface bit iff the type is an interface
        if self.origin == "native":
            if self.is_interface:
                mods = mods.with_keyword("interface")
            else:
                mods = mods.without("interface")
        object.__setattr__(self, "modifiers", mods)
        object.__setattr__(self, "interfaces", tuple(self.interfaces))

    @property
    def is_generated(self) -> bool:
        return self.origin == "generated"

    @classmethod
    def native(
        cls,
        name: str,
        modifiers: ModifierLike = 0,
        is_interface: bool = False,
        supertype: Optional["TypeRef"] = None,
        interfaces: Iterable["TypeRef"] = (),
        qualified_name: Optional[str] = None,
    ) -> "TypeRef":
        """
        Host type. Host reflection reports interfaces through the
        interface modifier bit, so either the bit or is_interface marks one.
        """
        mods = ModifierSet.coerce(modifiers)
        return cls(
            name=name,
            is_interface=is_interface or "interface" in mods,
            supertype=supertype,
            interfaces=tuple(interfaces),
            origin="native",
            modifiers=mods,
            qualified_name=qualified_name,
        )

    @classmethod
    def generated(
        cls,
        name: str,
        modifiers: ModifierLike = None,
        is_interface: bool = False,
        supertype: Optional["TypeRef"] = None,
        interfaces: Iterable["TypeRef"] = (),
        qualified_name: Optional[str] = None,
    ) -> "TypeRef":
        """Type synthesized by the scripting engine."""
        return cls(
            name=name,
            is_interface=is_interface,
            supertype=supertype,
            interfaces=tuple(interfaces),
            origin="generated",
            modifiers=ModifierSet.coerce(modifiers),
            qualified_name=qualified_name,
        )


# logical type names for wrapped script values
_PRIMITIVE_NAMES = {
    bool: "boolean",
    int: "int",
    float: "double",
}


@dataclass(frozen=True)
class Primitive:
    """A script value wrapped together with its logical type."""
    value: Any
    type: TypeRef

    @classmethod
    def wrap(cls, value: Any) -> "Primitive":
        name = _PRIMITIVE_NAMES.get(type(value))
        if name is None:
            raise ValueError(f"Cannot wrap {type(value).__name__} as a primitive")
        return cls(value=value, type=TypeRef(name))


@dataclass(frozen=True)
class NativeMethod:
    """Host-reflected method. Modifiers are a host flag mask."""
    name: str
    parameter_types: Tuple[Optional[TypeRef], ...] = ()
    return_type: Optional[TypeRef] = None
    modifiers: int = 0


@dataclass(frozen=True)
class NativeField:
    name: str
    type: Optional[TypeRef] = None
    modifiers: int = 0


@dataclass(frozen=True)
class ScriptMethod:
    """
    Method declared in a script. Untyped parameters and loose return
    types are None and display as Object.
    """
    name: str
    parameter_types: Tuple[Optional[TypeRef], ...] = ()
    parameter_names: Tuple[str, ...] = ()
    return_type: Optional[TypeRef] = None
    modifiers: ModifierSet = field(default_factory=ModifierSet)

    def __post_init__(self) -> None:
        object.__setattr__(self, "modifiers", ModifierSet.coerce(self.modifiers))
        if len(self.parameter_names) != len(self.parameter_types):
            raise ValueError(
                f"Method {self.name}: {len(self.parameter_types)} parameter types "
                f"but {len(self.parameter_names)} parameter names"
            )


@dataclass(frozen=True)
class ScriptVariable:
    name: str
    type: Optional[TypeRef] = None
    modifiers: ModifierSet = field(default_factory=ModifierSet)

    def __post_init__(self) -> None:
        object.__setattr__(self, "modifiers", ModifierSet.coerce(self.modifiers))
