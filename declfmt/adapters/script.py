from __future__ import annotations

from typing import Optional, Sequence

from ..cir.model import ScriptMethod, ScriptVariable, TypeRef


class ScriptMethodAdapter:
    def __init__(self, method: ScriptMethod) -> None:
        self._method = method

    def modifier_text(self) -> str:
        return self._method.modifiers.render()

    def name(self) -> str:
        return self._method.name

    def return_or_field_type(self) -> Optional[TypeRef]:
        return self._method.return_type

    def parameter_types(self) -> Sequence[Optional[TypeRef]]:
        return self._method.parameter_types

    def parameter_names(self) -> Optional[Sequence[str]]:
        return self._method.parameter_names


class ScriptVariableAdapter:
    def __init__(self, var: ScriptVariable) -> None:
        self._var = var

    def modifier_text(self) -> str:
        return self._var.modifiers.render()

    def name(self) -> str:
        return self._var.name

    def return_or_field_type(self) -> Optional[TypeRef]:
        return self._var.type

    def parameter_types(self) -> Sequence[Optional[TypeRef]]:
        return ()

    def parameter_names(self) -> Optional[Sequence[str]]:
        return None
