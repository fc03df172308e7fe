from __future__ import annotations

from typing import Optional, Sequence

from ..cir.model import NativeField, NativeMethod, TypeRef
from ..cir.modifiers import to_string


class NativeMethodAdapter:
    """Host-reflected method -> Declarable. Host methods carry no parameter names."""

    def __init__(self, method: NativeMethod) -> None:
        self._method = method

    def modifier_text(self) -> str:
        return to_string(self._method.modifiers)

    def name(self) -> str:
        return self._method.name

    def return_or_field_type(self) -> Optional[TypeRef]:
        return self._method.return_type

    def parameter_types(self) -> Sequence[Optional[TypeRef]]:
        return self._method.parameter_types

    def parameter_names(self) -> Optional[Sequence[str]]:
        return None


class NativeFieldAdapter:
    def __init__(self, field: NativeField) -> None:
        self._field = field

    def modifier_text(self) -> str:
        return to_string(self._field.modifiers)

    def name(self) -> str:
        return self._field.name

    def return_or_field_type(self) -> Optional[TypeRef]:
        return self._field.type

    def parameter_types(self) -> Sequence[Optional[TypeRef]]:
        return ()

    def parameter_names(self) -> Optional[Sequence[str]]:
        return None
