from __future__ import annotations

from typing import Any

from ..cir.model import NativeField, NativeMethod, ScriptMethod, ScriptVariable
from .base import Declarable
from .native import NativeFieldAdapter, NativeMethodAdapter
from .script import ScriptMethodAdapter, ScriptVariableAdapter

_ADAPTERS = {
    NativeMethod: NativeMethodAdapter,
    NativeField: NativeFieldAdapter,
    ScriptMethod: ScriptMethodAdapter,
    ScriptVariable: ScriptVariableAdapter,
}


def adapt(member: Any) -> Declarable:
    """Wrap a descriptor in its adapter; objects that already are Declarable pass through."""
    adapter = _ADAPTERS.get(type(member))
    if adapter is not None:
        return adapter(member)
    if hasattr(member, "modifier_text") and hasattr(member, "return_or_field_type"):
        return member
    raise TypeError(f"Cannot describe {type(member).__name__}")


__all__ = [
    "Declarable",
    "NativeFieldAdapter",
    "NativeMethodAdapter",
    "ScriptMethodAdapter",
    "ScriptVariableAdapter",
    "adapt",
]
