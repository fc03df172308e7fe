from .cir.model import (
    NativeField,
    NativeMethod,
    Primitive,
    ScriptMethod,
    ScriptVariable,
    TypeRef,
)
from .cir.modifiers import ModifierSet
from .formatter import (
    class_declaration,
    describe_type,
    max_common_prefix,
    method_declaration,
    method_string,
    method_string_of_types,
    method_string_of_values,
    normalize_class_name,
    type_name,
    type_string,
    variable_declaration,
)

__all__ = [
    "ModifierSet",
    "NativeField",
    "NativeMethod",
    "Primitive",
    "ScriptMethod",
    "ScriptVariable",
    "TypeRef",
    "class_declaration",
    "describe_type",
    "max_common_prefix",
    "method_declaration",
    "method_string",
    "method_string_of_types",
    "method_string_of_values",
    "normalize_class_name",
    "type_name",
    "type_string",
    "variable_declaration",
]
