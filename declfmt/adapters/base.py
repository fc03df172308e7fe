from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..cir.model import TypeRef


class Declarable(Protocol):
    """
    What the formatter needs from a method, field or variable.
    Fields and variables report no parameters.
    """

    def modifier_text(self) -> str: ...

    def name(self) -> str: ...

    def return_or_field_type(self) -> Optional[TypeRef]: ...

    def parameter_types(self) -> Sequence[Optional[TypeRef]]: ...

    def parameter_names(self) -> Optional[Sequence[str]]: ...
