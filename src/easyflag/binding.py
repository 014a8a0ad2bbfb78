## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any

from .types import Kind, Slot, SLOT_TYPES
from .errors import FlagTypeError
from .parser import parse_literal


class Binding:
    """Typed handle over a caller-owned slot.  The kind is fixed when the binding is made;
    only the slot's value ever changes afterwards.
    """
    __slots__ = ('var', 'kind')

    def __init__(self, var: Any):
        if not isinstance(var, SLOT_TYPES):
            type_name = type(var).__name__
            supported = ', '.join(t.__name__ for t in SLOT_TYPES)
            raise FlagTypeError(f"Unsupported flag variable type `{type_name}`; expected one of: {supported}.", var_type=type(var))
        self.var: Slot = var
        self.kind: Kind = var.kind

    @property
    def value(self) -> Any:
        return self.var.value

    @property
    def is_switch(self) -> bool:
        return self.kind.python is bool

    def kind_name(self) -> str:
        # Switches take no argument, so they have no placeholder name in usage text.
        return '' if self.is_switch else self.kind.name

    def enable(self) -> None:
        if not self.is_switch:
            raise FlagTypeError(f"Only boolean flags are enabled by presence, not `{self.kind.name}`.", var_type=type(self.var))
        self.var.value = True

    def assign(self, text: str) -> None:
        """Parse `text` as this binding's kind and store it; on FlagValueError the slot is untouched."""
        self.var.value = parse_literal(text, self.kind)

    def __repr__(self):
        return f"Binding({self.var!r})"
