from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..exceptions import ImmutableWriteError


@dataclass(frozen=True, eq=False)
class RecordAccessor:
    """Read-only accessor for one stored field value.

    ``get`` returns the stored reference itself; ``set`` always raises. Accessors are
    never reconfigurable.
    """
    value: Any
    enumerable: bool = True

    @property
    def configurable(self) -> bool:
        return False

    def get(self) -> Any:
        return self.value

    def set(self, value: Any) -> None:
        # Takes the value only so it can stand in for a normal setter.
        raise ImmutableWriteError('Use the "set" method to update the values of an immutable record.')
