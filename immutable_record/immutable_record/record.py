# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Immutable record types.

A record type is a Record subclass bound to one RecordSchema. It can be created
from a shape definition::

    Point = create_record_type(
        {
            "x": {"type": "number", "required": True},
            "y": {"type": "number", "default": 0},
            "label": {"type": lambda v: isinstance(v, str) and len(v) < 10},
        },
        "Point",
    )

or declared as a class::

    class Point(Record, shape={"x": {"type": "number", "required": True}}):
        pass

Every construction filters unknown keys, applies defaults and validates before the
instance exists. ``set`` and ``remove`` never mutate; they build a new instance
through the same path.
"""

from __future__ import annotations

import copy
import keyword
import logging
import sys
import types
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Iterator, Optional, Type

from .config import record_config
from .exceptions import ImmutableWriteError, RecordError, UnknownField
from .models.record_schema import RecordSchema
from .utils.value_types import format_value

logger = logging.getLogger(__name__)


def _field_property(name: str) -> property:
    def fget(self: "Record") -> Any:
        accessor = self._accessors.get(name)
        if accessor is None:
            raise AttributeError(f"'{type(self).__name__}' record has no value for field '{name}'")
        return accessor.get()

    def fset(self: "Record", value: Any) -> None:
        accessor = self._accessors.get(name)
        if accessor is None:
            raise ImmutableWriteError(
                f"Cannot assign to \"{name}\": use the \"set\" method to update the values of an immutable record."
            )
        accessor.set(value)

    def fdel(self: "Record") -> None:
        raise ImmutableWriteError(f"Cannot delete \"{name}\": use the \"remove\" method instead.")

    return property(fget, fset, fdel, doc=f"Read-only value of the '{name}' field.")


def _can_expose_as_attribute(cls: type, name: Any) -> bool:
    return (
        isinstance(name, str)
        and name.isidentifier()
        and not keyword.iskeyword(name)
        and not name.startswith("_")
        and not hasattr(Record, name)
        and name not in cls.__dict__
    )


class Record(Mapping):
    """Base class of every immutable record type.

    Instances are read-only mappings of their enumerable fields, in schema
    declaration order. Non-enumerable fields are reachable by attribute or item
    access only.
    """

    __slots__ = ("_values", "_accessors")

    schema: ClassVar[Optional[RecordSchema]] = None

    def __init_subclass__(cls, shape: Any = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if shape is None:
            # Inherit the parent's schema (or stay abstract).
            return

        cls.schema = shape if isinstance(shape, RecordSchema) else RecordSchema(shape)
        for name in cls.schema:
            if _can_expose_as_attribute(cls, name):
                setattr(cls, name, _field_property(name))
            else:
                logger.debug(f"Field {name!r} of {cls.__name__} is only reachable by item access")
        logger.debug(f"Created record type {cls.__name__} with fields {list(cls.schema)}")

    def __init__(self, values: Optional[Dict[str, Any]] = None, /, **fields: Any) -> None:
        schema = type(self).schema
        if schema is None:
            raise RecordError(
                f"{type(self).__name__} has no schema; use create_record_type() "
                "or subclass Record with a shape."
            )

        record_input = schema.filter_to_known_fields(values)
        if fields:
            record_input.update(schema.filter_to_known_fields(fields))

        clean_input = schema.apply_defaults(record_input)
        schema.validate(clean_input)

        object.__setattr__(self, "_values", MappingProxyType(clean_input))
        object.__setattr__(self, "_accessors", MappingProxyType(schema.accessors_for(clean_input)))

    # Mapping interface

    def __getitem__(self, key: str) -> Any:
        accessor = self._accessors.get(key)
        if accessor is None:
            raise KeyError(key)
        return accessor.get()

    def __iter__(self) -> Iterator[str]:
        return (name for name, accessor in self._accessors.items() if accessor.enumerable)

    def __len__(self) -> int:
        return sum(1 for accessor in self._accessors.values() if accessor.enumerable)

    def __contains__(self, key: object) -> bool:
        return key in self._accessors

    def __hash__(self) -> int:
        """Hash of the enumerable items; raises TypeError if a value is unhashable."""
        return hash(frozenset(self.items()))

    # Immutability

    def __setattr__(self, name: str, value: Any) -> None:
        raise ImmutableWriteError(
            f"Cannot assign to \"{name}\": use the \"set\" method to update the values of an immutable record."
        )

    def __delattr__(self, name: str) -> None:
        raise ImmutableWriteError(f"Cannot delete \"{name}\": use the \"remove\" method instead.")

    def __copy__(self) -> "Record":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Record":
        return type(self)(copy.deepcopy(dict(self._values), memo))

    def __reduce__(self):
        return (type(self), (dict(self._values),))

    # Immutable updates

    def _assert_known_field(self, field: Any) -> None:
        if not type(self).schema.has_field(field):
            raise UnknownField(f"\"{field}\" is not a valid field.", field=field)

    def set(self, field: str, value: Any) -> "Record":
        """Return a new record identical to this one except that ``field`` is ``value``.

        Raises:
            UnknownField: if the schema does not declare ``field``
            InvalidFieldValue: if ``value`` is not valid for ``field``
        """
        self._assert_known_field(field)
        updated = dict(self._values)
        updated[field] = value
        return type(self)(updated)

    def remove(self, field: str) -> "Record":
        """Return a new record identical to this one except with no value at ``field``.

        A declared default is restored; removing a required field without a default
        raises MissingField.
        """
        self._assert_known_field(field)
        remaining = {key: value for key, value in self._values.items() if key != field}
        return type(self)(remaining)

    # Rendering

    def __str__(self) -> str:
        fields = ",\n".join(f"  {key}: {format_value(self[key])}" for key in self)
        return f"{type(self).__name__} {{\n" + fields + " }"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self)!r})"


def create_record_type(
    shape: Dict[str, Any],
    type_name: Optional[str] = None,
    *,
    module: Optional[str] = None,
) -> Type[Record]:
    """Return a Record class based on the shape supplied to this function.

    Args:
        shape: Mapping from field name to field definition (or None)
        type_name: Name of the returned class; only affects how the type is displayed
        module: ``__module__`` of the returned class, defaults to the caller's module

    Raises:
        InvalidSchema: if the shape is not a non-empty mapping or a default fails its type
        InvalidDescriptor: if a field definition is invalid
    """
    name = type_name or record_config.default_type_name
    if not isinstance(name, str):
        raise TypeError(f"type_name must be a string, got {type(name).__name__}")

    schema = RecordSchema(shape)

    if module is None:
        try:
            module = sys._getframe(1).f_globals.get("__name__", "__main__")
        except (AttributeError, ValueError):
            module = __name__

    def exec_body(namespace: Dict[str, Any]) -> None:
        namespace["__slots__"] = ()
        namespace["__module__"] = module
        namespace["__qualname__"] = name

    return types.new_class(name, (Record,), {"shape": schema}, exec_body)
