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

"""Per-field validation rules.

A field definition is either None (any value, not required, enumerable, no default)
or a dict restricted to the keys ``type``, ``required``, ``enumerable`` and ``default``::

    {
        "type": "string",     # a type tag, or a one-argument predicate
        "required": True,     # the field must be present on every record
        "enumerable": True,   # the field is listed when the record is iterated
        "default": "foo",     # used when the field is absent from input
    }
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

from ..exceptions import InvalidDescriptor
from ..utils.value_types import (
    NO_DEFAULT,
    TYPE_TAGS,
    UNDEFINED,
    describe_predicate,
    is_unary_predicate,
    kind_of,
    normalize_type_tag,
)
from .definition_schema import (
    FIELD_DEFINITION_SCHEMA,
    format_schema_issues,
    join_path,
    validate_against_schema,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnyType:
    pass


@dataclass(frozen=True)
class PrimitiveType:
    tag: str


@dataclass(frozen=True)
class PredicateType:
    predicate: Callable[[Any], Any]

    def __repr__(self) -> str:
        return f"PredicateType({describe_predicate(self.predicate)})"


TypeConstraint = Union[AnyType, PrimitiveType, PredicateType]

ANY_TYPE = AnyType()


def matches_type(constraint: TypeConstraint, value: Any) -> bool:
    """Return True if ``value`` satisfies the type constraint, ignoring requiredness."""
    if isinstance(constraint, AnyType):
        return True

    if isinstance(constraint, PrimitiveType):
        return kind_of(value) == constraint.tag

    if isinstance(constraint, PredicateType):
        try:
            return bool(constraint.predicate(value))
        except (TypeError, ValueError) as exc:
            # Comparisons between unrelated kinds raise here; any other error
            # propagates to the caller.
            logger.debug(
                f"Predicate {describe_predicate(constraint.predicate)} raised {exc!r} for {value!r}; "
                "treating the value as invalid"
            )
            return False

    raise TypeError(f"Unknown type constraint: {constraint!r}")


def parse_type_constraint(type_definition: Any, field_name: Optional[str] = None) -> TypeConstraint:
    """Turn the raw ``type`` entry of a field definition into a TypeConstraint."""
    if type_definition is UNDEFINED:
        return ANY_TYPE

    if isinstance(type_definition, str):
        tag = normalize_type_tag(type_definition)
        if tag is not None:
            return PrimitiveType(tag)
    elif is_unary_predicate(type_definition):
        return PredicateType(type_definition)

    raise InvalidDescriptor(
        f"{_field_label(field_name)}\"type\" must be either a type string ({', '.join(TYPE_TAGS)}) "
        f"or a validator function of arity 1, got {type_definition!r}."
    )


def _field_label(field_name: Optional[str]) -> str:
    return f"Field \"{field_name}\": " if field_name is not None else ""


@dataclass(frozen=True)
class FieldDescriptor:
    """Normalized validation rule for one field."""
    type: TypeConstraint = field(default=ANY_TYPE)
    required: bool = False
    enumerable: bool = True
    default: Any = NO_DEFAULT

    @classmethod
    def from_definition(cls, definition: Any, field_name: Optional[str] = None) -> "FieldDescriptor":
        """Build a descriptor from a raw field definition.

        Raises:
            InvalidDescriptor: if the definition is not None, UNDEFINED or a dict, uses keys other than
                type/required/enumerable/default, or holds an invalid type, required or
                enumerable value.
        """
        if definition is UNDEFINED:
            definition = None
        elif isinstance(definition, dict):
            # An UNDEFINED flag or type means "use the default"; an UNDEFINED default is kept.
            definition = {
                key: value for key, value in definition.items()
                if value is not UNDEFINED or key not in ("type", "required", "enumerable")
            }

        base_path = join_path("", field_name) if field_name is not None else None
        issues = validate_against_schema(definition, FIELD_DEFINITION_SCHEMA, base_path=base_path)
        if issues:
            details = format_schema_issues(issues)
            raise InvalidDescriptor(f"{_field_label(field_name)}invalid field definition:\n{details}")

        if not definition:
            return cls()

        return cls(
            type=parse_type_constraint(definition.get("type", UNDEFINED), field_name),
            required=definition.get("required", False),
            enumerable=definition.get("enumerable", True),
            default=definition.get("default", NO_DEFAULT),
        )

    def has_default(self) -> bool:
        """True if a default was supplied, including an explicit default of UNDEFINED."""
        return self.default is not NO_DEFAULT

    def has_type(self) -> bool:
        return not isinstance(self.type, AnyType)

    def matches_type(self, value: Any) -> bool:
        return matches_type(self.type, value)

    def is_valid(self, value: Any = UNDEFINED) -> bool:
        """Given some potential value, return True if it's valid according to this descriptor.

        An UNDEFINED value is valid only when the field is not required; any other value
        is checked against the type constraint.
        """
        if value is UNDEFINED:
            return not self.required
        return self.matches_type(value)
