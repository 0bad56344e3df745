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

"""Record schemas: the validated shape shared by every instance of a record type."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Tuple

from ..exceptions import (
    InvalidFieldValue,
    InvalidInput,
    InvalidSchema,
    MissingField,
    RecordValidationError,
)
from ..utils.value_types import UNDEFINED, format_value
from .definition_schema import (
    SHAPE_DEFINITION_SCHEMA,
    SchemaIssue,
    format_schema_issues,
    join_path,
    validate_against_schema,
)
from .field_descriptor import FieldDescriptor
from .record_accessor import RecordAccessor

logger = logging.getLogger(__name__)


def _build_fields(shape_definition: Any) -> Dict[str, FieldDescriptor]:
    issues = validate_against_schema(shape_definition, SHAPE_DEFINITION_SCHEMA)
    if issues:
        details = format_schema_issues(issues)
        raise InvalidSchema(f"A record shape must be a mapping with at least one field:\n{details}")

    fields: Dict[str, FieldDescriptor] = {}
    for name, definition in shape_definition.items():
        descriptor = FieldDescriptor.from_definition(definition, field_name=name)

        # The default is checked once here so that defaulting can never produce
        # an invalid record.
        if descriptor.has_type() and descriptor.has_default() and not descriptor.matches_type(descriptor.default):
            raise InvalidSchema(
                f"Field \"{name}\": the default value {format_value(descriptor.default)} "
                "is not valid according to the type."
            )
        fields[name] = descriptor
    return fields


class RecordSchema(Mapping):
    """Mapping from field name to FieldDescriptor for one record shape.

    The shape is validated once at construction and frozen afterwards.
    """

    def __init__(self, shape_definition: Dict[str, Any]):
        self._fields = MappingProxyType(_build_fields(shape_definition))
        self._defaults = MappingProxyType(
            {name: descriptor.default for name, descriptor in self._fields.items() if descriptor.has_default()}
        )
        logger.debug(f"Built record schema with fields: {list(self._fields)}")

    def __getitem__(self, name: str) -> FieldDescriptor:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: object) -> bool:
        return self.has_field(name)

    def __repr__(self) -> str:
        return f"RecordSchema({dict(self._fields)!r})"

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(self._fields)

    @property
    def defaults(self) -> Mapping:
        return self._defaults

    def has_field(self, name: Any) -> bool:
        """Return True if ``name`` is a declared field."""
        try:
            return name in self._fields
        except TypeError:
            # Unhashable names can never be field names.
            return False

    def is_required(self, name: str) -> bool:
        """True if the field must be supplied: required and without a default."""
        descriptor = self._fields[name]
        return descriptor.required and not descriptor.has_default()

    @staticmethod
    def _check_input(record_input: Any) -> Dict[str, Any]:
        if record_input is None:
            return {}
        if not isinstance(record_input, dict):
            raise InvalidInput(
                f"Record input must either be None or a mapping, got {type(record_input).__name__}."
            )
        return record_input

    def filter_to_known_fields(self, record_input: Any) -> Dict[str, Any]:
        """Return a copy of the input holding only declared fields.

        Unknown keys are dropped silently.
        """
        record_input = self._check_input(record_input)
        return {key: value for key, value in record_input.items() if self.has_field(key)}

    def _iter_violations(self, record_input: Dict[str, Any]) -> Iterator[RecordValidationError]:
        for name, descriptor in self._fields.items():
            if name not in record_input:
                if self.is_required(name):
                    yield MissingField(
                        f"\"{name}\" is missing from the record {format_value(record_input)}.",
                        field=name,
                        record=record_input,
                    )
                continue

            value = record_input[name]
            if not descriptor.is_valid(value):
                yield InvalidFieldValue(
                    f"The value {format_value(value)} at \"{name}\" is invalid.",
                    field=name,
                    value=value,
                )

    def validate(self, record_input: Any) -> bool:
        """Validate record input against the schema.

        Fields are checked in declaration order and the first violation is raised.

        Raises:
            InvalidInput: if the input is neither None nor a dict
            MissingField: if a required field without a default is absent
            InvalidFieldValue: if a present value fails its type or predicate
        """
        record_input = self._check_input(record_input)
        for violation in self._iter_violations(record_input):
            raise violation
        return True

    def collect_issues(self, record_input: Any) -> List[SchemaIssue]:
        """Like validate(), but report every violation instead of raising the first."""
        try:
            record_input = self._check_input(record_input)
        except InvalidInput as exc:
            return [SchemaIssue(message=str(exc), path="")]
        return [
            SchemaIssue(message=str(violation), path=join_path("", violation.field))
            for violation in self._iter_violations(record_input)
        ]

    def apply_defaults(self, record_input: Any) -> Dict[str, Any]:
        """Return a copy of the input with declared defaults filled in for absent fields."""
        result = dict(self._check_input(record_input))
        for name, default in self._defaults.items():
            if result.get(name, UNDEFINED) is UNDEFINED:
                result[name] = default
        return result

    def accessors_for(self, record_input: Any) -> Dict[str, RecordAccessor]:
        """Return a read-only accessor for each declared field present in the input.

        Accessors are produced in declaration order.
        """
        record_input = self._check_input(record_input)
        return {
            name: RecordAccessor(record_input[name], enumerable=descriptor.enumerable)
            for name, descriptor in self._fields.items()
            if name in record_input
        }
