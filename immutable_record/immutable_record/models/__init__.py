"""Schema models: field descriptors, record schemas and accessors.

This package does not depend on the record factory, so schemas can be built and
used to validate plain dicts on their own.
"""

from .definition_schema import SchemaIssue, validate_against_schema
from .field_descriptor import (
    ANY_TYPE,
    AnyType,
    FieldDescriptor,
    PredicateType,
    PrimitiveType,
    TypeConstraint,
    matches_type,
)
from .record_accessor import RecordAccessor
from .record_schema import RecordSchema

__all__ = [
    "SchemaIssue",
    "validate_against_schema",
    "ANY_TYPE",
    "AnyType",
    "FieldDescriptor",
    "PredicateType",
    "PrimitiveType",
    "TypeConstraint",
    "matches_type",
    "RecordAccessor",
    "RecordSchema",
]
