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

"""Schema-validated immutable records."""

import logging

from .config import RecordConfig, record_config
from .exceptions import (
    ImmutableWriteError,
    InvalidDescriptor,
    InvalidFieldValue,
    InvalidInput,
    InvalidSchema,
    MissingField,
    RecordError,
    RecordValidationError,
    UnknownField,
)
from .models import FieldDescriptor, RecordAccessor, RecordSchema, SchemaIssue
from .record import Record, create_record_type
from .utils.value_types import NO_DEFAULT, UNDEFINED

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "RecordConfig",
    "record_config",
    "ImmutableWriteError",
    "InvalidDescriptor",
    "InvalidFieldValue",
    "InvalidInput",
    "InvalidSchema",
    "MissingField",
    "RecordError",
    "RecordValidationError",
    "UnknownField",
    "FieldDescriptor",
    "RecordAccessor",
    "RecordSchema",
    "SchemaIssue",
    "Record",
    "create_record_type",
    "NO_DEFAULT",
    "UNDEFINED",
]
