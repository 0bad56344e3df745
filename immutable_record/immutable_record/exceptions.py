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

"""Custom exceptions for immutable records and their schemas."""

from typing import Any


class RecordError(Exception):
    """Base exception for immutable-record related errors."""
    pass


class InvalidSchema(RecordError):
    """Exception raised when a record shape definition is invalid."""
    pass


class InvalidDescriptor(InvalidSchema):
    """Exception raised when a single field definition is invalid."""
    pass


class RecordValidationError(RecordError):
    """Base exception for record input that does not conform to its schema."""
    pass


class InvalidInput(RecordValidationError):
    """Exception raised when record input is neither None nor a mapping."""
    pass


class MissingField(RecordValidationError):
    """Exception raised when a required field without a default is absent."""

    def __init__(self, message: str, field: str, record: Any = None):
        super().__init__(message)
        self.field = field
        self.record = record


class InvalidFieldValue(RecordValidationError):
    """Exception raised when a field value fails its type or predicate."""

    def __init__(self, message: str, field: str, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class UnknownField(RecordError):
    """Exception raised when set/remove targets a field the schema does not declare."""

    def __init__(self, message: str, field: Any):
        super().__init__(message)
        self.field = field


class ImmutableWriteError(RecordError, AttributeError):
    """Exception raised on any attempt to write to a record instance."""
    pass
