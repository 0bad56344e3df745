"""Shared fixtures for the immutable_record tests."""

import pytest

from immutable_record import create_record_type
from immutable_record.models import json_schema_loader


@pytest.fixture(autouse=True)
def fresh_schema_cache():
    json_schema_loader.clear_cache()
    yield
    json_schema_loader.clear_cache()


@pytest.fixture
def example_record():
    """The a/b/c record type used throughout the record tests."""
    return create_record_type(
        {
            "a": {"default": "A"},
            "b": {"type": "number"},
            "c": {"type": lambda v: v > 5},
        },
        "Example",
    )
