"""Bundled JSON Schema documents for shape and field definitions.

Loaded through ``immutable_record.models.json_schema_loader``.
"""
