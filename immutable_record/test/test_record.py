"""Immutable records: tests for the record factory and instance behaviour.

Tests cover:
    - create_record_type validates the shape and names the class
    - construction filters unknown keys, applies defaults and validates
    - instances are read-only; set/remove return new validated instances
    - string rendering, equality, copying and the declarative class form
"""

import copy
import inspect
import pickle

import pytest

from immutable_record import (
    UNDEFINED,
    ImmutableWriteError,
    InvalidDescriptor,
    InvalidFieldValue,
    InvalidInput,
    InvalidSchema,
    MissingField,
    Record,
    RecordError,
    RecordSchema,
    UnknownField,
    create_record_type,
    record_config,
)


class Pickleable(Record, shape={"name": {"type": "string", "required": True}, "tags": {"default": None}}):
    pass


# ─── top level API ───────────────────────────────────────────────

@pytest.mark.parametrize("shape", [None, "foo", {}])
def test_create_record_type_rejects_invalid_shapes(shape):
    with pytest.raises(InvalidSchema, match="mapping"):
        create_record_type(shape)


def test_create_record_type_propagates_invalid_field_definitions():
    with pytest.raises(InvalidDescriptor):
        create_record_type({"foo": {"type": "nope"}})


def test_create_record_type_returns_a_record_class_with_set_and_remove():
    record_type = create_record_type({"foo": None})

    assert issubclass(record_type, Record)
    assert record_type.__name__ == record_config.default_type_name == "Record"
    assert isinstance(record_type.schema, RecordSchema)

    assert list(inspect.signature(record_type.set).parameters) == ["self", "field", "value"]
    assert list(inspect.signature(record_type.remove).parameters) == ["self", "field"]


def test_create_record_type_sets_the_class_name():
    record_type = create_record_type({"foo": None}, "Test")
    assert record_type.__name__ == "Test"
    assert record_type.__qualname__ == "Test"
    assert record_type.__module__ == __name__


def test_create_record_type_uses_configured_default_name(monkeypatch):
    monkeypatch.setattr(record_config, "default_type_name", "Thing")
    assert create_record_type({"foo": None}).__name__ == "Thing"


def test_record_types_do_not_share_schemas():
    first = create_record_type({"a": None})
    second = create_record_type({"b": None})
    assert first.schema.field_names == ("a",)
    assert second.schema.field_names == ("b",)


def test_base_record_cannot_be_instantiated():
    with pytest.raises(RecordError, match="has no schema"):
        Record({})


# ─── construction ────────────────────────────────────────────────

def test_construction_applies_defaults_and_omits_absent_fields(example_record):
    record = example_record({})

    assert dict(record) == {"a": "A"}
    assert record.a == "A"
    assert "b" not in record
    assert not hasattr(record, "b")
    assert not hasattr(record, "c")


def test_construction_without_input(example_record):
    assert dict(example_record()) == {"a": "A"}
    assert dict(example_record(None)) == {"a": "A"}


def test_construction_rejects_invalid_values(example_record):
    with pytest.raises(InvalidFieldValue, match='at "b"'):
        example_record({"b": "x"})

    with pytest.raises(InvalidFieldValue, match='at "c"'):
        example_record({"c": 5})


def test_construction_keeps_supplied_values(example_record):
    record = example_record({"c": 6})
    assert dict(record) == {"a": "A", "c": 6}

    record = example_record({"a": "custom", "b": 3})
    assert dict(record) == {"a": "custom", "b": 3}


def test_construction_rejects_non_mapping_input(example_record):
    with pytest.raises(InvalidInput):
        example_record("abc")

    with pytest.raises(InvalidInput):
        example_record([("a", 1)])


def test_unknown_keys_never_appear(example_record):
    record = example_record({"c": 6, "z": 1, "__class__": "nope"})
    assert "z" not in record
    assert not hasattr(record, "z")
    assert set(record) == {"a", "c"}


def test_keyword_fields_override_mapping_entries(example_record):
    record = example_record({"b": 1}, b=2, c=7, unknown=0)
    assert dict(record) == {"a": "A", "b": 2, "c": 7}


def test_required_field_missing():
    record_type = create_record_type({"id": {"type": "number", "required": True}, "note": None})

    with pytest.raises(MissingField, match='"id" is missing') as exc_info:
        record_type({"note": "x"})
    assert exc_info.value.field == "id"

    assert record_type({"id": 1}).id == 1


def test_required_field_with_default_is_always_satisfied():
    record_type = create_record_type({"id": {"type": "number", "required": True, "default": 0}})
    assert record_type().id == 0
    assert record_type().remove("id").id == 0


def test_values_are_stored_by_reference():
    record_type = create_record_type({"elements": None, "meta": {"default": {}}})
    items = [1, 2]
    record = record_type({"elements": items})

    assert record.elements is items
    assert record["elements"] is items
    assert record.meta is record.meta


def test_construction_does_not_keep_a_reference_to_the_input(example_record):
    record_input = {"c": 6}
    record = example_record(record_input)
    record_input["c"] = 100
    assert record.c == 6


def test_none_is_a_present_value():
    record_type = create_record_type({"a": {"default": "A"}, "b": {"type": "object"}})
    record = record_type({"a": None, "b": None})
    assert record.a is None
    assert dict(record) == {"a": None, "b": None}


# ─── immutability ────────────────────────────────────────────────

def test_direct_assignment_fails_for_every_field(example_record):
    record = example_record({"c": 6})

    for name in ("a", "b", "c", "unknown"):
        with pytest.raises(ImmutableWriteError):
            setattr(record, name, 10)

    assert record.c == 6


def test_bypassing_setattr_still_fails(example_record):
    record = example_record({"c": 6})
    with pytest.raises(ImmutableWriteError):
        object.__setattr__(record, "c", 10)
    with pytest.raises(ImmutableWriteError):
        object.__setattr__(record, "b", 10)


def test_fields_cannot_be_deleted_or_reconfigured(example_record):
    record = example_record({"c": 6})

    with pytest.raises(ImmutableWriteError):
        del record.c
    with pytest.raises(ImmutableWriteError):
        object.__delattr__(record, "a")
    with pytest.raises(ImmutableWriteError):
        record._accessors = {}
    with pytest.raises(TypeError):
        record._accessors["c"] = None
    with pytest.raises(TypeError):
        record["c"] = 1


def test_immutable_write_error_is_an_attribute_error():
    assert issubclass(ImmutableWriteError, AttributeError)


# ─── set / remove ────────────────────────────────────────────────

def test_set_returns_a_new_record(example_record):
    record = example_record({"c": 6})
    updated = record.set("b", 3)

    assert dict(updated) == {"a": "A", "b": 3, "c": 6}
    assert type(updated) is example_record
    assert dict(record) == {"a": "A", "c": 6}


def test_set_revalidates(example_record):
    record = example_record({"c": 6})
    with pytest.raises(InvalidFieldValue):
        record.set("c", 1)
    assert record.c == 6


def test_set_with_current_value_is_idempotent(example_record):
    record = example_record({"b": 1, "c": 6})
    for name in record:
        assert record.set(name, record[name]) == record


def test_set_and_remove_reject_unknown_fields(example_record):
    record = example_record({"c": 6})

    with pytest.raises(UnknownField, match='"z" is not a valid field') as exc_info:
        record.set("z", 1)
    assert exc_info.value.field == "z"

    with pytest.raises(UnknownField):
        record.remove("z")

    assert dict(record) == {"a": "A", "c": 6}


def test_remove_drops_the_field(example_record):
    record = example_record({"b": 3, "c": 6})
    removed = record.remove("b")

    assert dict(removed) == {"a": "A", "c": 6}
    assert dict(record) == {"a": "A", "b": 3, "c": 6}


def test_remove_restores_the_default(example_record):
    record = example_record({"a": "custom"})
    assert record.remove("a").a == "A"


def test_remove_required_field_without_default_fails():
    record_type = create_record_type({"id": {"required": True}})
    with pytest.raises(MissingField):
        record_type({"id": 1}).remove("id")


def test_set_required_field_to_undefined_is_an_invalid_value():
    record_type = create_record_type({"id": {"required": True}})
    with pytest.raises(InvalidFieldValue, match='The value undefined at "id" is invalid'):
        record_type({"id": 1}).set("id", UNDEFINED)


def test_remove_then_set_round_trips(example_record):
    record = example_record({"b": 1, "c": 6})
    for value in (0, -2.5, 10**12):
        assert record.remove("b").set("b", value).b == value


def test_set_undefined_restores_default(example_record):
    assert example_record({"a": "custom"}).set("a", UNDEFINED).a == "A"


# ─── enumerable ──────────────────────────────────────────────────

def test_non_enumerable_fields_are_readable_but_hidden():
    record_type = create_record_type({"visible": None, "secret": {"enumerable": False}}, "Account")
    record = record_type({"visible": 1, "secret": 2})

    assert record.secret == 2
    assert record["secret"] == 2
    assert "secret" in record
    assert list(record) == ["visible"]
    assert len(record) == 1
    assert "secret" not in str(record)


# ─── mapping behaviour ───────────────────────────────────────────

def test_enumeration_follows_declaration_order():
    record_type = create_record_type({"z": None, "a": None, "m": None})
    record = record_type({"m": 1, "a": 2, "z": 3})
    assert list(record) == ["z", "a", "m"]


def test_missing_item_raises_key_error(example_record):
    with pytest.raises(KeyError):
        example_record()["b"]
    assert example_record().get("b", "fallback") == "fallback"


def test_equality_compares_enumerable_items(example_record):
    assert example_record({"c": 6}) == example_record({"c": 6})
    assert example_record({"c": 6}) == {"a": "A", "c": 6}
    assert example_record({"c": 6}) != example_record({"c": 7})


def test_records_with_hashable_values_are_hashable(example_record):
    assert hash(example_record({"c": 6})) == hash(example_record({"c": 6}))
    assert len({example_record({"c": 6}), example_record({"c": 6}), example_record({"c": 7})}) == 2

    with pytest.raises(TypeError):
        hash(example_record({"c": 6, "b": 1}).set("a", [1]))


def test_predicate_bugs_propagate():
    record_type = create_record_type({"c": {"type": lambda v: undefined_name > v}})  # noqa: F821
    with pytest.raises(NameError):
        record_type({"c": 1})


def test_fields_that_collide_with_methods_use_item_access():
    record_type = create_record_type({"set": None, "keys": None, "first-name": None, "class": None})
    record = record_type({"set": 1, "keys": 2, "first-name": 3, "class": 4})

    assert callable(record.set)
    assert record["set"] == 1
    assert record["keys"] == 2
    assert record["first-name"] == 3
    assert record["class"] == 4
    assert record.set("set", 5)["set"] == 5


# ─── rendering ───────────────────────────────────────────────────

def test_str_lists_enumerable_fields(example_record):
    record = example_record({"c": 6, "b": 3})
    assert str(record) == 'Example {\n  a: "A",\n  b: 3,\n  c: 6 }'


def test_str_renders_nested_and_undefined_values():
    record_type = create_record_type({"data": None, "nothing": {"default": UNDEFINED}}, "Box")
    record = record_type({"data": {"k": [1, None]}})
    assert str(record) == 'Box {\n  data: {"k": [1, null]},\n  nothing: undefined }'


def test_repr(example_record):
    assert repr(example_record({"c": 6})) == "Example({'a': 'A', 'c': 6})"


# ─── declarative form, copying, pickling ─────────────────────────

def test_declarative_record_class():
    class Point(Record, shape={"x": {"type": "number", "required": True}, "y": {"type": "number", "default": 0}}):
        def norm1(self):
            return abs(self.x) + abs(self.y)

    point = Point(x=3)
    assert point.y == 0
    assert point.norm1() == 3
    assert isinstance(point.set("y", -1), Point)


def test_subclass_without_shape_inherits_schema(example_record):
    class Special(example_record):
        __slots__ = ()

    record = Special({"c": 6})
    assert Special.schema is example_record.schema
    assert record.c == 6
    assert type(record.set("b", 1)) is Special


def test_copy_returns_same_instance_and_deepcopy_copies_values():
    record_type = create_record_type({"entries": None})
    record = record_type({"entries": [1]})

    assert copy.copy(record) is record

    clone = copy.deepcopy(record)
    assert clone == record
    assert clone.entries is not record.entries


def test_pickle_round_trip():
    record = Pickleable({"name": "n", "tags": ["x"]})
    restored = pickle.loads(pickle.dumps(record))
    assert restored == record
    assert type(restored) is Pickleable
