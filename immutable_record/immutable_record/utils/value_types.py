from __future__ import annotations

import enum
import inspect
import json
import numbers
from typing import Any, Callable, Optional


class _Sentinel:
    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Sentinel":
        return self

    def __deepcopy__(self, memo) -> "_Sentinel":
        return self

    def __reduce__(self) -> str:
        return self._name


# The "absent" value. Distinct from None, which is an ordinary present value.
UNDEFINED = _Sentinel("UNDEFINED")

# Marks a field definition that declares no default at all.
NO_DEFAULT = _Sentinel("NO_DEFAULT")


OBJECT_TYPES = {"object"}
STRING_TYPES = {"string", "str"}
NUMBER_TYPES = {"number"}
SYMBOL_TYPES = {"symbol"}
BOOLEAN_TYPES = {"boolean", "bool"}
FUNCTION_TYPES = {"function", "callable"}
UNDEFINED_TYPES = {"undefined"}

_CANONICAL_TAGS = (
    ("object", OBJECT_TYPES),
    ("string", STRING_TYPES),
    ("number", NUMBER_TYPES),
    ("symbol", SYMBOL_TYPES),
    ("boolean", BOOLEAN_TYPES),
    ("function", FUNCTION_TYPES),
    ("undefined", UNDEFINED_TYPES),
)

TYPE_TAGS = tuple(tag for tag, _ in _CANONICAL_TAGS)


def normalize_type_tag(type_tag: Any) -> Optional[str]:
    """Return the canonical tag for ``type_tag``, or None if it is not a known tag."""
    if not isinstance(type_tag, str):
        return None
    name = type_tag.strip().lower()
    for canonical, aliases in _CANONICAL_TAGS:
        if name in aliases:
            return canonical
    return None


def is_type_tag(type_tag: Any) -> bool:
    return normalize_type_tag(type_tag) is not None


def kind_of(value: Any) -> str:
    """Return the runtime kind of ``value`` as one of TYPE_TAGS.

    The order matters: bool is a Number subclass, and enum members or classes
    can be callable.
    """
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Number):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, enum.Enum):
        return "symbol"
    if callable(value):
        return "function"
    return "object"


def is_unary_predicate(candidate: Any) -> bool:
    """True if ``candidate`` can be called with exactly one positional argument.

    Classes are rejected: a type constraint is either a tag or a predicate function.
    """
    if not callable(candidate) or isinstance(candidate, type):
        return False

    try:
        signature = inspect.signature(candidate)
    except (TypeError, ValueError):
        return False

    required_positional = 0
    for param in signature.parameters.values():
        if param.default is not inspect.Parameter.empty:
            continue
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            required_positional += 1
        elif param.kind == inspect.Parameter.KEYWORD_ONLY:
            return False
    return required_positional == 1


def _json_fallback(value: Any) -> Any:
    # Records are mappings of their enumerable fields.
    if hasattr(value, "keys") and hasattr(value, "__getitem__"):
        return {key: value[key] for key in value.keys()}
    if isinstance(value, enum.Enum):
        return repr(value)
    if isinstance(value, (set, frozenset)):
        return list(value)
    return repr(value)


def format_value(value: Any) -> str:
    """Render ``value`` JSON-like for messages and record string forms."""
    if value is UNDEFINED:
        return "undefined"
    try:
        return json.dumps(value, default=_json_fallback, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)


def describe_predicate(predicate: Callable[[Any], Any]) -> str:
    return getattr(predicate, "__qualname__", None) or repr(predicate)
