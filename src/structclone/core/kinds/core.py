"""Runtime classification of values into clone kinds.

Usage:
    classify(42)                   # CloneKind.PRIMITIVE
    classify([1, 2])               # CloneKind.SEQUENCE
    classify(lambda: None)         # CloneKind.UNKNOWN
    type_tag(lambda: None)         # "builtins.function"
"""

from __future__ import annotations

import datetime
import re
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from types import EllipsisType, FunctionType, NotImplementedType, SimpleNamespace
from typing import Any

from structclone.core.kinds.models import CloneKind

_TPFLAGS_DISALLOW_INSTANTIATION = 1 << 7
_TPFLAGS_IMMUTABLETYPE = 1 << 8
_TPFLAGS_HEAPTYPE = 1 << 9
_NATIVE_TYPE_FLAGS = _TPFLAGS_IMMUTABLETYPE | _TPFLAGS_DISALLOW_INSTANTIATION

DEFAULT_NODE_TYPE_PATTERN = re.compile(r"^\w*Element$")

_PRIMITIVE_TYPES: frozenset[type] = frozenset(
    {
        type(None),
        bool,
        int,
        float,
        complex,
        str,
        bytes,
        range,
        EllipsisType,
        NotImplementedType,
    }
)
_IMMUTABLE_VALUE_TYPES = (Enum, Decimal, Fraction)
_BOXABLE_TYPES = (str, int, float, complex, bytes, bytearray)
_TEMPORAL_TYPES = (datetime.date, datetime.time, datetime.timedelta)
_RECORD_BASES = (object, SimpleNamespace)


def type_tag(value: Any) -> str:
    """Fully qualified name of value's runtime type, e.g. "builtins.function"."""
    cls = type(value)
    return f"{cls.__module__}.{cls.__qualname__}"


def _is_python_class(cls: type) -> bool:
    """True for classes created by a `class` statement.

    Extension types built from specs are heap types as well, but they are
    usually flagged immutable and define a native `__new__`.
    """
    flags = cls.__flags__
    if not flags & _TPFLAGS_HEAPTYPE or flags & _NATIVE_TYPE_FLAGS:
        return False
    new = cls.__dict__.get("__new__")
    return new is None or isinstance(new, (staticmethod, FunctionType))


def solid_base(cls: type) -> type:
    """First class in the MRO that is not defined in Python.

    Instances keep all their state in `__dict__` and `__slots__` only when this
    is `object` (or SimpleNamespace, whose payload is its `__dict__`).
    """
    for base in cls.__mro__:
        if not _is_python_class(base):
            return base
    return object


def has_native_clone(value: Any) -> bool:
    """Check for a native shallow clone: DOM-style `cloneNode` or ElementTree `makeelement`."""
    return callable(getattr(value, "cloneNode", None)) or callable(
        getattr(value, "makeelement", None)
    )


def classify(
    value: Any,
    node_pattern: re.Pattern[str] | None = DEFAULT_NODE_TYPE_PATTERN,
) -> CloneKind:
    """Decide how value is cloned.

    Args:
        value: Any value.
        node_pattern: Regex matched against the class name to detect node
            types, or None to disable the node path.

    Returns:
        The CloneKind for value. UNKNOWN means the value cannot be cloned
        by the built-in rules.
    """
    cls = type(value)
    if cls in _PRIMITIVE_TYPES or isinstance(value, _IMMUTABLE_VALUE_TYPES):
        return CloneKind.PRIMITIVE
    if isinstance(value, _TEMPORAL_TYPES):
        return CloneKind.TEMPORAL
    if isinstance(value, re.Pattern):
        return CloneKind.PATTERN
    if isinstance(value, _BOXABLE_TYPES):
        return CloneKind.BOXED
    if isinstance(value, list):
        return CloneKind.SEQUENCE
    if isinstance(value, tuple):
        return CloneKind.TUPLE
    if isinstance(value, dict):
        return CloneKind.MAPPING
    if isinstance(value, (set, frozenset)):
        return CloneKind.SET
    if node_pattern is not None and node_pattern.match(cls.__name__) and has_native_clone(value):
        return CloneKind.NODE
    if callable(value):
        return CloneKind.UNKNOWN
    if solid_base(cls) in _RECORD_BASES:
        return CloneKind.RECORD
    return CloneKind.UNKNOWN
