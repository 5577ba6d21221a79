"""Rebuilders for value-like composites.

Boxed primitives, temporal values, compiled patterns and nodes are copied by
constructing a fresh object from their value; they never need member-wise
recursion.
"""

from __future__ import annotations

import datetime
import re
import warnings
from collections.abc import Mapping
from typing import Any, TypeVar

T = TypeVar("T")

_BOX_BASES = (str, int, float, complex, bytes)


class PatternFlagsDroppedWarning(UserWarning):
    """Emitted when a pattern copy loses flags outside the preserved set."""

    pass


def rebox(value: T) -> T:
    """New instance of value's class boxing the same primitive value.

    `__init__` is not run, so subclasses with custom constructors rebox fine.
    """
    cls = type(value)
    if isinstance(value, bytearray):
        # bytearray fills its buffer in __init__, not __new__
        buffer = bytearray.__new__(cls)
        bytearray.__init__(buffer, bytes(value))
        return buffer  # type: ignore[return-value]
    for base in _BOX_BASES:
        if isinstance(value, base):
            return base.__new__(cls, base(value))  # type: ignore[call-overload,no-any-return]
    raise TypeError(f"{cls.__name__} is not a boxed primitive")


def rebuild_temporal(value: T) -> T:
    """New instance of value's class for the same instant or duration."""
    cls = type(value)
    if isinstance(value, datetime.datetime):
        return cls(  # type: ignore[call-arg]
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond,
            value.tzinfo,
            fold=value.fold,
        )
    if isinstance(value, datetime.date):
        return cls(value.year, value.month, value.day)  # type: ignore[call-arg]
    if isinstance(value, datetime.time):
        return cls(  # type: ignore[call-arg]
            value.hour,
            value.minute,
            value.second,
            value.microsecond,
            value.tzinfo,
            fold=value.fold,
        )
    if isinstance(value, datetime.timedelta):
        return cls(  # type: ignore[call-arg]
            days=value.days, seconds=value.seconds, microseconds=value.microseconds
        )
    raise TypeError(f"{cls.__name__} is not a temporal value")


def pattern_flag_string(pattern: re.Pattern[Any], codes: str, flag_codes: Mapping[str, int]) -> str:
    """Flag letters from codes that are set on pattern, in the order given by codes."""
    return "".join(code for code in codes if pattern.flags & flag_codes[code])


def rebuild_pattern(
    pattern: re.Pattern[Any],
    codes: str,
    flag_codes: Mapping[str, int],
    *,
    warn_dropped: bool = False,
) -> re.Pattern[Any]:
    """Recompile pattern from its source, keeping only the flags named in codes.

    Args:
        pattern: Compiled pattern to copy.
        codes: Ordered flag letters to test and preserve, e.g. "ims".
        flag_codes: Mapping from flag letter to re flag.
        warn_dropped: Emit PatternFlagsDroppedWarning if any explicit flag is lost.

    Returns:
        Freshly compiled pattern. The re module caches compiled patterns, so
        the result may be a shared immutable object.
    """
    flags = 0
    for code in pattern_flag_string(pattern, codes, flag_codes):
        flags |= flag_codes[code]

    if warn_dropped:
        # str patterns always carry UNICODE implicitly; it is not a dropped flag
        implicit = re.UNICODE if isinstance(pattern.pattern, str) else 0
        dropped = pattern.flags & ~flags & ~implicit
        if dropped:
            warnings.warn(
                f"Pattern {pattern.pattern!r} loses flags {re.RegexFlag(dropped)!r} when cloned",
                PatternFlagsDroppedWarning,
                stacklevel=2,
            )

    return re.compile(pattern.pattern, flags)


def clone_node(node: T) -> T:
    """Native shallow clone of an element-like node.

    Prefers DOM-style `cloneNode(False)`. ElementTree elements are rebuilt
    through `makeelement` with a copy of their attributes, text and tail.
    Children are never carried over.
    """
    clone_method = getattr(node, "cloneNode", None)
    if callable(clone_method):
        return clone_method(False)  # type: ignore[no-any-return]
    element = node.makeelement(node.tag, dict(node.attrib))  # type: ignore[attr-defined]
    element.text = node.text  # type: ignore[attr-defined]
    element.tail = node.tail  # type: ignore[attr-defined]
    return element  # type: ignore[no-any-return]
