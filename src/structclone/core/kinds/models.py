"""Clone kinds: the closed set of shapes the engine knows how to copy."""

from __future__ import annotations

from enum import Enum, auto


class CloneKind(Enum):
    """How a value is cloned, decided once per value by `classify`."""

    PRIMITIVE = auto()  # Immutable value, returned as-is
    BOXED = auto()  # Subclass of a primitive, re-boxed around the same value
    TEMPORAL = auto()  # datetime/date/time/timedelta, rebuilt from the same instant
    PATTERN = auto()  # Compiled regex, recompiled from source and supported flags
    SEQUENCE = auto()  # list: pre-sized shell, members copied by index
    TUPLE = auto()  # tuple: built from copied members
    MAPPING = auto()  # dict: empty shell, items copied
    SET = auto()  # set/frozenset: members copied to completion, then inserted
    RECORD = auto()  # Plain class instance: same-class shell, own attributes copied
    NODE = auto()  # Element-like object with a native shallow clone
    UNKNOWN = auto()  # Anything else: cloning fails

    @property
    def is_collection(self) -> bool:
        """True for kinds that get a registered shell followed by member population."""
        return self in _COLLECTION_KINDS


_COLLECTION_KINDS = frozenset(
    {CloneKind.SEQUENCE, CloneKind.MAPPING, CloneKind.SET, CloneKind.RECORD}
)
