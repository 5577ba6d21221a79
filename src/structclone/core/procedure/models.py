"""Procedure models: the custom clone protocol and its helpers.

A clone procedure lets host code take over copying of values it recognizes.
Anything with callable `detect` and `copy` attributes qualifies; the
`FunctionProcedure` dataclass is a convenient concrete implementation.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable


class NoMatch(Enum):
    """Sentinel type for "no custom procedure handled this value"."""

    NO_MATCH = auto()

    def __repr__(self) -> str:
        return "NO_MATCH"


NO_MATCH = NoMatch.NO_MATCH
"""Returned by the resolver when no procedure claimed a value.

Distinct from every valid copy result, `None` included.
"""


@runtime_checkable
class CloneProcedure(Protocol):
    """Detector + copier pair that overrides built-in cloning for some values."""

    def detect(self, value: Any) -> bool: ...
    def copy(self, value: Any) -> Any: ...


@dataclass(slots=True, frozen=True)
class FunctionProcedure:
    """Clone procedure built from two plain callables.

    Usage:
        FunctionProcedure(
            detect=lambda v: isinstance(v, Money),
            copy=lambda m: Money(m.amount, m.currency),
        )
    """

    detect: Callable[[Any], bool]
    copy: Callable[[Any], Any]


def is_clone_procedure(candidate: Any) -> bool:
    """Check that candidate exposes callable `detect` and `copy`.

    Classes are rejected even when they define both methods: a procedure is an
    object, and calling unbound methods on a class would not do what the caller
    meant.

    Args:
        candidate: Object to check.

    Returns:
        True if candidate can be used as a clone procedure, False otherwise.
    """
    if isinstance(candidate, type):
        return False
    return callable(getattr(candidate, "detect", None)) and callable(
        getattr(candidate, "copy", None)
    )
