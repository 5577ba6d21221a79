"""Procedure registry, resolver, and registration helpers.

Usage:
    register_clone_procedure(
        FunctionProcedure(detect=lambda v: isinstance(v, Token), copy=Token.fresh)
    )

    # Or as a decorator keyed on a type:
    @clone_procedure(Money)
    def copy_money(money: Money) -> Money:
        return Money(money.amount, money.currency)

    clear_clone_procedures()
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from structclone.core.procedure.models import (
    NO_MATCH,
    CloneProcedure,
    FunctionProcedure,
    NoMatch,
    is_clone_procedure,
)

F = TypeVar("F", bound=Callable[[Any], Any])


class ProcedureRegistry:
    """Ordered, thread-safe list of custom clone procedures.

    Later registrations take priority over earlier ones. Clone calls never read
    the live list: they take a `snapshot()` up front, so a concurrent
    `register()` or `clear()` only affects calls that start afterwards.
    """

    def __init__(self) -> None:
        """Initialize empty procedure registry."""
        self._procedures: list[CloneProcedure] = []
        self._lock = threading.Lock()

    def register(self, procedure: Any) -> bool:
        """Append a procedure if it exposes callable `detect` and `copy`.

        Mappings with callable "detect" and "copy" entries are accepted and
        wrapped in a FunctionProcedure.

        Args:
            procedure: Candidate procedure object or mapping.

        Returns:
            True if registered, False if the candidate was rejected.
        """
        if isinstance(procedure, Mapping):
            detect, copy = procedure.get("detect"), procedure.get("copy")
            if not (callable(detect) and callable(copy)):
                return False
            procedure = FunctionProcedure(detect=detect, copy=copy)
        elif not is_clone_procedure(procedure):
            return False

        with self._lock:
            self._procedures.append(procedure)
        return True

    def clear(self) -> None:
        """Discard every registered procedure."""
        with self._lock:
            self._procedures = []

    def snapshot(self) -> tuple[CloneProcedure, ...]:
        """Immutable view of the current procedures, oldest first."""
        with self._lock:
            return tuple(self._procedures)

    def resolve(self, value: Any) -> Any | NoMatch:
        """Resolve value against the current procedures. See resolve_custom_clone."""
        return resolve_custom_clone(value, self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._procedures)


def resolve_custom_clone(value: Any, procedures: Iterable[CloneProcedure]) -> Any | NoMatch:
    """Copy value with the most recently registered procedure that detects it.

    Args:
        value: Value to clone.
        procedures: Procedures in registration order (oldest first).

    Returns:
        The first matching procedure's copy result, or NO_MATCH.
    """
    for procedure in reversed(tuple(procedures)):
        if procedure.detect(value):
            return procedure.copy(value)
    return NO_MATCH


# Module-level registry instance
_registry = ProcedureRegistry()


def get_registry() -> ProcedureRegistry:
    """Access the global procedure registry.

    Returns:
        The process-wide ProcedureRegistry instance.
    """
    return _registry


def register_clone_procedure(procedure: Any) -> bool:
    """Register a custom clone procedure on the global registry.

    Returns:
        True on success, False if procedure lacks a callable detect or copy.
    """
    return _registry.register(procedure)


def clear_clone_procedures() -> None:
    """Empty the global registry."""
    _registry.clear()


def _as_predicate(detect: Callable[[Any], bool] | type | tuple[type, ...]) -> Callable[[Any], bool]:
    if isinstance(detect, type) or (
        isinstance(detect, tuple) and all(isinstance(t, type) for t in detect)
    ):
        types = detect
        return lambda value: isinstance(value, types)
    return detect


def clone_procedure(
    detect: Callable[[Any], bool] | type | tuple[type, ...],
    *,
    registry: ProcedureRegistry | None = None,
) -> Callable[[F], F]:
    """Register the decorated function as the copier for matching values.

    Args:
        detect: Predicate, class, or tuple of classes selecting the values to handle.
        registry: Registry to register on. Defaults to the global registry.

    Returns:
        Decorator that registers the function and returns it unchanged.

    Raises:
        TypeError: If detect is neither callable nor a class/tuple of classes.
    """
    predicate = _as_predicate(detect)
    if not callable(predicate):
        raise TypeError(f"detect must be a predicate or a class, got {type(detect).__name__}")
    target = registry if registry is not None else _registry

    def decorator(fn: F) -> F:
        target.register(FunctionProcedure(detect=predicate, copy=fn))
        return fn

    return decorator
