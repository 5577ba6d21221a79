"""Structured clone engine.

Usage:
    from structclone import clone

    a = {"name": "root", "children": []}
    a["children"].append(a)

    b = clone(a)
    assert b is not a
    assert b["children"][0] is b

    # Private registry or settings:
    cloner = StructuredCloner(
        registry=ProcedureRegistry(),
        settings=CloneSettings(clone_nodes=False),
    )
    cloner.clone(value)

Every top-level call gets its own reference map. Composite values are mapped to
their copy before their members are visited, so cycles and shared references in
the input reappear in the output instead of recursing forever.
"""

from __future__ import annotations

import re
from collections import defaultdict
from typing import Any

from structclone.config.settings import PATTERN_FLAG_CODES, CloneSettings, get_settings
from structclone.core.kinds import CloneKind, classify, solid_base, type_tag
from structclone.core.procedure import (
    NO_MATCH,
    CloneProcedure,
    ProcedureRegistry,
    get_registry,
    resolve_custom_clone,
)
from structclone.core.reference import ReferenceMap
from structclone.core.types import Cloned
from structclone.engine.builders import clone_node, rebox, rebuild_pattern, rebuild_temporal


class UnsupportedTypeError(TypeError):
    """Raised when a reachable value has no built-in or custom clone rule.

    Attributes:
        type_tag: Fully qualified name of the offending value's type.
    """

    def __init__(self, type_tag: str) -> None:
        super().__init__(f"Don't know how to clone object of type {type_tag}")
        self.type_tag = type_tag


def _iter_slots(cls: type) -> list[str]:
    """Slot attribute names declared anywhere in cls's MRO, mangled as stored."""
    names: list[str] = []
    for base in cls.__mro__:
        slots = base.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{base.__name__.lstrip('_')}{name}"
            if name not in names:
                names.append(name)
    return names


def _own_attributes(value: Any) -> list[tuple[str, Any, bool]]:
    """(name, value, is_slot) for every instance attribute set on value."""
    attributes = [(name, item, False) for name, item in getattr(value, "__dict__", {}).items()]
    for name in _iter_slots(type(value)):
        try:
            item = object.__getattribute__(value, name)
        except AttributeError:
            continue
        attributes.append((name, item, True))
    return attributes


class StructuredCloner:
    """Deep-clones object graphs with a given procedure registry and settings.

    Args:
        registry: Custom procedures to consult. Defaults to the global registry.
        settings: Engine configuration. Defaults to the process settings.
    """

    def __init__(
        self,
        registry: ProcedureRegistry | None = None,
        settings: CloneSettings | None = None,
    ) -> None:
        """Initialize cloner.

        Args:
            registry: Custom procedures to consult. Defaults to the global registry.
            settings: Engine configuration. Defaults to the process settings.
        """
        self._registry = registry if registry is not None else get_registry()
        self._settings = settings if settings is not None else get_settings()
        self._node_pattern = (
            re.compile(self._settings.node_type_pattern) if self._settings.clone_nodes else None
        )

    @property
    def registry(self) -> ProcedureRegistry:
        return self._registry

    @property
    def settings(self) -> CloneSettings:
        return self._settings

    @property
    def node_pattern(self) -> re.Pattern[str] | None:
        """Compiled node type pattern, or None when node cloning is disabled."""
        return self._node_pattern

    def clone[T](self, value: T) -> Cloned[T]:
        """Perform one full top-level clone.

        Args:
            value: Any value.

        Returns:
            value itself if it is a primitive, otherwise an independent deep copy.

        Raises:
            UnsupportedTypeError: If any reachable value cannot be cloned.
                No partial result is returned.
        """
        session = _CloneSession(self, self._registry.snapshot())
        return session.complete(value)  # type: ignore[no-any-return]


class _CloneSession:
    """State of a single top-level clone call.

    Shells are filled from an explicit work stack, so the call stack does not
    grow with list, dict or record nesting depth. Unfilled shells are indexed
    by their original, which lets a dict key or set member be finished out of
    order before it is hashed.
    """

    def __init__(self, cloner: StructuredCloner, procedures: tuple[CloneProcedure, ...]) -> None:
        settings = cloner.settings
        self.refs = ReferenceMap()
        self._procedures = procedures
        self._node_pattern = cloner.node_pattern
        self._pattern_flags = settings.pattern_flags
        self._warn_dropped = settings.warn_dropped_pattern_flags
        self._unfilled: dict[int, tuple[Any, CloneKind]] = {}

    def complete(self, value: Any) -> Any:
        """Clone value and fill every shell reachable from it.

        Shells created earlier in the call are filled too when value reaches
        them, so the result is safe to hash.
        """
        output = self.clone(value)
        seen: set[int] = set()
        stack = [value]
        while stack:
            original = stack.pop()
            if id(original) in seen or original not in self.refs:
                continue
            seen.add(id(original))
            task = self._unfilled.pop(id(original), None)
            if task is not None:
                shell, kind = task
                self._populate(original, shell, kind)
            stack.extend(self._members(original))
        return output

    def clone(self, value: Any) -> Any:
        """Clone one value. Collections may come back as unfilled shells."""
        kind = classify(value, self._node_pattern)
        if kind is CloneKind.PRIMITIVE:
            return value

        if value in self.refs:
            return self.refs.get(value)

        # Custom procedures outrank built-in handling and own their cycle safety
        custom = resolve_custom_clone(value, self._procedures)
        if custom is not NO_MATCH:
            return custom

        if kind is CloneKind.TUPLE:
            return self._clone_tuple(value)
        if kind is CloneKind.SET and isinstance(value, frozenset):
            return self._clone_frozenset(value)

        output = self._shell(value, kind)
        self.refs.set(value, output)
        if kind.is_collection:
            self._unfilled[id(value)] = (output, kind)
        return output

    def _shell(self, value: Any, kind: CloneKind) -> Any:
        cls = type(value)
        match kind:
            case CloneKind.BOXED:
                return rebox(value)
            case CloneKind.TEMPORAL:
                return rebuild_temporal(value)
            case CloneKind.PATTERN:
                return rebuild_pattern(
                    value,
                    self._pattern_flags,
                    PATTERN_FLAG_CODES,
                    warn_dropped=self._warn_dropped,
                )
            case CloneKind.SEQUENCE:
                if cls is list:
                    return [None] * len(value)
                shell = cls.__new__(cls)
                list.extend(shell, [None] * len(value))
                return shell
            case CloneKind.MAPPING:
                if cls is dict:
                    return {}
                shell = cls.__new__(cls)
                if isinstance(value, defaultdict):
                    shell.default_factory = value.default_factory
                return shell
            case CloneKind.SET:
                return set() if cls is set else cls.__new__(cls)
            case CloneKind.NODE:
                return clone_node(value)
            case CloneKind.RECORD:
                return solid_base(cls).__new__(cls)
            case _:
                raise UnsupportedTypeError(type_tag(value))

    def _populate(self, original: Any, shell: Any, kind: CloneKind) -> None:
        match kind:
            case CloneKind.SEQUENCE:
                for index, item in enumerate(original):
                    shell[index] = self.clone(item)
            case CloneKind.MAPPING:
                for key, item in original.items():
                    # Keys are hashed on insert, so they must be complete
                    shell[self.complete(key)] = self.clone(item)
            case CloneKind.SET:
                for member in original:
                    shell.add(self.complete(member))
        for name, item, is_slot in _own_attributes(original):
            if is_slot:
                object.__setattr__(shell, name, self.clone(item))
            else:
                shell.__dict__[name] = self.clone(item)

    def _members(self, original: Any) -> list[Any]:
        """Values directly owned by an original that went through built-in cloning."""
        match classify(original, self._node_pattern):
            case CloneKind.TUPLE:
                return list(original)
            case CloneKind.SEQUENCE | CloneKind.SET:
                members = list(original)
            case CloneKind.MAPPING:
                members = [part for pair in original.items() for part in pair]
            case CloneKind.RECORD:
                members = []
            case _:
                return []
        members.extend(item for _, item, _ in _own_attributes(original))
        return members

    def _clone_tuple(self, value: tuple[Any, ...]) -> tuple[Any, ...]:
        items = [self.clone(item) for item in value]
        if value in self.refs:
            # A cycle through one of the members already produced a copy
            return self.refs.get(value)  # type: ignore[no-any-return]
        cls = type(value)
        output = tuple(items) if cls is tuple else tuple.__new__(cls, items)
        self.refs.set(value, output)
        return output

    def _clone_frozenset(self, value: frozenset[Any]) -> frozenset[Any]:
        items = [self.complete(item) for item in value]
        if value in self.refs:
            return self.refs.get(value)  # type: ignore[no-any-return]
        cls = type(value)
        output = frozenset(items) if cls is frozenset else frozenset.__new__(cls, items)
        self.refs.set(value, output)
        return output


def clone[T](value: T) -> Cloned[T]:
    """Deep-clone value using the global procedure registry and process settings.

    Args:
        value: Any value.

    Returns:
        value itself if it is a primitive, otherwise an independent deep copy.

    Raises:
        UnsupportedTypeError: If any reachable value cannot be cloned.
    """
    return StructuredCloner().clone(value)
