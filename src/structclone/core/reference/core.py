"""Identity-keyed map from original composites to their clones.

Usage:
    refs = ReferenceMap()
    refs.set(original, shell)
    if original in refs:
        shell = refs.get(original)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class ReferenceMap:
    """Maps original objects to their in-progress or completed copies.

    Lookup is by identity, never by equality: two equal but distinct lists are
    two different entries. Each original is mapped at most once and the first
    mapping wins.

    The map holds a strong reference to every registered original so that
    `id()` values cannot be recycled while the owning clone call is running.
    """

    def __init__(self) -> None:
        """Initialize empty reference map."""
        self._inputs: list[Any] = []
        self._outputs: list[Any] = []
        self._index: dict[int, int] = {}

    def set(self, original: Any, output: Any) -> bool:
        """Map original to output unless original is already mapped.

        Args:
            original: Object from the input graph.
            output: Its copy (may still be an unpopulated shell).

        Returns:
            True if a new mapping was recorded, False if original was already mapped.
        """
        key = id(original)
        if key in self._index:
            return False
        self._index[key] = len(self._inputs)
        self._inputs.append(original)
        self._outputs.append(output)
        return True

    def get(self, original: Any, default: Any = None) -> Any:
        """Get the copy mapped to original, or default if not mapped."""
        idx = self._index.get(id(original))
        if idx is None:
            return default
        return self._outputs[idx]

    def __contains__(self, original: Any) -> bool:
        return id(original) in self._index

    def __len__(self) -> int:
        return len(self._inputs)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Iterate (original, output) pairs in registration order."""
        return iter(zip(self._inputs, self._outputs, strict=True))

    @property
    def inputs(self) -> tuple[Any, ...]:
        """Registered originals, in registration order."""
        return tuple(self._inputs)

    @property
    def outputs(self) -> tuple[Any, ...]:
        """Copies parallel to `inputs`."""
        return tuple(self._outputs)
