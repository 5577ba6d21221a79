"""Core type definitions for structclone."""

type Cloned[T] = T
"""Type alias indicating a value is an independent deep copy.

When you see `Cloned[T]` in a return type, the returned value shares no mutable
state with the input. Mutating it never affects the original graph, and shared
or cyclic references inside the original are mirrored inside the copy.
"""
