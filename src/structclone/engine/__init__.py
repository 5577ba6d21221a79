"""Clone engine: dispatcher, structural cloner, and value rebuilders."""

from structclone.engine.builders import PatternFlagsDroppedWarning
from structclone.engine.cloner import StructuredCloner, UnsupportedTypeError, clone

__all__ = [
    "StructuredCloner",
    "UnsupportedTypeError",
    "PatternFlagsDroppedWarning",
    "clone",
]
