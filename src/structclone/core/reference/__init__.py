"""Reference map: identity correspondences discovered during one clone call."""

from structclone.core.reference.core import ReferenceMap

__all__ = [
    "ReferenceMap",
]
