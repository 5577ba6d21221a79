"""Clone kinds and the classifier that assigns them."""

from structclone.core.kinds.core import (
    DEFAULT_NODE_TYPE_PATTERN,
    classify,
    has_native_clone,
    solid_base,
    type_tag,
)
from structclone.core.kinds.models import CloneKind

__all__ = [
    # Models
    "CloneKind",
    # Core
    "classify",
    "type_tag",
    "solid_base",
    "has_native_clone",
    "DEFAULT_NODE_TYPE_PATTERN",
]
