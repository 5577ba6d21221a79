"""Core functionalities: stateless building blocks of the clone engine.

Architecture Note:
    core/ contains the reference map, the clone-kind classifier and the custom
    procedure registry. The engine/ package drives them for one clone call;
    config/ holds process settings.
"""

from structclone.core.kinds import (
    DEFAULT_NODE_TYPE_PATTERN,
    CloneKind,
    classify,
    has_native_clone,
    solid_base,
    type_tag,
)
from structclone.core.procedure import (
    NO_MATCH,
    CloneProcedure,
    FunctionProcedure,
    NoMatch,
    ProcedureRegistry,
    clear_clone_procedures,
    clone_procedure,
    get_registry,
    is_clone_procedure,
    register_clone_procedure,
    resolve_custom_clone,
)
from structclone.core.reference import ReferenceMap
from structclone.core.types import Cloned

__all__ = [
    # Types
    "Cloned",
    # Reference map
    "ReferenceMap",
    # Kinds
    "CloneKind",
    "classify",
    "type_tag",
    "solid_base",
    "has_native_clone",
    "DEFAULT_NODE_TYPE_PATTERN",
    # Procedures
    "CloneProcedure",
    "FunctionProcedure",
    "NoMatch",
    "NO_MATCH",
    "is_clone_procedure",
    "ProcedureRegistry",
    "get_registry",
    "register_clone_procedure",
    "clear_clone_procedures",
    "clone_procedure",
    "resolve_custom_clone",
]
