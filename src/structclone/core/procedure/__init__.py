"""Custom clone procedures: protocol, registry, and resolver."""

from structclone.core.procedure.core import (
    ProcedureRegistry,
    clear_clone_procedures,
    clone_procedure,
    get_registry,
    register_clone_procedure,
    resolve_custom_clone,
)
from structclone.core.procedure.models import (
    NO_MATCH,
    CloneProcedure,
    FunctionProcedure,
    NoMatch,
    is_clone_procedure,
)

__all__ = [
    # Models
    "CloneProcedure",
    "FunctionProcedure",
    "NoMatch",
    "NO_MATCH",
    "is_clone_procedure",
    # Core
    "ProcedureRegistry",
    "get_registry",
    "register_clone_procedure",
    "clear_clone_procedures",
    "clone_procedure",
    "resolve_custom_clone",
]
