"""structclone: structured cloning of Python object graphs.

Usage:
    from structclone import clone, register_clone_procedure, FunctionProcedure

    shared = {"tags": ["a", "b"]}
    doc = {"left": shared, "right": shared}
    doc["self"] = doc

    copy = clone(doc)
    assert copy["left"] is copy["right"]
    assert copy["self"] is copy

    class Connection:
        def __init__(self, address):
            self.address = address
            self.handle = None

    register_clone_procedure(
        FunctionProcedure(
            detect=lambda v: isinstance(v, Connection),
            copy=lambda conn: conn,  # share live handles instead of failing
        )
    )
    assert clone([Connection("db:5432")])[0].address == "db:5432"
"""

__version__ = "0.1.0"

# Configuration
from structclone.config import CloneSettings

# Core primitives
from structclone.core import (
    NO_MATCH,
    Cloned,
    CloneKind,
    CloneProcedure,
    FunctionProcedure,
    ProcedureRegistry,
    ReferenceMap,
    classify,
    clear_clone_procedures,
    clone_procedure,
    get_registry,
    register_clone_procedure,
    type_tag,
)

# Engine
from structclone.engine import (
    PatternFlagsDroppedWarning,
    StructuredCloner,
    UnsupportedTypeError,
    clone,
)

__all__ = [
    # Version
    "__version__",
    # Engine
    "clone",
    "StructuredCloner",
    "UnsupportedTypeError",
    "PatternFlagsDroppedWarning",
    # Procedures
    "register_clone_procedure",
    "clear_clone_procedures",
    "clone_procedure",
    "get_registry",
    "ProcedureRegistry",
    "CloneProcedure",
    "FunctionProcedure",
    "NO_MATCH",
    # Core
    "Cloned",
    "CloneKind",
    "classify",
    "type_tag",
    "ReferenceMap",
    # Config
    "CloneSettings",
]
