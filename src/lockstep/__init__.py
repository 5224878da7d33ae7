from .kernel import (
    EXHAUSTED,
    CallableInvocable,
    ConstructionError,
    Evidence,
    Invocable,
    IterableSource,
    IteratorSource,
    MapCombinator,
    Signal,
    Step,
    Trace,
    advance,
    as_invocable,
    get_iterator,
    invoke,
)
from .runtime import (
    MAP_DOC,
    DriveConfig,
    DriveResult,
    TypeDefinition,
    TypeRegistry,
    builtin_registry,
    drain,
)

__all__ = [
    # Core
    "MapCombinator",
    "Step",
    "Signal",
    "EXHAUSTED",
    "ConstructionError",
    # Ports & adapters
    "IterableSource",
    "Invocable",
    "IteratorSource",
    "CallableInvocable",
    "get_iterator",
    "as_invocable",
    "advance",
    "invoke",
    # Registry
    "TypeDefinition",
    "TypeRegistry",
    "builtin_registry",
    "MAP_DOC",
    # Driving
    "DriveConfig",
    "DriveResult",
    "drain",
    # Tracing
    "Trace",
    "Evidence",
]
