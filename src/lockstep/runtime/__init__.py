"""Runtime layer - type registration and step driving."""

from lockstep.runtime.driver import DriveConfig, DriveResult, drain
from lockstep.runtime.registry import (
    MAP_DOC,
    TypeDefinition,
    TypeRegistry,
    builtin_registry,
)

__all__ = [
    "DriveConfig",
    "DriveResult",
    "drain",
    "MAP_DOC",
    "TypeDefinition",
    "TypeRegistry",
    "builtin_registry",
]
