"""Apple, C/C++ and Swift platform types and their unresolved handles."""

from .platforms import ApplePlatformBundle, CxxPlatform, SwiftPlatform
from .unresolved import (
    StaticUnresolvedApplePlatform,
    StaticUnresolvedCxxPlatform,
    StaticUnresolvedSwiftPlatform,
    ToolchainBackedUnresolvedApplePlatform,
    UnresolvedApplePlatform,
    UnresolvedCxxPlatform,
    UnresolvedSwiftPlatform,
)

__all__ = [
    "ApplePlatformBundle",
    "CxxPlatform",
    "StaticUnresolvedApplePlatform",
    "StaticUnresolvedCxxPlatform",
    "StaticUnresolvedSwiftPlatform",
    "SwiftPlatform",
    "ToolchainBackedUnresolvedApplePlatform",
    "UnresolvedApplePlatform",
    "UnresolvedCxxPlatform",
    "UnresolvedSwiftPlatform",
]
