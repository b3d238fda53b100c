"""Public package entrypoint for deferred toolchain resolution."""

from .config import PlatformDeclaration, ToolchainConfig
from .errors import (
    ConfigurationError,
    ErrorCode,
    InvalidArgumentError,
    RuleLookupError,
    ToolgraphError,
    UnexpectedRuleKindError,
    UnknownFlavorError,
    UnsupportedOperationError,
)
from .graph import ComposedKey, ComposedResult, ComputeKey, ComputeResult, compose
from .models import UNCONFIGURED, BuildTarget, Flavor, TargetConfiguration
from .registry import PlatformKey, PlatformRegistry, ResolvedPlatform
from .report import PlatformReport, PlatformReportEntry
from .rules import AppleToolchainRule, GenericRule, MapRuleResolver
from .toolchain import (
    ApplePlatformBundle,
    CxxPlatform,
    StaticUnresolvedApplePlatform,
    SwiftPlatform,
    ToolchainBackedUnresolvedApplePlatform,
)

__all__ = [
    "UNCONFIGURED",
    "ApplePlatformBundle",
    "AppleToolchainRule",
    "BuildTarget",
    "ComposedKey",
    "ComposedResult",
    "ComputeKey",
    "ComputeResult",
    "ConfigurationError",
    "CxxPlatform",
    "ErrorCode",
    "Flavor",
    "GenericRule",
    "InvalidArgumentError",
    "MapRuleResolver",
    "PlatformDeclaration",
    "PlatformKey",
    "PlatformRegistry",
    "PlatformReport",
    "PlatformReportEntry",
    "ResolvedPlatform",
    "RuleLookupError",
    "StaticUnresolvedApplePlatform",
    "SwiftPlatform",
    "TargetConfiguration",
    "ToolchainBackedUnresolvedApplePlatform",
    "ToolchainConfig",
    "ToolgraphError",
    "UnexpectedRuleKindError",
    "UnknownFlavorError",
    "UnsupportedOperationError",
    "compose",
]
