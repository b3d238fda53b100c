"""Unresolved platforms: parse-time handles that resolve once rules exist.

During target-graph construction only names are known, so a platform is
described by the build targets it depends on (its *parse-time deps*). Once
the rule graph has been materialized a :class:`~toolgraph.rules.RuleResolver`
is available and the platform can be resolved to concrete objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from toolgraph.errors import UnexpectedRuleKindError, UnsupportedOperationError
from toolgraph.models import UNCONFIGURED, BuildTarget, Flavor, TargetConfiguration
from toolgraph.rules import AppleToolchainRule, RuleResolver
from toolgraph.toolchain.platforms import ApplePlatformBundle, CxxPlatform, SwiftPlatform


@runtime_checkable
class UnresolvedCxxPlatform(Protocol):
    @property
    def flavor(self) -> Flavor:
        """Flavor this platform was declared under."""

    def get_parse_time_deps(
        self, target_configuration: TargetConfiguration
    ) -> tuple[BuildTarget, ...]:
        """Targets that must be in the target graph before resolution."""

    def get_linker_parse_time_deps(
        self, target_configuration: TargetConfiguration
    ) -> tuple[BuildTarget, ...]:
        """Targets the linker needs at parse time."""

    def resolve(
        self,
        rule_resolver: RuleResolver,
        target_configuration: TargetConfiguration = UNCONFIGURED,
    ) -> CxxPlatform:
        """Materialize the C/C++ platform."""

    def with_flavor(self, flavor: Flavor) -> UnresolvedCxxPlatform:
        """Return the same platform under another flavor."""


@runtime_checkable
class UnresolvedSwiftPlatform(Protocol):
    @property
    def flavor(self) -> Flavor:
        """Flavor this platform was declared under."""

    def get_parse_time_deps(
        self, target_configuration: TargetConfiguration
    ) -> tuple[BuildTarget, ...]:
        """Targets that must be in the target graph before resolution."""

    def resolve(self, rule_resolver: RuleResolver) -> SwiftPlatform | None:
        """Materialize the Swift platform, or ``None`` for Swiftless toolchains."""


@runtime_checkable
class UnresolvedApplePlatform(Protocol):
    @property
    def flavor(self) -> Flavor:
        """Flavor this platform was declared under."""

    def get_parse_time_deps(
        self, target_configuration: TargetConfiguration
    ) -> tuple[BuildTarget, ...]:
        """Targets that must be in the target graph before resolution."""

    def resolve(self, rule_resolver: RuleResolver) -> ApplePlatformBundle:
        """Materialize the full Apple platform bundle."""

    def get_unresolved_cxx_platform(self) -> UnresolvedCxxPlatform:
        """C/C++ slice of this platform."""

    def get_unresolved_swift_platform(self) -> UnresolvedSwiftPlatform:
        """Swift slice of this platform."""


# ── Toolchain-target backed platforms ───────────────────────────────


@dataclass(frozen=True, slots=True, eq=False)
class _ToolchainCxxView:
    parent: ToolchainBackedUnresolvedApplePlatform

    @property
    def flavor(self) -> Flavor:
        return self.parent.flavor

    def get_flavor(self) -> Flavor:
        return self.parent.flavor

    def get_parse_time_deps(
        self, target_configuration: TargetConfiguration
    ) -> tuple[BuildTarget, ...]:
        return self.parent.get_parse_time_deps(target_configuration)

    def get_linker_parse_time_deps(
        self, target_configuration: TargetConfiguration
    ) -> tuple[BuildTarget, ...]:
        return self.get_parse_time_deps(target_configuration)

    def resolve(
        self,
        rule_resolver: RuleResolver,
        target_configuration: TargetConfiguration = UNCONFIGURED,
    ) -> CxxPlatform:
        return self.parent.resolve(rule_resolver).cxx_platform

    def with_flavor(self, flavor: Flavor) -> UnresolvedCxxPlatform:
        # The flavor is intrinsic to the referenced toolchain rule.
        raise UnsupportedOperationError(
            "A toolchain-backed C/C++ platform cannot be re-flavored.",
            hint="Declare another platform pointing at the toolchain for that flavor.",
            context={
                "operation": "with_flavor",
                "target": str(self.parent.toolchain_target),
                "flavor": str(self.parent.flavor),
                "requested_flavor": str(flavor),
            },
        )


@dataclass(frozen=True, slots=True, eq=False)
class _ToolchainSwiftView:
    parent: ToolchainBackedUnresolvedApplePlatform

    @property
    def flavor(self) -> Flavor:
        return self.parent.flavor

    def get_flavor(self) -> Flavor:
        return self.parent.flavor

    def get_parse_time_deps(
        self, target_configuration: TargetConfiguration
    ) -> tuple[BuildTarget, ...]:
        return self.parent.get_parse_time_deps(target_configuration)

    def resolve(self, rule_resolver: RuleResolver) -> SwiftPlatform | None:
        return self.parent.resolve(rule_resolver).swift_platform


@dataclass(frozen=True, slots=True)
class ToolchainBackedUnresolvedApplePlatform:
    """Apple platform declared as an ``apple_toolchain`` build target.

    The platform depends on exactly one rule, ``toolchain_target``; resolving
    asks that rule for the bundle matching ``flavor``. Nothing is cached, so
    each call to :meth:`resolve` goes back to the supplied resolver.
    """

    toolchain_target: BuildTarget
    flavor: Flavor
    _cxx: _ToolchainCxxView = field(init=False, repr=False, compare=False)
    _swift: _ToolchainSwiftView = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_cxx", _ToolchainCxxView(self))
        object.__setattr__(self, "_swift", _ToolchainSwiftView(self))

    def get_flavor(self) -> Flavor:
        return self.flavor

    def get_parse_time_deps(
        self, target_configuration: TargetConfiguration = UNCONFIGURED
    ) -> tuple[BuildTarget, ...]:
        return (self.toolchain_target,)

    def resolve(self, rule_resolver: RuleResolver) -> ApplePlatformBundle:
        rule = rule_resolver.get_rule(self.toolchain_target)
        if not isinstance(rule, AppleToolchainRule):
            raise UnexpectedRuleKindError(
                "Platform toolchain target does not refer to an apple_toolchain rule.",
                hint="Point the platform declaration at an apple_toolchain target.",
                context={
                    "operation": "resolve",
                    "target": str(self.toolchain_target),
                    "rule_kind": str(getattr(rule, "kind", type(rule).__name__)),
                    "flavor": str(self.flavor),
                },
            )
        return rule.get_apple_platform(self.flavor)

    def get_unresolved_cxx_platform(self) -> UnresolvedCxxPlatform:
        return self._cxx

    def get_unresolved_swift_platform(self) -> UnresolvedSwiftPlatform:
        return self._swift


# ── Statically known platforms ──────────────────────────────────────


@dataclass(frozen=True, slots=True)
class StaticUnresolvedCxxPlatform:
    """C/C++ platform that is already known at parse time."""

    cxx_platform: CxxPlatform

    @property
    def flavor(self) -> Flavor:
        return self.cxx_platform.flavor

    def get_parse_time_deps(
        self, target_configuration: TargetConfiguration
    ) -> tuple[BuildTarget, ...]:
        return ()

    def get_linker_parse_time_deps(
        self, target_configuration: TargetConfiguration
    ) -> tuple[BuildTarget, ...]:
        return ()

    def resolve(
        self,
        rule_resolver: RuleResolver,
        target_configuration: TargetConfiguration = UNCONFIGURED,
    ) -> CxxPlatform:
        return self.cxx_platform

    def with_flavor(self, flavor: Flavor) -> UnresolvedCxxPlatform:
        return StaticUnresolvedCxxPlatform(self.cxx_platform.with_flavor(flavor))


@dataclass(frozen=True, slots=True)
class StaticUnresolvedSwiftPlatform:
    flavor: Flavor
    swift_platform: SwiftPlatform | None

    def get_parse_time_deps(
        self, target_configuration: TargetConfiguration
    ) -> tuple[BuildTarget, ...]:
        return ()

    def resolve(self, rule_resolver: RuleResolver) -> SwiftPlatform | None:
        return self.swift_platform


@dataclass(frozen=True, slots=True)
class StaticUnresolvedApplePlatform:
    """Apple platform discovered from the host SDK rather than a build target."""

    bundle: ApplePlatformBundle

    @property
    def flavor(self) -> Flavor:
        return self.bundle.flavor

    def get_parse_time_deps(
        self, target_configuration: TargetConfiguration = UNCONFIGURED
    ) -> tuple[BuildTarget, ...]:
        return ()

    def resolve(self, rule_resolver: RuleResolver) -> ApplePlatformBundle:
        return self.bundle

    def get_unresolved_cxx_platform(self) -> UnresolvedCxxPlatform:
        return StaticUnresolvedCxxPlatform(self.bundle.cxx_platform)

    def get_unresolved_swift_platform(self) -> UnresolvedSwiftPlatform:
        return StaticUnresolvedSwiftPlatform(self.bundle.flavor, self.bundle.swift_platform)


__all__ = [
    "StaticUnresolvedApplePlatform",
    "StaticUnresolvedCxxPlatform",
    "StaticUnresolvedSwiftPlatform",
    "ToolchainBackedUnresolvedApplePlatform",
    "UnresolvedApplePlatform",
    "UnresolvedCxxPlatform",
    "UnresolvedSwiftPlatform",
]
