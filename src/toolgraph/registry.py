"""Flavor-keyed registry of the Apple platforms declared in configuration."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

from toolgraph.config import ToolchainConfig
from toolgraph.errors import ConfigurationError, UnknownFlavorError
from toolgraph.graph import ComposedResult, ComputeResult, compose
from toolgraph.models import UNCONFIGURED, BuildTarget, Flavor, TargetConfiguration
from toolgraph.observability import StructuredLogger
from toolgraph.rules import RuleResolver
from toolgraph.toolchain.platforms import ApplePlatformBundle
from toolgraph.toolchain.unresolved import (
    ToolchainBackedUnresolvedApplePlatform,
    UnresolvedApplePlatform,
)


@dataclass(frozen=True, slots=True)
class ResolvedPlatform(ComputeResult):
    bundle: ApplePlatformBundle


@dataclass(frozen=True, slots=True)
class PlatformKey:
    result_type: ClassVar[type[ResolvedPlatform]] = ResolvedPlatform

    flavor: Flavor


class PlatformRegistry:
    """Owns the unresolved platforms for a build, keyed by flavor.

    Populated while configuration is read and only queried afterwards. The
    engine collects :meth:`get_parse_time_deps` while building the target
    graph and calls :meth:`resolve_all` once rules can be materialized.
    """

    def __init__(
        self,
        platforms: tuple[UnresolvedApplePlatform, ...] = (),
        *,
        default_flavor: Flavor | None = None,
        logger: StructuredLogger | None = None,
    ) -> None:
        self.logger = logger if logger is not None else StructuredLogger()
        self._platforms: dict[Flavor, UnresolvedApplePlatform] = {}
        for platform in platforms:
            self.register(platform)
        if default_flavor is not None and default_flavor not in self._platforms:
            raise UnknownFlavorError(
                "Default flavor is not registered.",
                context={"operation": "registry", "flavor": str(default_flavor)},
            )
        self._default_flavor = default_flavor

    @classmethod
    def from_config(
        cls,
        config: ToolchainConfig,
        *,
        logger: StructuredLogger | None = None,
    ) -> PlatformRegistry:
        platforms = tuple(
            ToolchainBackedUnresolvedApplePlatform(
                toolchain_target=declaration.toolchain_target,
                flavor=declaration.flavor,
            )
            for declaration in config.platforms
        )
        return cls(platforms, default_flavor=config.default_flavor, logger=logger)

    def register(self, platform: UnresolvedApplePlatform) -> None:
        flavor = platform.flavor
        if flavor in self._platforms:
            raise ConfigurationError(
                "A platform is already registered for this flavor.",
                context={"operation": "register", "flavor": str(flavor)},
            )
        self._platforms[flavor] = platform
        self.logger.log(
            operation="register",
            flavor=str(flavor),
            target=_toolchain_target_name(platform),
            message="Registered platform.",
        )

    @property
    def flavors(self) -> tuple[Flavor, ...]:
        return tuple(self._platforms)

    @property
    def default(self) -> UnresolvedApplePlatform | None:
        if self._default_flavor is None:
            return None
        return self._platforms[self._default_flavor]

    def get(self, flavor: Flavor) -> UnresolvedApplePlatform:
        try:
            return self._platforms[flavor]
        except KeyError:
            raise UnknownFlavorError(
                "No platform is registered for the requested flavor.",
                hint="Declare the flavor in the toolchain configuration.",
                context={
                    "operation": "get",
                    "flavor": str(flavor),
                    "available": ", ".join(f.name for f in self._platforms),
                },
            ) from None

    def get_parse_time_deps(
        self, target_configuration: TargetConfiguration = UNCONFIGURED
    ) -> tuple[BuildTarget, ...]:
        deps: dict[BuildTarget, None] = {}
        for platform in self._platforms.values():
            for dep in platform.get_parse_time_deps(target_configuration):
                deps.setdefault(dep, None)
        self.logger.log(
            operation="parse_time_deps",
            flavor=None,
            target=None,
            message="Collected platform parse-time deps.",
            extra={
                "configuration": str(target_configuration),
                "deps": [str(dep) for dep in deps],
            },
        )
        return tuple(deps)

    def resolve(self, flavor: Flavor, rule_resolver: RuleResolver) -> ApplePlatformBundle:
        platform = self.get(flavor)
        bundle = platform.resolve(rule_resolver)
        self.logger.log(
            operation="resolve",
            flavor=str(flavor),
            target=_toolchain_target_name(platform),
            message="Resolved platform.",
            extra={"sdk": bundle.sdk_name, "swift": bundle.swift_platform is not None},
        )
        return bundle

    def resolve_all(
        self, rule_resolver: RuleResolver
    ) -> ComposedResult[PlatformKey, ResolvedPlatform]:
        return compose(
            (PlatformKey(flavor) for flavor in self._platforms),
            lambda key: ResolvedPlatform(self.resolve(key.flavor, rule_resolver)),
        )

    def __contains__(self, flavor: object) -> bool:
        return flavor in self._platforms

    def __iter__(self) -> Iterator[UnresolvedApplePlatform]:
        return iter(self._platforms.values())

    def __len__(self) -> int:
        return len(self._platforms)


def _toolchain_target_name(platform: UnresolvedApplePlatform) -> str | None:
    if isinstance(platform, ToolchainBackedUnresolvedApplePlatform):
        return str(platform.toolchain_target)
    return None


__all__ = ["PlatformKey", "PlatformRegistry", "ResolvedPlatform"]
