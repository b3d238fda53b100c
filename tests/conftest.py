"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from toolgraph import (
    ApplePlatformBundle,
    AppleToolchainRule,
    BuildTarget,
    CxxPlatform,
    Flavor,
    MapRuleResolver,
    SwiftPlatform,
    ToolchainBackedUnresolvedApplePlatform,
)

BundleFactory = Callable[..., ApplePlatformBundle]


def _make_bundle(
    flavor: Flavor,
    *,
    swift: bool = True,
    sdk_name: str = "iphoneos",
) -> ApplePlatformBundle:
    swift_platform = None
    if swift:
        swift_platform = SwiftPlatform(
            flavor=flavor,
            swiftc="/toolchain/usr/bin/swiftc",
            target_triple="arm64-apple-ios14.0",
        )
    return ApplePlatformBundle(
        flavor=flavor,
        sdk_name=sdk_name,
        sdk_path=f"/sdks/{sdk_name}.sdk",
        min_version="14.0",
        cxx_platform=CxxPlatform(
            flavor=flavor,
            cc="/toolchain/usr/bin/clang",
            cxx="/toolchain/usr/bin/clang++",
            cflags=("-arch", "arm64"),
        ),
        swift_platform=swift_platform,
    )


@pytest.fixture
def make_bundle() -> BundleFactory:
    """Factory for Apple platform bundles with a fixed toolchain layout."""
    return _make_bundle


@pytest.fixture
def iphoneos() -> Flavor:
    return Flavor("iphoneos-arm64")


@pytest.fixture
def toolchain_target() -> BuildTarget:
    return BuildTarget.parse("//t:apple")


@pytest.fixture
def bundle(iphoneos: Flavor) -> ApplePlatformBundle:
    return _make_bundle(iphoneos)


@pytest.fixture
def adapter(
    toolchain_target: BuildTarget, iphoneos: Flavor
) -> ToolchainBackedUnresolvedApplePlatform:
    return ToolchainBackedUnresolvedApplePlatform(
        toolchain_target=toolchain_target,
        flavor=iphoneos,
    )


@pytest.fixture
def resolver(
    toolchain_target: BuildTarget, iphoneos: Flavor, bundle: ApplePlatformBundle
) -> MapRuleResolver:
    return MapRuleResolver(
        [AppleToolchainRule(build_target=toolchain_target, platforms={iphoneos: bundle})]
    )
