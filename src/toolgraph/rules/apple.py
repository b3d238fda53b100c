"""The ``apple_toolchain`` rule: a multi-flavor source of Apple platforms."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from toolgraph.errors import UnknownFlavorError
from toolgraph.models import BuildTarget, Flavor

if TYPE_CHECKING:
    from toolgraph.toolchain.platforms import ApplePlatformBundle

APPLE_TOOLCHAIN_KIND = "apple_toolchain"


@dataclass(frozen=True, slots=True)
class AppleToolchainRule:
    build_target: BuildTarget
    platforms: Mapping[Flavor, ApplePlatformBundle] = field(default_factory=dict)

    @property
    def kind(self) -> str:
        return APPLE_TOOLCHAIN_KIND

    @property
    def flavors(self) -> tuple[Flavor, ...]:
        return tuple(self.platforms)

    def get_apple_platform(self, flavor: Flavor) -> ApplePlatformBundle:
        try:
            return self.platforms[flavor]
        except KeyError:
            raise UnknownFlavorError(
                "Toolchain does not provide a platform for the requested flavor.",
                hint="Add the flavor to the apple_toolchain rule or fix the platform declaration.",
                context={
                    "operation": "get_apple_platform",
                    "target": str(self.build_target),
                    "flavor": str(flavor),
                    "available": ", ".join(sorted(f.name for f in self.platforms)),
                },
            ) from None
