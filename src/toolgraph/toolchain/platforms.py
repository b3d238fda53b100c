"""Resolved platform descriptions produced by toolchain rules."""

from __future__ import annotations

from dataclasses import dataclass, replace

from toolgraph.models import Flavor


@dataclass(frozen=True, slots=True)
class CxxPlatform:
    flavor: Flavor
    cc: str = "clang"
    cxx: str = "clang++"
    ld: str = "ld64"
    ar: str = "ar"
    cflags: tuple[str, ...] = ()
    cxxflags: tuple[str, ...] = ()
    ldflags: tuple[str, ...] = ()

    def with_flavor(self, flavor: Flavor) -> CxxPlatform:
        return replace(self, flavor=flavor)


@dataclass(frozen=True, slots=True)
class SwiftPlatform:
    flavor: Flavor
    swiftc: str = "swiftc"
    target_triple: str = ""
    stdlib_paths: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ApplePlatformBundle:
    """C/C++ platform plus optional Swift platform for one Apple SDK/arch pair.

    ``swift_platform`` is ``None`` for Swiftless toolchains; callers must
    handle its absence.
    """

    flavor: Flavor
    sdk_name: str
    cxx_platform: CxxPlatform
    swift_platform: SwiftPlatform | None = None
    sdk_path: str = ""
    min_version: str = ""


__all__ = ["ApplePlatformBundle", "CxxPlatform", "SwiftPlatform"]
