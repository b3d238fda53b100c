"""Declarative platform configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from toolgraph.errors import ConfigurationError, InvalidArgumentError
from toolgraph.models import BuildTarget, Flavor


@dataclass(frozen=True, slots=True)
class PlatformDeclaration:
    flavor: Flavor
    toolchain_target: BuildTarget


@dataclass(frozen=True, slots=True)
class ToolchainConfig:
    platforms: tuple[PlatformDeclaration, ...] = ()
    default_flavor: Flavor | None = None

    def __post_init__(self) -> None:
        seen: set[Flavor] = set()
        for declaration in self.platforms:
            if declaration.flavor in seen:
                raise ConfigurationError(
                    "Platform flavor declared more than once.",
                    hint="Each flavor may point at a single toolchain target.",
                    context={"operation": "config", "flavor": str(declaration.flavor)},
                )
            seen.add(declaration.flavor)
        if self.default_flavor is not None and self.default_flavor not in seen:
            raise ConfigurationError(
                "Default flavor is not one of the declared platforms.",
                hint="Declare the default flavor under 'platforms' or remove it.",
                context={"operation": "config", "default_flavor": str(self.default_flavor)},
            )

    @classmethod
    def from_mapping(cls, section: Mapping[str, Any]) -> ToolchainConfig:
        """Parse a section such as ``{"platforms": {"iphoneos-arm64": "//t:apple"}}``."""
        if not isinstance(section, Mapping):
            raise ConfigurationError(
                "Toolchain configuration must be a mapping.",
                context={"operation": "config", "type": type(section).__name__},
            )
        unknown = sorted(set(section) - {"platforms", "default_flavor"})
        if unknown:
            raise ConfigurationError(
                "Unknown keys in toolchain configuration.",
                context={"operation": "config", "keys": ", ".join(map(str, unknown))},
            )
        raw_platforms = section.get("platforms", {})
        if not isinstance(raw_platforms, Mapping):
            raise ConfigurationError(
                "'platforms' must map flavor names to toolchain targets.",
                context={"operation": "config", "type": type(raw_platforms).__name__},
            )

        declarations: list[PlatformDeclaration] = []
        for flavor_name, target_name in raw_platforms.items():
            try:
                declarations.append(
                    PlatformDeclaration(
                        flavor=Flavor(flavor_name),
                        toolchain_target=BuildTarget.parse(target_name),
                    )
                )
            except InvalidArgumentError as exc:
                raise ConfigurationError(
                    "Invalid platform declaration.",
                    hint=exc.hint,
                    context={
                        "operation": "config",
                        "flavor": repr(flavor_name),
                        "target": repr(target_name),
                    },
                ) from exc

        raw_default = section.get("default_flavor")
        default_flavor: Flavor | None = None
        if raw_default is not None:
            try:
                default_flavor = Flavor(raw_default)
            except InvalidArgumentError as exc:
                raise ConfigurationError(
                    "Invalid default flavor.",
                    hint=exc.hint,
                    context={"operation": "config", "default_flavor": repr(raw_default)},
                ) from exc
        return cls(platforms=tuple(declarations), default_flavor=default_flavor)


__all__ = ["PlatformDeclaration", "ToolchainConfig"]
