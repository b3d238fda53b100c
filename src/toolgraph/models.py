"""Core value types naming nodes and variants of the target graph."""

from __future__ import annotations

import re
from dataclasses import dataclass

from toolgraph.errors import InvalidArgumentError

_FLAVOR_NAME = re.compile(r"^[A-Za-z0-9_.+-]+$")
_TARGET = re.compile(
    r"^(?P<cell>[A-Za-z0-9_.-]*)//(?P<base>[A-Za-z0-9_./+-]*):(?P<name>[A-Za-z0-9_.+=,@~-]+)"
    r"(?:#(?P<flavors>[^#]+))?$"
)


@dataclass(frozen=True, slots=True)
class Flavor:
    """Tag selecting one parameterization of a rule, e.g. ``iphoneos-arm64``."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not _FLAVOR_NAME.match(self.name):
            raise InvalidArgumentError(
                "Invalid flavor name.",
                hint="Flavor names may contain letters, digits, '_', '.', '+' and '-'.",
                context={"flavor": repr(self.name)},
            )

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class BuildTarget:
    """Fully qualified name of a node in the target graph.

    Flavors are kept sorted and unique, so equal names compare equal however
    the flavors were supplied.
    """

    cell: str
    base_path: str
    short_name: str
    flavors: tuple[Flavor, ...] = ()

    def __post_init__(self) -> None:
        canonical = tuple(sorted(set(self.flavors), key=lambda f: f.name))
        object.__setattr__(self, "flavors", canonical)

    @classmethod
    def parse(cls, name: str) -> BuildTarget:
        """Parse ``[cell]//base/path:name[#flavor,...]``."""
        match = _TARGET.match(name) if isinstance(name, str) else None
        if match is None:
            raise InvalidArgumentError(
                "Invalid build target name.",
                hint="Use the form '//path/to/package:name' or 'cell//path:name'.",
                context={"target": repr(name)},
            )
        base_path = match.group("base").strip("/")
        flavor_part = match.group("flavors")
        flavors: tuple[Flavor, ...] = ()
        if flavor_part:
            flavors = tuple(Flavor(item) for item in flavor_part.split(","))
        return cls(
            cell=match.group("cell"),
            base_path=base_path,
            short_name=match.group("name"),
            flavors=flavors,
        )

    @property
    def base_name(self) -> str:
        return f"{self.cell}//{self.base_path}"

    @property
    def unflavored_name(self) -> str:
        return f"{self.base_name}:{self.short_name}"

    @property
    def fully_qualified_name(self) -> str:
        if not self.flavors:
            return self.unflavored_name
        return f"{self.unflavored_name}#{','.join(f.name for f in self.flavors)}"

    def with_flavors(self, *flavors: Flavor) -> BuildTarget:
        return BuildTarget(
            cell=self.cell,
            base_path=self.base_path,
            short_name=self.short_name,
            flavors=(*self.flavors, *flavors),
        )

    def without_flavors(self) -> BuildTarget:
        return BuildTarget(cell=self.cell, base_path=self.base_path, short_name=self.short_name)

    def __str__(self) -> str:
        return self.fully_qualified_name


@dataclass(frozen=True, slots=True)
class TargetConfiguration:
    """Configuration a target is evaluated under (platform constraints)."""

    name: str

    def __str__(self) -> str:
        return self.name


UNCONFIGURED = TargetConfiguration("unconfigured")


__all__ = ["UNCONFIGURED", "BuildTarget", "Flavor", "TargetConfiguration"]
