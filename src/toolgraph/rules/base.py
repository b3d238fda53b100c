"""Rule and rule-resolver contracts owned by the build engine."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from toolgraph.errors import RuleLookupError
from toolgraph.models import BuildTarget


@runtime_checkable
class BuildRule(Protocol):
    build_target: BuildTarget

    @property
    def kind(self) -> str:
        """Rule type name, e.g. ``apple_toolchain``."""


class RuleResolver(Protocol):
    def get_rule(self, target: BuildTarget) -> BuildRule:
        """Return the materialized rule bound to *target*."""


@dataclass(frozen=True, slots=True)
class GenericRule:
    build_target: BuildTarget
    kind: str = "genrule"


class MapRuleResolver:
    """Rule resolver backed by an in-memory target-to-rule mapping."""

    def __init__(self, rules: Iterable[BuildRule] = ()) -> None:
        self._rules: dict[BuildTarget, BuildRule] = {}
        for rule in rules:
            self.add(rule)

    def add(self, rule: BuildRule) -> BuildRule:
        self._rules[rule.build_target] = rule
        return rule

    def get_rule(self, target: BuildTarget) -> BuildRule:
        try:
            return self._rules[target]
        except KeyError:
            raise RuleLookupError(
                "No rule is bound to the requested build target.",
                hint="Make sure the target is part of the action graph before resolving.",
                context={"operation": "get_rule", "target": str(target)},
            ) from None

    def __contains__(self, target: object) -> bool:
        return target in self._rules

    def __len__(self) -> int:
        return len(self._rules)
