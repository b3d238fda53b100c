"""Rule contracts and the in-memory resolver."""

from .apple import APPLE_TOOLCHAIN_KIND, AppleToolchainRule
from .base import BuildRule, GenericRule, MapRuleResolver, RuleResolver

__all__ = [
    "APPLE_TOOLCHAIN_KIND",
    "AppleToolchainRule",
    "BuildRule",
    "GenericRule",
    "MapRuleResolver",
    "RuleResolver",
]
