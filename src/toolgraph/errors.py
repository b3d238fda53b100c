"""Typed error model with stable, machine-readable error codes."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum


class ErrorCode(StrEnum):
    """Stable error identifiers used across API surfaces."""

    UNEXPECTED_RULE_KIND = "E_UNEXPECTED_RULE_KIND"
    UNSUPPORTED = "E_UNSUPPORTED"
    INVALID_ARGUMENT = "E_INVALID_ARGUMENT"
    RULE_LOOKUP = "E_RULE_LOOKUP"
    UNKNOWN_FLAVOR = "E_UNKNOWN_FLAVOR"
    CONFIGURATION = "E_CONFIGURATION"


class ToolgraphError(Exception):
    """Base error class that carries code, optional hint, and context."""

    code: str
    hint: str | None
    context: Mapping[str, str]

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code.value
        self.hint = hint
        self.context = dict(context or {})

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        if self.context:
            for k, v in self.context.items():
                if v:
                    parts.append(f"  {k}: {v}")
        return "\n".join(parts)

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "code": self.code,
            "message": str(self),
            "context": dict(self.context),
        }
        if self.hint is not None:
            payload["hint"] = self.hint
        return payload


class UnexpectedRuleKindError(ToolgraphError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(
            message, code=ErrorCode.UNEXPECTED_RULE_KIND, hint=hint, context=context
        )


class UnsupportedOperationError(ToolgraphError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.UNSUPPORTED, hint=hint, context=context)


class InvalidArgumentError(ToolgraphError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.INVALID_ARGUMENT, hint=hint, context=context)


class RuleLookupError(ToolgraphError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.RULE_LOOKUP, hint=hint, context=context)


class UnknownFlavorError(ToolgraphError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.UNKNOWN_FLAVOR, hint=hint, context=context)


class ConfigurationError(ToolgraphError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.CONFIGURATION, hint=hint, context=context)


__all__ = [
    "ConfigurationError",
    "ErrorCode",
    "InvalidArgumentError",
    "RuleLookupError",
    "ToolgraphError",
    "UnexpectedRuleKindError",
    "UnknownFlavorError",
    "UnsupportedOperationError",
]
