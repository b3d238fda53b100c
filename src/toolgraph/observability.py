"""Structured logging and observability helpers."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(slots=True)
class StructuredLogger:
    """In-memory record list for registry and resolution events.

    Records are keyed by platform flavor and toolchain target; events that
    span every platform, such as parse-time dep collection, carry neither.
    """

    records: list[dict[str, Any]] = field(default_factory=list)

    def log(
        self,
        *,
        operation: str,
        flavor: str | None,
        target: str | None,
        message: str,
        level: str = "info",
        extra: dict[str, Any] | None = None,
    ) -> None:
        record: dict[str, Any] = {
            "level": level,
            "operation": operation,
            "flavor": flavor,
            "target": target,
            "message": message,
        }
        if extra is not None:
            record["extra"] = extra
        self.records.append(record)

    def records_for_flavor(self, flavor: str) -> list[dict[str, Any]]:
        return [record for record in self.records if record.get("flavor") == flavor]

    def logged_flavors(self) -> tuple[str, ...]:
        """Distinct flavors seen so far, in first-logged order."""
        seen: dict[str, None] = {}
        for record in self.records:
            flavor = record.get("flavor")
            if flavor is not None:
                seen.setdefault(flavor, None)
        return tuple(seen)

    def records_for_operation(self, operation: str) -> list[dict[str, Any]]:
        return [record for record in self.records if record.get("operation") == operation]

    def to_json_lines(self, path: str | Path) -> Path:
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        lines = [json.dumps(record, sort_keys=True) for record in self.records]
        output_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return output_path
