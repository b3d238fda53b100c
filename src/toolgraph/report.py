"""Stable export of resolved platforms."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import cbor2

from toolgraph.graph import ComposedResult
from toolgraph.registry import PlatformKey, ResolvedPlatform


@dataclass(frozen=True, slots=True)
class PlatformReportEntry:
    flavor: str
    sdk_name: str
    sdk_path: str
    cc: str
    cxx: str
    swiftc: str | None


@dataclass(frozen=True, slots=True)
class PlatformReport:
    entries: tuple[PlatformReportEntry, ...] = ()
    schema_version: int = 1

    @classmethod
    def from_results(
        cls, results: ComposedResult[PlatformKey, ResolvedPlatform]
    ) -> PlatformReport:
        entries = []
        for key, resolved in results.result_map.items():
            bundle = resolved.bundle
            swift = bundle.swift_platform
            entries.append(
                PlatformReportEntry(
                    flavor=key.flavor.name,
                    sdk_name=bundle.sdk_name,
                    sdk_path=bundle.sdk_path,
                    cc=bundle.cxx_platform.cc,
                    cxx=bundle.cxx_platform.cxx,
                    swiftc=swift.swiftc if swift is not None else None,
                )
            )
        return cls(entries=tuple(sorted(entries, key=lambda entry: entry.flavor)))

    def to_json(self, path: str | Path | None = None) -> str:
        payload = self._payload()
        encoded = json.dumps(payload, indent=2, sort_keys=True) + "\n"
        if path is not None:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
            Path(path).write_text(encoded, encoding="utf-8")
        return encoded

    def to_cbor(self, path: str | Path | None = None) -> bytes:
        payload = self._payload()
        encoded = cbor2.dumps(payload, canonical=True)
        if path is not None:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
            Path(path).write_bytes(encoded)
        return encoded

    def _payload(self) -> dict[str, object]:
        return {
            "schema_version": self.schema_version,
            "platforms": {
                entry.flavor: {
                    "sdk_name": entry.sdk_name,
                    "sdk_path": entry.sdk_path,
                    "cc": entry.cc,
                    "cxx": entry.cxx,
                    "swiftc": entry.swiftc,
                }
                for entry in self.entries
            },
        }


__all__ = ["PlatformReport", "PlatformReportEntry"]
