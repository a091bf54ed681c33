"""Structured registry event logging for debugging template loading."""

from __future__ import annotations

import json
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from pathlib import Path


StageType = Literal["load", "read", "full_page", "register", "write"]
StatusType = Literal["start", "success", "error", "skip"]


@dataclass
class RegistryEvent:
    """A single event in the registry lifecycle."""

    timestamp: str
    stage: StageType
    status: StatusType
    source: str | None = None
    error: str | None = None
    duration_seconds: float | None = None
    details: dict | None = None

    def to_dict(self) -> dict:
        """Convert to dict, omitting None values."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


class RegistryLogger:
    """Tracks events while a template registry loads and registers templates."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self.events: list[RegistryEvent] = []
        self._timers: dict[str, float] = {}

    def start(self, stage: StageType, source: str | None = None) -> None:
        """Record the start of a stage."""
        self._timers[stage] = time.monotonic()
        self._append(stage, "start", source=source)

    def success(self, stage: StageType, source: str | None = None, **details) -> None:
        """Record successful completion of a stage."""
        self._append(
            stage,
            "success",
            source=source,
            duration_seconds=self._elapsed(stage),
            details=details or None,
        )

    def log_error(
        self, stage: StageType, error: str, source: str | None = None, **details
    ) -> None:
        """Record an error during a stage."""
        self._append(
            stage,
            "error",
            source=source,
            error=error,
            duration_seconds=self._elapsed(stage),
            details=details or None,
        )

    def skip(self, stage: StageType, reason: str, source: str | None = None) -> None:
        """Record a stage that was skipped without doing any work."""
        self._timers.pop(stage, None)
        self._append(stage, "skip", source=source, details={"reason": reason})

    def events_for(self, stage: StageType) -> list[RegistryEvent]:
        """Return all events recorded for one stage, oldest first."""
        return [e for e in self.events if e.stage == stage]

    def _append(self, stage: StageType, status: StatusType, **fields) -> None:
        self.events.append(
            RegistryEvent(
                timestamp=datetime.now(tz=UTC).isoformat(),
                stage=stage,
                status=status,
                **fields,
            )
        )

    def _elapsed(self, stage: str) -> float | None:
        start = self._timers.pop(stage, None)
        if start is not None:
            return round(time.monotonic() - start, 3)
        return None

    def to_dict(self) -> dict:
        """Export full log as a dict."""
        return {
            "name": self.name,
            "event_count": len(self.events),
            "events": [e.to_dict() for e in self.events],
        }

    def save(self, path: Path) -> None:
        """Save log to a JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2))
