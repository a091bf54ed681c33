"""Recording template writer for registry tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from labelforge.templates.model import Template


class RecordingWriter:
    """Stands in for the template file writer and remembers every call."""

    def __init__(self, succeed: bool = True) -> None:
        self.succeed = succeed
        self.calls: list[tuple[Template, Path]] = []

    def __call__(self, template: Template, path: Path) -> bool:
        self.calls.append((template, path))
        return self.succeed

    @property
    def call_count(self) -> int:
        return len(self.calls)
