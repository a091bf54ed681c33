"""Reading and writing template files.

Templates are stored as the JSON form of :class:`~labelforge.templates.model.Template`.
A ``*.template`` file normally holds a single template object and a
``*-templates.json`` file a list of them; the reader accepts either shape in
either kind of file.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError
from rich.console import Console

from labelforge.templates.model import Template

console = Console(stderr=True)

TEMPLATE_SUFFIX = ".template"
MULTI_TEMPLATE_SUFFIX = "-templates.json"

_TEMPLATE_LIST = TypeAdapter(list[Template])


def is_template_file(filename: str) -> bool:
    """Check if a file name carries one of the template file suffixes."""
    lowered = filename.lower()
    return lowered.endswith(TEMPLATE_SUFFIX) or lowered.endswith(MULTI_TEMPLATE_SUFFIX)


def template_filename(name: str) -> str:
    """File name used to store a single user template."""
    safe = name.replace("/", "-").replace("\\", "-")
    return f"{safe}{TEMPLATE_SUFFIX}"


def list_template_files(directory: Path) -> list[Path]:
    """Return template files in ``directory``, sorted by name.

    A missing directory is not an error and yields an empty list. A directory
    that exists but cannot be read is reported and also yields an empty list.
    """
    if not directory.exists():
        return []
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        console.print(f"[yellow]Cannot open data directory {directory}: {e}[/yellow]")
        return []
    return [p for p in entries if p.is_file() and is_template_file(p.name)]


def read_templates_from_file(path: Path) -> list[Template]:
    """Read every template stored in ``path``.

    Returns:
        The templates in file order. Unreadable or malformed files are
        reported and yield an empty list, so one bad file never stops a
        directory scan.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[yellow]Cannot read template file {path}: {e}[/yellow]")
        return []
    except json.JSONDecodeError as e:
        console.print(f"[yellow]Invalid JSON in template file {path}: {e}[/yellow]")
        return []

    try:
        if isinstance(data, list):
            return _TEMPLATE_LIST.validate_python(data)
        return [Template.model_validate(data)]
    except ValidationError as e:
        console.print(
            f"[yellow]Invalid template in {path}: {e.error_count()} validation error(s)[/yellow]"
        )
        return []


def write_template_to_file(template: Template, path: Path) -> bool:
    """Write a single template to ``path``, creating parent directories.

    Returns:
        True on success, False (after reporting the problem) otherwise.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(template.model_dump_json(indent=2), encoding="utf-8")
    except (OSError, ValueError) as e:
        console.print(f"[yellow]Cannot write template file {path}: {e}[/yellow]")
        return False
    return True
