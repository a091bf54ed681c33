"""Template registry: the process-wide set of known label templates."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel
from rich.console import Console

from labelforge.config import settings
from labelforge.paper import PaperRegistry
from labelforge.templates.files import (
    list_template_files,
    read_templates_from_file,
    template_filename,
    write_template_to_file,
)
from labelforge.templates.model import FrameRect, Layout, MarkupMargin, Template

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from labelforge.core.logging import RegistryLogger

console = Console(stderr=True)

FULL_PAGE_DESCRIPTION = "Full-page"
FULL_PAGE_MARGIN = 9.0


class NoTemplatesError(RuntimeError):
    """Raised when no template could be located at all."""


class TemplateLookup(BaseModel):
    """Result of a name lookup.

    ``exact`` is False when the registry fell back to its default template,
    either because no name was given or because nothing matched it.
    """

    template: Template
    exact: bool


def full_page_template(page_size: str, papers: PaperRegistry) -> Template | None:
    """Build a single-label template covering a whole page of ``page_size``."""
    paper = papers.lookup(page_size)
    if paper is None:
        return None

    template = Template(
        name=f"Generic {page_size} full page",
        description=FULL_PAGE_DESCRIPTION,
        page_size=page_size,
        page_width=paper.width,
        page_height=paper.height,
    )
    frame = FrameRect(id="0", w=paper.width, h=paper.height)
    frame.add_layout(Layout(nx=1, ny=1, x0=0.0, y0=0.0, dx=0.0, dy=0.0))
    frame.add_markup(MarkupMargin(size=FULL_PAGE_MARGIN))
    template.add_frame(frame)
    return template


def _sorted_names(names: Iterable[str]) -> list[str]:
    return sorted(names, key=str.lower)


class TemplateRegistry:
    """Known templates, populated lazily on first use.

    Templates are read from the system directory, then the user directory,
    and a generic full-page template is added for every known page size.
    Every template returned to a caller is an independent copy.
    """

    def __init__(
        self,
        *,
        papers: PaperRegistry | None = None,
        system_dir: Path | None = None,
        user_dir: Path | None = None,
        templates: Iterable[Template] | None = None,
        reader: Callable[[Path], list[Template]] = read_templates_from_file,
        writer: Callable[[Template, Path], bool] = write_template_to_file,
        logger: RegistryLogger | None = None,
    ) -> None:
        """Create an empty registry.

        Args:
            papers: Page size registry (defaults to the built-in paper sizes).
            system_dir: System template directory (defaults to settings).
            user_dir: User template directory, also where registered
                templates are written (defaults to settings).
            templates: Seed templates used instead of scanning directories.
            reader: Reads all templates from one file.
            writer: Writes one template to a file, returning success.
            logger: Optional event log for loading and registration.
        """
        self.papers = papers if papers is not None else PaperRegistry()
        self.system_dir = system_dir if system_dir is not None else settings.system_data_dir
        self.user_dir = user_dir if user_dir is not None else settings.user_data_dir
        self.logger = logger
        self._seed = [t.duplicate() for t in templates] if templates is not None else None
        self._reader = reader
        self._writer = writer
        self._templates: list[Template] = []
        self._loaded = False
        self._lock = threading.RLock()

    # -- lifecycle ----------------------------------------------------------

    @property
    def is_initialized(self) -> bool:
        return self._loaded

    def ensure_initialized(self) -> None:
        """Populate the registry if that has not happened yet.

        Raises:
            NoTemplatesError: If no template could be loaded or synthesized.
        """
        with self._lock:
            if self._loaded:
                return
            if self.logger:
                self.logger.start("load")

            if self._seed is not None:
                templates = [t.duplicate() for t in self._seed]
            else:
                templates = self._read_templates()

            for page_size in self.papers.id_list():
                if self.papers.is_other(page_size):
                    continue
                template = full_page_template(page_size, self.papers)
                if template is not None:
                    templates.append(template)
                    if self.logger:
                        self.logger.success("full_page", source=template.name)

            if not templates:
                message = (
                    "Unable to locate any template files. "
                    "labelforge may not be installed correctly!"
                )
                console.print(f"[bold red]{message}[/bold red]")
                if self.logger:
                    self.logger.log_error("load", message)
                raise NoTemplatesError(message)

            self._templates = templates
            self._loaded = True
            if self.logger:
                self.logger.success("load", count=len(templates))

    def shutdown(self) -> None:
        """Forget all loaded templates; the next query reloads them."""
        with self._lock:
            self._templates = []
            self._loaded = False

    def _read_templates(self) -> list[Template]:
        templates: list[Template] = []
        for directory in (self.system_dir, self.user_dir):
            templates.extend(self._read_directory(directory))
        if not templates:
            console.print(
                f"[yellow]No template files found in {self.system_dir} or {self.user_dir}[/yellow]"
            )
        return templates

    def _read_directory(self, directory: Path) -> list[Template]:
        if not directory.exists():
            if self.logger:
                self.logger.skip("read", "directory does not exist", source=str(directory))
            return []

        templates: list[Template] = []
        for path in list_template_files(directory):
            loaded = self._reader(path)
            if self.logger:
                if loaded:
                    self.logger.success("read", source=str(path), count=len(loaded))
                else:
                    self.logger.log_error("read", "no templates read", source=str(path))
            templates.extend(loaded)
        return templates

    # -- registration -------------------------------------------------------

    def register(self, template: Template) -> bool:
        """Add a user template and save it to the user template directory.

        A template whose name is already known as an alias of any template is
        silently ignored; no attempt is made to compare contents. A template
        with an unknown page size is reported and not added.

        Returns:
            True if the template was added.
        """
        self.ensure_initialized()
        with self._lock:
            if self._find(template.name) is not None:
                if self.logger:
                    self.logger.skip("register", "name already known", source=template.name)
                return False

            if not self.papers.is_known(template.page_size):
                console.print(
                    "[yellow]Cannot register new template with unknown page size "
                    f"'{template.page_size}'.[/yellow]"
                )
                if self.logger:
                    self.logger.log_error(
                        "register",
                        "unknown page size",
                        source=template.name,
                        page_size=template.page_size,
                    )
                return False

            self._templates.append(template.duplicate())
            if self.logger:
                self.logger.success("register", source=template.name)

            path = self.user_dir / template_filename(template.name)
            if self.logger:
                self.logger.start("write", source=str(path))
            if self._writer(template, path):
                if self.logger:
                    self.logger.success("write", source=str(path))
            elif self.logger:
                self.logger.log_error("write", "could not write template file", source=str(path))
            return True

    # -- queries ------------------------------------------------------------

    def _find(self, name: str) -> Template | None:
        for template in self._templates:
            if template.has_alias(name):
                return template
        return None

    def lookup(self, name: str | None) -> TemplateLookup:
        """Look up a template by name or alias (case-insensitive).

        With no name, or no match, the first registered template is returned
        with ``exact=False``.
        """
        self.ensure_initialized()
        match = self._find(name) if name is not None else None
        if match is None:
            return TemplateLookup(template=self._templates[0].duplicate(), exact=False)
        return TemplateLookup(template=match.duplicate(), exact=True)

    def lookup_by_name(self, name: str | None) -> Template:
        """Return a copy of the named template, or of the default one."""
        return self.lookup(name).template

    def _matching(self, page_size: str | None, category: str | None) -> list[Template]:
        self.ensure_initialized()
        return [
            t
            for t in self._templates
            if t.matches_page_size(page_size) and t.matches_category(category)
        ]

    def list_names_unique(
        self, page_size: str | None = None, category: str | None = None
    ) -> list[str]:
        """Return the primary name of every matching template, sorted.

        Names are compared case-insensitively, both for sorting and for
        collapsing repeats.
        """
        seen: set[str] = set()
        names = []
        for template in self._matching(page_size, category):
            key = template.name.lower()
            if key not in seen:
                seen.add(key)
                names.append(template.name)
        return _sorted_names(names)

    def list_names_all(
        self, page_size: str | None = None, category: str | None = None
    ) -> list[str]:
        """Return every alias of every matching template, sorted."""
        return _sorted_names(
            alias for template in self._matching(page_size, category) for alias in template.aliases
        )

    def all_templates(self) -> list[Template]:
        """Return copies of all templates in registration order."""
        self.ensure_initialized()
        return [t.duplicate() for t in self._templates]

    def describe_known_templates(self) -> list[tuple[str, str]]:
        """Return (name, description) for every template in registration order."""
        self.ensure_initialized()
        return [(t.name, t.description) for t in self._templates]

    def __len__(self) -> int:
        self.ensure_initialized()
        return len(self._templates)


def free_name_list(names: list[str]) -> None:
    """Release a name list obtained from a registry listing."""
    names.clear()


# Process-wide registry, created on first use
_registry: TemplateRegistry | None = None


def get_registry() -> TemplateRegistry:
    """Return the shared registry configured from settings."""
    global _registry  # noqa: PLW0603
    if _registry is None:
        _registry = TemplateRegistry()
    return _registry


def reset_registry() -> None:
    """Discard the shared registry so the next call rebuilds it."""
    global _registry  # noqa: PLW0603
    if _registry is not None:
        _registry.shutdown()
    _registry = None
