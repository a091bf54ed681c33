"""Template, frame, layout and markup models.

A template describes one printable sheet: its page size, the shape of a
single label (the frame) and one or more grids placing that label on the
page. Frames and markups are closed sets of shapes, modelled as pydantic
discriminated unions tagged by ``shape`` and ``type`` respectively.

Models are mutable and append-only through the ``add_*`` helpers. Values
handed out by the registry are independent copies made with
:meth:`Template.duplicate`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import BaseModel, Field, model_validator

from labelforge.templates import geometry

if TYPE_CHECKING:
    from labelforge.paper import PaperRegistry
    from labelforge.templates.geometry import Origin


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


class Layout(BaseModel):
    """One rectangular grid of identical labels within a frame."""

    nx: int = Field(ge=1, description="Number of labels across")
    ny: int = Field(ge=1, description="Number of labels down")
    x0: float = Field(default=0.0, description="Left edge of the first label")
    y0: float = Field(default=0.0, description="Top edge of the first label")
    dx: float = Field(default=0.0, description="Horizontal pitch between label origins")
    dy: float = Field(default=0.0, description="Vertical pitch between label origins")

    def duplicate(self) -> Layout:
        return self.model_copy()


# ---------------------------------------------------------------------------
# Markups (alignment guides, never used for geometry)
# ---------------------------------------------------------------------------


class MarkupMargin(BaseModel):
    """Safe-area margin inset from the label edge."""

    type: Literal["margin"] = "margin"
    size: float


class MarkupLine(BaseModel):
    """Guide line between two points, relative to the label origin."""

    type: Literal["line"] = "line"
    x1: float
    y1: float
    x2: float
    y2: float


class MarkupCircle(BaseModel):
    """Guide circle."""

    type: Literal["circle"] = "circle"
    x0: float
    y0: float
    r: float


class MarkupRect(BaseModel):
    """Guide rectangle with optional rounded corners."""

    type: Literal["rect"] = "rect"
    x1: float
    y1: float
    w: float
    h: float
    r: float = 0.0


Markup = Annotated[
    MarkupMargin | MarkupLine | MarkupCircle | MarkupRect,
    Field(discriminator="type"),
]


def duplicate_markup(markup: Markup) -> Markup:
    """Return an independent copy of a markup."""
    return markup.model_copy()


# ---------------------------------------------------------------------------
# Frames
# ---------------------------------------------------------------------------


class _FrameFields(BaseModel):
    """Fields owned by every frame regardless of shape."""

    id: str = Field(default="0", description="Frame id (currently always '0')")
    layouts: list[Layout] = Field(default_factory=list)
    markups: list[Markup] = Field(default_factory=list)

    def add_layout(self, layout: Layout) -> None:
        """Append a layout; the frame owns it from now on."""
        self.layouts.append(layout)

    def add_markup(self, markup: Markup) -> None:
        """Append a markup; the frame owns it from now on."""
        self.markups.append(markup)

    def size(self) -> tuple[float, float]:
        return geometry.frame_size(self)

    def label_count(self) -> int:
        return geometry.label_count(self)

    def origins(self) -> list[Origin]:
        return geometry.origins(self)

    def release(self) -> None:
        """Drop the id, layouts and markups held by this frame."""
        self.id = ""
        self.layouts.clear()
        self.markups.clear()

    def _copy_children_to(self, frame):
        for layout in self.layouts:
            frame.add_layout(layout.duplicate())
        for markup in self.markups:
            frame.add_markup(duplicate_markup(markup))
        return frame


class FrameRect(_FrameFields):
    """Rectangular label or card, optionally with rounded corners."""

    shape: Literal["rect"] = "rect"
    w: float = Field(description="Width")
    h: float = Field(description="Height")
    r: float = Field(default=0.0, description="Corner radius (0 for square corners)")
    x_waste: float = Field(default=0.0, description="Horizontal overprint allowance")
    y_waste: float = Field(default=0.0, description="Vertical overprint allowance")

    def duplicate(self) -> FrameRect:
        frame = FrameRect(
            id=self.id, w=self.w, h=self.h, r=self.r, x_waste=self.x_waste, y_waste=self.y_waste
        )
        return self._copy_children_to(frame)


class FrameRound(_FrameFields):
    """Round label."""

    shape: Literal["round"] = "round"
    r: float = Field(description="Radius")
    waste: float = Field(default=0.0, description="Overprint allowance")

    def duplicate(self) -> FrameRound:
        frame = FrameRound(id=self.id, r=self.r, waste=self.waste)
        return self._copy_children_to(frame)


class FrameCD(_FrameFields):
    """CD/DVD label, optionally clipped to a business-card rectangle."""

    shape: Literal["cd"] = "cd"
    r1: float = Field(description="Outer radius")
    r2: float = Field(description="Radius of the center hole")
    w: float = Field(default=0.0, description="Clip width (0 for no clipping)")
    h: float = Field(default=0.0, description="Clip height (0 for no clipping)")
    waste: float = Field(default=0.0, description="Overprint allowance")

    def duplicate(self) -> FrameCD:
        frame = FrameCD(id=self.id, r1=self.r1, r2=self.r2, w=self.w, h=self.h, waste=self.waste)
        return self._copy_children_to(frame)


Frame = Annotated[FrameRect | FrameRound | FrameCD, Field(discriminator="shape")]


# ---------------------------------------------------------------------------
# Template
# ---------------------------------------------------------------------------


class Template(BaseModel):
    """A named, printable sheet layout."""

    name: str = Field(description="Primary name, also the first alias")
    description: str = Field(default="", description="Free-form description")
    page_size: str = Field(description="Page size id ('Other' for explicit dimensions)")
    page_width: float = Field(default=0.0, description="Page width, only used for 'Other'")
    page_height: float = Field(default=0.0, description="Page height, only used for 'Other'")
    aliases: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    frames: list[Frame] = Field(default_factory=list)

    @model_validator(mode="after")
    def _primary_name_first(self) -> Template:
        """Always include the primary name as the first alias, and only once."""
        primary = self.name.lower()
        self.aliases[:] = [self.name] + [a for a in self.aliases if a.lower() != primary]
        return self

    # -- mutators -----------------------------------------------------------

    def add_frame(self, frame: Frame) -> None:
        """Append a frame; the template owns it from now on."""
        self.frames.append(frame)

    def add_category(self, category: str) -> None:
        self.categories.append(category)

    def add_alias(self, alias: str) -> None:
        self.aliases.append(alias)

    # -- queries ------------------------------------------------------------

    @property
    def first_frame(self) -> Frame | None:
        """The frame used for the whole sheet (templates carry only one today)."""
        return self.frames[0] if self.frames else None

    def matches_page_size(self, page_size: str | None) -> bool:
        """True if ``page_size`` is None or names this template's page size."""
        if page_size is None:
            return True
        return page_size.lower() == self.page_size.lower()

    def matches_category(self, category: str | None) -> bool:
        """True if ``category`` is None or is one of this template's categories."""
        if category is None:
            return True
        wanted = category.lower()
        return any(c.lower() == wanted for c in self.categories)

    def has_alias(self, name: str) -> bool:
        """Case-insensitive membership test against all aliases, name included."""
        wanted = name.lower()
        return any(a.lower() == wanted for a in self.aliases)

    def page_dimensions(self, papers: PaperRegistry) -> tuple[float, float]:
        """Return the page (width, height) in points.

        Explicit dimensions are used for the custom page size; otherwise they
        come from the paper registry. An unknown page size falls back to the
        explicit dimensions too.
        """
        if not papers.is_other(self.page_size):
            paper = papers.lookup(self.page_size)
            if paper is not None:
                return paper.width, paper.height
        return self.page_width, self.page_height

    # -- lifecycle ----------------------------------------------------------

    def duplicate(self) -> Template:
        """Return a deep, independent copy of this template.

        The primary name is re-added by the constructor, so any alias equal to
        it (in any case) is skipped rather than copied a second time.
        """
        template = Template(
            name=self.name,
            description=self.description,
            page_size=self.page_size,
            page_width=self.page_width,
            page_height=self.page_height,
        )
        for category in self.categories:
            template.add_category(category)
        for frame in self.frames:
            template.add_frame(frame.duplicate())
        for alias in self.aliases:
            if alias.lower() != template.name.lower():
                template.add_alias(alias)
        return template

    def release(self) -> None:
        """Drop everything this template owns, frames included."""
        self.name = ""
        self.description = ""
        self.page_size = ""
        self.categories.clear()
        for frame in self.frames:
            frame.release()
        self.frames.clear()
        self.aliases.clear()


def release_template(template: Template | None) -> None:
    """Release ``template``; passing None is a no-op."""
    if template is not None:
        template.release()
