"""Paper size registry mapping page size ids to page dimensions in points."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from collections.abc import Iterable

# Page size id meaning "dimensions are given explicitly by the template"
PAPER_OTHER = "Other"

POINTS_PER_INCH = 72.0
POINTS_PER_MM = POINTS_PER_INCH / 25.4


class Paper(BaseModel):
    """A named page size."""

    id: str = Field(description="Page size id (e.g., 'US-Letter', 'A4')")
    name: str = Field(description="Human-readable name")
    width: float = Field(ge=0, description="Page width in points")
    height: float = Field(ge=0, description="Page height in points")


def _inches(id_: str, name: str, w: float, h: float) -> Paper:
    return Paper(id=id_, name=name, width=w * POINTS_PER_INCH, height=h * POINTS_PER_INCH)


def _mm(id_: str, name: str, w: float, h: float) -> Paper:
    return Paper(id=id_, name=name, width=w * POINTS_PER_MM, height=h * POINTS_PER_MM)


DEFAULT_PAPERS: tuple[Paper, ...] = (
    _inches("US-Letter", "US Letter", 8.5, 11.0),
    _inches("US-Legal", "US Legal", 8.5, 14.0),
    _inches("US-Executive", "US Executive", 7.25, 10.5),
    _mm("A3", "A3", 297.0, 420.0),
    _mm("A4", "A4", 210.0, 297.0),
    _mm("A5", "A5", 148.0, 210.0),
    _mm("A6", "A6", 105.0, 148.0),
    _mm("B5", "B5", 176.0, 250.0),
    Paper(id=PAPER_OTHER, name="Other", width=0.0, height=0.0),
)


class PaperRegistry:
    """Known page sizes, looked up case-insensitively by id."""

    def __init__(self, papers: Iterable[Paper] | None = None) -> None:
        self._papers: dict[str, Paper] = {}
        for paper in DEFAULT_PAPERS if papers is None else papers:
            self._papers[paper.id.lower()] = paper

    def id_list(self) -> list[str]:
        """Return all page size ids in registration order."""
        return [paper.id for paper in self._papers.values()]

    def is_known(self, page_size: str) -> bool:
        return page_size.lower() in self._papers

    def is_other(self, page_size: str) -> bool:
        """Check if ``page_size`` is the custom-dimensions sentinel."""
        return page_size.lower() == PAPER_OTHER.lower()

    def lookup(self, page_size: str) -> Paper | None:
        """Return a copy of the paper for ``page_size``, or None if unknown."""
        paper = self._papers.get(page_size.lower())
        return paper.model_copy() if paper is not None else None
