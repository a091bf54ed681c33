"""Pytest configuration and fixtures."""

import pytest

from labelforge.paper import PAPER_OTHER, Paper, PaperRegistry
from labelforge.templates.model import (
    FrameCD,
    FrameRect,
    FrameRound,
    Layout,
    MarkupCircle,
    MarkupMargin,
    Template,
)
from labelforge.templates.registry import TemplateRegistry

from tests.fake_writer import RecordingWriter


@pytest.fixture
def papers():
    """Small page size registry: US-Letter, A4 and the custom sentinel."""
    return PaperRegistry(
        [
            Paper(id="US-Letter", name="US Letter", width=612.0, height=792.0),
            Paper(id="A4", name="A4", width=595.28, height=841.89),
            Paper(id=PAPER_OTHER, name="Other", width=0.0, height=0.0),
        ]
    )


@pytest.fixture
def address_template():
    """30-up US-Letter address labels sold under several names."""
    template = Template(
        name="Avery 5160",
        description="Address Labels",
        page_size="US-Letter",
    )
    template.add_alias("Avery 8160")
    template.add_alias("Avery 5960")
    template.add_category("label")
    template.add_category("mail")

    frame = FrameRect(id="0", w=189.0, h=72.0, r=5.0)
    frame.add_layout(Layout(nx=3, ny=10, x0=11.25, y0=36.0, dx=200.25, dy=72.0))
    frame.add_markup(MarkupMargin(size=5.0))
    template.add_frame(frame)
    return template


@pytest.fixture
def round_template():
    """Round labels on US-Letter."""
    template = Template(name="Round 2in", description="Round Labels", page_size="US-Letter")
    template.add_category("label")
    template.add_category("round-label")

    frame = FrameRound(id="0", r=72.0, waste=4.5)
    frame.add_layout(Layout(nx=3, ny=4, x0=18.0, y0=36.0, dx=198.0, dy=180.0))
    template.add_frame(frame)
    return template


@pytest.fixture
def cd_template():
    """Two CD labels on A4."""
    template = Template(name="CD Label", description="CD/DVD Labels", page_size="A4")
    template.add_category("media")

    frame = FrameCD(id="0", r1=166.5, r2=58.5, waste=9.0)
    frame.add_layout(Layout(nx=1, ny=2, x0=131.0, y0=70.0, dx=0.0, dy=360.0))
    frame.add_markup(MarkupCircle(x0=166.5, y0=166.5, r=67.5))
    template.add_frame(frame)
    return template


@pytest.fixture
def writer():
    """Writer that records calls instead of touching the file system."""
    return RecordingWriter()


@pytest.fixture
def registry(tmp_path, papers, address_template, round_template, cd_template, writer):
    """Registry seeded with three templates (plus two generated full pages)."""
    return TemplateRegistry(
        papers=papers,
        system_dir=tmp_path / "system",
        user_dir=tmp_path / "user",
        templates=[address_template, round_template, cd_template],
        writer=writer,
    )
