"""Tests for the page size registry."""

import pytest

from labelforge.paper import DEFAULT_PAPERS, PAPER_OTHER, Paper, PaperRegistry


class TestDefaultPapers:
    """Tests for the built-in page sizes."""

    def test_common_sizes_present(self):
        ids = PaperRegistry().id_list()
        assert "US-Letter" in ids
        assert "A4" in ids
        assert ids[-1] == PAPER_OTHER
        assert len(ids) == len(DEFAULT_PAPERS)

    def test_us_letter_in_points(self):
        paper = PaperRegistry().lookup("US-Letter")
        assert paper.width == pytest.approx(612.0)
        assert paper.height == pytest.approx(792.0)

    def test_a4_in_points(self):
        paper = PaperRegistry().lookup("A4")
        assert paper.width == pytest.approx(595.28, abs=0.01)
        assert paper.height == pytest.approx(841.89, abs=0.01)


class TestPaperRegistry:
    """Tests for id queries."""

    def test_ids_are_case_insensitive(self, papers):
        assert papers.is_known("a4")
        assert papers.is_known("US-LETTER")
        assert not papers.is_known("Tabloid")

    def test_other_is_known_and_is_the_sentinel(self, papers):
        assert papers.is_known(PAPER_OTHER)
        assert papers.is_other("other")
        assert not papers.is_other("A4")

    def test_lookup_unknown(self, papers):
        assert papers.lookup("Tabloid") is None

    def test_lookup_returns_copy(self, papers):
        papers.lookup("A4").width = 1.0
        assert papers.lookup("A4").width == 595.28

    def test_custom_registry_keeps_order(self):
        registry = PaperRegistry(
            [
                Paper(id="B", name="B", width=1.0, height=1.0),
                Paper(id="A", name="A", width=2.0, height=2.0),
            ]
        )
        assert registry.id_list() == ["B", "A"]
