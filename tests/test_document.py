#!/usr/bin/env python3
"""Tests for Document class."""

from vehicle_status import Document


class TestDocument:
    """Tests for Document class."""

    def test_required_attributes(self):
        doc = Document("insurance")
        assert doc.kind == "insurance"

    def test_optional_attributes(self):
        doc = Document(
            kind="insurance",
            issue_date="2024-01-01",
            expiry_date="2024-12-31",
            number="POL-1",
            notes="Comprehensive",
        )
        assert doc.issue_date == "2024-01-01"
        assert doc.expiry_date == "2024-12-31"
        assert doc.number == "POL-1"
        assert doc.notes == "Comprehensive"

    def test_optional_attributes_default_to_none(self):
        doc = Document("emission")
        assert doc.issue_date is None
        assert doc.expiry_date is None
        assert doc.number is None
        assert doc.notes is None

    def test_display_name(self):
        assert Document("road_tax").display_name == "Road tax"
        assert Document("insurance").display_name == "Insurance"
