#!/usr/bin/env python3
"""Tests for StatusResult and NextServiceDue records."""
import dataclasses

import pytest
from datetime import date

from vehicle_status import Color, NextServiceDue, Status, StatusResult


class TestStatusResult:
    """Tests for StatusResult."""

    def test_to_dict_uses_wire_names(self):
        result = StatusResult(Status.VALID, "Issued 14 days ago", "14d ago", Color.SUCCESS)
        assert result.to_dict() == {
            "status": "valid",
            "text": "Issued 14 days ago",
            "shortText": "14d ago",
            "color": "success",
        }

    def test_immutable(self):
        result = StatusResult(Status.UNKNOWN, "Not set", "Not set", Color.SECONDARY)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.text = "changed"


class TestNextServiceDue:
    """Tests for NextServiceDue."""

    def test_to_dict_has_no_color(self):
        due = NextServiceDue(date(2024, 7, 1), Status.OVERDUE, "Service overdue by 31 days", "31d overdue")
        assert due.to_dict() == {
            "date": "2024-07-01",
            "status": "overdue",
            "text": "Service overdue by 31 days",
            "shortText": "31d overdue",
        }

    def test_to_dict_without_date(self):
        due = NextServiceDue(None, Status.UNKNOWN, "Service info not available", "Not set")
        assert due.to_dict()["date"] is None

    def test_color_follows_urgency(self):
        def color(status):
            return NextServiceDue(None, status, "", "").color

        assert color(Status.OVERDUE) == Color.DESTRUCTIVE
        assert color(Status.DUE_SOON) == Color.WARNING
        assert color(Status.DUE_MONTH) == Color.WARNING
        assert color(Status.FUTURE) == Color.SUCCESS
        assert color(Status.UNKNOWN) == Color.SECONDARY
        assert color(Status.INVALID) == Color.SECONDARY

    def test_is_due(self):
        assert NextServiceDue(None, Status.OVERDUE, "", "").is_due is True
        assert NextServiceDue(None, Status.DUE_SOON, "", "").is_due is True
        assert NextServiceDue(None, Status.DUE_MONTH, "", "").is_due is False
        assert NextServiceDue(None, Status.UNKNOWN, "", "").is_due is False
