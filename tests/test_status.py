#!/usr/bin/env python3
"""Tests for Status enum."""

from maintenance import Status


class TestStatus:
    """Tests for Status enum ordering and labels."""

    def test_urgency_ordering(self):
        """Lower value = more urgent."""
        assert Status.OVERDUE.value < Status.DUE_SOON.value
        assert Status.DUE_SOON.value < Status.MISSING_COMP_TIME.value
        assert Status.MISSING_COMP_TIME.value < Status.OK.value
        assert Status.OK.value < Status.CHECK_DUE_INFO.value

    def test_labels(self):
        assert Status.OVERDUE.label == "Overdue"
        assert Status.DUE_SOON.label == "Due Soon"
        assert Status.MISSING_COMP_TIME.label == "Missing Comp. Time"
        assert Status.OK.label == "OK"
        assert Status.CHECK_DUE_INFO.label == "Check Due Info"
