"""Tests for status canonicalization."""

import pytest

from pmboard.core.status import (
    CanonicalStatus,
    MeetingStatus,
    canonicalize,
    is_known_label,
    normalize_label,
)


class TestNormalizeLabel:
    def test_strips_case_and_separators(self):
        assert normalize_label("  On-Hold_by Client ") == "onholdbyclient"

    def test_collapses_internal_whitespace(self):
        assert normalize_label("In\tProgress") == "inprogress"


class TestCanonicalize:
    @pytest.mark.parametrize("label", ["To-Do", "to do", "TODO", " todo ", "to_do", "Not Started"])
    def test_todo_variants(self, label):
        assert canonicalize(label) is CanonicalStatus.NOT_STARTED

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("In Progress", CanonicalStatus.IN_PROGRESS),
            ("in-progress", CanonicalStatus.IN_PROGRESS),
            ("Done", CanonicalStatus.COMPLETED),
            ("completed", CanonicalStatus.COMPLETED),
            ("Complete", CanonicalStatus.COMPLETED),
            ("STUCK", CanonicalStatus.STUCK),
            ("Waiting For", CanonicalStatus.WAITING_FOR_CLIENT),
            ("waiting", CanonicalStatus.WAITING_FOR_CLIENT),
            ("Hold by Client", CanonicalStatus.ON_HOLD_BY_CLIENT),
            ("on hold by client", CanonicalStatus.ON_HOLD_BY_CLIENT),
            ("hold", CanonicalStatus.ON_HOLD_BY_CLIENT),
            ("Need Help", CanonicalStatus.NEED_HELP),
            ("Canceled", CanonicalStatus.CANCELED),
            ("cancelled", CanonicalStatus.CANCELED),
        ],
    )
    def test_synonyms(self, label, expected):
        assert canonicalize(label) is expected

    def test_unknown_falls_back_to_not_started(self):
        assert canonicalize("Blocked by legal") is CanonicalStatus.NOT_STARTED
        assert canonicalize("") is CanonicalStatus.NOT_STARTED

    def test_non_string_falls_back(self):
        assert canonicalize(None) is CanonicalStatus.NOT_STARTED
        assert canonicalize(42) is CanonicalStatus.NOT_STARTED

    @pytest.mark.parametrize("status", list(CanonicalStatus))
    def test_idempotent(self, status):
        assert canonicalize(canonicalize(status)) is status
        assert canonicalize(status.value) is status
        assert canonicalize(status.name) is status

    def test_idempotent_on_arbitrary_labels(self):
        for label in ["Done", "weird", "Hold", " to-do "]:
            once = canonicalize(label)
            assert canonicalize(once) is once

    def test_enum_style_names(self):
        assert canonicalize("WaitingForClient") is CanonicalStatus.WAITING_FOR_CLIENT
        assert canonicalize("OnHoldByClient") is CanonicalStatus.ON_HOLD_BY_CLIENT


class TestIsKnownLabel:
    def test_known(self):
        assert is_known_label("in progress") is True

    def test_unknown(self):
        assert is_known_label("Review Pending") is False


class TestMeetingStatus:
    def test_parse_case_insensitive(self):
        assert MeetingStatus.parse("completed") is MeetingStatus.COMPLETED
        assert MeetingStatus.parse("IN PROGRESS") is MeetingStatus.IN_PROGRESS

    def test_parse_canceled_spelling(self):
        assert MeetingStatus.parse("Canceled") is MeetingStatus.CANCELLED

    def test_parse_unknown_is_scheduled(self):
        assert MeetingStatus.parse("postponed") is MeetingStatus.SCHEDULED
        assert MeetingStatus.parse(None) is MeetingStatus.SCHEDULED

    def test_meeting_and_task_statuses_are_distinct(self):
        assert MeetingStatus.IN_PROGRESS != CanonicalStatus.IN_PROGRESS
