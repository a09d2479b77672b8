"""
Tests for the contract status state machine (``contract_kernel.domain.status``).

Covers status derivation from the date window, terminal-status stickiness,
human-readable descriptions and parsing of comma-separated status filters.
"""

from datetime import date, timedelta

import pytest
from hypothesis import given
from hypothesis import strategies as st

from contract_kernel.domain.status import (
    CANCELLABLE_STATUSES,
    TERMINAL_STATUSES,
    ContractStatus,
    derive_status,
    parse_status_list,
)

TODAY = date(2024, 6, 1)


# =========================================================================
# ContractStatus enum
# =========================================================================


class TestContractStatus:

    def test_four_statuses_defined(self):
        assert {s.value for s in ContractStatus} == {
            "PENDING",
            "IN_PROGRESS",
            "CANCELLED",
            "COMPLETED",
        }

    def test_str_enum_identity(self):
        assert ContractStatus.IN_PROGRESS == "IN_PROGRESS"

    @pytest.mark.parametrize(
        "status,text",
        [
            (ContractStatus.PENDING, "Scheduled"),
            (ContractStatus.IN_PROGRESS, "Running"),
            (ContractStatus.CANCELLED, "Cancelled"),
            (ContractStatus.COMPLETED, "Finished"),
        ],
    )
    def test_description(self, status, text):
        assert status.description == text

    def test_terminal_statuses(self):
        assert TERMINAL_STATUSES == {ContractStatus.CANCELLED, ContractStatus.COMPLETED}
        assert ContractStatus.COMPLETED.is_terminal
        assert not ContractStatus.PENDING.is_terminal

    def test_completed_is_not_cancellable(self):
        assert ContractStatus.COMPLETED not in CANCELLABLE_STATUSES
        assert ContractStatus.CANCELLED in CANCELLABLE_STATUSES


# =========================================================================
# derive_status
# =========================================================================


class TestDeriveStatus:

    def test_future_start_is_pending(self):
        result = derive_status(
            ContractStatus.PENDING, TODAY + timedelta(days=1), TODAY + timedelta(days=40), TODAY
        )
        assert result is ContractStatus.PENDING

    def test_start_today_is_in_progress(self):
        result = derive_status(
            ContractStatus.PENDING, TODAY, TODAY + timedelta(days=28), TODAY
        )
        assert result is ContractStatus.IN_PROGRESS

    def test_end_today_is_still_in_progress(self):
        result = derive_status(
            ContractStatus.IN_PROGRESS, TODAY - timedelta(days=28), TODAY, TODAY
        )
        assert result is ContractStatus.IN_PROGRESS

    def test_day_after_end_is_completed(self):
        result = derive_status(
            ContractStatus.IN_PROGRESS,
            TODAY - timedelta(days=29),
            TODAY - timedelta(days=1),
            TODAY,
        )
        assert result is ContractStatus.COMPLETED

    def test_pending_can_jump_straight_to_completed(self):
        """A contract never read during its run completes directly."""
        result = derive_status(
            ContractStatus.PENDING,
            TODAY - timedelta(days=60),
            TODAY - timedelta(days=30),
            TODAY,
        )
        assert result is ContractStatus.COMPLETED

    def test_cancelled_is_sticky(self):
        result = derive_status(
            ContractStatus.CANCELLED, TODAY - timedelta(days=5), TODAY + timedelta(days=30), TODAY
        )
        assert result is ContractStatus.CANCELLED

    def test_completed_is_sticky_even_if_window_is_current(self):
        result = derive_status(
            ContractStatus.COMPLETED, TODAY - timedelta(days=5), TODAY + timedelta(days=30), TODAY
        )
        assert result is ContractStatus.COMPLETED

    @given(
        status=st.sampled_from(list(ContractStatus)),
        start=st.dates(min_value=date(2020, 1, 1), max_value=date(2030, 12, 31)),
        length=st.integers(min_value=0, max_value=400),
        today=st.dates(min_value=date(2020, 1, 1), max_value=date(2030, 12, 31)),
    )
    def test_derivation_is_idempotent(self, status, start, length, today):
        end = start + timedelta(days=length)
        once = derive_status(status, start, end, today)
        assert derive_status(once, start, end, today) is once

    @given(
        status=st.sampled_from([ContractStatus.PENDING, ContractStatus.IN_PROGRESS]),
        start=st.dates(min_value=date(2020, 1, 1), max_value=date(2030, 12, 31)),
        length=st.integers(min_value=0, max_value=400),
        today=st.dates(min_value=date(2020, 1, 1), max_value=date(2030, 12, 31)),
    )
    def test_non_terminal_result_matches_window(self, status, start, length, today):
        end = start + timedelta(days=length)
        result = derive_status(status, start, end, today)
        if today < start:
            assert result is ContractStatus.PENDING
        elif today > end:
            assert result is ContractStatus.COMPLETED
        else:
            assert result is ContractStatus.IN_PROGRESS

    @given(
        status=st.sampled_from(sorted(TERMINAL_STATUSES)),
        start=st.dates(min_value=date(2020, 1, 1), max_value=date(2030, 12, 31)),
        today=st.dates(min_value=date(2020, 1, 1), max_value=date(2030, 12, 31)),
    )
    def test_terminal_never_changes(self, status, start, today):
        assert derive_status(status, start, start + timedelta(days=30), today) is status


# =========================================================================
# Parsing
# =========================================================================


class TestParseStatus:

    def test_parse_single(self):
        assert ContractStatus.parse("COMPLETED") is ContractStatus.COMPLETED

    def test_parse_strips_whitespace(self):
        assert ContractStatus.parse("  PENDING ") is ContractStatus.PENDING

    def test_parse_is_case_sensitive(self):
        with pytest.raises(ValueError, match="Unknown contract status"):
            ContractStatus.parse("pending")

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_missing_list_means_no_filter(self, raw):
        assert parse_status_list(raw) is None

    def test_list_with_spaces_and_empty_tokens(self):
        assert parse_status_list("PENDING, IN_PROGRESS,,") == [
            ContractStatus.PENDING,
            ContractStatus.IN_PROGRESS,
        ]

    def test_one_bad_token_rejects_whole_list(self):
        with pytest.raises(ValueError):
            parse_status_list("PENDING,FOO")
