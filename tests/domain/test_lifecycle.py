"""Tests for the form submission lifecycle."""

from agecalc.domain.lifecycle import (
    FORM_TRANSITIONS,
    FormStatus,
    is_valid_transition,
    status_after_submit,
)


class TestFormStatus:
    def test_members(self) -> None:
        assert {s.value for s in FormStatus} == {"editing", "submitted", "submit_failed"}

    def test_every_status_can_reset(self) -> None:
        for status in FormStatus:
            assert is_valid_transition(status, "editing", FORM_TRANSITIONS)

    def test_every_status_can_resubmit(self) -> None:
        for status in FormStatus:
            assert is_valid_transition(status, "submitted", FORM_TRANSITIONS)
            assert is_valid_transition(status, "submit_failed", FORM_TRANSITIONS)

    def test_unknown_status(self) -> None:
        assert not is_valid_transition("archived", "editing", FORM_TRANSITIONS)
        assert not is_valid_transition("editing", "archived", FORM_TRANSITIONS)


class TestStatusAfterSubmit:
    def test_clean_submit(self) -> None:
        assert status_after_submit(has_root_error=False, has_field_errors=False) == "submitted"

    def test_root_error_fails(self) -> None:
        assert status_after_submit(has_root_error=True, has_field_errors=False) == "submit_failed"

    def test_field_errors_fail(self) -> None:
        assert status_after_submit(has_root_error=False, has_field_errors=True) == "submit_failed"
