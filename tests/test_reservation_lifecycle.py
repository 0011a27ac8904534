"""
Unit tests for reservation status rules.
"""
import pytest

from spice_haven.services.reservation_lifecycle import (
    InvalidStatusTransitionError,
    can_transition,
    check_transition,
)


@pytest.mark.parametrize("current,requested", [
    ("pending", "confirmed"),
    ("pending", "cancelled"),
    ("confirmed", "cancelled"),
])
def test_allowed_transitions(current, requested):
    assert can_transition(current, requested) is True


@pytest.mark.parametrize("current,requested", [
    ("confirmed", "pending"),
    ("cancelled", "pending"),
    ("cancelled", "confirmed"),
])
def test_forbidden_transitions(current, requested):
    assert can_transition(current, requested) is False


@pytest.mark.parametrize("status", ["pending", "confirmed", "cancelled"])
def test_same_status_is_a_no_op(status):
    assert can_transition(status, status) is True


def test_unknown_status_rejected():
    assert can_transition("pending", "seated") is False


def test_check_transition_raises_with_details():
    with pytest.raises(InvalidStatusTransitionError) as exc_info:
        check_transition("cancelled", "confirmed")

    assert exc_info.value.current == "cancelled"
    assert exc_info.value.requested == "confirmed"
    assert "cancelled to confirmed" in str(exc_info.value)
